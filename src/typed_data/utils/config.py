"""Environment helpers for typed data encoding options."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from ..options import DEFAULT_DOMAIN_TYPE, Options

DOMAIN_TYPE_ENV = "EIP712_DOMAIN_TYPE"
VERIFY_DOMAIN_ENV = "EIP712_VERIFY_DOMAIN"


def load_options(env: Optional[Mapping[str, str]] = None) -> Options:
    """Return encoding options from environment variables, falling back to the defaults."""
    source = os.environ if env is None else env

    domain = source.get(DOMAIN_TYPE_ENV) or DEFAULT_DOMAIN_TYPE
    verify_domain = _parse_flag(source.get(VERIFY_DOMAIN_ENV), default=True)

    return Options(domain=domain, verify_domain=verify_domain)


def _parse_flag(value: Optional[str], default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    raise RuntimeError(f"{VERIFY_DOMAIN_ENV} must be true or false, got {value!r}")
