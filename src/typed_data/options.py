"""Options accepted by the typed data entry points."""

from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

DEFAULT_DOMAIN_TYPE = "EIP712Domain"


class Options(BaseModel):
    """
    Encoding options.

    Attributes:
        domain: Name of the struct type used for domain separation
        verify_domain: Whether the domain must follow the EIP-712 domain shape.
            When disabled, the domain struct can contain arbitrary fields.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, extra="forbid")

    domain: StrictStr = DEFAULT_DOMAIN_TYPE
    verify_domain: StrictBool = True


OptionsLike = Union[Options, Mapping[str, Any], None]


def get_options(options: OptionsLike = None) -> Options:
    """Return an `Options` instance with defaults filled in for anything not provided."""
    if isinstance(options, Options):
        return options
    return Options.model_validate(dict(options or {}))
