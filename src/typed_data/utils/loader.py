"""Utilities for loading typed data documents from JSON files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..errors import SchemaInvalid

TYPED_DATA_PATH_ENV = "TYPED_DATA_PATH"


def parse_typed_data(text: str) -> Dict[str, Any]:
    """Parse a typed data document from a JSON string."""
    data = json.loads(text)
    if not isinstance(data, dict):
        raise SchemaInvalid(f"expected a JSON object, got {type(data).__name__}")
    return data


def load_typed_data(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load a typed data document from `path`, or from the file named by TYPED_DATA_PATH."""
    target = path or os.getenv(TYPED_DATA_PATH_ENV)
    if not target:
        raise RuntimeError(f"No typed data path provided via argument or {TYPED_DATA_PATH_ENV}")
    document_path = Path(target).expanduser()
    if not document_path.exists():
        raise FileNotFoundError(f"Typed data file not found: {document_path}")
    with document_path.open("r", encoding="utf-8") as fh:
        return parse_typed_data(fh.read())
