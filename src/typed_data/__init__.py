"""
EIP-712 typed data encoding and hashing.
"""

from .eip712 import (
    as_array,
    encode_data,
    encode_type,
    encode_value,
    get_dependencies,
    get_message,
    get_struct_hash,
    get_type_hash,
)
from .errors import (
    ArrayLengthMismatch,
    MissingFieldData,
    NotAnArray,
    NotAStruct,
    SchemaInvalid,
    TypedDataError,
    UnknownType,
)
from .options import Options, get_options
from .types import is_valid_type
from .utils.validation import validate_typed_data

__version__ = "0.1.0"

__all__ = [
    "ArrayLengthMismatch",
    "MissingFieldData",
    "NotAStruct",
    "NotAnArray",
    "Options",
    "SchemaInvalid",
    "TypedDataError",
    "UnknownType",
    "as_array",
    "encode_data",
    "encode_type",
    "encode_value",
    "get_dependencies",
    "get_message",
    "get_options",
    "get_struct_hash",
    "get_type_hash",
    "is_valid_type",
    "validate_typed_data",
]
