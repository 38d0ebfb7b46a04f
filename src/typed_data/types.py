"""
EIP-712 type definitions and type name parsing.

Supported field types:
- Atomic types: bytes1..32, uint8..256, int8..256, bool, address
- Dynamic types: bytes, string
- Reference types: array types (e.g. uint8[], SomeStruct[3]) and struct types (e.g. SomeStruct)

The `uint` and `int` aliases from Solidity are not part of EIP-712, and neither are fixed point numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

STATIC_TYPES = ("address", "bool", "bytes", "string")

FieldDescriptor = Dict[str, str]
Types = Mapping[str, List[FieldDescriptor]]
TypedData = Mapping[str, Any]


@dataclass(frozen=True)
class ArrayType:
    """An array type name split into its element type and optional fixed length."""

    element: str
    length: Optional[int] = None

    @property
    def is_dynamic(self) -> bool:
        return self.length is None


def parse_array_type(type_name: str) -> Optional[ArrayType]:
    """
    Parse the outermost array suffix of a type name.

    `uint8[2][3]` is an array of three `uint8[2]` values, so the last suffix is the one that is split off.

    Returns:
        The parsed array type, or None if the type name has no (well-formed) array suffix
    """
    if not type_name.endswith("]"):
        return None
    element, bracket, length = type_name[:-1].rpartition("[")
    if not bracket:
        return None
    if length and not (length.isascii() and length.isdigit()):
        return None
    return ArrayType(element=element, length=int(length) if length else None)


def get_base_type(type_name: str) -> str:
    """Return the leading identifier of a type name, e.g. `Person` for `Person[2][]`."""
    end = 0
    while end < len(type_name) and (type_name[end].isalnum() or type_name[end] == "_"):
        end += 1
    return type_name[:end]


def _parse_width(type_name: str, prefix: str, max_digits: int) -> Optional[int]:
    suffix = type_name[len(prefix):]
    if not type_name.startswith(prefix) or len(suffix) > max_digits:
        return None
    if not suffix:
        return 0
    if not (suffix.isascii() and suffix.isdigit()):
        return None
    return int(suffix)


def parse_bytes_length(type_name: str) -> Optional[int]:
    """Return N for a `bytesN` type name, or None if the name is not of that form."""
    length = _parse_width(type_name, "bytes", 2)
    if not length:
        return None
    return length


def parse_integer_width(type_name: str) -> Optional[int]:
    """Return N for an `intN` or `uintN` type name (0 for a bare `int` / `uint`), or None otherwise."""
    prefix = "uint" if type_name.startswith("uint") else "int"
    return _parse_width(type_name, prefix, 3)


def is_valid_type(types: Types, type_name: str) -> bool:
    """
    Check if a type name is valid for the given struct types.

    Args:
        types: Struct type definitions of a typed data document
        type_name: Type name to check

    Returns:
        True if the type is an atomic, dynamic, array or declared struct type
    """
    if type_name in STATIC_TYPES:
        return True

    if type_name in types:
        return True

    array = parse_array_type(type_name)
    if array is not None:
        return is_valid_type(types, array.element)

    length = parse_bytes_length(type_name)
    if length is not None:
        return 1 <= length <= 32

    width = parse_integer_width(type_name)
    if width is not None:
        return 8 <= width <= 256 and width % 8 == 0

    return False
