"""ABI encoding of the (type, value) tuples produced by the struct encoder."""

from __future__ import annotations

from typing import Any, List, Sequence

from eth_abi import encode as encode_abi
from eth_utils import decode_hex, to_normalized_address

from ..types import parse_bytes_length, parse_integer_width


def encode(types: Sequence[str], values: Sequence[Any]) -> bytes:
    """
    ABI encode the values with the provided types.

    JSON documents commonly carry numbers as decimal or hex strings and byte values as hex strings, so those are
    converted to the native types expected by eth-abi first. Everything else is handed over as-is, and eth-abi
    performs its own range and type checks.
    """
    if len(types) != len(values):
        raise ValueError(f"Got {len(types)} types for {len(values)} values")
    normalized: List[Any] = [normalize_value(abi_type, value) for abi_type, value in zip(types, values)]
    return encode_abi(list(types), normalized)


def normalize_value(abi_type: str, value: Any) -> Any:
    if not isinstance(value, str):
        return value

    if abi_type == "address":
        return to_normalized_address(value)

    if parse_bytes_length(abi_type):
        return decode_hex(value)

    if parse_integer_width(abi_type):
        if value.lower().startswith(("0x", "-0x")):
            return int(value, 16)
        return int(value)

    return value
