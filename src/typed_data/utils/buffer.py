"""Hashing and byte conversion helpers."""

from __future__ import annotations

from typing import Optional, Union

from eth_utils import decode_hex, keccak


def keccak256(data: Union[str, bytes, bytearray], encoding: Optional[str] = None) -> bytes:
    """
    Hash data with Keccak-256.

    Args:
        data: Bytes to hash, or a string when `encoding` is given
        encoding: Text encoding of `data` (e.g. "utf8"); without it, `data` is expected to be bytes

    Returns:
        32 byte hash
    """
    if encoding is not None:
        return keccak(primitive=to_bytes(data, encoding))
    return keccak(primitive=bytes(data))


def to_bytes(data: Union[str, bytes, bytearray], encoding: Optional[str] = None) -> bytes:
    """
    Get a string as bytes. Without an encoding, the string is decoded as hexadecimal, with an optional 0x prefix.
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if encoding is None:
        return decode_hex(data)
    return data.encode(encoding)
