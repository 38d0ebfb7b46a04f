"""Exceptions raised while validating and encoding typed data."""

from __future__ import annotations

from typing import Optional


class TypedDataError(ValueError):
    """Base class for all typed data errors."""


class SchemaInvalid(TypedDataError):
    """The typed data document does not match the EIP-712 JSON schema."""

    def __init__(self, reason: Optional[str] = None):
        message = "Typed data does not match JSON schema"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.reason = reason


class UnknownType(TypedDataError):
    def __init__(self, type_name: str):
        super().__init__(f"Type '{type_name}' does not exist")
        self.type_name = type_name


class MissingFieldData(TypedDataError):
    def __init__(self, field: str):
        super().__init__(f"Cannot encode data: missing data for '{field}'")
        self.field = field


class NotAnArray(TypedDataError):
    def __init__(self, type_name: str):
        super().__init__(f"Cannot encode data: value for '{type_name}' is not of array type")
        self.type_name = type_name


class ArrayLengthMismatch(TypedDataError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Cannot encode data: expected length of {expected}, but got {actual}")
        self.expected = expected
        self.actual = actual


class NotAStruct(TypedDataError):
    def __init__(self, type_name: str):
        super().__init__(f"Cannot encode data: value for '{type_name}' is not an object")
        self.type_name = type_name
