"""
EIP-712 Typed Data Encoding

Implements the encoding and hashing rules for typed structured data, producing the message that is signed by
wallets and recomputed by verifying contracts.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Set, Tuple

from .errors import ArrayLengthMismatch, MissingFieldData, NotAnArray, NotAStruct, UnknownType
from .options import OptionsLike, get_options
from .types import TypedData, get_base_type, parse_array_type
from .utils.abi import encode
from .utils.buffer import keccak256, to_bytes
from .utils.validation import assert_typed_data

logger = logging.getLogger(__name__)

EIP_191_PREFIX = bytes.fromhex("1901")


def get_dependencies(typed_data: TypedData, type_name: str, options: OptionsLike = None) -> List[str]:
    """
    Get the dependencies of a struct type. A type that is referenced more than once is only included once.

    Args:
        typed_data: Typed data document
        type_name: Struct type to resolve, optionally with an array suffix
        options: Encoding options

    Returns:
        The struct type followed by every struct type it references, in order of discovery

    Raises:
        SchemaInvalid: If the document does not match the EIP-712 JSON schema
    """
    # Most other functions go through here, so the document is validated once at this point
    assert_typed_data(typed_data, options)

    types = typed_data["types"]
    dependencies: List[str] = []
    seen: Set[str] = set()
    pending = [type_name]

    while pending:
        name = get_base_type(pending.pop())
        if name in seen or name not in types:
            continue
        seen.add(name)
        dependencies.append(name)
        pending.extend(field["type"] for field in reversed(types[name]))

    return dependencies


def encode_type(typed_data: TypedData, type_name: str, options: OptionsLike = None) -> str:
    """Encode a type to a string. The primary type comes first, all dependant types follow alphabetically sorted."""
    dependencies = get_dependencies(typed_data, type_name, options)
    if not dependencies:
        raise UnknownType(type_name)

    primary, *rest = dependencies
    types = typed_data["types"]
    return "".join(_encode_struct_type(name, types[name]) for name in [primary, *sorted(rest)])


def _encode_struct_type(name: str, fields: List[Mapping[str, str]]) -> str:
    members = ",".join(f"{field['type']} {field['name']}" for field in fields)
    return f"{name}({members})"


def get_type_hash(typed_data: TypedData, type_name: str, options: OptionsLike = None) -> bytes:
    """Get the Keccak-256 hash of the encoded type."""
    return keccak256(encode_type(typed_data, type_name, options), "utf8")


def encode_value(
    typed_data: TypedData,
    field_type: str,
    value: Any,
    options: OptionsLike = None,
) -> Tuple[str, Any]:
    """
    Encode a single value to an ABI type and an ABI serialisable value.

    Arrays, structs, strings and dynamic bytes are hashed to `bytes32`. Any other value is returned as-is, with
    the field type as its ABI type.

    Raises:
        NotAnArray: If an array type is given a value that is not a list or tuple
        ArrayLengthMismatch: If a fixed length array type is given a value of a different length
    """
    array = parse_array_type(field_type)
    if array is not None:
        if not isinstance(value, (list, tuple)):
            raise NotAnArray(field_type)
        if not array.is_dynamic and len(value) != array.length:
            raise ArrayLengthMismatch(array.length, len(value))

        encoded = [encode_value(typed_data, array.element, item, options) for item in value]
        abi_types = [abi_type for abi_type, _ in encoded]
        abi_values = [abi_value for _, abi_value in encoded]
        return "bytes32", keccak256(encode(abi_types, abi_values))

    if field_type in typed_data["types"]:
        return "bytes32", get_struct_hash(typed_data, field_type, value, options)

    if field_type == "string":
        return "bytes32", keccak256(value, "utf8")

    if field_type == "bytes":
        return "bytes32", keccak256(to_bytes(value))

    return field_type, value


def encode_data(
    typed_data: TypedData,
    type_name: str,
    data: Mapping[str, Any],
    options: OptionsLike = None,
) -> bytes:
    """
    ABI encode struct data, prefixed with the type hash. All dependant types are encoded recursively.

    Args:
        typed_data: Typed data document
        type_name: Struct type of `data`
        data: Mapping with a value for every field of the struct type
        options: Encoding options

    Returns:
        ABI encoded bytes

    Raises:
        MissingFieldData: If a field has no value
    """
    abi_types = ["bytes32"]
    abi_values: List[Any] = [get_type_hash(typed_data, type_name, options)]

    fields = typed_data["types"].get(type_name)
    if fields is None:
        raise UnknownType(type_name)
    if not isinstance(data, Mapping):
        raise NotAStruct(type_name)

    for field in fields:
        value = data.get(field["name"])
        if value is None:
            raise MissingFieldData(field["name"])

        abi_type, abi_value = encode_value(typed_data, field["type"], value, options)
        abi_types.append(abi_type)
        abi_values.append(abi_value)

    return encode(abi_types, abi_values)


def get_struct_hash(
    typed_data: TypedData,
    type_name: str,
    data: Mapping[str, Any],
    options: OptionsLike = None,
) -> bytes:
    """Get the Keccak-256 hash of the encoded struct data."""
    return keccak256(encode_data(typed_data, type_name, data, options))


def get_message(typed_data: TypedData, hash: bool = False, options: OptionsLike = None) -> bytes:
    """
    Get the EIP-191 encoded message to sign from the typed data.

    Args:
        typed_data: Typed data document
        hash: Return the Keccak-256 hash of the message instead of the message itself
        options: Encoding options

    Returns:
        The 66 byte message, or its 32 byte hash
    """
    resolved = get_options(options)
    assert_typed_data(typed_data, resolved)
    logger.debug("Encoding %s message with domain type %s", typed_data["primaryType"], resolved.domain)

    message = b"".join([
        EIP_191_PREFIX,
        get_struct_hash(typed_data, resolved.domain, typed_data["domain"], resolved),
        get_struct_hash(typed_data, typed_data["primaryType"], typed_data["message"], resolved),
    ])

    if hash:
        return keccak256(message)
    return message


def as_array(
    typed_data: TypedData,
    type_name: Optional[str] = None,
    data: Optional[Mapping[str, Any]] = None,
    options: OptionsLike = None,
) -> List[Any]:
    """
    Get the typed data as (nested) list, in the order of the struct fields. This can be used for encoding the
    typed data with a contract ABI.

    Args:
        typed_data: Typed data document
        type_name: Struct type to flatten, defaults to the primary type
        data: Struct data to flatten, defaults to the message

    Returns:
        Field values, with nested structs as nested lists

    Raises:
        SchemaInvalid: If the document does not match the EIP-712 JSON schema
        UnknownType: If the struct type does not exist
        MissingFieldData: If a nested struct has no value
    """
    assert_typed_data(typed_data, options)

    if type_name is None:
        type_name = typed_data["primaryType"]
    if data is None:
        data = typed_data["message"]

    types = typed_data["types"]
    if type_name not in types:
        raise UnknownType(type_name)
    if not isinstance(data, Mapping):
        raise NotAStruct(type_name)

    values: List[Any] = []
    for field in types[type_name]:
        value = data.get(field["name"])
        if field["type"] in types:
            if not value:
                raise MissingFieldData(field["name"])
            values.append(as_array(typed_data, field["type"], value, options))
        else:
            values.append(value)

    return values
