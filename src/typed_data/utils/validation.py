"""Structural validation of EIP-712 typed data documents."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError
from pydantic.alias_generators import to_camel

from ..errors import SchemaInvalid
from ..options import Options, OptionsLike, get_options
from ..types import is_valid_type

logger = logging.getLogger(__name__)

# Fields allowed in the domain struct when the domain is verified, with their required types.
EIP712_DOMAIN_FIELDS = {
    "name": "string",
    "version": "string",
    "chainId": "uint256",
    "verifyingContract": "address",
    "salt": "bytes32",
}


class EIP712Type(BaseModel):
    """A single field of a struct type."""

    name: StrictStr
    type: StrictStr


class TypedDataDocument(BaseModel):
    """The complete typed data: struct types, domain, primary type and message."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    types: Dict[str, List[EIP712Type]]
    domain: Dict[str, Any]
    primary_type: StrictStr
    message: Dict[str, Any]


def _find_problem(document: Any, options: Options) -> Optional[str]:
    try:
        parsed = TypedDataDocument.model_validate(document)
    except ValidationError as exc:
        return str(exc)

    if options.domain not in parsed.types:
        return f"types must contain the domain type '{options.domain}'"

    for type_name, fields in parsed.types.items():
        for field in fields:
            if not is_valid_type(parsed.types, field.type):
                return f"invalid type '{field.type}' for field '{type_name}.{field.name}'"

    if options.verify_domain:
        for field in parsed.types[options.domain]:
            expected = EIP712_DOMAIN_FIELDS.get(field.name)
            if expected is None:
                return f"unsupported domain field '{field.name}'"
            if field.type != expected:
                return f"domain field '{field.name}' must be of type '{expected}'"
        unknown = sorted(set(parsed.domain) - set(EIP712_DOMAIN_FIELDS))
        if unknown:
            return f"unsupported domain values: {', '.join(unknown)}"

    return None


def validate_typed_data(document: Any, options: OptionsLike = None) -> bool:
    """
    Check that `document` matches the EIP-712 JSON schema.

    Args:
        document: Typed data document to check
        options: Domain type name and whether the domain shape is verified

    Returns:
        True if the document is valid
    """
    problem = _find_problem(document, get_options(options))
    if problem:
        logger.debug("Rejected typed data: %s", problem)
        return False
    return True


def assert_typed_data(document: Any, options: OptionsLike = None) -> None:
    """Raise `SchemaInvalid` with the reason if `document` is not valid typed data."""
    problem = _find_problem(document, get_options(options))
    if problem:
        raise SchemaInvalid(problem)
