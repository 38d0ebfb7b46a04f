"""Command-line utilities for inspecting the EIP-712 encoding of a typed data document."""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import click
from dotenv import load_dotenv

from .eip712 import as_array, encode_data, encode_type, get_message, get_struct_hash, get_type_hash
from .errors import TypedDataError
from .options import Options
from .utils.config import load_options
from .utils.loader import load_typed_data


def init_logger(verbose: bool) -> logging.Logger:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("typed_data")


def _context(ctx: click.Context, path: Optional[str]) -> tuple[Dict[str, Any], Options]:
    try:
        document = load_typed_data(path)
    except (OSError, RuntimeError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    return document, ctx.obj["options"]


def _hex(value: bytes) -> str:
    return "0x" + value.hex()


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return _hex(bytes(value))
    raise TypeError(f"Cannot serialise {type(value).__name__}")


@click.group()
@click.option("--domain-type", default=None, help="Name of the domain struct type (default: EIP712Domain).")
@click.option("--verify-domain/--no-verify-domain", default=None, help="Check the domain against the EIP-712 shape.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, domain_type: Optional[str], verify_domain: Optional[bool], verbose: bool) -> None:
    """Encode and hash EIP-712 typed data documents."""
    load_dotenv()
    init_logger(verbose)

    try:
        options = load_options()
    except RuntimeError as exc:
        raise click.ClickException(str(exc)) from exc

    overrides: Dict[str, Any] = {}
    if domain_type is not None:
        overrides["domain"] = domain_type
    if verify_domain is not None:
        overrides["verify_domain"] = verify_domain

    ctx.ensure_object(dict)
    ctx.obj["options"] = options.model_copy(update=overrides)


@cli.command("encode-type")
@click.argument("type_name")
@click.argument("path", required=False)
@click.pass_context
def encode_type_command(ctx: click.Context, type_name: str, path: Optional[str]) -> None:
    """Print the encoded type string of TYPE_NAME."""
    document, options = _context(ctx, path)
    with _errors():
        click.echo(encode_type(document, type_name, options))


@cli.command("type-hash")
@click.argument("type_name")
@click.argument("path", required=False)
@click.pass_context
def type_hash_command(ctx: click.Context, type_name: str, path: Optional[str]) -> None:
    """Print the type hash of TYPE_NAME."""
    document, options = _context(ctx, path)
    with _errors():
        click.echo(_hex(get_type_hash(document, type_name, options)))


@cli.command("struct-hash")
@click.argument("path", required=False)
@click.option("--domain", "use_domain", is_flag=True, help="Hash the domain instead of the message.")
@click.option("--raw", is_flag=True, help="Print the ABI encoded struct instead of its hash.")
@click.pass_context
def struct_hash_command(ctx: click.Context, path: Optional[str], use_domain: bool, raw: bool) -> None:
    """Print the struct hash of the message (or domain)."""
    document, options = _context(ctx, path)
    if use_domain:
        type_name, data = options.domain, document.get("domain")
    else:
        type_name, data = document.get("primaryType"), document.get("message")

    with _errors():
        encoder = encode_data if raw else get_struct_hash
        click.echo(_hex(encoder(document, type_name, data, options)))


@cli.command("message")
@click.argument("path", required=False)
@click.option("--hash/--no-hash", "hash_message", default=True, help="Print the Keccak-256 hash of the message.")
@click.pass_context
def message_command(ctx: click.Context, path: Optional[str], hash_message: bool) -> None:
    """Print the EIP-191 message to sign."""
    document, options = _context(ctx, path)
    with _errors():
        click.echo(_hex(get_message(document, hash=hash_message, options=options)))


@cli.command("as-array")
@click.argument("path", required=False)
@click.pass_context
def as_array_command(ctx: click.Context, path: Optional[str]) -> None:
    """Print the message as nested JSON array, in struct field order."""
    document, options = _context(ctx, path)
    with _errors():
        click.echo(json.dumps(as_array(document, options=options), default=_json_default))


@contextmanager
def _errors() -> Iterator[None]:
    """Report typed data errors as click errors."""
    try:
        yield
    except TypedDataError as exc:
        raise click.ClickException(str(exc)) from exc


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
