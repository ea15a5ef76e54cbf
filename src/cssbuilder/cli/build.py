"""CLI command: cssbuilder build -- assemble a selector part by part."""

from __future__ import annotations

import sys

import click

from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import CSSBuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.model import PartKind
from cssbuilder.serialization import to_json

_ALIASES = {"attr": PartKind.ATTRIBUTE}


def _split_part(raw: str) -> tuple[PartKind, str]:
    kind, sep, value = raw.partition("=")
    if not sep:
        raise click.BadParameter(f"expected KIND=VALUE, got {raw!r}")
    try:
        return _ALIASES.get(kind) or PartKind(kind), value
    except ValueError:
        choices = ", ".join(k.value for k in PartKind)
        raise click.BadParameter(
            f"unknown part kind {kind!r} (choose from {choices})"
        ) from None


@click.command()
@click.argument("parts", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the fragments as JSON")
@click.pass_obj
def build(config: CSSBuilderConfig, parts: tuple[str, ...], as_json: bool) -> None:
    """Build a selector from KIND=VALUE parts, applied in the order given.

    Kinds: element, id, class, attr, pseudo-class, pseudo-element.
    Exits with code 1 if the parts break the ordering or duplicate rules.
    """
    builder = SelectorBuilder()
    try:
        for raw in parts:
            kind, value = _split_part(raw)
            builder = builder.append(kind, value)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        payload = {"selector": builder.stringify(), **builder.to_dict()}
        click.echo(to_json(payload, indent=config.json_indent))
    else:
        click.echo(builder.stringify())
