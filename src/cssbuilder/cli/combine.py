"""CLI command: cssbuilder combine -- join two selectors with a combinator."""

from __future__ import annotations

import sys

import click

from cssbuilder.builder import combine as combine_selectors
from cssbuilder.errors import SelectorError
from cssbuilder.parser import parse_selector


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Combine LEFT and RIGHT selectors with COMBINATOR (' ', '+', '~', '>')."""
    try:
        combined = combine_selectors(
            parse_selector(left), combinator, parse_selector(right)
        )
    except SelectorError as exc:
        click.echo(f"Invalid selector: {exc}", err=True)
        sys.exit(1)

    click.echo(combined.stringify())
