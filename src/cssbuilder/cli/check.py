"""CLI command: cssbuilder check -- parse and validate a selector."""

from __future__ import annotations

import sys

import click

from cssbuilder.errors import SelectorError
from cssbuilder.parser import parse_selector


@click.command()
@click.argument("selector")
def check(selector: str) -> None:
    """Parse and validate a CSS selector.

    Prints the normalised selector and exits with code 0 if it is valid,
    or prints the error and exits with code 1.
    """
    try:
        parsed = parse_selector(selector)
    except SelectorError as exc:
        click.echo(f"Invalid selector: {exc}", err=True)
        sys.exit(1)

    click.echo(f"OK: {parsed.stringify()}")
