"""cssbuilder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import CSSBuilderConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("--verbose/--no-verbose", default=False, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cssbuilder - build and check CSS selectors."""
    config = CSSBuilderConfig(log_level="DEBUG" if verbose else "WARNING")
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.check import check  # noqa: E402
from cssbuilder.cli.combine import combine  # noqa: E402

cli.add_command(build)
cli.add_command(check)
cli.add_command(combine)
