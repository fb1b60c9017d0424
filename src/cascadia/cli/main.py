"""Cascadia CLI entry point: Click group with subcommands."""

import logging

import click

from cascadia import __version__
from cascadia.config import CascadiaConfig


@click.group()
@click.version_option(version=__version__, prog_name="cascadia")
@click.option("-v", "--verbose", is_flag=True, help="Log parse and cascade details")
@click.option("--encoding", default=CascadiaConfig.encoding, help="Source file encoding")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, encoding: str) -> None:
    """Cascadia - parse markup and stylesheets and resolve the cascade."""
    config = CascadiaConfig(
        encoding=encoding,
        log_level="DEBUG" if verbose else CascadiaConfig.log_level,
    )
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("cascadia").setLevel(config.log_level)
    ctx.obj = config


# Import and register subcommands
from cascadia.cli.validate import validate  # noqa: E402
from cascadia.cli.inspect import inspect  # noqa: E402

cli.add_command(validate)
cli.add_command(inspect)
