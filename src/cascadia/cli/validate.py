"""CLI command: cascadia validate -- check that source files parse."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cascadia.config import CascadiaConfig
from cascadia.markup import parse_markup
from cascadia.parser import ParseError
from cascadia.stylesheet import parse_stylesheet


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True))
@click.pass_obj
def validate(config: CascadiaConfig, files: tuple[str, ...]) -> None:
    """Parse each markup or stylesheet file and report errors.

    Files ending in ``.css`` are read as stylesheets; everything else is
    read as markup.  Exits with code 1 if any file fails to parse.
    """
    failures = 0
    for name in files:
        path = Path(name)
        source = path.read_text(encoding=config.encoding)
        try:
            if path.suffix.lower() == ".css":
                sheet = parse_stylesheet(source)
                detail = f"{len(sheet.rules)} rule(s)"
            else:
                parse_markup(source, wrap=config.wrap_tag)
                detail = "markup"
        except ParseError as exc:
            failures += 1
            click.echo(f"FAIL: {path.name}: {type(exc).__name__}: {exc}", err=True)
            continue
        click.echo(f"OK: {path.name} ({detail})")

    click.echo()
    click.echo(f"Summary: {len(files) - failures} ok, {failures} failed")
    if failures:
        sys.exit(1)
