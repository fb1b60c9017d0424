"""CLI command: cascadia inspect -- display the styled tree."""

from __future__ import annotations

import json
import sys
from dataclasses import replace
from pathlib import Path

import click

from cascadia.cascade import resolve_styles
from cascadia.config import CascadiaConfig
from cascadia.markup import parse_markup
from cascadia.parser import ParseError
from cascadia.render import render_tree, to_dict
from cascadia.stylesheet import parse_stylesheet


def _check_tag_name(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is not None and not (value.isascii() and value.isalnum()):
        raise click.BadParameter("tag names are ASCII letters and digits only")
    return value


@click.command()
@click.argument("markup", type=click.Path(exists=True))
@click.argument("stylesheet", type=click.Path(exists=True))
@click.option(
    "--wrap",
    "wrap_tag",
    default=None,
    callback=_check_tag_name,
    help="Wrap markup in a synthetic root element (alphanumeric tag name)",
)
@click.option("--json", "as_json", is_flag=True, help="Emit the styled tree as JSON")
@click.option("--indent", default=CascadiaConfig.indent, show_default=True, help="Indent width")
@click.pass_obj
def inspect(
    config: CascadiaConfig,
    markup: str,
    stylesheet: str,
    wrap_tag: str | None,
    as_json: bool,
    indent: int,
) -> None:
    """Parse MARKUP and STYLESHEET and display the resolved styled tree."""
    config = replace(config, wrap_tag=wrap_tag, indent=indent)

    try:
        root = parse_markup(
            Path(markup).read_text(encoding=config.encoding), wrap=config.wrap_tag
        )
        sheet = parse_stylesheet(Path(stylesheet).read_text(encoding=config.encoding))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    styled = resolve_styles(root, sheet)

    if as_json:
        click.echo(json.dumps(to_dict(styled), indent=config.indent))
    else:
        click.echo(f"Rules: {len(sheet.rules)}")
        click.echo()
        click.echo(render_tree(styled, indent=config.indent))
