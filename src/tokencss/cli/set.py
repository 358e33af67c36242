"""CLI command: tokencss set -- update one property in a CSS file."""

from __future__ import annotations

from pathlib import Path

import click

from tokencss.cli.common import fail
from tokencss.config import TokenCssConfig
from tokencss.errors import ParseError
from tokencss.projector import ast_to_css, css_to_ast
from tokencss.properties import update_property_in_ast


@click.command(name="set")
@click.argument("css_file", type=click.Path(exists=True))
@click.argument("property")
@click.argument("value")
@click.option("--selector", default=TokenCssConfig.selector, help="Rule selector to update.")
@click.option("--media", default=None, help="Media query the rule lives under.")
@click.option(
    "--pseudo",
    default="default",
    type=click.Choice(["default", "hover", "focus", "active"]),
    help="Pseudo-state of the rule.",
)
@click.option("--important", is_flag=True, help="Mark the declaration !important.")
@click.option("--pretty", is_flag=True, help="Pretty-print instead of minifying.")
def set_property(
    css_file: str,
    property: str,
    value: str,
    selector: str,
    media: str | None,
    pseudo: str,
    important: bool,
    pretty: bool,
) -> None:
    """Set PROPERTY to VALUE in CSS_FILE and print the resulting CSS.

    The file itself is not modified.
    """
    try:
        ast = css_to_ast(Path(css_file).read_text(encoding="utf-8"))
        updated = update_property_in_ast(
            ast,
            property,
            value,
            selector=selector,
            media_query=media,
            pseudo_state=pseudo,
            important=important,
        )
    except ParseError as exc:
        fail(exc)
        return
    click.echo(ast_to_css(updated, minify=not pretty), nl=not pretty)
