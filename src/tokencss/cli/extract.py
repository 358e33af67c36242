"""CLI command: tokencss extract -- list declarations in a CSS file."""

from __future__ import annotations

from pathlib import Path

import click

from tokencss.cli.common import fail
from tokencss.errors import ParseError
from tokencss.properties import extract_properties_from_css


@click.command()
@click.argument("css_file", type=click.Path(exists=True))
@click.option("--selector", default=None, help="Keep rules whose selector contains this text.")
@click.option("--media", default=None, help="Keep declarations under this exact media query.")
@click.option(
    "--pseudo",
    default=None,
    type=click.Choice(["default", "hover", "focus", "active"]),
    help="Keep declarations for this pseudo-state.",
)
def extract(css_file: str, selector: str | None, media: str | None, pseudo: str | None) -> None:
    """Print one line per declaration in CSS_FILE matching the filters."""
    try:
        found = extract_properties_from_css(
            Path(css_file).read_text(encoding="utf-8"),
            selector=selector,
            media_query=media,
            pseudo_state=pseudo,
        )
    except ParseError as exc:
        fail(exc)
        return

    for prop in found:
        parts = [prop.selector]
        if prop.media_query:
            parts.append(f"@media {prop.media_query}")
        value = prop.value + (" !important" if prop.important else "")
        parts.append(f"{prop.property}: {value}")
        click.echo("  ".join(parts))
