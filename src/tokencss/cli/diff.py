"""CLI command: tokencss diff -- compare two token files."""

from __future__ import annotations

import json

import click

from tokencss.cli.common import fail, load_tokens
from tokencss.diff import diff_style_tokens
from tokencss.errors import ShapeError


@click.command()
@click.argument("base_file", type=click.Path(exists=True))
@click.argument("compare_file", type=click.Path(exists=True))
@click.option(
    "--include-compare-only",
    is_flag=True,
    help="Also report breakpoints/pseudo-states that exist only in COMPARE_FILE.",
)
def diff(base_file: str, compare_file: str, include_compare_only: bool) -> None:
    """Print the added/removed/changed properties between two tokens as JSON.

    Only the first token of each file is compared.
    """
    try:
        base = load_tokens(base_file)[0]
        compare = load_tokens(compare_file)[0]
    except (ShapeError, json.JSONDecodeError, IndexError) as exc:
        fail(exc)
        return
    result = diff_style_tokens(base, compare, include_compare_only=include_compare_only)
    click.echo(json.dumps(result.to_dict(), indent=2))
