"""CLI command: tokencss render -- merge token files and print CSS."""

from __future__ import annotations

import json

import click

from tokencss.batch import batch_process_tokens
from tokencss.cli.common import fail, load_tokens
from tokencss.computed import compute_inherited_styles, merge_tokens_union
from tokencss.config import TokenCssConfig
from tokencss.errors import ParseError, ShapeError
from tokencss.projector import style_token_to_css


@click.command()
@click.argument("token_files", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--selector", default=TokenCssConfig.selector, help="Selector for the generated rules.")
@click.option("--union", is_flag=True, help="Merge over every breakpoint/pseudo-state seen.")
@click.option("--each", is_flag=True, help="Render every token separately as .<id>.")
@click.option("--pretty", is_flag=True, help="Pretty-print instead of minifying.")
def render(token_files: tuple[str, ...], selector: str, union: bool, each: bool, pretty: bool) -> None:
    """Merge TOKEN_FILES in order (later files win) and print the CSS.

    Each file holds a single token object or a JSON list of tokens.
    """
    config = TokenCssConfig(selector=selector, minify=not pretty)
    try:
        tokens = [token for path in token_files for token in load_tokens(path)]

        if each:
            chunks = batch_process_tokens(
                tokens,
                lambda t: style_token_to_css(t, f".{t.id}", minify=config.minify),
                chunk_size=config.chunk_size,
            )
            click.echo(("" if config.minify else "\n").join(chunks))
            return

        if union:
            merged = merge_tokens_union(tokens)
        else:
            merged = compute_inherited_styles(tokens, breakpoint_order=config.breakpoints)
        click.echo(style_token_to_css(merged, config.selector, minify=config.minify))
    except (ShapeError, ParseError, json.JSONDecodeError) as exc:
        fail(exc)
