"""CLI command: tokencss parse -- decode a CSS file into a token."""

from __future__ import annotations

import json
from pathlib import Path

import click

from tokencss.cli.common import fail
from tokencss.config import TokenCssConfig
from tokencss.errors import ParseError, ShapeError
from tokencss.projector import css_to_style_token


def _split(text: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in text.split(",") if part.strip())


@click.command()
@click.argument("css_file", type=click.Path(exists=True))
@click.option("--id", "token_id", default="", help="Id of the decoded token.")
@click.option("--name", default="", help="Name of the decoded token.")
@click.option(
    "--breakpoints",
    default=",".join(TokenCssConfig.breakpoints),
    show_default=True,
    help="Comma-separated breakpoints to decode into.",
)
@click.option(
    "--pseudo-states",
    default=",".join(TokenCssConfig.pseudo_states),
    show_default=True,
    help="Comma-separated pseudo-states to decode into.",
)
def parse(css_file: str, token_id: str, name: str, breakpoints: str, pseudo_states: str) -> None:
    """Parse CSS_FILE and print the style token as JSON.

    Declarations outside the breakpoint x pseudo-state grid are dropped.
    """
    config = TokenCssConfig(
        breakpoints=_split(breakpoints),
        pseudo_states=_split(pseudo_states),
    )
    css_path = Path(css_file)
    try:
        token = css_to_style_token(
            css_path.read_text(encoding="utf-8"),
            token_id or css_path.stem,
            name or css_path.stem,
            breakpoints=config.breakpoints,
            pseudo_states=config.pseudo_states,
        )
    except (ParseError, ShapeError) as exc:
        fail(exc)
        return
    click.echo(json.dumps(token.to_dict(), indent=2))
