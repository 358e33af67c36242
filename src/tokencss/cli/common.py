"""Helpers shared by the CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from tokencss.model.token import StyleToken


def load_tokens(path: str) -> list[StyleToken]:
    """Load one token object, or a list of them, from a JSON file."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, list):
        return [StyleToken.from_dict(item) for item in data]
    return [StyleToken.from_dict(data)]


def fail(exc: Exception) -> None:
    """Report *exc* on stderr and exit with status 1."""
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)
