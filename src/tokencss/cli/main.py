"""tokencss CLI entry point: Click group with subcommands."""

import logging

import click

from tokencss import __version__
from tokencss.config import TokenCssConfig


@click.group()
@click.version_option(version=__version__, prog_name="tokencss")
@click.option(
    "--log-level",
    default=TokenCssConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """tokencss - convert, merge, and diff responsive style tokens."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from tokencss.cli.diff import diff  # noqa: E402
from tokencss.cli.extract import extract  # noqa: E402
from tokencss.cli.parse import parse  # noqa: E402
from tokencss.cli.render import render  # noqa: E402
from tokencss.cli.set import set_property  # noqa: E402

cli.add_command(render)
cli.add_command(parse)
cli.add_command(diff)
cli.add_command(extract)
cli.add_command(set_property)
