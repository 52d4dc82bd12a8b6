"""
Command line interface for the conventional_commits package.

This module defines the ``main`` click group used as the entry point of
the ``ccmodel`` command. It exposes the footer separator conversions and
re-encodes serialized commits with the configured settings. Exit codes
are defined at the top of the module.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional

import click

from conventional_commits import __version__
from conventional_commits.config.loader import ConfigError, load_config, serializer_from_config
from conventional_commits.model.footer_separator import FooterSeparator, UnrecognizedSeparator
from conventional_commits.serialization.records import SeparatorStyle, SerializationError

# Module-level logger with a null handler; messages appear once the
# group callback has configured the root logger.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_INVALID_USAGE = 2
EXIT_UNRECOGNIZED_SEPARATOR = 3
EXIT_SERIALIZATION_ERROR = 4
EXIT_CONFIG_ERROR = 5


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


@click.group()
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read settings from this file instead of ~/.conventional_commits/config.json.",
)
@click.version_option(version=__version__, prog_name="ccmodel")
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Optional[Path]) -> None:
    """Inspect conventional commit footers and serialized commits."""
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        print_error(f"Configuration error: {exc}")
        raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

    # force=True so repeated invocations (tests) reconfigure handlers.
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, config["log_level"]),
        format="%(levelname)s: %(message)s",
        force=True,
    )
    logger.debug("Using configuration: %s", config)
    ctx.obj = config


@main.command()
@click.argument("text")
def separator(text: str) -> None:
    """Parse TEXT as a footer separator and print its name."""
    try:
        parsed = FooterSeparator.parse(text)
    except UnrecognizedSeparator as exc:
        print_error(str(exc))
        raise click.exceptions.Exit(EXIT_UNRECOGNIZED_SEPARATOR)
    click.echo(parsed.name)


@main.command()
def separators() -> None:
    """List the known footer separators and their literal text."""
    for member in FooterSeparator:
        click.echo(f"{member.name}\t{member.to_text()!r}")


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--separator-style",
    type=click.Choice([style.value for style in SeparatorStyle]),
    help="Override how footer separators are written.",
)
@click.option("--indent", type=click.IntRange(min=0), help="Override the JSON indentation.")
@click.pass_obj
def normalize(config: dict, source: IO[str], separator_style: Optional[str], indent: Optional[int]) -> None:
    """Re-encode a JSON serialized commit read from SOURCE (default: stdin)."""
    reader = serializer_from_config(config)
    writer_config = dict(config)
    if separator_style is not None:
        writer_config["separator_style"] = separator_style
    if indent is not None:
        writer_config["indent"] = indent
    writer = serializer_from_config(writer_config)

    try:
        commit = reader.load(source)
    except SerializationError as exc:
        print_error(f"Could not read commit: {exc}")
        raise click.exceptions.Exit(EXIT_SERIALIZATION_ERROR)

    logger.debug("Read commit '%s' with %d footer(s)", commit.description, len(commit.footers))
    click.echo(writer.dumps(commit))
