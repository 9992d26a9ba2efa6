"""Main Typer application — registers the CLI commands.

Entry point: ``buildoutline`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer

from buildoutline.cli.commands.render_cmd import render_cmd
from buildoutline.cli.commands.search_cmd import search_cmd
from buildoutline.config import config

app = typer.Typer(
    name="buildoutline",
    help="buildoutline: fold and search structured build output.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def _configure(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log at DEBUG level."
    ),
) -> None:
    """Configure logging before any command runs."""
    level = logging.DEBUG if verbose else config.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
app.command(name="render", help="Render an event log as folded text.")(render_cmd)
app.command(name="search", help="Find nodes of one kind in an event log.")(search_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
