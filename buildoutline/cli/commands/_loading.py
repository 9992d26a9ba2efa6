"""Shared helper: open and process an event log, or exit with a readable error."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from buildoutline.config import config
from buildoutline.core.event_log import EventLogProcessor
from buildoutline.models.events import EventLogError


def load_processor(event_log: Path, console: Console) -> EventLogProcessor:
    """Build an ``EventLogProcessor`` for ``event_log`` and process it.

    Exits with code 1 when the file is missing, unreadable or malformed.
    """
    processor = EventLogProcessor(
        event_log, remove_file_on_dispose=config.remove_file_on_dispose
    )
    try:
        processor.process()
    except FileNotFoundError:
        processor.dispose()
        console.print(f"[bold red]Event log not found:[/bold red] {escape(str(event_log))}")
        raise typer.Exit(code=1)
    except OSError as exc:
        processor.dispose()
        console.print(
            f"[bold red]Could not read event log:[/bold red] {escape(str(exc))}"
        )
        raise typer.Exit(code=1)
    except EventLogError as exc:
        processor.dispose()
        console.print(f"[bold red]Malformed event log:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    return processor
