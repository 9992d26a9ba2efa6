"""``buildoutline render EVENT_LOG`` — print the folded text view of a build.

Replays the event log, renders the tree and prints the text as a viewer
would receive it, minus the leading line break.  ``--segments`` adds a
table of the fold regions with their offsets and default state.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from buildoutline.cli.commands._loading import load_processor
from buildoutline.config import config
from buildoutline.models.folding import FoldSegment

console = Console()


def _segment_table(segments: list[FoldSegment]) -> Table:
    table = Table(
        title="Fold segments",
        show_header=True,
        header_style="bold cyan",
        pad_edge=True,
    )
    table.add_column("#", style="dim", width=4, justify="right")
    table.add_column("Offset", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Collapsed", justify="center")
    table.add_column("Label", min_width=20)

    for i, segment in enumerate(segments):
        collapsed = "[dim]yes[/dim]" if segment.is_collapsed else "[green]no[/green]"
        table.add_row(
            str(i),
            str(segment.offset),
            str(segment.length),
            collapsed,
            Text(segment.description),
        )
    return table


def render_cmd(
    event_log: Path = typer.Argument(
        ...,
        help="JSON-lines event log to replay.",
    ),
    diagnostics: bool = typer.Option(
        config.include_diagnostics,
        "--diagnostics/--no-diagnostics",
        help="Include diagnostics subtrees in the output.",
    ),
    offset: int = typer.Option(
        0,
        "--offset",
        "-o",
        min=0,
        help="Buffer offset the text will be inserted at.",
    ),
    show_segments: bool = typer.Option(
        False,
        "--segments",
        "-s",
        help="Also print the fold segments.",
    ),
) -> None:
    """Render a build event log as indented text."""
    with load_processor(event_log, console) as processor:
        text, segments = processor.to_text(
            include_diagnostics=diagnostics, start_at_offset=offset
        )

    console.print(Text(text.removeprefix(config.line_break)))

    if show_segments:
        console.print()
        if segments:
            console.print(_segment_table(segments))
        else:
            console.print("[dim]No fold segments.[/dim]")
