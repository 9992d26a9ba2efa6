"""``buildoutline search EVENT_LOG --type KIND`` — list nodes of one kind.

Matches are listed children-first, the order a viewer uses to jump
between errors.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from buildoutline.cli.commands._loading import load_processor
from buildoutline.models.nodes import BuildOutputNode, BuildOutputNodeType

console = Console()

_TYPE_STYLES: dict[BuildOutputNodeType, str] = {
    BuildOutputNodeType.BUILD: "bold",
    BuildOutputNodeType.PROJECT: "bold cyan",
    BuildOutputNodeType.TARGET: "cyan",
    BuildOutputNodeType.TASK: "blue",
    BuildOutputNodeType.ERROR: "bold red",
    BuildOutputNodeType.WARNING: "yellow",
    BuildOutputNodeType.MESSAGE: "",
    BuildOutputNodeType.DIAGNOSTICS: "dim",
}


def _node_path(node: BuildOutputNode) -> str:
    """Messages of the enclosing nodes, outermost first."""
    parts: list[str] = []
    ancestor = node.parent
    while ancestor is not None:
        parts.append(ancestor.message)
        ancestor = ancestor.parent
    return " > ".join(reversed(parts))


def search_cmd(
    event_log: Path = typer.Argument(
        ...,
        help="JSON-lines event log to replay.",
    ),
    node_type: BuildOutputNodeType = typer.Option(
        BuildOutputNodeType.ERROR,
        "--type",
        "-t",
        case_sensitive=False,
        help="Node kind to look for.",
    ),
    message: str = typer.Option(
        None,
        "--message",
        "-m",
        help="Only match nodes with exactly this message.",
    ),
) -> None:
    """Search a build event log for nodes of one kind."""
    with load_processor(event_log, console) as processor:
        matches = processor.search_nodes(node_type, message)

        if not matches:
            console.print(f"[dim]No {node_type.value} nodes found.[/dim]")
            return

        table = Table(
            title=f"{len(matches)} {node_type.value} node(s)",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("#", style="dim", width=4, justify="right")
        table.add_column("Message", min_width=20)
        table.add_column("Within", style="dim")

        style = _TYPE_STYLES.get(node_type, "")
        for i, node in enumerate(matches):
            table.add_row(str(i), Text(node.message, style=style), Text(_node_path(node)))

        console.print(table)
