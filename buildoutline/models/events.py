"""Recorded tree-builder calls, as replayed from a JSON-lines event log.

Each line of an event log is one JSON object::

    {"action": "add", "node_type": "project", "message": "App.csproj", "is_start": true}
    {"action": "add", "node_type": "error", "message": "CS1002: ; expected"}
    {"action": "end", "message": "Done building project"}
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from buildoutline.models.nodes import BuildOutputNodeType


class EventLogError(ValueError):
    """Raised when an event log line cannot be decoded into a BuildEvent."""


class EventAction(str, Enum):
    """Which tree-builder call an event stands for."""

    ADD = "add"
    END = "end"


class BuildEvent(BaseModel):
    """One ``add_node`` or ``end_current_node`` call.

    ``end`` events only use ``message``; the closing node is always a
    ``message`` node.
    """

    model_config = ConfigDict(frozen=True)

    action: EventAction = EventAction.ADD
    node_type: BuildOutputNodeType = BuildOutputNodeType.MESSAGE
    message: str = ""
    is_start: bool = False


def parse_event_lines(lines: list[str]) -> list[BuildEvent]:
    """Decode JSON lines into events, skipping blank lines.

    Raises
    ------
    EventLogError
        If a line is not valid JSON or does not describe a BuildEvent.
        The message names the 1-based line number.
    """
    events: list[BuildEvent] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            events.append(BuildEvent.model_validate(json.loads(line)))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise EventLogError(f"Invalid event on line {lineno}: {exc}") from exc
    return events


def load_events(path: Path | str) -> list[BuildEvent]:
    """Read and decode an event log file.

    Raises
    ------
    EventLogError
        If the file is not UTF-8 or a line is not a valid event.
    OSError
        If the file cannot be read.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise EventLogError(f"Event log is not valid UTF-8: {exc}") from exc
    return parse_event_lines(text.splitlines())
