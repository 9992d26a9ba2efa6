"""buildoutline data models — tree nodes, fold segments and build events."""

from buildoutline.models.events import (
    BuildEvent,
    EventAction,
    EventLogError,
    load_events,
    parse_event_lines,
)
from buildoutline.models.folding import FoldingType, FoldSegment, RenderedOutput
from buildoutline.models.nodes import BuildOutputNode, BuildOutputNodeType

__all__ = [
    # nodes
    "BuildOutputNode",
    "BuildOutputNodeType",
    # folding
    "FoldingType",
    "FoldSegment",
    "RenderedOutput",
    # events
    "BuildEvent",
    "EventAction",
    "EventLogError",
    "load_events",
    "parse_event_lines",
]
