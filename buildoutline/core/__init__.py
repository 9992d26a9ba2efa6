"""Tree building, search, rendering and file lifetime for build output."""

from buildoutline.core.event_log import EventLogProcessor
from buildoutline.core.file_guard import OutputFileGuard
from buildoutline.core.processor import BuildOutputProcessor
from buildoutline.core.renderer import FoldingRenderer, render_forest
from buildoutline.core.search import iter_nodes, search_forest, search_nodes

__all__ = [
    "BuildOutputProcessor",
    "EventLogProcessor",
    "FoldingRenderer",
    "OutputFileGuard",
    "iter_nodes",
    "render_forest",
    "search_forest",
    "search_nodes",
]
