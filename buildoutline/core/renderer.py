"""Render a build output forest into indented text plus fold segments.

Layout
------
Every visited node contributes one line: a line break, one indent unit
per nesting level, then the message verbatim.  The text therefore starts
with a line break, and a node's region runs from the first character of
its message to the end of its last descendant's line.

Fold segments
-------------
Only nodes with children produce a segment.  A segment is appended once
the node's children are rendered, so a child's segment always precedes
its parent's.  Roots and nodes containing an error stay expanded; every
other region is collapsed by default.

The walk runs on an explicit stack, so deep nesting is not limited by
the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from buildoutline.models.folding import FoldingType, FoldSegment, RenderedOutput
from buildoutline.models.nodes import BuildOutputNode, BuildOutputNodeType

logger = logging.getLogger(__name__)

# Called with keyword arguments: offset, length, is_collapsed, description, folding_type.
SegmentFactory = Callable[..., Any]


class FoldingRenderer:
    """Walks a forest and accumulates text and fold segments.

    Parameters
    ----------
    include_diagnostics:
        When false, ``diagnostics`` nodes and their whole subtree are skipped.
    start_at_offset:
        Offset of the rendered text inside the viewer's buffer; added to
        every segment offset.
    segment_factory:
        Builds each segment.  Defaults to ``FoldSegment``.
    indent:
        One indentation unit.
    newline:
        Line break emitted before every node.
    """

    def __init__(
        self,
        *,
        include_diagnostics: bool = False,
        start_at_offset: int = 0,
        segment_factory: SegmentFactory = FoldSegment,
        indent: str = "\t",
        newline: str = "\n",
    ) -> None:
        self.include_diagnostics = include_diagnostics
        self.start_at_offset = start_at_offset
        self._segment_factory = segment_factory
        self._indent = indent
        self._newline = newline
        self._parts: list[str] = []
        self._length = 0
        self._segments: list[Any] = []

    def render(self, roots: Iterable[BuildOutputNode]) -> RenderedOutput:
        """Render every root, in order, at depth zero."""
        self._parts = []
        self._length = 0
        self._segments = []
        # Each entry: (node, depth, message_position).  A position of None
        # means the node is not rendered yet; otherwise its children are
        # done and its segment is due.
        stack: list[tuple[BuildOutputNode, int, int | None]] = [
            (root, 0, None) for root in reversed(list(roots))
        ]
        while stack:
            node, depth, position = stack.pop()
            if position is None:
                self._open_node(node, depth, stack)
            else:
                self._close_node(node, position)
        logger.debug(
            "Rendered %d characters with %d fold segments.",
            self._length,
            len(self._segments),
        )
        return RenderedOutput("".join(self._parts), self._segments)

    def _append(self, text: str) -> None:
        self._parts.append(text)
        self._length += len(text)

    def _open_node(
        self,
        node: BuildOutputNode,
        depth: int,
        stack: list[tuple[BuildOutputNode, int, int | None]],
    ) -> None:
        if not self.include_diagnostics and node.node_type == BuildOutputNodeType.DIAGNOSTICS:
            return

        self._append(self._newline)
        self._append(self._indent * depth)

        current_position = self._length
        self._append(node.message)

        if not node.children:
            return

        stack.append((node, depth, current_position))
        for child in reversed(node.children):
            stack.append((child, depth + 1, None))

    def _close_node(self, node: BuildOutputNode, current_position: int) -> None:
        self._segments.append(
            self._segment_factory(
                offset=self.start_at_offset + current_position,
                length=self._length - current_position,
                is_collapsed=node.parent is not None and not node.has_errors,
                description=node.message,
                folding_type=FoldingType.REGION,
            )
        )


def render_forest(
    roots: Iterable[BuildOutputNode],
    include_diagnostics: bool = False,
    start_at_offset: int = 0,
    *,
    segment_factory: SegmentFactory = FoldSegment,
    indent: str = "\t",
    newline: str = "\n",
) -> RenderedOutput:
    """Convenience wrapper: build a ``FoldingRenderer`` and render ``roots``."""
    renderer = FoldingRenderer(
        include_diagnostics=include_diagnostics,
        start_at_offset=start_at_offset,
        segment_factory=segment_factory,
        indent=indent,
        newline=newline,
    )
    return renderer.render(roots)
