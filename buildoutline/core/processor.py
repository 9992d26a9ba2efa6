"""BuildOutputProcessor — turns a linear stream of build events into a tree.

A parser feeds ``add_node`` / ``end_current_node`` calls in arrival
order.  The processor keeps a single "current open node" pointer: a
start event pushes (the new node becomes current), an end event pops
(current moves to its parent).  New nodes attach as children of the
current node, or become roots when nothing is open.

Error nodes flag themselves and their ancestors eagerly, so rendering
can decide which regions start collapsed without another walk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from buildoutline.config import OutlineConfig, config as default_config
from buildoutline.core.file_guard import OutputFileGuard
from buildoutline.core.renderer import SegmentFactory, render_forest
from buildoutline.core.search import search_forest
from buildoutline.models.events import BuildEvent, EventAction
from buildoutline.models.folding import FoldSegment, RenderedOutput
from buildoutline.models.nodes import BuildOutputNode, BuildOutputNodeType

logger = logging.getLogger(__name__)


class BuildOutputProcessor:
    """Builds, queries and renders the build output forest.

    Not thread-safe: mutation must be serialized by the caller (one
    owning thread or event loop per processor).

    Parameters
    ----------
    file_name:
        Path of the raw build output this processor was created for.
    remove_file_on_dispose:
        Delete ``file_name`` when the processor is disposed or collected.
    settings:
        Rendering defaults.  The module-level config is used if omitted.
    """

    def __init__(
        self,
        file_name: Path | str,
        remove_file_on_dispose: bool = False,
        *,
        settings: OutlineConfig | None = None,
    ) -> None:
        self._guard = OutputFileGuard(file_name, remove_file_on_dispose)
        self._settings = settings if settings is not None else default_config
        self._root_nodes: list[BuildOutputNode] = []
        self._current_node: BuildOutputNode | None = None
        self.needs_processing = True

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def file_name(self) -> Path:
        return self._guard.file_name

    @property
    def remove_file_on_dispose(self) -> bool:
        return self._guard.remove_file_on_dispose

    @property
    def root_nodes(self) -> tuple[BuildOutputNode, ...]:
        return tuple(self._root_nodes)

    @property
    def current_node(self) -> BuildOutputNode | None:
        return self._current_node

    @property
    def has_errors(self) -> bool:
        """Whether any error node has been added since the last clear."""
        return any(root.has_errors for root in self._root_nodes)

    # ------------------------------------------------------------------
    # Tree building
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Drop the whole forest and mark previously rendered text stale."""
        self._current_node = None
        self._root_nodes = []
        self.needs_processing = True
        logger.debug("Cleared build output tree for %s.", self.file_name)

    def process(self) -> None:
        """Mark the forest as up to date.

        Subclasses that derive events from ``file_name`` override this,
        feed the events and then call the base implementation.
        """
        self.needs_processing = False

    def add_node(
        self,
        node_type: BuildOutputNodeType | str,
        message: str,
        is_start: bool = False,
    ) -> None:
        """Append a node under the current open node (or as a new root).

        When ``is_start`` is true the new node becomes the current open
        node.  Error nodes flag every ancestor as containing errors.
        """
        node = BuildOutputNode(BuildOutputNodeType(node_type), message, parent=self._current_node)
        if self._current_node is None:
            self._root_nodes.append(node)
        else:
            self._current_node.children.append(node)

        if is_start:
            self._current_node = node
            logger.debug("Started %s node %r.", node.node_type.value, message)

        if node.node_type == BuildOutputNodeType.ERROR:
            node.mark_errors()

    def end_current_node(self, message: str) -> None:
        """Append a closing message node and close the current open node.

        With no node open this leaves an orphan root message node behind.
        That behaviour is kept for callers that rely on it, but it
        usually means the event stream is unbalanced.
        """
        if self._current_node is None:
            logger.debug("End event %r with no open node; adding it as a root.", message)
        self.add_node(BuildOutputNodeType.MESSAGE, message, False)
        if self._current_node is not None:
            self._current_node = self._current_node.parent

    def apply(self, event: BuildEvent) -> None:
        """Feed one recorded event."""
        if event.action == EventAction.END:
            self.end_current_node(event.message)
        else:
            self.add_node(event.node_type, event.message, event.is_start)

    def replay(self, events: Iterable[BuildEvent]) -> int:
        """Feed recorded events in order.  Returns how many were applied."""
        count = 0
        for event in events:
            self.apply(event)
            count += 1
        logger.debug("Replayed %d events into %s.", count, self.file_name)
        return count

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def search_nodes(
        self, node_type: BuildOutputNodeType | str, message: str | None = None
    ) -> list[BuildOutputNode]:
        """Return matching nodes across all roots, children before parents."""
        return list(search_forest(self._root_nodes, BuildOutputNodeType(node_type), message))

    def to_text(
        self,
        include_diagnostics: bool | None = None,
        start_at_offset: int = 0,
        *,
        segment_factory: SegmentFactory = FoldSegment,
    ) -> RenderedOutput:
        """Render the forest to indented text and fold segments.

        Parameters
        ----------
        include_diagnostics:
            Keep ``diagnostics`` subtrees.  Defaults to the configured value.
        start_at_offset:
            Where the text will be placed in the viewer's buffer.
        segment_factory:
            Builds each fold segment; lets a viewer supply its own type.
        """
        if include_diagnostics is None:
            include_diagnostics = self._settings.include_diagnostics
        return render_forest(
            self._root_nodes,
            include_diagnostics,
            start_at_offset,
            segment_factory=segment_factory,
            indent=self._settings.indent_unit,
            newline=self._settings.line_break,
        )

    # ------------------------------------------------------------------
    # Lifetime
    # ------------------------------------------------------------------

    @property
    def disposed(self) -> bool:
        return self._guard.disposed

    def dispose(self) -> None:
        """Release the associated file.  Safe to call more than once."""
        self._guard.dispose()

    def __enter__(self) -> BuildOutputProcessor:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(file_name={str(self.file_name)!r}, "
            f"roots={len(self._root_nodes)}, needs_processing={self.needs_processing})"
        )
