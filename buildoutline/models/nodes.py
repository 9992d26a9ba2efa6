"""Build output tree nodes — the unit the tree builder, search and renderer share."""

from __future__ import annotations

import weakref
from enum import Enum


class BuildOutputNodeType(str, Enum):
    """Closed set of node kinds emitted by a build-output parser."""

    BUILD = "build"
    PROJECT = "project"
    TARGET = "target"
    TASK = "task"
    ERROR = "error"
    WARNING = "warning"
    MESSAGE = "message"
    DIAGNOSTICS = "diagnostics"


class BuildOutputNode:
    """A single entry in the build-output tree.

    The parent link is a ``weakref.ref``: ownership flows strictly from
    parent to children, so a subtree is released as soon as its root is.

    Parameters
    ----------
    node_type:
        Kind of the node.
    message:
        Opaque text payload, rendered verbatim.
    parent:
        The owning node, or ``None`` for a root.  Fixed at creation.
    """

    def __init__(
        self,
        node_type: BuildOutputNodeType,
        message: str = "",
        parent: BuildOutputNode | None = None,
    ) -> None:
        self.node_type = BuildOutputNodeType(node_type)
        self.message = message
        self._parent = weakref.ref(parent) if parent is not None else None
        self.children: list[BuildOutputNode] = []
        self.has_errors = False

    @property
    def parent(self) -> BuildOutputNode | None:
        return self._parent() if self._parent is not None else None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def mark_errors(self) -> None:
        """Flag this node and every ancestor as containing an error.

        Stops at the first ancestor already flagged: ``has_errors`` never
        goes back to false, so everything above it is flagged too.
        """
        self.has_errors = True
        ancestor = self.parent
        while ancestor is not None and not ancestor.has_errors:
            ancestor.has_errors = True
            ancestor = ancestor.parent

    def __repr__(self) -> str:
        return (
            f"BuildOutputNode(node_type={self.node_type.value!r}, "
            f"message={self.message!r}, children={len(self.children)}, "
            f"has_errors={self.has_errors})"
        )
