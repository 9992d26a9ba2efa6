"""Depth-first node search over a build output tree.

Results come out children-first: every match inside a node's subtree is
yielded before the node itself, siblings in insertion order.  The walk
uses an explicit stack, so deep trees never hit the recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from buildoutline.models.nodes import BuildOutputNode, BuildOutputNodeType


def _matches(
    node: BuildOutputNode, node_type: BuildOutputNodeType, message: str | None
) -> bool:
    if node.node_type != node_type:
        return False
    return message is None or node.message == message


def search_nodes(
    node: BuildOutputNode,
    node_type: BuildOutputNodeType,
    message: str | None = None,
) -> Iterator[BuildOutputNode]:
    """Lazily yield nodes in ``node``'s subtree that match.

    Parameters
    ----------
    node:
        Root of the subtree to search (included in the results).
    node_type:
        Kind to match.
    message:
        When given, the node message must also be exactly equal.
    """
    # Each entry: (node, children_already_pushed)
    stack: list[tuple[BuildOutputNode, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if expanded:
            if _matches(current, node_type, message):
                yield current
            continue
        stack.append((current, True))
        for child in reversed(current.children):
            stack.append((child, False))


def search_forest(
    roots: Iterable[BuildOutputNode],
    node_type: BuildOutputNodeType,
    message: str | None = None,
) -> Iterator[BuildOutputNode]:
    """Chain ``search_nodes`` over every root, in root order."""
    for root in roots:
        yield from search_nodes(root, node_type, message)


def iter_nodes(roots: Iterable[BuildOutputNode]) -> Iterator[BuildOutputNode]:
    """Yield every node of the forest in pre-order."""
    stack = list(reversed(list(roots)))
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))
