"""Tests for BuildOutputNode — parent links, error flags, node kinds."""

from __future__ import annotations

import gc

import pytest

from buildoutline.models.nodes import BuildOutputNode, BuildOutputNodeType


class TestNodeType:
    def test_closed_set_of_kinds(self):
        assert {t.value for t in BuildOutputNodeType} == {
            "build",
            "project",
            "target",
            "task",
            "error",
            "warning",
            "message",
            "diagnostics",
        }

    def test_string_coercion(self):
        node = BuildOutputNode("warning", "careful")
        assert node.node_type is BuildOutputNodeType.WARNING

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            BuildOutputNode("explosion", "nope")


class TestParentLink:
    def test_root_has_no_parent(self):
        node = BuildOutputNode(BuildOutputNodeType.BUILD, "root")
        assert node.parent is None
        assert node.is_root is True

    def test_child_points_at_parent(self):
        parent = BuildOutputNode(BuildOutputNodeType.PROJECT, "p")
        child = BuildOutputNode(BuildOutputNodeType.TASK, "t", parent=parent)
        assert child.parent is parent
        assert child.is_root is False

    def test_parent_link_does_not_keep_parent_alive(self):
        """The back-reference is weak: dropping the parent releases it."""
        parent = BuildOutputNode(BuildOutputNodeType.PROJECT, "p")
        child = BuildOutputNode(BuildOutputNodeType.TASK, "t", parent=parent)
        del parent
        gc.collect()
        assert child.parent is None
        assert child.is_root is True


class TestMarkErrors:
    def test_flags_node_and_ancestors(self):
        root = BuildOutputNode(BuildOutputNodeType.BUILD, "b")
        mid = BuildOutputNode(BuildOutputNodeType.PROJECT, "p", parent=root)
        leaf = BuildOutputNode(BuildOutputNodeType.ERROR, "e", parent=mid)
        leaf.mark_errors()
        assert leaf.has_errors and mid.has_errors and root.has_errors

    def test_siblings_untouched(self):
        root = BuildOutputNode(BuildOutputNodeType.BUILD, "b")
        sibling = BuildOutputNode(BuildOutputNodeType.PROJECT, "ok", parent=root)
        failing = BuildOutputNode(BuildOutputNodeType.ERROR, "e", parent=root)
        failing.mark_errors()
        assert sibling.has_errors is False

    def test_new_node_starts_clean(self):
        assert BuildOutputNode(BuildOutputNodeType.MESSAGE, "").has_errors is False

    def test_repr_mentions_kind_and_message(self):
        text = repr(BuildOutputNode(BuildOutputNodeType.TARGET, "Compile"))
        assert "target" in text
        assert "Compile" in text
