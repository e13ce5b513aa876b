"""Tests for the tree builder."""

from __future__ import annotations

import logging

import pytest

from scenetree.builder import build_tree
from scenetree.exceptions import DuplicateRootError, OrphanNodeError, UnresolvedConnectionError
from scenetree.interpreter import ParsedScene, interpret_sections
from scenetree.lexer import lex_sections
from scenetree.schemas import ConnectionRecord, NodeRecord


def _build(text: str):
    return build_tree(interpret_sections(lex_sections(text)))


class TestBuildTree:
    """Tests for build_tree."""

    def test_returns_none_without_nodes(self) -> None:
        assert build_tree(ParsedScene()) is None

    def test_links_children_by_path(self, sample_scene: str) -> None:
        """Children attach under the node their parent path names."""
        tree = _build(sample_scene)

        root = tree.root
        assert root.name == "Main"
        assert root.path == ""
        assert [child.name for child in root.children] == ["Player", "Timer", "HUD"]
        player = root.children[0]
        assert [child.name for child in player.children] == ["Sprite2D", "CollisionShape2D"]
        assert [child.name for child in player.children[0].children] == ["Glow"]
        assert tree.node_count == 7

    def test_registers_full_paths(self, sample_scene: str) -> None:
        tree = _build(sample_scene)

        assert sorted(tree.nodes_by_path) == [
            "",
            "HUD",
            "Player",
            "Player/CollisionShape2D",
            "Player/Sprite2D",
            "Player/Sprite2D/Glow",
            "Timer",
        ]
        assert tree.resolve(".") is tree.root
        assert tree.resolve("Player/Sprite2D/Glow").name == "Glow"

    def test_children_keep_declaration_order(self) -> None:
        tree = _build(
            '[node name="Root"]\n'
            '[node name="Zeta" parent="."]\n'
            '[node name="Alpha" parent="."]\n'
            '[node name="Mid" parent="."]\n'
        )

        assert [child.name for child in tree.root.children] == ["Zeta", "Alpha", "Mid"]

    def test_second_root_is_rejected(self) -> None:
        with pytest.raises(DuplicateRootError) as excinfo:
            _build('[node name="One"]\n[node name="Two"]\n')

        assert excinfo.value.name == "Two"
        assert excinfo.value.line == 2

    def test_undeclared_parent_is_rejected(self) -> None:
        """A node whose parent path was never declared is an orphan."""
        with pytest.raises(OrphanNodeError) as excinfo:
            _build('[node name="Root"]\n[node name="C" parent="A/B"]\n')

        assert excinfo.value.path == "A/B"
        assert excinfo.value.name == "C"
        assert "'A/B'" in str(excinfo.value)

    def test_parent_declared_later_is_rejected(self) -> None:
        """Resolution is single pass; declaration order must be topological."""
        with pytest.raises(OrphanNodeError) as excinfo:
            _build(
                '[node name="Root"]\n'
                '[node name="Child" parent="Later"]\n'
                '[node name="Later" parent="."]\n'
            )

        assert excinfo.value.path == "Later"

    def test_child_before_root_is_rejected(self) -> None:
        with pytest.raises(OrphanNodeError) as excinfo:
            _build('[node name="Child" parent="."]\n[node name="Root"]\n')

        assert excinfo.value.path == "."


class TestConnections:
    """Tests for attaching connections to source nodes."""

    def test_attaches_to_source_in_order(self, sample_scene: str) -> None:
        tree = _build(sample_scene)

        assert [c.signal for c in tree.resolve("Timer").connections] == ["timeout"]
        assert [c.signal for c in tree.resolve("Player").connections] == ["body_entered"]
        assert tree.root.connections == []
        assert tree.issues == []

    def test_root_reference_source(self) -> None:
        tree = _build(
            '[node name="Root"]\n'
            '[connection signal="ready" from="." to="." method="_on_ready"]\n'
            '[connection signal="tree_exited" from="." to="." method="_on_exit"]\n'
        )

        assert [c.method for c in tree.root.connections] == ["_on_ready", "_on_exit"]

    def test_unknown_source_is_recorded(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unresolved sources are skipped without failing the build."""
        parsed = ParsedScene(
            nodes=[NodeRecord(name="Root")],
            connections=[
                ConnectionRecord(
                    signal="pressed",
                    source_path="Missing/Button",
                    target_path=".",
                    method="_on_pressed",
                    line_number=9,
                )
            ],
        )

        with caplog.at_level(logging.WARNING, logger="scenetree.builder"):
            tree = build_tree(parsed)

        assert tree.root.connections == []
        (issue,) = tree.issues
        assert isinstance(issue, UnresolvedConnectionError)
        assert issue.path == "Missing/Button"
        assert "line 9" in str(issue)
        assert "Missing/Button" in caplog.text
