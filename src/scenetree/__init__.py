"""scenetree: print Godot text scenes as a node tree."""

from scenetree.builder import SceneTree, build_tree
from scenetree.exceptions import (
    ConnectionIssue,
    DuplicateRootError,
    EmptyTreeError,
    MalformedConnectionError,
    OrphanNodeError,
    ParseError,
    SceneTreeError,
    TreeBuildError,
    UnresolvedConnectionError,
)
from scenetree.inspection import inspect_scene
from scenetree.interpreter import ParsedScene, interpret_sections
from scenetree.lexer import lex_sections
from scenetree.renderer import RenderOptions, format_report, render_tree
from scenetree.schemas import (
    ConnectionRecord,
    NodeRecord,
    SceneTreeResult,
    Section,
    TreeNode,
)

__all__ = [
    "ConnectionIssue",
    "ConnectionRecord",
    "DuplicateRootError",
    "EmptyTreeError",
    "MalformedConnectionError",
    "NodeRecord",
    "OrphanNodeError",
    "ParseError",
    "ParsedScene",
    "RenderOptions",
    "SceneTree",
    "SceneTreeError",
    "SceneTreeResult",
    "Section",
    "TreeBuildError",
    "TreeNode",
    "UnresolvedConnectionError",
    "build_tree",
    "format_report",
    "inspect_scene",
    "interpret_sections",
    "lex_sections",
    "render_tree",
]
