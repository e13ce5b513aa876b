"""Inspection pipeline: scene text -> rendered tree."""

from __future__ import annotations

import logging

from scenetree.builder import build_tree
from scenetree.exceptions import ConnectionIssue
from scenetree.interpreter import interpret_sections
from scenetree.lexer import lex_sections
from scenetree.renderer import RenderOptions, format_report, render_tree
from scenetree.schemas import SceneTreeResult

logger = logging.getLogger(__name__)


def inspect_scene(text: str, options: RenderOptions | None = None) -> SceneTreeResult:
    """Parse scene text and render its node tree.

    Connections that cannot be interpreted or attached are skipped and listed
    in the result's report instead of failing the run.

    Args:
        text: Raw contents of a scene file.
        options: Display options. Uses defaults if None.

    Returns:
        The rendered tree, the skipped-connection report and its messages.

    Raises:
        ParseError: If a section header or value is malformed.
        DuplicateRootError: If more than one node has no parent.
        OrphanNodeError: If a node is declared before its parent.
        EmptyTreeError: If the scene declares no nodes.
    """
    opts = options or RenderOptions()

    parsed = interpret_sections(lex_sections(text))
    tree = build_tree(parsed)
    rendered = render_tree(tree, opts)

    issues: list[ConnectionIssue] = sorted(
        [*parsed.issues, *tree.issues], key=lambda issue: issue.line or 0
    )
    if issues:
        logger.info("Skipped %d connection(s)", len(issues))

    return SceneTreeResult(
        tree=rendered,
        report=format_report(issues),
        warnings=[str(issue) for issue in issues],
        node_count=tree.node_count,
    )
