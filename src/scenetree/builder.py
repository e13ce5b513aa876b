"""Assemble node records into a rooted tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from scenetree.exceptions import DuplicateRootError, OrphanNodeError, UnresolvedConnectionError
from scenetree.interpreter import ParsedScene
from scenetree.schemas import ConnectionRecord, TreeNode

logger = logging.getLogger(__name__)

ROOT_PATH = ""
ROOT_REFERENCE = "."


@dataclass
class SceneTree:
    """A resolved scene hierarchy.

    Attributes:
        root: The parentless node.
        nodes_by_path: Every node keyed by its slash-joined path from the root.
        issues: Connections that were skipped because their source is unknown.
        node_count: Number of nodes placed in the tree.
    """

    root: TreeNode
    nodes_by_path: dict[str, TreeNode] = field(default_factory=dict)
    issues: list[UnresolvedConnectionError] = field(default_factory=list)
    node_count: int = 0

    def resolve(self, path: str) -> TreeNode | None:
        """Look up a node by a path relative to the root (``"."`` is the root)."""
        return self.nodes_by_path.get(normalize_path(path))


def normalize_path(path: str) -> str:
    """Map the root reference ``"."`` to the root path; other paths are kept."""
    return ROOT_PATH if path == ROOT_REFERENCE else path


def child_path(parent_path: str, name: str) -> str:
    return name if parent_path == ROOT_PATH else f"{parent_path}/{name}"


def build_tree(parsed: ParsedScene) -> SceneTree | None:
    """Link node records to their parents and attach connections.

    Parents must be declared before their children; resolution is a single
    pass in file order.

    Returns:
        The scene tree, or None when the scene declares no nodes.

    Raises:
        DuplicateRootError: If more than one node has no parent.
        OrphanNodeError: If a node's parent path is not yet declared.
    """
    if not parsed.nodes:
        return None

    tree: SceneTree | None = None
    nodes_by_path: dict[str, TreeNode] = {}

    for record in parsed.nodes:
        if record.is_root:
            if tree is not None:
                raise DuplicateRootError(record.name, line=record.line_number)
            root = TreeNode(record=record, path=ROOT_PATH)
            nodes_by_path[ROOT_PATH] = root
            tree = SceneTree(root=root, nodes_by_path=nodes_by_path)
            continue

        parent_path = normalize_path(record.parent_path)
        parent = nodes_by_path.get(parent_path)
        if parent is None:
            raise OrphanNodeError(record.parent_path, name=record.name, line=record.line_number)

        path = child_path(parent_path, record.name)
        if path in nodes_by_path:
            logger.debug("Duplicate node path '%s' at line %d", path, record.line_number)
        node = TreeNode(record=record, path=path)
        parent.children.append(node)
        nodes_by_path[path] = node

    # A scene whose first node has a parent fails above, so tree is set here.
    tree.node_count = len(parsed.nodes)
    for connection in parsed.connections:
        _attach_connection(tree, connection)
    return tree


def _attach_connection(tree: SceneTree, connection: ConnectionRecord) -> None:
    source = tree.resolve(connection.source_path)
    if source is None:
        issue = UnresolvedConnectionError(connection.source_path, connection=connection)
        logger.warning("Skipping connection: %s", issue)
        tree.issues.append(issue)
        return
    source.connections.append(connection)
