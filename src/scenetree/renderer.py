"""Render a scene tree with box-drawing connectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from scenetree.builder import SceneTree
from scenetree.exceptions import EmptyTreeError, SceneTreeError
from scenetree.schemas import ConnectionRecord, Property, SubResource, TreeNode

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "
DETAIL_MARKER = "* "


@dataclass
class RenderOptions:
    """Options for tree rendering.

    Attributes:
        show_type_suffix: Append `` (Type)`` to node lines when the node has a
            type that differs from its name.
        show_properties: Emit ``* key: value`` lines under each node.
        show_connections: Emit ``* connection: ...`` lines under source nodes.
        max_depth: Omit nodes deeper than this (the root is depth 0).
            None renders the whole tree.
        show_instances: Emit ``* (Type) path`` for nodes that instance
            another scene.
        resolve_resources: Print resource references as ``(Type) path`` and
            expand sub-resource properties; otherwise print values literally.
    """

    show_type_suffix: bool = True
    show_properties: bool = True
    show_connections: bool = True
    max_depth: int | None = None
    show_instances: bool = True
    resolve_resources: bool = True


def render_tree(tree: SceneTree | None, options: RenderOptions | None = None) -> str:
    """Render the tree depth-first, one line per node and detail.

    Raises:
        EmptyTreeError: If ``tree`` is None.
    """
    if tree is None:
        raise EmptyTreeError("scene has no nodes to render")
    opts = options or RenderOptions()

    lines = [_format_label(tree.root, opts)]
    lines.extend(_render_node(tree, tree.root, "", 0, opts))
    return "\n".join(lines) + "\n"


def format_report(issues: Iterable[SceneTreeError]) -> str:
    """Format skipped connections as a block printed after the tree."""
    messages = [str(issue) for issue in issues]
    if not messages:
        return ""
    lines = ["Skipped connections:"]
    lines.extend(f"  - {message}" for message in messages)
    return "\n".join(lines) + "\n"


def _render_node(
    tree: SceneTree, node: TreeNode, prefix: str, depth: int, opts: RenderOptions
) -> list[str]:
    """Render the detail lines and subtree below ``node``.

    ``prefix`` is the continuation shared by everything under ``node``.
    """
    children = _visible_children(node, depth, opts)
    detail_prefix = prefix + (PIPE if children else SPACE)
    lines = _render_details(tree, node, detail_prefix, opts)

    for i, child in enumerate(children):
        is_last = i == len(children) - 1
        connector = LAST_BRANCH if is_last else BRANCH
        lines.append(prefix + connector + _format_label(child, opts))
        extension = SPACE if is_last else PIPE
        lines.extend(_render_node(tree, child, prefix + extension, depth + 1, opts))
    return lines


def _visible_children(node: TreeNode, depth: int, opts: RenderOptions) -> list[TreeNode]:
    if opts.max_depth is not None and depth >= opts.max_depth:
        return []
    return node.children


def _format_label(node: TreeNode, opts: RenderOptions) -> str:
    if opts.show_type_suffix and node.type and node.type != node.name:
        return f"{node.name} ({node.type})"
    return node.name


def _render_details(
    tree: SceneTree, node: TreeNode, prefix: str, opts: RenderOptions
) -> list[str]:
    lines: list[str] = []
    instance = node.record.instance
    if opts.show_instances and instance is not None:
        lines.append(f"{prefix}{DETAIL_MARKER}{instance.label}")
    if opts.show_properties:
        for prop in node.record.properties:
            lines.extend(_render_property(prop, prefix, opts))
    if opts.show_connections:
        for connection in node.connections:
            lines.append(f"{prefix}{DETAIL_MARKER}connection: {_format_connection(tree, connection)}")
    return lines


def _render_property(prop: Property, prefix: str, opts: RenderOptions) -> list[str]:
    value = prop.display_value if opts.resolve_resources else prop.value
    lines = _value_lines(prefix, f"{DETAIL_MARKER}{prop.key}: ", value)

    if opts.resolve_resources and isinstance(prop.resource, SubResource):
        sub_properties = prop.resource.properties
        padding = " " * (len(prop.key) + 2)
        for i, sub in enumerate(sub_properties):
            is_last = i == len(sub_properties) - 1
            connector = LAST_BRANCH if is_last else BRANCH
            continuation = f"  {padding}{SPACE if is_last else PIPE}" + " " * (len(sub.key) + 2)
            lines.extend(
                _value_lines(
                    prefix, f"  {padding}{connector}{sub.key}: ", sub.display_value, continuation
                )
            )
    return lines


def _value_lines(prefix: str, lead: str, value: str, continuation: str | None = None) -> list[str]:
    """Lay out a possibly multi-line value, aligning continuations under it.

    ``continuation`` replaces the blank run under ``lead`` on later lines.
    """
    first, *rest = value.split("\n")
    indent = prefix + (" " * len(lead) if continuation is None else continuation)
    return [prefix + lead + first] + [(indent + line).rstrip() for line in rest]


def _format_connection(tree: SceneTree, connection: ConnectionRecord) -> str:
    source = _endpoint_name(tree, connection.source_path)
    target = _endpoint_name(tree, connection.target_path)
    return f"{source}:{connection.signal}() => {target}:{connection.method}()"


def _endpoint_name(tree: SceneTree, path: str) -> str:
    node = tree.resolve(path)
    if node is not None:
        return node.name
    return path.rsplit("/", 1)[-1]
