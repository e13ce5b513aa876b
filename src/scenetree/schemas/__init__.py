"""Shared schemas for scenetree."""

from scenetree.schemas.result import SceneTreeResult
from scenetree.schemas.scene import (
    ConnectionRecord,
    ExtResource,
    NodeRecord,
    Property,
    SubResource,
)
from scenetree.schemas.sections import PREAMBLE_TAG, Section
from scenetree.schemas.tree import TreeNode

__all__ = [
    "PREAMBLE_TAG",
    "ConnectionRecord",
    "ExtResource",
    "NodeRecord",
    "Property",
    "SceneTreeResult",
    "Section",
    "SubResource",
    "TreeNode",
]
