"""Resolved scene tree model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from scenetree.schemas.scene import ConnectionRecord, NodeRecord


class TreeNode(BaseModel):
    """A node placed in the hierarchy.

    ``path`` is the slash-joined chain of names from the root (the root itself
    is ``""``). Children and connections keep file declaration order.
    """

    record: NodeRecord
    path: str = ""
    children: list["TreeNode"] = Field(default_factory=list)
    connections: list[ConnectionRecord] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def type(self) -> str | None:
        return self.record.type
