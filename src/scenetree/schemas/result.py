"""Inspection output model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SceneTreeResult(BaseModel):
    """Final inspection output."""

    tree: str
    report: str = ""
    warnings: list[str] = Field(default_factory=list)
    node_count: int = 0

    @property
    def output(self) -> str:
        """Tree followed by the skipped-connection report, if any."""
        if not self.report:
            return self.tree
        return f"{self.tree}\n{self.report}"
