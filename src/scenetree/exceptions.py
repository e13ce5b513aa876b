"""Custom exceptions for scenetree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from scenetree.schemas import ConnectionRecord, Section


class SceneTreeError(Exception):
    """Base exception for scenetree operations."""


class ParseError(SceneTreeError):
    """Malformed section header or unterminated value."""

    def __init__(self, message: str, *, line: int) -> None:
        self.line = line
        super().__init__(f"line {line}: {message}")


class TreeBuildError(SceneTreeError):
    """Node records cannot be assembled into a single tree."""


class DuplicateRootError(TreeBuildError):
    """More than one node is declared without a parent."""

    def __init__(self, name: str, *, line: int | None = None) -> None:
        self.name = name
        self.line = line
        location = f"line {line}: " if line else ""
        super().__init__(f"{location}second root node '{name}' (only one node may omit parent)")


class OrphanNodeError(TreeBuildError):
    """A node refers to a parent path that was not declared before it."""

    def __init__(self, path: str, *, name: str | None = None, line: int | None = None) -> None:
        self.path = path
        self.name = name
        self.line = line
        location = f"line {line}: " if line else ""
        subject = f"node '{name}'" if name else "node"
        super().__init__(f"{location}{subject} has undeclared parent '{path}'")


class ConnectionIssue(SceneTreeError):
    """Recoverable problem with a signal connection; the connection is skipped."""

    line: int | None = None


class MalformedConnectionError(ConnectionIssue):
    """Connection section lacks a required attribute."""

    def __init__(self, section: Section, missing: Iterable[str]) -> None:
        self.section = section
        self.missing = tuple(missing)
        self.line = section.line_number
        super().__init__(
            f"line {section.line_number}: connection missing {', '.join(self.missing)}"
        )


class UnresolvedConnectionError(ConnectionIssue):
    """Connection source path does not match any node in the tree."""

    def __init__(self, path: str, *, connection: ConnectionRecord | None = None) -> None:
        self.path = path
        self.connection = connection
        self.line = connection.line_number if connection is not None else None
        location = ""
        if connection is not None and connection.line_number:
            location = f"line {connection.line_number}: "
        signal = f" for signal '{connection.signal}'" if connection is not None else ""
        super().__init__(f"{location}unknown source node '{path}'{signal}")


class EmptyTreeError(SceneTreeError):
    """Rendering was requested without a tree (the scene declares no nodes)."""
