"""Records interpreted from scene sections."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class ExtResource(BaseModel):
    """An ``[ext_resource]`` declaration. ``uid`` is metadata and is not rendered."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str = ""
    path: str = ""
    uid: str | None = None

    @property
    def label(self) -> str:
        return f"({self.type}) {self.path}"


class SubResource(BaseModel):
    """A ``[sub_resource]`` declaration and its own properties."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str = ""
    properties: tuple["Property", ...] = ()

    @property
    def label(self) -> str:
        return f"({self.type})"


class Property(BaseModel):
    """A ``key = value`` body line.

    ``value`` is the literal right-hand side. ``display_value`` differs from it
    only when the value is a resource reference resolved within the file.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    value: str
    resource: Union[ExtResource, SubResource, None] = None

    @property
    def display_value(self) -> str:
        if self.resource is None:
            return self.value
        return self.resource.label


class NodeRecord(BaseModel):
    """One ``[node]`` section.

    ``index``, ``groups`` and ``attributes`` (every raw header attribute,
    ``owner`` included) are record metadata for library callers; the tree
    renderer does not display them.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: str | None = None
    parent_path: str | None = None
    instance: ExtResource | None = None
    index: int | None = None
    groups: tuple[str, ...] = ()
    attributes: dict[str, str] = Field(default_factory=dict)
    properties: tuple[Property, ...] = ()
    line_number: int = 0

    @property
    def is_root(self) -> bool:
        return self.parent_path is None


class ConnectionRecord(BaseModel):
    """One ``[connection]`` section wiring a signal to a handler method.

    ``flags`` is kept as metadata and is not rendered.
    """

    model_config = ConfigDict(frozen=True)

    signal: str
    source_path: str
    target_path: str
    method: str
    flags: int | None = None
    line_number: int = 0


SubResource.model_rebuild()
Property.model_rebuild()
