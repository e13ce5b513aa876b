"""Lexed section model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

PREAMBLE_TAG = "__preamble__"


class Section(BaseModel):
    """One bracketed block of a scene file.

    Attributes:
        tag: Header tag, e.g. ``node`` or ``connection``. Body lines found
            before the first header use ``PREAMBLE_TAG``.
        attributes: Header attributes in declaration order. Quoted values are
            unquoted; unquoted values are kept verbatim.
        body: Logical body lines. A value spanning several physical lines is
            a single entry joined with newlines.
        line_number: 1-based line of the header (0 for the preamble).
    """

    model_config = ConfigDict(frozen=True)

    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)
    body: tuple[str, ...] = ()
    line_number: int = Field(default=0, ge=0)

    @property
    def is_preamble(self) -> bool:
        return self.tag == PREAMBLE_TAG
