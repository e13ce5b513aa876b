"""Helpers for inline resource references and literal arrays."""

from __future__ import annotations

import re

# Godot 3 writes ExtResource( 1 ), Godot 4 writes ExtResource("1_abcde").
_EXT_RESOURCE_RE = re.compile(r'^ExtResource\(\s*"?(?P<id>[\w\-]+)"?\s*\)$')
_SUB_RESOURCE_RE = re.compile(r'^SubResource\(\s*"?(?P<id>[\w\-]+)"?\s*\)$')
_QUOTED_RE = re.compile(r'"((?:[^"\\]|\\.)*)"')


def ext_resource_id(value: str) -> str | None:
    """Return the id of an ``ExtResource(...)`` reference, or None."""
    match = _EXT_RESOURCE_RE.match(value.strip())
    return match.group("id") if match else None


def sub_resource_id(value: str) -> str | None:
    """Return the id of a ``SubResource(...)`` reference, or None."""
    match = _SUB_RESOURCE_RE.match(value.strip())
    return match.group("id") if match else None


def parse_string_array(value: str) -> tuple[str, ...]:
    """Extract the quoted items of a literal such as ``["enemies", &"boss"]``."""
    return tuple(item.replace('\\"', '"') for item in _QUOTED_RE.findall(value))
