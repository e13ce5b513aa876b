"""Interpret lexed sections into node, connection and resource records."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from scenetree.exceptions import ConnectionIssue, MalformedConnectionError, ParseError
from scenetree.resource_utils import ext_resource_id, parse_string_array, sub_resource_id
from scenetree.schemas import (
    ConnectionRecord,
    ExtResource,
    NodeRecord,
    Property,
    Section,
    SubResource,
)

logger = logging.getLogger(__name__)

NODE_TAG = "node"
CONNECTION_TAG = "connection"
EXT_RESOURCE_TAG = "ext_resource"
SUB_RESOURCE_TAG = "sub_resource"

_CONNECTION_FIELDS = ("signal", "from", "to", "method")
_PROPERTY_RE = re.compile(r"^(?P<key>[A-Za-z0-9_][A-Za-z0-9_/:.\-]*)\s*=\s*(?P<value>.*)$", re.DOTALL)
_COMMENT_PREFIXES = (";", "#")


@dataclass
class ParsedScene:
    """Records extracted from a scene file, in declaration order."""

    nodes: list[NodeRecord] = field(default_factory=list)
    connections: list[ConnectionRecord] = field(default_factory=list)
    ext_resources: dict[str, ExtResource] = field(default_factory=dict)
    sub_resources: dict[str, SubResource] = field(default_factory=dict)
    issues: list[ConnectionIssue] = field(default_factory=list)


def interpret_sections(sections: Iterable[Section]) -> ParsedScene:
    """Classify each section by tag and build the matching records.

    Resources are only visible to sections declared after them, as in the
    file format itself.

    Raises:
        ParseError: If a node section has no name.
    """
    parsed = ParsedScene()
    for section in sections:
        if section.tag == NODE_TAG:
            parsed.nodes.append(_interpret_node(section, parsed))
        elif section.tag == CONNECTION_TAG:
            try:
                parsed.connections.append(_interpret_connection(section))
            except MalformedConnectionError as exc:
                logger.warning("Skipping connection: %s", exc)
                parsed.issues.append(exc)
        elif section.tag == EXT_RESOURCE_TAG:
            resource = _interpret_ext_resource(section)
            if resource is not None:
                parsed.ext_resources[resource.id] = resource
        elif section.tag == SUB_RESOURCE_TAG:
            sub_resource = _interpret_sub_resource(section, parsed)
            if sub_resource is not None:
                parsed.sub_resources[sub_resource.id] = sub_resource
        else:
            logger.debug("Ignoring [%s] section at line %d", section.tag, section.line_number)
    return parsed


def _interpret_node(section: Section, parsed: ParsedScene) -> NodeRecord:
    attributes = section.attributes
    name = attributes.get("name", "")
    if not name:
        raise ParseError("node section has no name", line=section.line_number)

    instance = None
    instance_value = attributes.get("instance")
    if instance_value:
        res_id = ext_resource_id(instance_value)
        instance = parsed.ext_resources.get(res_id) if res_id else None
        if instance is None:
            logger.warning(
                "Node '%s' at line %d instances unknown resource %s",
                name,
                section.line_number,
                instance_value,
            )

    index = attributes.get("index")
    return NodeRecord(
        name=name,
        type=attributes.get("type") or None,
        parent_path=attributes.get("parent") or None,
        instance=instance,
        index=int(index) if index and index.lstrip("-").isdigit() else None,
        groups=parse_string_array(attributes.get("groups", "")),
        attributes=dict(attributes),
        properties=_interpret_properties(section, parsed),
        line_number=section.line_number,
    )


def _interpret_connection(section: Section) -> ConnectionRecord:
    attributes = section.attributes
    missing = [name for name in _CONNECTION_FIELDS if not attributes.get(name)]
    if missing:
        raise MalformedConnectionError(section, missing)

    flags = attributes.get("flags")
    return ConnectionRecord(
        signal=attributes["signal"],
        source_path=attributes["from"],
        target_path=attributes["to"],
        method=attributes["method"],
        flags=int(flags) if flags and flags.isdigit() else None,
        line_number=section.line_number,
    )


def _interpret_ext_resource(section: Section) -> ExtResource | None:
    attributes = section.attributes
    res_id = attributes.get("id")
    if not res_id:
        logger.debug("Ignoring ext_resource without id at line %d", section.line_number)
        return None
    return ExtResource(
        id=res_id,
        type=attributes.get("type", ""),
        path=attributes.get("path", ""),
        uid=attributes.get("uid"),
    )


def _interpret_sub_resource(section: Section, parsed: ParsedScene) -> SubResource | None:
    attributes = section.attributes
    res_id = attributes.get("id")
    if not res_id:
        logger.debug("Ignoring sub_resource without id at line %d", section.line_number)
        return None
    return SubResource(
        id=res_id,
        type=attributes.get("type", ""),
        properties=_interpret_properties(section, parsed),
    )


def _interpret_properties(section: Section, parsed: ParsedScene) -> tuple[Property, ...]:
    properties: list[Property] = []
    for entry in section.body:
        stripped = entry.strip()
        if not stripped or stripped.startswith(_COMMENT_PREFIXES):
            continue
        match = _PROPERTY_RE.match(stripped)
        if not match:
            logger.debug(
                "Skipping unrecognized entry %r in [%s] section at line %d",
                stripped,
                section.tag,
                section.line_number,
            )
            continue
        value = match.group("value").strip()
        properties.append(
            Property(key=match.group("key"), value=value, resource=_resolve_resource(value, parsed))
        )
    return tuple(properties)


def _resolve_resource(value: str, parsed: ParsedScene) -> ExtResource | SubResource | None:
    res_id = ext_resource_id(value)
    if res_id is not None:
        return parsed.ext_resources.get(res_id)
    res_id = sub_resource_id(value)
    if res_id is not None:
        return parsed.sub_resources.get(res_id)
    return None
