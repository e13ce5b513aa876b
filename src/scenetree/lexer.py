"""Split scene text into bracketed sections."""

from __future__ import annotations

import re
from typing import Iterator

from scenetree.exceptions import ParseError
from scenetree.schemas import PREAMBLE_TAG, Section

_TAG_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_KEY_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_/.\-]*")
_OPENERS = "([{"
_CLOSERS = ")]}"
_COMMENT_PREFIXES = (";", "#")


class SectionStream:
    """Lazy, restartable sequence of sections.

    Every iteration lexes the text again from the start, so a stream can be
    walked any number of times and errors surface only when reached.
    """

    def __init__(self, text: str) -> None:
        self._text = text

    def __iter__(self) -> Iterator[Section]:
        return _iter_sections(self._text)


def lex_sections(text: str) -> SectionStream:
    """Return the sections of ``text`` in file order."""
    return SectionStream(text)


def scan_balance(text: str, depth: int = 0, in_string: bool = False) -> tuple[int, bool]:
    """Advance bracket depth and string state across ``text``.

    Brackets inside double-quoted strings are ignored. Surplus closers never
    push the depth below zero.
    """
    escaped = False
    for char in text:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS and depth > 0:
            depth -= 1
    return depth, in_string


def parse_header(line: str, line_number: int) -> tuple[str, dict[str, str]]:
    """Parse ``[tag key="value" key=Bare(...)]`` into its tag and attributes.

    Raises:
        ParseError: If the header is malformed.
    """
    text = line.strip()
    match = _TAG_RE.match(text, 1)
    if not match:
        raise ParseError("section header has no tag", line=line_number)
    tag = match.group()
    pos = match.end()

    attributes: dict[str, str] = {}
    while True:
        pos = _skip_whitespace(text, pos)
        if pos >= len(text):
            raise ParseError(f"section header '{tag}' is missing closing ']'", line=line_number)
        if text[pos] == "]":
            trailing = text[pos + 1 :].strip()
            if trailing:
                raise ParseError(f"unexpected text after section header: {trailing!r}", line=line_number)
            return tag, attributes

        key_match = _KEY_RE.match(text, pos)
        if not key_match:
            raise ParseError(f"invalid attribute at column {pos + 1}", line=line_number)
        key = key_match.group()
        pos = key_match.end()
        if pos >= len(text) or text[pos] != "=":
            raise ParseError(f"attribute '{key}' has no value", line=line_number)
        pos += 1

        if pos < len(text) and text[pos] == '"':
            value, pos = _read_quoted(text, pos, key, line_number)
        else:
            value, pos = _read_bare(text, pos, key, line_number)
        attributes[key] = value


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _read_quoted(text: str, pos: int, key: str, line_number: int) -> tuple[str, int]:
    """Read a double-quoted value starting at the opening quote."""
    chars: list[str] = []
    i = pos + 1
    while i < len(text):
        char = text[i]
        if char == "\\" and i + 1 < len(text):
            nxt = text[i + 1]
            if nxt in ('"', "\\"):
                chars.append(nxt)
            else:
                chars.append(char + nxt)
            i += 2
            continue
        if char == '"':
            return "".join(chars), i + 1
        chars.append(char)
        i += 1
    raise ParseError(f"unterminated quoted value for attribute '{key}'", line=line_number)


def _read_bare(text: str, pos: int, key: str, line_number: int) -> tuple[str, int]:
    """Read an unquoted value up to whitespace or ']' at nesting depth 0."""
    start = pos
    depth = 0
    in_string = False
    escaped = False
    while pos < len(text):
        char = text[pos]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            if depth == 0:
                if char == "]":
                    break
                raise ParseError(f"unbalanced '{char}' in attribute '{key}'", line=line_number)
            depth -= 1
        elif char.isspace() and depth == 0:
            break
        pos += 1

    if in_string:
        raise ParseError(f"unterminated quoted value for attribute '{key}'", line=line_number)
    if depth:
        raise ParseError(f"unbalanced brackets in attribute '{key}'", line=line_number)
    value = text[start:pos]
    if not value:
        raise ParseError(f"attribute '{key}' has no value", line=line_number)
    return value, pos


def _is_comment(line: str) -> bool:
    return line.lstrip().startswith(_COMMENT_PREFIXES)


def _iter_sections(text: str) -> Iterator[Section]:
    tag = PREAMBLE_TAG
    attributes: dict[str, str] = {}
    header_line = 0
    body: list[str] = []

    # Physical lines of a value whose brackets or string are still open.
    pending: list[str] = []
    pending_start = 0
    depth = 0
    in_string = False

    for number, line in enumerate(text.splitlines(), start=1):
        if pending:
            pending.append(line)
            depth, in_string = scan_balance(line, depth, in_string)
            if depth == 0 and not in_string:
                body.append("\n".join(pending))
                pending = []
            continue

        if line.lstrip().startswith("["):
            if tag != PREAMBLE_TAG or any(entry.strip() for entry in body):
                yield Section(tag=tag, attributes=attributes, body=tuple(body), line_number=header_line)
            tag, attributes = parse_header(line, number)
            header_line = number
            body = []
            continue

        if _is_comment(line):
            body.append(line)
            continue

        depth, in_string = scan_balance(line)
        if depth or in_string:
            pending = [line]
            pending_start = number
        else:
            body.append(line)

    if pending:
        raise ParseError("unterminated multi-line value", line=pending_start)
    if tag != PREAMBLE_TAG or any(entry.strip() for entry in body):
        yield Section(tag=tag, attributes=attributes, body=tuple(body), line_number=header_line)
