"""Line splitting and column arithmetic helpers.

Editors report columns in UTF-16 code units while Python indexes strings by
code point, so every conversion between a cursor and a string offset goes
through this module.
"""

from __future__ import annotations

import re
from typing import List, Sequence

from .state import CursorPosition

_LINE_PATTERN = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+")
TERMINATORS = ("\r\n", "\n", "\r")


def split_lines(text: str) -> List[str]:
    """Split ``text`` into lines, each keeping its own terminator.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line, so ``"".join`` of the
    result always gives back ``text``.
    """

    return _LINE_PATTERN.findall(text)


def line_terminator(line: str) -> str:
    for terminator in TERMINATORS:
        if line.endswith(terminator):
            return terminator
    return ""


def line_body(line: str) -> str:
    terminator = line_terminator(line)
    return line[: len(line) - len(terminator)] if terminator else line


def detect_line_ending(lines: Sequence[str], default: str = "\n") -> str:
    for line in lines:
        terminator = line_terminator(line)
        if terminator:
            return terminator
    return default


def utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def index_from_utf16(text: str, character: int) -> int:
    """Map a UTF-16 column onto a code point index, clamped to ``text``."""

    units = 0
    for index, char in enumerate(text):
        if units >= character:
            return index
        units += 2 if ord(char) > 0xFFFF else 1
    return len(text)


def utf16_from_index(text: str, index: int) -> int:
    return utf16_length(text[:index])


def offset_for_position(lines: Sequence[str], position: CursorPosition) -> int:
    """Flat string offset of ``position``; positions past the end clamp."""

    if position.line >= len(lines):
        return sum(len(line) for line in lines)
    offset = sum(len(line) for line in lines[: position.line])
    body = line_body(lines[position.line])
    return offset + index_from_utf16(body, position.character)


def position_for_offset(lines: Sequence[str], offset: int) -> CursorPosition:
    running = 0
    for row, line in enumerate(lines):
        body = line_body(line)
        if offset <= running + len(body):
            return CursorPosition(row, utf16_from_index(body, offset - running))
        running += len(line)
        if offset < running:
            # inside a two character terminator
            return CursorPosition(row, utf16_length(body))
    if lines and not line_terminator(lines[-1]):
        return CursorPosition(len(lines) - 1, utf16_length(lines[-1]))
    return CursorPosition(len(lines), 0)


__all__ = [
    "TERMINATORS",
    "detect_line_ending",
    "index_from_utf16",
    "line_body",
    "line_terminator",
    "offset_for_position",
    "position_for_offset",
    "split_lines",
    "utf16_from_index",
    "utf16_length",
]
