"""Validation helpers shared across buffer services."""

from __future__ import annotations

from typing import Sequence

from .document import LineBuffer
from .state import CursorPosition


class BufferValidationError(RuntimeError):
    """Raised when callers provide inconsistent snapshots or cursor info."""

    def __init__(self, message: str, *, cursor: CursorPosition | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_cursor(buffer: LineBuffer, cursor: CursorPosition) -> CursorPosition:
    """Reject cursors whose row lies past the end of ``buffer``.

    Columns are not checked: hosts routinely report a column past the end of
    a short line (virtual space), and the cursor policies only move rows.
    """

    if cursor.line > buffer.line_count:
        raise BufferValidationError("Row out of range", cursor=cursor)
    return cursor


def ensure_in_sync(content: str, lines: Sequence[str]) -> None:
    if "".join(lines) != content:
        raise BufferValidationError("Editor content does not match its lines")
