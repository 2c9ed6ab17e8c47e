"""Cursor relocation rules applied around suggestion blocks."""

from __future__ import annotations

from suggestion_engine.buffer import CursorPosition
from suggestion_engine.patch import LineRange, deleted, inserted, shift_line


def cursor_after_insert(
    cursor: CursorPosition, anchor: int, line_count: int
) -> CursorPosition:
    """Keep the cursor on the same text once ``line_count`` lines land at ``anchor``.

    A cursor on the anchor line itself moves below the block.
    """

    line = shift_line(cursor.line, [inserted(anchor, [""] * line_count)])
    return CursorPosition(line, cursor.character)


def cursor_after_removal(
    cursor: CursorPosition, block: LineRange, *, reset_column: bool = True
) -> CursorPosition:
    if cursor.line < block.start:
        return cursor
    if cursor.line in block:
        # inside the removed block: back to the line above it
        line = max(block.start - 1, 0)
        return CursorPosition(line, 0 if reset_column else cursor.character)
    line = shift_line(cursor.line, [deleted(block.start, block.end)])
    return CursorPosition(line, cursor.character)


__all__ = ["cursor_after_insert", "cursor_after_removal"]
