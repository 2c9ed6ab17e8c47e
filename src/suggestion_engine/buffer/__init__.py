"""Line buffer model, cursor types and text helpers."""

from .document import LineBuffer
from .state import CursorPosition, CursorRange
from .text import (
    detect_line_ending,
    line_body,
    line_terminator,
    offset_for_position,
    position_for_offset,
    split_lines,
    utf16_length,
)
from .validation import BufferValidationError, ensure_cursor, ensure_in_sync

__all__ = [
    "BufferValidationError",
    "CursorPosition",
    "CursorRange",
    "LineBuffer",
    "detect_line_ending",
    "ensure_cursor",
    "ensure_in_sync",
    "line_body",
    "line_terminator",
    "offset_for_position",
    "position_for_offset",
    "split_lines",
    "utf16_length",
]
