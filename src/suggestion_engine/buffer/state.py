"""Cursor and selection value types shared by buffers and suggestions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class CursorPosition:
    """Zero-based ``(line, character)`` position.

    ``character`` counts UTF-16 code units within the line, excluding the
    line terminator, which is how editors report columns.
    """

    line: int = 0
    character: int = 0

    def __post_init__(self) -> None:
        if self.line < 0 or self.character < 0:
            raise ValueError(
                f"CursorPosition must be non-negative, got ({self.line}, {self.character})"
            )


@dataclass(frozen=True, slots=True)
class CursorRange:
    start: CursorPosition
    end: CursorPosition

    @classmethod
    def at(cls, line: int, character: int = 0) -> "CursorRange":
        position = CursorPosition(line, character)
        return cls(start=position, end=position)
