"""Line buffer value type used by every suggestion operation."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence, Tuple

from .state import CursorPosition, CursorRange
from .text import detect_line_ending, split_lines


@dataclass(frozen=True, slots=True)
class LineBuffer:
    """Immutable snapshot of editor text as a list of terminated lines.

    Each line keeps its own terminator, except possibly the last one, so the
    flat content is always ``"".join(lines)`` and cannot drift from the
    line array.
    """

    lines: Tuple[str, ...] = ()
    cursor: CursorPosition = field(default_factory=CursorPosition)
    selections: Tuple[CursorRange, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))
        object.__setattr__(self, "selections", tuple(self.selections))

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        cursor: CursorPosition | None = None,
        selections: Iterable[CursorRange] = (),
    ) -> "LineBuffer":
        return cls(
            lines=tuple(split_lines(text)),
            cursor=cursor or CursorPosition(),
            selections=tuple(selections),
        )

    @property
    def content(self) -> str:
        return "".join(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def line_ending(self) -> str:
        return detect_line_ending(self.lines)

    def with_lines(self, lines: Sequence[str]) -> "LineBuffer":
        return replace(self, lines=tuple(lines))

    def __len__(self) -> int:
        return len(self.lines)
