"""Snapshots exchanged with the editor integration layer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence, Tuple

from suggestion_engine.buffer import (
    CursorPosition,
    CursorRange,
    LineBuffer,
    ensure_cursor,
    ensure_in_sync,
    split_lines,
)
from suggestion_engine.patch import Modification


@dataclass(frozen=True, slots=True)
class EditorContent:
    """What the host editor reports about a document."""

    content: str
    lines: Tuple[str, ...]
    cursor_position: CursorPosition = field(default_factory=CursorPosition)
    selections: Tuple[CursorRange, ...] = ()
    tab_size: int = 4
    indent_size: int = 4
    uses_tabs_for_indentation: bool = False
    uti: str = ""
    document_id: str = "default"

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))
        object.__setattr__(self, "selections", tuple(self.selections))
        ensure_in_sync(self.content, self.lines)

    @classmethod
    def from_lines(
        cls,
        lines: Sequence[str],
        *,
        cursor: Optional[CursorPosition] = None,
        document_id: str = "default",
        selections: Iterable[CursorRange] = (),
    ) -> "EditorContent":
        return cls(
            content="".join(lines),
            lines=tuple(lines),
            cursor_position=cursor or CursorPosition(),
            selections=tuple(selections),
            document_id=document_id,
        )

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        cursor: Optional[CursorPosition] = None,
        document_id: str = "default",
    ) -> "EditorContent":
        return cls.from_lines(split_lines(text), cursor=cursor, document_id=document_id)

    def to_buffer(self) -> LineBuffer:
        buffer = LineBuffer(
            lines=self.lines, cursor=self.cursor_position, selections=self.selections
        )
        ensure_cursor(buffer, self.cursor_position)
        return buffer


@dataclass(frozen=True, slots=True)
class UpdatedContent:
    """Result of an engine operation.

    ``modifications`` address the lines of the snapshot that was passed in;
    ``lines`` is the outcome of applying them and ``content`` is derived
    from ``lines`` so the two always agree.
    """

    lines: Tuple[str, ...]
    modifications: Tuple[Modification, ...]
    new_cursor: CursorPosition

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))
        object.__setattr__(self, "modifications", tuple(self.modifications))

    @property
    def content(self) -> str:
        return "".join(self.lines)

    def to_editor(self, previous: EditorContent) -> EditorContent:
        """Snapshot the host would report once it applied this result."""

        return replace(
            previous,
            content=self.content,
            lines=self.lines,
            cursor_position=self.new_cursor,
            selections=(),
        )
