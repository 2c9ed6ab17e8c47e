"""Line-level edit primitives.

A modification list always addresses the line indices of the buffer it is
applied to, before any of its entries run. The applicator takes care of
offsetting later entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple, Union


@dataclass(frozen=True, slots=True)
class LineRange:
    """Half-open ``[start, end)`` range of line indices."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid line range [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        return self.end - self.start

    def __contains__(self, line: object) -> bool:
        return isinstance(line, int) and self.start <= line < self.end


def _as_lines(lines: Iterable[str]) -> Tuple[str, ...]:
    if isinstance(lines, str):
        raise TypeError("new_lines must be a sequence of lines, not a string")
    return tuple(lines)


@dataclass(frozen=True, slots=True)
class Insert:
    at_line: int
    new_lines: Tuple[str, ...]

    def __post_init__(self) -> None:
        if self.at_line < 0:
            raise ValueError(f"Invalid insert position {self.at_line}")
        object.__setattr__(self, "new_lines", _as_lines(self.new_lines))

    @property
    def start(self) -> int:
        return self.at_line

    @property
    def end(self) -> int:
        return self.at_line

    @property
    def line_delta(self) -> int:
        return len(self.new_lines)


@dataclass(frozen=True, slots=True)
class Delete:
    range: LineRange

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end

    @property
    def line_delta(self) -> int:
        return -self.range.length


@dataclass(frozen=True, slots=True)
class Replace:
    range: LineRange
    new_lines: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "new_lines", _as_lines(self.new_lines))

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end

    @property
    def line_delta(self) -> int:
        return len(self.new_lines) - self.range.length


Modification = Union[Insert, Delete, Replace]


def inserted(at_line: int, new_lines: Iterable[str]) -> Insert:
    return Insert(at_line=at_line, new_lines=tuple(new_lines))


def deleted(start: int, end: int) -> Delete:
    return Delete(range=LineRange(start, end))


def replaced(start: int, end: int, new_lines: Iterable[str]) -> Replace:
    return Replace(range=LineRange(start, end), new_lines=tuple(new_lines))


__all__ = [
    "Delete",
    "Insert",
    "LineRange",
    "Modification",
    "Replace",
    "deleted",
    "inserted",
    "replaced",
]
