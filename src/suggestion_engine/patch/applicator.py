"""Apply modification lists to line arrays in one left-to-right pass."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .modification import Insert, Modification


class MalformedPatch(ValueError):
    """Raised when a modification list cannot be applied without corruption."""

    def __init__(self, message: str, *modifications: Modification) -> None:
        super().__init__(message)
        self.modifications = modifications


def _sort_key(modification: Modification) -> tuple[int, int]:
    # an insert sharing its index with a delete/replace runs first
    return (modification.start, 0 if isinstance(modification, Insert) else 1)


def normalize(
    modifications: Iterable[Modification], line_count: int
) -> List[Modification]:
    """Return ``modifications`` sorted, after checking bounds and overlaps."""

    ordered = sorted(modifications, key=_sort_key)
    for modification in ordered:
        if modification.end > line_count:
            raise MalformedPatch(
                f"{type(modification).__name__} at [{modification.start}, "
                f"{modification.end}) is out of bounds for {line_count} lines",
                modification,
            )
        if not isinstance(modification, Insert) and modification.start == modification.end:
            raise MalformedPatch(
                f"{type(modification).__name__} range is empty", modification
            )

    for previous, current in zip(ordered, ordered[1:]):
        if current.start < previous.end:
            raise MalformedPatch(
                f"Ranges [{previous.start}, {previous.end}) and "
                f"[{current.start}, {current.end}) overlap",
                previous,
                current,
            )
        if (
            isinstance(previous, Insert)
            and isinstance(current, Insert)
            and previous.at_line == current.at_line
        ):
            raise MalformedPatch(
                f"Two inserts target line {current.at_line}", previous, current
            )
    return ordered


def apply_modifications(
    lines: Sequence[str], modifications: Iterable[Modification]
) -> List[str]:
    """Return a new line list with ``modifications`` applied to ``lines``.

    Entries may come in any order: they are sorted by start line, with an
    insert running before a delete or replace at the same index. Overlapping
    ranges, two inserts at one index, empty delete or replace ranges and
    ranges past the end raise ``MalformedPatch``. ``lines`` is never mutated,
    so a failure leaves the caller's buffer exactly as it was.
    """

    ordered = normalize(modifications, len(lines))
    output: List[str] = []
    cursor = 0
    for modification in ordered:
        output.extend(lines[cursor : modification.start])
        output.extend(getattr(modification, "new_lines", ()))
        cursor = modification.end
    output.extend(lines[cursor:])
    return output


def shift_line(line: int, modifications: Iterable[Modification]) -> int:
    """Map an original line index onto its index after the patch.

    A line removed by a delete or replace maps to the first line that now
    occupies the removed range.
    """

    offset = 0
    for modification in sorted(modifications, key=_sort_key):
        if modification.start > line:
            break
        if isinstance(modification, Insert) or modification.end <= line:
            offset += modification.line_delta
            continue
        return modification.start + offset
    return line + offset


__all__ = ["MalformedPatch", "apply_modifications", "normalize", "shift_line"]
