"""Rendering and locating comment-delimited suggestion blocks."""

from __future__ import annotations

from typing import List, Optional, Sequence

from suggestion_engine.buffer import line_body, line_terminator
from suggestion_engine.patch import LineRange, Modification, deleted, replaced
from suggestion_engine.runtime.settings import SuggestionSettings

from .candidate import CompletionCandidate
from .session import PresentationState


def render_block(
    candidate: CompletionCandidate,
    *,
    index: int,
    count: int,
    settings: SuggestionSettings,
    line_ending: str,
) -> List[str]:
    """Header, candidate lines and footer, each ending with ``line_ending``."""

    block = [settings.header_for(index, count) + line_ending]
    block.extend(candidate.text_lines(line_ending))
    block.append(settings.footer + line_ending)
    return block


def _span_from(
    lines: Sequence[str], header: int, settings: SuggestionSettings
) -> Optional[LineRange]:
    """Header line through the first footer after it, if it closes."""

    for index in range(header + 1, len(lines)):
        body = line_body(lines[index])
        if body.startswith(settings.footer):
            return LineRange(header, index + 1)
        if body.startswith(settings.header_prefix):
            return None
    return None


def locate_block(
    lines: Sequence[str], state: PresentationState, settings: SuggestionSettings
) -> Optional[LineRange]:
    """Lines covered by the rendered block in ``lines``, or ``None``.

    Every header that is closed by a footer is a candidate span; the one
    starting nearest to the recorded anchor wins. Spans are measured from
    the markers, so lines the user added or removed inside the block go
    with it.
    """

    anchor = state.anchor_line_index
    spans = [
        span
        for span in (
            _span_from(lines, index, settings)
            for index, line in enumerate(lines)
            if line_body(line).startswith(settings.header_prefix)
        )
        if span is not None
    ]
    if not spans:
        return None
    return min(spans, key=lambda span: (abs(span.start - anchor), span.start))


def strip_modification(
    lines: Sequence[str], block: LineRange, state: PresentationState
) -> Modification:
    """Modification that removes ``block`` from ``lines``.

    When presenting had to terminate the last line and the block is still
    the tail of the buffer, that terminator is removed again; the line keeps
    whatever the user typed on it.
    """

    before = block.start - 1
    if (
        state.added_terminator
        and block.end == len(lines)
        and before >= 0
        and line_terminator(lines[before])
    ):
        return replaced(before, block.end, [line_body(lines[before])])
    return deleted(block.start, block.end)


__all__ = ["locate_block", "render_block", "strip_modification"]
