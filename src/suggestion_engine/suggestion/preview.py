"""Panel-facing view of the active presentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from suggestion_engine.buffer import line_body

from .session import PresentationState


@dataclass(frozen=True, slots=True)
class SuggestionPreview:
    start_line_index: int
    code: Tuple[str, ...]
    suggestion_count: int
    current_suggestion_index: int

    @classmethod
    def from_state(cls, state: PresentationState) -> "SuggestionPreview":
        candidate = state.current_candidate
        return cls(
            start_line_index=state.anchor_line_index,
            code=tuple(line_body(line) for line in candidate.text_lines()),
            suggestion_count=state.count,
            current_suggestion_index=state.current_index,
        )
