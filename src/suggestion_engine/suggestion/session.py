"""Per-document presentation state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterator, Optional, Tuple

from .candidate import CompletionCandidate


@dataclass(frozen=True, slots=True)
class PresentationState:
    """What is currently rendered for one document.

    ``anchor_line_index`` is the first line of the rendered block in the
    post-presentation buffer and ``injected_line_count`` its rendered length.
    ``added_terminator`` is set when the block was appended after an
    unterminated last line, which had to gain a line terminator first.
    ``line_drift`` counts how many lines the host inserted (or removed) above
    the block since the candidates were produced.
    """

    candidates: Tuple[CompletionCandidate, ...]
    current_index: int
    anchor_line_index: int
    injected_line_count: int
    added_terminator: bool = False
    line_drift: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "candidates", tuple(self.candidates))
        if not self.candidates:
            raise ValueError("PresentationState requires at least one candidate")
        if not 0 <= self.current_index < len(self.candidates):
            raise ValueError(f"current_index {self.current_index} out of range")

    @property
    def count(self) -> int:
        return len(self.candidates)

    @property
    def current_candidate(self) -> CompletionCandidate:
        return self.candidates[self.current_index]

    def relocated(self, anchor_line_index: int) -> "PresentationState":
        drift = anchor_line_index - self.anchor_line_index
        return replace(
            self,
            anchor_line_index=anchor_line_index,
            line_drift=self.line_drift + drift,
        )


class PresentationStore:
    """Keyed store holding at most one presentation per document."""

    def __init__(self) -> None:
        self._states: Dict[str, PresentationState] = {}

    def get(self, document_id: str) -> Optional[PresentationState]:
        return self._states.get(document_id)

    def put(self, document_id: str, state: PresentationState) -> None:
        self._states[document_id] = state

    def pop(self, document_id: str) -> Optional[PresentationState]:
        return self._states.pop(document_id, None)

    def clear(self) -> None:
        self._states.clear()

    def documents(self) -> Iterator[str]:
        return iter(tuple(self._states))

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._states

    def __len__(self) -> int:
        return len(self._states)


__all__ = ["PresentationState", "PresentationStore"]
