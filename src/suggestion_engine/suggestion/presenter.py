"""Render completion candidates into the buffer as delimited blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from suggestion_engine.buffer import (
    CursorPosition,
    detect_line_ending,
    line_terminator,
)
from suggestion_engine.patch import (
    Modification,
    apply_modifications,
    diff_lines,
    inserted,
    replaced,
)
from suggestion_engine.runtime import telemetry
from suggestion_engine.runtime.settings import SuggestionSettings

from .candidate import CompletionCandidate
from .cursor import cursor_after_insert, cursor_after_removal
from .editor import EditorContent, UpdatedContent
from .markup import locate_block, render_block, strip_modification
from .session import PresentationState, PresentationStore


@dataclass(slots=True)
class StrippedView:
    """A snapshot with the active block (if any) taken out."""

    lines: Tuple[str, ...]
    cursor: CursorPosition
    state: Optional[PresentationState]
    line_drift: int = 0
    removal: Optional[Modification] = None


class SuggestionPresenter:
    """Turns candidates into an ``UpdatedContent`` and records the state."""

    def __init__(
        self,
        store: PresentationStore,
        settings: SuggestionSettings,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.store = store
        self.settings = settings
        self._logger_name = logger_name

    def strip(self, editor: EditorContent) -> StrippedView:
        """Remove the block recorded for ``editor``'s document, if present.

        The store is not touched; a block that can no longer be found is
        reported through ``state=None``.
        """

        state = self.store.get(editor.document_id)
        if state is None:
            return StrippedView(editor.lines, editor.cursor_position, None)

        block = locate_block(editor.lines, state, self.settings)
        if block is None:
            telemetry.record_event(
                "suggestion.stale_presentation",
                document=editor.document_id,
                level="warning",
                logger_name=self._logger_name,
            )
            return StrippedView(editor.lines, editor.cursor_position, None)

        drift = block.start - state.anchor_line_index
        if drift:
            telemetry.record_event(
                "suggestion.block_drifted",
                document=editor.document_id,
                level="warning",
                data={"drift": drift},
                logger_name=self._logger_name,
            )
            state = state.relocated(block.start)
        if block.length != state.injected_line_count:
            telemetry.record_event(
                "suggestion.block_resized",
                document=editor.document_id,
                level="debug",
                data={"rendered": state.injected_line_count, "found": block.length},
                logger_name=self._logger_name,
            )

        removal = strip_modification(editor.lines, block, state)
        lines = apply_modifications(editor.lines, [removal])
        cursor = cursor_after_removal(
            editor.cursor_position,
            block,
            reset_column=self.settings.reset_column_inside_block,
        )
        return StrippedView(tuple(lines), cursor, state, state.line_drift, removal)

    def anchor_for(
        self, candidate: CompletionCandidate, lines: Sequence[str], line_drift: int = 0
    ) -> int:
        """Blocks go right below the candidate's start line."""

        return max(min(candidate.range.start.line + line_drift + 1, len(lines)), 0)

    def render(
        self,
        lines: Sequence[str],
        candidates: Sequence[CompletionCandidate],
        index: int,
        *,
        line_drift: int = 0,
    ) -> Tuple[List[str], Modification, PresentationState]:
        """Render ``candidates[index]`` into ``lines`` (which hold no block)."""

        candidate = candidates[index]
        line_ending = detect_line_ending(lines)
        block = render_block(
            candidate,
            index=index,
            count=len(candidates),
            settings=self.settings,
            line_ending=line_ending,
        )
        anchor = self.anchor_for(candidate, lines, line_drift)

        added_terminator = (
            anchor == len(lines) and bool(lines) and not line_terminator(lines[-1])
        )
        modification: Modification
        if added_terminator:
            modification = replaced(
                anchor - 1, anchor, [lines[-1] + line_ending, *block]
            )
        else:
            modification = inserted(anchor, block)

        state = PresentationState(
            candidates=tuple(candidates),
            current_index=index,
            anchor_line_index=anchor,
            injected_line_count=len(block),
            added_terminator=added_terminator,
            line_drift=line_drift,
        )
        return apply_modifications(lines, [modification]), modification, state

    def present_suggestions(
        self,
        editor: EditorContent,
        candidates: Sequence[CompletionCandidate],
        *,
        index: int = 0,
        keep_anchor: bool = False,
    ) -> Optional[UpdatedContent]:
        """Present ``candidates[index]``, replacing any earlier presentation.

        ``keep_anchor`` shifts the candidate's start line by however far the
        previous block drifted, which is what cycling needs since the
        candidates still address the original document.
        """

        if not candidates:
            telemetry.record_event(
                "suggestion.empty_candidates",
                document=editor.document_id,
                level="debug",
                logger_name=self._logger_name,
            )
            return None
        if not 0 <= index < len(candidates):
            raise IndexError(f"Candidate index {index} out of range")

        editor.to_buffer()  # validates the cursor row
        view = self.strip(editor)
        drift = view.line_drift if keep_anchor else 0
        new_lines, modification, state = self.render(
            view.lines, candidates, index, line_drift=drift
        )
        cursor = cursor_after_insert(
            view.cursor, state.anchor_line_index, state.injected_line_count
        )

        if view.state is None:
            modifications: List[Modification] = [modification]
        else:
            modifications = diff_lines(editor.lines, new_lines)

        self.store.put(editor.document_id, state)
        return UpdatedContent(
            lines=tuple(new_lines), modifications=tuple(modifications), new_cursor=cursor
        )


__all__ = ["StrippedView", "SuggestionPresenter"]
