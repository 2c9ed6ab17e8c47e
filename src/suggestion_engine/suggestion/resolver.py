"""Reject, accept and cycle presented suggestions."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from suggestion_engine.buffer import (
    CursorPosition,
    offset_for_position,
    position_for_offset,
    split_lines,
)
from suggestion_engine.patch import diff_lines
from suggestion_engine.runtime import telemetry

from .candidate import CompletionCandidate
from .editor import EditorContent, UpdatedContent
from .presenter import StrippedView, SuggestionPresenter
from .session import PresentationState


class SuggestionResolver:
    """Resolves the presentation recorded by a ``SuggestionPresenter``."""

    def __init__(
        self, presenter: SuggestionPresenter, *, logger_name: str | None = None
    ) -> None:
        self.presenter = presenter
        self.store = presenter.store
        self._logger_name = logger_name

    def _active_view(
        self, editor: EditorContent, operation: str
    ) -> Optional[Tuple[StrippedView, PresentationState]]:
        if editor.document_id not in self.store:
            telemetry.record_event(
                "suggestion.no_active_presentation",
                document=editor.document_id,
                level="debug",
                data={"operation": operation},
                logger_name=self._logger_name,
            )
            return None
        editor.to_buffer()  # validates the cursor row
        view = self.presenter.strip(editor)
        if view.state is None:
            self.store.pop(editor.document_id)
            return None
        return view, view.state

    def reject_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        """Remove the block and restore the pre-presentation buffer.

        Every pending candidate for the document is discarded, not only the
        one on display.
        """

        active = self._active_view(editor, "reject")
        if active is None:
            return None
        view, _ = active
        self.store.pop(editor.document_id)
        modifications = () if view.removal is None else (view.removal,)
        return UpdatedContent(
            lines=view.lines, modifications=modifications, new_cursor=view.cursor
        )

    def accept_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        """Commit the displayed candidate over its range and drop the markup."""

        active = self._active_view(editor, "accept")
        if active is None:
            return None
        view, state = active
        committed, cursor = commit_candidate(
            view.lines, state.current_candidate, line_drift=view.line_drift
        )
        modifications = diff_lines(editor.lines, committed)
        self.store.pop(editor.document_id)
        return UpdatedContent(
            lines=tuple(committed), modifications=tuple(modifications), new_cursor=cursor
        )

    def next_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        return self._cycle(editor, 1)

    def previous_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        return self._cycle(editor, -1)

    def _cycle(self, editor: EditorContent, step: int) -> Optional[UpdatedContent]:
        active = self._active_view(editor, "cycle")
        if active is None:
            return None
        _, state = active
        index = (state.current_index + step) % state.count
        # reject then present again; the presenter strips the block itself
        return self.presenter.present_suggestions(
            editor, state.candidates, index=index, keep_anchor=True
        )


def commit_candidate(
    lines: Sequence[str], candidate: CompletionCandidate, *, line_drift: int = 0
) -> Tuple[List[str], CursorPosition]:
    """Replace the candidate's range in ``lines`` with its text.

    Range ends past the buffer clamp to its end; the returned cursor sits
    right after the inserted text.
    """

    start = candidate.range.start
    end = candidate.range.end
    start = CursorPosition(max(start.line + line_drift, 0), start.character)
    end = CursorPosition(max(end.line + line_drift, 0), end.character)

    text = "".join(lines)
    start_offset = offset_for_position(lines, start)
    end_offset = max(offset_for_position(lines, end), start_offset)
    committed = split_lines(text[:start_offset] + candidate.text + text[end_offset:])
    cursor = position_for_offset(committed, start_offset + len(candidate.text))
    return committed, cursor


__all__ = ["SuggestionResolver", "commit_candidate"]
