"""Command handler wiring a completion provider to the suggestion engine."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Protocol, Sequence

from suggestion_engine.runtime import telemetry
from suggestion_engine.suggestion import (
    CompletionCandidate,
    EditorContent,
    SuggestionEngine,
    UpdatedContent,
)


class CancellationToken:
    """Flag handed to a completion request so a newer request can cancel it."""

    def __init__(self) -> None:
        self._cancelled = False
        self._callbacks: List[Callable[[], None]] = []

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    def on_cancel(self, callback: Callable[[], None]) -> None:
        if self._cancelled:
            callback()
            return
        self._callbacks.append(callback)

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()


class SuggestionProvider(Protocol):
    """Source of completion candidates, ordered by preference."""

    def get_completions(
        self, editor: EditorContent, token: CancellationToken
    ) -> Sequence[CompletionCandidate]:
        ...


class CommentBaseCommandHandler:
    """Editor commands for suggestions rendered as comment-delimited blocks."""

    def __init__(
        self,
        engine: SuggestionEngine,
        provider: SuggestionProvider,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.engine = engine
        self.provider = provider
        self._logger_name = logger_name
        self._pending: Dict[str, CancellationToken] = {}

    def _cancel_pending(self, document_id: str) -> None:
        token = self._pending.pop(document_id, None)
        if token is not None:
            token.cancel()

    def present_suggestions(self, editor: EditorContent) -> Optional[UpdatedContent]:
        document_id = editor.document_id
        self._cancel_pending(document_id)
        token = CancellationToken()
        self._pending[document_id] = token

        with telemetry.span(
            "commands::fetch_completions",
            logger_name=self._logger_name,
            component="commands",
            metadata={"document": document_id},
        ) as handle:
            try:
                candidates = self.provider.get_completions(
                    self.engine.content_without_suggestion(editor), token
                )
            finally:
                if self._pending.get(document_id) is token:
                    del self._pending[document_id]
            handle.add_metadata("candidates", len(candidates))
            if token.is_cancelled:
                handle.cancel("completion request cancelled")

        if token.is_cancelled:
            return None
        return self.engine.present_suggestions(editor, candidates)

    def reject_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        self._cancel_pending(editor.document_id)
        return self.engine.reject_suggestion(editor)

    def accept_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        self._cancel_pending(editor.document_id)
        return self.engine.accept_suggestion(editor)

    def next_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        return self.engine.next_suggestion(editor)

    def previous_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        return self.engine.previous_suggestion(editor)


__all__ = ["CancellationToken", "CommentBaseCommandHandler", "SuggestionProvider"]
