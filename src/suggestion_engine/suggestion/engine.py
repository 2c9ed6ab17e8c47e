"""Entry point combining presenter, resolver and the presentation store."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional, Sequence

from suggestion_engine.runtime import telemetry
from suggestion_engine.runtime.settings import SuggestionSettings

from .candidate import CompletionCandidate
from .editor import EditorContent, UpdatedContent
from .presenter import SuggestionPresenter
from .preview import SuggestionPreview
from .resolver import SuggestionResolver
from .session import PresentationStore

LOGGER_NAME = "suggestion_engine.suggestion"


class SuggestionEngine:
    """Synchronous suggestion state machine for any number of documents.

    Per document the engine is either idle or presenting one of several
    candidates. Calls for one document must be serialized by the caller;
    documents never affect each other.
    """

    def __init__(
        self,
        *,
        store: Optional[PresentationStore] = None,
        settings: Optional[SuggestionSettings] = None,
        logger_name: str | None = LOGGER_NAME,
    ) -> None:
        self.store = store if store is not None else PresentationStore()
        self.settings = settings or SuggestionSettings.from_env()
        self._logger_name = logger_name
        self.presenter = SuggestionPresenter(
            self.store, self.settings, logger_name=logger_name
        )
        self.resolver = SuggestionResolver(self.presenter, logger_name=logger_name)

    def _run(
        self,
        operation: str,
        editor: EditorContent,
        action: Callable[[], Optional[UpdatedContent]],
    ) -> Optional[UpdatedContent]:
        with telemetry.span(
            f"suggestion::{operation}",
            logger_name=self._logger_name,
            component=True,
            metadata={"document": editor.document_id},
        ) as handle:
            result = action()
            handle.add_metadata("changed", result is not None)
            return result

    def present_suggestions(
        self, editor: EditorContent, candidates: Sequence[CompletionCandidate]
    ) -> Optional[UpdatedContent]:
        return self._run(
            "present",
            editor,
            lambda: self.presenter.present_suggestions(editor, candidates),
        )

    def reject_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        return self._run(
            "reject", editor, lambda: self.resolver.reject_suggestion(editor)
        )

    def accept_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        return self._run(
            "accept", editor, lambda: self.resolver.accept_suggestion(editor)
        )

    def next_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        return self._run("next", editor, lambda: self.resolver.next_suggestion(editor))

    def previous_suggestion(self, editor: EditorContent) -> Optional[UpdatedContent]:
        return self._run(
            "previous", editor, lambda: self.resolver.previous_suggestion(editor)
        )

    def content_without_suggestion(self, editor: EditorContent) -> EditorContent:
        """``editor`` as it would read with the active block taken out.

        Nothing is recorded; completion requests use this so the ranges they
        return address the clean document.
        """

        view = self.presenter.strip(editor)
        if view.state is None:
            return editor
        return replace(
            editor,
            content="".join(view.lines),
            lines=view.lines,
            cursor_position=view.cursor,
            selections=(),
        )

    def has_presentation(self, document_id: str) -> bool:
        return document_id in self.store

    def preview(self, document_id: str) -> Optional[SuggestionPreview]:
        state = self.store.get(document_id)
        if state is None:
            return None
        return SuggestionPreview.from_state(state)

    def close_document(self, document_id: str) -> None:
        self.store.pop(document_id)


__all__ = ["LOGGER_NAME", "SuggestionEngine"]
