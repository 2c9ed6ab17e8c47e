"""Suggestion presentation, resolution and session state."""

from .candidate import CompletionCandidate
from .editor import EditorContent, UpdatedContent
from .engine import SuggestionEngine
from .presenter import SuggestionPresenter
from .preview import SuggestionPreview
from .resolver import SuggestionResolver, commit_candidate
from .session import PresentationState, PresentationStore

__all__ = [
    "CompletionCandidate",
    "EditorContent",
    "PresentationState",
    "PresentationStore",
    "SuggestionEngine",
    "SuggestionPresenter",
    "SuggestionPreview",
    "SuggestionResolver",
    "UpdatedContent",
    "commit_candidate",
]
