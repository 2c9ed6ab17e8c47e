"""Editor commands driving the suggestion engine."""

from .handler import CancellationToken, CommentBaseCommandHandler, SuggestionProvider

__all__ = ["CancellationToken", "CommentBaseCommandHandler", "SuggestionProvider"]
