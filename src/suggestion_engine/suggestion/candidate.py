"""Completion candidates handed over by the completion service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from suggestion_engine.buffer.state import CursorRange
from suggestion_engine.buffer.text import split_lines


@dataclass(frozen=True, slots=True)
class CompletionCandidate:
    """One proposed completion.

    ``range`` addresses the document as it was before any suggestion was
    presented; a zero-width range is a pure insertion.
    """

    text: str
    range: CursorRange
    uuid: str = ""
    display_text: Optional[str] = None

    def text_lines(self, line_ending: str = "\n") -> List[str]:
        """Lines of ``text``, every one terminated with ``line_ending``."""

        lines = split_lines(self.text)
        return [line.rstrip("\r\n") + line_ending for line in lines]
