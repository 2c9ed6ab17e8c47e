"""Compute minimal modification lists between two line arrays."""

from __future__ import annotations

import difflib
from typing import List, Sequence

from .modification import Modification, deleted, inserted, replaced


def diff_lines(before: Sequence[str], after: Sequence[str]) -> List[Modification]:
    """Return modifications turning ``before`` into ``after``.

    Ranges address ``before`` and never overlap, so the result can be fed
    straight to ``apply_modifications``.
    """

    matcher = difflib.SequenceMatcher(None, before, after, autojunk=False)
    modifications: List[Modification] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "insert":
            modifications.append(inserted(i1, after[j1:j2]))
        elif tag == "delete":
            modifications.append(deleted(i1, i2))
        elif tag == "replace":
            modifications.append(replaced(i1, i2, after[j1:j2]))
    return modifications


__all__ = ["diff_lines"]
