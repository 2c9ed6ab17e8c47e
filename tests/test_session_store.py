from __future__ import annotations

import pytest

from suggestion_engine.buffer import CursorPosition, CursorRange
from suggestion_engine.runtime.settings import SuggestionSettings
from suggestion_engine.suggestion import (
    CompletionCandidate,
    EditorContent,
    PresentationState,
    PresentationStore,
    SuggestionEngine,
)


def make_state(**overrides: object) -> PresentationState:
    values: dict[str, object] = {
        "candidates": (CompletionCandidate(text="x", range=CursorRange.at(0)),),
        "current_index": 0,
        "anchor_line_index": 3,
        "injected_line_count": 4,
    }
    values.update(overrides)
    return PresentationState(**values)  # type: ignore[arg-type]


def test_state_defaults() -> None:
    state = make_state()

    assert state.count == 1
    assert state.current_candidate.text == "x"
    assert state.added_terminator is False
    assert state.line_drift == 0


def test_relocated_accumulates_drift() -> None:
    state = make_state().relocated(5).relocated(4)

    assert state.anchor_line_index == 4
    assert state.line_drift == 1


def test_state_requires_candidates_and_valid_index() -> None:
    with pytest.raises(ValueError):
        make_state(candidates=())
    with pytest.raises(ValueError):
        make_state(current_index=1)


def test_store_lifecycle() -> None:
    store = PresentationStore()
    first = make_state()
    second = make_state(anchor_line_index=9)

    store.put("doc", first)
    store.put("doc", second)

    assert len(store) == 1
    assert store.get("doc") is second
    assert "doc" in store
    assert list(store.documents()) == ["doc"]
    assert store.pop("doc") is second
    assert store.pop("doc") is None
    assert store.get("doc") is None


def test_documents_are_independent() -> None:
    store = PresentationStore()
    engine = SuggestionEngine(store=store, settings=SuggestionSettings())
    lines = ["a\n", "b\n"]
    candidate = CompletionCandidate(text="c", range=CursorRange.at(0, 1))
    shown = {}
    for document_id in ("left.swift", "right.swift"):
        editor = EditorContent.from_lines(lines, document_id=document_id)
        shown[document_id] = engine.present_suggestions(editor, [candidate])

    result = engine.reject_suggestion(
        EditorContent.from_lines(shown["left.swift"].lines, document_id="left.swift")
    )

    assert result is not None
    assert list(result.lines) == lines
    assert not engine.has_presentation("left.swift")
    assert engine.has_presentation("right.swift")
    assert store.get("right.swift") is not None


def test_close_document_discards_state() -> None:
    engine = SuggestionEngine(settings=SuggestionSettings())
    editor = EditorContent.from_text("a\n", cursor=CursorPosition(0, 0))
    engine.present_suggestions(
        editor, [CompletionCandidate(text="b", range=CursorRange.at(0, 1))]
    )

    engine.close_document("default")

    assert engine.preview("default") is None
