from __future__ import annotations

from suggestion_engine.buffer import CursorPosition, CursorRange
from suggestion_engine.patch import apply_modifications, inserted, replaced
from suggestion_engine.runtime.settings import SuggestionSettings
from suggestion_engine.suggestion import (
    CompletionCandidate,
    EditorContent,
    SuggestionEngine,
)

HEADER = "/*========== Copilot Suggestion"
FOOTER = "*///======== End of Copilot Suggestion"

SOURCE = ["def f():\n", "    pass\n", "x = 1\n"]


def make_engine() -> SuggestionEngine:
    return SuggestionEngine(settings=SuggestionSettings())


def make_candidate(
    text: str, start: tuple[int, int], end: tuple[int, int] | None = None
) -> CompletionCandidate:
    start_pos = CursorPosition(*start)
    end_pos = CursorPosition(*end) if end else start_pos
    return CompletionCandidate(text=text, range=CursorRange(start_pos, end_pos))


def make_editor(lines, cursor: tuple[int, int] = (0, 0), document_id: str = "default"):
    return EditorContent.from_lines(
        list(lines), cursor=CursorPosition(*cursor), document_id=document_id
    )


def test_present_without_candidates_is_a_no_op() -> None:
    engine = make_engine()

    assert engine.present_suggestions(make_editor(SOURCE), []) is None
    assert not engine.has_presentation("default")


def test_present_inserts_block_below_start_line() -> None:
    engine = make_engine()
    candidate = make_candidate("    return 1", (1, 0), (1, 8))

    result = engine.present_suggestions(make_editor(SOURCE, (0, 3)), [candidate])

    assert result is not None
    block = [f"{HEADER} 1/1\n", "    return 1\n", f"{FOOTER}\n"]
    assert result.modifications == (inserted(2, block),)
    assert list(result.lines) == ["def f():\n", "    pass\n", *block, "x = 1\n"]
    assert result.content == "".join(result.lines)
    assert apply_modifications(SOURCE, result.modifications) == list(result.lines)
    assert result.new_cursor == CursorPosition(0, 3)


def test_cursor_at_or_below_anchor_moves_below_block() -> None:
    engine = make_engine()
    candidate = make_candidate("    return 1", (1, 0), (1, 8))

    result = engine.present_suggestions(make_editor(SOURCE, (2, 4)), [candidate])

    assert result is not None
    assert result.new_cursor == CursorPosition(5, 4)
    assert result.lines[5] == "x = 1\n"


def test_presentation_state_is_recorded() -> None:
    engine = make_engine()
    candidates = [
        make_candidate("    return 1", (1, 0), (1, 8)),
        make_candidate("    return 2\n    # done", (1, 0), (1, 8)),
    ]

    engine.present_suggestions(make_editor(SOURCE), candidates)

    state = engine.store.get("default")
    assert state is not None
    assert state.candidates == tuple(candidates)
    assert state.current_index == 0
    assert state.anchor_line_index == 2
    assert state.injected_line_count == 3
    preview = engine.preview("default")
    assert preview is not None
    assert preview.start_line_index == 2
    assert preview.code == ("    return 1",)
    assert preview.suggestion_count == 2
    assert preview.current_suggestion_index == 0


def test_header_shows_position_among_candidates() -> None:
    engine = make_engine()
    candidates = [make_candidate("a", (0, 0)), make_candidate("b", (0, 0))]

    result = engine.present_suggestions(make_editor(SOURCE), candidates)

    assert result is not None
    assert result.lines[1] == f"{HEADER} 1/2\n"


def test_block_after_unterminated_last_line_keeps_lines_apart() -> None:
    engine = make_engine()
    source = ["a\n", "b"]
    candidate = make_candidate("c", (1, 1))

    result = engine.present_suggestions(make_editor(source, (1, 1)), [candidate])

    assert result is not None
    block = [f"{HEADER} 1/1\n", "c\n", f"{FOOTER}\n"]
    assert result.modifications == (replaced(1, 2, ["b\n", *block]),)
    assert list(result.lines) == ["a\n", "b\n", *block]
    assert result.new_cursor == CursorPosition(1, 1)
    state = engine.store.get("default")
    assert state is not None
    assert state.added_terminator

    rejected = engine.reject_suggestion(make_editor(result.lines, (3, 0)))

    assert rejected is not None
    assert rejected.content == "a\nb"
    assert list(rejected.lines) == source
    assert rejected.new_cursor == CursorPosition(1, 0)


def test_block_uses_buffer_line_ending() -> None:
    engine = make_engine()
    source = ["int a;\r\n", "int b;\r\n"]
    candidate = make_candidate("int c;\nint d;", (0, 6))

    result = engine.present_suggestions(make_editor(source), [candidate])

    assert result is not None
    assert list(result.lines[1:5]) == [
        f"{HEADER} 1/1\r\n",
        "int c;\r\n",
        "int d;\r\n",
        f"{FOOTER}\r\n",
    ]


def test_represent_replaces_previous_presentation() -> None:
    engine = make_engine()
    first = make_candidate("    return 1", (1, 0), (1, 8))
    second = [
        make_candidate("    return 2", (1, 0), (1, 8)),
        make_candidate("    raise", (1, 0), (1, 8)),
    ]
    shown = engine.present_suggestions(make_editor(SOURCE), [first])
    assert shown is not None

    replaced_result = engine.present_suggestions(
        make_editor(shown.lines, (0, 0)), second
    )

    fresh = make_engine().present_suggestions(make_editor(SOURCE), second)
    assert replaced_result is not None and fresh is not None
    assert replaced_result.lines == fresh.lines
    assert (
        apply_modifications(shown.lines, replaced_result.modifications)
        == list(replaced_result.lines)
    )
    state = engine.store.get("default")
    assert state is not None
    assert state.candidates == tuple(second)
    assert state.current_index == 0


def test_candidate_past_end_of_buffer_is_appended() -> None:
    engine = make_engine()
    candidate = make_candidate("tail", (40, 0))

    result = engine.present_suggestions(make_editor(SOURCE), [candidate])

    assert result is not None
    assert result.modifications == (
        inserted(3, [f"{HEADER} 1/1\n", "tail\n", f"{FOOTER}\n"]),
    )
