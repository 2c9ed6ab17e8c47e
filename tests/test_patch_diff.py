from __future__ import annotations

from suggestion_engine.patch import (
    Delete,
    Insert,
    Replace,
    apply_modifications,
    deleted,
    diff_lines,
    inserted,
    replaced,
)


def test_diff_of_identical_lines_is_empty() -> None:
    lines = ["a\n", "b\n"]

    assert diff_lines(lines, list(lines)) == []


def test_diff_emits_minimal_primitives() -> None:
    before = ["a\n", "b\n", "c\n", "d\n"]
    after = ["a\n", "B\n", "c\n", "d\n", "e\n"]

    modifications = diff_lines(before, after)

    assert modifications == [replaced(1, 2, ["B\n"]), inserted(4, ["e\n"])]


def test_diff_result_applies_back() -> None:
    before = ["x\n", "y\n", "z"]
    after = ["y\n", "new\n", "z\n", "tail"]

    modifications = diff_lines(before, after)

    assert apply_modifications(before, modifications) == after
    assert {type(m) for m in modifications} <= {Insert, Delete, Replace}


def test_sequential_patches_compose_into_one() -> None:
    lines = ["struct Cat {}\n", "\n", "fn main() {}\n"]
    first = [inserted(1, ["// a\n", "// b\n"]), deleted(2, 3)]
    once = apply_modifications(lines, first)
    second = [replaced(0, 1, ["struct Dog {}\n"]), inserted(len(once), ["// end\n"])]
    twice = apply_modifications(once, second)

    combined = diff_lines(lines, twice)

    assert apply_modifications(lines, combined) == twice
    assert twice == ["struct Dog {}\n", "// a\n", "// b\n", "\n", "// end\n"]
