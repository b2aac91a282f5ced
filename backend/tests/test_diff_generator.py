from __future__ import annotations

import pytest
from models.diff import DiffResult, SegmentKind
from services.diff_generator import DEFAULT_MAX_LCS_CELLS, DiffGenerator, compute_word_diff, tokenize


def _pairs(result: DiffResult) -> list[tuple[str, str]]:
    return [(segment.kind.value, segment.text) for segment in result.segments]


def _old_side(result: DiffResult) -> str:
    return "".join(s.text for s in result.segments if s.kind != SegmentKind.ADDED)


def _new_side(result: DiffResult) -> str:
    return "".join(s.text for s in result.segments if s.kind != SegmentKind.REMOVED)


def test_tokenize_keeps_whitespace_runs() -> None:
    assert tokenize("The quick  fox\n") == ["The", " ", "quick", "  ", "fox", "\n"]
    assert tokenize(" lead") == [" ", "lead"]
    assert tokenize("") == []


def test_tokenize_does_not_normalize_punctuation_or_case() -> None:
    tokens = tokenize("Led   TEAM, shipped.")
    assert tokens == ["Led", "   ", "TEAM,", " ", "shipped."]
    assert "".join(tokens) == "Led   TEAM, shipped."


def test_identical_texts_yield_single_same_segment() -> None:
    text = "Senior Python engineer\nBuilt data pipelines"
    result = compute_word_diff(text, text)

    assert _pairs(result) == [("same", text)]
    assert result.added_words == 0
    assert result.removed_words == 0
    assert result.strategy == "word"


def test_pure_insertion() -> None:
    result = compute_word_diff("", "hello world")

    assert _pairs(result) == [("added", "hello world")]
    assert result.added_words == 2
    assert result.removed_words == 0


def test_pure_deletion() -> None:
    result = compute_word_diff("hello world", "")

    assert _pairs(result) == [("removed", "hello world")]
    assert result.added_words == 0
    assert result.removed_words == 2


def test_both_empty_yields_no_segments() -> None:
    result = compute_word_diff("", "")

    assert result.segments == []
    assert result.added_words == 0
    assert result.removed_words == 0


def test_inserted_word() -> None:
    result = compute_word_diff("The quick fox", "The quick brown fox")

    assert _pairs(result) == [
        ("same", "The quick"),
        ("added", " brown"),
        ("same", " fox"),
    ]
    assert result.added_words == 1
    assert result.removed_words == 0


def test_removed_word() -> None:
    result = compute_word_diff("A B C", "A C")

    assert _pairs(result) == [
        ("same", "A"),
        ("removed", " B"),
        ("same", " C"),
    ]
    assert result.removed_words == 1
    assert result.added_words == 0


def test_replacement_lists_removed_before_added() -> None:
    result = compute_word_diff("cat", "dog")

    assert _pairs(result) == [("removed", "cat"), ("added", "dog")]


def test_whitespace_only_change_counts_no_words() -> None:
    result = compute_word_diff("a b", "a  b")

    assert _pairs(result) == [
        ("same", "a"),
        ("removed", " "),
        ("added", "  "),
        ("same", "b"),
    ]
    assert result.added_words == 0
    assert result.removed_words == 0


def test_swapping_inputs_swaps_counts() -> None:
    old = "Managed a team of five engineers"
    new = "Led a team of eight engineers across two sites"

    forward = compute_word_diff(old, new)
    backward = compute_word_diff(new, old)

    assert forward.added_words == backward.removed_words
    assert forward.removed_words == backward.added_words


@pytest.mark.parametrize(
    ("old", "new"),
    [
        ("", ""),
        ("", "only new"),
        ("only old", ""),
        ("The quick fox", "The quick brown fox"),
        ("  leading and trailing  ", "leading\tand\ntrailing"),
        ("Python, SQL, AWS", "Python, Go, SQL, GCP"),
        ("line one\nline two\n", "line two\nline one\nline three"),
    ],
)
def test_segments_reconstruct_both_texts(old: str, new: str) -> None:
    result = compute_word_diff(old, new)

    assert _old_side(result) == old
    assert _new_side(result) == new


def test_adjacent_segments_never_share_a_kind() -> None:
    result = compute_word_diff(
        "Built REST APIs in Flask for internal tools",
        "Built GraphQL APIs in FastAPI for customer-facing tools",
    )

    kinds = [segment.kind for segment in result.segments]
    assert all(a != b for a, b in zip(kinds, kinds[1:]))


def test_default_threshold() -> None:
    assert DiffGenerator().max_lcs_cells == DEFAULT_MAX_LCS_CELLS == 500_000


def test_threshold_boundary_selects_strategy() -> None:
    # "a b" and "a c" are three tokens each
    assert compute_word_diff("a b", "a c", max_lcs_cells=9).strategy == "word"
    assert compute_word_diff("a b", "a c", max_lcs_cells=8).strategy == "line"


def test_line_fallback_classifies_changed_line() -> None:
    generator = DiffGenerator(max_lcs_cells=1)
    old = "Summary\nPython developer\nSkills: SQL\n"
    new = "Summary\nSenior Python developer\nSkills: SQL\n"

    result = generator.generate_diff(old, new)

    assert result.strategy == "line"
    assert _pairs(result) == [
        ("same", "Summary\n"),
        ("removed", "Python developer\n"),
        ("added", "Senior Python developer\n"),
        ("same", "Skills: SQL\n"),
    ]
    assert result.removed_words == 2
    assert result.added_words == 3


def test_line_fallback_reports_reordered_lines_as_changes() -> None:
    result = DiffGenerator(max_lcs_cells=1).generate_diff("a\nb\n", "b\na\n")

    assert _pairs(result) == [
        ("removed", "a\n"),
        ("added", "b\n"),
        ("removed", "b\n"),
        ("added", "a\n"),
    ]


def test_line_fallback_preserves_missing_final_newline() -> None:
    old = "x\ny"
    new = "x\ny\n"

    result = DiffGenerator(max_lcs_cells=1).generate_diff(old, new)

    assert _pairs(result) == [("same", "x\n"), ("removed", "y"), ("added", "y\n")]
    assert _old_side(result) == old
    assert _new_side(result) == new


def test_line_fallback_on_large_input_reconstructs_texts() -> None:
    old = "\n".join(f"Bullet {i}: shipped feature {i}" for i in range(200))
    new = "\n".join(f"Bullet {i}: shipped feature {i * 2}" for i in range(200))

    result = compute_word_diff(old, new)

    assert result.strategy == "line"
    assert _old_side(result) == old
    assert _new_side(result) == new


def test_render_inline_marks_changes() -> None:
    generator = DiffGenerator()

    assert generator.render_inline(generator.generate_diff("cat", "dog").segments) == "[-cat-]{+dog+}"
    assert generator.render_inline(generator.generate_diff("A B C", "A C").segments) == "A[- B-] C"
