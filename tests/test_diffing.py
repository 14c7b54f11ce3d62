import pytest

from sidediff.diffing import LineKind, SideBySide, clean_line, hex_chunks, side_by_side

C, R, G = LineKind.CONTEXT, LineKind.DELETED, LineKind.INSERTED


def test_line_kind_codes():
    result = side_by_side("a\nb\n", "a\nc\n")
    assert [kind.value for kind in result.left_kinds] == ["c", "r", "c"]
    assert [kind.value for kind in result.right_kinds] == ["c", "c", "g"]


def test_clean_line_strips_and_expands_tabs():
    assert clean_line("\tx  \n") == "    x"
    assert clean_line("a\tb\t\n") == "a    b"


def test_simple_change_full_context():
    result = side_by_side("a\nb\n", "a\nc\n")
    assert result.left_lines == ["a", "b", ""]
    assert result.right_lines == ["a", "", "c"]
    assert result.left_kinds == [C, R, C]
    assert result.right_kinds == [C, C, G]
    assert len(result) == 3


def test_identical_texts_give_nothing():
    result = side_by_side("same\ntext\n", "same\ntext\n")
    assert result == SideBySide()
    assert len(result) == 0


def test_context_zero_keeps_only_changes():
    old = "1\n2\n3\n4\n5\n"
    new = "1\n2\nX\n4\n5\n"
    result = side_by_side(old, new, 0)
    assert result.left_lines == ["3", ""]
    assert result.right_lines == ["", "X"]
    assert C not in (result.left_kinds[0], result.right_kinds[1])


def test_context_one_keeps_neighbours():
    old = "1\n2\n3\n4\n5\n"
    new = "1\n2\nX\n4\n5\n"
    result = side_by_side(old, new, 1)
    assert result.left_lines[0] == "2"
    assert result.left_lines[-1] == "4"
    assert "1" not in result.left_lines and "5" not in result.left_lines


def test_columns_stay_aligned():
    old = "alpha\nbeta\ngamma\ndelta\n"
    new = "beta\ngamma\nepsilon\ndelta\nzeta\n"
    result = side_by_side(old, new)
    n = len(result)
    assert len(result.left_lines) == len(result.right_lines) == n
    assert len(result.left_kinds) == len(result.right_kinds) == n
    assert [l for l, k in zip(result.left_lines, result.left_kinds) if k is not R and l] == [
        r for r, k in zip(result.right_lines, result.right_kinds) if k is C and r
    ]
    assert [l for l in result.left_lines if l] == ["alpha", "beta", "gamma", "delta"]
    assert [r for r in result.right_lines if r] == ["beta", "gamma", "epsilon", "delta", "zeta"]


def test_missing_final_newline_counts_as_change():
    result = side_by_side("a\n", "a")
    assert R in result.left_kinds
    assert G in result.right_kinds


def test_negative_context_rejected():
    with pytest.raises(ValueError):
        side_by_side("a\n", "b\n", -1)


def test_hex_chunks_full_groups():
    assert hex_chunks("abcd", 4) == "61626364"
    assert hex_chunks("abcd", 2) == "6162 6364"


def test_hex_chunks_default_width_and_padding():
    assert hex_chunks("abcdef") == "61626364 00006566"
    assert hex_chunks("") == ""


def test_hex_chunks_small_bytes_unpadded():
    assert hex_chunks("\n", 2) == "000a"


def test_hex_chunks_zero_width_rejected():
    with pytest.raises(ValueError):
        hex_chunks("abc", 0)