import pytest

from sidediff.layout import KEYBINDS, Rect, center_rect, help_lines, split_halves


@pytest.mark.parametrize("width", [0, 1, 80, 81])
def test_split_halves_covers_rect(width):
    rect = Rect(3, 2, width, 24)
    left, right = split_halves(rect)
    assert left.width + right.width == width
    assert left.x == 3
    assert right.x == left.x + left.width
    assert left.height == right.height == 24
    assert left.y == right.y == 2
    assert abs(left.width - right.width) <= 1


def test_center_rect_even():
    assert center_rect(Rect(0, 0, 100, 50), 20, 10) == Rect(40, 20, 20, 10)


def test_center_rect_is_inside_area():
    area = Rect(5, 7, 31, 17)
    inner = center_rect(area, 10, 4)
    assert (inner.width, inner.height) == (10, 4)
    assert area.x <= inner.x and inner.x + inner.width <= area.x + area.width
    assert area.y <= inner.y and inner.y + inner.height <= area.y + area.height
    left_gap = inner.x - area.x
    right_gap = area.x + area.width - inner.x - inner.width
    assert abs(left_gap - right_gap) <= 1


def test_center_rect_clamps_to_area():
    area = Rect(2, 3, 10, 5)
    assert center_rect(area, 50, 50) == area


def test_help_lines_replace_help_binding():
    lines = help_lines(KEYBINDS)
    assert "[h] to exit this screen" in lines
    assert "[h] help" not in lines
    assert lines[0] == "[n] next page"
    assert lines[-3:] == [
        "[e] end of file",
        "[b] begining of file",
        "[\u2195] move up and down using arrow keys or mouse",
    ]
    assert len(lines) == len(KEYBINDS) + 3


def test_help_lines_keeps_other_bindings():
    assert help_lines(["[q] quit"])[0] == "[q] quit"