"""Scrolling state and clipping of the visible part of a diff."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TypeVar

from sidediff.diffing import LineKind

_Style = TypeVar("_Style")

# Rows taken by borders and the key-binding bar around each column.
_CHROME = 3
# Rows of overlap kept when paging.
_PAGE_MARGIN = 5


@dataclass
class Viewport:
    """Position of the view inside a diff of ``total`` rows.

    ``height`` is the height of a column box in rows, including its borders.
    Each movement method returns ``True`` when the screen should be redrawn.
    """

    total: int
    height: int
    current_line: int = 0
    current_col: int = 0

    def _can_advance(self) -> bool:
        return self.current_line + self.height - _CHROME < self.total

    def scroll_down(self) -> bool:
        """Move down one row unless the end is already in view."""
        if self._can_advance():
            self.current_line += 1
            return True
        return False

    def scroll_up(self) -> bool:
        """Move up one row unless already at the top."""
        if self.current_line > 0:
            self.current_line -= 1
            return True
        return False

    def page_down(self) -> bool:
        """Move down a page unless the end is already in view."""
        if self._can_advance():
            self.current_line += max(self.height - _PAGE_MARGIN, 0)
        return True

    def page_up(self) -> bool:
        """Move up a page, stopping at the top."""
        self.current_line = max(self.current_line - max(self.height - _PAGE_MARGIN, 0), 0)
        return True

    def to_end(self) -> bool:
        """Jump so that the last rows are in view, if the diff is taller than the box."""
        if self.height > self.total:
            return True
        self.current_line = self.total - self.height + _CHROME
        return True

    def to_start(self) -> bool:
        """Jump to the first row."""
        self.current_line = 0
        return True

    def reset(self) -> bool:
        """Return to the first row and the first column."""
        self.current_line = 0
        self.current_col = 0
        return True

    def visible_rows(self, lines: Sequence[str], height: int) -> list[str]:
        """Return at most ``height`` lines starting at the current row."""
        return list(lines[self.current_line : self.current_line + height])

    def line_numbers(
        self, kinds: Sequence[LineKind], height: int
    ) -> list[tuple[int, LineKind]]:
        """Return ``(number, kind)`` pairs for the visible rows, numbered from 1."""
        start = self.current_line
        return [
            (index + 1, kind)
            for index, kind in enumerate(kinds[start : start + height], start=start)
        ]


def clip_line(line: str, start: int, width: int) -> str:
    """Return the part of ``line`` from column ``start`` at most ``width`` wide."""
    if len(line) <= start:
        return ""
    return line[start : start + width]


def clip_segments(
    segments: Iterable[tuple[_Style, str]], start: int, width: int
) -> list[tuple[_Style, str]]:
    """Clip styled ``(style, text)`` segments to columns ``start`` .. ``start + width``.

    Segments wholly outside the window are dropped; the rest keep their style.
    """
    end = start + width
    clipped: list[tuple[_Style, str]] = []
    position = 0
    for style, text in segments:
        seg_start = position
        position += len(text)
        if position <= start or seg_start >= end:
            continue
        piece = text[max(start - seg_start, 0) : max(end - seg_start, 0)]
        if piece:
            clipped.append((style, piece))
    return clipped


def gutter_width(current_line: int, height: int) -> int:
    """Width of the line-number gutter for a box of ``height`` rows."""
    largest = current_line + height - _CHROME
    if largest < 1:
        return 3
    return len(str(largest)) + 2