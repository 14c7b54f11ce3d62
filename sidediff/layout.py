"""Screen geometry: splitting, centring and help text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

KEYBINDS = (
    "[n] next page",
    "[l] last page",
    "[h] help",
    "[r] reset",
    "[q] quit",
)

_EXTRA_HELP = (
    "[e] end of file",
    "[b] begining of file",
    "[\u2195] move up and down using arrow keys or mouse",
)


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int


def split_halves(rect: Rect) -> tuple[Rect, Rect]:
    """Split ``rect`` into a left and a right half side by side."""
    left_width = rect.width // 2
    left = Rect(rect.x, rect.y, left_width, rect.height)
    right = Rect(rect.x + left_width, rect.y, rect.width - left_width, rect.height)
    return left, right


def center_rect(area: Rect, width: int, height: int) -> Rect:
    """Return a ``width`` by ``height`` rectangle centred in ``area``."""
    width = max(0, min(width, area.width))
    height = max(0, min(height, area.height))
    return Rect(
        area.x + (area.width - width) // 2,
        area.y + (area.height - height) // 2,
        width,
        height,
    )


def help_lines(keybinds: Iterable[str]) -> list[str]:
    """Return the lines of the help screen for the given key bindings."""
    lines = [
        "[h] to exit this screen" if binding == "[h] help" else binding
        for binding in keybinds
    ]
    lines.extend(_EXTRA_HELP)
    return lines