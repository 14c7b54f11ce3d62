"""Interactive side-by-side diff viewer for the terminal."""

from __future__ import annotations

import curses
import os
import sys
from collections.abc import Callable, Sequence

from sidediff.args import Args, parse_args
from sidediff.diffing import LineKind, SideBySide, side_by_side
from sidediff.hashing import compare_hashes
from sidediff.highlight import DEFAULT_BACKGROUND, Highlighter, highlighter_for
from sidediff.layout import KEYBINDS, Rect, center_rect, help_lines, split_halves
from sidediff.viewer import Viewport, clip_line, clip_segments, gutter_width

_BACKGROUND = "#121212"
_BORDER = "#3a3a3a"
_WHITE = "#ffffff"
_KIND_COLOURS = {
    LineKind.INSERTED: "#00ff00",
    LineKind.DELETED: "#ff0000",
    LineKind.CONTEXT: "#767676",
}

_SCROLL_UP = curses.BUTTON4_PRESSED
_SCROLL_DOWN = getattr(curses, "BUTTON5_PRESSED", 0x200000)

_ACTIONS: dict[str | int, Callable[[Viewport], bool]] = {
    "r": Viewport.reset,
    "e": Viewport.to_end,
    "b": Viewport.to_start,
    "n": Viewport.page_down,
    curses.KEY_NPAGE: Viewport.page_down,
    "l": Viewport.page_up,
    curses.KEY_PPAGE: Viewport.page_up,
    curses.KEY_UP: Viewport.scroll_up,
    curses.KEY_DOWN: Viewport.scroll_down,
}

_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def _parse_hex(colour: str) -> tuple[int, int, int]:
    digits = colour.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    value = int(digits[:6], 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def _nearest_level(channel: int) -> int:
    return min(range(len(_CUBE_LEVELS)), key=lambda i: abs(_CUBE_LEVELS[i] - channel))


class _Palette:
    """Allocates curses colour pairs for ``#rrggbb`` colours."""

    def __init__(self) -> None:
        self._pairs: dict[tuple[int, int], int] = {}
        self._enabled = curses.has_colors()
        self._deep = False
        if self._enabled:
            curses.start_color()
            self._deep = curses.COLORS >= 256

    def _index(self, colour: str) -> int:
        red, green, blue = _parse_hex(colour)
        if self._deep:
            return 16 + 36 * _nearest_level(red) + 6 * _nearest_level(green) + _nearest_level(blue)
        return (red > 0x60) * 1 + (green > 0x60) * 2 + (blue > 0x60) * 4

    def attr(self, fg: str, bg: str) -> int:
        if not self._enabled:
            return curses.A_NORMAL
        key = (self._index(fg), self._index(bg))
        pair = self._pairs.get(key)
        if pair is None:
            pair = len(self._pairs) + 1
            if pair >= curses.COLOR_PAIRS:
                return curses.A_NORMAL
            curses.init_pair(pair, *key)
            self._pairs[key] = pair
        return curses.color_pair(pair)


def _put(screen, y: int, x: int, text: str, limit: int, attr: int) -> None:
    rows, cols = screen.getmaxyx()
    if y < 0 or x < 0 or y >= rows or x >= cols:
        return
    text = text[: max(min(limit, cols - x), 0)]
    if not text:
        return
    try:
        screen.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off screen.
        pass


def _draw_block(
    screen, rect: Rect, title: str, border_attr: int, title_attr: int, fill_attr: int
) -> None:
    if rect.width < 2 or rect.height < 2:
        return
    inner = rect.width - 2
    _put(screen, rect.y, rect.x, "\u250c" + "\u2500" * inner + "\u2510", rect.width, border_attr)
    for y in range(rect.y + 1, rect.y + rect.height - 1):
        _put(screen, y, rect.x, "\u2502", 1, border_attr)
        _put(screen, y, rect.x + 1, " " * inner, inner, fill_attr)
        _put(screen, y, rect.x + rect.width - 1, "\u2502", 1, border_attr)
    bottom = rect.y + rect.height - 1
    _put(screen, bottom, rect.x, "\u2514" + "\u2500" * inner + "\u2518", rect.width, border_attr)
    if title:
        shown = title[:inner]
        _put(screen, rect.y, rect.x + 1 + (inner - len(shown)) // 2, shown, inner, title_attr)


def _hide_cursor() -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass


def _read_text(path: str) -> str:
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


class App:
    """Diff of two files together with the state of the viewer showing it.

    Raises :class:`~sidediff.hashing.IdenticalFilesError` if the files are
    the same, and :class:`OSError` or :class:`UnicodeDecodeError` if either
    cannot be read as text.
    """

    def __init__(self, args: Args) -> None:
        self.args = args
        compare_hashes([args.file_1, args.file_2])
        old = _read_text(args.file_1)
        new = _read_text(args.file_2)
        context: int | None = None
        if args.suppress_common_lines:
            context = args.context_lines if args.context_lines is not None else 0
        self.diff: SideBySide = side_by_side(old, new, context)
        self.highlighters: tuple[Highlighter | None, Highlighter | None] = (
            highlighter_for(args.file_1),
            highlighter_for(args.file_2),
        )
        self.titles = (os.path.basename(args.file_1), os.path.basename(args.file_2))
        self.viewport = Viewport(total=len(self.diff), height=0)
        self.show_help = False
        self.finished = False

    def handle_key(self, key: str | int) -> bool:
        """Apply a key press; return ``True`` when the screen should be redrawn."""
        if isinstance(key, int) and 0 <= key < 256:
            key = chr(key)
        if key == "h":
            self.show_help = not self.show_help
            return True
        if key == "q":
            self.finished = True
            return False
        action = _ACTIONS.get(key)
        return action(self.viewport) if action is not None else False

    def handle_mouse(self, scroll_down: bool) -> bool:
        """Apply a wheel scroll; return ``True`` when the screen should be redrawn."""
        return self.viewport.scroll_down() if scroll_down else self.viewport.scroll_up()

    def run(self, screen) -> None:
        """Show the diff on a curses ``screen`` until the user quits."""
        palette = _Palette()
        _hide_cursor()
        screen.keypad(True)
        curses.mousemask(curses.ALL_MOUSE_EVENTS | curses.REPORT_MOUSE_POSITION)
        self.finished = False
        while not self.finished:
            self._draw(screen, palette)
            self._wait_for_change(screen)

    def _wait_for_change(self, screen) -> None:
        while True:
            key = screen.get_wch()
            if key == curses.KEY_RESIZE:
                return
            if key == curses.KEY_MOUSE:
                redraw = self._mouse_event()
            else:
                redraw = self.handle_key(key)
            if self.finished or redraw:
                return

    def _mouse_event(self) -> bool:
        try:
            _, _, _, _, state = curses.getmouse()
        except curses.error:
            return False
        if state & _SCROLL_UP:
            return self.handle_mouse(False)
        if state & _SCROLL_DOWN:
            return self.handle_mouse(True)
        return False

    def _draw(self, screen, palette: _Palette) -> None:
        screen.erase()
        rows, cols = screen.getmaxyx()
        screen.bkgd(" ", palette.attr(_WHITE, _BACKGROUND))
        if self.show_help:
            self._draw_help(screen, palette, Rect(0, 0, cols, rows))
            screen.refresh()
            return

        area = Rect(0, 0, cols, max(rows - 1, 0))
        boxes = split_halves(area)
        min_width = min(box.width for box in boxes)
        self.viewport.height = min(box.height for box in boxes)
        self._draw_keybinds(screen, palette, Rect(0, area.height, cols, 1))

        columns = zip(
            boxes,
            self.titles,
            (self.diff.left_lines, self.diff.right_lines),
            (self.diff.left_kinds, self.diff.right_kinds),
            self.highlighters,
        )
        for box, title, lines, kinds, highlighter in columns:
            self._draw_column(screen, palette, box, min_width, title, lines, kinds, highlighter)
        screen.refresh()

    def _draw_help(self, screen, palette: _Palette, area: Rect) -> None:
        border = palette.attr(_BORDER, _BACKGROUND)
        text = palette.attr(_WHITE, _BACKGROUND)
        _draw_block(screen, area, "Help", border, text, text)
        lines = help_lines(KEYBINDS)
        width = max(len(line) for line in lines)
        box = center_rect(area, width, len(lines) + 2)
        for row, line in enumerate(lines[: box.height]):
            _put(screen, box.y + row, box.x, line, box.width, text)

    def _draw_keybinds(self, screen, palette: _Palette, rect: Rect) -> None:
        _put(screen, rect.y, rect.x, "\u2500" * rect.width, rect.width, palette.attr(_BORDER, _BACKGROUND))
        title = " ".join(KEYBINDS)[: rect.width]
        x = rect.x + (rect.width - len(title)) // 2
        _put(screen, rect.y, x, title, rect.width, palette.attr(_WHITE, _BACKGROUND))

    def _draw_column(
        self,
        screen,
        palette: _Palette,
        box: Rect,
        min_width: int,
        title: str,
        lines: Sequence[str],
        kinds: Sequence[LineKind],
        highlighter: Highlighter | None,
    ) -> None:
        background = highlighter.background if highlighter is not None else DEFAULT_BACKGROUND
        border = palette.attr(_BORDER, _BACKGROUND)
        shift = gutter_width(self.viewport.current_line, box.height)
        inner_height = max(box.height - 2, 0)

        gutter = Rect(box.x, box.y, min(shift, box.width), box.height)
        _draw_block(screen, gutter, "", border, border, palette.attr(_WHITE, _BACKGROUND))
        for row, (number, kind) in enumerate(self.viewport.line_numbers(kinds, inner_height)):
            _put(
                screen,
                gutter.y + 1 + row,
                gutter.x + 1,
                str(number),
                gutter.width - 2,
                palette.attr(_KIND_COLOURS[kind], _BACKGROUND),
            )

        text_rect = Rect(box.x + shift, box.y, max(min_width - shift, 0), box.height)
        plain = palette.attr(_WHITE, background)
        _draw_block(screen, text_rect, title, border, palette.attr(_WHITE, _BACKGROUND), plain)
        inner_width = max(text_rect.width - 2, 0)
        column = self.viewport.current_col
        for row, line in enumerate(self.viewport.visible_rows(lines, inner_height)):
            y = text_rect.y + 1 + row
            x = text_rect.x + 1
            if highlighter is None:
                _put(screen, y, x, clip_line(line, column, inner_width), inner_width, plain)
                continue
            for colour, piece in clip_segments(highlighter.segments(line), column, inner_width):
                _put(screen, y, x, piece, text_rect.x + 1 + inner_width - x, palette.attr(colour, background))
                x += len(piece)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on the two files named in ``argv``."""
    args = parse_args(argv)
    try:
        app = App(args)
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    curses.wrapper(app.run)
    return 0