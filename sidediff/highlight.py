"""Syntax highlighting of single lines."""

from __future__ import annotations

import os

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"
DEFAULT_BACKGROUND = "#121212"
DEFAULT_FOREGROUND = "#ffffff"


class Highlighter:
    """Splits lines into ``(colour, text)`` segments for one language."""

    def __init__(self, lexer: Lexer, style: str = DEFAULT_STYLE) -> None:
        self.lexer = lexer
        self.style = get_style_by_name(style)
        background = self.style.background_color
        self.background = background if background else DEFAULT_BACKGROUND

    def _colour(self, token_type) -> str:
        colour = self.style.style_for_token(token_type).get("color")
        return f"#{colour}" if colour else DEFAULT_FOREGROUND

    def segments(self, line: str) -> list[tuple[str, str]]:
        """Return the foreground colour and text of each token in ``line``."""
        result: list[tuple[str, str]] = []
        remaining = len(line)
        for token_type, text in self.lexer.get_tokens(line):
            if remaining <= 0:
                break
            text = text[:remaining]
            remaining -= len(text)
            if text:
                result.append((self._colour(token_type), text))
        return result


def highlighter_for(path: str | os.PathLike[str]) -> Highlighter | None:
    """Return a highlighter for ``path``'s language, or ``None`` for plain or unknown text."""
    try:
        lexer = get_lexer_for_filename(os.fspath(path), stripnl=False, ensurenl=False)
    except ClassNotFound:
        return None
    if isinstance(lexer, TextLexer):
        return None
    return Highlighter(lexer)