"""Command-line options for the side-by-side diff viewer."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

_VERSION = "0.0.3"


@dataclass(frozen=True)
class Args:
    """Parsed command-line options."""

    file_1: str
    file_2: str
    hex: bool = False
    suppress_common_lines: bool = False
    width: int | None = None
    context_lines: int | None = None


def _non_negative(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sidediff",
        description="A TUI app to visually diff two text files",
        epilog="This tool shows a side-by-side diff of two files with a terminal interface",
    )
    parser.add_argument("file_1", help="First file")
    parser.add_argument("file_2", help="Second file")
    parser.add_argument("-x", "--hex", action="store_true")
    parser.add_argument("--suppress-common-lines", action="store_true")
    parser.add_argument("-w", "--width", type=_non_negative)
    parser.add_argument("-c", "--context-lines", type=_non_negative)
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Args:
    """Parse ``argv`` (or ``sys.argv[1:]``) into an :class:`Args`."""
    namespace = _build_parser().parse_args(argv)
    return Args(
        file_1=namespace.file_1,
        file_2=namespace.file_2,
        hex=namespace.hex,
        suppress_common_lines=namespace.suppress_common_lines,
        width=namespace.width,
        context_lines=namespace.context_lines,
    )