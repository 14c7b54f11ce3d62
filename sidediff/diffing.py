"""Line diffs laid out as two aligned columns."""

from __future__ import annotations

import difflib
import enum
from dataclasses import dataclass, field

_TAB = " " * 4


class LineKind(enum.Enum):
    """How a row in one column relates to the other file."""

    CONTEXT = "c"
    DELETED = "r"
    INSERTED = "g"


@dataclass
class SideBySide:
    """Aligned left and right columns of a diff."""

    left_kinds: list[LineKind] = field(default_factory=list)
    left_lines: list[str] = field(default_factory=list)
    right_kinds: list[LineKind] = field(default_factory=list)
    right_lines: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return max(len(self.left_kinds), len(self.right_kinds))

    def _add(self, left_kind: LineKind, left: str, right_kind: LineKind, right: str) -> None:
        self.left_kinds.append(left_kind)
        self.left_lines.append(left)
        self.right_kinds.append(right_kind)
        self.right_lines.append(right)


def clean_line(text: str) -> str:
    """Strip trailing whitespace and expand tabs to four spaces."""
    return text.rstrip().replace("\t", _TAB)


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def side_by_side(old: str, new: str, context: int | None = None) -> SideBySide:
    """Diff ``old`` against ``new`` and lay the result out in two columns.

    ``context`` is the number of unchanged lines kept around each change;
    ``None`` keeps every unchanged line.  Identical texts give no rows.
    """
    if context is not None and context < 0:
        raise ValueError("context must not be negative")
    old_lines = _split_lines(old)
    new_lines = _split_lines(new)
    result = SideBySide()
    if old_lines == new_lines:
        return result

    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    groups = [matcher.get_opcodes()] if context is None else matcher.get_grouped_opcodes(context)

    for group in groups:
        for tag, i1, i2, j1, j2 in group:
            if tag == "equal":
                for line in old_lines[i1:i2]:
                    cleaned = clean_line(line)
                    result._add(LineKind.CONTEXT, cleaned, LineKind.CONTEXT, cleaned)
                continue
            for line in old_lines[i1:i2]:
                result._add(LineKind.DELETED, clean_line(line), LineKind.CONTEXT, "")
            for line in new_lines[j1:j2]:
                result._add(LineKind.CONTEXT, "", LineKind.INSERTED, clean_line(line))
    return result


def hex_chunks(text: str, width: int | None = None) -> str:
    """Render ``text``'s UTF-8 bytes as space-separated hex groups of ``width`` bytes.

    Each byte is written without padding, and each group is then left-padded
    with zeros to ``2 * width`` characters.
    """
    size = 4 if width is None else width
    if size <= 0:
        raise ValueError("width must be positive")
    data = text.encode("utf-8")
    groups = (
        "".join(f"{byte:x}" for byte in data[start : start + size])
        for start in range(0, len(data), size)
    )
    return " ".join(group.rjust(size * 2, "0") for group in groups)