# sidediff

`sidediff` opens two text files side by side in your terminal, using curses.
Each column has a gutter of line numbers: rows removed from the first file
are numbered in red on the left, rows added in the second file are numbered
in green on the right, and unchanged rows are numbered in grey. When Pygments
recognises a file's type from its name, that column is syntax-highlighted.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```
sidediff OLD_FILE NEW_FILE [options]
```

Both files are read as UTF-8 text. If the two files are byte-for-byte
identical, `sidediff` prints `There is no diff between the files` and exits
with status 1 without opening the viewer; the same happens, with the error
message, if either file cannot be read.

### Options

| Option | Meaning |
| --- | --- |
| `--suppress-common-lines` | Show only the changed hunks, not the whole file. |
| `-c N`, `--context-lines N` | With `--suppress-common-lines`, keep `N` unchanged lines around each change (default 0). Ignored otherwise. |
| `-x`, `--hex` | Accepted and parsed, but not used by the viewer. |
| `-w N`, `--width N` | Accepted and parsed, but not used by the viewer. |
| `-V`, `--version` | Print the version and exit. |

### Keys

| Key | Action |
| --- | --- |
| `n` / PageDown | next page |
| `l` / PageUp | last page |
| Up / Down, mouse wheel | scroll one line |
| `e` | end of file |
| `b` | beginning of file |
| `r` | reset the view |
| `h` | show or hide help |
| `q` | quit |

## Using it from Python

The pieces behind the viewer can be used without a terminal:

```python
from sidediff.diffing import side_by_side, hex_chunks
from sidediff.hashing import compare_hashes, IdenticalFilesError

view = side_by_side("a\nb\n", "a\nc\n", context=None)
view.left_lines    # ['a', 'b', '']
view.right_lines   # ['a', '', 'c']
view.left_kinds    # [LineKind.CONTEXT, LineKind.DELETED, LineKind.CONTEXT]

hex_chunks("hello", 2)  # '6865 6c6c 006f'
```

- `sidediff.diffing.side_by_side(old, new, context)` returns a `SideBySide`
  holding the left and right columns and a `LineKind` (`CONTEXT`, `DELETED`,
  `INSERTED`) for each row. Lines have trailing whitespace stripped and tabs
  expanded to four spaces. Pass `context=None` to keep every line, or a number
  to keep only that many unchanged lines around each change. Identical texts
  give no rows.
- `sidediff.diffing.hex_chunks(text, width)` renders the UTF-8 bytes of
  `text` as space-separated hex groups of `width` bytes (default 4).
- `sidediff.hashing.compare_hashes(paths)` returns the SHA-256 digests of the
  files and raises `IdenticalFilesError` when they are all the same.
- `sidediff.viewer.Viewport` holds the scroll position, and `clip_line` and
  `clip_segments` cut a row down to the visible columns.
- `sidediff.highlight.highlighter_for(path)` returns a `Highlighter` that
  splits a line into `(colour, text)` segments, or `None` for plain or
  unrecognised files.
- `sidediff.app.main(argv)` runs the viewer, as the `sidediff` command does.

## What it does not do

- The viewer has no hex display: `--hex` and `--width` are parsed but have
  no effect on the screen. Hex rendering is only available from Python
  through `hex_chunks`.
- There is no horizontal scrolling; long lines are cut at the edge of their
  column.
- It only shows the diff. It does not write a patch or any other output,
  and it does not edit or merge the files.
- It needs the `curses` module, so the viewer does not run where Python has
  no curses, such as a stock Windows install.