"""Drawing a navigation tree from a dot-indented outline.

Each line of the outline is one entry; its leading dots (spaces between them
are allowed) give its depth.  The entries are drawn as an ASCII tree inside
an HTML ``<PRE>`` block.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

DEFAULT_INPUT = "nav.txt"
PAGE_HEAD = (
    "<HTML>\n"
    "<HEAD><TITLE>NAV generated file</TITLE></HEAD>\n"
    "<BODY>\n"
    "<PRE>\n"
)
PAGE_TAIL = "</PRE>\n</HTML>\n"
_LINE_CHUNK = 127
_MAX_LINES = 142


def count_leading_dots(line: str) -> int:
    """Return the number of dots before the text of ``line``; spaces are ignored."""
    dots = 0
    for ch in line:
        if ch == ".":
            dots += 1
        elif ch != " ":
            break
    return dots


def find_text_start(line: str) -> int:
    """Return the index of the first character that is neither a space nor a dot."""
    return len(line) - len(line.lstrip(" ."))


def find_more(dots: Sequence[int], start: int) -> bool:
    """Tell whether another entry at the depth of ``start`` follows it in the same branch."""
    level = dots[start]
    for following in dots[start + 1 :]:
        if following == level:
            return True
        if following < level:
            return False
    return False


def render_tree(lines: Sequence[str]) -> str:
    """Return the tree drawing for the outline ``lines``."""
    dots = [count_leading_dots(line) for line in lines]
    after = dots[1:] + [-1]
    more: dict[int, bool] = {}
    out = [" +---START\n"]
    for index, (line, level, next_level) in enumerate(zip(lines, dots, after)):
        more[level] = find_more(dots, index)
        prefix = "".join(" | " if more.get(depth) else "   " for depth in range(level))
        branch = "[-]-+-" if next_level > level else " +----"
        out.append(f"{prefix} | \n")
        out.append(prefix + branch + line[find_text_start(line) :])
    out.append(" |\n +---END\n")
    return "".join(out)


def render_page(lines: Sequence[str]) -> str:
    """Return the HTML page holding the tree for ``lines``."""
    return PAGE_HEAD + render_tree(lines) + PAGE_TAIL


def _read_lines(stream: TextIO) -> list[str]:
    lines: list[str] = []
    while len(lines) < _MAX_LINES and (chunk := stream.readline(_LINE_CHUNK)):
        lines.append(chunk)
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the page for ``nav.txt`` (or the file named first)."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0] if args else DEFAULT_INPUT)
    sys.stderr.write("*** Opening file.\n")
    try:
        with path.open() as stream:
            lines = _read_lines(stream)
    except OSError:
        sys.stderr.write("*** ERROR opening file.\n")
        return 1
    sys.stderr.write(f"*** {len(lines)} lines read.\n")
    sys.stdout.write(render_page(lines))
    return 0