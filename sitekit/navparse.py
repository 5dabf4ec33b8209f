"""Rendering a bracketed outline as an indented navigation tree."""

from __future__ import annotations

import sys
from pathlib import Path

DEFAULT_INPUT = "test.txt"
_INDENT = 3


class _EndOfInput(Exception):
    pass


class _OutlineRenderer:
    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())
        self._out: list[str] = []
        self.level = 0
        self.token = ""

    def _advance(self) -> None:
        try:
            self.token = next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None

    def run(self) -> tuple[str, bool]:
        """Return the rendered text and whether the input ended cleanly."""
        try:
            while self._item():
                pass
        except _EndOfInput:
            return "".join(self._out), False
        return "".join(self._out), True

    def _item_list(self) -> bool:
        while True:
            while self._item():
                pass
            self._advance()
            if "]" in self.token:
                self.level -= 1
                return True

    def _item(self) -> bool:
        self._advance()
        if self.token == "[":
            self.level += 1
            self._item_list()
            return True
        self._out.append(" " * (self.level * _INDENT) + f"[+]---{self.token}\n")
        return False


def render_outline(text: str) -> str:
    """Return the tree lines for the outline in ``text``."""
    output, _ = _OutlineRenderer(text).run()
    return output


def main(argv: list[str] | None = None) -> int:
    """Render ``test.txt`` (or the file named first) to standard output."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_INPUT)
    print("*** Begin processing.")
    try:
        text = path.read_text()
    except OSError:
        print(f"Cannot open {path}.")
        return 1
    output, complete = _OutlineRenderer(text).run()
    sys.stdout.write(output)
    if complete:
        print("*** Done processing.")
    return 0