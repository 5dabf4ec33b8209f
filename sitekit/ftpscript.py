"""Compiling a bracketed site description into an ftp command script.

The grammar is::

    site     := NAME ( "[" user { user } "]" | user )
    user     := NAME PASSWORD ( "[" dir { dir } "]" | dir )
    dir      := NAME mode
    mode     := MODE ( "[" file { file } "]" | file )
    file     := SOURCE DEST

Output stops where the input runs out.
"""

from __future__ import annotations

import sys
from pathlib import Path

DEFAULT_INPUT = "test.txt"


class _EndOfInput(Exception):
    pass


class _ScriptCompiler:
    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())
        self._out: list[str] = []
        self.token = ""

    def _advance(self) -> None:
        try:
            self.token = next(self._tokens)
        except StopIteration:
            raise _EndOfInput from None

    def _emit(self, text: str) -> None:
        self._out.append(text)

    def run(self) -> str:
        try:
            while True:
                self._advance()
                self._site()
                self._emit("disconnect\n")
        except _EndOfInput:
            pass
        return "".join(self._out)

    def _site(self) -> None:
        self._emit(f"o {self.token}\n")
        self._advance()
        if self.token == "[":
            self._advance()
            self._user_list()
        else:
            self._user()

    def _user_list(self) -> None:
        while True:
            self._user()
            self._advance()
            if "]" in self.token:
                return

    def _user(self) -> None:
        self._emit(f"{self.token}\n")
        self._advance()
        self._emit(f"{self.token}\n")
        self._advance()
        if "[" in self.token:
            self._advance()
            self._dir_list()
        else:
            self._dir()

    def _dir_list(self) -> None:
        while True:
            self._dir()
            self._advance()
            if "]" in self.token:
                return

    def _dir(self) -> None:
        self._emit(f"cd {self.token}\n")
        self._advance()
        self._mode()

    def _mode(self) -> None:
        self._emit("bin\n" if self.token.startswith("b") else "ascii\n")
        self._advance()
        if "[" in self.token:
            self._advance()
            self._file_list()
        else:
            self._file()

    def _file_list(self) -> None:
        while True:
            self._file()
            self._advance()
            if "]" in self.token:
                return

    def _file(self) -> None:
        self._emit(f"put {self.token} ")
        self._advance()
        self._emit(f"{self.token}\n")


def compile_script(text: str) -> str:
    """Return the ftp commands described by ``text``."""
    return _ScriptCompiler(text).run()


def main(argv: list[str] | None = None) -> int:
    """Print the script compiled from ``test.txt`` (or the file named first)."""
    args = sys.argv[1:] if argv is None else argv
    path = Path(args[0] if args else DEFAULT_INPUT)
    try:
        text = path.read_text()
    except OSError:
        print(f"Cannot open {path}.")
        return 1
    sys.stdout.write(compile_script(text))
    return 0