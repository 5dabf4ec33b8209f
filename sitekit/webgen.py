"""Reading adventure page templates and room maps.

A template marks where each keyword (``IMAGE``, ``FACING`` and so on)
belongs.  A map lists rooms as ``north,south,west,east`` numbers, each
optionally followed by override lines; ``*`` starts a comment.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Generator, Iterator
from dataclasses import dataclass, field
from typing import TextIO

KEYWORDS = (
    "IMAGE",
    "FACING",
    "DESCRIPTION",
    "MOVEL",
    "MOVER",
    "FORWARD",
    "BACK",
    "TURNLEFT",
    "TURNRIGHT",
    "TURNAROUND",
)
MAX_TEMPLATE_LINES = 50
_TEMPLATE_CHUNK = 127
_MAP_CHUNK = 199
_DIRECTIONS = 4
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_USAGE = (
    "\nWebGen v0.00\n"
    "\n"
    "Syntax: WebGen {-opts} [templatefile]\n"
    "Usage : HTML adventure generator.\n"
    "Opts  : -? or /? = display this message.\n"
)


@dataclass
class Template:
    """Template lines and the line on which each keyword first appears."""

    lines: list[str] = field(default_factory=list)
    keylines: dict[str, int] = field(default_factory=dict)


def read_template(stream: TextIO) -> Template:
    """Read at most 50 template lines, noting where each keyword appears."""
    template = Template()
    while chunk := stream.readline(_TEMPLATE_CHUNK):
        number = len(template.lines)
        template.lines.append(chunk)
        for keyword in KEYWORDS:
            if keyword not in chunk:
                continue
            if keyword in template.keylines:
                sys.stderr.write("Duplicated keyword - ignoring.\n")
            else:
                template.keylines[keyword] = number
        if len(template.lines) >= MAX_TEMPLATE_LINES:
            sys.stderr.write("Template file too big - ignoring.\n")
            break
    return template


class _MapScanner:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def read(self) -> str:
        if self._pos >= len(self._text):
            return ""
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def unread(self) -> None:
        self._pos -= 1

    def read_line(self) -> str:
        end = self._text.find("\n", self._pos)
        stop = len(self._text) if end == -1 else end + 1
        stop = min(stop, self._pos + _MAP_CHUNK)
        chunk = self._text[self._pos : stop]
        self._pos = stop
        return chunk

    def skip(self) -> Generator[str, None, str]:
        while True:
            ch = self.read()
            if ch == "":
                return ""
            if ch in _WHITESPACE:
                continue
            if ch == "*":
                yield f"Comment: {self.read_line()}"
                continue
            return ch

    def _read_int(self) -> int | None:
        match = _INT.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return int(match.group(1))

    def _expect_comma(self) -> bool:
        if self._text.startswith(",", self._pos):
            self._pos += 1
            return True
        return False

    def read_directions(self) -> list[int]:
        values: list[int] = []
        for index in range(_DIRECTIONS):
            if index and not self._expect_comma():
                break
            value = self._read_int()
            if value is None:
                break
            values.append(value)
        return values


def process_map(stream: TextIO) -> Iterator[str]:
    """Yield the progress messages for a map; raise ``ValueError`` on a bad room."""
    scanner = _MapScanner(stream.read())
    line = 1
    while True:
        ch = yield from scanner.skip()
        if not ch:
            break
        if ch not in _DIGITS:
            continue
        scanner.unread()
        if len(scanner.read_directions()) != _DIRECTIONS:
            raise ValueError(f"Error in .map file on line {line}.")
        while True:
            ch = yield from scanner.skip()
            if not ch:
                break
            scanner.unread()
            if ch in _DIGITS:
                yield "Writing .htm file...\n"
                break
            yield f"Override? --> {scanner.read_line()}"
    yield f"{line} lines processed.\n"


def usage() -> None:
    """Print the help screen to standard error."""
    sys.stderr.write(_USAGE)


def main(argv: list[str] | None = None) -> int:
    """Read ``<basename>.tem`` and then work through ``<basename>.map``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        usage()
        return 0

    basename: str | None = None
    for arg in args:
        if arg.startswith(("-", "/")):
            if arg[1:2].upper() not in ("?", "H"):
                sys.stderr.write(f"\nUnrecognized option: {arg}")
            usage()
            return 0
        basename = arg
    if not basename:
        sys.stderr.write("Error - no basename!\n")
        return 1

    try:
        with open(basename + ".tem") as stream:
            read_template(stream)
    except OSError:
        sys.stderr.write("Error opening template file.\n")
        return 1

    map_path = basename + ".map"
    try:
        source = open(map_path)
    except OSError:
        sys.stderr.write(f"Unable to open map file '{map_path}'...\n")
        return 0
    with source:
        try:
            for text in process_map(source):
                sys.stdout.write(text)
        except ValueError as exc:
            sys.stderr.write(f"{exc}\n")
    return 0