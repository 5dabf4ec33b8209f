"""Renaming the files of a DOS directory listing to a common root name.

Each file entry of the listing is given the root name plus a three digit
sequence number, keeping its extension.  By default the renames are only
shown; ``-x`` carries them out.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

VERSION = "1.06"
ROOT_MAX = 8
_LINE_CHUNK = 80
_MIN_LINE = 44
_TIME_COLUMN = 39
_DIR_COLUMN = 15
_EXT_COLUMN = 9
_EXT_LENGTH = 3
_NUMBER_LIMIT = 999

_USAGE = (
    f"\nRootname v{VERSION}\n\n"
    "Syntax: dir | rootname -z {basename}\n"
    "        rootname {basename}\n"
    "        rootname -z {basename} < {dirfile.txt}\n"
    "Usage : DOS batch root filename renamer filter.\n"
    "Opts  : -? or /? = display this message.\n"
    "        -z or /z = read directory output from standard input (filter).\n"
    "        -x or /x = carry out the renames instead of listing them.\n"
    "        -0=N     = digits of the sequence number (always 3).\n"
    "        {basename} is the required root name the files will have.\n"
)


def number_suffix(num: int) -> str:
    """Return the three digit sequence text for entry ``num`` (counted from 1).

    Entry 1 becomes ``000``; numbers above 999 raise ``ValueError``.
    """
    if num > _NUMBER_LIMIT:
        raise ValueError(f"sequence number {num} is above {_NUMBER_LIMIT}")
    return f"{max(num - 1, 0):03d}"


def parse_dir_line(line: str) -> tuple[str, str] | None:
    """Return ``(dosname, extension)`` for a file line of a listing, else ``None``.

    Short lines, lines without a time column and directory entries are not
    file lines.
    """
    if len(line) < _MIN_LINE:
        return None
    line = line[:-1]
    if line[_TIME_COLUMN] != ":" or line[_DIR_COLUMN] == "<":
        return None
    name = line.split(" ", 1)[0]
    ext = line[_EXT_COLUMN : _EXT_COLUMN + _EXT_LENGTH]
    return f"{name}.{ext}", ext


def rename_plan(lines: Iterable[str], root: str) -> list[tuple[str, str]]:
    """Return the ``(old, new)`` name pairs for the file lines in ``lines``."""
    plan: list[tuple[str, str]] = []
    for line in lines:
        parsed = parse_dir_line(line)
        if parsed is None:
            continue
        dosname, ext = parsed
        try:
            suffix = number_suffix(len(plan) + 1)
        except ValueError:
            suffix = ""
        plan.append((dosname, f"{root}{suffix}.{ext}"))
    return plan


def usage() -> None:
    """Print the help screen to standard error."""
    sys.stderr.write(_USAGE)


def _chunks(stream: TextIO) -> Iterator[str]:
    return iter(lambda: stream.readline(_LINE_CHUNK), "")


def _listing() -> str | int:
    try:
        result = subprocess.run(
            "dir", shell=True, capture_output=True, text=True, check=False
        )
    except OSError:
        return 1
    if result.returncode != 0:
        return result.returncode
    return result.stdout


def main(argv: list[str] | None = None) -> int:
    """Show, or with ``-x`` perform, the renames for a directory listing."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        usage()
        return 1

    root: str | None = None
    filter_mode = False
    perform = False
    for arg in args:
        if not arg.startswith(("-", "/")):
            root = arg[:ROOT_MAX]
            continue
        letter = arg[1:2].upper()
        if letter in ("?", "H"):
            usage()
            return 0
        if letter == "0":
            continue
        if letter == "Z":
            filter_mode = True
        elif letter == "X":
            perform = True
        else:
            sys.stderr.write(f"\nUnrecognized option: {arg}\n")
            usage()
            return 1

    if root is None:
        usage()
        return 1

    if filter_mode:
        lines: Iterable[str] = _chunks(sys.stdin)
    else:
        listing = _listing()
        if isinstance(listing, int):
            return listing
        lines = listing.splitlines(keepends=True)

    sys.stderr.write("rootname:  Now reading directory output.\n")
    sys.stderr.write(f"           Attempting to rename files to base of '{root}'.\n")

    plan = rename_plan(lines, root)
    for old, new in plan:
        if perform:
            try:
                os.rename(old, new)
            except OSError as exc:
                sys.stderr.write(f"rootname:  Unable to rename {old}: {exc}\n")
                return 1
        else:
            print("----- fork:")
            print(f"      rename {old} {new}")
    if not perform:
        print(f"{len(plan) + 1} directory entries processed.")
    return 0