"""Skipping blank space and comment lines in list files."""

from __future__ import annotations

from typing import TextIO

_WHITESPACE = " \t\n\v\f\r"
_COMMENT_CHUNK = 79


def skip_stuff(stream: TextIO) -> str | None:
    """Return the next meaningful character from ``stream``.

    Whitespace is skipped, and a ``*`` starts a comment that runs to the end
    of the line (read in chunks of at most 79 characters).  Returns ``None``
    at end of input.
    """
    while True:
        ch = stream.read(1)
        if ch == "":
            return None
        if ch in _WHITESPACE:
            continue
        if ch == "*":
            stream.readline(_COMMENT_CHUNK)
            continue
        return ch