"""Replacing ``*ip*`` and ``*time*`` macros in text files."""

from __future__ import annotations

from datetime import datetime
from typing import TextIO

IP_MACRO = "*ip*"
TIME_MACRO = "*time*"
_LINE_CHUNK = 127


def format_asctime(moment: datetime) -> str:
    """Format ``moment`` like the C ``asctime`` string, without the newline."""
    return moment.ctime()


def filter_line(line: str, ip: str, stamp: str) -> str:
    """Replace the first ``*ip*`` in ``line``, or failing that the first ``*time*``."""
    if IP_MACRO in line:
        return line.replace(IP_MACRO, ip, 1)
    if TIME_MACRO in line:
        return line.replace(TIME_MACRO, stamp, 1)
    return line


def ip_filter(
    source: TextIO, dest: TextIO, ip: str, now: datetime | None = None
) -> None:
    """Copy ``source`` to ``dest``, expanding macros chunk by chunk."""
    stamp = format_asctime(now if now is not None else datetime.now())
    while chunk := source.readline(_LINE_CHUNK):
        dest.write(filter_line(chunk, ip, stamp))