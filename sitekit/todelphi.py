"""Uploading files to the people.delphi.com web directory over one ftp session."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path

from sitekit.ftpem import expand_patterns, run_session

PROGRAM = "todelphi"
SERVER = "people.delphi.com"
SESSION_FILE = "todelphi.ftp"

_USAGE = (
    "\n"
    "Syntax: todelphi username password file {file} {...}\n"
    "Usage : Batch transfers files to people.delphi.com one file at a time.\n"
    "Opts  : -? or /? = display this message.\n"
)


def _login(user: str, password: str) -> str:
    return f"o {SERVER}\n{user}\n{password}\nbin\ncd web\n"


def session_for_files(
    user: str, password: str, names: Iterable[str], disconnect: bool = False
) -> str:
    """Return the session script sending ``names`` to the web directory.

    With ``disconnect`` set, every file gets its own connection; otherwise
    all files go over a single one.
    """
    parts = ["glob\n", "hash\n"]
    if not disconnect:
        parts.append(_login(user, password))
    for name in names:
        if disconnect:
            parts.append(_login(user, password))
        parts.append(f"put {name}\n")
        if disconnect:
            parts.append("disconnect\n")
    if not disconnect:
        parts.append("disconnect\n")
    parts.append("quit\n")
    return "".join(parts)


def usage() -> None:
    """Print the help screen."""
    sys.stdout.write(_USAGE)


def main(argv: list[str] | None = None) -> int:
    """Build the session for ``username password pattern...`` and run ftp."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        usage()
        return 1
    user, password, *patterns = args
    try:
        names = expand_patterns(patterns)
    except FileNotFoundError as exc:
        print(f"{PROGRAM}: Unable to create file list: {exc.args[0]}")
        return 1
    try:
        Path(SESSION_FILE).write_text(session_for_files(user, password, names))
    except OSError:
        print(f"{PROGRAM}: Unable to create '{SESSION_FILE}'.")
        return 1
    return run_session(PROGRAM, SESSION_FILE)