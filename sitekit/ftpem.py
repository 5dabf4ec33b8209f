"""Uploading files to an ftp site, one connection per file.

A session script is written that opens the server, logs in, switches to
binary mode, sends one file and disconnects, for every file matched by the
patterns on the command line.  The ftp program is then run on the script.
"""

from __future__ import annotations

import glob
import os
import subprocess
import sys
from collections.abc import Iterable
from pathlib import Path

VERSION = "0.02"
PROGRAM = "ftpem"
SESSION_FILE = "ftpem.ftp"

_USAGE = (
    f"\nFTPem {VERSION}\n"
    "\n"
    "Syntax: ftpem ftp.server.com username password file {file} {...}\n"
    "Usage : Batch transfers files to an ftp site one file at a time.\n"
    "Opts  : -? or -h = display this message.\n"
    "\n"
    "NOTE  : Requires FTP to be found on PATH.\n"
)


def expand_patterns(patterns: Iterable[str]) -> list[str]:
    """Return the files matched by each pattern in turn, sorted within a pattern.

    Raises ``FileNotFoundError`` naming the first pattern that matches no file.
    """
    names: list[str] = []
    for pattern in patterns:
        matches = sorted(path for path in glob.glob(pattern) if os.path.isfile(path))
        if not matches:
            raise FileNotFoundError(pattern)
        names.extend(matches)
    return names


def session_for_files(
    server: str, user: str, password: str, names: Iterable[str]
) -> str:
    """Return the session script sending each of ``names`` on its own connection."""
    parts = ["glob\n", "hash\n"]
    for name in names:
        parts.append(
            f"o {server}\n{user}\n{password}\nbin\nput {name}\ndisconnect\n"
        )
    parts.append("quit\n")
    return "".join(parts)


def usage() -> None:
    """Print the help screen."""
    sys.stdout.write(_USAGE)


def run_session(program: str, session: str) -> int:
    """Run ftp on ``session``, then remove it; return 0 on success, else 1."""
    try:
        result = subprocess.run(["ftp", f"-s:{session}"], check=False)
        launched = result.returncode == 0
    except OSError:
        launched = False
    if not launched:
        print(f"{program}: Unable to launch ftp program.")
        return 1
    try:
        Path(session).unlink()
    except OSError:
        print(f"{program}: Unable to delete ftp session file '{session}'")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Build the session for ``server user password pattern...`` and run ftp."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 4:
        usage()
        return 1
    server, user, password, *patterns = args
    try:
        names = expand_patterns(patterns)
    except FileNotFoundError as exc:
        print(f"{PROGRAM}: Unable to create file list: {exc.args[0]}")
        return 1
    try:
        Path(SESSION_FILE).write_text(
            session_for_files(server, user, password, names)
        )
    except OSError:
        print(f"{PROGRAM}: Unable to create '{SESSION_FILE}'.")
        return 1
    return run_session(PROGRAM, SESSION_FILE)