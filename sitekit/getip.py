"""Finding the current IP address from the output of ``route print``."""

from __future__ import annotations

import io
import subprocess
from collections.abc import Callable

_LINE_CHUNK = 79
_IP_COLUMN = 67
_IP_MAX = 16


class IPLookupError(Exception):
    """Raised when the routing table cannot be obtained."""


def parse_route_output(text: str) -> str | None:
    """Return the address that ends at column 67 of the route listing, if any."""
    stream = io.StringIO(text)
    while chunk := stream.readline(_LINE_CHUNK):
        if len(chunk) > _IP_COLUMN and chunk[_IP_COLUMN] in "0123456789":
            space = chunk.rfind(" ", 0, _IP_COLUMN + 1)
            start = space + 1 if space != -1 else 1
            return chunk[start : _IP_COLUMN + 1][:_IP_MAX]
    return None


def _run_route() -> str:
    try:
        result = subprocess.run(
            ["route", "print"], capture_output=True, text=True, check=False
        )
    except OSError as exc:
        raise IPLookupError("Unable to fork 'route' command.") from exc
    if result.returncode != 0:
        raise IPLookupError("Unable to fork 'route' command.")
    return result.stdout


def get_ip(runner: Callable[[], str] | None = None) -> str:
    """Return the current IP address, or an empty string if none is listed."""
    text = (runner or _run_route)()
    return parse_route_output(text) or ""