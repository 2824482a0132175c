"""
Console output in the host's style.

Messages carry `<info>`, `<comment>` and `<error>` tags. A decorated
console turns them into ANSI colours; an undecorated one drops them.
"""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

STYLES = {
    "info": "\033[32m",
    "comment": "\033[33m",
    "error": "\033[37;41m",
}
RESET = "\033[0m"

_TAG = re.compile(r"<(/?)(info|comment|error)>")


def render(message: str, decorated: bool) -> str:
    """Replace style tags with ANSI sequences, or strip them."""

    def _replace(match: "re.Match[str]") -> str:
        if not decorated:
            return ""
        if match.group(1):
            return RESET
        return STYLES[match.group(2)]

    return _TAG.sub(_replace, message)


class ConsoleIO:
    """
    Minimal host console: normal and error output plus the display flags
    the installer command mirrors.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
        *,
        decorated: bool = False,
        verbosity: int = 0,
    ) -> None:
        self._stream = stream
        self._error_stream = error_stream
        self._decorated = decorated
        self._verbosity = verbosity

    def is_decorated(self) -> bool:
        return self._decorated

    def is_verbose(self) -> bool:
        return self._verbosity > 0

    def write(self, message: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(render(message, self._decorated) + "\n")
        stream.flush()

    def write_error(self, message: str) -> None:
        stream = self._error_stream or sys.stderr
        stream.write(render(message, self._decorated) + "\n")
        stream.flush()
