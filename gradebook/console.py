"""Line- and token-oriented terminal input and output."""

from __future__ import annotations

import sys
from typing import TextIO

DIVIDER = "-------------------------------------------------------"


class Console:
    """Reads tokens or whole lines from a text stream and writes prompts."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._rest: str | None = None

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def banner(self, title: str, text: str) -> None:
        """Write a framed screen ending with the input marker."""
        self.write(f"{title}\n{DIVIDER}\n{text}\n{DIVIDER}\n>> ")

    def _next_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\n").rstrip("\r")

    def _fill(self) -> None:
        while self._rest is None or not self._rest.strip():
            self._rest = self._next_line()
        self._rest = self._rest.lstrip()

    def read_line(self) -> str:
        """Return what is left of the current line, or the next line."""
        rest, self._rest = self._rest, None
        if rest is not None and rest.strip():
            return rest.lstrip()
        return self._next_line()

    def read_token(self) -> str:
        """Return the next whitespace-separated word."""
        self._fill()
        parts = self._rest.split(None, 1)
        self._rest = parts[1] if len(parts) > 1 else ""
        return parts[0]

    def read_int(self) -> int:
        return int(self.read_token())

    def read_float(self) -> float:
        return float(self.read_token())

    def read_char(self) -> str:
        """Return the next character that is not whitespace."""
        self._fill()
        char, self._rest = self._rest[0], self._rest[1:]
        return char

    def pause(self) -> None:
        self.write("Press Enter to continue . . . ")
        try:
            self.read_line()
        except EOFError:
            pass