from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO


STDIN_TOKEN = "-"
ENCODING = "utf-8"
# Undecodable bytes survive a read/write round trip unchanged.
ERRORS = "surrogateescape"


class LineSourceError(RuntimeError):
    """Raised when an input file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Error reading {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass
class FileSystemLineSource:
    """Read lines from named files and/or stdin, concatenated in order.

    With no paths all of stdin is read; a `-` path reads stdin at that
    position.
    """
    stdin: BinaryIO
    paths: list[str] = field(default_factory=list)

    def read_lines(self) -> list[str]:
        if not self.paths:
            return split_lines(self.stdin.read())
        lines: list[str] = []
        for path in self.paths:
            if path == STDIN_TOKEN:
                lines.extend(split_lines(self.stdin.read()))
                continue
            try:
                with open(path, "rb") as handle:
                    payload = handle.read()
            except OSError as exc:
                raise LineSourceError(path, exc.strerror or str(exc)) from exc
            lines.extend(split_lines(payload))
        return lines


def split_lines(payload: bytes) -> list[str]:
    """Split raw bytes on newlines, keeping everything else verbatim.

    Notes:
        A final line without a terminator is kept; a trailing newline does
        not produce an extra empty line. Carriage returns are not stripped.
    """
    if not payload:
        return []
    text = payload.decode(ENCODING, errors=ERRORS)
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines
