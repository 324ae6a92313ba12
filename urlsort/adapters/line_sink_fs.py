from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterable

from urlsort.adapters.line_source_fs import ENCODING, ERRORS


STDOUT_LABEL = "<stdout>"


class LineSinkError(RuntimeError):
    """Raised when the output destination cannot be written."""

    def __init__(self, path: str, reason: str) -> None:
        action = "writing output" if path == STDOUT_LABEL else "creating output file"
        super().__init__(f"Error {action}: {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass
class FileSystemLineSink:
    """Write lines to a file when `path` is set, otherwise to stdout."""
    stdout: BinaryIO
    path: str | None = None

    def write_lines(self, lines: Iterable[str]) -> None:
        payload = "".join(f"{line}\n" for line in lines).encode(ENCODING, errors=ERRORS)
        if self.path is None:
            try:
                self.stdout.write(payload)
                self.stdout.flush()
            except OSError as exc:
                raise LineSinkError(STDOUT_LABEL, exc.strerror or str(exc)) from exc
            return
        try:
            with open(self.path, "wb") as handle:
                handle.write(payload)
        except OSError as exc:
            raise LineSinkError(self.path, exc.strerror or str(exc)) from exc
