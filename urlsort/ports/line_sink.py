from __future__ import annotations

from typing import Iterable, Protocol


class LineSink(Protocol):
    """Output boundary for sorted lines."""
    def write_lines(self, lines: Iterable[str]) -> None:
        """Write lines one per line, unmodified.

        Args:
            lines (Iterable[str]): Lines to emit in order.
        """
        ...
