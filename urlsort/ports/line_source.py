from __future__ import annotations

from typing import Protocol


class LineSource(Protocol):
    """Input boundary producing raw URL lines."""
    def read_lines(self) -> list[str]:
        """Return every input line, in order, without line terminators.

        Returns:
            list[str]: Lines exactly as read.
        """
        ...
