from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SortKey:
    """Derived sort key for a single URL line.

    `port` is None when no numeric port could be determined; None orders
    before every real port, including 0.
    """
    domain: str = ""
    port: int | None = None
    scheme: str = ""
    path: str = ""
    query: str = ""
    fragment: str = ""

    @staticmethod
    def empty() -> "SortKey":
        return SortKey()

    def as_tuple(self) -> tuple:
        """Tuple whose natural ordering matches `compare_sort_keys`."""
        port_rank = (0, 0) if self.port is None else (1, self.port)
        return (self.domain, port_rank, self.scheme, self.path, self.query, self.fragment)


@dataclass(frozen=True)
class Entry:
    """Original input line paired with its sort key."""
    original: str
    sort_key: SortKey
