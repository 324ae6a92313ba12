from __future__ import annotations

from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor

from urlsort.core.models import Entry, SortKey
from urlsort.core.url_key import build_entry
from urlsort.ports.line_sink import LineSink
from urlsort.ports.line_source import LineSource


def compare_sort_keys(a: SortKey, b: SortKey) -> int:
    """Compare two sort keys.

    Fields are compared in priority order: domain, port, scheme, path, query,
    fragment. The first differing field decides. A missing port (None) is
    less than any numeric port.

    Returns:
        int: Negative if `a` sorts first, positive if `b` does, 0 if equal.
    """
    left, right = a.as_tuple(), b.as_tuple()
    return (left > right) - (left < right)


def sort_key_less(a: SortKey, b: SortKey) -> bool:
    return compare_sort_keys(a, b) < 0


def build_entries(
    lines: Iterable[str],
    defaults: Mapping[str, int | None] | None = None,
    jobs: int = 1,
) -> list[Entry]:
    """Pair every line with its sort key, optionally across worker threads.

    Notes:
        `executor.map` yields results in input order, so each key stays
        attached to the line it was derived from.
    """
    if jobs < 1:
        raise ValueError(f"jobs must be >= 1, got {jobs}")
    if jobs == 1:
        return [build_entry(line, defaults) for line in lines]
    with ThreadPoolExecutor(max_workers=jobs) as executor:
        return list(executor.map(lambda line: build_entry(line, defaults), lines))


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    return sorted(entries, key=lambda entry: entry.sort_key.as_tuple())


def sort_lines(
    lines: Iterable[str],
    defaults: Mapping[str, int | None] | None = None,
    jobs: int = 1,
) -> list[str]:
    """Sort raw URL lines and return the original strings in order."""
    entries = sort_entries(build_entries(lines, defaults, jobs))
    return [entry.original for entry in entries]


def run_sort(
    source: LineSource,
    sink: LineSink,
    defaults: Mapping[str, int | None] | None = None,
    jobs: int = 1,
) -> int:
    """Read all input, sort it and hand the original lines to the sink.

    Returns:
        int: Number of lines written.
    """
    ordered = sort_lines(source.read_lines(), defaults, jobs)
    sink.write_lines(ordered)
    return len(ordered)
