from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version


def get_urlsort_version() -> str:
    """Installed distribution version, or "dev" when running from a checkout."""
    try:
        return version("urlsort")
    except PackageNotFoundError:
        return "dev"
