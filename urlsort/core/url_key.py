from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlsplit

from urlsort.core.domain_key import build_domain_key
from urlsort.core.models import Entry, SortKey
from urlsort.core.port_resolver import default_port, resolve_port


def extract_sort_key(line: str, defaults: Mapping[str, int | None] | None = None) -> SortKey:
    """Derive the sort key for one input line.

    Args:
        line (str): Raw input line.
        defaults (Mapping[str, int | None] | None): Extra scheme default ports.

    Returns:
        SortKey: Extracted key, or `SortKey.empty()` when the line is blank or
        cannot be parsed.

    Notes:
        This never raises for malformed input. Path, query and fragment are
        kept exactly as written, without percent-decoding.
    """
    if not line.strip():
        return SortKey.empty()
    try:
        parts = urlsplit(line)
    except ValueError:
        return SortKey.empty()

    scheme = parts.scheme.lower()
    host, port_token = split_authority(parts.netloc)
    if port_token:
        port = resolve_port(port_token, scheme, defaults)
    else:
        port = default_port(scheme, defaults)

    return SortKey(
        domain=build_domain_key(host),
        port=port,
        scheme=scheme,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
    )


def build_entry(line: str, defaults: Mapping[str, int | None] | None = None) -> Entry:
    return Entry(original=line, sort_key=extract_sort_key(line, defaults))


def split_authority(netloc: str) -> tuple[str, str | None]:
    """Split an authority into host and raw port text.

    Userinfo is dropped and IPv6 brackets are removed from the host. An empty
    port (`host:`) is reported as absent.
    """
    _, _, hostport = netloc.rpartition("@")
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            return hostport[1:], None
        host = hostport[1:end]
        rest = hostport[end + 1:]
        port_token = rest[1:] if rest.startswith(":") else None
    else:
        host, sep, port_token = hostport.rpartition(":")
        if not sep:
            host, port_token = hostport, None
    return host, port_token or None
