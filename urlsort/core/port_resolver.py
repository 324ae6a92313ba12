from __future__ import annotations

import re
import socket
from collections.abc import Mapping


SCHEME_DEFAULT_PORTS: dict[str, int | None] = {
    "http": 80,
    "https": 443,
    "ftp": 21,
    "ssh": 22,
    "ws": 80,
    "wss": 443,
    "file": None,
}

_NUMERIC_PORT = re.compile(r"^[0-9]+$")


def resolve_port(
    port_token: str | None,
    scheme: str,
    defaults: Mapping[str, int | None] | None = None,
) -> int | None:
    """Resolve a port token to a numeric port.

    Args:
        port_token (str | None): Port text from the URL authority, numeric or
            a service name.
        scheme (str): URL scheme used for the default when the token is
            absent or cannot be resolved.
        defaults (Mapping[str, int | None] | None): Extra scheme defaults
            consulted before the built-in table.

    Returns:
        int | None: Port number, or None when no port can be determined.
    """
    if port_token:
        if _NUMERIC_PORT.match(port_token):
            try:
                return int(port_token)
            except ValueError:
                # Beyond the interpreter int conversion limit.
                return default_port(scheme, defaults)
        port = lookup_service(port_token, "tcp")
        if port is None:
            port = lookup_service(port_token, "udp")
        if port is not None:
            return port
    return default_port(scheme, defaults)


def default_port(scheme: str, defaults: Mapping[str, int | None] | None = None) -> int | None:
    """Return the implied port for a scheme.

    Notes:
        Configured defaults win over the built-in table; unknown schemes fall
        back to a local service-name lookup on tcp.
    """
    if not scheme:
        return None
    lowered = scheme.lower()
    if defaults and lowered in defaults:
        return defaults[lowered]
    if lowered in SCHEME_DEFAULT_PORTS:
        return SCHEME_DEFAULT_PORTS[lowered]
    return lookup_service(lowered, "tcp")


def lookup_service(name: str, protocol: str) -> int | None:
    try:
        return socket.getservbyname(name, protocol)
    except (OSError, ValueError):
        return None
