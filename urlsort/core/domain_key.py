from __future__ import annotations

import ipaddress


def build_domain_key(hostname: str) -> str:
    """Build the comparable domain key for a hostname.

    IP literals are kept as-is (lowercased); names are reversed label by
    label so `www.yahoo.com` becomes `com.yahoo.www`.
    """
    if not hostname:
        return ""
    if is_ip_literal(hostname):
        return hostname.lower()
    labels = hostname.lower().split(".")
    labels.reverse()
    return ".".join(labels)


def is_ip_literal(host: str) -> bool:
    value = host
    if value.startswith("[") and value.endswith("]"):
        value = value[1:-1]
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True
