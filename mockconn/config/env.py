"""mockconn.config.env
====================

Environment variable names and small parsing helpers.

Variables
---------
``MOCKCONN_LOCAL_ADDRESS`` / ``MOCKCONN_REMOTE_ADDRESS``
    ``host:port`` overrides for the static addresses a connection reports.
    IPv6 hosts use brackets: ``[::1]:8080``.
``MOCKCONN_LOG_LEVEL``
    Level name for the shared ``mockconn`` logger (``DEBUG`` .. ``CRITICAL``).
``MOCKCONN_LOG_JSON``
    ``0``/``false``/``no``/``off`` switches the console handler to plain text.

Failure Modes
-------------
- ``parse_address`` raises ``ValueError`` on malformed input; an explicitly
  set but broken variable is a test setup error, not something to ignore.
- Lookup helpers return ``None`` when a variable is unset or blank.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

LOCAL_ADDRESS_ENV = "MOCKCONN_LOCAL_ADDRESS"
REMOTE_ADDRESS_ENV = "MOCKCONN_REMOTE_ADDRESS"
LOG_LEVEL_ENV = "MOCKCONN_LOG_LEVEL"
LOG_JSON_ENV = "MOCKCONN_LOG_JSON"

_FALSE_VALUES = {"0", "false", "no", "off"}

Address = Tuple[str, int]


def parse_address(value: str) -> Address:
    """Parse ``host:port`` (or ``[v6host]:port``) into a ``(host, port)`` tuple."""
    text = value.strip()
    host, sep, port_text = text.rpartition(":")
    if not sep or not host:
        raise ValueError(f"address must look like host:port, got {value!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        port = int(port_text)
    except ValueError as exc:
        raise ValueError(f"invalid port in address {value!r}") from exc
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range in address {value!r}")
    return host, port


def get_env(name: str) -> Optional[str]:
    """Return the stripped value of ``name`` or ``None`` when unset/blank."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def env_address(name: str) -> Optional[Address]:
    """Return the parsed address stored in ``name``, if any."""
    raw = get_env(name)
    return parse_address(raw) if raw is not None else None


def env_flag(name: str, default: bool) -> bool:
    raw = get_env(name)
    if raw is None:
        return default
    return raw.lower() not in _FALSE_VALUES


__all__ = [
    "LOCAL_ADDRESS_ENV",
    "REMOTE_ADDRESS_ENV",
    "LOG_LEVEL_ENV",
    "LOG_JSON_ENV",
    "Address",
    "parse_address",
    "get_env",
    "env_address",
    "env_flag",
]
