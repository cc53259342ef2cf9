"""Unified configuration layer for mock connections.

Merge order (later wins):
    1. Built-in defaults (``defaults.py``)
    2. Environment variables (``MOCKCONN_LOCAL_ADDRESS`` and friends)
    3. In-code overrides passed to :func:`get_connection_settings`

Public API
----------
* get_connection_settings(overrides: dict | None = None) -> ConnectionSettings
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel

from .defaults import DEFAULT_LOCAL_ADDRESS, DEFAULT_REMOTE_ADDRESS
from .env import LOCAL_ADDRESS_ENV, REMOTE_ADDRESS_ENV, env_address


class ConnectionSettings(BaseModel):
    """Resolved static settings for one mock connection."""

    local_address: Tuple[str, int] = DEFAULT_LOCAL_ADDRESS
    remote_address: Tuple[str, int] = DEFAULT_REMOTE_ADDRESS


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if (local := env_address(LOCAL_ADDRESS_ENV)) is not None:
        out["local_address"] = local
    if (remote := env_address(REMOTE_ADDRESS_ENV)) is not None:
        out["remote_address"] = remote
    return out


def get_connection_settings(overrides: Optional[Dict[str, Any]] = None) -> ConnectionSettings:
    """Return merged settings: defaults -> env vars -> overrides."""
    cfg: Dict[str, Any] = {
        "local_address": DEFAULT_LOCAL_ADDRESS,
        "remote_address": DEFAULT_REMOTE_ADDRESS,
    }
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return ConnectionSettings(**cfg)


__all__ = ["ConnectionSettings", "get_connection_settings"]
