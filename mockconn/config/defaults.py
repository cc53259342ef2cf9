"""Centralized defaults for mock connections.

Kept free of imports from the rest of the package so both the logging layer
and the connection can depend on it without cycles.
"""
from __future__ import annotations

import logging

DEFAULT_LOCAL_HOST = "127.0.0.1"
DEFAULT_LOCAL_PORT = 12345
DEFAULT_REMOTE_HOST = "127.0.0.1"
DEFAULT_REMOTE_PORT = 8080

DEFAULT_LOCAL_ADDRESS = (DEFAULT_LOCAL_HOST, DEFAULT_LOCAL_PORT)
DEFAULT_REMOTE_ADDRESS = (DEFAULT_REMOTE_HOST, DEFAULT_REMOTE_PORT)

# Diagnostics go to the attached reporter and log at INFO, so the console
# stays quiet unless the level is lowered.
DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LOG_JSON = True

__all__ = [
    "DEFAULT_LOCAL_HOST",
    "DEFAULT_LOCAL_PORT",
    "DEFAULT_REMOTE_HOST",
    "DEFAULT_REMOTE_PORT",
    "DEFAULT_LOCAL_ADDRESS",
    "DEFAULT_REMOTE_ADDRESS",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_JSON",
]
