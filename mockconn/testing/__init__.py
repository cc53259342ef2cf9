"""Test-framework integration helpers."""

from .pool import ConnectionPool

__all__ = ["ConnectionPool"]
