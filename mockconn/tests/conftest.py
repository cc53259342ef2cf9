"""Pytest configuration for the mockconn test suite.

Provides a collecting reporter, a connection wired to it, and an autouse
fixture that clears ``MOCKCONN_*`` environment variables so a developer's
shell settings never leak into assertions.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from mockconn import CollectingReporter, MockConnection
from mockconn.config.env import (
    LOCAL_ADDRESS_ENV,
    LOG_JSON_ENV,
    LOG_LEVEL_ENV,
    REMOTE_ADDRESS_ENV,
)
# Re-exported so the fixture is available even when the package is not
# installed and the pytest11 entry point is therefore not registered.
from mockconn.testing.pytest_plugin import mock_conn  # noqa: F401


@pytest.fixture(autouse=True)
def clean_mockconn_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop MOCKCONN_* variables for the duration of a test."""

    for name in (LOCAL_ADDRESS_ENV, REMOTE_ADDRESS_ENV, LOG_LEVEL_ENV, LOG_JSON_ENV):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture()
def reporter() -> CollectingReporter:
    return CollectingReporter()


@pytest.fixture()
def conn(reporter: CollectingReporter) -> MockConnection:
    """A connection reporting into ``reporter``; the scenario is left empty."""

    return MockConnection(reporter, name="test-conn")
