"""ConnectionPool bookkeeping and the ``mock_conn`` pytest fixture."""

from __future__ import annotations

import pytest

from mockconn import CollectingReporter, MockConnection, Receive, Send, Terminate
from mockconn.testing import ConnectionPool


def test_pool_names_and_tracks_connections() -> None:
    pool = ConnectionPool(test_name="test_x")
    first = pool.create(Terminate())
    second = pool(name="custom")
    assert first.name == "test_x[0]"
    assert second.name == "custom"
    assert pool.connections == [first, second]
    assert isinstance(pool.reporter_for(first), CollectingReporter)
    assert first.scenario == (Terminate(),)
    assert second.scenario == ()


def test_pool_verify_all_reports_only_failures() -> None:
    pool = ConnectionPool(test_name="t")
    good = pool.create(Receive(b"ok"))
    bad = pool.create(Send(b"hello"), Terminate())
    assert good.recv(10) == b"ok"

    failures = pool.verify_all()
    assert [conn for conn, _ in failures] == [bad]
    assert len(failures[0][1]) == 2

    report = pool.failure_report(failures)
    assert report.startswith(f"{bad.name}:\n1. unsatisfied_scenario: ")
    assert "Mock Socket Scenario Summary:" in report
    assert "NG (2) close" in report


def test_pool_keeps_connections_sharing_a_name_apart() -> None:
    pool = ConnectionPool()
    first = pool.create(Send(b"aaa"), name="dup")
    second = pool.create(Receive(b"bbb"), name="dup")
    assert pool.reporter_for(first) is not pool.reporter_for(second)

    failures = pool.verify_all()
    assert [conn for conn, _ in failures] == [first, second]
    assert "leftover data never sent: 'aaa'" in failures[0][1][0].message
    assert "leftover data never received: 'bbb'" in failures[1][1][0].message

    report = pool.failure_report(failures)
    assert "'aaa'" in report and "'bbb'" in report
    assert pool.reporter_for(first).errors and pool.reporter_for(second).errors


def test_reporter_for_unknown_connection() -> None:
    with pytest.raises(KeyError):
        ConnectionPool().reporter_for(MockConnection(name="stranger"))


def test_pool_passes_addresses_through() -> None:
    pool = ConnectionPool()
    conn = pool.create(remote_address=("192.0.2.3", 7))
    assert isinstance(conn, MockConnection)
    assert conn.getpeername() == ("192.0.2.3", 7)
    assert conn.name == "mock_conn[0]"


def test_fixture_clean_scenario_passes(mock_conn) -> None:
    conn = mock_conn(Receive(b"ping"), Send(b"pong"), Terminate())
    assert conn.recv(4) == b"ping"
    conn.sendall(b"pong")
    conn.close()


def test_fixture_fails_unsatisfied_scenario(pytester: pytest.Pytester) -> None:
    pytester.makeconftest("from mockconn.testing.pytest_plugin import mock_conn  # noqa: F401\n")
    pytester.makepyfile(
        """
        from mockconn import Receive, Terminate

        def test_leaves_data(mock_conn):
            conn = mock_conn(Receive(b"unread"), Terminate())
            conn.recv(2)
        """
    )
    result = pytester.runpytest()
    result.assert_outcomes(passed=1, errors=1)
    result.stdout.fnmatch_lines(
        [
            "*mock connection scenario not satisfied*",
            "*leftover data never received: 'read'*",
            "*NG (2) close*",
        ]
    )
