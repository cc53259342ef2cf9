"""Action constructors and the scenario arena."""

from __future__ import annotations

import dataclasses

import pytest

from mockconn import ActionKind, MockConnection, Receive, Send, Terminate
from mockconn.base.actions import END_OF_SCENARIO, EndOfScenario
from mockconn.base.scenario import Scenario


class TestActions:
    def test_constructors_tag_kind(self) -> None:
        assert Receive(b"a").kind is ActionKind.RECEIVE
        assert Send(b"a").kind is ActionKind.SEND
        assert Terminate().kind is ActionKind.TERMINATE
        assert END_OF_SCENARIO.kind is ActionKind.END_OF_SCENARIO

    def test_bytes_like_payloads_are_normalized(self) -> None:
        assert Receive(bytearray(b"abc")).data == b"abc"
        assert type(Send(memoryview(b"xyz")).data) is bytes

    def test_text_payload_rejected(self) -> None:
        with pytest.raises(TypeError):
            Receive("hello")  # type: ignore[arg-type]

    def test_actions_are_immutable(self) -> None:
        action = Send(b"abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            action.data = b"x"  # type: ignore[misc]

    def test_empty_payload_is_legal(self) -> None:
        assert Receive().data == b""
        assert Send(b"").data == b""


class TestScenario:
    def test_out_of_range_is_end_of_scenario(self) -> None:
        scenario = Scenario([Receive(b"a")])
        assert isinstance(scenario.action_at(1), EndOfScenario)
        assert isinstance(scenario.action_at(-1), EndOfScenario)
        assert scenario.remaining(5) == b""

    def test_remaining_is_suffix_of_original(self) -> None:
        action = Receive(b"abcdef")
        scenario = Scenario([action])
        scenario.consume(2)
        scenario.consume(1)
        assert scenario.current_remaining() == b"def"
        assert action.data == b"abcdef"

    def test_install_resets_cursor_and_offsets(self) -> None:
        scenario = Scenario([Receive(b"ab"), Terminate()])
        scenario.consume(1)
        scenario.advance()
        scenario.install([Send(b"x")])
        assert scenario.cursor == 0
        assert scenario.consumed(0) == 0
        assert len(scenario) == 1

    def test_install_rejects_sentinel_and_junk(self) -> None:
        with pytest.raises(TypeError):
            Scenario([END_OF_SCENARIO])
        with pytest.raises(TypeError):
            Scenario([b"raw bytes"])  # type: ignore[list-item]

    def test_cursor_walks_to_end(self) -> None:
        scenario = Scenario([Receive(b"a"), Send(b"b"), Terminate()])
        assert scenario.current() == Receive(b"a")
        scenario.advance()
        assert scenario.peek_next() == Terminate()
        assert not scenario.at_end()


def test_reinstalling_scenario_keeps_diagnostics_and_rewinds(conn: MockConnection) -> None:
    conn.expect(Terminate())
    with pytest.raises(OSError):
        conn.send(b"x")
    conn.expect(Receive(b"fresh"))
    assert conn.cursor == 0
    assert conn.recv(10) == b"fresh"
    assert len(conn.diagnostics) == 1
    assert conn.scenario == (Receive(b"fresh"),)
