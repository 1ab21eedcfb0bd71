from __future__ import annotations

import logging

import pytest

from httpsms import gate as gate_module
from httpsms.context import AppContext
from httpsms.gate import LineActivationRegistry, ReceiverGate, SessionStateProvider
from httpsms.models.sim import SimLine
from httpsms.settings import Settings


class _FakeSession:
    def __init__(self, logged_in: bool) -> None:
        self.logged_in = logged_in
        self.calls = 0

    def is_logged_in(self, context: object) -> bool:
        self.calls += 1
        return self.logged_in


class _FakeLines:
    def __init__(self, sim1: bool = False, sim2: bool = False) -> None:
        self.status = {SimLine.SIM1: sim1, SimLine.SIM2: sim2}
        self.calls: list[SimLine] = []

    def get_active_status(self, context: object, line: SimLine) -> bool:
        self.calls.append(line)
        return self.status[line]


_CONTEXT = object()


def _records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.name == "httpsms.gate"]


def test_fakes_satisfy_protocols() -> None:
    assert isinstance(_FakeSession(True), SessionStateProvider)
    assert isinstance(_FakeLines(), LineActivationRegistry)
    assert isinstance(Settings(), SessionStateProvider)
    assert isinstance(Settings(), LineActivationRegistry)


@pytest.mark.parametrize(("logged_in", "sim1", "sim2"), [(True, True, True), (False, False, False)])
def test_missing_message_id_is_rejected_with_single_error(
    caplog: pytest.LogCaptureFixture, logged_in: bool, sim1: bool, sim2: bool
) -> None:
    caplog.set_level(logging.DEBUG, logger="httpsms")
    session = _FakeSession(logged_in)
    lines = _FakeLines(sim1, sim2)

    assert ReceiverGate(session, lines).is_valid(_CONTEXT, None) is False

    records = _records(caplog)
    assert [r.levelno for r in records] == [logging.ERROR]
    assert records[0].getMessage() == "cannot handle event because the message ID is null"
    assert session.calls == 0
    assert lines.calls == []


def test_not_logged_in_skips_line_checks(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="httpsms")
    session = _FakeSession(False)
    lines = _FakeLines(True, True)

    assert ReceiverGate(session, lines).is_valid(_CONTEXT, "abc") is False

    records = _records(caplog)
    assert [r.levelno for r in records] == [logging.WARNING]
    assert "abc" in records[0].getMessage()
    assert "not logged in" in records[0].getMessage()
    assert session.calls == 1
    assert lines.calls == []


def test_both_lines_inactive_is_rejected(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="httpsms")
    lines = _FakeLines(False, False)

    assert ReceiverGate(_FakeSession(True), lines).is_valid(_CONTEXT, "abc") is False

    records = _records(caplog)
    assert [r.levelno for r in records] == [logging.WARNING]
    assert records[0].getMessage() == "cannot handle message with id [abc] because the user is not active"
    assert lines.calls == [SimLine.SIM1, SimLine.SIM2]


@pytest.mark.parametrize(("sim1", "sim2"), [(True, False), (False, True), (True, True)])
def test_any_active_line_admits_without_logging(caplog: pytest.LogCaptureFixture, sim1: bool, sim2: bool) -> None:
    caplog.set_level(logging.DEBUG, logger="httpsms")

    assert ReceiverGate(_FakeSession(True), _FakeLines(sim1, sim2)).is_valid(_CONTEXT, "abc") is True
    assert _records(caplog) == []


def test_second_line_not_queried_when_first_is_active() -> None:
    lines = _FakeLines(True, False)
    assert ReceiverGate(_FakeSession(True), lines).is_valid(_CONTEXT, "abc") is True
    assert lines.calls == [SimLine.SIM1]


def test_empty_message_id_counts_as_present() -> None:
    assert ReceiverGate(_FakeSession(True), _FakeLines(True)).is_valid(_CONTEXT, "") is True


@pytest.mark.parametrize(
    ("message_id", "logged_in", "sim1", "sim2", "expected"),
    [
        (None, True, True, True, False),
        ("abc", False, True, True, False),
        ("abc", True, False, False, False),
        ("abc", True, False, True, True),
    ],
)
def test_repeated_calls_are_identical(
    caplog: pytest.LogCaptureFixture,
    message_id: str | None,
    logged_in: bool,
    sim1: bool,
    sim2: bool,
    expected: bool,
) -> None:
    caplog.set_level(logging.DEBUG, logger="httpsms")
    gate = ReceiverGate(_FakeSession(logged_in), _FakeLines(sim1, sim2))

    first = gate.is_valid(_CONTEXT, message_id)
    first_logs = [(r.levelno, r.getMessage()) for r in _records(caplog)]
    caplog.clear()
    second = gate.is_valid(_CONTEXT, message_id)
    second_logs = [(r.levelno, r.getMessage()) for r in _records(caplog)]

    assert first == second == expected
    assert first_logs == second_logs


def test_collaborator_errors_propagate() -> None:
    class _Broken:
        def is_logged_in(self, context: object) -> bool:
            raise RuntimeError("preferences unavailable")

    with pytest.raises(RuntimeError, match="preferences unavailable"):
        ReceiverGate(_Broken(), _FakeLines()).is_valid(_CONTEXT, "abc")


def test_module_level_is_valid_uses_settings_store() -> None:
    settings = Settings()
    context = AppContext()

    assert gate_module.is_valid(context, "abc") is False

    settings.set_api_key(context, "key-123")
    assert gate_module.is_valid(context, "abc") is False

    settings.set_active_status(context, SimLine.SIM2, True)
    assert gate_module.is_valid(context, "abc") is True
    assert gate_module.is_valid(context, None) is False
