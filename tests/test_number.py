#!/usr/bin/env python3
"""KM271 - Test the debounced writes of Number components."""

import pytest

from km271 import exceptions as exc
from km271.component import Confirmed, Number, PendingWrite
from km271_tx import Parameter

from .helpers import FakeTransport, Recorder, T0, at


def _number(
    recorder: Recorder,
    transport: FakeTransport | None,
    parameter: Parameter = Parameter.CONFIG_HC1_DESIGN_TEMPERATURE,
) -> Number:
    number = Number(parameter, recorder.publish, recorder.report, write_debounce=1.0)
    if transport is not None:
        number.setup_writing(transport)
    return number


def test_debounce(recorder: Recorder, transport: FakeTransport) -> None:
    number = _number(recorder, transport, Parameter.CONFIG_WW_TEMPERATURE)

    number.control(50, now=T0)
    number.control(55, now=at(0.5))  # supersedes the first request
    assert number.write_status == PendingWrite(55, at(0.5))

    number.loop(now=at(1.0))
    number.loop(now=at(1.49))
    assert transport.sent == []

    number.loop(now=at(1.5))
    assert transport.sent == [bytes([0x0C, 0x07, 0x65, 0x65, 0x65, 55, 0x65, 0x65])]
    assert recorder.values == [55]
    assert number.write_status == Confirmed(55)

    number.loop(now=at(5.0))
    assert len(transport.sent) == 1


def test_clamping(recorder: Recorder, transport: FakeTransport) -> None:
    number = _number(recorder, transport)  # range 30-90

    number.control(95, now=T0)
    number.loop(now=at(2))

    assert transport.sent == [bytes([0x07, 0x0E, 0x65, 0x65, 0x65, 0x65, 90, 0x65])]
    assert recorder.values == [90]  # the clamped value, not the requested value
    assert number.state == 90


@pytest.mark.parametrize(
    "value,expected_byte,expected_value",
    [(21.5, 43, 21.5), (21.3, 43, 21.3), (5, 20, 10), (31, 60, 30)],
)
def test_half_degrees(
    recorder: Recorder,
    transport: FakeTransport,
    value: float,
    expected_byte: int,
    expected_value: float,
) -> None:
    number = _number(
        recorder, transport, Parameter.CONFIG_HC2_ROOM_TARGET_TEMPERATURE_DAY
    )

    number.control(value, now=T0)
    number.loop(now=at(1))

    frame = [0x08, 0x00, 0x65, 0x65, 0x65, expected_byte, 0x65, 0x65]
    assert transport.sent == [bytes(frame)]
    assert recorder.values == [expected_value]


def test_transport_rejection(recorder: Recorder) -> None:
    transport = FakeTransport(accept=False)
    number = _number(recorder, transport)

    number.control(45, now=T0)
    number.loop(now=at(1))
    assert len(transport.rejected) == 1
    assert recorder.values == []
    assert number.write_status == PendingWrite(45, T0)  # retained, not dropped

    transport.accept = True
    number.loop(now=at(1.1))
    assert len(transport.sent) == 1
    assert recorder.values == [45]
    assert not number.has_pending_write


def test_received_value_cancels_pending(
    recorder: Recorder, transport: FakeTransport
) -> None:
    number = _number(recorder, transport)

    number.control(60, now=T0)
    number.handle_received_unsigned_value(0, 50)  # the device always wins
    assert number.write_status == Confirmed(50)

    number.loop(now=at(2))
    assert transport.sent == []
    assert recorder.values == [50]


def test_no_encoding_rule(recorder: Recorder, transport: FakeTransport) -> None:
    number = _number(recorder, transport, Parameter.CONFIG_SUMMER_MODE)

    number.control(1, now=T0)
    number.loop(now=at(2))

    assert transport.sent == []
    assert recorder.error_types == [exc.NoEncodingRuleFound]
    assert not number.has_pending_write  # the write is abandoned


def test_select_rule_is_not_a_number_rule(
    recorder: Recorder, transport: FakeTransport
) -> None:
    number = _number(recorder, transport, Parameter.CONFIG_WW_OPERATION_MODE)

    number.handle_received_unsigned_value(0, 1)
    number.control(2, now=T0)
    number.loop(now=at(2))

    assert transport.sent == []
    assert recorder.error_types == [exc.NoEncodingRuleFound]
    assert number.write_status == Confirmed(1)


def test_not_wired(recorder: Recorder) -> None:
    number = _number(recorder, None)

    number.control(45, now=T0)
    assert recorder.error_types == [exc.WriterNotConfigured]
    assert not number.has_pending_write


def test_wired_once(recorder: Recorder, transport: FakeTransport) -> None:
    number = _number(recorder, transport)

    with pytest.raises(RuntimeError):
        number.setup_writing(transport)


def test_request_write(recorder: Recorder, transport: FakeTransport) -> None:
    number = _number(recorder, transport)

    number.request_write("45")
    assert isinstance(number.write_status, PendingWrite)
    assert number.write_status.value == 45.0


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")], ids=str)
def test_non_finite_value(
    recorder: Recorder, transport: FakeTransport, value: float
) -> None:
    number = _number(recorder, transport)

    number.request_write(value)
    assert recorder.error_types == [exc.InvalidWriteValue]
    assert not number.has_pending_write

    number.loop(now=at(5))  # does not raise
    assert transport.sent == []


@pytest.mark.parametrize("value", ["warm", "", None], ids=repr)
def test_non_numeric_value(
    recorder: Recorder, transport: FakeTransport, value: str
) -> None:
    number = _number(recorder, transport)

    number.request_write(value)
    assert recorder.error_types == [exc.InvalidWriteValue]
    assert not number.has_pending_write
