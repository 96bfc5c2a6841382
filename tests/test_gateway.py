#!/usr/bin/env python3
"""KM271 - Test the Gateway (dispatching, and the periodic write loop)."""

import asyncio
from typing import Any

import pytest

from km271 import Gateway
from km271 import exceptions as exc
from km271.component import Number, Select, Switch
from km271_tx import KEEP, Parameter

from .helpers import FakeTransport, Recorder, T0, at

GWY_CONFIG = {
    "write_debounce": 1.0,
    "components": {
        "config_ww_temperature": {"type": "number"},
        "config_ww_operation_mode": {
            "type": "select",
            "options": {"night": 0, "day": 1, "auto": 2},
        },
        "burner_runtime_total": {"type": "assembler"},
        "firmware_version": {"type": "firmware_version"},
        "ww_circulation_pump": {"type": "switch"},
    },
}


class _Published:
    def __init__(self) -> None:
        self.values: list[tuple[Parameter, Any]] = []

    def __call__(self, parameter: Parameter, value: Any) -> None:
        self.values.append((parameter, value))


def test_dispatch(transport: FakeTransport, recorder: Recorder) -> None:
    published = _Published()
    gwy = Gateway(GWY_CONFIG, transport, publish=published, report=recorder.report)

    assert len(gwy.components) == 5
    assert isinstance(gwy.get_component("config_ww_temperature"), Number)
    assert isinstance(gwy.get_component(Parameter.CONFIG_WW_OPERATION_MODE), Select)
    assert isinstance(gwy.get_component(Parameter.WW_CIRCULATION_PUMP), Switch)

    gwy.handle_unsigned(Parameter.CONFIG_WW_TEMPERATURE, 0, 55)
    gwy.handle_unsigned(Parameter.CONFIG_WW_OPERATION_MODE, 0, 1)
    gwy.handle_unsigned(Parameter.FIRMWARE_VERSION, 0, 21)
    gwy.handle_unsigned(Parameter.FIRMWARE_VERSION, 1, 7)
    gwy.handle_signed(Parameter.CONFIG_WW_TEMPERATURE, 0, 50)
    gwy.handle_float(Parameter.CONFIG_WW_TEMPERATURE, 0, 52.5)
    gwy.handle_unsigned(Parameter.HC1_PUMP, 0, 1)  # no such component, ignored

    assert published.values == [
        (Parameter.CONFIG_WW_TEMPERATURE, 55),
        (Parameter.CONFIG_WW_OPERATION_MODE, "day"),
        (Parameter.FIRMWARE_VERSION, "21.7"),
        (Parameter.CONFIG_WW_TEMPERATURE, 50),
        (Parameter.CONFIG_WW_TEMPERATURE, 52.5),
    ]
    assert recorder.errors == []


def test_request_write(transport: FakeTransport, recorder: Recorder) -> None:
    gwy = Gateway(GWY_CONFIG, transport, report=recorder.report)

    gwy.request_write(Parameter.CONFIG_WW_OPERATION_MODE, "night")
    assert transport.sent == [bytes([0x0C, 0x0E, 0, KEEP, KEEP, KEEP, KEEP, KEEP])]

    number = gwy.get_component(Parameter.CONFIG_WW_TEMPERATURE)
    assert isinstance(number, Number)
    number.control(70, now=T0)  # range 30-60

    gwy.loop(now=at(0.5))
    assert len(transport.sent) == 1

    gwy.loop(now=at(1.0))
    assert transport.sent[-1] == bytes([0x0C, 0x07, KEEP, KEEP, KEEP, 60, KEEP, KEEP])

    gwy.request_write(Parameter.BURNER_RUNTIME_TOTAL, 1)
    assert recorder.error_types == [exc.UnsupportedOperation]


def test_add_component(transport: FakeTransport) -> None:
    gwy = Gateway(None, transport)
    assert gwy.components == {}

    number = Number(Parameter.CONFIG_HC1_DESIGN_TEMPERATURE)
    gwy.add_component(number)
    assert gwy.numbers == [number]

    with pytest.raises(LookupError):
        gwy.add_component(Number(Parameter.CONFIG_HC1_DESIGN_TEMPERATURE))

    with pytest.raises(RuntimeError):  # already wired by the gateway
        number.setup_writing(transport)


@pytest.mark.asyncio
async def test_periodic_loop(transport: FakeTransport) -> None:
    gwy = Gateway({"write_debounce": 0, "loop_interval": 0.01}, transport)
    gwy.add_component(Number(Parameter.CONFIG_HC2_DESIGN_TEMPERATURE, write_debounce=0))

    await gwy.start()
    try:
        gwy.request_write(Parameter.CONFIG_HC2_DESIGN_TEMPERATURE, 45)
        for _ in range(100):
            if transport.sent:
                break
            await asyncio.sleep(0.01)
    finally:
        await gwy.stop()

    assert transport.sent == [bytes([0x08, 0x0E, KEEP, KEEP, KEEP, KEEP, 45, KEEP])]
    assert gwy._loop_task is None


@pytest.mark.asyncio
async def test_periodic_loop_survives_invalid_value(
    transport: FakeTransport, recorder: Recorder
) -> None:
    gwy = Gateway(
        {"write_debounce": 0, "loop_interval": 0.01}, transport, report=recorder.report
    )
    gwy.add_component(Number(Parameter.CONFIG_WW_TEMPERATURE, write_debounce=0))

    await gwy.start()
    try:
        gwy.request_write(Parameter.CONFIG_WW_TEMPERATURE, float("nan"))
        await asyncio.sleep(0.05)
        assert gwy._loop_task is not None and not gwy._loop_task.done()

        gwy.request_write(Parameter.CONFIG_WW_TEMPERATURE, 50)
        for _ in range(100):
            if transport.sent:
                break
            await asyncio.sleep(0.01)
    finally:
        await gwy.stop()

    assert transport.sent == [bytes([0x0C, 0x07, KEEP, KEEP, KEEP, 50, KEEP, KEEP])]
    assert recorder.error_types == [exc.InvalidWriteValue]
