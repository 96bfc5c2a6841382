#!/usr/bin/env python3
"""KM271 - a Buderus KM271 parameter codec.

The Gateway wires the components to the transport (for writes) and to the host (for
publishing values), dispatches received values to the components, and periodically
evaluates the debounced writes.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable
from datetime import datetime as dt
from functools import partial
from typing import TYPE_CHECKING, Any

from .component import CommunicationComponent, Number, component_factory
from .const import Parameter
from .helpers import schedule_task
from .schemas import SZ_COMPONENTS, SZ_LOOP_INTERVAL, SZ_WRITE_DEBOUNCE, load_config

if TYPE_CHECKING:
    from km271_tx import StateT, SubmitFncT

    from .component import ReportFncT


_LOGGER = logging.getLogger(__name__)


class Gateway:
    """The gateway between the components and their collaborators."""

    def __init__(
        self,
        config: dict[str, Any] | None,
        submit: SubmitFncT,
        publish: Callable[[Parameter, StateT], None] | None = None,
        report: ReportFncT | None = None,
    ) -> None:
        self.config = load_config(config)

        self._submit = submit
        self._publish = publish
        self._report = report

        self.components: dict[Parameter, CommunicationComponent] = {}
        self._loop_task: asyncio.Task[Any] | None = None

        for parameter, schema in self.config[SZ_COMPONENTS].items():
            self.add_component(
                component_factory(
                    parameter,
                    schema,
                    publish=partial(publish, parameter) if publish else None,
                    report=report,
                    write_debounce=self.config[SZ_WRITE_DEBOUNCE],
                )
            )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(components={len(self.components)})"

    def add_component(self, component: CommunicationComponent) -> None:
        """Add a component, and wire it to the transport if it is writable."""

        if component.parameter in self.components:
            raise LookupError(f"A component for {component.parameter} already exists")

        if component.writable:
            component.setup_writing(self._submit)
        self.components[component.parameter] = component

    def get_component(
        self, parameter: Parameter | str
    ) -> CommunicationComponent | None:
        return self.components.get(Parameter(parameter))

    def _component_or_none(self, parameter: Parameter) -> CommunicationComponent | None:
        if (component := self.components.get(parameter)) is None:
            _LOGGER.info("No component for %s, ignoring", parameter)
        return component

    def handle_unsigned(
        self, parameter: Parameter, sensor_type_param: int, value: int
    ) -> None:
        if component := self._component_or_none(parameter):
            component.handle_received_unsigned_value(sensor_type_param, value)

    def handle_signed(
        self, parameter: Parameter, sensor_type_param: int, value: int
    ) -> None:
        if component := self._component_or_none(parameter):
            component.handle_received_signed_value(sensor_type_param, value)

    def handle_float(
        self, parameter: Parameter, sensor_type_param: int, value: float
    ) -> None:
        if component := self._component_or_none(parameter):
            component.handle_received_float_value(sensor_type_param, value)

    def request_write(self, parameter: Parameter, value: float | str) -> None:
        """Route a write request (from the control surface) to its component."""
        if component := self._component_or_none(parameter):
            component.request_write(value)

    @property
    def numbers(self) -> list[Number]:
        return [c for c in self.components.values() if isinstance(c, Number)]

    def loop(self, *, now: dt | None = None) -> None:
        """Evaluate the debounced writes of all Number components."""

        now = now or dt.now()
        for number in self.numbers:
            number.loop(now=now)

    async def start(self) -> None:
        """Start evaluating the debounced writes, periodically."""

        if self._loop_task and not self._loop_task.done():
            return
        self._loop_task = schedule_task(self.loop, period=self.config[SZ_LOOP_INTERVAL])
        _LOGGER.debug("%s: started", self)

    async def stop(self) -> None:
        """Stop the periodic evaluation (pending writes are not flushed)."""

        if not self._loop_task:
            return
        self._loop_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._loop_task
        self._loop_task = None
        _LOGGER.debug("%s: stopped", self)
