#!/usr/bin/env python3
"""KM271 - Number components, with debounced writes.

Writes are not sent directly: each control request replaces the pending value, and
only once no further request has arrived for the debounce window is the (clamped)
value encoded and submitted. This avoids writing to the storage of the control
unit for each click of an up/down arrow.

The state of a Number is either Confirmed (the last value published) or
PendingWrite. A value received from the device always moves it to Confirmed, even if
a write is pending - a stale read can therefore cancel a pending write.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from datetime import datetime as dt, timedelta as td
from typing import TYPE_CHECKING

from km271 import exceptions as exc
from km271.const import DEFAULT_WRITE_DEBOUNCE, ComponentKind
from km271_tx import find_rule

from .base import CommunicationComponent

if TYPE_CHECKING:
    from km271_tx import Parameter, PublishFncT

    from .base import ReportFncT


_LOGGER = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Confirmed:
    value: float | None


@dataclasses.dataclass(frozen=True)
class PendingWrite:
    value: float
    requested_at: dt


class Number(CommunicationComponent):
    """A numeric value, written via the telegram rule of its parameter."""

    _SLUG = ComponentKind.NUMBER
    _WRITABLE = True

    def __init__(
        self,
        parameter: Parameter,
        publish: PublishFncT | None = None,
        report: ReportFncT | None = None,
        *,
        write_debounce: float = DEFAULT_WRITE_DEBOUNCE,
    ) -> None:
        super().__init__(parameter, publish=publish, report=report)

        self._write_debounce = td(seconds=write_debounce)
        self._state: Confirmed | PendingWrite = Confirmed(None)

    @property
    def write_status(self) -> Confirmed | PendingWrite:
        return self._state

    @property
    def has_pending_write(self) -> bool:
        return isinstance(self._state, PendingWrite)

    def _confirm(self, value: float) -> None:
        self._state = Confirmed(value)
        self.publish_state(value)

    def _handle_unsigned(self, sensor_type_param: int, value: int) -> None:
        self._confirm(value)

    def _handle_signed(self, sensor_type_param: int, value: int) -> None:
        self._confirm(value)

    def _handle_float(self, sensor_type_param: int, value: float) -> None:
        self._confirm(value)

    def control(self, value: float, *, now: dt | None = None) -> None:
        """Queue a write; any earlier pending value is superseded."""

        try:
            self._check_can_write()
            if not math.isfinite(value):
                raise exc.InvalidWriteValue(f"Invalid value for {self}: {value}")
        except exc.Km271Exception as err:
            self._report(err)
            return

        self._state = PendingWrite(value, now or dt.now())
        _LOGGER.debug("%s: write of %s is pending", self, value)

    def request_write(self, value: float | str) -> None:
        try:
            result = float(value)
        except (TypeError, ValueError):
            self._report(exc.InvalidWriteValue(f"Invalid value for {self}: {value!r}"))
            return
        self.control(result)

    def loop(self, *, now: dt | None = None) -> None:
        """Write the pending value, if the debounce window has elapsed."""

        if not isinstance(pending := self._state, PendingWrite):
            return
        if (now or dt.now()) - pending.requested_at < self._write_debounce:
            return

        try:
            if (rule := find_rule(self.parameter)) is None:
                raise exc.NoEncodingRuleFound(f"No write rule for {self.parameter}")
            telegram, limited = rule.encode_value(pending.value)
        except exc.Km271Exception as err:
            self._state = Confirmed(self.state)  # type: ignore[arg-type]
            self._report(err)
            return

        if self._submit(telegram):
            self._confirm(limited)
        # else: remains pending, to be tried again on the next loop
