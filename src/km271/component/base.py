#!/usr/bin/env python3
"""KM271 - a Buderus KM271 parameter codec.

Base for all communication components.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from km271 import exceptions as exc
from km271.const import ComponentKind

if TYPE_CHECKING:
    from km271_tx import Parameter, PublishFncT, StateT, SubmitFncT, Telegram


_LOGGER = logging.getLogger(__name__)


ReportFncT: TypeAlias = Callable[["CommunicationComponent", Exception], None]


class CommunicationComponent:
    """The base class for all components - each is bound to exactly one parameter.

    Received values arrive via the handle_received_*_value() methods, which never
    raise: any error is logged and passed to the report callback (if any).
    """

    _SLUG: ComponentKind = None  # type: ignore[assignment]
    _WRITABLE: bool = False

    def __init__(
        self,
        parameter: Parameter,
        publish: PublishFncT | None = None,
        report: ReportFncT | None = None,
    ) -> None:
        self.parameter = parameter
        self.writable = self._WRITABLE

        self._publish_fnc = publish
        self._report_fnc = report
        self._submit_fnc: SubmitFncT | None = None

        self.state: StateT | None = None  # the most recently published value

    def __repr__(self) -> str:
        return f"{self.parameter} ({self._SLUG})"

    @property
    def kind(self) -> ComponentKind:
        return self._SLUG

    def setup_writing(self, submit: SubmitFncT) -> None:
        """Wire the transport to the component (once, before any write)."""

        if self._submit_fnc is not None:
            raise RuntimeError(f"{self}: the transport is already wired")
        self._submit_fnc = submit

    def publish_state(self, value: StateT) -> None:
        self.state = value
        if self._publish_fnc:
            self._publish_fnc(value)

    def _report(self, err: Exception) -> None:
        _LOGGER.error("%s: %s", self, err)
        if self._report_fnc:
            self._report_fnc(self, err)

    def handle_received_unsigned_value(
        self, sensor_type_param: int, value: int
    ) -> None:
        try:
            self._handle_unsigned(sensor_type_param, value)
        except exc.Km271Exception as err:
            self._report(err)

    def handle_received_signed_value(
        self, sensor_type_param: int, value: int
    ) -> None:
        try:
            self._handle_signed(sensor_type_param, value)
        except exc.Km271Exception as err:
            self._report(err)

    def handle_received_float_value(
        self, sensor_type_param: int, value: float
    ) -> None:
        try:
            self._handle_float(sensor_type_param, value)
        except exc.Km271Exception as err:
            self._report(err)

    def _handle_unsigned(self, sensor_type_param: int, value: int) -> None:
        raise exc.UnsupportedOperation(f"{self} does not handle unsigned values")

    def _handle_signed(self, sensor_type_param: int, value: int) -> None:
        raise exc.UnsupportedOperation(f"{self} does not handle signed values")

    def _handle_float(self, sensor_type_param: int, value: float) -> None:
        raise exc.UnsupportedOperation(f"{self} does not handle float values")

    def request_write(self, value: float | str) -> None:
        """Handle a write request from the control surface."""
        self._report(exc.UnsupportedOperation(f"{self} is not writable"))

    def _check_can_write(self) -> None:
        if not self.writable:
            raise exc.UnsupportedOperation(f"{self} is not writable")
        if self._submit_fnc is None:
            raise exc.WriterNotConfigured(f"{self}: no transport to write to")

    def _submit(self, telegram: Telegram) -> bool:
        """Submit a telegram to the transport, return True if it was accepted."""

        assert self._submit_fnc is not None  # mypy hint

        if self._submit_fnc(telegram):
            _LOGGER.info("%s: telegram %s accepted for sending", self, telegram)
            return True

        _LOGGER.warning("%s: telegram %s was rejected by the transport", self, telegram)
        return False
