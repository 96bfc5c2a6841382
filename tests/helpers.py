#!/usr/bin/env python3
"""KM271 - Helpers for the test suite."""

from collections.abc import Callable
from datetime import datetime as dt, timedelta as td
from typing import Any

from km271.component import CommunicationComponent

T0 = dt(2024, 1, 1, 12, 0, 0)


def at(seconds: float) -> dt:
    """Return the datetime that is seconds after T0."""
    return T0 + td(seconds=seconds)


def assert_raises(exception: type[Exception], fnc: Callable, *args: Any) -> None:
    try:
        fnc(*args)
    except exception:  # as err:
        pass  # or: assert True
    else:
        assert False


class FakeTransport:
    """A transport that records the telegrams it accepts."""

    def __init__(self, accept: bool = True) -> None:
        self.accept = accept
        self.sent: list[bytes] = []
        self.rejected: list[bytes] = []

    def __call__(self, telegram: bytes) -> bool:
        if self.accept:
            self.sent.append(bytes(telegram))
        else:
            self.rejected.append(bytes(telegram))
        return self.accept


class Recorder:
    """Records the values published, and the errors reported, by components."""

    def __init__(self) -> None:
        self.values: list[Any] = []
        self.errors: list[Exception] = []

    def publish(self, value: Any) -> None:
        self.values.append(value)

    def report(self, component: CommunicationComponent, err: Exception) -> None:
        self.errors.append(err)

    @property
    def error_types(self) -> list[type[Exception]]:
        return [type(e) for e in self.errors]
