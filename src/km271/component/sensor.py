#!/usr/bin/env python3
"""KM271 - Read-only components that assemble a value from several fields."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from km271 import exceptions as exc
from km271.const import FRAGMENT_COUNT, ComponentKind
from km271.helpers import sub_index

from .base import CommunicationComponent

if TYPE_CHECKING:
    from km271_tx import Parameter, PublishFncT

    from .base import ReportFncT


_LOGGER = logging.getLogger(__name__)


class MultiFragmentAssembler(CommunicationComponent):
    """A 24-bit unsigned value (e.g. a runtime counter), received as 3 bytes.

    The value is published only when the least significant fragment (index 0) is
    received, and only once all three fragments are known.
    """

    _SLUG = ComponentKind.ASSEMBLER

    def __init__(
        self,
        parameter: Parameter,
        publish: PublishFncT | None = None,
        report: ReportFncT | None = None,
    ) -> None:
        super().__init__(parameter, publish=publish, report=report)

        self._fragments: list[int] = [0] * FRAGMENT_COUNT
        self._known: list[bool] = [False] * FRAGMENT_COUNT

    @property
    def all_fragments_known(self) -> bool:
        return all(self._known)

    def _handle_unsigned(self, sensor_type_param: int, value: int) -> None:
        _LOGGER.debug(
            "%s: received sensor type param %s: %s", self, sensor_type_param, value
        )

        idx = sub_index(sensor_type_param)
        if idx >= FRAGMENT_COUNT:
            raise exc.InvalidFragmentIndex(
                f"Invalid sensor type param: {sensor_type_param}"
            )

        self._fragments[idx] = value
        self._known[idx] = True

        if idx != 0:  # only update on lsb updates, to avoid jumps
            return
        if not self.all_fragments_known:
            return

        f0, f1, f2 = self._fragments
        result = (f2 << 16) + (f1 << 8) + f0
        _LOGGER.debug("%s: assembled %s %s %s to %s", self, f0, f1, f2, result)
        self.publish_state(result)


class FirmwareVersion(CommunicationComponent):
    """The firmware version, as "{major}.{minor}", from two separate fields."""

    _SLUG = ComponentKind.FIRMWARE_VERSION

    def __init__(
        self,
        parameter: Parameter,
        publish: PublishFncT | None = None,
        report: ReportFncT | None = None,
    ) -> None:
        super().__init__(parameter, publish=publish, report=report)

        self._major: int | None = None
        self._minor: int | None = None

    def _handle_unsigned(self, sensor_type_param: int, value: int) -> None:
        _LOGGER.debug(
            "%s: received sensor type param %s: %s", self, sensor_type_param, value
        )

        idx = sub_index(sensor_type_param)
        if idx == 0:
            self._major = value
        elif idx == 1:
            self._minor = value
        else:
            raise exc.InvalidFragmentIndex(
                f"Invalid sensor type param: {sensor_type_param}"
            )

        if self._major is not None and self._minor is not None:
            self.publish_state(f"{self._major}.{self._minor}")
