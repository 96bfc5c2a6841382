#!/usr/bin/env python3
"""KM271 - Select components (an enumerated option)."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from km271 import exceptions as exc
from km271.const import ComponentKind
from km271_tx import find_rule

from .base import CommunicationComponent

if TYPE_CHECKING:
    from km271_tx import Parameter, PublishFncT

    from .base import ReportFncT


_LOGGER = logging.getLogger(__name__)


class Select(CommunicationComponent):
    """An option from a list of labels, each mapped to a device code.

    Writes are sent immediately (there is no debouncing), as options are discrete.
    """

    _SLUG = ComponentKind.SELECT
    _WRITABLE = True

    def __init__(
        self,
        parameter: Parameter,
        options: Iterable[str],
        mappings: Iterable[int],
        publish: PublishFncT | None = None,
        report: ReportFncT | None = None,
    ) -> None:
        super().__init__(parameter, publish=publish, report=report)

        self.options: list[str] = list(options)
        self.mappings: list[int] = list(mappings)

        if len(self.options) != len(self.mappings):
            raise ValueError(
                f"{self}: {len(self.options)} options, "
                f"but {len(self.mappings)} mappings"
            )
        if len(set(self.mappings)) != len(self.mappings):
            raise ValueError(f"{self}: the mappings are not unique: {self.mappings}")

    def index_of(self, option: str) -> int | None:
        try:
            return self.options.index(option)
        except ValueError:
            return None

    def _handle_unsigned(self, sensor_type_param: int, value: int) -> None:
        try:
            idx = self.mappings.index(value)
        except ValueError:
            raise exc.UnmappedSelectValue(
                f"Invalid value {value} received for {self.parameter}"
            ) from None
        self.publish_state(self.options[idx])

    def control(self, option: str) -> None:
        """Write the option, if it is mapped and permitted by the parameter's rule."""

        try:
            self._check_can_write()
            if (idx := self.index_of(option)) is None:
                raise exc.UnmappedSelectLabel(f"No mapping for select value {option!r}")
            if (rule := find_rule(self.parameter)) is None:
                raise exc.NoEncodingRuleFound(f"No write rule for {self.parameter}")
            telegram = rule.encode_select(self.mappings[idx])
        except exc.Km271Exception as err:
            self._report(err)
            return

        if self._submit(telegram):
            self.publish_state(option)

    def request_write(self, value: float | str) -> None:
        self.control(str(value))
