#!/usr/bin/env python3
"""KM271 - Switch components (a boolean state)."""

from __future__ import annotations

import logging
from typing import Final

from km271 import exceptions as exc
from km271.const import BuilderRule, ComponentKind
from km271_tx import find_rule

from .base import CommunicationComponent

_LOGGER = logging.getLogger(__name__)


# no rule in the table has a switch strategy (yet)
_SWITCH_BUILDERS: Final[frozenset[BuilderRule]] = frozenset()

_TRUE_STRINGS: Final = ("1", "on", "true")
_FALSE_STRINGS: Final = ("0", "off", "false")


def _parse_state(value: float | str) -> bool:
    """Return the boolean for a write request, raise InvalidWriteValue if none."""

    if isinstance(value, str):
        if value.strip().lower() in _TRUE_STRINGS:
            return True
        if value.strip().lower() in _FALSE_STRINGS:
            return False
        raise exc.InvalidWriteValue(f"Invalid switch value: {value!r}")
    return bool(value)


class Switch(CommunicationComponent):
    """A boolean, derived from an unsigned field."""

    _SLUG = ComponentKind.SWITCH
    _WRITABLE = True

    def _handle_unsigned(self, sensor_type_param: int, value: int) -> None:
        self.publish_state(bool(value))

    def write_state(self, state: bool) -> None:
        """Write the state, if there is a switch rule for doing so."""

        try:
            self._check_can_write()
            rule = find_rule(self.parameter)
            if rule is None or rule.builder not in _SWITCH_BUILDERS:
                raise exc.NoEncodingRuleFound(
                    f"No switch rule for writing {self.parameter}"
                    + (f" (rule is {rule.builder})" if rule else "")
                )
            telegram, _ = rule.encode_value(float(state))
        except exc.Km271Exception as err:
            self._report(err)
            return

        if self._submit(telegram):
            self.publish_state(state)

    def request_write(self, value: float | str) -> None:
        try:
            state = _parse_state(value)
        except exc.Km271Exception as err:
            self._report(err)
            return
        self.write_state(state)
