#!/usr/bin/env python3
"""KM271 - a Buderus KM271 parameter codec.

The telegram builder rules: for each writable parameter, how a requested value is
bounded, scaled and placed into a write telegram.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from collections import Counter
from typing import Final

from . import exceptions as exc
from .const import PAYLOAD_LENGTH, BuilderRule, DataType, Parameter
from .frame import Telegram

_LOGGER = logging.getLogger(__name__)


_HC1: Final = DataType.HEATING_CIRCUIT_1
_HC2: Final = DataType.HEATING_CIRCUIT_2
_WW_: Final = DataType.WARM_WATER


def limit_value_to_range(value: float, minimum: float, maximum: float) -> float:
    """Return the value, clamped to the inclusive range [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


@dataclasses.dataclass(frozen=True, kw_only=True)
class TelegramRule:
    """An immutable row of the builder rule table."""

    parameter: Parameter
    builder: BuilderRule
    data_type: DataType
    offset: int
    value_position: int  # within the payload, i.e. telegram byte value_position + 2

    min_value: float = 0
    max_value: float = 0
    max_select_index: int = 0

    def __str__(self) -> str:
        return f"{self.parameter} ({self.builder})"

    def clamp(self, value: float) -> float:
        return limit_value_to_range(value, self.min_value, self.max_value)

    def to_byte(self, value: float) -> int:
        """Scale a (clamped) value to its telegram byte."""

        if self.builder == BuilderRule.FLOAT_TIMES_TWO:
            result = math.floor(value * 2 + 0.5)
        else:
            result = int(value)
        return result & 0xFF  # negative values are sent as two's complement

    def encode_value(self, value: float) -> tuple[Telegram, float]:
        """Return the telegram for a numeric value, and the (clamped) value it sets."""

        if self.builder not in (BuilderRule.FLOAT, BuilderRule.FLOAT_TIMES_TWO):
            raise exc.NoEncodingRuleFound(
                f"No numeric rule for writing {self.parameter} (rule is {self.builder})"
            )

        if not math.isfinite(value):
            raise exc.TelegramInvalid(f"Invalid value for {self.parameter}: {value}")

        limited = self.clamp(value)
        if limited != value:
            _LOGGER.debug(
                "%s: value %s limited to %s (range %s-%s)",
                self.parameter,
                value,
                limited,
                self.min_value,
                self.max_value,
            )

        telegram = Telegram.build(
            self.data_type, self.offset, self.value_position, self.to_byte(limited)
        )
        return telegram, limited

    def encode_select(self, code: int) -> Telegram:
        """Return the telegram for the device code of a select option."""

        if self.builder != BuilderRule.SELECT:
            raise exc.NoEncodingRuleFound(
                f"No select rule for writing {self.parameter} (rule is {self.builder})"
            )
        if not 0 <= code <= self.max_select_index:
            raise exc.SelectIndexOutOfRange(
                f"Invalid select value for {self.parameter}: {code} "
                f"(maximum is {self.max_select_index})"
            )
        return Telegram.build(self.data_type, self.offset, self.value_position, code)


def _float(
    param: Parameter,
    minimum: float,
    maximum: float,
    data_type: DataType,
    offset: int,
    position: int,
    times_two: bool = False,
) -> TelegramRule:
    return TelegramRule(
        parameter=param,
        builder=BuilderRule.FLOAT_TIMES_TWO if times_two else BuilderRule.FLOAT,
        min_value=minimum,
        max_value=maximum,
        data_type=data_type,
        offset=offset,
        value_position=position,
    )


def _select(
    param: Parameter, max_index: int, data_type: DataType, offset: int, position: int
) -> TelegramRule:
    return TelegramRule(
        parameter=param,
        builder=BuilderRule.SELECT,
        max_select_index=max_index,
        data_type=data_type,
        offset=offset,
        value_position=position,
    )


# fmt: off
TELEGRAM_RULES: Final[tuple[TelegramRule, ...]] = (
    _float(Parameter.CONFIG_WW_TEMPERATURE,                  30, 60, _WW_, 0x07, 3),
    _float(Parameter.CONFIG_HC1_DESIGN_TEMPERATURE,          30, 90, _HC1, 0x0E, 4),
    _float(Parameter.CONFIG_HC1_ROOM_TARGET_TEMPERATURE_DAY, 10, 30, _HC1, 0x00, 3, times_two=True),
    _float(Parameter.CONFIG_HC1_ROOM_TEMPERATURE_OFFSET,     -5,  5, _HC1, 0x31, 3, times_two=True),
    _float(Parameter.CONFIG_HC1_FLOW_TEMPERATURE_MAX,        20, 90, _HC1, 0x0E, 2),
    _float(Parameter.CONFIG_HC2_DESIGN_TEMPERATURE,          30, 90, _HC2, 0x0E, 4),
    _float(Parameter.CONFIG_HC2_ROOM_TARGET_TEMPERATURE_DAY, 10, 30, _HC2, 0x00, 3, times_two=True),
    _float(Parameter.CONFIG_HC2_ROOM_TEMPERATURE_OFFSET,     -5,  5, _HC2, 0x31, 3, times_two=True),
    _float(Parameter.CONFIG_HC2_FLOW_TEMPERATURE_MAX,        20, 90, _HC2, 0x0E, 2),
    _select(Parameter.CONFIG_HC1_OPERATION_MODE,              2,     _HC1, 0x00, 4),
    _select(Parameter.CONFIG_HC2_OPERATION_MODE,              2,     _HC2, 0x00, 4),
    _select(Parameter.CONFIG_WW_OPERATION_MODE,               2,     _WW_, 0x0E, 0),
)
# fmt: on


def _check_rules(rules: tuple[TelegramRule, ...]) -> None:
    """Raise ValueError if the rule table is not internally consistent."""

    dupes = [p for p, n in Counter(r.parameter for r in rules).items() if n > 1]
    if dupes:
        raise ValueError(f"Duplicate telegram rules for: {dupes}")

    for rule in rules:
        if not 0 <= rule.value_position < PAYLOAD_LENGTH:
            raise ValueError(f"{rule}: invalid value position {rule.value_position}")
        if rule.min_value > rule.max_value:
            raise ValueError(f"{rule}: invalid range {rule.min_value}-{rule.max_value}")


_check_rules(TELEGRAM_RULES)


def find_rule(parameter: Parameter) -> TelegramRule | None:
    """Return the telegram rule for a parameter, or None if it cannot be written."""

    for rule in TELEGRAM_RULES:
        if rule.parameter == parameter:
            return rule
    return None
