#!/usr/bin/env python3
"""KM271 - a Buderus KM271 parameter codec."""

from __future__ import annotations

from enum import EnumCheck, StrEnum, verify
from typing import Final

from km271_tx.const import (  # noqa: F401
    KEEP as KEEP,
    TELEGRAM_LENGTH as TELEGRAM_LENGTH,
    BuilderRule as BuilderRule,
    DataType as DataType,
    Parameter as Parameter,
)

DEFAULT_WRITE_DEBOUNCE: Final[float] = 1.0  # seconds of quiescence before writing
DEFAULT_LOOP_INTERVAL: Final[float] = 0.1  # seconds between debounce evaluations

FRAGMENT_COUNT: Final[int] = 3  # fragments of a multi-fragment (24-bit) value
SUB_INDEX_MASK: Final[int] = 0x0F


@verify(EnumCheck.UNIQUE)
class ComponentKind(StrEnum):
    SWITCH = "switch"
    NUMBER = "number"
    ASSEMBLER = "assembler"
    SELECT = "select"
    FIRMWARE_VERSION = "firmware_version"


# the operation modes of the heating circuits and warm water
OPERATION_MODE_NIGHT: Final = "night"
OPERATION_MODE_DAY: Final = "day"
OPERATION_MODE_AUTO: Final = "auto"

OPERATION_MODE_OPTIONS: Final[dict[str, int]] = {
    OPERATION_MODE_NIGHT: 0,
    OPERATION_MODE_DAY: 1,
    OPERATION_MODE_AUTO: 2,
}
