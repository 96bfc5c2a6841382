#!/usr/bin/env python3
"""KM271 - Telegram layer constants."""

from __future__ import annotations

from enum import EnumCheck, IntEnum, StrEnum, verify
from typing import Final

TELEGRAM_LENGTH: Final[int] = 8
PAYLOAD_LENGTH: Final[int] = TELEGRAM_LENGTH - 2

# the device leaves any field holding this value unchanged
KEEP: Final[int] = 0x65


@verify(EnumCheck.UNIQUE)
class DataType(IntEnum):
    """The data-type class (byte 0) of a telegram, i.e. the subsystem."""

    HEATING_CIRCUIT_1 = 0x07
    HEATING_CIRCUIT_2 = 0x08
    WARM_WATER = 0x0C


@verify(EnumCheck.UNIQUE)
class Parameter(StrEnum):
    """The logical control points of the heating controller."""

    # writable configuration
    CONFIG_WW_TEMPERATURE = "config_ww_temperature"
    CONFIG_WW_OPERATION_MODE = "config_ww_operation_mode"
    CONFIG_HC1_DESIGN_TEMPERATURE = "config_heating_circuit_1_design_temperature"
    CONFIG_HC1_ROOM_TARGET_TEMPERATURE_DAY = (
        "config_heating_circuit_1_room_target_temperature_day"
    )
    CONFIG_HC1_ROOM_TEMPERATURE_OFFSET = (
        "config_heating_circuit_1_room_temperature_offset"
    )
    CONFIG_HC1_FLOW_TEMPERATURE_MAX = "config_heating_circuit_1_flow_temperature_max"
    CONFIG_HC1_OPERATION_MODE = "config_heating_circuit_1_operation_mode"
    CONFIG_HC2_DESIGN_TEMPERATURE = "config_heating_circuit_2_design_temperature"
    CONFIG_HC2_ROOM_TARGET_TEMPERATURE_DAY = (
        "config_heating_circuit_2_room_target_temperature_day"
    )
    CONFIG_HC2_ROOM_TEMPERATURE_OFFSET = (
        "config_heating_circuit_2_room_temperature_offset"
    )
    CONFIG_HC2_FLOW_TEMPERATURE_MAX = "config_heating_circuit_2_flow_temperature_max"
    CONFIG_HC2_OPERATION_MODE = "config_heating_circuit_2_operation_mode"
    CONFIG_SUMMER_MODE = "config_summer_mode"

    # read-only values
    FIRMWARE_VERSION = "firmware_version"
    BURNER_RUNTIME_STAGE_1 = "burner_runtime_stage_1"
    BURNER_RUNTIME_STAGE_2 = "burner_runtime_stage_2"
    BURNER_RUNTIME_TOTAL = "burner_runtime_total"
    HC1_PUMP = "heating_circuit_1_pump"
    HC2_PUMP = "heating_circuit_2_pump"
    WW_CIRCULATION_PUMP = "ww_circulation_pump"


@verify(EnumCheck.UNIQUE)
class BuilderRule(StrEnum):
    """How a requested value is turned into the telegram's value byte."""

    FLOAT = "float"  # the (truncated) value itself
    FLOAT_TIMES_TWO = "float_times_two"  # half-degree resolution
    SELECT = "select"  # the device code of a select option
