#!/usr/bin/env python3
"""KM271 - a Buderus KM271 parameter codec (telegram layer)."""

from __future__ import annotations

from .const import KEEP, TELEGRAM_LENGTH, BuilderRule, DataType, Parameter
from .frame import Telegram
from .rules import TELEGRAM_RULES, TelegramRule, find_rule, limit_value_to_range
from .typing import PublishFncT, StateT, SubmitFncT
from .version import VERSION

__all__ = [
    "VERSION",
    #
    "KEEP",
    "TELEGRAM_LENGTH",
    "TELEGRAM_RULES",
    #
    "BuilderRule",
    "DataType",
    "Parameter",
    "Telegram",
    "TelegramRule",
    #
    "PublishFncT",
    "StateT",
    "SubmitFncT",
    #
    "find_rule",
    "limit_value_to_range",
]
