#!/usr/bin/env python3
"""KM271 - exceptions above the telegram layer."""

from __future__ import annotations

from km271_tx.exceptions import (
    Km271Exception as Km271Exception,
    NoEncodingRuleFound as NoEncodingRuleFound,
    SelectIndexOutOfRange as SelectIndexOutOfRange,
    TelegramError as TelegramError,
    TelegramInvalid as TelegramInvalid,
)


class _Km271UpperError(Km271Exception):
    """A failure in the upper layer (components, gateway)."""


########################################################################################
# Errors when decoding received values, or handling write requests


class ComponentError(_Km271UpperError):
    """A component could not process a received value or a write request."""


class UnmappedSelectValue(ComponentError):
    """The received device code has no select option."""


class UnmappedSelectLabel(ComponentError):
    """The requested select option has no device code."""


class InvalidFragmentIndex(ComponentError):
    """The fragment index (from the sensor type param) is out of range."""


class UnsupportedOperation(ComponentError):
    """The component does not support this operation."""


class WriterNotConfigured(ComponentError):
    """A write was requested before the transport was wired to the component."""

    HINT = "call setup_writing() before requesting a write"


class InvalidWriteValue(ComponentError):
    """The requested value cannot be written (not a number, not finite, etc.)."""
