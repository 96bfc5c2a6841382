#!/usr/bin/env python3
"""KM271 - exceptions within the telegram layer."""

from __future__ import annotations


class _Km271BaseException(Exception):
    """Base class for all km271 exceptions."""

    pass


class Km271Exception(_Km271BaseException):
    """Base class for all km271 exceptions."""

    HINT: None | str = None

    def __init__(self, *args: object):
        super().__init__(*args)
        self.message: str | None = args[0] if args else None  # type: ignore[assignment]

    def __str__(self) -> str:
        if self.message and self.HINT:
            return f"{self.message} (hint: {self.HINT})"
        if self.message:
            return self.message
        if self.HINT:
            return f"Hint: {self.HINT}"
        return ""


class _Km271LowerError(Km271Exception):
    """A failure in the lower layer (rule table, telegram construction)."""


########################################################################################
# Errors when building or parsing telegrams


class TelegramError(_Km271LowerError):
    """A telegram could not be built (nothing will be sent)."""


class TelegramInvalid(TelegramError):
    """The telegram is corrupt/not internally consistent."""


class NoEncodingRuleFound(TelegramError):
    """There is no rule for writing this parameter."""

    HINT = "the parameter is read-only, or its rule has a different strategy"


class SelectIndexOutOfRange(TelegramError):
    """The device code of a select option exceeds the rule's maximum index."""
