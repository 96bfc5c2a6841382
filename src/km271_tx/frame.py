#!/usr/bin/env python3
"""KM271 - a Buderus KM271 parameter codec.

Provide the Telegram class (the fixed 8-byte protocol message).
"""

from __future__ import annotations

import logging

from . import exceptions as exc
from .const import KEEP, PAYLOAD_LENGTH, TELEGRAM_LENGTH, DataType

_LOGGER = logging.getLogger(__name__)


class Telegram(bytes):
    """The Telegram class - an immutable 8-byte message.

    `0C 07 65 65 65 2D 65 65`

    Byte 0 is the data-type class, byte 1 the field offset within that class and
    bytes 2-7 the payload. In a write telegram, exactly one payload byte carries a
    value and all others hold the keep sentinel.
    """

    def __new__(cls, frame: bytes | bytearray | list[int]) -> Telegram:
        try:
            obj = super().__new__(cls, frame)
        except (TypeError, ValueError) as err:
            raise exc.TelegramInvalid(f"Invalid telegram: {frame!r}: {err}") from err

        if len(obj) != TELEGRAM_LENGTH:
            raise exc.TelegramInvalid(
                f"Invalid telegram length: {len(obj)} (expected {TELEGRAM_LENGTH})"
            )
        return obj

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.hex(' ').upper()!r})"

    def __str__(self) -> str:
        return self.hex(" ").upper()

    @classmethod
    def from_hex(cls, frame: str) -> Telegram:
        """Create a telegram from a hex string (spaces are permitted)."""

        try:
            return cls(bytes.fromhex(frame))
        except ValueError as err:
            raise exc.TelegramInvalid(f"Invalid telegram: {frame!r}: {err}") from err

    @classmethod
    def build(
        cls,
        data_type: DataType | int,
        offset: int,
        value_position: int,
        value: int,
    ) -> Telegram:
        """Create a write telegram that changes only the field at value_position."""

        if not 0 <= value_position < PAYLOAD_LENGTH:
            raise exc.TelegramInvalid(
                f"Invalid value position: {value_position} "
                f"(expected 0-{PAYLOAD_LENGTH - 1})"
            )
        if not 0 <= value <= 0xFF:
            raise exc.TelegramInvalid(f"Invalid value byte: {value}")

        frame = [data_type, offset] + [KEEP] * PAYLOAD_LENGTH
        frame[value_position + 2] = value
        return cls(frame)

    @property
    def data_type(self) -> int:
        return self[0]

    @property
    def offset(self) -> int:
        return self[1]

    @property
    def payload(self) -> bytes:
        return bytes(self[2:])

    @property
    def changed_positions(self) -> tuple[int, ...]:
        """Return the payload positions that are not the keep sentinel."""
        return tuple(i for i, b in enumerate(self.payload) if b != KEEP)
