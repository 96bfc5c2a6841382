#!/usr/bin/env python3
"""KM271 - Typing for the collaborators of the codec layer."""

from collections.abc import Callable
from typing import TypeAlias

StateT: TypeAlias = bool | int | float | str

# submit an 8-byte telegram to the transport, True if accepted for sending
SubmitFncT = Callable[[bytes], bool]
# publish a decoded (or confirmed) value
PublishFncT = Callable[[StateT], None]
