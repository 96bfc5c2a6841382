#!/usr/bin/env python3
"""KM271 - a Buderus KM271 parameter codec.

Decodes the values received from a KM271 heating controller into typed values
(temperatures, operating modes, firmware version, runtime counters), and encodes
write requests into telegrams, debouncing the writes of numeric values.
"""

from __future__ import annotations

import logging

from km271_tx import Parameter, Telegram, find_rule  # noqa: F401
from km271_tx.version import VERSION  # noqa: F401

from .component import (  # noqa: F401
    CommunicationComponent,
    FirmwareVersion,
    MultiFragmentAssembler,
    Number,
    Select,
    Switch,
)
from .gateway import Gateway  # noqa: F401

_LOGGER = logging.getLogger(__name__)
