#!/usr/bin/env python3
"""KM271 - a Buderus KM271 parameter codec.

Schema processor for the component configuration.
"""

from __future__ import annotations

import logging
from typing import Any, Final

import voluptuous as vol

from .const import (
    DEFAULT_LOOP_INTERVAL,
    DEFAULT_WRITE_DEBOUNCE,
    ComponentKind,
    Parameter,
)

_LOGGER = logging.getLogger(__name__)


#
# 0/2: Schema strings
SZ_COMPONENTS: Final = "components"
SZ_LOOP_INTERVAL: Final = "loop_interval"
SZ_OPTIONS: Final = "options"
SZ_TYPE: Final = "type"
SZ_WRITE_DEBOUNCE: Final = "write_debounce"


def _unique_codes(node_value: dict[str, int]) -> dict[str, int]:
    if len(set(node_value.values())) != len(node_value):
        raise vol.Invalid(f"the option codes must be unique: {node_value}")
    return node_value


#
# 1/2: Schemas for components
SCH_OPTIONS = vol.All(
    {str: vol.All(vol.Coerce(int), vol.Range(min=0, max=0xFF))},
    vol.Length(min=1),
    _unique_codes,
)

SCH_COMPONENT = vol.Any(
    vol.Schema(
        {
            vol.Required(SZ_TYPE): vol.In(
                [str(k) for k in ComponentKind if k != ComponentKind.SELECT]
            ),
        },
        extra=vol.PREVENT_EXTRA,
    ),
    vol.Schema(
        {
            vol.Required(SZ_TYPE): vol.In([str(ComponentKind.SELECT)]),
            vol.Required(SZ_OPTIONS): SCH_OPTIONS,
        },
        extra=vol.PREVENT_EXTRA,
    ),
)

SCH_COMPONENTS = vol.Schema({vol.Coerce(Parameter): SCH_COMPONENT})

#
# 2/2: Gateway configuration
SCH_GATEWAY_CONFIG = vol.Schema(
    {
        vol.Optional(SZ_WRITE_DEBOUNCE, default=DEFAULT_WRITE_DEBOUNCE): vol.All(
            vol.Coerce(float), vol.Range(min=0.0, max=60.0)
        ),
        vol.Optional(SZ_LOOP_INTERVAL, default=DEFAULT_LOOP_INTERVAL): vol.All(
            vol.Coerce(float), vol.Range(min=0.01, max=10.0)
        ),
        vol.Optional(SZ_COMPONENTS, default=dict): SCH_COMPONENTS,
    },
    extra=vol.PREVENT_EXTRA,
)


def load_config(config: dict[str, Any] | None) -> dict[str, Any]:
    """Return a validated (and defaulted) gateway configuration."""

    result: dict[str, Any] = SCH_GATEWAY_CONFIG(config or {})
    _LOGGER.debug("Configuration: %s", result)
    return result
