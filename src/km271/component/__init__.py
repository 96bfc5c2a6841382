#!/usr/bin/env python3
"""KM271 - a Buderus KM271 parameter codec.

The communication components, and a factory to create them from a schema.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from km271.const import DEFAULT_WRITE_DEBOUNCE, ComponentKind
from km271.schemas import SZ_OPTIONS, SZ_TYPE

from .base import CommunicationComponent, ReportFncT
from .number import Confirmed, Number, PendingWrite
from .select import Select
from .sensor import FirmwareVersion, MultiFragmentAssembler
from .switch import Switch

if TYPE_CHECKING:
    from km271_tx import Parameter, PublishFncT


__all__ = [
    "CommunicationComponent",
    "Confirmed",
    "FirmwareVersion",
    "MultiFragmentAssembler",
    "Number",
    "PendingWrite",
    "ReportFncT",
    "Select",
    "Switch",
    "component_factory",
]


_CLASS_BY_KIND: dict[ComponentKind, type[CommunicationComponent]] = {
    ComponentKind.SWITCH: Switch,
    ComponentKind.NUMBER: Number,
    ComponentKind.ASSEMBLER: MultiFragmentAssembler,
    ComponentKind.SELECT: Select,
    ComponentKind.FIRMWARE_VERSION: FirmwareVersion,
}


def component_factory(
    parameter: Parameter,
    schema: dict[str, Any],
    *,
    publish: PublishFncT | None = None,
    report: ReportFncT | None = None,
    write_debounce: float = DEFAULT_WRITE_DEBOUNCE,
) -> CommunicationComponent:
    """Create a component for a parameter from its (validated) schema."""

    kind = ComponentKind(schema[SZ_TYPE])

    if kind == ComponentKind.NUMBER:
        return Number(
            parameter, publish=publish, report=report, write_debounce=write_debounce
        )

    if kind == ComponentKind.SELECT:
        options: dict[str, int] = schema[SZ_OPTIONS]
        return Select(
            parameter,
            options.keys(),
            options.values(),
            publish=publish,
            report=report,
        )

    return _CLASS_BY_KIND[kind](parameter, publish=publish, report=report)
