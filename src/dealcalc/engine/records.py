"""Build input and unit records from plain mappings, and flatten them back.

Used at the edges (HTTP payloads, fixtures). Omitted fields keep the
session-start default; numbers go through the same coercion as a field edit.
Unknown fields and invalid choices raise ValueError.
"""

from collections.abc import Iterable, Mapping
from dataclasses import fields, is_dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any

from dealcalc.engine.cashflow import is_finite_metric
from dealcalc.engine.parsing import coerce_flag, coerce_number
from dealcalc.models.inputs import (
    DEFAULT_BUILD,
    DEFAULT_BUILD_UNIT,
    DEFAULT_DSCR,
    DEFAULT_LTR,
    DEFAULT_MULTI_UNIT,
    DEFAULT_ROOM,
    DEFAULT_STR,
    MultiUnitItem,
    RentalUnit,
)
from dealcalc.models.session import (
    default_build_units,
    default_multi_units,
    default_rental_units,
    new_unit_id,
)
from dealcalc.models.strategies import StrategyType

DEFAULT_INPUTS: dict[StrategyType, Any] = {
    StrategyType.LTR: DEFAULT_LTR,
    StrategyType.ROOM: DEFAULT_ROOM,
    StrategyType.STR: DEFAULT_STR,
    StrategyType.MULTI: DEFAULT_MULTI_UNIT,
    StrategyType.BUILD: DEFAULT_BUILD,
    StrategyType.DSCR: DEFAULT_DSCR,
}

# Template record per collection; ids are assigned per unit
UNIT_TEMPLATES: dict[StrategyType, Any] = {
    StrategyType.ROOM: RentalUnit(id=""),
    StrategyType.MULTI: MultiUnitItem(id=""),
    StrategyType.BUILD: DEFAULT_BUILD_UNIT,
}

DEFAULT_UNITS = {
    StrategyType.ROOM: default_rental_units,
    StrategyType.MULTI: default_multi_units,
    StrategyType.BUILD: default_build_units,
}


def _coerce(current: Any, raw: Any) -> Any:
    if isinstance(current, bool):
        return coerce_flag(raw)
    if isinstance(current, Enum):
        return type(current)(raw)
    if isinstance(current, Decimal):
        return coerce_number(raw)
    return str(raw)


def _fill(template: Any, values: Mapping[str, Any]) -> Any:
    names = {f.name for f in fields(template)}
    unknown = sorted(set(values) - names)
    if unknown:
        raise ValueError(f"Unknown field(s) for {type(template).__name__}: {', '.join(unknown)}")
    return replace(template, **{k: _coerce(getattr(template, k), v) for k, v in values.items()})


def build_inputs(strategy: StrategyType | str, values: Mapping[str, Any] | None = None) -> Any:
    return _fill(DEFAULT_INPUTS[StrategyType(strategy)], values or {})


def build_units(strategy: StrategyType | str, items: Iterable[Mapping[str, Any]] | None = None) -> tuple:
    """Unit collection for a strategy. None gives the session-start units."""
    strategy = StrategyType(strategy)
    if strategy not in UNIT_TEMPLATES:
        return ()
    if items is None:
        return DEFAULT_UNITS[strategy]()

    units = []
    for item in items:
        unit = _fill(UNIT_TEMPLATES[strategy], item)
        units.append(unit if unit.id else replace(unit, id=new_unit_id()))
    return tuple(units)


def record_to_dict(record: Any) -> Any:
    """Plain-data view of a record: nested records become dicts, enums their values."""
    if is_dataclass(record):
        return {f.name: record_to_dict(getattr(record, f.name)) for f in fields(record)}
    if isinstance(record, (list, tuple)):
        return [record_to_dict(item) for item in record]
    if isinstance(record, Enum):
        return record.value
    return record


def non_finite_paths(record: Any, prefix: str = "") -> list[str]:
    """Dotted paths of every infinite metric, for renderers that show a dash."""
    paths: list[str] = []
    if is_dataclass(record):
        for f in fields(record):
            paths += non_finite_paths(getattr(record, f.name), f"{prefix}{f.name}.")
    elif isinstance(record, (list, tuple)):
        for i, item in enumerate(record):
            paths += non_finite_paths(item, f"{prefix}{i}.")
    elif isinstance(record, Decimal) and not is_finite_metric(record):
        paths.append(prefix.rstrip("."))
    return paths
