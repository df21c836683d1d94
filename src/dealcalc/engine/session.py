"""Session-level operations: every UI action is one transition on SessionState.

Each function takes the current state and returns a new one. Strategy-specific
behaviour (DSCR stress defaults, new-build unit resizing) is routed here so
callers only ever deal with a strategy key and a field name.
"""

from dataclasses import replace
from decimal import Decimal
from enum import Enum
from typing import Any

from dealcalc.engine import units as unit_ops
from dealcalc.engine.build import analyze_build
from dealcalc.engine.dscr import analyze_dscr, edit_dscr, set_dscr_property_type
from dealcalc.engine.linking import apply_edit, set_flag, set_option
from dealcalc.engine.ltr import analyze_ltr
from dealcalc.engine.mapper import apply_mapped, map_data
from dealcalc.engine.parsing import coerce_flag
from dealcalc.engine.multi_unit import analyze_multi_unit
from dealcalc.engine.room import analyze_room
from dealcalc.engine.short_term import analyze_str
from dealcalc.models.session import RECORD_ATTRS, UNIT_ATTRS, SessionState
from dealcalc.models.strategies import PropertyType, RentalType, StrategyType


def record_for(session: SessionState, strategy: StrategyType | str) -> Any:
    return getattr(session, RECORD_ATTRS[StrategyType(strategy)])


def units_for(session: SessionState, strategy: StrategyType | str) -> tuple:
    """The strategy's unit collection, or () for strategies without one."""
    attr = UNIT_ATTRS.get(StrategyType(strategy))
    return getattr(session, attr) if attr else ()


def _with_record(session: SessionState, strategy: StrategyType, record: Any) -> SessionState:
    return replace(session, **{RECORD_ATTRS[strategy]: record})


# ---- Field edits ----

def edit_field(session: SessionState, strategy: StrategyType | str, field_name: str, raw_value: Any) -> SessionState:
    strategy = StrategyType(strategy)
    record = record_for(session, strategy)
    if strategy is StrategyType.DSCR:
        return _with_record(session, strategy, edit_dscr(record, field_name, raw_value))
    return _with_record(session, strategy, apply_edit(record, field_name, raw_value))


def set_field_flag(session: SessionState, strategy: StrategyType | str, field_name: str, checked: bool) -> SessionState:
    strategy = StrategyType(strategy)
    if strategy is StrategyType.BUILD and field_name == "apply_to_all":
        return set_apply_to_all(session, checked)
    return _with_record(session, strategy, set_flag(record_for(session, strategy), field_name, checked))


def set_field_option(session: SessionState, strategy: StrategyType | str, field_name: str, value: Any) -> SessionState:
    """Choice edit. Property-type choices carry side effects and are routed accordingly."""
    strategy = StrategyType(strategy)
    if strategy is StrategyType.BUILD and field_name == "property_type":
        return set_build_property_type(session, value)
    if strategy is StrategyType.DSCR and field_name == "property_type":
        return set_dscr_type(session, value)
    return _with_record(session, strategy, set_option(record_for(session, strategy), field_name, value))


def apply_input(session: SessionState, strategy: StrategyType | str, field_name: str, value: Any) -> SessionState:
    """Route a raw input to the right transition by the field's type.

    Raises ValueError for a field the strategy's record does not have, or a
    checkbox value that is not a true/false word.
    """
    strategy = StrategyType(strategy)
    current = getattr(record_for(session, strategy), field_name, None)
    if isinstance(current, bool):
        return set_field_flag(session, strategy, field_name, coerce_flag(value))
    if isinstance(current, Enum):
        return set_field_option(session, strategy, field_name, value)
    if isinstance(current, Decimal):
        return edit_field(session, strategy, field_name, value)
    raise ValueError(f"{strategy.value} has no editable field {field_name!r}")


def set_dscr_type(session: SessionState, property_type: RentalType | str) -> SessionState:
    return replace(session, dscr=set_dscr_property_type(session.dscr, property_type))


def set_build_property_type(session: SessionState, property_type: PropertyType | str) -> SessionState:
    """Change the new-build property type and resize its unit list to match."""
    property_type = PropertyType(property_type)
    return replace(
        session,
        build=replace(session.build, property_type=property_type),
        build_units=unit_ops.resize_build_units(session.build_units, property_type),
    )


def set_apply_to_all(session: SessionState, checked: bool) -> SessionState:
    build = replace(session.build, apply_to_all=bool(checked))
    build_units = unit_ops.apply_first_unit_to_all(session.build_units) if checked else session.build_units
    return replace(session, build=build, build_units=build_units)


# ---- Unit collections ----

def add_room_unit(session: SessionState, unit_type: Any = "Room", rent: Any = 0) -> SessionState:
    return replace(session, room_units=unit_ops.add_rental_unit(session.room_units, unit_type, rent))


def remove_room_unit(session: SessionState, unit_id: str) -> SessionState:
    return replace(session, room_units=unit_ops.remove_rental_unit(session.room_units, unit_id))


def edit_room_unit_rent(session: SessionState, unit_id: str, raw_rent: Any) -> SessionState:
    return replace(session, room_units=unit_ops.update_rental_unit_rent(session.room_units, unit_id, raw_rent))


def set_room_owner_occupied(session: SessionState, unit_id: str) -> SessionState:
    return replace(session, room_units=unit_ops.set_owner_occupied(session.room_units, unit_id))


def add_multi_unit(session: SessionState) -> SessionState:
    return replace(session, multi_units=unit_ops.add_multi_unit(session.multi_units))


def remove_multi_unit(session: SessionState, unit_id: str) -> SessionState:
    return replace(session, multi_units=unit_ops.remove_multi_unit(session.multi_units, unit_id))


def edit_multi_unit_rent(session: SessionState, unit_id: str, raw_rent: Any) -> SessionState:
    return replace(session, multi_units=unit_ops.update_multi_unit_rent(session.multi_units, unit_id, raw_rent))


def edit_build_unit(session: SessionState, unit_id: str, field_name: str, raw_value: Any) -> SessionState:
    build_units = unit_ops.update_build_unit(
        session.build_units, unit_id, field_name, raw_value, session.build.apply_to_all
    )
    return replace(session, build_units=build_units)


def set_build_unit_flag(session: SessionState, unit_id: str, field_name: str, checked: bool) -> SessionState:
    build_units = unit_ops.set_build_unit_flag(
        session.build_units, unit_id, field_name, checked, session.build.apply_to_all
    )
    return replace(session, build_units=build_units)


def set_build_unit_strategy(session: SessionState, unit_id: str, strategy: RentalType | str) -> SessionState:
    build_units = unit_ops.set_build_unit_strategy(
        session.build_units, unit_id, strategy, session.build.apply_to_all
    )
    return replace(session, build_units=build_units)


# ---- Navigation & transfer ----

def switch_strategy(session: SessionState, strategy: StrategyType | str) -> SessionState:
    return replace(session, active=StrategyType(strategy))


def push_data(
    session: SessionState, source: StrategyType | str, destination: StrategyType | str
) -> SessionState:
    """Copy shared deal data from source into destination and open the destination."""
    destination = StrategyType(destination)
    partial = map_data(source, session, destination)
    updated = apply_mapped(record_for(session, destination), partial)
    return replace(_with_record(session, destination, updated), active=destination)


# ---- Metrics ----

def compute_metrics(session: SessionState, strategy: StrategyType | str | None = None) -> Any:
    """Metrics for one strategy (the active one by default)."""
    strategy = StrategyType(strategy) if strategy is not None else session.active
    if strategy is StrategyType.LTR:
        return analyze_ltr(session.ltr)
    if strategy is StrategyType.ROOM:
        return analyze_room(session.room, session.room_units)
    if strategy is StrategyType.STR:
        return analyze_str(session.str_rental)
    if strategy is StrategyType.MULTI:
        return analyze_multi_unit(session.multi_unit, session.multi_units)
    if strategy is StrategyType.BUILD:
        return analyze_build(session.build, session.build_units)
    return analyze_dscr(session.dscr)
