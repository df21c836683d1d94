"""Add / remove / update operations on the sub-unit collections.

Collections are tuples of frozen records; every operation returns a new tuple.
Unit ids are stable for the life of the session, and operations addressed to an
id that is not in the collection leave it unchanged.
"""

import logging
from dataclasses import fields, replace
from decimal import Decimal
from typing import Any

from dealcalc.config import settings
from dealcalc.engine.parsing import coerce_number
from dealcalc.models.inputs import DEFAULT_BUILD_UNIT, BuildUnit, MultiUnitItem, RentalUnit
from dealcalc.models.session import new_unit_id
from dealcalc.models.strategies import PropertyType, RentalType, UnitType

logger = logging.getLogger(__name__)

RentalUnits = tuple[RentalUnit, ...]
MultiUnits = tuple[MultiUnitItem, ...]
BuildUnits = tuple[BuildUnit, ...]


def _index_of(units: tuple, unit_id: str) -> int | None:
    return next((i for i, u in enumerate(units) if u.id == unit_id), None)


# ---- By-the-room ----

def add_rental_unit(
    units: RentalUnits, unit_type: UnitType | str = UnitType.ROOM, rent: Any = 0
) -> RentalUnits:
    unit = RentalUnit(id=new_unit_id(), unit_type=UnitType(unit_type), rent=coerce_number(rent))
    return units + (unit,)


def remove_rental_unit(units: RentalUnits, unit_id: str) -> RentalUnits:
    return tuple(u for u in units if u.id != unit_id)


def update_rental_unit_rent(units: RentalUnits, unit_id: str, raw_rent: Any) -> RentalUnits:
    rent = coerce_number(raw_rent)
    return tuple(replace(u, rent=rent) if u.id == unit_id else u for u in units)


def set_owner_occupied(units: RentalUnits, unit_id: str) -> RentalUnits:
    """Mark the unit the owner lives in. Only one unit may be owner-occupied."""
    if _index_of(units, unit_id) is None:
        logger.debug("No rental unit %s; owner-occupied flag unchanged", unit_id)
        return units
    return tuple(replace(u, owner_occupied=u.id == unit_id) for u in units)


# ---- Multi-unit ----

def add_multi_unit(units: MultiUnits) -> MultiUnits:
    """New unit starts at the last unit's rent (or the default when that is 0)."""
    last_rent = units[-1].rent if units else Decimal("0")
    rent = last_rent or settings.default_multi_unit_rent
    return units + (MultiUnitItem(id=new_unit_id(), rent=rent),)


def remove_multi_unit(units: MultiUnits, unit_id: str) -> MultiUnits:
    """A multi-unit property always keeps at least one unit."""
    if len(units) <= 1:
        logger.debug("Refusing to remove the last multi-unit %s", unit_id)
        return units
    return tuple(u for u in units if u.id != unit_id)


def update_multi_unit_rent(units: MultiUnits, unit_id: str, raw_rent: Any) -> MultiUnits:
    rent = coerce_number(raw_rent)
    return tuple(replace(u, rent=rent) if u.id == unit_id else u for u in units)


# ---- New build ----

def resize_build_units(units: BuildUnits, property_type: PropertyType | str) -> BuildUnits:
    """Match the unit count to the property type.

    Shrinking drops units from the tail. Growing clones the first unit's
    settings (or the default unit) under fresh ids.
    """
    target = PropertyType(property_type).unit_count
    if target <= len(units):
        return units[:target]
    template = units[0] if units else DEFAULT_BUILD_UNIT
    added = tuple(replace(template, id=new_unit_id()) for _ in range(target - len(units)))
    return units + added


def _propagate(units: BuildUnits, unit_id: str, changes: dict[str, Any], apply_to_all: bool) -> BuildUnits:
    index = _index_of(units, unit_id)
    if index is None:
        logger.debug("No build unit %s; edit ignored", unit_id)
        return units
    # Edits to the first unit drive every unit while apply-to-all is on
    if apply_to_all and index == 0:
        return tuple(replace(u, **changes) for u in units)
    return tuple(replace(u, **changes) if i == index else u for i, u in enumerate(units))


def update_build_unit(
    units: BuildUnits, unit_id: str, field_name: str, raw_value: Any, apply_to_all: bool = False
) -> BuildUnits:
    if not isinstance(getattr(DEFAULT_BUILD_UNIT, field_name, None), Decimal):
        logger.debug("Ignoring edit to build unit field %s", field_name)
        return units
    return _propagate(units, unit_id, {field_name: coerce_number(raw_value)}, apply_to_all)


def set_build_unit_flag(
    units: BuildUnits, unit_id: str, field_name: str, checked: bool, apply_to_all: bool = False
) -> BuildUnits:
    if not isinstance(getattr(DEFAULT_BUILD_UNIT, field_name, None), bool):
        logger.debug("Ignoring flag %s on build unit", field_name)
        return units
    return _propagate(units, unit_id, {field_name: bool(checked)}, apply_to_all)


def set_build_unit_strategy(
    units: BuildUnits, unit_id: str, strategy: RentalType | str, apply_to_all: bool = False
) -> BuildUnits:
    return _propagate(units, unit_id, {"strategy": RentalType(strategy)}, apply_to_all)


def apply_first_unit_to_all(units: BuildUnits) -> BuildUnits:
    """Copy unit 1's settings onto every unit, keeping each unit's id."""
    if not units:
        return units
    first = units[0]
    settings_only = {f.name: getattr(first, f.name) for f in fields(first) if f.name != "id"}
    return tuple(replace(u, **settings_only) for u in units)
