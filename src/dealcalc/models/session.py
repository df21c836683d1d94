"""Application state for one calculator session.

One input record per strategy plus the sub-unit collections. Never persisted;
every operation in dealcalc.engine.session returns a new SessionState.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from uuid import uuid4

from dealcalc.models.inputs import (
    DEFAULT_BUILD,
    DEFAULT_BUILD_UNIT,
    DEFAULT_DSCR,
    DEFAULT_LTR,
    DEFAULT_MULTI_UNIT,
    DEFAULT_ROOM,
    DEFAULT_STR,
    BuildInputs,
    BuildUnit,
    DscrInputs,
    LtrInputs,
    MultiUnitInputs,
    MultiUnitItem,
    RentalUnit,
    RoomInputs,
    StrInputs,
)
from dealcalc.models.strategies import StrategyType, UnitType


def new_unit_id() -> str:
    return str(uuid4())


def default_rental_units() -> tuple[RentalUnit, ...]:
    return (
        RentalUnit(id=new_unit_id(), unit_type=UnitType.ROOM, rent=Decimal("850"), owner_occupied=True),
        RentalUnit(id=new_unit_id(), unit_type=UnitType.ROOM, rent=Decimal("800")),
        RentalUnit(id=new_unit_id(), unit_type=UnitType.ROOM, rent=Decimal("800")),
        RentalUnit(id=new_unit_id(), unit_type=UnitType.ADU, rent=Decimal("1200")),
    )


def default_multi_units() -> tuple[MultiUnitItem, ...]:
    return (
        MultiUnitItem(id=new_unit_id(), rent=Decimal("1500")),
        MultiUnitItem(id=new_unit_id(), rent=Decimal("1500")),
    )


def default_build_units() -> tuple[BuildUnit, ...]:
    return (replace(DEFAULT_BUILD_UNIT, id=new_unit_id()),)


@dataclass(frozen=True)
class SessionState:
    ltr: LtrInputs = DEFAULT_LTR
    room: RoomInputs = DEFAULT_ROOM
    room_units: tuple[RentalUnit, ...] = field(default_factory=default_rental_units)
    str_rental: StrInputs = DEFAULT_STR
    multi_unit: MultiUnitInputs = DEFAULT_MULTI_UNIT
    multi_units: tuple[MultiUnitItem, ...] = field(default_factory=default_multi_units)
    build: BuildInputs = DEFAULT_BUILD
    build_units: tuple[BuildUnit, ...] = field(default_factory=default_build_units)
    dscr: DscrInputs = DEFAULT_DSCR

    active: StrategyType = StrategyType.LTR


# Which SessionState attribute holds each strategy's input record
RECORD_ATTRS: dict[StrategyType, str] = {
    StrategyType.LTR: "ltr",
    StrategyType.ROOM: "room",
    StrategyType.STR: "str_rental",
    StrategyType.MULTI: "multi_unit",
    StrategyType.BUILD: "build",
    StrategyType.DSCR: "dscr",
}

# Strategies that own a sub-unit collection
UNIT_ATTRS: dict[StrategyType, str] = {
    StrategyType.ROOM: "room_units",
    StrategyType.MULTI: "multi_units",
    StrategyType.BUILD: "build_units",
}
