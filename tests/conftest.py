"""Shared test fixtures used across engine and API tests.

Fixture deals are the session-start defaults: a $350K LTR at 20% down / 6.5%,
a $450K house hack, a $400K STR at $250 ADR / 75% occupancy, a $600K
two-unit multi, a $500K DSCR purchase and a $750K-ARV new build.
"""

from dataclasses import replace
from decimal import Decimal

import pytest

from dealcalc.models.inputs import (
    DEFAULT_BUILD,
    DEFAULT_BUILD_UNIT,
    DEFAULT_DSCR,
    DEFAULT_LTR,
    DEFAULT_MULTI_UNIT,
    DEFAULT_ROOM,
    DEFAULT_STR,
    BuildUnit,
    MultiUnitItem,
    RentalUnit,
)
from dealcalc.models.session import SessionState
from dealcalc.models.strategies import UnitType


@pytest.fixture
def ltr_inputs():
    return DEFAULT_LTR


@pytest.fixture
def room_inputs():
    return DEFAULT_ROOM


@pytest.fixture
def str_inputs():
    return DEFAULT_STR


@pytest.fixture
def multi_inputs():
    return DEFAULT_MULTI_UNIT


@pytest.fixture
def dscr_inputs():
    return DEFAULT_DSCR


@pytest.fixture
def build_project():
    return DEFAULT_BUILD


@pytest.fixture
def rental_units() -> tuple[RentalUnit, ...]:
    """Owner lives in the $850 room; $3,250 total when fully rented."""
    return (
        RentalUnit(id="r1", unit_type=UnitType.ROOM, rent=Decimal("850"), owner_occupied=True),
        RentalUnit(id="r2", unit_type=UnitType.ROOM, rent=Decimal("800")),
        RentalUnit(id="r3", unit_type=UnitType.ROOM, rent=Decimal("800")),
        RentalUnit(id="r4", unit_type=UnitType.ADU, rent=Decimal("800")),
    )


@pytest.fixture
def multi_units() -> tuple[MultiUnitItem, ...]:
    return (
        MultiUnitItem(id="m1", rent=Decimal("1500")),
        MultiUnitItem(id="m2", rent=Decimal("1500")),
    )


@pytest.fixture
def build_units() -> tuple[BuildUnit, ...]:
    """Three default-template units with fixed ids."""
    return tuple(replace(DEFAULT_BUILD_UNIT, id=f"b{i}") for i in range(1, 4))


@pytest.fixture
def session() -> SessionState:
    return SessionState()
