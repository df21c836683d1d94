"""Strategy, property and unit classifications shared by every calculator."""

from enum import Enum


class StrategyType(Enum):
    LTR = "ltr"
    ROOM = "room"
    STR = "str"
    MULTI = "multi"
    BUILD = "build"
    DSCR = "dscr"


class UnitType(Enum):
    ROOM = "Room"
    ADU = "ADU"
    UNIT = "Unit"


class RentalType(Enum):
    """How a DSCR property or a new-build unit earns rent."""
    LTR = "LTR"
    STR = "STR"


class PropertyType(Enum):
    SFH = "SFH"
    TOWNHOME = "Townhome"
    CONDO = "Condo"
    DUPLEX = "Duplex"
    TRIPLEX = "Triplex"
    QUADPLEX = "Quadplex"

    @property
    def unit_count(self) -> int:
        return _UNIT_COUNTS[self]


_UNIT_COUNTS: dict[PropertyType, int] = {
    PropertyType.SFH: 1,
    PropertyType.TOWNHOME: 1,
    PropertyType.CONDO: 1,
    PropertyType.DUPLEX: 2,
    PropertyType.TRIPLEX: 3,
    PropertyType.QUADPLEX: 4,
}


class LandAcquisition(Enum):
    CASH = "cash"
    FINANCE = "finance"
    OWNED = "owned"


class DscrStatus(Enum):
    PASS = "PASS"
    FAIL = "FAIL"
