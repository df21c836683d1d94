"""Per-strategy input records and the sub-unit records their collections hold.

All money is Decimal dollars, all rates are percent (e.g. Decimal("20") for 20%).
"""

from dataclasses import dataclass
from decimal import Decimal

from dealcalc.models.fields import FieldRole, linked
from dealcalc.models.strategies import (
    LandAcquisition,
    PropertyType,
    RentalType,
    UnitType,
)

ZERO = Decimal("0")


@dataclass(frozen=True)
class PropertyFinancing:
    """Purchase, loan and carrying-cost fields shared by the purchase strategies."""
    purchase_price: Decimal = linked(FieldRole.BASE_PRICE, ZERO)
    down_payment_pct: Decimal = linked(FieldRole.DOWN_PCT, ZERO)
    down_payment_amt: Decimal = linked(FieldRole.DOWN_AMT, ZERO)
    closing_costs: Decimal = ZERO
    renovation_cost: Decimal = ZERO
    renovation_financed: bool = False  # Rolled into the loan principal
    interest_rate_pct: Decimal = ZERO
    term_years: Decimal = ZERO

    annual_tax: Decimal = linked(FieldRole.TAX_AMT, ZERO)
    tax_rate_pct: Decimal = linked(FieldRole.TAX_RATE, ZERO)
    insurance_monthly: Decimal = ZERO
    hoa_monthly: Decimal = ZERO
    utilities_monthly: Decimal = ZERO

    # % of revenue
    maintenance_pct: Decimal = ZERO
    capex_pct: Decimal = ZERO


@dataclass(frozen=True)
class LtrInputs(PropertyFinancing):
    rent: Decimal = ZERO  # Monthly
    management_pct: Decimal = ZERO


@dataclass(frozen=True)
class RoomInputs(PropertyFinancing):
    """Rent comes from the rental-unit collection, not from this record."""
    management_pct: Decimal = ZERO


@dataclass(frozen=True)
class StrInputs(PropertyFinancing):
    staging_cost: Decimal = ZERO  # Furnishing, paid in cash
    adr: Decimal = ZERO
    occupancy_pct: Decimal = ZERO
    supplies_monthly: Decimal = ZERO
    cohost_pct: Decimal = ZERO
    platform_pct: Decimal = ZERO
    cleaning_fee: Decimal = ZERO  # Per stay
    stays_per_month: Decimal = ZERO
    cleaning_covered_by_guest: bool = False


@dataclass(frozen=True)
class MultiUnitInputs(PropertyFinancing):
    """Percentages apply to total rent across all units."""
    management_pct: Decimal = ZERO


@dataclass(frozen=True)
class DscrInputs:
    property_type: RentalType = RentalType.LTR

    # Purchase & primary loan
    purchase_price: Decimal = linked(FieldRole.BASE_PRICE, ZERO)
    down_payment_pct: Decimal = linked(FieldRole.DOWN_PCT, ZERO)
    down_payment_amt: Decimal = linked(FieldRole.DOWN_AMT, ZERO)
    closing_costs: Decimal = ZERO
    interest_rate_pct: Decimal = ZERO  # Note rate
    term_years: Decimal = ZERO

    # Renovation, optionally bridged with hard money
    renovation_cost: Decimal = ZERO
    renovation_financed_hm: bool = False
    hm_rate_pct: Decimal = ZERO
    hm_term_years: Decimal = ZERO

    # Income
    ltr_rent: Decimal = ZERO
    str_adr: Decimal = ZERO
    str_occ: Decimal = ZERO

    # Carrying costs
    annual_tax: Decimal = linked(FieldRole.TAX_AMT, ZERO)
    tax_rate_pct: Decimal = linked(FieldRole.TAX_RATE, ZERO)
    insurance_monthly: Decimal = ZERO
    hoa_monthly: Decimal = ZERO

    # Lender stress test
    stress_vacancy: Decimal = ZERO  # Haircut on gross rent, %
    stress_rate: Decimal = ZERO
    min_dscr: Decimal = ZERO

    # Investor's realistic expense stack
    inv_management_pct: Decimal = ZERO
    inv_maintenance_pct: Decimal = ZERO
    inv_capex_pct: Decimal = ZERO
    inv_utilities_monthly: Decimal = ZERO
    inv_platform_pct: Decimal = ZERO
    inv_supplies_monthly: Decimal = ZERO
    inv_cleaning_fee: Decimal = ZERO
    inv_stays_per_month: Decimal = ZERO


@dataclass(frozen=True)
class BuildInputs:
    property_type: PropertyType = PropertyType.SFH
    land_acquisition: LandAcquisition = LandAcquisition.CASH

    # Phase 1: construction
    land_cost: Decimal = ZERO
    hard_costs: Decimal = ZERO
    soft_costs: Decimal = ZERO
    buffer: Decimal = ZERO  # Contingency
    construction_ltc_pct: Decimal = ZERO
    construction_rate_pct: Decimal = ZERO
    construction_term_months: Decimal = ZERO

    # Phase 2: stabilized, post-refinance
    arv: Decimal = linked(FieldRole.BASE_PRICE, ZERO)
    refinance_ltv_pct: Decimal = ZERO
    refinance_rate_pct: Decimal = ZERO
    refinance_term_years: Decimal = ZERO

    # Property-level costs
    total_annual_tax: Decimal = linked(FieldRole.TAX_AMT, ZERO)
    total_tax_rate_pct: Decimal = linked(FieldRole.TAX_RATE, ZERO)
    total_insurance_annual: Decimal = ZERO
    maintenance_pct: Decimal = ZERO  # % of total revenue
    capex_pct: Decimal = ZERO
    total_hoa_monthly: Decimal = ZERO
    total_utilities_monthly: Decimal = ZERO

    apply_to_all: bool = False  # Unit 1's settings drive every unit


# ---- Sub-unit records ----

@dataclass(frozen=True)
class RentalUnit:
    id: str
    unit_type: UnitType = UnitType.ROOM
    rent: Decimal = ZERO
    owner_occupied: bool = False


@dataclass(frozen=True)
class MultiUnitItem:
    id: str
    rent: Decimal = ZERO


@dataclass(frozen=True)
class BuildUnit:
    id: str
    strategy: RentalType = RentalType.LTR

    ltr_rent: Decimal = ZERO
    ltr_management_pct: Decimal = ZERO

    str_adr: Decimal = ZERO
    str_occ: Decimal = ZERO
    str_cohost_pct: Decimal = ZERO
    str_platform_pct: Decimal = ZERO
    str_supplies_monthly: Decimal = ZERO
    str_cleaning_fee: Decimal = ZERO
    str_cleaning_covered_by_guest: bool = False
    str_stays_per_month: Decimal = ZERO


# ---- Session-start values ----

DEFAULT_LTR = LtrInputs(
    purchase_price=Decimal("350000"),
    down_payment_pct=Decimal("20"),
    down_payment_amt=Decimal("70000"),
    closing_costs=Decimal("10500"),
    renovation_cost=Decimal("15000"),
    interest_rate_pct=Decimal("6.5"),
    term_years=Decimal("30"),
    rent=Decimal("2800"),
    annual_tax=Decimal("4200"),
    tax_rate_pct=Decimal("1.2"),
    insurance_monthly=Decimal("125"),
    management_pct=Decimal("8"),
    maintenance_pct=Decimal("5"),
    capex_pct=Decimal("5"),
)

DEFAULT_ROOM = RoomInputs(
    purchase_price=Decimal("450000"),
    down_payment_pct=Decimal("5"),
    down_payment_amt=Decimal("22500"),
    closing_costs=Decimal("13500"),
    renovation_cost=Decimal("20000"),
    interest_rate_pct=Decimal("6.0"),
    term_years=Decimal("30"),
    annual_tax=Decimal("5400"),
    tax_rate_pct=Decimal("1.2"),
    insurance_monthly=Decimal("150"),
    hoa_monthly=Decimal("50"),
    utilities_monthly=Decimal("400"),
    management_pct=Decimal("0"),
    maintenance_pct=Decimal("5"),
    capex_pct=Decimal("5"),
)

DEFAULT_STR = StrInputs(
    purchase_price=Decimal("400000"),
    down_payment_pct=Decimal("25"),
    down_payment_amt=Decimal("100000"),
    closing_costs=Decimal("12000"),
    renovation_cost=Decimal("25000"),
    staging_cost=Decimal("15000"),
    interest_rate_pct=Decimal("7.0"),
    term_years=Decimal("30"),
    adr=Decimal("250"),
    occupancy_pct=Decimal("75"),
    annual_tax=Decimal("4800"),
    tax_rate_pct=Decimal("1.2"),
    insurance_monthly=Decimal("200"),
    hoa_monthly=Decimal("100"),
    utilities_monthly=Decimal("500"),
    supplies_monthly=Decimal("150"),
    cohost_pct=Decimal("15"),
    platform_pct=Decimal("3"),
    maintenance_pct=Decimal("5"),
    capex_pct=Decimal("5"),
    cleaning_fee=Decimal("150"),
    stays_per_month=Decimal("8"),
)

DEFAULT_MULTI_UNIT = MultiUnitInputs(
    purchase_price=Decimal("600000"),
    down_payment_pct=Decimal("25"),
    down_payment_amt=Decimal("150000"),
    closing_costs=Decimal("18000"),
    renovation_cost=Decimal("30000"),
    interest_rate_pct=Decimal("7.2"),
    term_years=Decimal("30"),
    annual_tax=Decimal("7200"),
    tax_rate_pct=Decimal("1.2"),
    insurance_monthly=Decimal("250"),
    management_pct=Decimal("8"),
    maintenance_pct=Decimal("5"),
    capex_pct=Decimal("5"),
)

DEFAULT_DSCR = DscrInputs(
    property_type=RentalType.LTR,
    purchase_price=Decimal("500000"),
    down_payment_pct=Decimal("25"),
    down_payment_amt=Decimal("125000"),
    closing_costs=Decimal("15000"),
    interest_rate_pct=Decimal("7.5"),
    term_years=Decimal("30"),
    hm_rate_pct=Decimal("12"),
    hm_term_years=Decimal("1"),
    ltr_rent=Decimal("4000"),
    str_adr=Decimal("300"),
    str_occ=Decimal("70"),
    annual_tax=Decimal("6000"),
    tax_rate_pct=Decimal("1.2"),
    insurance_monthly=Decimal("175"),
    stress_vacancy=Decimal("5"),
    stress_rate=Decimal("9.5"),
    min_dscr=Decimal("1.0"),
    inv_management_pct=Decimal("15"),
    inv_maintenance_pct=Decimal("5"),
    inv_capex_pct=Decimal("5"),
    inv_utilities_monthly=Decimal("300"),
    inv_platform_pct=Decimal("3"),
    inv_supplies_monthly=Decimal("150"),
    inv_stays_per_month=Decimal("8"),
)

DEFAULT_BUILD = BuildInputs(
    property_type=PropertyType.SFH,
    land_acquisition=LandAcquisition.CASH,
    land_cost=Decimal("100000"),
    hard_costs=Decimal("400000"),
    soft_costs=Decimal("50000"),
    buffer=Decimal("50000"),
    construction_ltc_pct=Decimal("80"),
    construction_rate_pct=Decimal("9.5"),
    construction_term_months=Decimal("12"),
    arv=Decimal("750000"),
    refinance_ltv_pct=Decimal("75"),
    refinance_rate_pct=Decimal("6.8"),
    refinance_term_years=Decimal("30"),
    total_annual_tax=Decimal("9000"),
    total_tax_rate_pct=Decimal("1.2"),
    total_insurance_annual=Decimal("2100"),
    maintenance_pct=Decimal("5"),
    capex_pct=Decimal("5"),
)

# Template for new-build units when there is no existing unit to clone (id is replaced)
DEFAULT_BUILD_UNIT = BuildUnit(
    id="",
    strategy=RentalType.LTR,
    ltr_rent=Decimal("2500"),
    ltr_management_pct=Decimal("8"),
    str_adr=Decimal("200"),
    str_occ=Decimal("75"),
    str_cohost_pct=Decimal("15"),
    str_platform_pct=Decimal("3"),
    str_supplies_monthly=Decimal("150"),
    str_cleaning_fee=Decimal("120"),
    str_stays_per_month=Decimal("10"),
)
