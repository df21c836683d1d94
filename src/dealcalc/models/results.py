from dataclasses import dataclass, field
from decimal import Decimal

from dealcalc.models.strategies import DscrStatus, RentalType


@dataclass
class FinancingSummary:
    purchase_loan: Decimal = Decimal("0")  # Before any financed renovation
    loan_amount: Decimal = Decimal("0")
    monthly_pi: Decimal = Decimal("0")
    piti: Decimal = Decimal("0")
    cash_to_close: Decimal = Decimal("0")
    closing_cost_pct: Decimal | None = None  # None when price is 0


@dataclass
class LtrMetrics:
    financing: FinancingSummary = field(default_factory=FinancingSummary)
    revenue: Decimal = Decimal("0")

    # Expenses (monthly)
    management_monthly: Decimal = Decimal("0")
    maintenance_monthly: Decimal = Decimal("0")
    capex_monthly: Decimal = Decimal("0")
    operating_expenses: Decimal = Decimal("0")

    cash_flow: Decimal = Decimal("0")
    cash_on_cash_pct: Decimal = Decimal("0")


@dataclass
class RoomScenario:
    revenue: Decimal = Decimal("0")
    operating_expenses: Decimal = Decimal("0")
    cash_flow: Decimal = Decimal("0")
    cash_on_cash_pct: Decimal = Decimal("0")


@dataclass
class RoomMetrics:
    """House hack: owner living in one unit vs. every unit rented out."""
    financing: FinancingSummary = field(default_factory=FinancingSummary)
    living_in: RoomScenario = field(default_factory=RoomScenario)
    moved_out: RoomScenario = field(default_factory=RoomScenario)
    owner_occupied_unit_id: str | None = None

    # Line items against moved-out revenue
    management_monthly: Decimal = Decimal("0")
    maintenance_monthly: Decimal = Decimal("0")
    capex_monthly: Decimal = Decimal("0")


@dataclass
class StrMetrics:
    financing: FinancingSummary = field(default_factory=FinancingSummary)
    revenue: Decimal = Decimal("0")

    # Expenses (monthly)
    cohost_monthly: Decimal = Decimal("0")
    platform_monthly: Decimal = Decimal("0")
    maintenance_monthly: Decimal = Decimal("0")
    capex_monthly: Decimal = Decimal("0")
    cleaning_monthly: Decimal = Decimal("0")
    operating_expenses: Decimal = Decimal("0")

    cash_flow: Decimal = Decimal("0")
    cash_on_cash_pct: Decimal = Decimal("0")


@dataclass
class MultiUnitMetrics:
    financing: FinancingSummary = field(default_factory=FinancingSummary)
    unit_count: int = 0
    total_rent: Decimal = Decimal("0")

    management_monthly: Decimal = Decimal("0")
    maintenance_monthly: Decimal = Decimal("0")
    capex_monthly: Decimal = Decimal("0")
    operating_expenses: Decimal = Decimal("0")

    cash_flow: Decimal = Decimal("0")
    cash_on_cash_pct: Decimal = Decimal("0")


@dataclass
class BuildUnitMetrics:
    unit_id: str
    strategy: RentalType
    revenue: Decimal = Decimal("0")
    management_monthly: Decimal = Decimal("0")  # PM for LTR, cohost for STR
    platform_monthly: Decimal = Decimal("0")
    cleaning_monthly: Decimal = Decimal("0")
    operating_expenses: Decimal = Decimal("0")


@dataclass
class BuildMetrics:
    # Phase 1: construction
    total_project_cost: Decimal = Decimal("0")
    loanable_cost_base: Decimal = Decimal("0")
    construction_loan: Decimal = Decimal("0")
    construction_payment: Decimal = Decimal("0")  # Interest-only, monthly
    construction_interest_total: Decimal = Decimal("0")  # Over the construction term
    upfront_cash: Decimal = Decimal("0")

    # Phase 2: refinance
    permanent_loan: Decimal = Decimal("0")
    cash_out_at_refi: Decimal = Decimal("0")  # Negative = cash in at refi
    net_cash_invested: Decimal = Decimal("0")
    monthly_pi: Decimal = Decimal("0")
    piti: Decimal = Decimal("0")

    # Stabilized operations (monthly)
    units: list[BuildUnitMetrics] = field(default_factory=list)
    total_revenue: Decimal = Decimal("0")
    unit_operating_expenses: Decimal = Decimal("0")
    maintenance_monthly: Decimal = Decimal("0")
    capex_monthly: Decimal = Decimal("0")
    property_operating_expenses: Decimal = Decimal("0")
    total_operating_expenses: Decimal = Decimal("0")
    cash_flow: Decimal = Decimal("0")

    cash_on_cash_pct: Decimal = Decimal("0")  # Against net cash invested
    return_on_cost_pct: Decimal = Decimal("0")


@dataclass
class DscrLenderView:
    """Annual figures unless noted."""
    loan_amount: Decimal = Decimal("0")
    gross_monthly_income: Decimal = Decimal("0")
    effective_gross_income: Decimal = Decimal("0")  # After rent haircut
    operating_expenses: Decimal = Decimal("0")  # Tax, insurance, HOA only
    noi: Decimal = Decimal("0")

    primary_debt_service: Decimal = Decimal("0")  # At stress rate
    hard_money_payment: Decimal = Decimal("0")  # Monthly
    hard_money_debt_service: Decimal = Decimal("0")
    total_debt_service: Decimal = Decimal("0")

    dscr: Decimal = Decimal("0")
    status: DscrStatus = DscrStatus.FAIL

    cash_flow: Decimal = Decimal("0")
    cash_flow_after_hard_money: Decimal = Decimal("0")


@dataclass
class DscrInvestorView:
    """Monthly figures at the note rate."""
    loan_amount: Decimal = Decimal("0")
    monthly_pi: Decimal = Decimal("0")
    piti: Decimal = Decimal("0")

    management_monthly: Decimal = Decimal("0")
    maintenance_monthly: Decimal = Decimal("0")
    capex_monthly: Decimal = Decimal("0")
    platform_monthly: Decimal = Decimal("0")
    cleaning_monthly: Decimal = Decimal("0")
    operating_expenses: Decimal = Decimal("0")

    hard_money_payment: Decimal = Decimal("0")
    cash_flow: Decimal = Decimal("0")  # While the hard-money loan is outstanding
    cash_flow_after_hard_money: Decimal = Decimal("0")
    cash_in: Decimal = Decimal("0")
    cash_on_cash_pct: Decimal = Decimal("0")
    cash_on_cash_after_hard_money_pct: Decimal = Decimal("0")


@dataclass
class DscrMetrics:
    lender: DscrLenderView = field(default_factory=DscrLenderView)
    investor: DscrInvestorView = field(default_factory=DscrInvestorView)
