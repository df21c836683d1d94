"""New construction to refinance: a two-phase model.

Phase 1 (construction): an interest-only construction loan sized as LTC% of the
loanable cost base. Land only counts toward that base when it is financed.

Phase 2 (stabilized): a permanent loan sized as LTV% of ARV pays off the
construction loan; any excess comes back to the investor as cash out. Returns
are measured against the cash left in the deal after the refinance.

Pure function: BuildInputs + units in, BuildMetrics out. No I/O.
"""

from collections.abc import Sequence
from decimal import Decimal

from dealcalc.engine.cashflow import (
    cash_on_cash,
    percentage_costs,
    piti,
    return_on_cost,
    str_monthly_revenue,
)
from dealcalc.engine.debt import interest_only_payment, monthly_payment
from dealcalc.engine.short_term import cleaning_cost
from dealcalc.models.inputs import BuildInputs, BuildUnit
from dealcalc.models.results import BuildMetrics, BuildUnitMetrics
from dealcalc.models.strategies import LandAcquisition, RentalType

ZERO = Decimal("0")
HUNDRED = Decimal("100")
MONTHS = Decimal("12")


def loanable_cost_base(inputs: BuildInputs) -> Decimal:
    base = inputs.hard_costs + inputs.soft_costs + inputs.buffer
    if inputs.land_acquisition is LandAcquisition.FINANCE:
        base += inputs.land_cost
    return base


def total_project_cost(inputs: BuildInputs) -> Decimal:
    """Land already owned costs nothing new; cash or financed land does."""
    land = ZERO if inputs.land_acquisition is LandAcquisition.OWNED else inputs.land_cost
    return land + inputs.hard_costs + inputs.soft_costs + inputs.buffer


def unit_metrics(unit: BuildUnit) -> BuildUnitMetrics:
    """Revenue and unit-level opex for one unit under its own LTR/STR strategy."""
    if unit.strategy is RentalType.LTR:
        management = percentage_costs(unit.ltr_rent, unit.ltr_management_pct)
        return BuildUnitMetrics(
            unit_id=unit.id,
            strategy=unit.strategy,
            revenue=unit.ltr_rent,
            management_monthly=management,
            operating_expenses=management,
        )

    revenue = str_monthly_revenue(unit.str_adr, unit.str_occ)
    cohost = percentage_costs(revenue, unit.str_cohost_pct)
    platform = percentage_costs(revenue, unit.str_platform_pct)
    cleaning = cleaning_cost(
        unit.str_cleaning_fee, unit.str_stays_per_month, unit.str_cleaning_covered_by_guest
    )
    return BuildUnitMetrics(
        unit_id=unit.id,
        strategy=unit.strategy,
        revenue=revenue,
        management_monthly=cohost,
        platform_monthly=platform,
        cleaning_monthly=cleaning,
        operating_expenses=cohost + platform + unit.str_supplies_monthly + cleaning,
    )


def analyze_build(inputs: BuildInputs, units: Sequence[BuildUnit]) -> BuildMetrics:
    # Phase 1
    cost_base = loanable_cost_base(inputs)
    construction_loan = cost_base * inputs.construction_ltc_pct / HUNDRED
    construction_payment = interest_only_payment(construction_loan, inputs.construction_rate_pct)
    project_cost = total_project_cost(inputs)
    upfront_cash = project_cost - construction_loan

    # Phase 2
    permanent_loan = inputs.arv * inputs.refinance_ltv_pct / HUNDRED
    cash_out_at_refi = permanent_loan - construction_loan
    net_cash_invested = upfront_cash - cash_out_at_refi

    pi = monthly_payment(permanent_loan, inputs.refinance_rate_pct, inputs.refinance_term_years)
    stabilized_piti = piti(pi, inputs.total_annual_tax, inputs.total_insurance_annual / MONTHS)

    per_unit = [unit_metrics(u) for u in units]
    revenue = sum((u.revenue for u in per_unit), ZERO)
    unit_opex = sum((u.operating_expenses for u in per_unit), ZERO)

    maintenance = percentage_costs(revenue, inputs.maintenance_pct)
    capex = percentage_costs(revenue, inputs.capex_pct)
    property_opex = maintenance + capex + inputs.total_hoa_monthly + inputs.total_utilities_monthly
    total_opex = unit_opex + property_opex

    cash_flow = revenue - stabilized_piti - total_opex

    return BuildMetrics(
        total_project_cost=project_cost,
        loanable_cost_base=cost_base,
        construction_loan=construction_loan,
        construction_payment=construction_payment,
        construction_interest_total=construction_payment * inputs.construction_term_months,
        upfront_cash=upfront_cash,
        permanent_loan=permanent_loan,
        cash_out_at_refi=cash_out_at_refi,
        net_cash_invested=net_cash_invested,
        monthly_pi=pi,
        piti=stabilized_piti,
        units=per_unit,
        total_revenue=revenue,
        unit_operating_expenses=unit_opex,
        maintenance_monthly=maintenance,
        capex_monthly=capex,
        property_operating_expenses=property_opex,
        total_operating_expenses=total_opex,
        cash_flow=cash_flow,
        cash_on_cash_pct=cash_on_cash(cash_flow, net_cash_invested),
        return_on_cost_pct=return_on_cost(cash_flow, project_cost),
    )
