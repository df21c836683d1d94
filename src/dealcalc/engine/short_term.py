"""Short-term rental: revenue from ADR and occupancy.

Percentage costs (cohost, platform, maintenance, capex) are taken on gross
booking revenue. Staging is paid in cash at closing and never financed.
"""

from decimal import Decimal

from dealcalc.engine.cashflow import (
    cash_on_cash,
    finance_purchase,
    percentage_costs,
    str_monthly_revenue,
)
from dealcalc.models.inputs import StrInputs
from dealcalc.models.results import StrMetrics


def cleaning_cost(fee: Decimal, stays: Decimal, covered_by_guest: bool) -> Decimal:
    """Monthly cleaning spend; nothing when guests pay the fee."""
    return Decimal("0") if covered_by_guest else fee * stays


def analyze_str(inputs: StrInputs) -> StrMetrics:
    financing = finance_purchase(inputs, extra_cash=inputs.staging_cost)
    revenue = str_monthly_revenue(inputs.adr, inputs.occupancy_pct)

    cohost = percentage_costs(revenue, inputs.cohost_pct)
    platform = percentage_costs(revenue, inputs.platform_pct)
    maintenance = percentage_costs(revenue, inputs.maintenance_pct)
    capex = percentage_costs(revenue, inputs.capex_pct)
    cleaning = cleaning_cost(
        inputs.cleaning_fee, inputs.stays_per_month, inputs.cleaning_covered_by_guest
    )

    fixed = cleaning + inputs.hoa_monthly + inputs.utilities_monthly + inputs.supplies_monthly
    opex = cohost + platform + maintenance + capex + fixed

    cash_flow = revenue - financing.piti - opex

    return StrMetrics(
        financing=financing,
        revenue=revenue,
        cohost_monthly=cohost,
        platform_monthly=platform,
        maintenance_monthly=maintenance,
        capex_monthly=capex,
        cleaning_monthly=cleaning,
        operating_expenses=opex,
        cash_flow=cash_flow,
        cash_on_cash_pct=cash_on_cash(cash_flow, financing.cash_to_close),
    )
