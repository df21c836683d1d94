"""Multi-unit: one loan, many rents. Percentage costs run on total rent."""

from collections.abc import Sequence
from decimal import Decimal

from dealcalc.engine.cashflow import cash_on_cash, finance_purchase, percentage_costs
from dealcalc.models.inputs import MultiUnitInputs, MultiUnitItem
from dealcalc.models.results import MultiUnitMetrics


def analyze_multi_unit(inputs: MultiUnitInputs, units: Sequence[MultiUnitItem]) -> MultiUnitMetrics:
    financing = finance_purchase(inputs)
    rent = sum((u.rent for u in units), Decimal("0"))

    management = percentage_costs(rent, inputs.management_pct)
    maintenance = percentage_costs(rent, inputs.maintenance_pct)
    capex = percentage_costs(rent, inputs.capex_pct)
    opex = inputs.hoa_monthly + inputs.utilities_monthly + management + maintenance + capex

    cash_flow = rent - financing.piti - opex

    return MultiUnitMetrics(
        financing=financing,
        unit_count=len(units),
        total_rent=rent,
        management_monthly=management,
        maintenance_monthly=maintenance,
        capex_monthly=capex,
        operating_expenses=opex,
        cash_flow=cash_flow,
        cash_on_cash_pct=cash_on_cash(cash_flow, financing.cash_to_close),
    )
