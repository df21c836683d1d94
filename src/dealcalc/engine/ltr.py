"""Long-term rental: one flat monthly rent.

Pure function: LtrInputs in, LtrMetrics out. No I/O.
"""

from dealcalc.engine.cashflow import cash_on_cash, finance_purchase, percentage_costs
from dealcalc.models.inputs import LtrInputs
from dealcalc.models.results import LtrMetrics


def analyze_ltr(inputs: LtrInputs) -> LtrMetrics:
    financing = finance_purchase(inputs)
    rent = inputs.rent

    management = percentage_costs(rent, inputs.management_pct)
    maintenance = percentage_costs(rent, inputs.maintenance_pct)
    capex = percentage_costs(rent, inputs.capex_pct)
    opex = inputs.hoa_monthly + inputs.utilities_monthly + management + maintenance + capex

    cash_flow = rent - financing.piti - opex

    return LtrMetrics(
        financing=financing,
        revenue=rent,
        management_monthly=management,
        maintenance_monthly=maintenance,
        capex_monthly=capex,
        operating_expenses=opex,
        cash_flow=cash_flow,
        cash_on_cash_pct=cash_on_cash(cash_flow, financing.cash_to_close),
    )
