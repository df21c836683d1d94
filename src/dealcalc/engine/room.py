"""By-the-room house hack.

Revenue is the sum of the rental-unit rents. Two scenarios are produced side by
side from the same financing: "living in" (the owner-occupied unit earns
nothing) and "moved out" (every unit rented).
"""

from collections.abc import Sequence
from decimal import Decimal

from dealcalc.engine.cashflow import cash_on_cash, finance_purchase, percentage_costs
from dealcalc.models.inputs import RentalUnit, RoomInputs
from dealcalc.models.results import FinancingSummary, RoomMetrics, RoomScenario


def total_rent(units: Sequence[RentalUnit]) -> Decimal:
    return sum((u.rent for u in units), Decimal("0"))


def owner_occupied_unit(units: Sequence[RentalUnit]) -> RentalUnit | None:
    return next((u for u in units if u.owner_occupied), None)


def _scenario(inputs: RoomInputs, financing: FinancingSummary, revenue: Decimal) -> RoomScenario:
    opex = (
        inputs.hoa_monthly
        + inputs.utilities_monthly
        + percentage_costs(revenue, inputs.management_pct, inputs.maintenance_pct, inputs.capex_pct)
    )
    cash_flow = revenue - financing.piti - opex
    return RoomScenario(
        revenue=revenue,
        operating_expenses=opex,
        cash_flow=cash_flow,
        cash_on_cash_pct=cash_on_cash(cash_flow, financing.cash_to_close),
    )


def analyze_room(inputs: RoomInputs, units: Sequence[RentalUnit]) -> RoomMetrics:
    financing = finance_purchase(inputs)

    moved_out_revenue = total_rent(units)
    owner_unit = owner_occupied_unit(units)
    living_in_revenue = moved_out_revenue - owner_unit.rent if owner_unit else moved_out_revenue

    return RoomMetrics(
        financing=financing,
        living_in=_scenario(inputs, financing, living_in_revenue),
        moved_out=_scenario(inputs, financing, moved_out_revenue),
        owner_occupied_unit_id=owner_unit.id if owner_unit else None,
        management_monthly=percentage_costs(moved_out_revenue, inputs.management_pct),
        maintenance_monthly=percentage_costs(moved_out_revenue, inputs.maintenance_pct),
        capex_monthly=percentage_costs(moved_out_revenue, inputs.capex_pct),
    )
