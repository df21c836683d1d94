"""Cash flow building blocks shared by the strategy calculators:
PITI, percentage-of-revenue costs, cash to close, CoC return, DSCR.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal

from dealcalc.config import settings
from dealcalc.engine.debt import loan_amount, monthly_payment
from dealcalc.models.inputs import PropertyFinancing
from dealcalc.models.results import FinancingSummary

ZERO = Decimal("0")
HUNDRED = Decimal("100")
MONTHS = Decimal("12")

POSITIVE_INFINITY = Decimal("Infinity")
NEGATIVE_INFINITY = Decimal("-Infinity")


def is_finite_metric(value: Decimal) -> bool:
    """False for the infinity sentinels the renderer must show as a dash."""
    return value.is_finite()


def str_monthly_revenue(adr: Decimal, occupancy_pct: Decimal) -> Decimal:
    """Nightly rate x booked nights in an average month."""
    return adr * (settings.days_per_month * (occupancy_pct / HUNDRED))


def percentage_costs(basis: Decimal, *pcts: Decimal) -> Decimal:
    """Monthly cost of expenses quoted as % of a revenue basis."""
    return basis * sum(pcts, ZERO) / HUNDRED


def piti(monthly_pi: Decimal, annual_tax: Decimal, insurance_monthly: Decimal) -> Decimal:
    return monthly_pi + annual_tax / MONTHS + insurance_monthly


def cash_on_cash(monthly_cash_flow: Decimal, cash_invested: Decimal) -> Decimal:
    """Annualized cash flow over cash invested, in percent.

    With nothing (or less than nothing) invested the return is unbounded:
    +Infinity for positive cash flow, -Infinity otherwise.
    """
    if cash_invested > 0:
        return monthly_cash_flow * MONTHS / cash_invested * HUNDRED
    return POSITIVE_INFINITY if monthly_cash_flow > 0 else NEGATIVE_INFINITY


def dscr(noi: Decimal, annual_debt_service: Decimal) -> Decimal:
    """Debt Service Coverage Ratio = NOI / annual debt service. Unbounded without debt."""
    if annual_debt_service == 0:
        return POSITIVE_INFINITY
    return noi / annual_debt_service


def closing_cost_pct(closing_costs: Decimal, price: Decimal) -> Decimal | None:
    if price <= 0:
        return None
    return closing_costs / price * HUNDRED


def return_on_cost(monthly_cash_flow: Decimal, total_cost: Decimal) -> Decimal:
    if total_cost <= 0:
        return ZERO
    return monthly_cash_flow * MONTHS / total_cost * HUNDRED


def finance_purchase(inputs: PropertyFinancing, extra_cash: Decimal = ZERO) -> FinancingSummary:
    """Loan, debt service and cash to close for a purchase-financed strategy.

    A financed renovation is added to the loan principal; an unfinanced one is
    paid at closing. `extra_cash` covers non-financeable upfront costs (STR staging).
    """
    purchase_loan = loan_amount(inputs.purchase_price, inputs.down_payment_pct)
    loan = purchase_loan + inputs.renovation_cost if inputs.renovation_financed else purchase_loan
    pi = monthly_payment(loan, inputs.interest_rate_pct, inputs.term_years)

    cash_to_close = inputs.down_payment_amt + inputs.closing_costs + extra_cash
    if not inputs.renovation_financed:
        cash_to_close += inputs.renovation_cost

    return FinancingSummary(
        purchase_loan=purchase_loan,
        loan_amount=loan,
        monthly_pi=pi,
        piti=piti(pi, inputs.annual_tax, inputs.insurance_monthly),
        cash_to_close=cash_to_close,
        closing_cost_pct=closing_cost_pct(inputs.closing_costs, inputs.purchase_price),
    )
