"""Loan sizing and payment formulas.

Pure functions: Decimal in, Decimal out. No I/O, no rounding.
Rates are annual percentages (6.5 means 6.5%).
"""

from decimal import Decimal, InvalidOperation, Overflow, localcontext

ZERO = Decimal("0")
HUNDRED = Decimal("100")
MONTHS = Decimal("12")


def loan_amount(price: Decimal, down_pct: Decimal) -> Decimal:
    """Purchase loan after the down payment. Never negative."""
    return max(price * (1 - down_pct / HUNDRED), ZERO)


def monthly_payment(loan: Decimal, annual_rate_pct: Decimal, term_years: Decimal) -> Decimal:
    """Fixed-rate fully amortizing monthly P&I.

    Very long terms converge on interest-only (loan * r). A periodic rate at or
    below -100% has no amortization schedule and is spread evenly like a zero rate.
    """
    n = term_years * MONTHS
    if loan == 0 or n <= 0:
        return ZERO

    r = annual_rate_pct / HUNDRED / MONTHS
    if r == 0 or 1 + r <= 0:
        return loan / n

    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        ctx.traps[InvalidOperation] = False
        # M = P * [r(1+r)^n] / [(1+r)^n - 1]
        factor = (1 + r) ** n
        if factor == 1:
            # Rate too small to register at working precision
            return loan / n
        if factor.is_infinite():
            return loan * r
        payment = loan * (r * factor) / (factor - 1)
    return payment if payment.is_finite() else loan * r


def interest_only_payment(loan: Decimal, annual_rate_pct: Decimal) -> Decimal:
    """Monthly interest-only payment, e.g. on a construction draw."""
    return loan * (annual_rate_pct / HUNDRED) / MONTHS
