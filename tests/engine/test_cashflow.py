from dataclasses import replace
from decimal import Decimal

from dealcalc.config import settings
from dealcalc.engine.cashflow import (
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    cash_on_cash,
    closing_cost_pct,
    dscr,
    finance_purchase,
    is_finite_metric,
    percentage_costs,
    piti,
    return_on_cost,
    str_monthly_revenue,
)


class TestStrMonthlyRevenue:
    def test_default_month(self):
        """$250 ADR at 75% over a 30.44-day month."""
        assert str_monthly_revenue(Decimal("250"), Decimal("75")) == Decimal("5707.5")

    def test_zero_occupancy(self):
        assert str_monthly_revenue(Decimal("250"), Decimal("0")) == Decimal("0")

    def test_days_per_month_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "days_per_month", Decimal("30"))
        assert str_monthly_revenue(Decimal("200"), Decimal("50")) == Decimal("3000")


class TestPercentageCosts:
    def test_sums_percentages(self):
        assert percentage_costs(Decimal("2800"), Decimal("8"), Decimal("5"), Decimal("5")) == Decimal("504")

    def test_no_percentages(self):
        assert percentage_costs(Decimal("2800")) == Decimal("0")


class TestPiti:
    def test_adds_tax_and_insurance(self):
        assert piti(Decimal("1500"), Decimal("4200"), Decimal("125")) == Decimal("1975")


class TestCashOnCash:
    def test_annualized_percent(self):
        assert cash_on_cash(Decimal("100"), Decimal("12000")) == Decimal("10")

    def test_negative_cash_flow(self):
        assert cash_on_cash(Decimal("-100"), Decimal("12000")) == Decimal("-10")

    def test_nothing_invested_positive_flow(self):
        assert cash_on_cash(Decimal("100"), Decimal("0")) == POSITIVE_INFINITY

    def test_nothing_invested_negative_flow(self):
        assert cash_on_cash(Decimal("-100"), Decimal("0")) == NEGATIVE_INFINITY

    def test_nothing_invested_zero_flow(self):
        assert cash_on_cash(Decimal("0"), Decimal("0")) == NEGATIVE_INFINITY

    def test_negative_investment_is_unbounded(self):
        assert cash_on_cash(Decimal("100"), Decimal("-5000")) == POSITIVE_INFINITY


class TestDscr:
    def test_basic(self):
        assert dscr(Decimal("12000"), Decimal("10000")) == Decimal("1.2")

    def test_no_debt_service(self):
        assert dscr(Decimal("12000"), Decimal("0")) == POSITIVE_INFINITY


class TestIsFiniteMetric:
    def test_sentinels(self):
        assert not is_finite_metric(POSITIVE_INFINITY)
        assert not is_finite_metric(NEGATIVE_INFINITY)
        assert is_finite_metric(Decimal("12.5"))


class TestClosingCostPct:
    def test_percent_of_price(self):
        assert closing_cost_pct(Decimal("10500"), Decimal("350000")) == Decimal("3")

    def test_no_price(self):
        assert closing_cost_pct(Decimal("10500"), Decimal("0")) is None


class TestReturnOnCost:
    def test_annualized(self):
        assert return_on_cost(Decimal("500"), Decimal("600000")) == Decimal("1")

    def test_no_cost(self):
        assert return_on_cost(Decimal("500"), Decimal("0")) == Decimal("0")


class TestFinancePurchase:
    def test_renovation_paid_in_cash(self, ltr_inputs):
        summary = finance_purchase(ltr_inputs)
        assert summary.purchase_loan == Decimal("280000")
        assert summary.loan_amount == Decimal("280000")
        # 70,000 down + 10,500 closing + 15,000 renovation
        assert summary.cash_to_close == Decimal("95500")

    def test_renovation_financed(self, ltr_inputs):
        summary = finance_purchase(replace(ltr_inputs, renovation_financed=True))
        assert summary.purchase_loan == Decimal("280000")
        assert summary.loan_amount == Decimal("295000")
        assert summary.cash_to_close == Decimal("80500")

    def test_extra_cash(self, ltr_inputs):
        summary = finance_purchase(ltr_inputs, extra_cash=Decimal("15000"))
        assert summary.cash_to_close == Decimal("110500")

    def test_piti(self, ltr_inputs):
        summary = finance_purchase(ltr_inputs)
        # 4,200 / 12 tax + 125 insurance
        assert summary.piti == summary.monthly_pi + Decimal("475")
