from dataclasses import replace
from decimal import Decimal

from dealcalc.engine.build import (
    analyze_build,
    loanable_cost_base,
    total_project_cost,
    unit_metrics,
)
from dealcalc.engine.cashflow import NEGATIVE_INFINITY
from dealcalc.engine.debt import monthly_payment
from dealcalc.models.strategies import LandAcquisition, RentalType


class TestCostBase:
    def test_cash_land_not_loanable(self, build_project):
        assert loanable_cost_base(build_project) == Decimal("500000")
        assert total_project_cost(build_project) == Decimal("600000")

    def test_financed_land_loanable(self, build_project):
        financed = replace(build_project, land_acquisition=LandAcquisition.FINANCE)
        assert loanable_cost_base(financed) == Decimal("600000")
        assert total_project_cost(financed) == Decimal("600000")

    def test_owned_land_costs_nothing(self, build_project):
        owned = replace(build_project, land_acquisition=LandAcquisition.OWNED)
        assert loanable_cost_base(owned) == Decimal("500000")
        assert total_project_cost(owned) == Decimal("500000")


class TestUnitMetrics:
    def test_ltr_unit(self, build_units):
        m = unit_metrics(build_units[0])
        assert m.revenue == Decimal("2500")
        assert m.management_monthly == Decimal("200")
        assert m.operating_expenses == Decimal("200")

    def test_str_unit(self, build_units):
        m = unit_metrics(replace(build_units[0], strategy=RentalType.STR))
        assert m.revenue == Decimal("4566")
        assert m.management_monthly == Decimal("684.9")
        assert m.platform_monthly == Decimal("136.98")
        assert m.cleaning_monthly == Decimal("1200")
        # cohost + platform + supplies + cleaning
        assert m.operating_expenses == Decimal("2171.88")

    def test_str_unit_guest_covered_cleaning(self, build_units):
        unit = replace(build_units[0], strategy=RentalType.STR, str_cleaning_covered_by_guest=True)
        assert unit_metrics(unit).operating_expenses == Decimal("971.88")


class TestAnalyzeBuild:
    def test_construction_phase(self, build_project, build_units):
        m = analyze_build(build_project, build_units[:1])
        assert m.construction_loan == Decimal("400000")
        assert abs(m.construction_payment - Decimal("3166.67")) < Decimal("0.01")
        assert abs(m.construction_interest_total - Decimal("38000")) < Decimal("0.0001")
        assert m.upfront_cash == Decimal("200000")

    def test_refinance_phase(self, build_project, build_units):
        m = analyze_build(build_project, build_units[:1])
        assert m.permanent_loan == Decimal("562500")
        assert m.cash_out_at_refi == Decimal("162500")
        assert m.net_cash_invested == Decimal("37500")
        assert m.monthly_pi == monthly_payment(Decimal("562500"), Decimal("6.8"), Decimal("30"))
        # 9,000 / 12 tax + 2,100 / 12 insurance
        assert m.piti == m.monthly_pi + Decimal("925")

    def test_financed_land_same_net_cash(self, build_project, build_units):
        m = analyze_build(replace(build_project, land_acquisition=LandAcquisition.FINANCE), build_units[:1])
        assert m.construction_loan == Decimal("480000")
        assert m.upfront_cash == Decimal("120000")
        assert m.cash_out_at_refi == Decimal("82500")
        assert m.net_cash_invested == Decimal("37500")

    def test_operating_expenses(self, build_project, build_units):
        m = analyze_build(build_project, build_units[:1])
        assert m.total_revenue == Decimal("2500")
        assert m.unit_operating_expenses == Decimal("200")
        assert m.maintenance_monthly == Decimal("125")
        assert m.capex_monthly == Decimal("125")
        assert m.property_operating_expenses == Decimal("250")
        assert m.total_operating_expenses == Decimal("450")
        assert m.cash_flow == Decimal("2500") - m.piti - Decimal("450")

    def test_returns(self, build_project, build_units):
        m = analyze_build(build_project, build_units[:1])
        assert m.cash_on_cash_pct == m.cash_flow * 12 / Decimal("37500") * 100
        assert m.return_on_cost_pct == m.cash_flow * 12 / Decimal("600000") * 100

    def test_per_unit_breakdown(self, build_project, build_units):
        m = analyze_build(build_project, build_units)
        assert [u.unit_id for u in m.units] == ["b1", "b2", "b3"]
        assert m.total_revenue == Decimal("7500")

    def test_cash_out_exceeds_investment(self, build_project, build_units):
        owned = replace(build_project, land_acquisition=LandAcquisition.OWNED)
        m = analyze_build(owned, build_units[:1])
        assert m.net_cash_invested == Decimal("-62500")
        assert m.cash_flow < 0
        assert m.cash_on_cash_pct == NEGATIVE_INFINITY
