from dataclasses import replace
from decimal import Decimal

from dealcalc.config import settings
from dealcalc.engine.mapper import apply_mapped, extract_canonical, map_data
from dealcalc.models.strategies import StrategyType


class TestExtractCanonical:
    def test_str_rent_from_adr(self, session):
        deal = extract_canonical("str", session)
        assert deal.rent == Decimal("5707.5")
        assert deal.adr == Decimal("250")
        assert deal.occupancy_pct == Decimal("75")
        # STR has a cohost, not a property manager
        assert deal.management_pct is None

    def test_room_rent_from_units(self, session, rental_units):
        deal = extract_canonical(StrategyType.ROOM, replace(session, room_units=rental_units))
        assert deal.rent == Decimal("3250")
        assert deal.adr is None

    def test_dscr_investor_costs(self, session):
        deal = extract_canonical("dscr", session)
        assert deal.rent == Decimal("4000")
        assert deal.adr == Decimal("300")
        assert deal.occupancy_pct == Decimal("70")
        assert deal.management_pct == Decimal("15")
        assert deal.utilities_monthly == Decimal("300")

    def test_build_is_not_a_source(self, session):
        deal = extract_canonical("build", session)
        assert deal.purchase_price is None
        assert deal.rent is None


class TestMapData:
    def test_str_to_ltr(self, session):
        partial = map_data("str", session, "ltr")
        assert partial["rent"] == Decimal("5707.5")
        assert partial["purchase_price"] == Decimal("400000")
        assert "adr" not in partial
        assert "management_pct" not in partial

    def test_zero_values_not_pushed(self, session):
        # The default LTR deal carries no HOA or utilities
        partial = map_data("ltr", session, "str")
        assert "hoa_monthly" not in partial
        assert "utilities_monthly" not in partial

    def test_zero_values_pushed_when_enabled(self, session, monkeypatch):
        monkeypatch.setattr(settings, "transfer_skip_zero_values", False)
        partial = map_data("ltr", session, "str")
        assert partial["hoa_monthly"] == Decimal("0")

    def test_room_has_no_rent_field(self, session):
        partial = map_data("ltr", session, "room")
        assert "rent" not in partial
        assert partial["management_pct"] == Decimal("8")

    def test_to_dscr_renames(self, session):
        partial = map_data("multi", session, "dscr")
        assert partial["ltr_rent"] == Decimal("3000")
        assert partial["inv_management_pct"] == Decimal("8")
        assert partial["inv_maintenance_pct"] == Decimal("5")
        assert partial["inv_capex_pct"] == Decimal("5")
        assert "rent" not in partial

    def test_build_is_not_a_destination(self, session):
        assert map_data("ltr", session, "build") == {}

    def test_from_build_pushes_nothing(self, session):
        assert map_data("build", session, "ltr") == {}


class TestApplyMapped:
    def test_merges(self, ltr_inputs):
        record = apply_mapped(ltr_inputs, {"rent": Decimal("3100")})
        assert record.rent == Decimal("3100")
        assert record.purchase_price == ltr_inputs.purchase_price

    def test_empty_partial(self, ltr_inputs):
        assert apply_mapped(ltr_inputs, {}) is ltr_inputs

    def test_dscr_rate_resets_stress_rate(self, dscr_inputs):
        record = apply_mapped(dscr_inputs, {"interest_rate_pct": Decimal("7.2")})
        assert record.stress_rate == Decimal("9.2")

    def test_dscr_same_rate_keeps_stress_rate(self, dscr_inputs):
        tuned = replace(dscr_inputs, stress_rate=Decimal("11"))
        record = apply_mapped(tuned, {"interest_rate_pct": Decimal("7.5"), "ltr_rent": Decimal("4200")})
        assert record.stress_rate == Decimal("11")
