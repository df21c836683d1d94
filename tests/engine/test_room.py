from dataclasses import replace
from decimal import Decimal

from dealcalc.engine.room import analyze_room, owner_occupied_unit, total_rent


class TestRoomHelpers:
    def test_total_rent(self, rental_units):
        assert total_rent(rental_units) == Decimal("3250")

    def test_owner_occupied_unit(self, rental_units):
        assert owner_occupied_unit(rental_units).id == "r1"

    def test_no_owner_occupied_unit(self, rental_units):
        assert owner_occupied_unit(tuple(replace(u, owner_occupied=False) for u in rental_units)) is None


class TestAnalyzeRoom:
    def test_living_in_vs_moved_out(self, room_inputs, rental_units):
        m = analyze_room(room_inputs, rental_units)
        assert m.living_in.revenue == Decimal("2400")
        assert m.moved_out.revenue == Decimal("3250")
        assert m.owner_occupied_unit_id == "r1"

    def test_scenario_expenses(self, room_inputs, rental_units):
        m = analyze_room(room_inputs, rental_units)
        # $450 HOA + utilities, plus 10% of each scenario's revenue
        assert m.living_in.operating_expenses == Decimal("690")
        assert m.moved_out.operating_expenses == Decimal("775")

    def test_scenarios_share_financing(self, room_inputs, rental_units):
        m = analyze_room(room_inputs, rental_units)
        assert m.moved_out.cash_flow - m.living_in.cash_flow == Decimal("765")
        assert m.living_in.cash_flow == Decimal("2400") - m.financing.piti - Decimal("690")

    def test_line_items_use_moved_out_revenue(self, room_inputs, rental_units):
        m = analyze_room(room_inputs, rental_units)
        assert m.management_monthly == Decimal("0")
        assert m.maintenance_monthly == Decimal("162.5")
        assert m.capex_monthly == Decimal("162.5")

    def test_nobody_living_in(self, room_inputs, rental_units):
        units = tuple(replace(u, owner_occupied=False) for u in rental_units)
        m = analyze_room(room_inputs, units)
        assert m.living_in == m.moved_out
        assert m.owner_occupied_unit_id is None

    def test_cash_to_close(self, room_inputs, rental_units):
        m = analyze_room(room_inputs, rental_units)
        # 22,500 down + 13,500 closing + 20,000 renovation
        assert m.financing.cash_to_close == Decimal("56000")
