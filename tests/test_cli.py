import json
from decimal import Decimal

import pytest

from dealcalc.cli import format_value, main, parse_assignment


class TestParseAssignment:
    def test_number(self):
        assert parse_assignment("rent=3000") == ("rent", "3000")

    def test_value_left_raw(self):
        assert parse_assignment(" renovation_financed = off ") == ("renovation_financed", "off")

    def test_missing_value(self):
        with pytest.raises(Exception):
            parse_assignment("rent")


class TestFormatValue:
    def test_money(self):
        assert format_value(Decimal("1234.5")) == "1,234.50"

    def test_unbounded(self):
        assert format_value(Decimal("Infinity")) == "n/a"
        assert format_value(None) == "n/a"


class TestMain:
    def test_table(self, capsys):
        assert main(["ltr"]) == 0
        out = capsys.readouterr().out
        assert "LTR metrics" in out
        assert "2,800.00" in out

    def test_json_with_edits(self, capsys):
        main(["str", "--set", "adr=250", "--set", "occupancy_pct=75", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert Decimal(data["metrics"]["revenue"]) == Decimal("5707.5")

    def test_push_from(self, capsys):
        main(["ltr", "--push-from", "str", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert Decimal(data["metrics"]["revenue"]) == Decimal("5707.5")

    def test_unknown_field(self, capsys):
        with pytest.raises(SystemExit):
            main(["ltr", "--set", "adr=250"])

    @pytest.mark.parametrize("word,loan", [("yes", "295000"), ("off", "280000")])
    def test_flag_words(self, capsys, word, loan):
        main(["ltr", "--set", f"renovation_financed={word}", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert Decimal(data["metrics"]["financing"]["loan_amount"]) == Decimal(loan)

    def test_bad_flag(self):
        with pytest.raises(SystemExit):
            main(["ltr", "--set", "renovation_financed=maybe"])
