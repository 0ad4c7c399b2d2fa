import json

import pytest

from mortgage_analyzer.cli import main


class TestCLI:
    def test_default_report(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "Base Parameters" in out
        assert "Complete Scenario Comparison" in out
        assert "30-Yr Standard" in out
        assert "Strategic Analysis" in out

    def test_all_views(self, capsys):
        assert main(["--price", "300000", "--down", "10", "--scenarios", "1", "4", "--view", "all"]) == 0
        out = capsys.readouterr().out
        assert "Monthly Payment Comparison" in out
        assert "Total Cost Breakdown" in out
        assert "Equity Buildup Over Time" in out
        assert "50-Yr (Paid in 30) - Year-by-Year Breakdown" in out
        assert "Full term: 30 years." in out
        assert "extra saves" in out

    def test_json(self, capsys):
        assert main(["--scenarios", "2", "3", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert [s["name"] for s in payload["scenarios"]] == ["20-Yr Standard", "50-Yr Standard"]
        assert payload["best_worst"]["highest_cost"] == "50-Yr Standard"

    def test_unknown_scenario(self, capsys):
        assert main(["--scenarios", "9"]) == 2
        assert "unknown scenario id 9" in capsys.readouterr().err

    def test_invalid_down_payment(self, capsys):
        assert main(["--down", "150"]) == 2
        assert "Down payment" in capsys.readouterr().err

    def test_infeasible_scenario_flagged(self, capsys):
        assert main(["--down", "100", "--scenarios", "1", "7", "--view", "amortization"]) == 0
        out = capsys.readouterr().out
        assert "Nothing borrowed" in out
        assert "50-Yr (3.5% Down) - Year-by-Year Breakdown" in out

    def test_non_numeric_price_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--price", "abc"])
        assert exc.value.code == 2
        assert "not a number" in capsys.readouterr().err

    def test_non_numeric_down_payment_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--down", "five"])
        assert exc.value.code == 2

    @pytest.mark.parametrize("flag,value", [
        ("--price", "NaN"),
        ("--price", "Infinity"),
        ("--down", "NaN"),
    ])
    def test_non_finite_input_rejected(self, capsys, flag, value):
        assert main([flag, value]) == 2
        assert "finite" in capsys.readouterr().err

    def test_full_term_note_for_long_schedule(self, capsys):
        assert main(["--scenarios", "2", "--view", "amortization"]) == 0
        assert "Full term: 20 years." in capsys.readouterr().out
