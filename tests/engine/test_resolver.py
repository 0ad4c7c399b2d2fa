import logging
from decimal import Decimal

import pytest

from mortgage_analyzer.engine.resolver import resolve, resolve_principal, resolve_scenarios
from mortgage_analyzer.models.scenario import LoanInputs, LoanScenario, UnknownScenarioError, get_scenario

CENT = Decimal("0.01")


class TestResolvePrincipal:
    def test_default_down_payment(self, canonical_inputs):
        # $200K with 5% down
        assert resolve_principal(get_scenario(1), canonical_inputs) == Decimal("190000")

    def test_scenario_override_wins(self, canonical_inputs):
        # Scenario 7 always uses 3.5% down
        assert resolve_principal(get_scenario(7), canonical_inputs) == Decimal("193000")

    def test_zero_down(self):
        inputs = LoanInputs(house_price=Decimal("300000"), down_payment_pct=Decimal("0"))
        assert resolve_principal(get_scenario(3), inputs) == Decimal("300000")


class TestResolve:
    def test_standard_scenario(self, canonical_inputs):
        result = resolve(get_scenario(1), canonical_inputs)
        assert result.num_payments == 360
        assert result.effective_term_years == 30
        assert result.annual_rate == Decimal("6.3")
        assert result.feasible

    def test_accelerated_scenario(self, canonical_inputs):
        result = resolve(get_scenario(4), canonical_inputs)
        assert result.num_payments == 360
        assert result.effective_term_years == 30
        assert abs(result.monthly_payment - Decimal("1238.66")) < CENT

    def test_fractional_accelerated_scenario(self, canonical_inputs):
        result = resolve(get_scenario(6), canonical_inputs)
        assert result.num_payments == 438
        assert result.effective_term_years == Decimal("36.46")

    def test_full_down_payment_is_infeasible(self, caplog):
        inputs = LoanInputs(house_price=Decimal("200000"), down_payment_pct=Decimal("100"))
        with caplog.at_level(logging.WARNING):
            result = resolve(get_scenario(1), inputs)
        assert not result.feasible
        assert result.principal == 0
        assert result.monthly_payment == 0
        assert result.total_interest == 0
        assert "nothing to amortize" in caplog.text

    def test_override_still_feasible_at_full_default_down(self):
        inputs = LoanInputs(house_price=Decimal("200000"), down_payment_pct=Decimal("100"))
        result = resolve(get_scenario(7), inputs)
        assert result.feasible
        assert result.principal == Decimal("193000")

    def test_target_longer_than_nominal_passes_through(self, canonical_inputs, caplog):
        scenario = LoanScenario(
            id=99, name="Slow", term_years=30, annual_rate=Decimal("6.0"),
            accelerated=True, target_term_years=Decimal("40"),
        )
        with caplog.at_level(logging.WARNING):
            result = resolve(scenario, canonical_inputs)
        assert result.effective_term_years == 40
        assert result.num_payments == 480
        assert "exceeds nominal term" in caplog.text


class TestResolveScenarios:
    def test_preset_order(self, canonical_inputs):
        results = resolve_scenarios(canonical_inputs, [3, 1])
        assert [sr.name for sr in results] == ["30-Yr Standard", "50-Yr Standard"]

    def test_memoized(self, canonical_inputs):
        first = resolve_scenarios(canonical_inputs, [1, 2, 3])
        again = resolve_scenarios(
            LoanInputs(house_price=Decimal("200000"), down_payment_pct=Decimal("5")), [3, 2, 1],
        )
        assert first is again

    def test_new_inputs_recompute(self, canonical_inputs):
        first = resolve_scenarios(canonical_inputs, [1])
        other = resolve_scenarios(
            LoanInputs(house_price=Decimal("300000"), down_payment_pct=Decimal("5")), [1],
        )
        assert other[0].result.principal == Decimal("285000")
        assert first[0].result.principal == Decimal("190000")

    def test_empty_rejected(self, canonical_inputs):
        with pytest.raises(ValueError):
            resolve_scenarios(canonical_inputs, [])

    def test_unknown_scenario(self, canonical_inputs):
        with pytest.raises(UnknownScenarioError):
            resolve_scenarios(canonical_inputs, [1, 42])
