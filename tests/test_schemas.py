import json
from decimal import Decimal

from mortgage_analyzer.engine.resolver import resolve_scenarios
from mortgage_analyzer.schemas import AnalysisResponse, build_analysis_response


class TestBuildAnalysisResponse:
    def test_structure(self, canonical_inputs):
        results = resolve_scenarios(canonical_inputs, [1, 4])
        response = build_analysis_response(canonical_inputs, results)

        assert isinstance(response, AnalysisResponse)
        assert [s.name for s in response.scenarios] == ["30-Yr Standard", "50-Yr (Paid in 30)"]
        assert len(response.comparison) == 2
        assert response.house_price == Decimal("200000")

    def test_schedule_capped(self, canonical_inputs):
        results = resolve_scenarios(canonical_inputs, [1])
        response = build_analysis_response(canonical_inputs, results)
        assert len(response.scenarios[0].schedule) == 11

    def test_savings_only_for_accelerated(self, canonical_inputs):
        results = resolve_scenarios(canonical_inputs, [1, 4])
        standard, accelerated = build_analysis_response(canonical_inputs, results).scenarios
        assert standard.savings is None
        assert accelerated.savings.years_saved == 20

    def test_timelines(self, canonical_inputs):
        results = resolve_scenarios(canonical_inputs, [1, 2])
        response = build_analysis_response(canonical_inputs, results)
        assert response.balance_timeline[0].year == 0
        assert response.equity_timeline[-1].year == 30
        assert set(response.balance_timeline[0].values) == {"30-Yr Standard", "20-Yr Standard"}

    def test_best_worst(self, canonical_inputs, default_results):
        response = build_analysis_response(canonical_inputs, default_results)
        assert response.best_worst.lowest_payment == "50-Yr Standard"
        assert response.best_worst.lowest_cost == "20-Yr Standard"

    def test_json_round_trip(self, canonical_inputs, default_results):
        payload = json.loads(build_analysis_response(canonical_inputs, default_results).model_dump_json())
        assert payload["down_payment_pct"] == "5"
        assert len(payload["scenarios"]) == 3
