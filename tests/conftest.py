"""Canonical test fixtures used across engine tests.

Fixture: $200K house, 5% down, the seven preset scenarios.
Reference loan: $200K at 6.0% for 30 years (~$1,199.10/mo).
"""

import pytest
from decimal import Decimal

from mortgage_analyzer.engine.amortization import compute_standard
from mortgage_analyzer.engine.resolver import clear_cache, resolve_scenarios
from mortgage_analyzer.models.scenario import PRESET_SCENARIOS, LoanInputs


@pytest.fixture(autouse=True)
def _fresh_resolver_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def canonical_inputs() -> LoanInputs:
    return LoanInputs(house_price=Decimal("200000"), down_payment_pct=Decimal("5"))


@pytest.fixture
def reference_loan():
    """$200K at 6% for 30 years."""
    return compute_standard(Decimal("200000"), Decimal("6.0"), 30)


@pytest.fixture
def default_results(canonical_inputs):
    """30-Yr, 20-Yr and 50-Yr standard scenarios."""
    return resolve_scenarios(canonical_inputs, [1, 2, 3])


@pytest.fixture
def all_results(canonical_inputs):
    return resolve_scenarios(canonical_inputs, [s.id for s in PRESET_SCENARIOS])
