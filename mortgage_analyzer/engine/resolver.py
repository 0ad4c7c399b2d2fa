"""Scenario resolution: house price + down payment -> principal -> amortization.

Pure computation. Results are memoized by (inputs, active scenario ids); both
keys are immutable, so the cache never needs invalidating.
"""

import functools
import logging
from collections.abc import Iterable
from decimal import Decimal

from mortgage_analyzer.engine.amortization import compute_accelerated, compute_standard, payment_count
from mortgage_analyzer.models.results import AmortizationResult, ScenarioResult
from mortgage_analyzer.models.scenario import PRESET_SCENARIOS, LoanInputs, LoanScenario, get_scenario

logger = logging.getLogger(__name__)


def resolve_principal(scenario: LoanScenario, inputs: LoanInputs) -> Decimal:
    """Amount borrowed after the down payment.

    The scenario's own down payment percent wins over the user's default.
    Not floored: a down payment of 100% or more gives zero or negative.
    """
    if scenario.down_payment_override is not None:
        down_pct = scenario.down_payment_override
    else:
        down_pct = inputs.down_payment_pct
    return inputs.house_price * (1 - down_pct / 100)


def _infeasible_result(scenario: LoanScenario) -> AmortizationResult:
    term = scenario.effective_term_years
    return AmortizationResult(
        principal=Decimal("0"),
        annual_rate=scenario.annual_rate,
        monthly_payment=Decimal("0"),
        total_paid=Decimal("0"),
        total_interest=Decimal("0"),
        num_payments=payment_count(term),
        effective_term_years=term,
        feasible=False,
    )


def resolve(scenario: LoanScenario, inputs: LoanInputs) -> AmortizationResult:
    principal = resolve_principal(scenario, inputs)
    if principal <= 0:
        logger.warning(
            "%s: down payment covers the full price (principal %s), nothing to amortize",
            scenario.name, principal,
        )
        return _infeasible_result(scenario)

    if scenario.accelerated and scenario.target_term_years is not None:
        if scenario.target_term_years > scenario.term_years:
            logger.warning(
                "%s: payoff target %syr exceeds nominal term %syr",
                scenario.name, scenario.target_term_years, scenario.term_years,
            )
        return compute_accelerated(
            principal, scenario.annual_rate, scenario.term_years, scenario.target_term_years,
        )
    return compute_standard(principal, scenario.annual_rate, scenario.term_years)


@functools.lru_cache(maxsize=128)
def _resolve_cached(inputs: LoanInputs, active_ids: tuple[int, ...]) -> tuple[ScenarioResult, ...]:
    logger.debug("Resolving scenarios %s for %s", active_ids, inputs)
    return tuple(
        ScenarioResult(scenario=s, result=resolve(s, inputs))
        for s in PRESET_SCENARIOS
        if s.id in active_ids
    )


def resolve_scenarios(inputs: LoanInputs, active_ids: Iterable[int]) -> tuple[ScenarioResult, ...]:
    """Resolve every active scenario, in preset order.

    Raises UnknownScenarioError for ids outside the preset set and ValueError
    when no scenario is active.
    """
    ids = tuple(sorted(set(active_ids)))
    if not ids:
        raise ValueError("At least one scenario must be active")
    for scenario_id in ids:
        get_scenario(scenario_id)
    return _resolve_cached(inputs, ids)


def clear_cache() -> None:
    _resolve_cached.cache_clear()
