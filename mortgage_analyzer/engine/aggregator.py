"""Cross-scenario reductions: comparison rows, timelines, best/worst analysis.

Pure functions over resolved ScenarioResults. No I/O.
"""

from collections.abc import Sequence
from decimal import Decimal, ROUND_HALF_UP

from mortgage_analyzer.config import settings
from mortgage_analyzer.engine.amortization import compute_standard
from mortgage_analyzer.engine.schedule import YearlySchedule
from mortgage_analyzer.models.results import (
    AcceleratedSavings,
    BestWorstAnalysis,
    ComparisonRow,
    ScenarioResult,
    ScheduleEntry,
    TimelinePoint,
)

WHOLE_UNITS = Decimal("1")


def _whole(value: Decimal) -> Decimal:
    return value.quantize(WHOLE_UNITS, ROUND_HALF_UP)


def comparison_rows(results: Sequence[ScenarioResult]) -> list[ComparisonRow]:
    """One row per scenario, rounded to whole currency units."""
    return [
        ComparisonRow(
            name=sr.name,
            color=sr.color,
            monthly_payment=_whole(sr.result.monthly_payment),
            total_interest=_whole(sr.result.total_interest),
            total_paid=_whole(sr.result.total_paid),
            principal=_whole(sr.result.principal),
        )
        for sr in results
    ]


def timeline_checkpoints(results: Sequence[ScenarioResult], step: int | None = None) -> list[int]:
    """Every `step` years from 0 through the longest effective term."""
    if not results:
        return []
    step = step or settings.timeline_step_years
    max_term = max(sr.result.effective_term_years for sr in results)
    years = []
    year = 0
    while year <= max_term:
        years.append(year)
        year += step
    return years


def _balance_at(schedule: list[ScheduleEntry], year: int) -> Decimal:
    # Past payoff the loan stays at its final, fully-repaid balance
    if year < len(schedule):
        return schedule[year].balance
    return Decimal("0")


def build_schedules(results: Sequence[ScenarioResult]) -> list[list[ScheduleEntry]]:
    """Materialize each scenario's yearly schedule once, in result order."""
    return [list(YearlySchedule(sr.result)) for sr in results]


def _timeline(
    results: Sequence[ScenarioResult],
    equity: bool,
    step: int | None,
    schedules: Sequence[list[ScheduleEntry]] | None,
) -> list[TimelinePoint]:
    if schedules is None:
        schedules = build_schedules(results)
    if len(schedules) != len(results):
        raise ValueError("Need exactly one schedule per scenario result")

    points = []
    for year in timeline_checkpoints(results, step):
        values = {}
        for sr, schedule in zip(results, schedules):
            balance = _balance_at(schedule, year)
            values[sr.name] = sr.result.principal - balance if equity else balance
        points.append(TimelinePoint(year=year, values=values))
    return points


def balance_timeline(
    results: Sequence[ScenarioResult],
    step: int | None = None,
    schedules: Sequence[list[ScheduleEntry]] | None = None,
) -> list[TimelinePoint]:
    """Remaining balance per scenario at each checkpoint year.

    Pass `schedules` from build_schedules to reuse simulations across timelines.
    """
    return _timeline(results, equity=False, step=step, schedules=schedules)


def equity_timeline(
    results: Sequence[ScenarioResult],
    step: int | None = None,
    schedules: Sequence[list[ScheduleEntry]] | None = None,
) -> list[TimelinePoint]:
    """Principal repaid (principal - balance) per scenario at each checkpoint year."""
    return _timeline(results, equity=True, step=step, schedules=schedules)


def best_worst_analysis(results: Sequence[ScenarioResult]) -> BestWorstAnalysis | None:
    """Lowest payment, cheapest and costliest scenario by total interest.

    Infeasible scenarios are left out. Ties go to the first scenario seen.
    """
    candidates = [sr for sr in results if sr.result.feasible]
    if not candidates:
        return None

    lowest_payment = min(candidates, key=lambda sr: sr.result.monthly_payment)
    lowest_cost = min(candidates, key=lambda sr: sr.result.total_interest)
    highest_cost = max(candidates, key=lambda sr: sr.result.total_interest)

    return BestWorstAnalysis(
        lowest_payment=lowest_payment,
        lowest_cost=lowest_cost,
        highest_cost=highest_cost,
        cost_difference=highest_cost.result.total_interest - lowest_cost.result.total_interest,
    )


def accelerated_savings(sr: ScenarioResult) -> AcceleratedSavings | None:
    """What paying faster saves versus the same loan over its nominal term."""
    if not sr.scenario.accelerated or not sr.result.feasible:
        return None

    nominal = compute_standard(sr.result.principal, sr.scenario.annual_rate, sr.scenario.term_years)
    return AcceleratedSavings(
        nominal_monthly_payment=nominal.monthly_payment,
        extra_monthly_payment=sr.result.monthly_payment - nominal.monthly_payment,
        interest_saved=nominal.total_interest - sr.result.total_interest,
        years_saved=nominal.effective_term_years - sr.result.effective_term_years,
    )
