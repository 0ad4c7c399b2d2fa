"""Pydantic schemas for serialized analysis output."""

from collections.abc import Sequence
from decimal import Decimal

from pydantic import BaseModel, Field

from mortgage_analyzer.config import settings
from mortgage_analyzer.engine.aggregator import (
    accelerated_savings,
    balance_timeline,
    best_worst_analysis,
    build_schedules,
    comparison_rows,
    equity_timeline,
)
from mortgage_analyzer.models.results import ScenarioResult, ScheduleEntry
from mortgage_analyzer.models.scenario import LoanInputs


class ScheduleEntryResponse(BaseModel):
    year: int
    balance: Decimal
    principal_paid: Decimal
    interest_paid: Decimal
    total_paid: Decimal


class AcceleratedSavingsResponse(BaseModel):
    nominal_monthly_payment: Decimal
    extra_monthly_payment: Decimal
    interest_saved: Decimal
    years_saved: Decimal


class ScenarioResultResponse(BaseModel):
    id: int
    name: str
    color: str
    term_years: int
    annual_rate: Decimal
    accelerated: bool
    effective_term_years: Decimal
    principal: Decimal
    monthly_payment: Decimal
    total_paid: Decimal
    total_interest: Decimal
    num_payments: int
    feasible: bool = True
    schedule: list[ScheduleEntryResponse] = Field(default_factory=list, description="First years only")
    savings: AcceleratedSavingsResponse | None = None


class ComparisonRowResponse(BaseModel):
    name: str
    monthly_payment: Decimal
    total_interest: Decimal
    total_paid: Decimal
    principal: Decimal


class TimelinePointResponse(BaseModel):
    year: int
    values: dict[str, Decimal]


class BestWorstResponse(BaseModel):
    lowest_payment: str
    lowest_payment_amount: Decimal
    lowest_cost: str
    lowest_cost_interest: Decimal
    highest_cost: str
    highest_cost_interest: Decimal
    cost_difference: Decimal


class AnalysisResponse(BaseModel):
    house_price: Decimal
    down_payment_pct: Decimal
    scenarios: list[ScenarioResultResponse]
    comparison: list[ComparisonRowResponse]
    balance_timeline: list[TimelinePointResponse]
    equity_timeline: list[TimelinePointResponse]
    best_worst: BestWorstResponse | None = None


def _scenario_response(sr: ScenarioResult, schedule: list[ScheduleEntry]) -> ScenarioResultResponse:
    savings = accelerated_savings(sr)
    return ScenarioResultResponse(
        id=sr.scenario.id,
        name=sr.name,
        color=sr.color,
        term_years=sr.scenario.term_years,
        annual_rate=sr.scenario.annual_rate,
        accelerated=sr.scenario.accelerated,
        effective_term_years=sr.result.effective_term_years,
        principal=sr.result.principal,
        monthly_payment=sr.result.monthly_payment,
        total_paid=sr.result.total_paid,
        total_interest=sr.result.total_interest,
        num_payments=sr.result.num_payments,
        feasible=sr.result.feasible,
        schedule=[
            ScheduleEntryResponse(
                year=e.year,
                balance=e.balance,
                principal_paid=e.principal_paid,
                interest_paid=e.interest_paid,
                total_paid=e.total_paid,
            )
            for e in schedule[:settings.schedule_display_years]
        ],
        savings=AcceleratedSavingsResponse(
            nominal_monthly_payment=savings.nominal_monthly_payment,
            extra_monthly_payment=savings.extra_monthly_payment,
            interest_saved=savings.interest_saved,
            years_saved=savings.years_saved,
        ) if savings else None,
    )


def build_analysis_response(inputs: LoanInputs, results: Sequence[ScenarioResult]) -> AnalysisResponse:
    best_worst = best_worst_analysis(results)
    schedules = build_schedules(results)
    return AnalysisResponse(
        house_price=inputs.house_price,
        down_payment_pct=inputs.down_payment_pct,
        scenarios=[_scenario_response(sr, schedule) for sr, schedule in zip(results, schedules)],
        comparison=[
            ComparisonRowResponse(
                name=row.name,
                monthly_payment=row.monthly_payment,
                total_interest=row.total_interest,
                total_paid=row.total_paid,
                principal=row.principal,
            )
            for row in comparison_rows(results)
        ],
        balance_timeline=[
            TimelinePointResponse(year=p.year, values=p.values)
            for p in balance_timeline(results, schedules=schedules)
        ],
        equity_timeline=[
            TimelinePointResponse(year=p.year, values=p.values)
            for p in equity_timeline(results, schedules=schedules)
        ],
        best_worst=BestWorstResponse(
            lowest_payment=best_worst.lowest_payment.name,
            lowest_payment_amount=best_worst.lowest_payment.result.monthly_payment,
            lowest_cost=best_worst.lowest_cost.name,
            lowest_cost_interest=best_worst.lowest_cost.result.total_interest,
            highest_cost=best_worst.highest_cost.name,
            highest_cost_interest=best_worst.highest_cost.result.total_interest,
            cost_difference=best_worst.cost_difference,
        ) if best_worst else None,
    )
