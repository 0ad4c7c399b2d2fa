from dataclasses import dataclass, field
from decimal import Decimal

from mortgage_analyzer.models.scenario import LoanScenario


@dataclass(frozen=True)
class AmortizationPayment:
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AmortizationResult:
    principal: Decimal
    annual_rate: Decimal  # Percent
    monthly_payment: Decimal
    total_paid: Decimal
    total_interest: Decimal
    num_payments: int
    effective_term_years: Decimal
    feasible: bool = True  # False when down payment left nothing to borrow


@dataclass(frozen=True)
class ScheduleEntry:
    year: int  # 0-based; balance is at the end of this year
    balance: Decimal
    principal_paid: Decimal
    interest_paid: Decimal
    total_paid: Decimal


@dataclass(frozen=True)
class ScenarioResult:
    scenario: LoanScenario
    result: AmortizationResult

    @property
    def name(self) -> str:
        return self.scenario.name

    @property
    def color(self) -> str:
        return self.scenario.color


@dataclass(frozen=True)
class ComparisonRow:
    """Whole-currency figures for tables and bar charts."""
    name: str
    color: str
    monthly_payment: Decimal
    total_interest: Decimal
    total_paid: Decimal
    principal: Decimal


@dataclass(frozen=True)
class TimelinePoint:
    year: int
    values: dict[str, Decimal] = field(default_factory=dict)  # Scenario name -> amount


@dataclass(frozen=True)
class BestWorstAnalysis:
    lowest_payment: ScenarioResult
    lowest_cost: ScenarioResult
    highest_cost: ScenarioResult
    cost_difference: Decimal  # Interest spread between highest and lowest cost


@dataclass(frozen=True)
class AcceleratedSavings:
    """Accelerated plan vs the same loan paid over its nominal term."""
    nominal_monthly_payment: Decimal
    extra_monthly_payment: Decimal
    interest_saved: Decimal
    years_saved: Decimal
