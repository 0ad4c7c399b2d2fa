"""Year-by-year breakdown of an amortization result.

Re-simulates the loan from the result each time it is iterated, so a schedule
can be walked any number of times without shared state.
"""

from collections.abc import Iterator
from decimal import Decimal
from itertools import islice

from mortgage_analyzer.config import settings
from mortgage_analyzer.engine.amortization import MONTHS_PER_YEAR, amortize
from mortgage_analyzer.models.results import AmortizationResult, ScheduleEntry

# Simulation residue below this is treated as paid off
BALANCE_EPSILON = Decimal("1e-6")


class YearlySchedule:
    """Lazy, restartable sequence of ScheduleEntry, one per loan year.

    The final year holds the leftover months when the term is not a whole
    number of years.
    """

    def __init__(self, result: AmortizationResult):
        self.result = result

    def __iter__(self) -> Iterator[ScheduleEntry]:
        if not self.result.feasible:
            return

        payments = amortize(
            self.result.principal,
            self.result.annual_rate,
            self.result.monthly_payment,
            self.result.num_payments,
        )
        year = 0
        while True:
            months = list(islice(payments, MONTHS_PER_YEAR))
            if not months:
                return

            year_principal = sum((p.principal for p in months), Decimal("0"))
            year_interest = sum((p.interest for p in months), Decimal("0"))
            balance = max(months[-1].balance, Decimal("0"))
            if balance < BALANCE_EPSILON:
                balance = Decimal("0")

            yield ScheduleEntry(
                year=year,
                balance=balance,
                principal_paid=year_principal,
                interest_paid=year_interest,
                total_paid=year_principal + year_interest,
            )
            if balance == 0:
                return
            year += 1


def generate_yearly_schedule(result: AmortizationResult) -> YearlySchedule:
    return YearlySchedule(result)


def schedule_year_count(result: AmortizationResult) -> int:
    """Number of entries the schedule yields, derived without simulating."""
    if not result.feasible:
        return 0
    return -(-result.num_payments // MONTHS_PER_YEAR)


def display_schedule(
    result: AmortizationResult,
    years: int | None = None,
) -> list[ScheduleEntry]:
    """First `years` entries of the schedule (defaults to the display setting)."""
    limit = settings.schedule_display_years if years is None else years
    return list(islice(YearlySchedule(result), limit))
