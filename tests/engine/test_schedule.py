from dataclasses import replace
from decimal import Decimal

from mortgage_analyzer.engine.amortization import compute_accelerated, compute_standard
from mortgage_analyzer.engine.schedule import (
    YearlySchedule,
    display_schedule,
    generate_yearly_schedule,
    schedule_year_count,
)

CENT = Decimal("0.01")


class TestYearlySchedule:
    def test_one_entry_per_year(self, reference_loan):
        schedule = list(YearlySchedule(reference_loan))
        assert len(schedule) == 30
        assert [e.year for e in schedule] == list(range(30))

    def test_first_year(self, reference_loan):
        first = next(iter(YearlySchedule(reference_loan)))
        assert first.year == 0
        assert abs(first.interest_paid - Decimal("11933.19")) < CENT
        assert abs(first.principal_paid - Decimal("2456.02")) < CENT
        assert abs(first.balance - Decimal("197543.98")) < CENT
        assert first.total_paid == first.principal_paid + first.interest_paid

    def test_balance_monotonic_and_retired(self, reference_loan):
        schedule = list(YearlySchedule(reference_loan))
        for i in range(1, len(schedule)):
            assert schedule[i].balance <= schedule[i - 1].balance
        assert schedule[-1].balance == 0

    def test_principal_fully_repaid(self, reference_loan):
        schedule = list(YearlySchedule(reference_loan))
        assert abs(sum(e.principal_paid for e in schedule) - reference_loan.principal) < CENT

    def test_interest_matches_result(self, reference_loan):
        schedule = list(YearlySchedule(reference_loan))
        assert abs(sum(e.interest_paid for e in schedule) - reference_loan.total_interest) < CENT

    def test_restartable(self, reference_loan):
        schedule = generate_yearly_schedule(reference_loan)
        assert list(schedule) == list(schedule)

    def test_zero_rate_has_no_interest(self):
        result = compute_standard(Decimal("190000"), Decimal("0"), 30)
        schedule = list(YearlySchedule(result))
        assert len(schedule) == 30
        assert all(e.interest_paid == 0 for e in schedule)
        assert schedule[-1].balance == 0

    def test_fractional_term_final_year(self):
        """36.46yr = 438 payments: 36 full years plus 6 months."""
        result = compute_accelerated(Decimal("190000"), Decimal("6.8"), 50, Decimal("36.46"))
        schedule = list(YearlySchedule(result))
        assert len(schedule) == 37
        assert schedule[-1].year == 36
        assert schedule[-1].balance == 0
        assert abs(schedule[-1].total_paid - result.monthly_payment * 6) < CENT
        assert abs(schedule[0].total_paid - result.monthly_payment * 12) < CENT

    def test_accelerated_ends_at_target(self):
        result = compute_accelerated(Decimal("190000"), Decimal("6.8"), 50, Decimal("30"))
        schedule = list(YearlySchedule(result))
        assert len(schedule) == 30
        assert schedule[-1].balance == 0

    def test_infeasible_result_is_empty(self, reference_loan):
        infeasible = replace(reference_loan, principal=Decimal("0"), feasible=False)
        assert list(YearlySchedule(infeasible)) == []


class TestDisplaySchedule:
    def test_capped_to_eleven_years(self, reference_loan):
        entries = display_schedule(reference_loan)
        assert len(entries) == 11
        assert entries[-1].year == 10

    def test_custom_cap(self, reference_loan):
        assert len(display_schedule(reference_loan, years=3)) == 3

    def test_short_schedule_not_padded(self):
        result = compute_standard(Decimal("50000"), Decimal("5.0"), 5)
        assert len(display_schedule(result)) == 5


class TestScheduleYearCount:
    def test_matches_simulated_length(self, all_results):
        for sr in all_results:
            assert schedule_year_count(sr.result) == len(list(YearlySchedule(sr.result)))

    def test_partial_final_year(self):
        result = compute_accelerated(Decimal("190000"), Decimal("6.8"), 50, Decimal("36.46"))
        assert schedule_year_count(result) == 37

    def test_whole_years(self):
        result = compute_standard(Decimal("150000"), Decimal("5.0"), 11)
        assert schedule_year_count(result) == 11

    def test_infeasible_is_zero(self, reference_loan):
        infeasible = replace(reference_loan, principal=Decimal("0"), feasible=False)
        assert schedule_year_count(infeasible) == 0
