"""Fixed-rate amortization: payment formula, monthly simulation, scenario totals.

Pure functions: Decimal in, dataclass out. No I/O.
"""

import logging
from collections.abc import Iterator
from decimal import Decimal, ROUND_HALF_UP

from mortgage_analyzer.models.results import AmortizationPayment, AmortizationResult

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def monthly_rate(annual_rate: Decimal) -> Decimal:
    """Annual percent rate -> per-period decimal rate (6.0 -> 0.005)."""
    return Decimal(annual_rate) / 100 / MONTHS_PER_YEAR


def payment_count(term_years: Decimal | int) -> int:
    """Whole number of monthly payments in a (possibly fractional) term."""
    months = Decimal(term_years) * MONTHS_PER_YEAR
    return int(months.quantize(Decimal("1"), ROUND_HALF_UP))


def monthly_payment(principal: Decimal, annual_rate: Decimal, n_payments: int) -> Decimal:
    """Fixed payment that retires `principal` in exactly `n_payments` months."""
    if n_payments <= 0:
        raise ValueError("Number of payments must be positive")
    r = monthly_rate(annual_rate)
    if r == 0:
        # Limit of the annuity formula as r -> 0: straight-line repayment
        return principal / n_payments

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n_payments
    return principal * (r * factor) / (factor - 1)


def amortize(
    principal: Decimal,
    annual_rate: Decimal,
    payment: Decimal,
    periods: int,
) -> Iterator[AmortizationPayment]:
    """Simulate up to `periods` monthly payments of interest-then-principal.

    Lazy. Stops early once the balance is retired. The principal portion is
    clamped to the remaining balance so the balance never goes negative.
    """
    r = monthly_rate(annual_rate)
    balance = principal

    for period in range(1, periods + 1):
        interest = balance * r
        principal_paid = min(payment - interest, balance)
        balance -= principal_paid

        yield AmortizationPayment(
            period=period,
            payment=interest + principal_paid,
            principal=principal_paid,
            interest=interest,
            balance=balance,
        )
        if balance <= 0:
            break


def _check_loan(principal: Decimal, annual_rate: Decimal, term_years: Decimal | int) -> None:
    if principal <= 0:
        raise ValueError("Principal must be positive")
    if annual_rate < 0:
        raise ValueError("Annual rate cannot be negative")
    if term_years <= 0:
        raise ValueError("Term must be positive")


def compute_standard(
    principal: Decimal,
    annual_rate: Decimal,
    term_years: Decimal | int,
) -> AmortizationResult:
    """Closed-form totals for a loan paid over its full term."""
    _check_loan(principal, annual_rate, term_years)
    n = payment_count(term_years)
    pmt = monthly_payment(principal, annual_rate, n)
    total_paid = pmt * n

    logger.debug("Standard loan %s @ %s%% over %s payments: %s/mo", principal, annual_rate, n, pmt)
    return AmortizationResult(
        principal=principal,
        annual_rate=Decimal(annual_rate),
        monthly_payment=pmt,
        total_paid=total_paid,
        total_interest=total_paid - principal,
        num_payments=n,
        effective_term_years=Decimal(term_years),
    )


def compute_accelerated(
    principal: Decimal,
    annual_rate: Decimal,
    nominal_term_years: Decimal | int,
    target_term_years: Decimal | int,
) -> AmortizationResult:
    """Pay the loan off in `target_term_years` instead of its nominal term.

    The payment is re-derived for the target term, then the loan is simulated
    month by month. Totals come from the simulation rather than the closed
    form so they agree with the yearly schedule.
    """
    _check_loan(principal, annual_rate, target_term_years)
    n = payment_count(target_term_years)
    pmt = monthly_payment(principal, annual_rate, n)

    total_paid = Decimal("0")
    total_interest = Decimal("0")
    for p in amortize(principal, annual_rate, pmt, n):
        total_paid += p.payment
        total_interest += p.interest

    logger.debug(
        "Accelerated loan %s @ %s%%: %syr nominal paid in %syr at %s/mo",
        principal, annual_rate, nominal_term_years, target_term_years, pmt,
    )
    return AmortizationResult(
        principal=principal,
        annual_rate=Decimal(annual_rate),
        monthly_payment=total_paid / n,
        total_paid=total_paid,
        total_interest=total_interest,
        num_payments=n,
        effective_term_years=Decimal(target_term_years),
    )


def payoff_term_years(principal: Decimal, annual_rate: Decimal, payment: Decimal) -> Decimal:
    """Years a fixed `payment` needs to retire `principal` (may be fractional).

    Inverse of the payment formula: n = -ln(1 - P*r/M) / ln(1 + r).
    """
    if principal <= 0:
        raise ValueError("Principal must be positive")
    r = monthly_rate(annual_rate)
    if r == 0:
        if payment <= 0:
            raise ValueError("Payment must be positive")
        return principal / payment / MONTHS_PER_YEAR

    if payment <= principal * r:
        raise ValueError("Payment does not cover the first month's interest")
    n = -(1 - principal * r / payment).ln() / (1 + r).ln()
    return n / MONTHS_PER_YEAR
