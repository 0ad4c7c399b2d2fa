"""Terminal report comparing mortgage strategies.

Usage:
    mortgage-analyzer --price 200000 --down 5
    mortgage-analyzer --price 350000 --down 10 --scenarios 1 3 4 6 --view amortization
    mortgage-analyzer --scenarios 1 2 3 4 5 6 7 --json
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from mortgage_analyzer.config import settings
from mortgage_analyzer.engine.aggregator import (
    accelerated_savings,
    balance_timeline,
    best_worst_analysis,
    build_schedules,
    comparison_rows,
    equity_timeline,
)
from mortgage_analyzer.engine.resolver import resolve_scenarios
from mortgage_analyzer.engine.schedule import display_schedule, schedule_year_count
from mortgage_analyzer.models.results import ScenarioResult, TimelinePoint
from mortgage_analyzer.models.scenario import PRESET_SCENARIOS, LoanInputs, UnknownScenarioError
from mortgage_analyzer.schemas import build_analysis_response

VIEWS = ["overview", "payments", "costs", "equity", "amortization", "all"]


# ── Helpers ──────────────────────────────────────────────────────────────────

def _dollar(v) -> str:
    return f"${float(v):,.0f}"


def _decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def _header(title: str) -> None:
    print(f"\n{'=' * 72}")
    print(f"  {title}")
    print(f"{'=' * 72}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_inputs(inputs: LoanInputs) -> None:
    _header("Base Parameters")
    print(f"  House Price:      {_dollar(inputs.house_price)}")
    print(f"  Down Payment:     {inputs.down_payment_pct}% ({_dollar(inputs.down_payment)})")


def print_overview(results: Sequence[ScenarioResult]) -> None:
    _header("Complete Scenario Comparison")
    print(
        f"  {'Scenario':<20}  {'Term':>14}  {'Rate':>6}  {'Principal':>10}  "
        f"{'Monthly':>8}  {'Total Paid':>11}  {'Interest':>10}"
    )
    print(f"  {'-' * 20}  {'-' * 14}  {'-' * 6}  {'-' * 10}  {'-' * 8}  {'-' * 11}  {'-' * 10}")
    for sr in results:
        term = f"{sr.scenario.term_years}yr"
        if sr.scenario.accelerated:
            term += f" → {sr.result.effective_term_years}yr"
        flag = "" if sr.result.feasible else "  (infeasible)"
        print(
            f"  {sr.name:<20}  {term:>14}  {str(sr.scenario.annual_rate) + '%':>6}  "
            f"{_dollar(sr.result.principal):>10}  {_dollar(sr.result.monthly_payment):>8}  "
            f"{_dollar(sr.result.total_paid):>11}  {_dollar(sr.result.total_interest):>10}{flag}"
        )


def print_payments(results: Sequence[ScenarioResult]) -> None:
    _header("Monthly Payment Comparison")
    for row in comparison_rows(results):
        print(f"  {row.name:<20}  {_dollar(row.monthly_payment):>8}/mo")


def print_costs(results: Sequence[ScenarioResult]) -> None:
    _header("Total Cost Breakdown")
    print(f"  {'Scenario':<20}  {'Principal':>10}  {'Interest':>10}  {'Total':>11}")
    for row in comparison_rows(results):
        print(
            f"  {row.name:<20}  {_dollar(row.principal):>10}  "
            f"{_dollar(row.total_interest):>10}  {_dollar(row.total_paid):>11}"
        )


def _print_timeline(title: str, points: list[TimelinePoint], names: list[str]) -> None:
    _header(title)
    print("  " + f"{'Year':>4}  " + "  ".join(f"{n[:14]:>14}" for n in names))
    for point in points:
        cells = "  ".join(f"{_dollar(point.values[n]):>14}" for n in names)
        print(f"  {point.year:>4}  {cells}")


def print_equity(results: Sequence[ScenarioResult]) -> None:
    names = [sr.name for sr in results]
    schedules = build_schedules(results)
    _print_timeline("Equity Buildup Over Time", equity_timeline(results, schedules=schedules), names)
    _print_timeline("Remaining Balance Over Time", balance_timeline(results, schedules=schedules), names)


def print_amortization(results: Sequence[ScenarioResult]) -> None:
    for sr in results:
        _header(f"{sr.name} - Year-by-Year Breakdown")
        if not sr.result.feasible:
            print("  Nothing borrowed: down payment covers the full price.")
            continue
        print(f"  {'Yr':>3}  {'Principal':>10}  {'Interest':>10}  {'Total Paid':>11}  {'Balance':>10}")
        for entry in display_schedule(sr.result):
            print(
                f"  {entry.year:>3}  {_dollar(entry.principal_paid):>10}  "
                f"{_dollar(entry.interest_paid):>10}  {_dollar(entry.total_paid):>11}  "
                f"{_dollar(entry.balance):>10}"
            )
        if schedule_year_count(sr.result) > settings.schedule_display_years:
            print(
                f"  Showing first {settings.schedule_display_years - 1} years. "
                f"Full term: {sr.result.effective_term_years} years."
            )


def print_strategic_analysis(results: Sequence[ScenarioResult]) -> None:
    analysis = best_worst_analysis(results)
    if analysis is None:
        return
    _header("Strategic Analysis")
    print(
        f"  Lowest Monthly Payment:  {analysis.lowest_payment.name} "
        f"({_dollar(analysis.lowest_payment.result.monthly_payment)}/month)"
    )
    print(
        f"  Lowest Total Cost:       {analysis.lowest_cost.name} "
        f"({_dollar(analysis.lowest_cost.result.total_interest)} in interest)"
    )
    print(
        f"  Highest Total Cost:      {analysis.highest_cost.name} "
        f"({_dollar(analysis.highest_cost.result.total_interest)} in interest)"
    )
    print(f"  Cost Difference:         {_dollar(analysis.cost_difference)}")

    for sr in results:
        savings = accelerated_savings(sr)
        if savings is None:
            continue
        print(
            f"\n  {sr.name}: {_dollar(savings.extra_monthly_payment)}/mo extra saves "
            f"{_dollar(savings.interest_saved)} interest and {savings.years_saved} years"
        )


SECTIONS = {
    "overview": print_overview,
    "payments": print_payments,
    "costs": print_costs,
    "equity": print_equity,
    "amortization": print_amortization,
}


# ── Main ─────────────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    scenario_help = ", ".join(f"{s.id}={s.name}" for s in PRESET_SCENARIOS)
    parser = argparse.ArgumentParser(
        prog="mortgage-analyzer",
        description="Compare fixed-rate mortgage strategies (principal and interest only)",
    )
    parser.add_argument(
        "--price", type=_decimal, default=settings.default_house_price,
        help=f"House price (default: {settings.default_house_price})",
    )
    parser.add_argument(
        "--down", type=_decimal, default=settings.default_down_payment_pct,
        help=f"Standard down payment percent (default: {settings.default_down_payment_pct})",
    )
    parser.add_argument(
        "--scenarios", type=int, nargs="+", default=settings.default_active_scenarios,
        metavar="ID", help=f"Scenario ids to compare: {scenario_help}",
    )
    parser.add_argument("--view", choices=VIEWS, default="overview", help="Report section (default: overview)")
    parser.add_argument("--json", action="store_true", help="Print the full analysis as JSON")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        inputs = LoanInputs(house_price=args.price, down_payment_pct=args.down)
        results = resolve_scenarios(inputs, args.scenarios)
    except UnknownScenarioError as e:
        print(f"Error: unknown scenario id {e.args[0]}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(build_analysis_response(inputs, results).model_dump_json(indent=2))
        return 0

    print_inputs(inputs)
    views = list(SECTIONS) if args.view == "all" else [args.view]
    for view in views:
        SECTIONS[view](results)
    print_strategic_analysis(results)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
