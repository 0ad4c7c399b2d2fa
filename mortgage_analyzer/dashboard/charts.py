"""Plotly figure builders for the dashboard. Pure: engine output in, Figure out."""

from collections.abc import Sequence

import plotly.graph_objects as go

from mortgage_analyzer.models.results import ComparisonRow, ScenarioResult, ScheduleEntry, TimelinePoint

PRINCIPAL_COLOR = "#10b981"
INTEREST_COLOR = "#ef4444"
GRID_COLOR = "#e2e8f0"


def _style(fig: go.Figure, title: str, hovermode: str = "x unified", **layout) -> go.Figure:
    fig.update_layout(
        title=title,
        plot_bgcolor="white",
        hovermode=hovermode,
        margin=dict(l=60, r=20, t=60, b=60),
        **layout,
    )
    fig.update_xaxes(gridcolor=GRID_COLOR)
    fig.update_yaxes(gridcolor=GRID_COLOR, tickprefix="$", separatethousands=True)
    return fig


def payment_bar(rows: Sequence[ComparisonRow]) -> go.Figure:
    fig = go.Figure(go.Bar(
        x=[r.name for r in rows],
        y=[float(r.monthly_payment) for r in rows],
        marker_color=[r.color for r in rows],
        name="Monthly P&I",
    ))
    return _style(fig, "Monthly Payment Comparison", yaxis_title="Monthly Payment ($)")


def cost_breakdown_bar(rows: Sequence[ComparisonRow]) -> go.Figure:
    """Horizontal stacked bars: principal + total interest = total cost."""
    names = [r.name for r in rows]
    fig = go.Figure([
        go.Bar(
            y=names, x=[float(r.principal) for r in rows],
            orientation="h", name="Principal", marker_color=PRINCIPAL_COLOR,
        ),
        go.Bar(
            y=names, x=[float(r.total_interest) for r in rows],
            orientation="h", name="Total Interest", marker_color=INTEREST_COLOR,
        ),
    ])
    fig = _style(fig, "Total Cost Breakdown", barmode="stack", hovermode="y unified")
    fig.update_xaxes(tickprefix="$", separatethousands=True)
    fig.update_yaxes(tickprefix="")
    return fig


def interest_bar(rows: Sequence[ComparisonRow]) -> go.Figure:
    fig = go.Figure(go.Bar(
        x=[r.name for r in rows],
        y=[float(r.total_interest) for r in rows],
        marker_color=[r.color for r in rows],
        name="Total Interest",
    ))
    return _style(fig, "Interest Cost Comparison", yaxis_title="Total Interest ($)")


def timeline_chart(
    points: Sequence[TimelinePoint],
    results: Sequence[ScenarioResult],
    title: str,
    yaxis_title: str,
) -> go.Figure:
    """One line per scenario across the checkpoint years."""
    years = [p.year for p in points]
    fig = go.Figure()
    for sr in results:
        fig.add_trace(go.Scatter(
            x=years,
            y=[round(float(p.values[sr.name])) for p in points],
            mode="lines",
            name=sr.name,
            line=dict(color=sr.color, width=2),
        ))
    return _style(fig, title, xaxis_title="Years", yaxis_title=yaxis_title)


def schedule_bar(entries: Sequence[ScheduleEntry], title: str) -> go.Figure:
    years = [e.year for e in entries]
    fig = go.Figure([
        go.Bar(
            x=years, y=[round(float(e.principal_paid)) for e in entries],
            name="Principal Paid", marker_color=PRINCIPAL_COLOR,
        ),
        go.Bar(
            x=years, y=[round(float(e.interest_paid)) for e in entries],
            name="Interest Paid", marker_color=INTEREST_COLOR,
        ),
    ])
    return _style(fig, title, barmode="stack", xaxis_title="Year", yaxis_title="Amount ($)")
