"""Scenario comparison page: overview table, payment/cost bars, equity curves."""

import dash
from dash import Input, Output, callback, dcc, html

from mortgage_analyzer.dashboard import charts
from mortgage_analyzer.dashboard.components import comparison_table, notes_panel, strategic_panel
from mortgage_analyzer.dashboard.controls import CARD_STYLE, results_from_store
from mortgage_analyzer.engine.aggregator import (
    balance_timeline,
    best_worst_analysis,
    build_schedules,
    comparison_rows,
    equity_timeline,
)

dash.register_page(__name__, path="/", name="Compare")

VIEWS = [
    {"label": "Overview", "value": "overview"},
    {"label": "Payments", "value": "payments"},
    {"label": "Costs", "value": "costs"},
    {"label": "Equity", "value": "equity"},
]

layout = html.Div([
    dcc.Tabs(id="view-tabs", value="overview", children=[
        dcc.Tab(label=v["label"], value=v["value"]) for v in VIEWS
    ], style={"marginBottom": "1.5rem"}),
    html.Div(id="view-container"),
    html.Div(id="strategic-container"),
])


def _card(title, *children):
    return html.Div([html.H3(title, style={"marginTop": "0"}), *children], style=CARD_STYLE)


def render_view(view, results):
    if view == "payments":
        return _card("Monthly Payment Comparison", dcc.Graph(figure=charts.payment_bar(comparison_rows(results))))
    if view == "costs":
        rows = comparison_rows(results)
        return html.Div([
            _card("Total Cost Breakdown", dcc.Graph(figure=charts.cost_breakdown_bar(rows))),
            _card("Interest Cost Comparison", dcc.Graph(figure=charts.interest_bar(rows))),
        ])
    if view == "equity":
        schedules = build_schedules(results)
        return html.Div([
            _card("Equity Buildup Over Time", dcc.Graph(figure=charts.timeline_chart(
                equity_timeline(results, schedules=schedules), results, "Equity Built", "Equity Built ($)",
            ))),
            _card("Remaining Balance Over Time", dcc.Graph(figure=charts.timeline_chart(
                balance_timeline(results, schedules=schedules), results, "Remaining Balance", "Remaining Balance ($)",
            ))),
        ])
    return _card("Complete Scenario Comparison", html.Div(comparison_table(results), style={"overflowX": "auto"}))


@callback(
    [Output("view-container", "children"), Output("strategic-container", "children")],
    [Input("inputs-store", "data"), Input("view-tabs", "value")],
)
def update_view(data, view):
    inputs, results = results_from_store(data)
    return render_view(view, results), html.Div([
        strategic_panel(best_worst_analysis(results)),
        notes_panel(inputs.down_payment_pct),
    ])
