"""Amortization page: year-by-year principal/interest split for each active scenario."""

import dash
from dash import Input, Output, callback, dcc, html

from mortgage_analyzer.config import settings
from mortgage_analyzer.dashboard import charts
from mortgage_analyzer.dashboard.components import schedule_table
from mortgage_analyzer.dashboard.controls import CARD_STYLE, results_from_store
from mortgage_analyzer.engine.schedule import display_schedule, schedule_year_count

dash.register_page(__name__, path="/amortization", name="Amortization")

layout = html.Div(id="amortization-container")


def scenario_section(sr):
    if not sr.result.feasible:
        return html.Div([
            html.H3(sr.name, style={"color": sr.color, "marginTop": "0"}),
            html.P("Nothing to amortize: the down payment covers the full house price."),
        ], style=CARD_STYLE)

    entries = display_schedule(sr.result)
    children = [
        html.H3(f"{sr.name} - Year-by-Year Breakdown", style={"color": sr.color, "marginTop": "0"}),
        dcc.Graph(figure=charts.schedule_bar(entries, "Principal vs Interest by Year")),
        html.Div(schedule_table(entries), style={"overflowX": "auto"}),
    ]
    if schedule_year_count(sr.result) > settings.schedule_display_years:
        children.append(html.P(
            f"Showing first {settings.schedule_display_years - 1} years. "
            f"Full term: {sr.result.effective_term_years} years.",
            style={"fontSize": "0.85rem", "color": "#64748b"},
        ))
    return html.Div(children, style=CARD_STYLE)


@callback(Output("amortization-container", "children"), Input("inputs-store", "data"))
def update_amortization(data):
    _, results = results_from_store(data)
    return [scenario_section(sr) for sr in results]
