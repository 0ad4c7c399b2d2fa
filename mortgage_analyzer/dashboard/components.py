"""Table and panel builders shared by dashboard pages."""

from collections.abc import Sequence

from dash import html

from mortgage_analyzer.models.results import BestWorstAnalysis, ScenarioResult, ScheduleEntry

TH_STYLE = {"textAlign": "right", "padding": "0.6rem 0.9rem", "backgroundColor": "#f1f5f9"}
TD_STYLE = {"textAlign": "right", "padding": "0.6rem 0.9rem", "borderBottom": "1px solid #e2e8f0"}


def _dollar(v) -> str:
    return f"${float(v):,.0f}"


def _th(text, align="right"):
    return html.Th(text, style={**TH_STYLE, "textAlign": align})


def _td(content, align="right", **style):
    return html.Td(content, style={**TD_STYLE, "textAlign": align, **style})


def comparison_table(results: Sequence[ScenarioResult]) -> html.Table:
    header = html.Tr([
        _th("Scenario", "left"), _th("Term"), _th("Rate"), _th("Principal"),
        _th("Monthly P&I"), _th("Total Paid"), _th("Total Interest"),
    ])
    rows = []
    for sr in results:
        term = [f"{sr.scenario.term_years}yr"]
        if sr.scenario.accelerated:
            term.append(html.Span(
                f" → {sr.result.effective_term_years}yr",
                style={"fontSize": "0.75rem", "color": "#64748b"},
            ))
        rows.append(html.Tr([
            _td(sr.name, "left", color=sr.color, fontWeight="500"),
            _td(term),
            _td(f"{sr.scenario.annual_rate}%"),
            _td(_dollar(sr.result.principal), color="#475569"),
            _td(_dollar(sr.result.monthly_payment), fontWeight="600"),
            _td(_dollar(sr.result.total_paid)),
            _td(_dollar(sr.result.total_interest), color="#dc2626", fontWeight="600"),
        ]))
    return html.Table(
        [html.Thead(header), html.Tbody(rows)],
        style={"width": "100%", "borderCollapse": "collapse", "fontSize": "0.9rem"},
    )


def schedule_table(entries: Sequence[ScheduleEntry]) -> html.Table:
    header = html.Tr([
        _th("Year", "left"), _th("Principal Paid"), _th("Interest Paid"),
        _th("Total Paid"), _th("Balance"),
    ])
    rows = [
        html.Tr([
            _td(e.year, "left"),
            _td(_dollar(e.principal_paid), color="#16a34a"),
            _td(_dollar(e.interest_paid), color="#dc2626"),
            _td(_dollar(e.total_paid)),
            _td(_dollar(e.balance), fontWeight="600"),
        ])
        for e in entries
    ]
    return html.Table(
        [html.Thead(header), html.Tbody(rows)],
        style={"width": "100%", "borderCollapse": "collapse", "fontSize": "0.85rem"},
    )


def _stat_card(label, name, color, detail, detail_color="#0f172a"):
    return html.Div([
        html.P(label, style={"color": "#475569", "margin": "0 0 0.25rem"}),
        html.P(name, style={"fontWeight": "bold", "fontSize": "1.1rem", "color": color, "margin": "0"}),
        html.P(detail, style={"fontWeight": "600", "color": detail_color, "margin": "0"}),
    ], style={"backgroundColor": "white", "borderRadius": "8px", "padding": "1rem", "flex": "1", "minWidth": "220px"})


def strategic_panel(analysis: BestWorstAnalysis | None) -> html.Div:
    if analysis is None:
        return html.Div()
    difference = _dollar(analysis.cost_difference)
    return html.Div([
        html.H3("Strategic Analysis", style={"marginTop": "0", "color": "#1e3a8a"}),
        html.Div([
            _stat_card(
                "Lowest Monthly Payment", analysis.lowest_payment.name, analysis.lowest_payment.color,
                f"{_dollar(analysis.lowest_payment.result.monthly_payment)}/month",
            ),
            _stat_card(
                "Lowest Total Cost", analysis.lowest_cost.name, analysis.lowest_cost.color,
                f"{_dollar(analysis.lowest_cost.result.total_interest)} in interest", "#16a34a",
            ),
            _stat_card(
                "Highest Total Cost", analysis.highest_cost.name, analysis.highest_cost.color,
                f"{_dollar(analysis.highest_cost.result.total_interest)} in interest", "#dc2626",
            ),
            _stat_card(
                "Cost Difference (Best vs Worst)", difference, "#dc2626",
                "Potential savings by choosing optimal strategy", "#64748b",
            ),
        ], style={"display": "flex", "flexWrap": "wrap", "gap": "1rem"}),
        html.P([
            "The lowest monthly payment looks attractive but costs ",
            html.Strong(difference, style={"color": "#dc2626"}),
            " more in total interest than the most efficient option. A shorter term at a lower "
            "rate builds equity faster while paying substantially less interest.",
        ], style={"backgroundColor": "white", "borderRadius": "8px", "padding": "1rem", "marginTop": "1rem"}),
    ], style={
        "background": "linear-gradient(135deg, #eff6ff, #eef2ff)",
        "border": "2px solid #bfdbfe",
        "borderRadius": "12px",
        "padding": "1.5rem",
        "marginBottom": "1.5rem",
    })


def notes_panel(down_payment_pct) -> html.Div:
    return html.Div([
        html.P("Important Notes", style={"fontWeight": "bold", "color": "white"}),
        html.Ul([
            html.Li("All calculations show Principal and Interest only"),
            html.Li("Actual monthly payments include property taxes, insurance, and PMI "
                    "(required for down payments below 20%)"),
            html.Li(f"Scenario 7 uses 3.5% down payment instead of the standard {down_payment_pct}%"),
            html.Li("Accelerated scenarios show the effect of making higher payments on longer-term loans"),
        ]),
    ], style={
        "backgroundColor": "#1e293b",
        "color": "#cbd5e1",
        "borderRadius": "12px",
        "padding": "1.5rem",
        "fontSize": "0.85rem",
    })
