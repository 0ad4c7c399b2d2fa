"""Shared base-parameter controls: price and down payment sliders, scenario picker.

The controls sit above every page and publish their state to the global
`inputs-store`; pages read the store and recompute through the memoized resolver.
"""

from decimal import Decimal

from dash import Input, Output, State, callback, dcc, html

from mortgage_analyzer.config import settings
from mortgage_analyzer.engine.resolver import resolve_scenarios
from mortgage_analyzer.models.results import ScenarioResult
from mortgage_analyzer.models.scenario import PRESET_SCENARIOS, LoanInputs

CARD_STYLE = {
    "backgroundColor": "white",
    "border": "1px solid #e2e8f0",
    "borderRadius": "12px",
    "padding": "1.5rem",
    "marginBottom": "1.5rem",
    "boxShadow": "0 2px 6px rgba(0,0,0,0.05)",
}


def default_store() -> dict:
    return {
        "house_price": float(settings.default_house_price),
        "down_payment_pct": float(settings.default_down_payment_pct),
        "active": list(settings.default_active_scenarios),
    }


def next_active_ids(selected: list[int] | None, previous: list[int] | None) -> list[int]:
    """New active scenario set; the last active scenario cannot be removed."""
    if selected:
        return sorted(selected)
    return sorted(previous or settings.default_active_scenarios)


def results_from_store(data: dict | None) -> tuple[LoanInputs, tuple[ScenarioResult, ...]]:
    data = data or default_store()
    inputs = LoanInputs(
        house_price=Decimal(str(data["house_price"])),
        down_payment_pct=Decimal(str(data["down_payment_pct"])),
    )
    return inputs, resolve_scenarios(inputs, data["active"])


def _scenario_option(scenario) -> dict:
    return {
        "label": html.Span([
            html.Span(style={
                "display": "inline-block", "width": "12px", "height": "12px",
                "borderRadius": "50%", "backgroundColor": scenario.color,
                "marginRight": "0.4rem",
            }),
            html.Strong(scenario.name),
            html.Span(f"  {scenario.term_label}", style={"color": "#64748b", "fontSize": "0.8rem"}),
        ]),
        "value": scenario.id,
    }


def _price_label(price, down_pct) -> str:
    down = price * down_pct / 100
    return f"House Price: ${price:,.0f}  |  Standard Down Payment: {down_pct}% (${down:,.0f})"


def controls_layout() -> html.Div:
    defaults = default_store()
    return html.Div([
        html.Div([
            html.H3("Base Parameters", style={"marginTop": "0"}),
            html.Div(
                _price_label(defaults["house_price"], defaults["down_payment_pct"]),
                id="base-params-label",
                style={"fontWeight": "bold", "marginBottom": "0.75rem"},
            ),
            html.Label("House Price"),
            dcc.Slider(
                id="house-price-slider",
                min=settings.house_price_min,
                max=settings.house_price_max,
                step=settings.house_price_step,
                value=defaults["house_price"],
                marks=None,
                tooltip={"placement": "bottom"},
            ),
            html.Label("Standard Down Payment (%)"),
            dcc.Slider(
                id="down-payment-slider",
                min=settings.down_payment_min,
                max=settings.down_payment_max,
                step=settings.down_payment_step,
                value=defaults["down_payment_pct"],
                marks=None,
                tooltip={"placement": "bottom"},
            ),
        ], style=CARD_STYLE),
        html.Div([
            html.H3("Select Scenarios to Compare", style={"marginTop": "0"}),
            dcc.Checklist(
                id="scenario-checklist",
                options=[_scenario_option(s) for s in PRESET_SCENARIOS],
                value=defaults["active"],
                labelStyle={"display": "block", "padding": "0.35rem 0"},
            ),
        ], style=CARD_STYLE),
    ])


@callback(
    [
        Output("inputs-store", "data"),
        Output("scenario-checklist", "value"),
        Output("base-params-label", "children"),
    ],
    [
        Input("house-price-slider", "value"),
        Input("down-payment-slider", "value"),
        Input("scenario-checklist", "value"),
    ],
    State("inputs-store", "data"),
)
def update_inputs(house_price, down_pct, selected, stored):
    previous = (stored or default_store())["active"]
    active = next_active_ids(selected, previous)
    data = {"house_price": house_price, "down_payment_pct": down_pct, "active": active}
    return data, active, _price_label(house_price, down_pct)
