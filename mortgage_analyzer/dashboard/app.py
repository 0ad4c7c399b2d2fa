"""Plotly Dash application, multi-page layout."""

import logging

from dash import Dash, dcc, html, page_container

from mortgage_analyzer.config import settings
from mortgage_analyzer.dashboard.controls import controls_layout, default_store

logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="Mortgage Strategy Analyzer",
)

app.layout = html.Div([
    # Global session store: base parameters shared across pages
    dcc.Store(id="inputs-store", storage_type="session", data=default_store()),

    # Navigation
    html.Nav([
        html.Div([
            html.H1("Mortgage Strategy Analyzer", style={"fontSize": "1.5rem", "margin": "0"}),
            html.Div([
                dcc.Link("Compare", href="/", style={"marginRight": "1rem", "color": "white"}),
                dcc.Link("Amortization", href="/amortization", style={"marginRight": "1rem", "color": "white"}),
            ]),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1200px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    html.Div([
        html.P(
            "Comparison of seven mortgage scenarios. All figures show Principal and Interest only.",
            style={"color": "#475569"},
        ),
        controls_layout(),
        page_container,
    ], style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"}),
], style={"backgroundColor": "#f8fafc", "minHeight": "100vh"})


def main() -> None:
    app.run(debug=settings.debug, port=settings.dashboard_port)


if __name__ == "__main__":
    main()
