"""Simple vs compound comparison chart for the Streamlit UI.

Pure transformations from an ``AccrualComparison`` to chart rows and a
Plotly figure; the UI only renders the figure.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from invest_calculator.adapters.formatting import format_currency
from invest_calculator.domain.models import AccrualComparison, GrowthResult

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


MODEL_LABELS = {
    "simple": "Simple",
    "compound": "Compound",
}
COMPONENT_COLORS = {
    "Deposited": "#457b9d",
    "Interest": "#2e7d32",
    "Dividends (net)": "#f4a261",
}


def build_comparison_rows(
    comparison: AccrualComparison,
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Return one stacked-bar row per model and component.

    Args:
        comparison: Results under both accrual models.
        currency_code: Currency used for hover labels.

    Returns:
        Rows with ``model``, ``component``, ``amount`` and ``amount_label``.
    """
    rows: list[dict[str, str | float]] = []
    for model, result in (
        ("simple", comparison.simple),
        ("compound", comparison.compound),
    ):
        for component, amount in _components(result):
            rows.append(
                {
                    "model": MODEL_LABELS[model],
                    "component": component,
                    "amount": float(amount),
                    "amount_label": format_currency(amount, currency_code),
                }
            )
    return rows


def build_plotly_figure(
    comparison: AccrualComparison,
    currency_code: str,
) -> "go.Figure":
    """Build a stacked bar chart of both final amounts.

    Args:
        comparison: Results under both accrual models.
        currency_code: Currency used for labels.

    Returns:
        A Plotly figure.
    """
    import plotly.graph_objects as go

    rows = build_comparison_rows(comparison, currency_code)
    fig = go.Figure()
    for component, color in COMPONENT_COLORS.items():
        component_rows = [row for row in rows if row["component"] == component]
        if not component_rows:
            continue
        fig.add_trace(
            go.Bar(
                name=component,
                x=[row["model"] for row in component_rows],
                y=[row["amount"] for row in component_rows],
                text=[row["amount_label"] for row in component_rows],
                hoverinfo="name+text",
                marker_color=color,
            )
        )
    fig.update_layout(
        barmode="relative",
        margin=dict(l=8, r=8, t=8, b=8),
        height=360,
        legend=dict(orientation="h"),
    )
    return fig


def _components(result: GrowthResult) -> list[tuple[str, Decimal]]:
    components = [
        ("Deposited", result.total_deposited),
        ("Interest", result.total_interest),
    ]
    if result.dividend is not None:
        components.append(
            ("Dividends (net)", result.dividend.dividend_net_reinvested)
        )
    return components


__all__ = ["build_comparison_rows", "build_plotly_figure"]
