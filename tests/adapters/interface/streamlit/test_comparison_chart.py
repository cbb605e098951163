"""Tests for the simple vs compound comparison chart."""

from decimal import Decimal

from invest_calculator.adapters.interface.streamlit.comparison_chart import (
    build_comparison_rows,
    build_plotly_figure,
)
from invest_calculator.domain.models import DividendSettings, GrowthInput
from invest_calculator.domain.services.growth import compare_accrual_models


def _comparison(dividend: DividendSettings | None = None):
    return compare_accrual_models(
        GrowthInput(
            principal=Decimal("1000000"),
            periodic_deposit=Decimal("0"),
            duration_days=Decimal("365"),
            annual_rate_percent=Decimal("12"),
            dividend=dividend,
        )
    )


def test_build_comparison_rows_stacks_components_per_model() -> None:
    rows = build_comparison_rows(_comparison(), "KRW")

    assert [(row["model"], row["component"]) for row in rows] == [
        ("Simple", "Deposited"),
        ("Simple", "Interest"),
        ("Compound", "Deposited"),
        ("Compound", "Interest"),
    ]
    assert rows[1]["amount"] == 120000.0
    assert rows[1]["amount_label"] == "120,000 ₩"
    assert rows[3]["amount_label"] == "126,825 ₩"


def test_build_comparison_rows_adds_dividends() -> None:
    rows = build_comparison_rows(
        _comparison(DividendSettings(rate_percent=Decimal("5"))),
        "USD",
    )

    dividend_rows = [row for row in rows if row["component"] == "Dividends (net)"]
    assert len(rows) == 6
    assert [row["amount_label"] for row in dividend_rows] == [
        "50,000.00 $",
        "50,000.00 $",
    ]


def test_build_plotly_figure_uses_relative_bars() -> None:
    """One bar trace per component, stacked per model."""
    fig = build_plotly_figure(_comparison(), "KRW")

    assert [trace.name for trace in fig.data] == ["Deposited", "Interest"]
    assert list(fig.data[0].x) == ["Simple", "Compound"]
    assert fig.layout.barmode == "relative"
