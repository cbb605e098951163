"""Tests for the Streamlit app module."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from invest_calculator.adapters.interface.streamlit import app
from invest_calculator.adapters.interface.streamlit.target_sync import TargetSync
from invest_calculator.domain.errors import InvalidInputError
from invest_calculator.domain.models import (
    DividendBreakdown,
    GrowthResult,
    PnLResult,
    PositionEvaluation,
    PositionState,
)
from invest_calculator.infrastructure.settings import CalculatorSettings


def _form_fields(**overrides) -> dict:
    fields = {
        "principal_text": "1,000,000",
        "deposit_text": "",
        "period_text": "2",
        "period_unit": "year",
        "rate_text": "5",
        "accrual_model": "compound",
        "include_dividend": False,
        "dividend_rate_text": "",
        "dividend_tax_text": "15.4",
    }
    fields.update(overrides)
    return fields


def test_build_growth_request_parses_form_text() -> None:
    """Separated numbers are parsed and blanks read as zero."""
    request = app._build_growth_request(**_form_fields())

    assert request.principal == Decimal("1000000")
    assert request.monthly_deposit == Decimal("0")
    assert request.period == Decimal("2")
    assert request.accrual_model == "compound"
    assert request.dividend_tax_rate_percent == Decimal("15.4")


def test_build_growth_request_rejects_garbage() -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        app._build_growth_request(**_form_fields(rate_text="five"))

    assert excinfo.value.field == "rate"


def test_compute_growth_uses_container_use_cases(monkeypatch) -> None:
    """_compute_growth should run the projection and the comparison."""
    calls: list[str] = []

    class _FakeUseCase:
        def __init__(self, name: str) -> None:
            self.name = name

        def execute(self, request):
            calls.append(self.name)
            return self.name

    monkeypatch.setattr(
        app,
        "build_calculate_investment_use_case",
        lambda: _FakeUseCase("result"),
    )
    monkeypatch.setattr(
        app,
        "build_compare_accrual_models_use_case",
        lambda: _FakeUseCase("comparison"),
    )

    result, comparison = app._compute_growth(object())

    assert (result, comparison) == ("result", "comparison")
    assert calls == ["result", "comparison"]


def test_prepare_donut_chart_data_splits_final_amount() -> None:
    """Components carry amount and share labels."""
    result = GrowthResult(
        total_deposited=Decimal("750"),
        total_interest=Decimal("200"),
        final_amount=Decimal("1000"),
        dividend=DividendBreakdown(
            total_dividend_gross=Decimal("60"),
            tax=Decimal("10"),
            dividend_net_reinvested=Decimal("50"),
        ),
    )

    data = app._prepare_donut_chart_data(result, "EUR")

    assert [row["category"] for row in data] == [
        "Deposited",
        "Interest",
        "Dividends (net)",
    ]
    assert data[0]["amount_label"] == "750.00 €"
    assert data[0]["share_label"] == "75.0%"
    assert data[2]["amount"] == 50.0


def test_prepare_donut_chart_data_skips_non_positive_components() -> None:
    """Negative interest is left out of the donut."""
    result = GrowthResult(
        total_deposited=Decimal("1300"),
        total_interest=Decimal("-100"),
        final_amount=Decimal("1212"),
    )

    data = app._prepare_donut_chart_data(result, "KRW")

    assert [row["category"] for row in data] == ["Deposited"]
    assert data[0]["share_label"] == "100.0%"


class _FakeStreamlit:
    def __init__(self, page: str = app.GROWTH_PAGE) -> None:
        self.config_kwargs = None
        self.title_text = None
        self.markdowns: list[str] = []
        self.session_state: dict = {}
        self.sidebar = SimpleNamespace(
            selectbox=lambda label, options: page,
        )

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def markdown(self, text: str):
        self.markdowns.append(text)

    def columns(self, count: int):
        return [MagicMock() for _ in range(count)]


@pytest.mark.parametrize(
    ("page", "expected"),
    [(app.GROWTH_PAGE, "growth"), (app.POSITION_PAGE, "position")],
)
def test_main_dispatches_selected_page(monkeypatch, page, expected) -> None:
    """main should render the page picked in the sidebar and log usage."""
    fake_st = _FakeStreamlit(page)
    usage_logger = MagicMock()
    rendered: list[tuple[str, CalculatorSettings]] = []
    settings = CalculatorSettings()

    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_settings", lambda: settings)
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)
    monkeypatch.setattr(
        app,
        "_render_growth_page",
        lambda s: rendered.append(("growth", s)),
    )
    monkeypatch.setattr(
        app,
        "_render_position_page",
        lambda s: rendered.append(("position", s)),
    )

    app.main()

    assert fake_st.config_kwargs["layout"] == "wide"
    assert fake_st.title_text == "Investment Calculator"
    assert rendered == [(expected, settings)]
    usage_logger.info.assert_called_once_with(f"Page viewed: {page}")


def _evaluation(amount: str, rate: str) -> PositionEvaluation:
    return PositionEvaluation(
        position=PositionState(
            average_cost=Decimal("100"),
            total_shares=Decimal("10"),
            total_cost=Decimal("1000"),
        ),
        pnl=PnLResult(
            exit_value=Decimal("1000") + Decimal(amount),
            cost_basis=Decimal("1000"),
            profit_loss_amount=Decimal(amount),
            profit_loss_rate_percent=Decimal(rate),
        ),
        sold_shares=Decimal("10"),
    )


@pytest.mark.parametrize(
    ("amount", "rate", "expected"),
    [
        ("200", "20", "### Profit/loss :red[+200 ₩] (:red[+20.00%])"),
        ("-150", "-15", "### Profit/loss :blue[-150 ₩] (:blue[-15.00%])"),
        ("0", "0", "### Profit/loss 0 ₩ (0.00%)"),
    ],
)
def test_render_position_result_colors_profit_and_loss(
    monkeypatch,
    amount,
    rate,
    expected,
) -> None:
    """Profits render in red, losses in blue, break-even uncolored."""
    fake_st = _FakeStreamlit()
    monkeypatch.setattr(app, "st", fake_st)

    app._render_position_result(_evaluation(amount, rate), "KRW")

    assert fake_st.markdowns == [expected]


def test_target_callbacks_sync_through_session_state(monkeypatch) -> None:
    """Editing the price derives the rate from the stored average cost."""
    fake_st = _FakeStreamlit()
    fake_st.session_state.update(
        {"average_cost": Decimal("100"), "target_price_text": "120"}
    )
    monkeypatch.setattr(app, "st", fake_st)

    app._on_target_price_change()
    sync = fake_st.session_state["target_sync"]
    app._sync_target_widgets(sync)

    assert sync.target_rate == Decimal("20.00")
    assert fake_st.session_state["target_rate_text"] == "20.00"

    fake_st.session_state["target_rate_text"] = "50"
    app._on_target_rate_change()
    app._sync_target_widgets(sync)

    assert sync.target_price == Decimal("150")
    assert fake_st.session_state["target_price_text"] == "150"


def test_target_callback_ignores_unparseable_text(monkeypatch) -> None:
    """Garbage in the field leaves the synced values untouched."""
    fake_st = _FakeStreamlit()
    fake_st.session_state.update(
        {
            "average_cost": Decimal("100"),
            "target_price_text": "abc",
            "target_sync": TargetSync(),
        }
    )
    monkeypatch.setattr(app, "st", fake_st)

    app._on_target_price_change()

    assert fake_st.session_state["target_sync"] == TargetSync()
