"""Streamlit calculator entry point."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from invest_calculator.adapters.formatting import (
    format_currency,
    format_percent,
    format_shares,
    format_signed_currency,
)
from invest_calculator.adapters.interface.streamlit.comparison_chart import (
    MODEL_LABELS,
    build_plotly_figure,
)
from invest_calculator.adapters.interface.streamlit.target_sync import TargetSync
from invest_calculator.application.use_cases.calculate_investment import (
    GrowthRequest,
)
from invest_calculator.application.use_cases.evaluate_position import (
    EvaluatePositionUseCase,
)
from invest_calculator.domain.errors import CalculatorError
from invest_calculator.domain.models import (
    AccrualComparison,
    GrowthResult,
    Lot,
    PositionEvaluation,
    PositionState,
)
from invest_calculator.domain.services.normalization import (
    parse_amount_text,
    parse_quantity_text,
)
from invest_calculator.infrastructure.container import (
    build_calculate_investment_use_case,
    build_compare_accrual_models_use_case,
    build_evaluate_position_use_case,
    build_settings,
)
from invest_calculator.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from invest_calculator.infrastructure.settings import CalculatorSettings

GROWTH_PAGE = "Investment Growth"
POSITION_PAGE = "Position P&L"
PERIOD_UNIT_LABELS = {"year": "Years", "month": "Months", "day": "Days"}
MAX_SPLIT_LOTS = 10


@st.cache_data(show_spinner=False)
def _load_settings() -> CalculatorSettings:
    """Cached wrapper around build_settings for Streamlit sessions."""
    return build_settings()


def _build_growth_request(
    *,
    principal_text: str,
    deposit_text: str,
    period_text: str,
    period_unit: str,
    rate_text: str,
    accrual_model: str,
    include_dividend: bool,
    dividend_rate_text: str,
    dividend_tax_text: str,
) -> GrowthRequest:
    """Parse growth form fields into a request.

    Raises:
        InvalidInputError: If a field is not a number.
    """
    return GrowthRequest(
        period=parse_amount_text(period_text, field="period"),
        period_unit=period_unit,
        principal=parse_amount_text(principal_text, field="principal"),
        monthly_deposit=parse_amount_text(deposit_text, field="deposit"),
        rate_percent=parse_amount_text(rate_text, field="rate"),
        accrual_model=accrual_model,
        include_dividend=include_dividend,
        dividend_rate_percent=parse_amount_text(
            dividend_rate_text,
            field="dividend_rate",
        ),
        dividend_tax_rate_percent=parse_amount_text(
            dividend_tax_text,
            field="dividend_tax_rate",
        ),
    )


def _compute_growth(
    request: GrowthRequest,
) -> tuple[GrowthResult, AccrualComparison]:
    """Run the selected projection and the model comparison."""
    result = build_calculate_investment_use_case().execute(request)
    comparison = build_compare_accrual_models_use_case().execute(request)
    return result, comparison


def _prepare_donut_chart_data(
    result: GrowthResult,
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data splitting the final amount by component.

    Negative components (possible with dividend reinvestment when the
    month count exceeds the reinvested deposits) are left out of the donut.

    Args:
        result: Growth result to split.
        currency_code: Currency used for labels.

    Returns:
        Altair-ready chart rows.
    """
    components = [
        ("Deposited", result.total_deposited),
        ("Interest", result.total_interest),
    ]
    if result.dividend is not None:
        components.append(
            ("Dividends (net)", result.dividend.dividend_net_reinvested)
        )
    positive = [(name, amount) for name, amount in components if amount > 0]
    total = sum((amount for _, amount in positive), start=Decimal("0"))
    data: list[dict[str, str | float]] = []
    for name, amount in positive:
        share = (amount / total) * Decimal("100") if total else Decimal("0")
        data.append(
            {
                "category": name,
                "amount": float(amount),
                "amount_label": format_currency(amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _render_composition_chart(
    result: GrowthResult,
    currency_code: str,
    chart_size: int = 280,
    palette: Sequence[str] | None = None,
) -> None:
    """Render a donut chart of the final amount composition."""
    data = _prepare_donut_chart_data(result, currency_code)
    if not data:
        st.info("Nothing to chart for this projection.")
        return
    palette_scale = list(palette or ["#457b9d", "#2e7d32", "#f4a261"])
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=palette_scale),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(stroke=None)
    st.altair_chart(chart, width="stretch")


def _render_growth_result(
    result: GrowthResult,
    comparison: AccrualComparison,
    currency_code: str,
) -> None:
    """Render the projection, its composition and the model comparison."""
    model_label = MODEL_LABELS[result.accrual_model]
    st.subheader(f"Result ({model_label} interest)")
    deposited_col, interest_col, final_col = st.columns(3)
    deposited_col.metric(
        "Total deposited",
        format_currency(result.total_deposited, currency_code),
    )
    interest_col.metric(
        "Total interest (pre-tax)",
        format_currency(result.total_interest, currency_code),
    )
    final_col.metric(
        f"Final amount ({model_label})",
        format_currency(result.final_amount, currency_code),
    )
    if result.dividend is not None:
        gross_col, tax_col, net_col = st.columns(3)
        gross_col.metric(
            "Dividends (gross)",
            format_currency(result.dividend.total_dividend_gross, currency_code),
        )
        tax_col.metric(
            "Dividend tax",
            format_currency(result.dividend.tax, currency_code),
        )
        net_col.metric(
            "Dividends reinvested (net)",
            format_currency(result.dividend.dividend_net_reinvested, currency_code),
        )
        if result.dividend.total_dividend_gross == 0:
            st.caption("Dividends are paid once per full year of duration.")

    chart_col, compare_col = st.columns(2)
    with chart_col:
        st.subheader("Composition")
        _render_composition_chart(result, currency_code)
    with compare_col:
        st.subheader("Simple vs compound")
        st.plotly_chart(
            build_plotly_figure(comparison, currency_code),
            width="stretch",
        )
        if comparison.better_model is None:
            st.caption("Both models end at the same amount.")
        else:
            st.caption(
                f"{MODEL_LABELS[comparison.better_model]} ends higher by "
                f"{format_currency(comparison.difference, currency_code)}."
            )


def _render_growth_page(settings: CalculatorSettings) -> None:
    """Render the growth form and its result."""
    with st.form("growth_form"):
        principal_col, deposit_col = st.columns(2)
        principal_text = principal_col.text_input(
            "Principal",
            placeholder="1,000,000",
        )
        deposit_text = deposit_col.text_input(
            "Monthly deposit",
            placeholder="100,000",
        )
        period_col, unit_col, rate_col = st.columns(3)
        period_text = period_col.text_input("Duration", value="1")
        period_unit = unit_col.selectbox(
            "Unit",
            options=list(PERIOD_UNIT_LABELS),
            format_func=PERIOD_UNIT_LABELS.get,
        )
        rate_text = rate_col.text_input("Annual return (%)", value="5")
        accrual_model = st.radio(
            "Accrual model",
            options=list(MODEL_LABELS),
            index=list(MODEL_LABELS).index(settings.accrual_model),
            format_func=MODEL_LABELS.get,
            horizontal=True,
        )
        include_dividend = st.checkbox("Reinvest annual dividends")
        dividend_col, tax_col = st.columns(2)
        dividend_rate_text = dividend_col.text_input("Dividend yield (%)", value="")
        dividend_tax_text = tax_col.text_input(
            "Dividend tax (%)",
            value=str(settings.dividend_tax_rate),
        )
        submitted = st.form_submit_button("Calculate")

    if not submitted:
        return
    try:
        request = _build_growth_request(
            principal_text=principal_text,
            deposit_text=deposit_text,
            period_text=period_text,
            period_unit=period_unit,
            rate_text=rate_text,
            accrual_model=accrual_model,
            include_dividend=include_dividend,
            dividend_rate_text=dividend_rate_text,
            dividend_tax_text=dividend_tax_text,
        )
        result, comparison = _compute_growth(request)
    except CalculatorError as exc:
        get_app_logger().warning(f"Growth form rejected: {exc}")
        st.error(str(exc))
        return
    _render_growth_result(result, comparison, settings.currency_code)


def _lot_inputs(kind: str, count: int) -> list[Lot]:
    """Render price/quantity inputs for ``count`` lots, then parse them.

    Raises:
        InvalidInputError: If a rendered field is not a number.
    """
    raw_lots: list[tuple[str, str]] = []
    label = "Buy" if kind == "buy" else "Sell"
    for index in range(1, count + 1):
        price_col, qty_col = st.columns(2)
        price_text = price_col.text_input(
            f"[{label} {index}] Price",
            key=f"{kind}_price_{index}",
        )
        qty_text = qty_col.text_input(
            f"[{label} {index}] Quantity",
            key=f"{kind}_qty_{index}",
        )
        raw_lots.append((price_text, qty_text))
    return [
        Lot(
            price=parse_amount_text(price_text, field=kind),
            quantity=parse_quantity_text(qty_text, field=kind),
        )
        for price_text, qty_text in raw_lots
    ]


def _target_sync() -> TargetSync:
    if "target_sync" not in st.session_state:
        st.session_state["target_sync"] = TargetSync()
    return st.session_state["target_sync"]


def _sync_target_widgets(sync: TargetSync) -> None:
    """Copy the synchronized values into the target widgets' state."""
    if sync.target_price is not None:
        st.session_state["target_price_text"] = f"{sync.target_price:,.0f}"
    if sync.target_rate is not None:
        st.session_state["target_rate_text"] = f"{sync.target_rate:.2f}"


def _on_target_price_change() -> None:
    try:
        price = parse_amount_text(st.session_state.get("target_price_text"))
    except CalculatorError:
        return
    _target_sync().edit_price(st.session_state.get("average_cost", Decimal("0")), price)


def _on_target_rate_change() -> None:
    try:
        rate = parse_amount_text(st.session_state.get("target_rate_text"))
    except CalculatorError:
        return
    _target_sync().edit_rate(st.session_state.get("average_cost", Decimal("0")), rate)


def _render_position_result(
    evaluation: PositionEvaluation,
    currency_code: str,
) -> None:
    """Render the settlement, profit in red and loss in blue."""
    pnl = evaluation.pnl
    amount = format_signed_currency(pnl.profit_loss_amount, currency_code)
    rate = format_percent(pnl.profit_loss_rate_percent)
    if pnl.is_profit:
        st.markdown(f"### Profit/loss :red[{amount}] (:red[{rate}])")
    elif pnl.is_loss:
        st.markdown(f"### Profit/loss :blue[{amount}] (:blue[{rate}])")
    else:
        st.markdown(f"### Profit/loss {amount} ({rate})")
    exit_col, basis_col, sold_col = st.columns(3)
    exit_col.metric("Exit value", format_currency(pnl.exit_value, currency_code))
    basis_col.metric("Cost basis", format_currency(pnl.cost_basis, currency_code))
    sold_col.metric("Shares sold", format_shares(evaluation.sold_shares))


def _render_position_summary(position: PositionState, currency_code: str) -> None:
    average_col, shares_col, cost_col = st.columns(3)
    average_col.metric(
        "Average cost",
        format_currency(position.average_cost, currency_code),
    )
    shares_col.metric("Total shares", format_shares(position.total_shares))
    cost_col.metric("Total cost", format_currency(position.total_cost, currency_code))


def _render_position_page(settings: CalculatorSettings) -> None:
    """Render the position inputs, synced targets and settlement."""
    currency_code = settings.currency_code
    buy_count = st.number_input(
        "Split buys",
        min_value=0,
        max_value=MAX_SPLIT_LOTS,
        value=0,
        step=1,
    )
    sell_count = st.number_input(
        "Split sells",
        min_value=0,
        max_value=MAX_SPLIT_LOTS,
        value=0,
        step=1,
    )

    position = None
    purchase: dict = {}
    sell_lots: list[Lot] = []
    try:
        if buy_count > 0:
            purchase = {"buy_lots": _lot_inputs("buy", int(buy_count))}
        else:
            amount_col, price_col = st.columns(2)
            amount_text = amount_col.text_input("Amount invested")
            price_text = price_col.text_input("Purchase price")
            purchase = {
                "investment_amount": parse_amount_text(amount_text, field="amount"),
                "purchase_price": parse_amount_text(price_text, field="price"),
            }
        position = EvaluatePositionUseCase.build_position(**purchase)
    except CalculatorError as exc:
        st.caption(str(exc))
    try:
        sell_lots = _lot_inputs("sell", int(sell_count))
    except CalculatorError as exc:
        st.caption(str(exc))

    split_sell = sell_count > 0
    average_cost = position.average_cost if position else Decimal("0")
    st.session_state["average_cost"] = average_cost
    sync = _target_sync()
    sync.refresh(average_cost)
    _sync_target_widgets(sync)

    if position is not None:
        _render_position_summary(position, currency_code)

    target_price_col, target_rate_col = st.columns(2)
    target_price_col.text_input(
        "Target price",
        key="target_price_text",
        on_change=_on_target_price_change,
        disabled=split_sell,
    )
    target_rate_col.text_input(
        "Target rate (%)",
        key="target_rate_text",
        on_change=_on_target_rate_change,
        disabled=split_sell,
    )

    if not st.button("Calculate P&L"):
        return
    if position is None:
        st.error("Enter the purchase details and a target price.")
        return
    if split_sell and not sell_lots:
        st.error("Enter a price and quantity for every sell lot.")
        return
    try:
        evaluation = build_evaluate_position_use_case().execute(
            **purchase,
            target_price=sync.target_price,
            sell_lots=sell_lots or None,
        )
    except CalculatorError as exc:
        get_app_logger().warning(f"Position form rejected: {exc}")
        st.error(str(exc))
        return
    _render_position_result(evaluation, currency_code)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Investment Calculator", layout="wide")
    st.title("Investment Calculator")

    settings = _load_settings()
    page = st.sidebar.selectbox("Page", [GROWTH_PAGE, POSITION_PAGE])
    get_usage_logger().info(f"Page viewed: {page}")

    if page == GROWTH_PAGE:
        _render_growth_page(settings)
    else:
        _render_position_page(settings)


if __name__ == "__main__":  # pragma: no cover
    main()
