"""Tests for the target price/rate synchronization."""

from decimal import Decimal

from invest_calculator.adapters.interface.streamlit.target_sync import TargetSync


def test_edit_price_derives_rounded_rate() -> None:
    """A price edit derives the rate with two decimals."""
    sync = TargetSync()

    sync.edit_price(Decimal("90"), Decimal("100"))

    assert sync.target_price == Decimal("100")
    assert sync.target_rate == Decimal("11.11")
    assert sync.last_edited == "price"


def test_edit_rate_derives_whole_price() -> None:
    """A rate edit derives the price in whole units, rounding half up."""
    sync = TargetSync()

    sync.edit_rate(Decimal("90"), Decimal("12.5"))

    assert sync.target_rate == Decimal("12.5")
    assert sync.target_price == Decimal("101")
    assert sync.last_edited == "rate"


def test_round_trip_returns_the_starting_target() -> None:
    """Price to rate and back lands on the same price."""
    sync = TargetSync()

    sync.edit_price(Decimal("100"), Decimal("120"))
    sync.edit_rate(Decimal("100"), sync.target_rate)

    assert sync.target_rate == Decimal("20.00")
    assert sync.target_price == Decimal("120")


def test_edits_without_average_cost_only_store_the_value() -> None:
    """Nothing is derived until there is a purchase side."""
    sync = TargetSync()

    sync.edit_price(Decimal("0"), Decimal("120"))

    assert sync.target_price == Decimal("120")
    assert sync.target_rate is None


def test_refresh_follows_the_last_edited_field() -> None:
    """A new average cost re-derives the dependent field only."""
    by_price = TargetSync()
    by_price.edit_price(Decimal("100"), Decimal("120"))
    by_price.refresh(Decimal("80"))

    by_rate = TargetSync()
    by_rate.edit_rate(Decimal("100"), Decimal("20"))
    by_rate.refresh(Decimal("200"))

    assert by_price.target_price == Decimal("120")
    assert by_price.target_rate == Decimal("50.00")
    assert by_rate.target_rate == Decimal("20")
    assert by_rate.target_price == Decimal("240")


def test_refresh_and_reset_on_empty_sync() -> None:
    """An untouched sync stays empty; reset clears everything."""
    sync = TargetSync()
    sync.refresh(Decimal("100"))
    assert sync == TargetSync()

    sync.edit_rate(Decimal("100"), Decimal("5"))
    sync.reset()

    assert sync == TargetSync()
