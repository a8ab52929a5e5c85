"""Unit tests for period expander."""

from datetime import date

import pytest

from ucs_reports.application.services.period_expander import expand_periods, format_period


def test_format_period_zero_pads_month():
    """Test formatting a single-digit month."""
    assert format_period(date(2023, 1, 31)) == "202301"


def test_format_period_pads_year():
    """Test formatting a year below 1000."""
    assert format_period(date(987, 12, 1)) == "098712"


@pytest.mark.parametrize(
    "start_date,end_date",
    [
        (date(2023, 5, 1), date(2023, 5, 31)),
        (date(2023, 5, 17), date(2023, 5, 17)),
        (date(2024, 2, 29), date(2024, 2, 1)),
    ],
)
def test_same_month_yields_single_period(start_date, end_date):
    """Test that bounds in the same month give one period."""
    assert expand_periods(start_date, end_date) == [format_period(start_date)]


def test_month_rollover():
    """Test expansion across a year boundary."""
    periods = expand_periods(date(2023, 11, 15), date(2024, 2, 3))

    assert periods == ["202311", "202312", "202401", "202402"]


def test_ignores_day_of_month():
    """Test that an end day earlier than the start day still includes the end month."""
    periods = expand_periods(date(2023, 1, 31), date(2023, 3, 1))

    assert periods == ["202301", "202302", "202303"]


@pytest.mark.parametrize("months", [0, 1, 11, 12, 13, 25])
def test_n_months_apart_yields_n_plus_one_increasing_periods(months):
    """Test period count and ordering for ranges of various lengths."""
    start_date = date(2022, 7, 1)
    year, month = divmod(start_date.month - 1 + months, 12)
    end_date = date(start_date.year + year, month + 1, 1)

    periods = expand_periods(start_date, end_date)

    assert len(periods) == months + 1
    assert all(earlier < later for earlier, later in zip(periods, periods[1:]))
    assert periods[0] == "202207"
    assert periods[-1] == format_period(end_date)


def test_inverted_range_yields_nothing():
    """Test that an inverted range is not expanded."""
    assert expand_periods(date(2023, 5, 1), date(2023, 1, 1)) == []
