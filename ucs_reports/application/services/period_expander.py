"""Monthly period expansion for report date ranges."""

from ucs_reports.domain.types import DateBound, PeriodId


def format_period(value: DateBound) -> PeriodId:
    """Format a date as its monthly period id (YYYYMM)."""
    return f"{value.year:04d}{value.month:02d}"


def expand_periods(start_date: DateBound, end_date: DateBound) -> list[PeriodId]:
    """Expand a date range into monthly period ids, both ends inclusive.

    Only year and month of each bound are used. Callers must ensure
    start_date <= end_date; an inverted range yields an empty list.
    """
    year, month = start_date.year, start_date.month
    last = (end_date.year, end_date.month)

    periods: list[PeriodId] = []
    while (year, month) <= last:
        periods.append(f"{year:04d}{month:02d}")
        if month == 12:
            year, month = year + 1, 1
        else:
            month += 1

    return periods
