"""Build validated analytics queries from user selections."""

from datetime import date, datetime

import structlog

from ucs_reports.application.services.period_expander import expand_periods
from ucs_reports.domain.entities import ReportQuery, Selection
from ucs_reports.domain.enums import SelectionField
from ucs_reports.domain.errors import SelectionValidationError

logger = structlog.get_logger()


def build_query(selection: Selection) -> ReportQuery:
    """Validate selection and build the report query."""
    missing = _missing_fields(selection)
    if missing:
        names = ", ".join(field.value for field in missing)
        raise SelectionValidationError(
            missing,
            f"Missing required selection field(s): {names}",
        )

    start_date = _as_date(selection.start_date)
    end_date = _as_date(selection.end_date)
    if start_date > end_date:
        raise SelectionValidationError(
            (SelectionField.START_DATE, SelectionField.END_DATE),
            f"Start date {start_date.isoformat()} is after "
            f"end date {end_date.isoformat()}",
        )

    periods = expand_periods(start_date, end_date)
    # PeriodIds are fixed width, so sorting them is chronological
    periods = sorted(dict.fromkeys(periods))

    query = ReportQuery(
        program_id=selection.program_id,
        org_unit_id=selection.org_unit_id,
        periods=tuple(periods),
    )
    logger.debug(
        "report_query_built",
        program_id=query.program_id,
        org_unit_id=query.org_unit_id,
        period_count=len(query.periods),
    )
    return query


def _missing_fields(selection: Selection) -> tuple[SelectionField, ...]:
    """Return unset fields in validation order."""
    values = {
        SelectionField.PROGRAM_ID: selection.program_id,
        SelectionField.ORG_UNIT_ID: selection.org_unit_id,
        SelectionField.START_DATE: selection.start_date,
        SelectionField.END_DATE: selection.end_date,
    }
    return tuple(field for field, value in values.items() if value is None or value == "")


def _as_date(value: date) -> date:
    """Drop the time part of datetime bounds."""
    if isinstance(value, datetime):
        return value.date()
    return value
