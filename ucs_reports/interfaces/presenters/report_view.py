"""Report view model for the presentation layer."""

from dataclasses import dataclass

from ucs_reports.domain.entities import Failure, FetchState, Loading, Success

REPORT_COLUMNS = ("Data Element", "Organisation Unit", "Period", "Value")
EMPTY_TABLE_MESSAGE = "No data available"


@dataclass(frozen=True)
class ReportTable:
    """Table of report rows."""

    columns: tuple[str, ...]
    rows: tuple[tuple[str, str, str, str], ...]

    @property
    def empty_message(self) -> str | None:
        """Placeholder shown in place of rows."""
        return None if self.rows else EMPTY_TABLE_MESSAGE


@dataclass(frozen=True)
class ReportView:
    """What to render for a given fetch state."""

    button_label: str
    button_disabled: bool
    error_message: str | None = None
    table: ReportTable | None = None


def build_report_view(state: FetchState) -> ReportView:
    """Map fetch state to render primitives."""
    if isinstance(state, Loading):
        return ReportView(button_label="Generating...", button_disabled=True)

    if isinstance(state, Failure):
        return ReportView(
            button_label="Produce Report",
            button_disabled=False,
            error_message=f"Error fetching report: {state.message}",
        )

    if isinstance(state, Success):
        table = ReportTable(
            columns=REPORT_COLUMNS,
            rows=tuple(row.as_tuple() for row in state.result.rows),
        )
        return ReportView(button_label="Produce Report", button_disabled=False, table=table)

    return ReportView(button_label="Produce Report", button_disabled=False)
