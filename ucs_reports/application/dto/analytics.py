"""Analytics payload DTOs."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from ucs_reports.domain.entities import ReportResult, ReportRow
from ucs_reports.domain.errors import FetchError
from ucs_reports.domain.types import AnalyticsPayloadDict

# Header names for data element, org unit, period and value columns
ROW_COLUMNS = ("dx", "ou", "pe", "value")

Cell = StrictStr | int | float


class AnalyticsHeader(BaseModel):
    """Column header in an analytics response."""

    model_config = ConfigDict(extra="ignore")

    name: str


class AnalyticsMetaItem(BaseModel):
    """Display metadata for a dimension item."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None


class AnalyticsMetaData(BaseModel):
    """Metadata block of an analytics response."""

    model_config = ConfigDict(extra="ignore")

    items: dict[str, AnalyticsMetaItem] = {}


class AnalyticsResponse(BaseModel):
    """Analytics response as returned by the backend."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    headers: list[AnalyticsHeader] = []
    rows: list[list[Cell]] = []
    meta_data: AnalyticsMetaData = Field(default_factory=AnalyticsMetaData, alias="metaData")

    def column_indexes(self) -> tuple[int, int, int, int]:
        """Positions of the report columns within each row."""
        if not self.headers:
            return (0, 1, 2, 3)

        names = [header.name for header in self.headers]
        missing = [column for column in ROW_COLUMNS if column not in names]
        if missing:
            raise FetchError(f"Analytics response missing columns: {', '.join(missing)}")
        return tuple(names.index(column) for column in ROW_COLUMNS)

    def label(self, uid: str) -> str:
        """Display name of a dimension item, falling back to its uid."""
        item = self.meta_data.items.get(uid)
        if item is None or not item.name:
            return uid
        return item.name

    def to_result(self) -> ReportResult:
        """Convert to a report result, rejecting malformed rows.

        Data element and org unit uids are replaced by their names from
        metaData.items; periods stay as YYYYMM ids.
        """
        indexes = self.column_indexes()
        width = len(self.headers) or len(ROW_COLUMNS)

        rows = []
        for position, row in enumerate(self.rows):
            if len(row) != width:
                raise FetchError(
                    f"Malformed analytics row {position}: expected {width} cells, got {len(row)}",
                )
            data_element, org_unit, period, value = (str(row[i]) for i in indexes)
            rows.append(
                ReportRow(
                    data_element=self.label(data_element),
                    org_unit=self.label(org_unit),
                    period=period,
                    value=value,
                ),
            )
        return ReportResult(rows=tuple(rows))


def parse_report_result(payload: AnalyticsPayloadDict) -> ReportResult:
    """Validate a raw analytics payload into a report result."""
    if not isinstance(payload, dict):
        raise FetchError(f"Malformed analytics payload: expected object, got {type(payload).__name__}")
    try:
        response = AnalyticsResponse(**payload)
    except ValidationError as e:
        raise FetchError(f"Malformed analytics payload: {e.error_count()} invalid field(s)") from e
    return response.to_result()
