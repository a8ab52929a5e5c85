"""Domain entities."""

from dataclasses import dataclass

from ucs_reports.domain.enums import FetchStatus
from ucs_reports.domain.types import DateBound, PeriodId


@dataclass(frozen=True)
class Selection:
    """User-chosen report inputs. Any field may be unset."""

    program_id: str | None = None
    org_unit_id: str | None = None
    start_date: DateBound | None = None
    end_date: DateBound | None = None


@dataclass(frozen=True)
class ReportQuery:
    """Validated analytics query descriptor."""

    program_id: str
    org_unit_id: str
    periods: tuple[PeriodId, ...]


@dataclass(frozen=True)
class ReportRow:
    """Single aggregate value keyed by data element, org unit and period."""

    data_element: str
    org_unit: str
    period: str
    value: str

    def as_tuple(self) -> tuple[str, str, str, str]:
        """Positional form used by table renderers."""
        return (self.data_element, self.org_unit, self.period, self.value)


@dataclass(frozen=True)
class ReportResult:
    """Rows returned by the analytics call."""

    rows: tuple[ReportRow, ...] = ()


@dataclass(frozen=True)
class Program:
    """Selectable program."""

    id: str
    display_name: str


@dataclass(frozen=True)
class OrganisationUnit:
    """Selectable root organisation unit."""

    id: str
    display_name: str
    path: str
    code: str | None = None


@dataclass(frozen=True)
class ReportMetadata:
    """Lookup data offered to the user for selection."""

    programs: tuple[Program, ...]
    organisation_units: tuple[OrganisationUnit, ...]


# Fetch lifecycle states


@dataclass(frozen=True)
class Idle:
    """No report requested yet."""

    status: FetchStatus = FetchStatus.IDLE


@dataclass(frozen=True)
class Loading:
    """Analytics call in flight."""

    sequence: int
    status: FetchStatus = FetchStatus.LOADING


@dataclass(frozen=True)
class Success:
    """Analytics call resolved."""

    result: ReportResult
    sequence: int
    status: FetchStatus = FetchStatus.SUCCESS


@dataclass(frozen=True)
class Failure:
    """Analytics call failed."""

    message: str
    sequence: int
    status: FetchStatus = FetchStatus.FAILURE


FetchState = Idle | Loading | Success | Failure
