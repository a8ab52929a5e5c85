"""Domain enums for report fetch lifecycle."""

from enum import Enum


class FetchStatus(str, Enum):
    """Fetch status enum."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class SelectionField(str, Enum):
    """Selection field enum, in validation order."""

    PROGRAM_ID = "program_id"
    ORG_UNIT_ID = "org_unit_id"
    START_DATE = "start_date"
    END_DATE = "end_date"
