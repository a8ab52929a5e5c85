"""DHIS2 analytics adapter."""

import structlog

from ucs_reports.domain.entities import ReportQuery
from ucs_reports.domain.errors import FetchError
from ucs_reports.domain.ports import AnalyticsPort
from ucs_reports.domain.types import AnalyticsPayloadDict
from ucs_reports.infrastructure.dhis2.http_client import Dhis2HttpClient, Dhis2RequestError

logger = structlog.get_logger()

ANALYTICS_RESOURCE = "analytics"


class Dhis2AnalyticsAdapter(AnalyticsPort):
    """Fetches aggregate values from the DHIS2 analytics API. Never retries."""

    def __init__(self, client: Dhis2HttpClient) -> None:
        """Initialize analytics adapter."""
        self.client = client

    async def fetch_report(self, query: ReportQuery) -> AnalyticsPayloadDict:
        """Fetch analytics rows for program, org unit and periods."""
        params = build_analytics_params(query)
        logger.info(
            "fetching_analytics",
            program_id=query.program_id,
            org_unit_id=query.org_unit_id,
            period_count=len(query.periods),
        )
        try:
            return await self.client.get_json(ANALYTICS_RESOURCE, params)
        except Dhis2RequestError as e:
            raise FetchError(str(e)) from e


def build_analytics_params(query: ReportQuery) -> list[tuple[str, str]]:
    """Encode the query as analytics dimension parameters."""
    return [
        ("dimension", f"dx:{query.program_id}"),
        ("dimension", f"ou:{query.org_unit_id}"),
        ("dimension", f"pe:{';'.join(query.periods)}"),
        ("displayProperty", "NAME"),
    ]
