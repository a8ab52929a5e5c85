"""Unit tests for DHIS2 analytics adapter."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ucs_reports.domain.entities import ReportQuery
from ucs_reports.domain.errors import FetchError
from ucs_reports.infrastructure.dhis2.analytics_adapter import (
    Dhis2AnalyticsAdapter,
    build_analytics_params,
)
from ucs_reports.infrastructure.dhis2.http_client import Dhis2RequestError


@pytest.fixture
def query():
    """Create sample query."""
    return ReportQuery(
        program_id="IpHINAT79UW",
        org_unit_id="ImspTQPwCqd",
        periods=("202311", "202312", "202401"),
    )


def test_build_analytics_params(query):
    """Test dimension encoding."""
    assert build_analytics_params(query) == [
        ("dimension", "dx:IpHINAT79UW"),
        ("dimension", "ou:ImspTQPwCqd"),
        ("dimension", "pe:202311;202312;202401"),
        ("displayProperty", "NAME"),
    ]


@pytest.mark.asyncio
async def test_fetch_report(query):
    """Test fetching the raw payload."""
    client = MagicMock()
    client.get_json = AsyncMock(return_value={"rows": []})

    result = await Dhis2AnalyticsAdapter(client).fetch_report(query)

    assert result == {"rows": []}
    client.get_json.assert_called_once_with("analytics", build_analytics_params(query))


@pytest.mark.asyncio
async def test_fetch_report_error_is_fetch_error(query):
    """Test that client errors become fetch errors and are not retried."""
    client = MagicMock()
    client.get_json = AsyncMock(side_effect=Dhis2RequestError("Request to analytics timed out after 30s"))

    with pytest.raises(FetchError, match="timed out after 30s"):
        await Dhis2AnalyticsAdapter(client).fetch_report(query)

    assert client.get_json.call_count == 1
