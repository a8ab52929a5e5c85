"""DHIS2 metadata adapter for programs and organisation units."""

import structlog
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ucs_reports.application.dto.metadata import OrganisationUnitsResponse, ProgramsResponse
from ucs_reports.domain.entities import OrganisationUnit, Program
from ucs_reports.domain.errors import MetadataLookupError
from ucs_reports.domain.ports import MetadataPort
from ucs_reports.domain.types import JsonValue
from ucs_reports.infrastructure.config.settings import Settings
from ucs_reports.infrastructure.dhis2.http_client import Dhis2HttpClient, Dhis2RequestError

logger = structlog.get_logger()


def _is_transient(error: BaseException) -> bool:
    return isinstance(error, Dhis2RequestError) and error.is_transient


class Dhis2MetadataAdapter(MetadataPort):
    """Loads selectable programs and root organisation units."""

    def __init__(self, client: Dhis2HttpClient, settings: Settings) -> None:
        """Initialize metadata adapter."""
        self.client = client
        self.programs_page_size = settings.programs_page_size
        self.org_unit_level = settings.org_unit_level
        self.retry_attempts = settings.metadata_retry_attempts
        self.retry_wait = wait_exponential(multiplier=1, min=2, max=10)

    async def list_programs(self) -> list[Program]:
        """List programs (first page only)."""
        params = {
            "pageSize": self.programs_page_size,
            "fields": "id,displayName",
        }
        body = await self._get("programs", params)
        try:
            response = ProgramsResponse(**body)
        except ValidationError as e:
            raise MetadataLookupError(f"Malformed programs response: {e.error_count()} invalid field(s)") from e
        return [item.to_entity() for item in response.programs]

    async def list_organisation_units(self) -> list[OrganisationUnit]:
        """List organisation units at the configured root level."""
        params = {
            "fields": "id,displayName,path,code",
            "filter": f"level:eq:{self.org_unit_level}",
            "paging": "false",
        }
        body = await self._get("organisationUnits", params)
        try:
            response = OrganisationUnitsResponse(**body)
        except ValidationError as e:
            raise MetadataLookupError(
                f"Malformed organisation units response: {e.error_count()} invalid field(s)",
            ) from e
        return [item.to_entity() for item in response.organisation_units]

    async def _get(self, resource: str, params: dict[str, JsonValue]) -> dict[str, JsonValue]:
        """GET with retry on transient failures. The body must be a JSON object."""
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.retry_attempts),
                wait=self.retry_wait,
                retry=retry_if_exception(_is_transient),
                reraise=True,
            ):
                with attempt:
                    body = await self.client.get_json(resource, params)
        except Dhis2RequestError as e:
            logger.error("metadata_lookup_failed", resource=resource, error=str(e))
            raise MetadataLookupError(str(e)) from e

        if not isinstance(body, dict):
            logger.error("metadata_lookup_malformed", resource=resource, body_type=type(body).__name__)
            raise MetadataLookupError(
                f"Malformed {resource} response: expected object, got {type(body).__name__}",
            )
        return body
