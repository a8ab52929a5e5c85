"""DHIS2 Web API HTTP client."""

import asyncio

import requests
import structlog

from ucs_reports.domain.types import JsonValue
from ucs_reports.infrastructure.config.settings import Settings

logger = structlog.get_logger()


class Dhis2RequestError(RuntimeError):
    """DHIS2 request failed.

    status_code is None when the server could not be reached or timed out.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_transient(self) -> bool:
        """Whether retrying the same request may succeed."""
        return self.status_code is None or self.status_code >= 500


class Dhis2HttpClient:
    """Thin JSON client over a requests session."""

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        """Initialize session with authentication from settings."""
        self.base_url = settings.api_url
        self.timeout = settings.http_timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

        if settings.dhis2_api_token:
            self.session.headers["Authorization"] = f"ApiToken {settings.dhis2_api_token}"
        elif settings.dhis2_username and settings.dhis2_password:
            self.session.auth = (settings.dhis2_username, settings.dhis2_password)

    async def get_json(
        self,
        resource: str,
        params: dict[str, JsonValue] | list[tuple[str, str]] | None = None,
    ) -> dict[str, JsonValue]:
        """GET a resource and decode the JSON body.

        The blocking call runs in a worker thread so the event loop stays free.
        """
        return await asyncio.to_thread(self._get_json, resource, params)

    def _get_json(
        self,
        resource: str,
        params: dict[str, JsonValue] | list[tuple[str, str]] | None,
    ) -> dict[str, JsonValue]:
        url = f"{self.base_url}/{resource.lstrip('/')}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.Timeout as e:
            raise Dhis2RequestError(
                f"Request to {resource} timed out after {self.timeout:g}s",
            ) from e
        except requests.RequestException as e:
            raise Dhis2RequestError(f"Failed to reach DHIS2 for {resource}: {e}") from e

        if not response.ok:
            message = _error_message(response)
            logger.warning(
                "dhis2_request_failed",
                resource=resource,
                status_code=response.status_code,
                error=message,
            )
            raise Dhis2RequestError(
                f"DHIS2 returned {response.status_code} for {resource}: {message}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise Dhis2RequestError(
                f"DHIS2 returned invalid JSON for {resource}",
                status_code=response.status_code,
            ) from e


def _error_message(response: requests.Response) -> str:
    """Extract the error description from a DHIS2 error response."""
    try:
        body = response.json()
    except ValueError:
        return response.reason or "Unknown error"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason or "Unknown error"
