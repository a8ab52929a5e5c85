"""Composition root for a report session."""

from dataclasses import dataclass, field

import structlog

from ucs_reports.application.services.selection_store import SelectionStore
from ucs_reports.application.use_cases.generate_report import ReportOrchestrator
from ucs_reports.application.use_cases.load_metadata import run as load_metadata
from ucs_reports.domain.entities import FetchState, ReportMetadata
from ucs_reports.domain.ports import AnalyticsPort, MetadataPort
from ucs_reports.infrastructure.config.settings import Settings
from ucs_reports.infrastructure.dhis2.analytics_adapter import Dhis2AnalyticsAdapter
from ucs_reports.infrastructure.dhis2.http_client import Dhis2HttpClient
from ucs_reports.infrastructure.dhis2.metadata_adapter import Dhis2MetadataAdapter
from ucs_reports.infrastructure.observability.logging import configure_logging
from ucs_reports.infrastructure.runtime.health import start_metrics_server

logger = structlog.get_logger()


@dataclass
class ReportSession:
    """Everything the presentation layer needs for one report screen."""

    metadata: ReportMetadata
    orchestrator: ReportOrchestrator
    selection: SelectionStore = field(default_factory=SelectionStore)

    @property
    def state(self) -> FetchState:
        """Current fetch state."""
        return self.orchestrator.state

    async def generate(self) -> FetchState:
        """Generate the report for the current selection."""
        return await self.orchestrator.generate(self.selection.snapshot())


async def open_session(analytics: AnalyticsPort, metadata: MetadataPort) -> ReportSession:
    """Load lookups and build a session over the given ports."""
    report_metadata = await load_metadata(metadata)
    return ReportSession(
        metadata=report_metadata,
        orchestrator=ReportOrchestrator(analytics),
    )


async def create_session(settings: Settings | None = None) -> ReportSession:
    """Build a session backed by the DHIS2 Web API."""
    settings = settings or Settings()
    configure_logging(settings.log_level, settings.log_json)

    if settings.dhis2_api_token:
        auth = "token"
    elif settings.dhis2_username:
        auth = "basic"
    else:
        auth = "none"
    logger.info(
        "settings_loaded",
        api_url=settings.api_url,
        auth=auth,
        metrics_enabled=settings.metrics_enabled,
    )
    if auth == "none":
        logger.warning(
            "dhis2_credentials_missing",
            message="Set DHIS2_API_TOKEN or DHIS2_USERNAME/DHIS2_PASSWORD in .env or environment",
        )

    start_metrics_server(settings)

    client = Dhis2HttpClient(settings)
    session = await open_session(
        Dhis2AnalyticsAdapter(client),
        Dhis2MetadataAdapter(client, settings),
    )
    logger.info("report_session_ready")
    return session
