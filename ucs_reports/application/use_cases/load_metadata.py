"""Load programs and organisation units for selection."""

import asyncio

import structlog

from ucs_reports.domain.entities import ReportMetadata
from ucs_reports.domain.ports import MetadataPort

logger = structlog.get_logger()


async def run(metadata: MetadataPort) -> ReportMetadata:
    """Load both lookups concurrently. Lookup errors propagate."""
    programs, organisation_units = await asyncio.gather(
        metadata.list_programs(),
        metadata.list_organisation_units(),
    )

    logger.info(
        "metadata_loaded",
        program_count=len(programs),
        organisation_unit_count=len(organisation_units),
    )

    return ReportMetadata(
        programs=tuple(programs),
        organisation_units=tuple(organisation_units),
    )
