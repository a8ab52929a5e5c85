"""Ports (interfaces) for infrastructure adapters."""

from abc import ABC, abstractmethod

from ucs_reports.domain.entities import OrganisationUnit, Program, ReportQuery
from ucs_reports.domain.types import AnalyticsPayloadDict


class AnalyticsPort(ABC):
    """Port for the aggregate analytics query."""

    @abstractmethod
    async def fetch_report(self, query: ReportQuery) -> AnalyticsPayloadDict:
        """Fetch raw analytics payload for query. Raises FetchError on failure."""


class MetadataPort(ABC):
    """Port for selection lookups."""

    @abstractmethod
    async def list_programs(self) -> list[Program]:
        """List selectable programs."""

    @abstractmethod
    async def list_organisation_units(self) -> list[OrganisationUnit]:
        """List root organisation units."""
