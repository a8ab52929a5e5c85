"""Metadata lookup DTOs."""

from pydantic import BaseModel, ConfigDict, Field

from ucs_reports.domain.entities import OrganisationUnit, Program


class ProgramItem(BaseModel):
    """Program in the programs lookup response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    display_name: str = Field(alias="displayName")

    def to_entity(self) -> Program:
        """Convert to domain entity."""
        return Program(id=self.id, display_name=self.display_name)


class ProgramsResponse(BaseModel):
    """Programs lookup response."""

    model_config = ConfigDict(extra="ignore")

    programs: list[ProgramItem] = []


class OrganisationUnitItem(BaseModel):
    """Organisation unit in the org unit lookup response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    display_name: str = Field(alias="displayName")
    path: str
    code: str | None = None

    def to_entity(self) -> OrganisationUnit:
        """Convert to domain entity."""
        return OrganisationUnit(
            id=self.id,
            display_name=self.display_name,
            path=self.path,
            code=self.code,
        )


class OrganisationUnitsResponse(BaseModel):
    """Organisation units lookup response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    organisation_units: list[OrganisationUnitItem] = Field(
        default_factory=list,
        alias="organisationUnits",
    )
