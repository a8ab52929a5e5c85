"""Domain types and aliases."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, TypedDict

DateBound = date

# YYYYMM
PeriodId = str

if TYPE_CHECKING:
    JsonValue = str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
else:
    JsonValue = str | int | float | bool | None | dict | list


# Analytics payload structure (from DHIS2)
class AnalyticsHeaderDict(TypedDict, total=False):
    """Analytics column header."""
    name: str
    column: str
    valueType: str


class AnalyticsPayloadDict(TypedDict, total=False):
    """Raw analytics response."""
    headers: list[AnalyticsHeaderDict]
    rows: list[list[JsonValue]]
    metaData: dict[str, JsonValue]


# Metadata lookup structures
class ProgramDict(TypedDict):
    """Program as returned by the programs lookup."""
    id: str
    displayName: str


class OrganisationUnitDict(TypedDict, total=False):
    """Organisation unit as returned by the org unit lookup."""
    id: str
    displayName: str
    path: str
    code: str
