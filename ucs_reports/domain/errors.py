"""Domain errors."""

from ucs_reports.domain.enums import SelectionField


class DomainError(Exception):
    """Base domain error."""


class SelectionValidationError(DomainError):
    """Selection is incomplete or its date range is inverted."""

    def __init__(self, fields: tuple[SelectionField, ...], message: str) -> None:
        super().__init__(message)
        self.fields = fields

    @property
    def field(self) -> SelectionField:
        """First offending field."""
        return self.fields[0]


class FetchError(DomainError):
    """Analytics call failed or returned a malformed payload."""


class MetadataLookupError(DomainError):
    """Programs or organisation units could not be loaded."""


ValidationError = SelectionValidationError
