"""Selection state store."""

from dataclasses import replace

from ucs_reports.domain.entities import Selection
from ucs_reports.domain.types import DateBound


class SelectionStore:
    """Holds the current selection; setters never validate."""

    def __init__(self) -> None:
        """Initialize with an empty selection."""
        self._selection = Selection()

    def set_program(self, program_id: str | None) -> None:
        """Set selected program."""
        self._selection = replace(self._selection, program_id=program_id or None)

    def set_org_unit(self, org_unit: str | list[str] | None) -> None:
        """Set selected org unit.

        Accepts a single id or the tree widget's list of selected ids, in
        which case the first one is kept.
        """
        if isinstance(org_unit, list):
            org_unit = org_unit[0] if org_unit else None
        self._selection = replace(self._selection, org_unit_id=org_unit or None)

    def set_start_date(self, start_date: DateBound | None) -> None:
        """Set range start."""
        self._selection = replace(self._selection, start_date=start_date)

    def set_end_date(self, end_date: DateBound | None) -> None:
        """Set range end."""
        self._selection = replace(self._selection, end_date=end_date)

    def clear(self) -> None:
        """Reset every field."""
        self._selection = Selection()

    def snapshot(self) -> Selection:
        """Current selection as an immutable value."""
        return self._selection
