"""Generate report - fetch orchestration and lifecycle state."""

import asyncio
import time
from collections.abc import Callable, Iterable

import structlog

from ucs_reports.application.dto.analytics import parse_report_result
from ucs_reports.application.services.query_builder import build_query
from ucs_reports.domain.entities import (
    Failure,
    FetchState,
    Idle,
    Loading,
    Selection,
    Success,
)
from ucs_reports.domain.errors import SelectionValidationError
from ucs_reports.domain.ports import AnalyticsPort
from ucs_reports.infrastructure.observability.metrics import (
    report_fetch_duration_seconds,
    report_period_count,
    reports_failed,
    reports_rejected,
    reports_requested,
    reports_succeeded,
    reports_superseded,
)

logger = structlog.get_logger()

StateListener = Callable[[FetchState], None]

CANCELLED_MESSAGE = "Report request cancelled"


class ReportOrchestrator:
    """Drives report fetches and owns the fetch state.

    Every fetch is tagged with a sequence number. Only the latest issued
    fetch may update the state; older completions are discarded.
    """

    def __init__(
        self,
        analytics: AnalyticsPort,
        listeners: Iterable[StateListener] = (),
    ) -> None:
        """Initialize orchestrator in the idle state."""
        self.analytics = analytics
        self._listeners: list[StateListener] = list(listeners)
        self._state: FetchState = Idle()
        self._sequence = 0

    @property
    def state(self) -> FetchState:
        """Current fetch state."""
        return self._state

    @property
    def latest_sequence(self) -> int:
        """Sequence number of the most recently issued fetch."""
        return self._sequence

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a state listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def generate(self, selection: Selection) -> FetchState:
        """Validate selection, fetch the report and update state.

        Raises SelectionValidationError before any state change when the
        selection is incomplete or inverted. Fetch errors never propagate;
        they end up in a Failure state.
        A cancelled latest fetch also ends in Failure before re-raising.
        """
        reports_requested.inc()
        try:
            query = build_query(selection)
        except SelectionValidationError as e:
            reports_rejected.labels(field=e.field.value).inc()
            logger.info(
                "report_generate_rejected",
                fields=[field.value for field in e.fields],
                error=str(e),
            )
            raise

        self._sequence += 1
        sequence = self._sequence
        report_period_count.observe(len(query.periods))
        self._set_state(Loading(sequence=sequence))

        logger.info(
            "report_fetch_started",
            sequence=sequence,
            program_id=query.program_id,
            org_unit_id=query.org_unit_id,
            periods=list(query.periods),
        )

        started = time.perf_counter()
        try:
            payload = await self.analytics.fetch_report(query)
            result = parse_report_result(payload)
            outcome: FetchState = Success(result=result, sequence=sequence)
        except asyncio.CancelledError:
            if sequence == self._sequence:
                reports_failed.labels(error_code="CancelledError").inc()
                logger.warning("report_fetch_cancelled", sequence=sequence)
                self._set_state(Failure(message=CANCELLED_MESSAGE, sequence=sequence))
            raise
        except Exception as e:
            outcome = Failure(message=_describe_error(e), sequence=sequence)
            if sequence == self._sequence:
                reports_failed.labels(error_code=type(e).__name__).inc()
                logger.error(
                    "report_fetch_failed",
                    sequence=sequence,
                    error_type=type(e).__name__,
                    error=outcome.message,
                )
        finally:
            report_fetch_duration_seconds.observe(time.perf_counter() - started)

        if sequence != self._sequence:
            reports_superseded.inc()
            logger.info(
                "report_result_superseded",
                sequence=sequence,
                latest_sequence=self._sequence,
                discarded_status=outcome.status.value,
            )
            return self._state

        if isinstance(outcome, Success):
            reports_succeeded.inc()
            logger.info(
                "report_fetch_succeeded",
                sequence=sequence,
                row_count=len(outcome.result.rows),
            )

        self._set_state(outcome)
        return outcome

    def _set_state(self, state: FetchState) -> None:
        """Apply a transition and notify listeners."""
        self._state = state
        for listener in list(self._listeners):
            listener(state)


def _describe_error(error: Exception) -> str:
    """Human-readable failure message."""
    return str(error) or type(error).__name__
