"""CompositeAnalyticsTracker — fans out all checkpoints to a list of trackers."""

from collections.abc import Callable

from skin_assessment.analytics.domain.tracker import AnalyticsTracker


class CompositeAnalyticsTracker:
    """Delegates every checkpoint to each tracker in order.

    A tracker that raises does not stop the others from receiving the
    checkpoint. Failures are re-raised once every tracker has been called: a
    single failure as itself, several as an ExceptionGroup.

    Does NOT inherit from AnalyticsTracker (structural typing via Protocol).
    """

    def __init__(self, trackers: list[AnalyticsTracker]) -> None:
        self._trackers = trackers

    def assessment_started(self, session_id: str) -> None:
        self._fan_out(lambda tracker: tracker.assessment_started(session_id=session_id))

    def assessment_completed(self, session_id: str, recommendation: str) -> None:
        self._fan_out(
            lambda tracker: tracker.assessment_completed(
                session_id=session_id, recommendation=recommendation
            )
        )

    def lead_submitted(self, session_id: str, fitzpatrick_type: int) -> None:
        self._fan_out(
            lambda tracker: tracker.lead_submitted(
                session_id=session_id, fitzpatrick_type=fitzpatrick_type
            )
        )

    def _fan_out(self, deliver: Callable[[AnalyticsTracker], None]) -> None:
        failures: list[Exception] = []
        for tracker in self._trackers:
            try:
                deliver(tracker)
            except Exception as exc:  # noqa: BLE001
                failures.append(exc)
        if len(failures) == 1:
            raise failures[0]
        if failures:
            raise ExceptionGroup("Failed to deliver analytics checkpoint", failures)
