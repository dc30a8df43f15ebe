"""StructlogAnalyticsTracker — records pixel events in the application log."""

import structlog

from skin_assessment.analytics.domain.pixel_event import (
    PixelEvent,
    assessment_completed_event,
    assessment_started_event,
    lead_submitted_event,
)


class StructlogAnalyticsTracker:
    """Logs each checkpoint as the pixel event it would fire.

    Satisfies the AnalyticsTracker protocol structurally. Useful on its own in
    development and alongside a real pixel forwarder in production.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def assessment_started(self, session_id: str) -> None:
        self._emit(session_id=session_id, event=assessment_started_event())

    def assessment_completed(self, session_id: str, recommendation: str) -> None:
        self._emit(
            session_id=session_id,
            event=assessment_completed_event(recommendation=recommendation),
        )

    def lead_submitted(self, session_id: str, fitzpatrick_type: int) -> None:
        self._emit(
            session_id=session_id,
            event=lead_submitted_event(fitzpatrick_type=fitzpatrick_type),
        )

    def _emit(self, session_id: str, event: PixelEvent) -> None:
        self._log.info(
            "analytics.pixel_event",
            session_id=session_id,
            pixel_event=event.name,
            **event.parameters,
        )
