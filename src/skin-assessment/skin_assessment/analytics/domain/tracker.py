"""AnalyticsTracker Protocol — checkpoints reported to the ad pixel."""

from typing import Protocol


class AnalyticsTracker(Protocol):
    """Receives assessment funnel checkpoints.

    Callers treat every method as fire-and-forget: an exception raised by an
    implementation is logged by the caller and never changes quiz state.
    """

    def assessment_started(self, session_id: str) -> None: ...

    def assessment_completed(self, session_id: str, recommendation: str) -> None: ...

    def lead_submitted(self, session_id: str, fitzpatrick_type: int) -> None: ...
