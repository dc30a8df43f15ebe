"""Structlog implementation of the SubmissionObserver port."""

import structlog


class StructlogSubmissionObserver:
    """Delegates submission domain events to structlog.

    Satisfies the SubmissionObserver protocol structurally. Contact details are
    never logged; only the classification tier identifies a dispatch.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def dispatch_scheduled(self, fitzpatrick_type: int, submitted_at: str) -> None:
        self._log.info(
            "submission.dispatch_scheduled",
            fitzpatrick_type=fitzpatrick_type,
            submitted_at=submitted_at,
        )

    def dispatch_delivered(
        self, fitzpatrick_type: int, status_code: int, duration_ms: int
    ) -> None:
        self._log.info(
            "submission.dispatch_delivered",
            fitzpatrick_type=fitzpatrick_type,
            status_code=status_code,
            duration_ms=duration_ms,
        )

    def dispatch_rejected(
        self, fitzpatrick_type: int, status_code: int, duration_ms: int
    ) -> None:
        self._log.warning(
            "submission.dispatch_rejected",
            fitzpatrick_type=fitzpatrick_type,
            status_code=status_code,
            duration_ms=duration_ms,
        )

    def dispatch_failed(self, fitzpatrick_type: int, reason: str) -> None:
        self._log.error(
            "submission.dispatch_failed",
            fitzpatrick_type=fitzpatrick_type,
            reason=reason,
        )
