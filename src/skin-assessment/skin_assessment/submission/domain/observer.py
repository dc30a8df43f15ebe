"""SubmissionObserver port — domain events emitted while dispatching leads."""

from typing import Protocol


class SubmissionObserver(Protocol):
    """Observer port for submission domain events.

    Implementations may log to structlog or record for tests.
    """

    def dispatch_scheduled(self, fitzpatrick_type: int, submitted_at: str) -> None: ...

    def dispatch_delivered(
        self, fitzpatrick_type: int, status_code: int, duration_ms: int
    ) -> None: ...

    def dispatch_rejected(
        self, fitzpatrick_type: int, status_code: int, duration_ms: int
    ) -> None: ...

    def dispatch_failed(self, fitzpatrick_type: int, reason: str) -> None: ...
