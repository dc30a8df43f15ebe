"""Observer port for the session domain — defines events in domain language."""

from typing import Protocol


class SessionObserver(Protocol):
    """Observer port emitting structured events as a quiz session progresses.

    Implementations may log to structlog or record for tests.
    """

    def session_started(self, session_id: str, total_questions: int) -> None: ...

    def answer_recorded(
        self, session_id: str, question_id: str, score: int, step_index: int
    ) -> None: ...

    def phase_changed(self, session_id: str, phase: str) -> None: ...

    def lead_validation_failed(self, session_id: str, fields: list[str]) -> None: ...

    def assessment_classified(
        self, session_id: str, total_score: int, fitzpatrick_type: int
    ) -> None: ...

    def session_restarted(self, session_id: str) -> None: ...

    def session_closed(self, session_id: str) -> None: ...

    def side_effect_failed(self, session_id: str, effect: str, reason: str) -> None: ...
