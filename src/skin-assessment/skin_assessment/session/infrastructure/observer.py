"""Structlog implementation of the SessionObserver port."""

import structlog


class StructlogSessionObserver:
    """Delegates session domain events to structlog.

    Satisfies the SessionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def session_started(self, session_id: str, total_questions: int) -> None:
        self._log.info(
            "session.started",
            session_id=session_id,
            total_questions=total_questions,
        )

    def answer_recorded(
        self, session_id: str, question_id: str, score: int, step_index: int
    ) -> None:
        self._log.debug(
            "session.answer_recorded",
            session_id=session_id,
            question_id=question_id,
            score=score,
            step_index=step_index,
        )

    def phase_changed(self, session_id: str, phase: str) -> None:
        self._log.info("session.phase_changed", session_id=session_id, phase=phase)

    def lead_validation_failed(self, session_id: str, fields: list[str]) -> None:
        self._log.info(
            "session.lead_validation_failed",
            session_id=session_id,
            fields=fields,
        )

    def assessment_classified(
        self, session_id: str, total_score: int, fitzpatrick_type: int
    ) -> None:
        self._log.info(
            "session.assessment_classified",
            session_id=session_id,
            total_score=total_score,
            fitzpatrick_type=fitzpatrick_type,
        )

    def session_restarted(self, session_id: str) -> None:
        self._log.info("session.restarted", session_id=session_id)

    def session_closed(self, session_id: str) -> None:
        self._log.info("session.closed", session_id=session_id)

    def side_effect_failed(self, session_id: str, effect: str, reason: str) -> None:
        self._log.error(
            "session.side_effect_failed",
            session_id=session_id,
            effect=effect,
            reason=reason,
        )
