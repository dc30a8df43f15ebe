"""Tests for StructlogSessionObserver event names and levels."""

from structlog.testing import capture_logs

from skin_assessment.session.infrastructure.observer import StructlogSessionObserver


class TestStructlogSessionObserver:
    def test_started(self) -> None:
        with capture_logs() as logs:
            StructlogSessionObserver().session_started(session_id="s-1", total_questions=6)

        assert logs == [
            {
                "event": "session.started",
                "log_level": "info",
                "session_id": "s-1",
                "total_questions": 6,
            }
        ]

    def test_answers_logged_at_debug(self) -> None:
        with capture_logs() as logs:
            StructlogSessionObserver().answer_recorded(
                session_id="s-1", question_id="eye_color", score=2, step_index=0
            )

        assert logs[0]["event"] == "session.answer_recorded"
        assert logs[0]["log_level"] == "debug"

    def test_side_effect_failure_logged_at_error(self) -> None:
        with capture_logs() as logs:
            StructlogSessionObserver().side_effect_failed(
                session_id="s-1", effect="lead_dispatch", reason="boom"
            )

        assert logs[0]["event"] == "session.side_effect_failed"
        assert logs[0]["log_level"] == "error"
        assert logs[0]["effect"] == "lead_dispatch"

    def test_validation_failure_lists_fields_only(self) -> None:
        with capture_logs() as logs:
            StructlogSessionObserver().lead_validation_failed(
                session_id="s-1", fields=["email"]
            )

        assert logs[0]["fields"] == ["email"]
