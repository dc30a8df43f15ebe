"""Tests for StructlogSubmissionObserver event names and levels."""

import pytest
from structlog.testing import capture_logs

from skin_assessment.submission.infrastructure.observer import (
    StructlogSubmissionObserver,
)


class TestStructlogSubmissionObserver:
    def test_delivered_logged_at_info(self) -> None:
        with capture_logs() as logs:
            StructlogSubmissionObserver().dispatch_delivered(
                fitzpatrick_type=2, status_code=200, duration_ms=15
            )

        assert logs == [
            {
                "event": "submission.dispatch_delivered",
                "log_level": "info",
                "fitzpatrick_type": 2,
                "status_code": 200,
                "duration_ms": 15,
            }
        ]

    @pytest.mark.parametrize(
        ("method", "kwargs", "level"),
        [
            ("dispatch_rejected", {"status_code": 500, "duration_ms": 3}, "warning"),
            ("dispatch_failed", {"reason": "timeout"}, "error"),
        ],
    )
    def test_failures_raise_level(
        self, method: str, kwargs: dict[str, object], level: str
    ) -> None:
        observer = StructlogSubmissionObserver()

        with capture_logs() as logs:
            getattr(observer, method)(fitzpatrick_type=5, **kwargs)

        assert logs[0]["event"] == f"submission.{method}"
        assert logs[0]["log_level"] == level
