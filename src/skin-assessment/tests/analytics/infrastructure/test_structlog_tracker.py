"""Tests for StructlogAnalyticsTracker."""

from structlog.testing import capture_logs

from skin_assessment.analytics.infrastructure.structlog_tracker import (
    StructlogAnalyticsTracker,
)


class TestStructlogAnalyticsTracker:
    def test_started_logged_as_pixel_event(self) -> None:
        with capture_logs() as logs:
            StructlogAnalyticsTracker().assessment_started(session_id="s-1")

        assert logs == [
            {
                "event": "analytics.pixel_event",
                "log_level": "info",
                "session_id": "s-1",
                "pixel_event": "InitiateCheckout",
                "content_name": "Skin Assessment Started",
            }
        ]

    def test_completed_includes_value_and_currency(self) -> None:
        with capture_logs() as logs:
            StructlogAnalyticsTracker().assessment_completed(
                session_id="s-1", recommendation="Type II - Fair"
            )

        assert logs[0]["pixel_event"] == "CompleteRegistration"
        assert logs[0]["value"] == "Type II - Fair"
        assert logs[0]["currency"] == "GBP"

    def test_lead_includes_category(self) -> None:
        with capture_logs() as logs:
            StructlogAnalyticsTracker().lead_submitted(
                session_id="s-1", fitzpatrick_type=2
            )

        assert logs[0]["pixel_event"] == "Lead"
        assert logs[0]["content_category"] == "Fitzpatrick Type 2"
