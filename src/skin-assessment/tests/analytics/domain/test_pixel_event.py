"""Tests for the pixel event builders."""

from skin_assessment.analytics.domain.pixel_event import (
    assessment_completed_event,
    assessment_started_event,
    lead_submitted_event,
)


class TestPixelEvents:
    def test_started_is_initiate_checkout(self) -> None:
        event = assessment_started_event()

        assert event.name == "InitiateCheckout"
        assert event.parameters == {"content_name": "Skin Assessment Started"}

    def test_completed_carries_recommendation_in_gbp(self) -> None:
        event = assessment_completed_event(recommendation="Type III - Medium")

        assert event.name == "CompleteRegistration"
        assert event.parameters["value"] == "Type III - Medium"
        assert event.parameters["currency"] == "GBP"

    def test_lead_categorised_by_type(self) -> None:
        event = lead_submitted_event(fitzpatrick_type=4)

        assert event.name == "Lead"
        assert event.parameters["content_category"] == "Fitzpatrick Type 4"
