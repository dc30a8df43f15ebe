"""Tests for the lead submission payload."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from skin_assessment.config.domain.lead import LeadConfig
from skin_assessment.lead.domain.contact import LeadContact
from skin_assessment.scoring.domain.classification import by_tier
from skin_assessment.submission.domain.payload import (
    SubmissionPayload,
    format_timestamp,
)

_MOMENT = datetime(2026, 3, 14, 9, 26, 53, 589000, tzinfo=UTC)


def _contact() -> LeadContact:
    return LeadContact(first_name="Ann", last_name="Lee", email="a@b.co", phone="07000")


def _build(tier: int) -> SubmissionPayload:
    return SubmissionPayload.build(
        contact=_contact(),
        classification=by_tier(tier),
        lead_config=LeadConfig(),
        submitted_at=_MOMENT,
    )


class TestBuild:
    def test_copies_contact(self) -> None:
        payload = _build(2)

        assert payload.first_name == "Ann"
        assert payload.last_name == "Lee"
        assert payload.email == "a@b.co"
        assert payload.phone == "07000"

    def test_carries_classification(self) -> None:
        payload = _build(2)

        assert payload.fitzpatrick_type == 2
        assert payload.fitzpatrick_name == "Type II - Fair"
        assert payload.co2_laser_suitability == "Excellent Candidate"
        assert payload.co2_laser_suitable is True

    @pytest.mark.parametrize("tier", [1, 2, 3, 4])
    def test_suitable_tiers_tagged_qualified(self, tier: int) -> None:
        assert _build(tier).tags == "CO2 Laser - Qualified"

    @pytest.mark.parametrize("tier", [5, 6])
    def test_unsuitable_tiers_tagged_not_suitable(self, tier: int) -> None:
        payload = _build(tier)

        assert payload.tags == "CO2 Laser - Not Suitable"
        assert payload.co2_laser_suitable is False

    def test_custom_lead_config(self) -> None:
        payload = SubmissionPayload.build(
            contact=_contact(),
            classification=by_tier(6),
            lead_config=LeadConfig(source="Spring Campaign", tag_not_suitable="Alt"),
            submitted_at=_MOMENT,
        )

        assert payload.assessment_source == "Spring Campaign"
        assert payload.tags == "Alt"


class TestJsonBody:
    def test_wire_field_names(self) -> None:
        body = _build(3).to_json_body()

        assert set(body) == {
            "firstName",
            "lastName",
            "email",
            "phone",
            "fitzpatrick_type",
            "fitzpatrick_name",
            "co2_laser_suitability",
            "co2_laser_suitable",
            "tags",
            "assessment_source",
            "submitted_at",
        }

    def test_values(self) -> None:
        body = _build(3).to_json_body()

        assert body["firstName"] == "Ann"
        assert body["fitzpatrick_type"] == 3
        assert body["assessment_source"] == "Fitzpatrick Skin Type Quiz"
        assert body["submitted_at"] == "2026-03-14T09:26:53.589Z"


class TestFormatTimestamp:
    def test_utc_milliseconds_with_z(self) -> None:
        assert format_timestamp(_MOMENT) == "2026-03-14T09:26:53.589Z"

    def test_converts_other_offsets_to_utc(self) -> None:
        moment = datetime(2026, 3, 14, 10, 26, 53, tzinfo=timezone(timedelta(hours=1)))

        assert format_timestamp(moment) == "2026-03-14T09:26:53.000Z"
