"""SubmissionPayload — the JSON body posted to the lead system for one completed session."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from skin_assessment.config.domain.lead import LeadConfig
from skin_assessment.lead.domain.contact import LeadContact
from skin_assessment.scoring.domain.classification import Classification


class SubmissionPayload(BaseModel):
    """Read-only snapshot of a lead plus its classification.

    Field aliases are the wire names the lead system expects; dump with
    `to_json_body()` rather than `model_dump()`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    phone: str
    fitzpatrick_type: int = Field(ge=1, le=6)
    fitzpatrick_name: str
    co2_laser_suitability: str
    co2_laser_suitable: bool
    tags: str
    assessment_source: str
    submitted_at: str

    @classmethod
    def build(
        cls,
        contact: LeadContact,
        classification: Classification,
        lead_config: LeadConfig,
        submitted_at: datetime,
    ) -> "SubmissionPayload":
        tag = (
            lead_config.tag_suitable
            if classification.is_suitable
            else lead_config.tag_not_suitable
        )
        return cls(
            first_name=contact.first_name,
            last_name=contact.last_name,
            email=contact.email,
            phone=contact.phone,
            fitzpatrick_type=int(classification.tier),
            fitzpatrick_name=classification.display_name,
            co2_laser_suitability=classification.eligibility.label,
            co2_laser_suitable=classification.is_suitable,
            tags=tag,
            assessment_source=lead_config.source,
            submitted_at=format_timestamp(submitted_at),
        )

    def to_json_body(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a trailing Z."""
    utc = moment.astimezone(UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
