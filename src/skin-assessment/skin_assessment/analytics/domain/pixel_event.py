"""PixelEvent — the standard-event name and parameters sent to the ad pixel."""

from pydantic import BaseModel, ConfigDict, Field

_CURRENCY = "GBP"


class PixelEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    parameters: dict[str, str] = Field(default_factory=dict)


def assessment_started_event() -> PixelEvent:
    return PixelEvent(
        name="InitiateCheckout",
        parameters={"content_name": "Skin Assessment Started"},
    )


def assessment_completed_event(recommendation: str) -> PixelEvent:
    return PixelEvent(
        name="CompleteRegistration",
        parameters={
            "content_name": "Assessment Completed",
            "value": recommendation,
            "currency": _CURRENCY,
        },
    )


def lead_submitted_event(fitzpatrick_type: int) -> PixelEvent:
    return PixelEvent(
        name="Lead",
        parameters={
            "content_name": "Skin Assessment Lead Submitted",
            "content_category": f"Fitzpatrick Type {fitzpatrick_type}",
        },
    )
