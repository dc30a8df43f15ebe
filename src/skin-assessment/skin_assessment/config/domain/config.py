"""Top-level AssessmentConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from skin_assessment.config.domain.booking import BookingConfig
from skin_assessment.config.domain.lead import LeadConfig
from skin_assessment.config.domain.pacing import PacingConfig
from skin_assessment.config.domain.webhook import WebhookConfig


class AssessmentConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a hosted skin assessment."""

    name: str = Field(min_length=1)
    webhook: WebhookConfig
    booking: BookingConfig
    lead: LeadConfig = Field(default_factory=LeadConfig)
    pacing: PacingConfig = Field(default_factory=PacingConfig)
