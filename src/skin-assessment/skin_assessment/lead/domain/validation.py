"""Lead form validation — reports every violated field at once."""

import re

from pydantic import BaseModel, ConfigDict, Field

from skin_assessment.lead.domain.contact import LeadContact

# Structural check only, not RFC 5322.
_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

FIRST_NAME_REQUIRED = "First name is required"
EMAIL_INVALID = "Valid email is required"
PHONE_REQUIRED = "Phone number is required"


class ValidationResult(BaseModel):
    """Outcome of validating a LeadContact: valid, or field name -> message."""

    model_config = ConfigDict(frozen=True)

    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate(contact: LeadContact) -> ValidationResult:
    """Validate all contact fields without short-circuiting. Pure."""
    errors: dict[str, str] = {}
    if not contact.first_name.strip():
        errors["first_name"] = FIRST_NAME_REQUIRED
    if not contact.email.strip() or not _EMAIL_PATTERN.fullmatch(contact.email):
        errors["email"] = EMAIL_INVALID
    if not contact.phone.strip():
        errors["phone"] = PHONE_REQUIRED
    return ValidationResult(errors=errors)
