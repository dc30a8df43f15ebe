"""LeadDispatcher Protocol — structural interface for forwarding completed leads."""

from typing import Protocol

from skin_assessment.lead.domain.contact import LeadContact
from skin_assessment.scoring.domain.classification import Classification


class LeadDispatcher(Protocol):
    """Hands a validated lead to an external system without blocking the caller.

    Implementations must return immediately and must never raise transport
    errors to the caller; delivery is best-effort with a single attempt.
    """

    def submit(self, contact: LeadContact, classification: Classification) -> None: ...
