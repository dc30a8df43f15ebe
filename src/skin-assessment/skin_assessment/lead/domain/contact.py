"""LeadContact — the prospective customer's contact details for one session."""

from typing import Literal, get_args

from pydantic import BaseModel

type ContactField = Literal["first_name", "last_name", "email", "phone"]

CONTACT_FIELDS: tuple[str, ...] = get_args(ContactField.__value__)


class LeadContact(BaseModel):
    """Mutable, session-scoped contact record. Never persisted."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""

    def is_empty(self) -> bool:
        return not any(getattr(self, field) for field in CONTACT_FIELDS)
