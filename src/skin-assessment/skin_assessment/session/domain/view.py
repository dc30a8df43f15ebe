"""Render data handed to the hosting page, one view per phase."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from skin_assessment.lead.domain.contact import LeadContact
from skin_assessment.scoring.domain.classification import Classification


class QuestionView(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["question"] = "question"
    step_number: int = Field(ge=1)
    total_questions: int = Field(ge=1)
    progress_percent: int = Field(ge=0, le=100)
    question_id: str
    prompt: str
    option_labels: tuple[str, ...]


class LeadFormView(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["lead_form"] = "lead_form"
    contact: LeadContact
    errors: dict[str, str]


class ResultsView(BaseModel):
    """Everything the results page shows: the classification and its next step.

    Suitable candidates are offered a consultation; everyone else is pointed
    at alternative treatments.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["results"] = "results"
    classification: Classification
    eligibility_label: str
    call_to_action: str
    booking_url: str


type SessionView = Annotated[
    QuestionView | LeadFormView | ResultsView,
    Field(discriminator="kind"),
]
