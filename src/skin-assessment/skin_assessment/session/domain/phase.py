"""Quiz phases — a discriminated union with exactly one active variant."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from skin_assessment.scoring.domain.classification import Classification


class Questioning(BaseModel, frozen=True):
    kind: Literal["questioning"] = "questioning"
    step_index: int = Field(ge=0)


class CapturingLead(BaseModel, frozen=True):
    kind: Literal["capturing_lead"] = "capturing_lead"


class ShowingResults(BaseModel, frozen=True):
    kind: Literal["showing_results"] = "showing_results"
    classification: Classification


type QuizPhase = Annotated[
    Questioning | CapturingLead | ShowingResults,
    Field(discriminator="kind"),
]
