"""Error types raised by the quiz session when an intent breaks an invariant.

These signal a hosting-page bug, not a user mistake: user-fixable problems
are reported through ValidationResult instead.
"""

from skin_assessment.core.errors import SkinAssessmentError


class InvalidTransitionError(SkinAssessmentError):
    """Raised when an intent is not allowed in the session's current phase."""

    def __init__(self, intent: str, phase: str) -> None:
        self.intent = intent
        self.phase = phase
        super().__init__(f"Failed to {intent}: not allowed while {phase}")


class InvalidAnswerError(SkinAssessmentError):
    """Raised when an option index does not exist on the current question."""

    def __init__(self, question_id: str, option_index: int, option_count: int) -> None:
        super().__init__(
            f"Failed to record answer: question '{question_id}' has"
            f" {option_count} options, got index {option_index}"
        )


class UnknownContactFieldError(SkinAssessmentError):
    """Raised when a contact edit names a field the lead form does not have."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Failed to update contact: unknown field '{field}'")


class PacingUnavailableError(SkinAssessmentError):
    """Raised when a paced advance is needed but no event loop is running."""

    def __init__(self, question_id: str) -> None:
        self.question_id = question_id
        super().__init__(
            f"Failed to record answer for '{question_id}': a non-zero answer"
            " delay needs a running event loop"
        )
