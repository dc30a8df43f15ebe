"""Base exception class for all skin-assessment-specific errors."""


class SkinAssessmentError(Exception):
    """Base class for all skin-assessment errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
