"""Error types raised by the scoring domain. Both indicate programmer error."""

from skin_assessment.core.errors import SkinAssessmentError


class TierOutOfRangeError(SkinAssessmentError):
    """Raised when a classification is requested for a tier outside 1..6."""

    def __init__(self, tier: int) -> None:
        self.tier = tier
        super().__init__(
            f"Failed to look up classification: tier {tier} is outside 1..6"
        )


class NegativeScoreError(SkinAssessmentError):
    """Raised when a total score below zero reaches the band lookup."""

    def __init__(self, total: int) -> None:
        self.total = total
        super().__init__(f"Failed to classify score: total {total} is negative")
