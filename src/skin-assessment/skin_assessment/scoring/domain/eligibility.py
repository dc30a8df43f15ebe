"""Eligibility — ordered CO2 laser suitability rating attached to each skin type."""

from enum import IntEnum

_LABELS = {
    0: "Not Recommended",
    1: "Limited Candidate",
    2: "Moderate Candidate",
    3: "Good Candidate",
    4: "Excellent Candidate",
}


class Eligibility(IntEnum):
    """Ordered worst to best, so comparisons follow clinical preference."""

    NOT_RECOMMENDED = 0
    LIMITED = 1
    MODERATE = 2
    GOOD = 3
    EXCELLENT = 4

    @property
    def label(self) -> str:
        """Human-readable label sent to the lead system."""
        return _LABELS[self.value]

    @property
    def is_suitable(self) -> bool:
        return self >= Eligibility.MODERATE
