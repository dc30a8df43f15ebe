"""Scoring engine — reduces an AnswerSet to a total and a Fitzpatrick classification."""

from collections.abc import Mapping

from skin_assessment.scoring.domain.classification import (
    Classification,
    FitzpatrickType,
    by_tier,
)
from skin_assessment.scoring.domain.errors import NegativeScoreError

type QuestionId = str
type AnswerSet = Mapping[QuestionId, int]

# Inclusive upper bound of each band, lowest first. These are the published
# clinical cut points; totals above the last bound fall into Type VI.
BAND_UPPER_BOUNDS: tuple[tuple[int, FitzpatrickType], ...] = (
    (6, FitzpatrickType.TYPE_I),
    (12, FitzpatrickType.TYPE_II),
    (18, FitzpatrickType.TYPE_III),
    (24, FitzpatrickType.TYPE_IV),
    (30, FitzpatrickType.TYPE_V),
)


def total_score(answers: AnswerSet) -> int:
    """Sum every recorded score; unanswered questions contribute nothing."""
    return sum(answers.values())


def classify(total: int) -> FitzpatrickType:
    """Map a total score onto its band.

    Raises:
        NegativeScoreError: if total < 0.
    """
    if total < 0:
        raise NegativeScoreError(total=total)
    for upper_bound, tier in BAND_UPPER_BOUNDS:
        if total <= upper_bound:
            return tier
    return FitzpatrickType.TYPE_VI


def compute_classification(answers: AnswerSet) -> Classification:
    """Score the answers and return the matching classification record."""
    return by_tier(classify(total_score(answers)))
