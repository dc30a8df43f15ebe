"""Classification table — one immutable record per Fitzpatrick skin type."""

from enum import IntEnum
from types import MappingProxyType

from pydantic import BaseModel, Field

from skin_assessment.scoring.domain.eligibility import Eligibility
from skin_assessment.scoring.domain.errors import TierOutOfRangeError


class FitzpatrickType(IntEnum):
    TYPE_I = 1
    TYPE_II = 2
    TYPE_III = 3
    TYPE_IV = 4
    TYPE_V = 5
    TYPE_VI = 6


class Classification(BaseModel, frozen=True):
    """Descriptive and clinical metadata for one skin type.

    `is_suitable` is derived from `eligibility` rather than stored, so the two
    can never disagree.
    """

    tier: FitzpatrickType
    type_label: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str
    eligibility: Eligibility
    message: str
    considerations: tuple[str, ...]

    @property
    def display_name(self) -> str:
        return f"{self.type_label} - {self.name}"

    @property
    def is_suitable(self) -> bool:
        return self.eligibility.is_suitable


_TABLE: MappingProxyType[FitzpatrickType, Classification] = MappingProxyType(
    {
        FitzpatrickType.TYPE_I: Classification(
            tier=FitzpatrickType.TYPE_I,
            type_label="Type I",
            name="Very Fair",
            description="Always burns, never tans. Extremely sun-sensitive skin.",
            eligibility=Eligibility.EXCELLENT,
            message=(
                "Excellent candidate for CO2 laser resurfacing. Your skin type "
                "typically responds very well to ablative laser treatments with "
                "predictable healing."
            ),
            considerations=(
                "Higher sensitivity may require adjusted treatment parameters",
                "Excellent collagen response expected",
                "Follow strict sun protection protocol post-treatment",
            ),
        ),
        FitzpatrickType.TYPE_II: Classification(
            tier=FitzpatrickType.TYPE_II,
            type_label="Type II",
            name="Fair",
            description="Usually burns, tans minimally. Very sun-sensitive skin.",
            eligibility=Eligibility.EXCELLENT,
            message=(
                "Excellent candidate for CO2 laser resurfacing. Your skin type "
                "responds very well to treatment with low risk of complications."
            ),
            considerations=(
                "Optimal healing potential",
                "Low risk of post-inflammatory hyperpigmentation",
                "Standard treatment protocols apply",
            ),
        ),
        FitzpatrickType.TYPE_III: Classification(
            tier=FitzpatrickType.TYPE_III,
            type_label="Type III",
            name="Medium",
            description="Sometimes mild burn, tans uniformly. Moderately sun-sensitive.",
            eligibility=Eligibility.GOOD,
            message=(
                "Good candidate for CO2 laser resurfacing. Your skin type generally "
                "responds well with proper treatment planning."
            ),
            considerations=(
                "Pre-treatment skin conditioning may be recommended",
                "Careful parameter selection for optimal results",
                "Monitor for pigmentation changes during healing",
            ),
        ),
        FitzpatrickType.TYPE_IV: Classification(
            tier=FitzpatrickType.TYPE_IV,
            type_label="Type IV",
            name="Olive",
            description="Burns minimally, always tans well. Minimal sun sensitivity.",
            eligibility=Eligibility.MODERATE,
            message=(
                "Moderate candidate for CO2 laser resurfacing. Treatment is possible "
                "but requires careful assessment and may need modified protocols."
            ),
            considerations=(
                "Higher risk of post-inflammatory hyperpigmentation",
                "Pre-treatment with skin lightening agents often recommended",
                "Conservative treatment settings typically used",
                "Extended consultation recommended",
            ),
        ),
        FitzpatrickType.TYPE_V: Classification(
            tier=FitzpatrickType.TYPE_V,
            type_label="Type V",
            name="Brown",
            description="Rarely burns, tans darkly easily. Sun-insensitive skin.",
            eligibility=Eligibility.LIMITED,
            message=(
                "CO2 laser resurfacing carries significant risks for your skin type. "
                "We recommend exploring alternative treatments that can achieve "
                "similar results more safely."
            ),
            considerations=(
                "Significant risk of hyperpigmentation and scarring with CO2",
                "Alternative treatments like chemical peels or microneedling often preferred",
                "Specialised protocols available for darker skin types",
                "Comprehensive consultation essential to discuss all options",
            ),
        ),
        FitzpatrickType.TYPE_VI: Classification(
            tier=FitzpatrickType.TYPE_VI,
            type_label="Type VI",
            name="Dark Brown/Black",
            description="Never burns, deeply pigmented. Sun-insensitive skin.",
            eligibility=Eligibility.NOT_RECOMMENDED,
            message=(
                "CO2 laser resurfacing is not recommended for your skin type due to "
                "high complication risks. However, we have excellent alternative "
                "treatments that are safe and effective for your skin."
            ),
            considerations=(
                "Very high risk of hyperpigmentation, hypopigmentation, and scarring with CO2",
                "Safe and effective alternatives available",
                "Options include: gentle chemical peels, microneedling, or specialised darker skin protocols",
                "Our specialists can recommend the best approach for your goals",
            ),
        ),
    }
)


def by_tier(tier: int) -> Classification:
    """Return the classification for tier 1..6.

    Raises:
        TierOutOfRangeError: if tier is not one of the six Fitzpatrick types.
    """
    try:
        return _TABLE[FitzpatrickType(tier)]
    except ValueError as exc:
        raise TierOutOfRangeError(tier=tier) from exc


def all_classifications() -> tuple[Classification, ...]:
    """Every classification, ordered from Type I to Type VI."""
    return tuple(_TABLE[member] for member in FitzpatrickType)
