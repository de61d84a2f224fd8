"""Centralized constants for TrustLens.

Verdict bands and category enums shared by the scorer, narrator and
formatters.
"""

from enum import Enum, IntEnum


class TrustVerdict(IntEnum):
    """Trust verdict bands, ranked from riskiest to most trustworthy."""

    HIGH_RISK = 0
    USE_CAUTION = 1
    LIKELY_SAFE = 2
    HIGHLY_TRUSTWORTHY = 3

    @classmethod
    def from_score(cls, score: int) -> "TrustVerdict":
        """Map a final trust score onto its closed-open band."""
        if not 0 <= score <= 100:
            raise ValueError(f"Trust score out of range: {score}")
        if score >= VERDICT_THRESHOLDS[cls.HIGHLY_TRUSTWORTHY]:
            return cls.HIGHLY_TRUSTWORTHY
        if score >= VERDICT_THRESHOLDS[cls.LIKELY_SAFE]:
            return cls.LIKELY_SAFE
        if score >= VERDICT_THRESHOLDS[cls.USE_CAUTION]:
            return cls.USE_CAUTION
        return cls.HIGH_RISK

    @classmethod
    def from_string(cls, value: str | None) -> "TrustVerdict":
        """Convert a verdict name or label to the enum, defaulting to HIGH_RISK."""
        if not value:
            return cls.HIGH_RISK
        key = " ".join(value.lower().replace("-", " ").replace("_", " ").split())
        mapping = {
            "highly trustworthy": cls.HIGHLY_TRUSTWORTHY,
            "likely safe": cls.LIKELY_SAFE,
            "use caution": cls.USE_CAUTION,
            "high risk": cls.HIGH_RISK,
            "high risk avoid": cls.HIGH_RISK,
        }
        return mapping.get(key, cls.HIGH_RISK)

    @property
    def label(self) -> str:
        return VERDICT_LABELS[self]

    def __str__(self) -> str:
        return self.name.lower()


# Lower bound (inclusive) of each band
VERDICT_THRESHOLDS = {
    TrustVerdict.HIGHLY_TRUSTWORTHY: 80,
    TrustVerdict.LIKELY_SAFE: 60,
    TrustVerdict.USE_CAUTION: 40,
    TrustVerdict.HIGH_RISK: 0,
}

VERDICT_LABELS = {
    TrustVerdict.HIGHLY_TRUSTWORTHY: "Highly Trustworthy",
    TrustVerdict.LIKELY_SAFE: "Likely Safe",
    TrustVerdict.USE_CAUTION: "Use Caution",
    TrustVerdict.HIGH_RISK: "High Risk - Avoid",
}


class DomainCategory(Enum):
    """Domain classes that replace or bound the general scoring formula."""

    GOVERNMENT = "government"
    EDUCATION = "education"
    REGULAR = "regular"

    def __str__(self) -> str:
        return self.value


# Phishing confidence at which a domain is reported as phishing
PHISHING_CONFIDENCE_THRESHOLD = 25
