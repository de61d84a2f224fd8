"""Trust engine data models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from ..constants import PHISHING_CONFIDENCE_THRESHOLD, DomainCategory, TrustVerdict


class InvalidInput(ValueError):
    """Input violates the engine's type/contract boundary."""

    pass


@dataclass(frozen=True)
class DomainSignals:
    """Canonical signal set for one evaluation."""

    domain: str
    domain_age_years: Optional[float]
    has_tls: bool
    registrar: Optional[str]
    organization: Optional[str]
    domain_length: int
    scam_keywords: tuple[str, ...] = ()
    privacy_protected: bool = False

    def __post_init__(self):
        if not isinstance(self.domain, str) or not self.domain:
            raise InvalidInput("domain must be a non-empty string")
        if not isinstance(self.has_tls, bool):
            raise InvalidInput(f"has_tls must be a bool, got {type(self.has_tls).__name__}")
        if isinstance(self.domain_length, bool) or not isinstance(self.domain_length, int):
            raise InvalidInput("domain_length must be an int")
        if self.domain_length < 0:
            raise InvalidInput(f"domain_length must be non-negative, got {self.domain_length}")
        if self.domain_length != len(self.domain):
            raise InvalidInput(
                f"domain_length {self.domain_length} does not match domain {self.domain!r}"
            )
        if self.domain_age_years is not None:
            if isinstance(self.domain_age_years, bool) or not isinstance(
                self.domain_age_years, (int, float)
            ):
                raise InvalidInput("domain_age_years must be a number or None")
            if not math.isfinite(self.domain_age_years):
                raise InvalidInput(f"domain_age_years must be finite, got {self.domain_age_years}")

    @property
    def has_organization(self) -> bool:
        return bool(self.organization and self.organization.strip())


@dataclass(frozen=True)
class PhishingAssessment:
    """Lexical phishing assessment for a domain."""

    confidence: int = 0
    patterns: tuple[str, ...] = ()
    likely_target: Optional[str] = None

    @property
    def is_phishing(self) -> bool:
        return self.confidence >= PHISHING_CONFIDENCE_THRESHOLD

    def to_dict(self) -> dict:
        return {
            "isPhishing": self.is_phishing,
            "confidence": self.confidence,
            "patterns": list(self.patterns),
            "likelyTarget": self.likely_target,
        }


@dataclass(frozen=True)
class TrustHighlights:
    """Human-readable positive/negative statements."""

    positive: tuple[str, ...] = ()
    negative: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"positive": list(self.positive), "negative": list(self.negative)}


@dataclass(frozen=True)
class ScoreFactor:
    """One additive term of the trust score."""

    name: str
    points: int
    reason: str


@dataclass(frozen=True)
class ScoreBreakdown:
    """Trust score plus the terms that produced it."""

    category: DomainCategory
    base: int
    factors: tuple[ScoreFactor, ...]
    score: int

    @property
    def raw_total(self) -> int:
        return self.base + sum(f.points for f in self.factors)


@dataclass(frozen=True)
class TrustAdvice:
    """Summary reasons and safety tips for a report."""

    reasons: tuple[str, ...] = ()
    safety_tips: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"reasons": list(self.reasons), "safetyTips": list(self.safety_tips)}


@dataclass(frozen=True)
class TrustResult:
    """Complete evaluation output."""

    signals: DomainSignals
    score: int
    verdict: TrustVerdict
    phishing: PhishingAssessment
    highlights: TrustHighlights
    breakdown: ScoreBreakdown
    advice: TrustAdvice = field(default_factory=TrustAdvice)

    @property
    def domain(self) -> str:
        return self.signals.domain

    def to_dict(self) -> dict:
        """JSON-ready mapping; core keys follow the public evaluate() contract."""
        return {
            "domain": self.signals.domain,
            "score": self.score,
            "verdict": self.verdict.label,
            "phishing": self.phishing.to_dict(),
            "highlights": self.highlights.to_dict(),
            "category": str(self.breakdown.category),
            "factors": [
                {"name": f.name, "points": f.points, "reason": f.reason}
                for f in self.breakdown.factors
            ],
            "advice": self.advice.to_dict(),
            "signals": {
                "domainAgeYears": self.signals.domain_age_years,
                "hasTLS": self.signals.has_tls,
                "registrar": self.signals.registrar,
                "organization": self.signals.organization,
                "domainLength": self.signals.domain_length,
                "scamKeywords": list(self.signals.scam_keywords),
                "privacyProtected": self.signals.privacy_protected,
            },
        }
