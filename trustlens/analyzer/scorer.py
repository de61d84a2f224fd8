"""Trust score calculation for domains."""

from __future__ import annotations

import logging
from typing import Optional

from ..constants import DomainCategory
from . import tables as t
from .categories import classify_domain
from .models import DomainSignals, PhishingAssessment, ScoreBreakdown, ScoreFactor
from .rules import first_match

logger = logging.getLogger(__name__)


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def _age_factor(signals: DomainSignals) -> ScoreFactor:
    age = signals.domain_age_years
    if age is None:
        return ScoreFactor("age", t.UNKNOWN_AGE_POINTS, "Domain age unknown, assuming new")
    for minimum, points, description in t.AGE_BANDS:
        if age >= minimum:
            return ScoreFactor("age", points, f"{age:.2f} years old, {description}")
    # Negative ages are filtered by the normalizer; treat anything left as brand new
    return ScoreFactor("age", t.AGE_BANDS[-1][1], f"{age:.2f} years old")


def _tls_factor(signals: DomainSignals) -> ScoreFactor:
    if signals.has_tls:
        return ScoreFactor("tls", t.TLS_PRESENT_POINTS, "TLS certificate present")
    return ScoreFactor("tls", t.TLS_ABSENT_POINTS, "No TLS certificate")


def _phishing_factor(phishing: PhishingAssessment) -> ScoreFactor:
    for minimum, points in t.PHISHING_PENALTIES:
        if phishing.confidence >= minimum:
            return ScoreFactor(
                "phishing", points, f"Phishing confidence {phishing.confidence}%"
            )
    return ScoreFactor("phishing", 0, "No phishing indicators")


def _keyword_factor(signals: DomainSignals) -> ScoreFactor:
    count = len(signals.scam_keywords)
    if not count:
        return ScoreFactor("scam_keywords", 0, "No scam keywords")
    penalty = -min(t.SCAM_KEYWORD_PENALTY_CAP, count * t.SCAM_KEYWORD_PENALTY)
    return ScoreFactor("scam_keywords", penalty, f"Scam keywords: {', '.join(signals.scam_keywords)}")


def _length_factor(signals: DomainSignals) -> ScoreFactor:
    length = signals.domain_length
    for upper, points in t.LENGTH_BANDS:
        if length < upper:
            return ScoreFactor("length", points, f"Domain length {length}")
    return ScoreFactor("length", t.LONGEST_DOMAIN_POINTS, f"Domain length {length}")


def _naming_factor(signals: DomainSignals) -> ScoreFactor:
    """Dense lexical micro-patterns, independent of the phishing detector."""
    domain = signals.domain
    points = 0
    reasons: list[str] = []
    for rule in t.NAMING_RULES:
        if rule.regex.search(domain):
            points += rule.weight
            reasons.append(rule.message)

    special = len(t.SPECIAL_CHARACTER_RE.findall(domain))
    if special > t.SPECIAL_CHARACTER_ALLOWANCE:
        points -= (special - t.SPECIAL_CHARACTER_ALLOWANCE) * t.SPECIAL_CHARACTER_PENALTY
        reasons.append(f"{special} special characters")

    return ScoreFactor("naming", points, "; ".join(reasons) or "No suspicious naming patterns")


def _tld_factor(signals: DomainSignals) -> ScoreFactor:
    rule = first_match(t.TLD_CLASSES, signals.domain)
    if rule is None:
        return ScoreFactor("tld", t.UNKNOWN_TLD_POINTS, "Unknown/uncommon TLD")
    return ScoreFactor("tld", rule.weight, rule.message)


def _registrar_factor(signals: DomainSignals) -> ScoreFactor:
    registrar = signals.registrar
    if not registrar:
        return ScoreFactor("registrar", t.MISSING_REGISTRAR_POINTS, "No registrar information")
    for reputation in t.REGISTRAR_CLASSES:
        if reputation.matches(registrar):
            return ScoreFactor("registrar", reputation.weight, f"{reputation.message}: {registrar}")
    return ScoreFactor("registrar", t.UNKNOWN_REGISTRAR_POINTS, f"Unknown registrar: {registrar}")


def _organization_factor(signals: DomainSignals) -> ScoreFactor:
    if not signals.has_organization:
        return ScoreFactor("organization", t.MISSING_ORGANIZATION_POINTS, "No organization information")
    if signals.privacy_protected:
        return ScoreFactor(
            "organization", t.PRIVATE_ORGANIZATION_POINTS, "Privacy-protected organization information"
        )
    length = len(signals.organization)
    for minimum, points, description in t.ORGANIZATION_TIERS:
        if length > minimum:
            return ScoreFactor("organization", points, f"{description}: {signals.organization}")
    return ScoreFactor("organization", t.ORGANIZATION_TIERS[-1][1], t.ORGANIZATION_TIERS[-1][2])


def _education_breakdown(signals: DomainSignals) -> ScoreBreakdown:
    factors: list[ScoreFactor] = []
    if signals.has_tls:
        factors.append(ScoreFactor("tls", t.EDU_TLS_BONUS, "TLS certificate present"))
    if signals.scam_keywords:
        factors.append(
            ScoreFactor(
                "scam_keywords",
                -len(signals.scam_keywords) * t.EDU_KEYWORD_PENALTY,
                f"Unusual keywords: {', '.join(signals.scam_keywords)}",
            )
        )
    raw = t.EDU_BASE + sum(f.points for f in factors)
    return ScoreBreakdown(
        category=DomainCategory.EDUCATION,
        base=t.EDU_BASE,
        factors=tuple(factors),
        score=clamp(raw, t.EDU_MIN, t.EDU_MAX),
    )


class TrustScorer:
    """Weighted multi-factor trust scoring with category overrides."""

    def breakdown(
        self, signals: DomainSignals, phishing: Optional[PhishingAssessment] = None
    ) -> ScoreBreakdown:
        phishing = phishing or PhishingAssessment()
        category = classify_domain(signals.domain)

        if category is DomainCategory.GOVERNMENT:
            logger.debug("%s is a government domain; score fixed at %s", signals.domain, t.GOVERNMENT_SCORE)
            return ScoreBreakdown(
                category=category,
                base=t.GOVERNMENT_SCORE,
                factors=(),
                score=t.GOVERNMENT_SCORE,
            )

        if category is DomainCategory.EDUCATION:
            result = _education_breakdown(signals)
            logger.debug("%s is an education domain; score %s", signals.domain, result.score)
            return result

        factors = (
            _age_factor(signals),
            _tls_factor(signals),
            _phishing_factor(phishing),
            _keyword_factor(signals),
            _length_factor(signals),
            _naming_factor(signals),
            _tld_factor(signals),
            _registrar_factor(signals),
            _organization_factor(signals),
        )

        running = t.REGULAR_BASE
        for factor in factors:
            running += factor.points
            logger.debug(
                "%s %s: %+d (%s, total %s)",
                signals.domain,
                factor.name,
                factor.points,
                factor.reason,
                running,
            )

        score = clamp(running)
        logger.debug("%s final score %s (raw %s)", signals.domain, score, running)
        return ScoreBreakdown(
            category=category,
            base=t.REGULAR_BASE,
            factors=factors,
            score=score,
        )

    def score(self, signals: DomainSignals, phishing: Optional[PhishingAssessment] = None) -> int:
        return self.breakdown(signals, phishing).score


_default_scorer = TrustScorer()


def score(signals: DomainSignals, phishing: Optional[PhishingAssessment] = None) -> int:
    """Trust score in [0, 100] for a signal set and its phishing assessment."""
    return _default_scorer.score(signals, phishing)


def score_breakdown(
    signals: DomainSignals, phishing: Optional[PhishingAssessment] = None
) -> ScoreBreakdown:
    return _default_scorer.breakdown(signals, phishing)
