"""Lexical phishing pattern detection for domain names."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..utils.domains import registered_domain
from .models import PhishingAssessment
from .rules import BrandRule, PatternRule, apply_rules
from .tables import (
    DEFAULT_BRANDS,
    DETECTOR_LONG_DOMAIN_RULE,
    DETECTOR_PREFIX_RULES,
    PHISHING_KEYWORD_WEIGHT,
    PHISHING_KEYWORDS,
)

logger = logging.getLogger(__name__)


def keyword_rules(keywords: Iterable[str], weight: int = PHISHING_KEYWORD_WEIGHT) -> tuple[PatternRule, ...]:
    return tuple(
        PatternRule.substring(f"keyword:{word}", word, weight, f'Contains suspicious keyword: "{word}"')
        for word in keywords
    )


class PhishingDetector:
    """Scores a domain string for phishing and brand-impersonation patterns.

    Rules run in a fixed order and only ever add to the confidence. When
    several brands match, the last brand in table order sets the likely
    target.
    """

    def __init__(
        self,
        brands: Iterable[BrandRule] | None = None,
        keywords: Iterable[str] | None = None,
    ):
        self.brands: tuple[BrandRule, ...] = tuple(brands) if brands is not None else DEFAULT_BRANDS
        self.keyword_rules = keyword_rules(keywords if keywords is not None else PHISHING_KEYWORDS)

    def detect(self, domain: str) -> PhishingAssessment:
        """Assess a normalized (lower-cased, punycode-free) domain."""
        domain = domain.lower()
        confidence, patterns = apply_rules(DETECTOR_PREFIX_RULES, domain)

        brand_score, brand_patterns, target = self._check_brands(domain)
        confidence += brand_score
        patterns.extend(brand_patterns)

        suffix_score, suffix_patterns = apply_rules(
            (DETECTOR_LONG_DOMAIN_RULE, *self.keyword_rules), domain
        )
        confidence += suffix_score
        patterns.extend(suffix_patterns)

        if patterns:
            logger.debug("Phishing patterns for %s (confidence %s): %s", domain, confidence, patterns)

        return PhishingAssessment(
            confidence=min(100, confidence),
            patterns=tuple(patterns),
            likely_target=target,
        )

    def _check_brands(self, domain: str) -> tuple[int, list[str], Optional[str]]:
        """Run every brand rule; no short-circuit, last match sets the target."""
        score = 0
        reasons: list[str] = []
        target: Optional[str] = None
        registered = registered_domain(domain)

        for brand in self.brands:
            result = brand.apply(domain, registered)
            score += result.score
            reasons.extend(result.reasons)
            if result.target:
                target = result.target

        return score, reasons, target


_default_detector = PhishingDetector()


def detect(domain: str) -> PhishingAssessment:
    """Assess a domain with the default brand and keyword tables."""
    return _default_detector.detect(domain)
