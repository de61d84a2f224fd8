"""Trust evaluation engine: normalize, detect, score, classify, narrate."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable, Optional, Union

from ..constants import TrustVerdict
from .advice import advise
from .detector import PhishingDetector
from .models import TrustResult
from .narrator import narrate
from .rules import BrandRule
from .scorer import TrustScorer
from .signals import RawDate, normalize
from .tables import DEFAULT_SCAM_KEYWORDS

logger = logging.getLogger(__name__)


class TrustEngine:
    """Stateless domain trust evaluator.

    Holds only immutable rule tables, so one instance can serve any number of
    concurrent evaluations.
    """

    def __init__(
        self,
        brands: Iterable[BrandRule] | None = None,
        scam_keywords: Iterable[str] | None = None,
    ):
        self.scam_keywords: tuple[str, ...] = (
            tuple(scam_keywords) if scam_keywords is not None else DEFAULT_SCAM_KEYWORDS
        )
        self.detector = PhishingDetector(brands=brands)
        self.scorer = TrustScorer()

    def evaluate(
        self,
        domain: str,
        registration_date: RawDate,
        has_tls: bool,
        registrar: Optional[str],
        organization: Optional[str],
        now: Union[date, datetime],
    ) -> TrustResult:
        """Evaluate one domain; raises InvalidInput only on contract violations."""
        signals = normalize(
            domain,
            registration_date,
            has_tls,
            registrar,
            organization,
            now,
            scam_keywords=self.scam_keywords,
        )
        phishing = self.detector.detect(signals.domain)
        breakdown = self.scorer.breakdown(signals, phishing)
        verdict = TrustVerdict.from_score(breakdown.score)
        highlights = narrate(signals, phishing, breakdown.score)

        logger.info(
            "Evaluated %s: score=%s verdict=%s phishing=%s%%",
            signals.domain,
            breakdown.score,
            verdict,
            phishing.confidence,
        )

        return TrustResult(
            signals=signals,
            score=breakdown.score,
            verdict=verdict,
            phishing=phishing,
            highlights=highlights,
            breakdown=breakdown,
            advice=advise(breakdown.score, signals.scam_keywords, signals.has_tls),
        )


_default_engine = TrustEngine()


def evaluate(
    domain: str,
    registration_date: RawDate,
    has_tls: bool,
    registrar: Optional[str],
    organization: Optional[str],
    now: Union[date, datetime],
) -> TrustResult:
    """Evaluate a domain with the default rule tables."""
    return _default_engine.evaluate(domain, registration_date, has_tls, registrar, organization, now)
