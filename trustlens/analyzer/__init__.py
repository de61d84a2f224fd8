"""Analyzer modules for TrustLens."""

from .detector import PhishingDetector, detect
from .engine import TrustEngine, evaluate
from .narrator import narrate
from .scorer import TrustScorer, score, score_breakdown
from .signals import normalize

__all__ = [
    "PhishingDetector",
    "TrustEngine",
    "TrustScorer",
    "detect",
    "evaluate",
    "narrate",
    "normalize",
    "score",
    "score_breakdown",
]
