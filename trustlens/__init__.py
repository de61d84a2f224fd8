"""TrustLens - rule-based domain trust and phishing scoring."""

from .analyzer import TrustEngine, evaluate
from .analyzer.models import InvalidInput, TrustResult
from .constants import TrustVerdict

__version__ = "1.0.0"

__all__ = [
    "TrustEngine",
    "evaluate",
    "InvalidInput",
    "TrustResult",
    "TrustVerdict",
]
