"""Government and education domain classification."""

from __future__ import annotations

from typing import Optional

from ..constants import DomainCategory
from .tables import COUNTRY_GOV_NAMES, COUNTRY_GOV_PATTERNS, GOVERNMENT_SUFFIX_PATTERNS


def is_government_domain(domain: str) -> bool:
    lowered = domain.lower()
    return any(p.search(lowered) for p in GOVERNMENT_SUFFIX_PATTERNS) or any(
        p.match(lowered) for p in COUNTRY_GOV_PATTERNS
    )


def is_education_domain(domain: str) -> bool:
    return domain.lower().endswith(".edu")


def classify_domain(domain: str) -> DomainCategory:
    """Return the category override that applies to a domain, if any."""
    if is_government_domain(domain):
        return DomainCategory.GOVERNMENT
    if is_education_domain(domain):
        return DomainCategory.EDUCATION
    return DomainCategory.REGULAR


def country_government_name(domain: str) -> Optional[str]:
    """Friendly country name for a national government portal (canada.ca, gov.uk, ...)."""
    lowered = domain.lower()
    if lowered.startswith("www."):
        lowered = lowered[4:]
    return COUNTRY_GOV_NAMES.get(lowered)


def government_suffix(domain: str) -> Optional[tuple[str, str]]:
    """Return (suffix kind, country code) for .gov.<cc>, .gob.<cc> and .gouv.<cc> domains."""
    lowered = domain.lower()
    for kind, pattern in zip(("gov", "gob", "gouv"), GOVERNMENT_SUFFIX_PATTERNS[1:]):
        match = pattern.search(lowered)
        if match:
            return kind, match.group(1)
    return None
