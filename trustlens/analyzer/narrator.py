"""Positive/negative trust highlights derived from the signal set."""

from __future__ import annotations

from typing import Optional

from .categories import country_government_name, government_suffix
from .models import DomainSignals, PhishingAssessment, TrustHighlights

NO_RED_FLAGS_SCORE = 70

LIMITED_POSITIVE = "Limited positive information available about this website"
NO_RED_FLAGS = "No major red flags detected during our analysis"
WEAK_SIGNALS = "Some trust signals are weaker than expected, so verify this website before sharing personal details"


def _category_lines(domain: str) -> list[str]:
    country = country_government_name(domain)
    if country:
        return [
            f"This is the official government website of {country}",
            "This domain is operated by the official government and is highly trustworthy",
            "Government websites are strictly regulated and secure",
        ]
    if domain.endswith(".edu"):
        return [
            "This is a .edu domain - restricted to accredited educational institutions only",
            "Educational domains undergo strict verification before issuance",
            ".edu domains are highly regulated and trustworthy",
        ]
    if domain.endswith(".gov"):
        return [
            "This is a .gov domain - restricted to official US government entities only",
            "Government domains are strictly controlled and verified",
            ".gov domains represent official government websites",
        ]

    suffix = government_suffix(domain)
    if suffix is None:
        return []
    kind, country_code = suffix
    regulated = (
        "Country-specific government domains are strictly regulated and verified"
        if kind == "gov"
        else "Government domains are strictly controlled and verified"
    )
    return [
        f"This is a {country_code.upper()} government domain (.{kind}.{country_code})"
        " - restricted to official government entities",
        regulated,
        "These domains represent official government websites",
    ]


def _age_text(age: float) -> str:
    return f"{age:.1f}"


def narrate(
    signals: DomainSignals,
    phishing: Optional[PhishingAssessment],
    score: int,
) -> TrustHighlights:
    """Build highlights from the signals; always returns non-empty lists."""
    phishing = phishing or PhishingAssessment()
    positive: list[str] = _category_lines(signals.domain)
    negative: list[str] = []
    age = signals.domain_age_years
    keyword_count = len(signals.scam_keywords)
    transparent_org = signals.has_organization and not signals.privacy_protected

    if signals.has_tls:
        positive.append("We found a valid SSL certificate")
    if age is not None:
        if age >= 5:
            positive.append(
                f"This website has been active for {_age_text(age)} years, indicating established presence"
            )
        elif age >= 2:
            positive.append(f"Domain has been registered for {_age_text(age)} years")
    if keyword_count == 0:
        positive.append("No obvious scam-related keywords were detected in the domain name")
    if not phishing.is_phishing:
        positive.append("Our phishing detection system did not identify this as a phishing attempt")
    if transparent_org:
        positive.append("Organization information is publicly available, showing transparency")
    if score >= 80:
        positive.append("The website shows multiple positive trust signals")

    if not signals.has_tls:
        negative.append("The website does not have a valid SSL certificate, which is concerning for security")
    if age is None:
        negative.append("We could not determine when this domain was registered, so it is treated as new")
    elif age < 0.5:
        negative.append("The age of this site is very young (less than 6 months old)")
    elif age < 1:
        negative.append(
            "This is a relatively new domain (less than 1 year old), which requires extra caution"
        )
    if keyword_count > 0:
        plural = "s" if keyword_count > 1 else ""
        negative.append(
            f"The domain contains {keyword_count} suspicious keyword{plural} commonly associated with scams"
        )
    if phishing.is_phishing:
        negative.append(
            f"Our phishing detection flagged this as a potential phishing site with {phishing.confidence}% confidence"
        )
        if phishing.likely_target:
            negative.append(f"This site may be impersonating {phishing.likely_target}")
    if not signals.has_organization:
        negative.append("No organization information is publicly available, which reduces transparency")
    elif signals.privacy_protected:
        negative.append("Organization information is hidden behind privacy protection services")
    if score < 40:
        negative.append("The overall trust score is critically low, indicating high risk")
    elif score < 60:
        negative.append("The trust score suggests limited positive signals about this website")

    if not positive:
        positive.append(LIMITED_POSITIVE)
    if not negative:
        negative.append(NO_RED_FLAGS if score >= NO_RED_FLAGS_SCORE else WEAK_SIGNALS)

    return TrustHighlights(positive=tuple(positive), negative=tuple(negative))
