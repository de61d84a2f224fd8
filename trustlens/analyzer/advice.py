"""Deterministic report reasons and safety tips.

Used on its own, or as the fallback when no language-model narrative is
layered on top of the engine output.
"""

from __future__ import annotations

from typing import Sequence

from .models import TrustAdvice

GENERAL_TIPS = (
    "Never share passwords or financial information unless you're absolutely certain of legitimacy",
    "Look for contact information, privacy policy, and terms of service on the website",
    "Check online reviews and ratings from trusted sources like Trustpilot or BBB",
    "Use antivirus software and keep your browser security features enabled",
)


def advise(score: int, scam_keywords: Sequence[str], has_tls: bool) -> TrustAdvice:
    reasons: list[str] = []
    keywords = ", ".join(scam_keywords)

    if score >= 70:
        reasons.append("Website appears to have an established online presence")
        if has_tls:
            reasons.append("Secure HTTPS connection is enabled for encrypted data transmission")
        if not scam_keywords:
            reasons.append("No suspicious keywords detected in domain name")
        reasons.append("Trust score indicates a relatively safe website")
        reasons.append("Domain structure follows standard naming conventions")
    elif score >= 50:
        reasons.append("Website shows mixed security indicators - proceed with caution")
        if not has_tls:
            reasons.append("Missing HTTPS/SSL security certificate - data is not encrypted")
        if scam_keywords:
            reasons.append(f"Domain contains {len(scam_keywords)} suspicious keyword(s): {keywords}")
        reasons.append("Further verification recommended before sharing sensitive information")
    else:
        reasons.append("Website shows multiple risk indicators - high caution advised")
        if not has_tls:
            reasons.append("No SSL certificate detected - data transmission is not encrypted")
        if scam_keywords:
            reasons.append(f"High-risk keywords found in domain: {keywords}")
        reasons.append("Low trust score indicates potential security concerns")
        reasons.append("Strongly recommended to avoid entering personal or financial information")

    tips = list(GENERAL_TIPS)
    if not has_tls:
        tips.append(
            "Avoid entering sensitive data on non-HTTPS websites - your information could be intercepted"
        )
    if score < 60:
        tips.append("Consider using alternative, well-known websites for similar services")
    if scam_keywords:
        tips.append("Be extra vigilant - suspicious keywords detected in domain name")

    return TrustAdvice(reasons=tuple(reasons), safety_tips=tuple(tips))
