"""Plain-text report formatting for trust results."""

from typing import Optional

from .analyzer.models import TrustResult
from .constants import TrustVerdict


def domain_age_text(age_years: Optional[float]) -> str:
    """Human-readable approximation of a domain's age."""
    if age_years is None:
        return "Information not available"
    if age_years >= 1:
        years = int(age_years)
        return f"~{years} year{'s' if years != 1 else ''}"
    months = int(age_years * 12)
    if months >= 1:
        return f"~{months} month{'s' if months != 1 else ''}"
    return "Less than 1 month"


class ReportFormatter:
    """Formats trust results for terminal output."""

    VERDICT_EMOJI = {
        TrustVerdict.HIGHLY_TRUSTWORTHY: "✅",  # Check mark
        TrustVerdict.LIKELY_SAFE: "ℹ️",  # Info
        TrustVerdict.USE_CAUTION: "❓",  # Question mark
        TrustVerdict.HIGH_RISK: "⚠️",  # Warning sign
    }

    @classmethod
    def format_report(cls, result: TrustResult, verbose: bool = False) -> str:
        """Format a full trust report."""
        emoji = cls.VERDICT_EMOJI.get(result.verdict, "❓")
        signals = result.signals

        lines = [
            f"{emoji} {result.verdict.label.upper()}",
            "",
            f"Domain: {result.domain}",
            f"Trust score: {result.score}/100",
            f"Domain age: {domain_age_text(signals.domain_age_years)}",
            f"HTTPS: {'yes' if signals.has_tls else 'no'}",
            f"Registrar: {signals.registrar or 'Unknown'}",
            f"Organization: {signals.organization or 'Not disclosed'}",
        ]

        phishing = result.phishing
        if phishing.is_phishing:
            lines.append("")
            target = f" (likely target: {phishing.likely_target})" if phishing.likely_target else ""
            lines.append(f"\U0001F6A8 PHISHING SUSPECTED: {phishing.confidence}% confidence{target}")
            for pattern in phishing.patterns:
                lines.append(f"  - {pattern}")

        lines.append("")
        lines.append("Positive signals:")
        lines.extend(f"  + {item}" for item in result.highlights.positive)
        lines.append("Concerns:")
        lines.extend(f"  - {item}" for item in result.highlights.negative)

        if verbose:
            breakdown = result.breakdown
            lines.append("")
            lines.append(f"Score breakdown ({breakdown.category}, base {breakdown.base}):")
            for factor in breakdown.factors:
                lines.append(f"  {factor.points:+d} {factor.name}: {factor.reason}")
            if breakdown.raw_total != breakdown.score:
                lines.append(f"  = {breakdown.raw_total}, clamped to {breakdown.score}")

        if result.advice.safety_tips:
            lines.append("")
            lines.append("Safety tips:")
            lines.extend(f"  * {tip}" for tip in result.advice.safety_tips)

        return "\n".join(lines)
