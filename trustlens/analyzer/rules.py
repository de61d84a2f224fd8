"""Rule-based building blocks for domain analysis.

Rules are declarative records consumed by a single generic loop
(``apply_rules``); adding a keyword, brand or pattern is a table change.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol


@dataclass
class RuleResult:
    """Outcome of a single rule."""

    name: str
    score: int = 0
    reasons: list[str] = field(default_factory=list)
    target: Optional[str] = None


@dataclass(frozen=True)
class PatternRule:
    """A regex rule with a fixed weight and message."""

    name: str
    regex: re.Pattern
    weight: int
    message: str

    @classmethod
    def compile(cls, name: str, pattern: str, weight: int, message: str, flags: int = 0) -> "PatternRule":
        return cls(name=name, regex=re.compile(pattern, flags), weight=weight, message=message)

    @classmethod
    def substring(cls, name: str, text: str, weight: int, message: str) -> "PatternRule":
        return cls.compile(name, re.escape(text), weight, message, re.IGNORECASE)

    def apply(self, text: str) -> RuleResult:
        if self.regex.search(text):
            return RuleResult(self.name, score=self.weight, reasons=[self.message])
        return RuleResult(self.name)


@dataclass(frozen=True)
class BrandRule:
    """A commonly impersonated brand and its known misspellings."""

    name: str
    variants: tuple[str, ...] = ()
    impersonation_weight: int = 30
    variant_weight: int = 35

    @property
    def display_name(self) -> str:
        return self.name[:1].upper() + self.name[1:]

    @property
    def official_domain(self) -> str:
        return f"{self.name}.com"

    def _has_suspicious_affix(self, domain: str) -> bool:
        name = self.name
        return (
            domain.startswith(f"{name}-")
            or domain.startswith(f"{name}_")
            or f"-{name}" in domain
            or f"_{name}" in domain
            or f"{name}-" in domain
            or f"{name}secure" in domain
        )

    def apply(self, domain: str, registered: str) -> RuleResult:
        """Check one brand against a domain; ``registered`` is its registrable domain."""
        result = RuleResult(f"brand:{self.name}")

        official = registered == self.official_domain
        if self.name in domain and not official:
            if self._has_suspicious_affix(domain):
                result.score += self.impersonation_weight
                result.reasons.append(f"Appears to impersonate {self.display_name}")
                result.target = self.display_name

        for variant in self.variants:
            # "whatsap" is inside "whatsapp"; skip it on the official domain only
            if official and variant in self.name:
                continue
            if variant in domain:
                result.score += self.variant_weight
                result.reasons.append(f"Suspicious spelling variation of {self.display_name}")
                result.target = self.display_name

        return result


@dataclass(frozen=True)
class KeywordClass:
    """A named class of keywords matched as case-insensitive substrings.

    ``exclusions`` veto the class when present, so "enom" does not claim "Freenom".
    """

    name: str
    keywords: tuple[str, ...]
    weight: int
    message: str
    exclusions: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        lowered = (text or "").lower()
        if any(excluded in lowered for excluded in self.exclusions):
            return False
        return any(keyword in lowered for keyword in self.keywords)


class DomainRule(Protocol):
    """Interface for rules applied to a domain string."""

    name: str

    def apply(self, text: str) -> RuleResult:  # pragma: no cover - interface
        ...


def apply_rules(rules: Iterable[DomainRule], text: str) -> tuple[int, list[str]]:
    """Apply every rule in order and sum the matches."""
    score = 0
    reasons: list[str] = []
    for rule in rules:
        result = rule.apply(text)
        score += result.score
        reasons.extend(result.reasons)
    return score, reasons


def first_match(rules: Iterable[PatternRule], text: str) -> Optional[PatternRule]:
    """Return the first rule whose pattern matches, if any."""
    for rule in rules:
        if rule.regex.search(text):
            return rule
    return None
