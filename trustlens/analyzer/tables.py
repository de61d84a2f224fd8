"""Declarative rule tables for the trust engine.

Every weight, keyword list and message used by the detector, scorer and
narrator lives here. Table order is significant wherever a rule can set
state (brand targets) or where the first matching class wins (TLDs,
registrars).
"""

from __future__ import annotations

import re

from .rules import BrandRule, KeywordClass, PatternRule

# --- Lexical pattern detector --------------------------------------------

# A 1-3 digit run is what remains after dropping runs of 4+ digits (years, zip codes)
DETECTOR_PREFIX_RULES: tuple[PatternRule, ...] = (
    PatternRule.compile(
        "digit_substitution",
        r"(?<!\d)\d{1,3}(?!\d)",
        15,
        "Contains numbers that may replace letters",
    ),
    PatternRule.compile("excessive_hyphens", r"-[^-]*-[^-]*-", 10, "Excessive use of hyphens"),
    PatternRule.compile(
        "cyrillic_homograph",
        r"[\u0400-\u04ff]",
        25,
        "Contains Cyrillic characters that look like Latin (homograph)",
    ),
)

DEFAULT_BRANDS: tuple[BrandRule, ...] = (
    BrandRule("google", ("g00gle", "googel", "gogle", "goog1e", "go0gle")),
    BrandRule("facebook", ("facebo0k", "facebok", "faceb00k", "facebk")),
    BrandRule("paypal", ("paypai", "paypa1", "paypa-l", "paypol")),
    BrandRule("amazon", ("amazom", "amaz0n", "arnazon", "amazn")),
    BrandRule("microsoft", ("micros0ft", "rnicrosoft", "microsft")),
    BrandRule("apple", ("app1e", "appl3", "appie", "aple")),
    BrandRule("netflix", ("netfl1x", "netfllx", "netfiix", "netfl-x")),
    BrandRule("instagram", ("instagrarn", "instagran", "inst4gram")),
    BrandRule("whatsapp", ("whatsap", "what5app", "whats-app", "whatsaap")),
)

DETECTOR_LONG_DOMAIN_RULE = PatternRule.compile("long_domain", r"^.{31,}$", 5, "Unusually long domain name")

PHISHING_KEYWORDS: tuple[str, ...] = ("secure", "login", "verify", "account", "auth", "support")
PHISHING_KEYWORD_WEIGHT = 10

# --- Signal normalizer ---------------------------------------------------

DEFAULT_SCAM_KEYWORDS: tuple[str, ...] = (
    "free",
    "win",
    "prize",
    "lottery",
    "claim",
    "urgent",
    "verify",
    "account",
    "suspended",
    "bitcoin",
    "crypto-invest",
    "paypal",
    "secure",
    "update",
    "confirm",
    "banking",
)

PRIVACY_SERVICES: tuple[str, ...] = (
    "privacy",
    "protected",
    "redacted",
    "whois",
    "guard",
    "proxy",
    "not disclosed",
    "data protected",
    "gdpr",
    "withheld",
    "contact privacy",
    "domains by proxy",
    "whoisguard",
    "perfect privacy",
    "private registration",
)

# WHOIS/RDAP fillers that mean "no data"
UNAVAILABLE_PLACEHOLDERS: frozenset[str] = frozenset(
    {
        "",
        "unknown",
        "none",
        "null",
        "n/a",
        "na",
        "information not available",
        "not available",
        "analysis complete",
    }
)

# --- Category overrides --------------------------------------------------

GOVERNMENT_SUFFIX_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\.gov$"),
    re.compile(r"\.gov\.([a-z]{2,3})$"),
    re.compile(r"\.gob\.([a-z]{2})$"),
    re.compile(r"\.gouv\.([a-z]{2})$"),
)

COUNTRY_GOV_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"^(www\.)?canada\.ca$"),
    re.compile(r"^(www\.)?australia\.gov\.au$"),
    re.compile(r"^(www\.)?govt\.nz$"),
    re.compile(r"^(www\.)?india\.gov\.in$"),
    re.compile(r"^(www\.)?usa\.gov$"),
    re.compile(r"^(www\.)?gov\.uk$"),
    re.compile(r"^(www\.)?government\.[a-z]{2,3}$"),
    re.compile(r"^(www\.)?gc\.ca$"),
    re.compile(r"^(www\.)?service\.gov\.uk$"),
)

COUNTRY_GOV_NAMES: dict[str, str] = {
    "canada.ca": "Canada",
    "gc.ca": "Canada (Government of Canada)",
    "australia.gov.au": "Australia",
    "govt.nz": "New Zealand",
    "india.gov.in": "India",
    "usa.gov": "United States",
    "gov.uk": "United Kingdom",
    "service.gov.uk": "United Kingdom",
}

GOVERNMENT_SCORE = 100
EDU_BASE = 75
EDU_TLS_BONUS = 10
EDU_KEYWORD_PENALTY = 2
EDU_MIN = 65
EDU_MAX = 95

# --- Trust scorer --------------------------------------------------------

REGULAR_BASE = 40

UNKNOWN_AGE_POINTS = -25

# (minimum age in years, points, description), checked top-down
AGE_BANDS: tuple[tuple[float, int, str], ...] = (
    (10, 35, "very established domain"),
    (5, 28, "well-established domain"),
    (3, 20, "moderately established domain"),
    (2, 12, "somewhat established domain"),
    (1, 5, "new but not brand new"),
    (0.5, -5, "less than a year old"),
    (0.25, -15, "three to six months old"),
    (0, -25, "less than three months old"),
)

TLS_PRESENT_POINTS = 15
TLS_ABSENT_POINTS = -25

# (minimum confidence, points), checked top-down; zero confidence costs nothing
PHISHING_PENALTIES: tuple[tuple[int, int], ...] = (
    (80, -50),
    (60, -40),
    (40, -25),
    (20, -10),
    (1, -5),
)

SCAM_KEYWORD_PENALTY = 12
SCAM_KEYWORD_PENALTY_CAP = 35

# (exclusive upper length bound, points); lengths past the last bound use LONGEST_DOMAIN_POINTS
LENGTH_BANDS: tuple[tuple[int, int], ...] = (
    (6, 8),
    (12, 5),
    (18, 0),
    (25, -5),
    (35, -12),
)
LONGEST_DOMAIN_POINTS = -25

NAMING_RULES: tuple[PatternRule, ...] = (
    PatternRule.compile("number_sequence", r"\d{3,}", -15, "Contains number sequences"),
    PatternRule.compile("two_digit_number", r"\d{2}", -8, "Contains 2-digit numbers"),
    PatternRule.compile("number", r"\d", -5, "Contains numbers in domain"),
    PatternRule.compile("consecutive_hyphens", r"-{2,}", -12, "Multiple consecutive hyphens"),
    PatternRule.compile("double_hyphen", r"--", -8, "Double hyphens"),
    PatternRule.compile("leading_number", r"^[0-9]", -10, "Starts with number"),
    PatternRule.compile(
        "promotional",
        r"(free|win|prize|claim|bonus|gift|lucky|deal|offer|discount|cheap|sale)",
        -15,
        "Promotional keywords",
        re.IGNORECASE,
    ),
    PatternRule.compile("shop", r"(shop|store|market|buy|sell)", -8, "Generic shop keywords", re.IGNORECASE),
    PatternRule.compile(
        "phishing_vocabulary",
        r"(login|signin|account|secure|verify|auth|update|reset)",
        -20,
        "Phishing keywords",
        re.IGNORECASE,
    ),
    PatternRule.compile(
        "legitimacy_claims",
        r"(official|real|legit|genuine|authentic|trusted|verified)",
        -15,
        "Over-assertive legitimacy claims",
        re.IGNORECASE,
    ),
    PatternRule.compile(
        "character_substitution", r"[0o1il]{3,}", -12, "Character substitution pattern", re.IGNORECASE
    ),
    PatternRule.compile("repeated_characters", r"(.)\1{3,}", -10, "Repeated characters"),
    PatternRule.compile(
        "urgency",
        r"(24|247|365|fast|instant|quick|best|top|super)",
        -8,
        "Urgency/superlative keywords",
        re.IGNORECASE,
    ),
)

SPECIAL_CHARACTER_RE = re.compile(r"[^a-z0-9.]")
SPECIAL_CHARACTER_ALLOWANCE = 2
SPECIAL_CHARACTER_PENALTY = 5

TLD_CLASSES: tuple[PatternRule, ...] = (
    PatternRule.compile("trusted_tld", r"\.(edu|gov|org)$", 15, "Highly trusted TLD"),
    PatternRule.compile(
        "common_tld", r"\.(com|net|co\.uk|us|ca|de|fr|au|uk|nl)$", 5, "Common TLD"
    ),
    PatternRule.compile(
        "suspicious_tld",
        r"\.(tk|ml|ga|cf|gq|xyz|top|click|loan|review)$",
        -25,
        "Suspicious TLD",
    ),
)
UNKNOWN_TLD_POINTS = -10

REGISTRAR_CLASSES: tuple[KeywordClass, ...] = (
    KeywordClass(
        "trusted",
        (
            "google domains",
            "cloudflare",
            "amazon registrar",
            "microsoft",
            "godaddy",
            "namecheap",
            "gandi",
            "enom",
            "network solutions",
        ),
        10,
        "Trusted registrar",
        exclusions=("freenom",),
    ),
    KeywordClass(
        "moderate",
        (
            "name.com",
            "hover",
            "1&1",
            "tucows",
            "bluehost",
            "hostgator",
            "domain.com",
            "register.com",
            "inwx",
            "dynadot",
            "ionos",
            "ovh",
            "key-systems",
        ),
        5,
        "Moderate registrar",
    ),
    KeywordClass(
        "suspicious",
        (
            "freenom",
            "dot.tk",
            "namecheap basic",
            "pdr",
            "wildwestdomains",
            "registrar of domain names",
            "bizcn",
            "alibaba",
            "hangzhou",
            "eranet",
            "onlinenic",
            "west263",
            "xin net",
            "hichina",
            "nicenic",
            "cheap",
            "discount",
            "free",
            "domains by proxy",
        ),
        -25,
        "High-risk registrar",
    ),
)
UNKNOWN_REGISTRAR_POINTS = -5
MISSING_REGISTRAR_POINTS = -10

# (exclusive minimum length, points, description), checked top-down
ORGANIZATION_TIERS: tuple[tuple[int, int, str], ...] = (
    (50, 15, "Detailed organization information"),
    (20, 12, "Organization information"),
    (5, 8, "Basic organization name"),
    (0, 5, "Minimal organization information"),
)
PRIVATE_ORGANIZATION_POINTS = -5
MISSING_ORGANIZATION_POINTS = -8
