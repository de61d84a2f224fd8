"""Signal normalization: raw lookup data to DomainSignals."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Iterable, Optional, Union

from ..utils.domains import canonicalize_domain, decode_punycode
from .models import DomainSignals, InvalidInput
from .tables import DEFAULT_SCAM_KEYWORDS, PRIVACY_SERVICES, UNAVAILABLE_PLACEHOLDERS

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25
SECONDS_PER_YEAR = DAYS_PER_YEAR * 24 * 60 * 60

# Text formats seen in WHOIS output besides ISO-8601
_DATE_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%d-%b-%Y",
    "%d %B %Y",
    "%Y.%m.%d",
    "%Y/%m/%d",
    "%d/%m/%Y",
    "%Y%m%d",
)

RawDate = Union[date, datetime, str, None]


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _coerce_datetime(value: RawDate) -> Optional[datetime]:
    """Best-effort conversion of a registration date; None when unusable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if not isinstance(value, str):
        logger.debug("Ignoring registration date of type %s", type(value).__name__)
        return None

    text = value.strip()
    if text.lower() in UNAVAILABLE_PLACEHOLDERS:
        return None
    try:
        return _as_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    logger.debug("Unparseable registration date: %r", value)
    return None


def domain_age_years(registration: RawDate, now: Union[date, datetime]) -> Optional[float]:
    """Age in years at ``now``; None for missing, malformed or future dates."""
    registered = _coerce_datetime(registration)
    if registered is None:
        return None
    current = _coerce_datetime(now)
    if current is None:
        raise InvalidInput(f"now must be a date or datetime, got {now!r}")
    age = (current - registered).total_seconds() / SECONDS_PER_YEAR
    if age < 0:
        logger.debug("Registration date %s is after %s; treating age as unknown", registered, current)
        return None
    return age


def clean_text(value: Optional[str]) -> Optional[str]:
    """Collapse blank and placeholder lookup values to None."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidInput(f"expected a string or None, got {type(value).__name__}")
    cleaned = value.strip()
    if cleaned.lower() in UNAVAILABLE_PLACEHOLDERS:
        return None
    return cleaned


def find_scam_keywords(domain: str, keywords: Iterable[str] = DEFAULT_SCAM_KEYWORDS) -> tuple[str, ...]:
    """Return scam keywords contained in the domain, in table order."""
    lowered = domain.lower()
    return tuple(keyword for keyword in keywords if keyword in lowered)


def is_privacy_protected(organization: Optional[str]) -> bool:
    if not organization:
        return False
    lowered = organization.lower()
    return any(service in lowered for service in PRIVACY_SERVICES)


def normalize(
    raw_domain: str,
    raw_registration_date: RawDate,
    has_tls: bool,
    registrar: Optional[str],
    organization: Optional[str],
    now: Union[date, datetime],
    scam_keywords: Iterable[str] = DEFAULT_SCAM_KEYWORDS,
) -> DomainSignals:
    """Build the canonical signal set for one evaluation.

    Missing data never raises: unknown dates become a None age and blank
    registrar/organization values become None. Contract violations (empty
    domain, non-bool TLS flag, non-finite age) raise InvalidInput.
    """
    if not isinstance(raw_domain, str):
        raise InvalidInput(f"domain must be a string, got {type(raw_domain).__name__}")
    if not isinstance(now, date):
        raise InvalidInput(f"now must be a date or datetime, got {type(now).__name__}")

    domain = decode_punycode(canonicalize_domain(raw_domain))
    if not domain:
        raise InvalidInput(f"No usable host in domain {raw_domain!r}")

    registrar = clean_text(registrar)
    organization = clean_text(organization)

    return DomainSignals(
        domain=domain,
        domain_age_years=domain_age_years(raw_registration_date, now),
        has_tls=has_tls,
        registrar=registrar,
        organization=organization,
        domain_length=len(domain),
        scam_keywords=find_scam_keywords(domain, scam_keywords),
        privacy_protected=is_privacy_protected(organization),
    )
