"""RDAP helpers for registration lookups.

Supplies the registration date, registrar and registrant organization the
trust engine consumes. Failures are reported on the result object, never
raised, so callers can fall back to all-unknown inputs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

import httpx

from ..utils.domains import registered_domain

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "TrustLens/1.0"


@dataclass(frozen=True)
class RdapRecord:
    registration_date: Optional[datetime] = None
    registrar_name: Optional[str] = None
    organization: Optional[str] = None
    nameservers: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RdapLookupResult:
    record: RdapRecord
    rdap_url: str
    error: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _extract_first_vcard_value(vcard_array: object, field_name: str) -> Optional[str]:
    """Extract first vCard value for a given field (e.g., 'fn', 'org')."""
    if not isinstance(vcard_array, list) or len(vcard_array) < 2:
        return None
    entries = vcard_array[1]
    if not isinstance(entries, list):
        return None
    for entry in entries:
        if not isinstance(entry, list) or len(entry) < 4:
            continue
        if str(entry[0]).lower() != field_name.lower():
            continue
        value = entry[3]
        # org values may be structured: ["Example Inc", "Engineering"]
        if isinstance(value, list):
            value = " ".join(str(v) for v in value if isinstance(v, str) and v.strip())
        if not isinstance(value, str):
            continue
        cleaned = value.strip()
        if cleaned:
            return cleaned
    return None


def _entities_with_role(data: dict, role: str) -> list[dict]:
    entities = data.get("entities", [])
    if not isinstance(entities, list):
        return []
    matched = []
    for entity in entities:
        if not isinstance(entity, dict):
            continue
        roles = entity.get("roles", []) or []
        if isinstance(roles, list) and role in roles:
            matched.append(entity)
    return matched


def _parse_event_date(value: object) -> Optional[datetime]:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Unparseable RDAP event date: %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_rdap_record(data: object) -> RdapRecord:
    """Build an RdapRecord from RDAP domain JSON (best-effort)."""
    if not isinstance(data, dict):
        return RdapRecord()

    registration_date: Optional[datetime] = None
    events = data.get("events", [])
    if isinstance(events, list):
        for event in events:
            if isinstance(event, dict) and event.get("eventAction") == "registration":
                registration_date = _parse_event_date(event.get("eventDate"))
                break

    registrar_name: Optional[str] = None
    for entity in _entities_with_role(data, "registrar"):
        registrar_name = _extract_first_vcard_value(entity.get("vcardArray"), "fn") or registrar_name

    organization: Optional[str] = None
    for entity in _entities_with_role(data, "registrant"):
        vcard = entity.get("vcardArray")
        organization = (
            _extract_first_vcard_value(vcard, "org")
            or _extract_first_vcard_value(vcard, "fn")
            or organization
        )

    nameservers: list[str] = []
    raw_nameservers = data.get("nameservers", [])
    if isinstance(raw_nameservers, list):
        for ns in raw_nameservers:
            if not isinstance(ns, dict):
                continue
            name = ns.get("ldhName") or ns.get("unicodeName")
            if isinstance(name, str) and name.strip():
                nameservers.append(name.strip().lower())

    return RdapRecord(
        registration_date=registration_date,
        registrar_name=registrar_name,
        organization=organization,
        nameservers=nameservers,
    )


def _rdap_endpoints_for(domain: str) -> list[str]:
    """Return a list of RDAP endpoints to try (ordered)."""
    normalized = (domain or "").strip().lower()
    endpoints = [f"https://rdap.org/domain/{normalized}"]

    # Simple TLD-based fallbacks for common zones.
    tld = ""
    if "." in normalized:
        tld = normalized.rsplit(".", 1)[-1]
    if tld in {"com", "net"}:
        endpoints.append(f"https://rdap.verisign.com/{tld}/v1/domain/{normalized}")
    elif tld == "org":
        endpoints.append(f"https://rdap.publicinterestregistry.org/rdap/domain/{normalized}")

    return endpoints


async def _fetch_rdap(client: httpx.AsyncClient, url: str, user_agent: str) -> RdapLookupResult:
    try:
        resp = await client.get(url, headers={"User-Agent": user_agent, "Accept": "application/rdap+json"})
    except httpx.TimeoutException:
        return RdapLookupResult(record=RdapRecord(), rdap_url=url, error="RDAP lookup timed out")
    except httpx.HTTPError as e:
        return RdapLookupResult(record=RdapRecord(), rdap_url=url, error=f"RDAP lookup failed: {e}")

    if resp.status_code != 200:
        return RdapLookupResult(
            record=RdapRecord(),
            rdap_url=url,
            error=f"RDAP lookup failed ({resp.status_code})",
            status_code=int(resp.status_code),
        )

    try:
        data = resp.json()
    except ValueError:
        return RdapLookupResult(
            record=RdapRecord(),
            rdap_url=url,
            error="RDAP returned non-JSON response",
            status_code=int(resp.status_code),
        )

    return RdapLookupResult(record=parse_rdap_record(data), rdap_url=url, status_code=200)


async def lookup_domain_via_rdap(
    domain: str,
    *,
    timeout: float = 10.0,
    user_agent: str = DEFAULT_USER_AGENT,
    client: Optional[httpx.AsyncClient] = None,
) -> RdapLookupResult:
    """Fetch the RDAP record for a domain's registrable domain.

    Tries each endpoint in order, moving on after timeouts, 404s, 429s and
    5xx responses.
    """
    normalized = registered_domain(domain)
    if not normalized:
        return RdapLookupResult(
            record=RdapRecord(),
            rdap_url="https://rdap.org/domain/",
            error="No domain provided for RDAP lookup",
        )

    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    last: Optional[RdapLookupResult] = None
    try:
        for url in _rdap_endpoints_for(normalized):
            result = await _fetch_rdap(client, url, user_agent)
            if result.ok:
                return result
            logger.debug("RDAP endpoint %s failed for %s: %s", url, normalized, result.error)
            last = result
    finally:
        if owns_client:
            await client.aclose()

    logger.warning("RDAP lookup failed for %s: %s", normalized, last.error if last else "no endpoints")
    return last or RdapLookupResult(
        record=RdapRecord(), rdap_url="https://rdap.org/domain/", error="RDAP lookup failed (all endpoints)"
    )
