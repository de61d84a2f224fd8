"""Domain normalization utilities."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

import idna
import tldextract

logger = logging.getLogger(__name__)

# Bundled public suffix snapshot only; never fetch the live list.
_extract = tldextract.TLDExtract(suffix_list_urls=())


def canonicalize_domain(value: str) -> str:
    """
    Normalize a domain/URL to a canonical host key.

    - Lowercase
    - Strip leading "www."
    - Drop port, path, query and fragment
    - Keep every other subdomain label
    - A scheme without a host, or a bare "www", is empty
    """
    raw = (value or "").strip()
    if not raw:
        return ""

    candidate = raw if "://" in raw else f"https://{raw}"
    try:
        parsed = urlparse(candidate)
        hostname = parsed.hostname
    except ValueError:
        hostname = None
    if not hostname and "://" in raw:
        return ""
    host = (hostname or raw.split("/")[0].split(":")[0]).strip().lower().strip(".")
    if not host or host == "www":
        return ""

    if host.startswith("www.") and len(host) > 4:
        host = host[4:]

    return host


def decode_punycode(host: str) -> str:
    """Decode IDNA (xn--) labels to Unicode, leaving undecodable labels as-is."""
    if "xn--" not in host:
        return host
    labels = []
    for label in host.split("."):
        if label.startswith("xn--"):
            try:
                label = idna.decode(label)
            except (idna.IDNAError, UnicodeError) as exc:
                logger.debug("Could not decode punycode label %s: %s", label, exc)
        labels.append(label)
    return ".".join(labels)


def registered_domain(value: str) -> str:
    """Return the registrable domain for a host or URL (best-effort)."""
    host = canonicalize_domain(value)
    if not host:
        return ""
    extracted = _extract(host)
    if extracted.domain and extracted.suffix:
        return f"{extracted.domain}.{extracted.suffix}".lower()
    return host


def tls_from_url(value: str) -> bool | None:
    """Infer TLS from an explicit URL scheme; None when no scheme is present."""
    raw = (value or "").strip().lower()
    if raw.startswith("https://"):
        return True
    if raw.startswith("http://"):
        return False
    return None
