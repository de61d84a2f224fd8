"""Upstream registration-data lookups for TrustLens."""

from .rdap import RdapLookupResult, RdapRecord, lookup_domain_via_rdap, parse_rdap_record

__all__ = [
    "RdapLookupResult",
    "RdapRecord",
    "lookup_domain_via_rdap",
    "parse_rdap_record",
]
