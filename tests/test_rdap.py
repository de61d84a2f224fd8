"""Tests for RDAP parsing and lookups."""

from datetime import datetime, timezone

import httpx
import pytest

from trustlens.lookup.rdap import (
    _extract_first_vcard_value,
    _rdap_endpoints_for,
    lookup_domain_via_rdap,
    parse_rdap_record,
)

RDAP_PAYLOAD = {
    "objectClassName": "domain",
    "ldhName": "EXAMPLE.COM",
    "events": [
        {"eventAction": "last changed", "eventDate": "2023-08-14T07:01:38Z"},
        {"eventAction": "registration", "eventDate": "1995-08-14T04:00:00Z"},
        {"eventAction": "expiration", "eventDate": "2025-08-13T04:00:00Z"},
    ],
    "entities": [
        {
            "objectClassName": "entity",
            "roles": ["registrar"],
            "vcardArray": [
                "vcard",
                [
                    ["version", {}, "text", "4.0"],
                    ["fn", {}, "text", "RESERVED-Internet Assigned Numbers Authority"],
                ],
            ],
        },
        {
            "objectClassName": "entity",
            "roles": ["registrant"],
            "vcardArray": [
                "vcard",
                [
                    ["version", {}, "text", "4.0"],
                    ["fn", {}, "text", "Domain Administrator"],
                    ["org", {}, "text", ["Example Holdings", "Legal"]],
                ],
            ],
        },
    ],
    "nameservers": [
        {"objectClassName": "nameserver", "ldhName": "A.IANA-SERVERS.NET"},
        {"objectClassName": "nameserver", "unicodeName": "b.iana-servers.net"},
    ],
}


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestParseRdapRecord:
    """Best-effort parsing of RDAP domain JSON."""

    def test_full_record(self):
        record = parse_rdap_record(RDAP_PAYLOAD)
        assert record.registration_date == datetime(1995, 8, 14, 4, 0, tzinfo=timezone.utc)
        assert record.registrar_name == "RESERVED-Internet Assigned Numbers Authority"
        assert record.organization == "Example Holdings Legal"
        assert record.nameservers == ["a.iana-servers.net", "b.iana-servers.net"]

    def test_registrant_falls_back_to_fn(self):
        payload = {
            "entities": [
                {"roles": ["registrant"], "vcardArray": ["vcard", [["fn", {}, "text", "Jane Doe"]]]}
            ]
        }
        assert parse_rdap_record(payload).organization == "Jane Doe"

    def test_last_update_is_not_registration(self):
        payload = {"events": [{"eventAction": "last update of RDAP database", "eventDate": "2024-01-01T00:00:00Z"}]}
        assert parse_rdap_record(payload).registration_date is None

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            [],
            "not json",
            {"events": "bad", "entities": {"x": 1}, "nameservers": None},
            {"events": [{"eventAction": "registration", "eventDate": "yesterday"}]},
            {"entities": [{"roles": ["registrar"], "vcardArray": "broken"}]},
        ],
    )
    def test_malformed_payloads(self, payload):
        record = parse_rdap_record(payload)
        assert record.registration_date is None
        assert record.registrar_name is None
        assert record.organization is None

    def test_vcard_helper(self):
        vcard = ["vcard", [["fn", {}, "text", "  "], ["fn", {}, "text", "Cloudflare, Inc."]]]
        assert _extract_first_vcard_value(vcard, "fn") == "Cloudflare, Inc."
        assert _extract_first_vcard_value(vcard, "org") is None
        assert _extract_first_vcard_value(None, "fn") is None


class TestEndpoints:
    def test_com_fallback(self):
        assert _rdap_endpoints_for("example.com") == [
            "https://rdap.org/domain/example.com",
            "https://rdap.verisign.com/com/v1/domain/example.com",
        ]

    def test_org_fallback(self):
        assert _rdap_endpoints_for("example.org")[-1] == (
            "https://rdap.publicinterestregistry.org/rdap/domain/example.org"
        )

    def test_no_fallback(self):
        assert _rdap_endpoints_for("example.io") == ["https://rdap.org/domain/example.io"]


class TestLookup:
    """Async lookups against a mocked transport."""

    @pytest.mark.asyncio
    async def test_success(self):
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return httpx.Response(200, json=RDAP_PAYLOAD)

        async with mock_client(handler) as client:
            result = await lookup_domain_via_rdap("https://login.example.com/path", client=client)

        assert result.ok
        assert result.status_code == 200
        assert result.record.registrar_name == "RESERVED-Internet Assigned Numbers Authority"
        assert requested == ["https://rdap.org/domain/example.com"]

    @pytest.mark.asyncio
    async def test_falls_back_to_registry(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "rdap.org":
                return httpx.Response(404)
            return httpx.Response(200, json=RDAP_PAYLOAD)

        async with mock_client(handler) as client:
            result = await lookup_domain_via_rdap("example.com", client=client)

        assert result.ok
        assert result.rdap_url == "https://rdap.verisign.com/com/v1/domain/example.com"

    @pytest.mark.asyncio
    async def test_all_endpoints_fail(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        async with mock_client(handler) as client:
            result = await lookup_domain_via_rdap("example.com", client=client)

        assert not result.ok
        assert result.status_code == 503
        assert result.error == "RDAP lookup failed (503)"
        assert result.record.registration_date is None

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        async with mock_client(handler) as client:
            result = await lookup_domain_via_rdap("example.io", client=client)

        assert result.error == "RDAP lookup timed out"

    @pytest.mark.asyncio
    async def test_non_json_response(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>rate limited</html>")

        async with mock_client(handler) as client:
            result = await lookup_domain_via_rdap("example.io", client=client)

        assert result.error == "RDAP returned non-JSON response"

    @pytest.mark.asyncio
    async def test_empty_domain(self):
        result = await lookup_domain_via_rdap("   ")
        assert result.error == "No domain provided for RDAP lookup"
