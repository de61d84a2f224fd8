"""Tests for domain canonicalization helpers."""

import pytest

from trustlens.utils.domains import canonicalize_domain, decode_punycode, registered_domain, tls_from_url


class TestCanonicalizeDomain:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Example.COM", "example.com"),
            ("www.example.com", "example.com"),
            ("https://www.example.com/login?next=/", "example.com"),
            ("http://shop.example.com:8080", "shop.example.com"),
            ("example.com/path", "example.com"),
            ("  example.com.  ", "example.com"),
            ("", ""),
            (None, ""),
            ("https://", ""),
            ("http:///path", ""),
            ("www.", ""),
            ("www", ""),
        ],
    )
    def test_canonicalize(self, raw, expected):
        assert canonicalize_domain(raw) == expected

    def test_www_subdomain_label_kept(self):
        assert canonicalize_domain("www.www.example.com") == "www.example.com"


class TestRegisteredDomain:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("login.paypal.com", "paypal.com"),
            ("secure.paypal.co.uk", "paypal.co.uk"),
            ("https://a.b.example.org/x", "example.org"),
            ("paypal.com", "paypal.com"),
        ],
    )
    def test_registered_domain(self, raw, expected):
        assert registered_domain(raw) == expected


class TestPunycode:
    def test_decodes_idna_labels(self):
        assert decode_punycode("xn--mnchen-3ya.de") == "münchen.de"

    def test_plain_host_untouched(self):
        assert decode_punycode("example.com") == "example.com"


class TestTlsFromUrl:
    def test_schemes(self):
        assert tls_from_url("https://example.com") is True
        assert tls_from_url("HTTP://example.com") is False
        assert tls_from_url("example.com") is None
