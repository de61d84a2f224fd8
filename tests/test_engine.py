"""End-to-end tests for the trust evaluation engine."""

import itertools
import json

import pytest

from trustlens import InvalidInput, TrustEngine, TrustVerdict, evaluate
from trustlens.analyzer.rules import BrandRule
from trustlens.constants import DomainCategory

SAMPLE_DOMAINS = (
    "example.com",
    "ab.com",
    "secure-paypai-login.com",
    "g00gle-login.com",
    "free-bitcoin-prize.xyz",
    "a-b-c-d.com",
    "münchen.de",
    "mit.edu",
    "irs.gov",
    "canada.ca",
)
SAMPLE_DATES = ("2012-06-01", "2024-03-01", None)
SAMPLE_REGISTRARS = ("Cloudflare", None)
SAMPLE_ORGANIZATIONS = ("Acme Corp LLC", "Redacted for Privacy", None)


def sample_inputs():
    return itertools.product(
        SAMPLE_DOMAINS, SAMPLE_DATES, (True, False), SAMPLE_REGISTRARS, SAMPLE_ORGANIZATIONS
    )


class TestScenarios:
    """Reference evaluations."""

    def test_government_domain(self, now):
        result = evaluate("irs.gov", None, False, None, None, now)
        assert result.score == 100
        assert result.verdict is TrustVerdict.HIGHLY_TRUSTWORTHY
        assert result.phishing.patterns == ()
        assert result.breakdown.category is DomainCategory.GOVERNMENT

    def test_brand_impersonation(self, now):
        result = evaluate("secure-paypai-login.com", None, False, None, None, now)
        assert result.phishing.is_phishing
        assert result.phishing.likely_target == "Paypal"
        assert result.phishing.confidence >= 35
        assert result.verdict is TrustVerdict.HIGH_RISK
        assert result.score == 0
        assert "This site may be impersonating Paypal" in result.highlights.negative

    def test_education_domain(self, now):
        result = evaluate("mit.edu", None, True, None, None, now)
        assert 75 <= result.score <= 95
        assert result.score == 85
        assert any(".edu domain" in line for line in result.highlights.positive)
        assert "Educational domains undergo strict verification before issuance" in result.highlights.positive

    def test_established_domain(self, now):
        result = evaluate("ab.com", "2012-06-01", True, "Cloudflare", "Acme Corp LLC", now)
        assert result.score == 100
        assert result.verdict is TrustVerdict.HIGHLY_TRUSTWORTHY
        positive = result.highlights.positive
        assert "We found a valid SSL certificate" in positive
        assert "This website has been active for 12.0 years, indicating established presence" in positive
        assert "Organization information is publicly available, showing transparency" in positive

    @pytest.mark.parametrize("domain", ["", "https://", "http://", "www"])
    def test_empty_domain_rejected(self, domain, now):
        with pytest.raises(InvalidInput):
            evaluate(domain, None, False, None, None, now)

    def test_all_optional_inputs_missing(self, now):
        result = evaluate("example.com", None, False, None, None, now)
        assert result.score < 50
        negative = result.highlights.negative
        assert any(line.startswith("No organization information") for line in negative)
        assert any(line.startswith("The website does not have a valid SSL certificate") for line in negative)
        assert any("could not determine when this domain was registered" in line for line in negative)
        age = next(f for f in result.breakdown.factors if f.name == "age")
        assert age.points == -25


class TestProperties:
    """Invariants over a grid of realistic inputs."""

    def test_score_bounds_and_verdict(self, now):
        for domain, registered, tls, registrar, org in sample_inputs():
            result = evaluate(domain, registered, tls, registrar, org, now)
            assert 0 <= result.score <= 100
            assert result.verdict is TrustVerdict.from_score(result.score)

    def test_highlights_never_empty(self, now):
        for domain, registered, tls, registrar, org in sample_inputs():
            result = evaluate(domain, registered, tls, registrar, org, now)
            assert result.highlights.positive, domain
            assert result.highlights.negative, domain

    def test_government_dominance(self, now):
        for _, registered, tls, registrar, org in sample_inputs():
            for domain in ("irs.gov", "canada.ca", "service.gov.uk"):
                assert evaluate(domain, registered, tls, registrar, org, now).score == 100

    def test_education_band(self, now):
        for _, registered, _, registrar, org in sample_inputs():
            result = evaluate("mit.edu", registered, True, registrar, org, now)
            assert 75 <= result.score <= 95

    def test_tls_monotonicity(self, now):
        for domain, registered, _, registrar, org in sample_inputs():
            with_tls = evaluate(domain, registered, True, registrar, org, now)
            without_tls = evaluate(domain, registered, False, registrar, org, now)
            assert with_tls.score >= without_tls.score
            if with_tls.breakdown.category is DomainCategory.REGULAR:
                assert with_tls.breakdown.raw_total > without_tls.breakdown.raw_total

    def test_phishing_monotonicity(self, now):
        plain = TrustEngine(brands=())
        branded = TrustEngine(brands=[BrandRule("acme", ("acrne",))])
        for registered, registrar, org in itertools.product(
            SAMPLE_DATES, SAMPLE_REGISTRARS, SAMPLE_ORGANIZATIONS
        ):
            low = plain.evaluate("acrne-store.com", registered, True, registrar, org, now)
            high = branded.evaluate("acrne-store.com", registered, True, registrar, org, now)
            assert high.phishing.confidence > low.phishing.confidence
            assert high.score <= low.score

    def test_idempotence(self, now):
        first = evaluate("secure-paypai-login.com", "2024-03-01", True, "Namecheap", None, now)
        second = evaluate("secure-paypai-login.com", "2024-03-01", True, "Namecheap", None, now)
        assert json.dumps(first.to_dict(), sort_keys=True) == json.dumps(second.to_dict(), sort_keys=True)
        assert first == second

    def test_narrative_matches_score_band(self, now):
        for domain, registered, tls, registrar, org in sample_inputs():
            result = evaluate(domain, registered, tls, registrar, org, now)
            negative = result.highlights.negative
            critical = "The overall trust score is critically low, indicating high risk" in negative
            limited = "The trust score suggests limited positive signals about this website" in negative
            assert critical == (result.score < 40)
            assert limited == (40 <= result.score < 60)


class TestEngine:
    """Engine configuration and output shape."""

    def test_custom_scam_keywords(self, now):
        engine = TrustEngine(scam_keywords=["giveaway"])
        result = engine.evaluate("giveaway-hub.com", None, True, None, None, now)
        assert result.signals.scam_keywords == ("giveaway",)

    def test_url_input(self, now):
        result = evaluate("https://www.Example.com/path", None, True, None, None, now)
        assert result.domain == "example.com"

    def test_to_dict(self, now):
        data = evaluate("ab.com", "2012-06-01", True, "Cloudflare", "Acme Corp LLC", now).to_dict()
        assert data["domain"] == "ab.com"
        assert data["score"] == 100
        assert data["verdict"] == "Highly Trustworthy"
        assert data["category"] == "regular"
        assert data["phishing"] == {
            "isPhishing": False,
            "confidence": 0,
            "patterns": [],
            "likelyTarget": None,
        }
        assert data["signals"]["hasTLS"] is True
        assert data["signals"]["domainLength"] == 6
        assert [f["name"] for f in data["factors"]][0] == "age"
        assert set(data["advice"]) == {"reasons", "safetyTips"}
        json.dumps(data)
