"""Command-line entry point for TrustLens domain evaluations."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from .analyzer import TrustEngine
from .analyzer.models import InvalidInput
from .config import Config, load_config, validate_config
from .formatters import ReportFormatter
from .lookup import RdapLookupResult, lookup_domain_via_rdap
from .utils.domains import tls_from_url

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def _parse_now(value: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO timestamp: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trustlens",
        description="Score how trustworthy a domain is and flag likely phishing.",
    )
    parser.add_argument("domain", help="Domain or URL to evaluate")
    tls = parser.add_mutually_exclusive_group()
    tls.add_argument("--https", dest="has_tls", action="store_true", default=None,
                     help="Site serves a valid TLS certificate")
    tls.add_argument("--no-https", dest="has_tls", action="store_false",
                     help="Site has no TLS certificate")
    parser.add_argument("--registered", help="Registration date (ISO-8601 or common WHOIS formats)")
    parser.add_argument("--registrar", help="Registrar name")
    parser.add_argument("--organization", help="Registrant organization")
    parser.add_argument("--rdap", action="store_true",
                        help="Fill missing registration data from RDAP")
    parser.add_argument("--now", type=_parse_now, help="Evaluation time (ISO-8601, default: now)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show the score breakdown and debug logs")
    return parser


async def _rdap_lookup(domain: str, timeout: float) -> RdapLookupResult:
    return await lookup_domain_via_rdap(domain, timeout=timeout)


def _resolve_inputs(args: argparse.Namespace, config: Config) -> dict:
    """Merge CLI flags with RDAP data; explicit flags always win."""
    registered = args.registered
    registrar = args.registrar
    organization = args.organization

    if args.rdap or config.rdap_enabled:
        result = asyncio.run(_rdap_lookup(args.domain, config.rdap_timeout))
        if result.ok:
            record = result.record
            registered = registered or record.registration_date
            registrar = registrar or record.registrar_name
            organization = organization or record.organization
        else:
            logger.warning("Continuing without RDAP data: %s", result.error)

    has_tls = args.has_tls
    if has_tls is None:
        has_tls = bool(tls_from_url(args.domain))

    return {
        "registration_date": registered,
        "has_tls": has_tls,
        "registrar": registrar,
        "organization": organization,
    }


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config()
    _configure_logging("DEBUG" if args.verbose else config.log_level)

    errors = validate_config(config)
    if errors:
        for error in errors:
            logger.error("Config error: %s", error)
        return 1

    engine = TrustEngine(brands=config.brands, scam_keywords=config.scam_keywords)
    now = args.now or datetime.now(timezone.utc)

    try:
        result = engine.evaluate(args.domain, now=now, **_resolve_inputs(args, config))
    except InvalidInput as e:
        logger.error("Invalid input: %s", e)
        return EXIT_INVALID_INPUT

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(ReportFormatter.format_report(result, verbose=args.verbose))
    return 0


if __name__ == "__main__":
    sys.exit(main())
