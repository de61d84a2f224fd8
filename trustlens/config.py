"""Configuration management for TrustLens."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .analyzer.rules import BrandRule
from .analyzer.tables import DEFAULT_BRANDS, DEFAULT_SCAM_KEYWORDS

logger = logging.getLogger(__name__)

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """Application configuration loaded from environment."""

    log_level: str = "INFO"

    # RDAP lookups (CLI only; the engine never performs I/O)
    rdap_enabled: bool = False
    rdap_timeout: float = 10.0

    config_dir: Path = field(default_factory=lambda: Path("./config"))

    # Heuristics (extend via config/heuristics.yaml)
    brands: tuple[BrandRule, ...] = DEFAULT_BRANDS
    scam_keywords: tuple[str, ...] = DEFAULT_SCAM_KEYWORDS


def _load_heuristics(config_dir: Path) -> dict:
    """Load heuristic additions from config/heuristics.yaml (optional)."""
    path = Path(config_dir or ".") / "heuristics.yaml"
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Failed to parse heuristics.yaml: %s", exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring heuristics.yaml: expected a mapping, got %s", type(data).__name__)
        return {}

    def _coerce_brands(raw) -> list[BrandRule]:
        items: list[BrandRule] = []
        for entry in raw or []:
            if not isinstance(entry, dict):
                continue
            name = str(entry.get("name") or "").strip().lower()
            if not name:
                continue
            variants = tuple(
                str(v).strip().lower() for v in entry.get("variants") or [] if str(v).strip()
            )
            items.append(BrandRule(name, variants))
        return items

    def _coerce_keywords(raw) -> list[str]:
        items: list[str] = []
        for entry in raw or []:
            keyword = str(entry or "").strip().lower()
            if keyword:
                items.append(keyword)
        return items

    return {
        "brands": _coerce_brands(data.get("brands")),
        "scam_keywords": _coerce_keywords(data.get("scam_keywords")),
    }


def _merge_brands(extra: list[BrandRule]) -> tuple[BrandRule, ...]:
    known = {brand.name for brand in DEFAULT_BRANDS}
    merged = list(DEFAULT_BRANDS)
    for brand in extra:
        if brand.name in known:
            continue
        known.add(brand.name)
        merged.append(brand)
    return tuple(merged)


def _merge_keywords(extra: list[str]) -> tuple[str, ...]:
    merged = list(DEFAULT_SCAM_KEYWORDS)
    for keyword in extra:
        if keyword not in merged:
            merged.append(keyword)
    return tuple(merged)


def load_config() -> Config:
    """Load configuration from environment variables."""
    load_dotenv()

    config_dir = Path(os.getenv("CONFIG_DIR", "./config"))
    heuristics = _load_heuristics(config_dir)

    try:
        rdap_timeout = float(os.getenv("RDAP_TIMEOUT", "10"))
    except ValueError:
        logger.warning("Invalid RDAP_TIMEOUT %r; using 10 seconds", os.getenv("RDAP_TIMEOUT"))
        rdap_timeout = 10.0

    return Config(
        log_level=os.getenv("TRUSTLENS_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        rdap_enabled=os.getenv("RDAP_ENABLED", "false").lower() == "true",
        rdap_timeout=rdap_timeout,
        config_dir=config_dir,
        brands=_merge_brands(heuristics.get("brands", [])),
        scam_keywords=_merge_keywords(heuristics.get("scam_keywords", [])),
    )


def validate_config(config: Config) -> list[str]:
    """Validate configuration and return list of error messages."""
    errors: list[str] = []
    if config.log_level not in LOG_LEVELS:
        errors.append(f"TRUSTLENS_LOG_LEVEL must be one of {', '.join(sorted(LOG_LEVELS))}")
    if config.rdap_timeout <= 0:
        errors.append("RDAP_TIMEOUT must be positive")
    if not config.scam_keywords:
        errors.append("At least one scam keyword is required")
    return errors
