"""YAML config loading and validation."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

# Values shipped in sample env files; treated the same as a missing key.
PLACEHOLDER_API_KEYS = {"demo-key", "your_google_ai_api_key"}

NORMALIZATION_POLICIES = ("exact", "casefold")


@dataclass
class AIConfig:
    enabled: bool = True
    model: str = "gemini-1.5-flash"
    timeout_seconds: float = 30.0
    temperature: float = 0.4


@dataclass
class MatchingConfig:
    match_threshold: int = 60
    normalization: str = "exact"  # "exact" or "casefold"
    strict_complementary: bool = False
    max_workers: int = 4


@dataclass
class LoggingConfig:
    level: str = "INFO"
    # Per-logger overrides, e.g. {"matchai.ai": "DEBUG"}
    loggers: dict[str, str] = field(default_factory=dict)


@dataclass
class ApiKeys:
    google_ai_api_key: str = ""


@dataclass
class ProfilesConfig:
    path: str = ""


@dataclass
class AppConfig:
    ai: AIConfig = field(default_factory=AIConfig)
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    api_keys: ApiKeys = field(default_factory=ApiKeys)
    profiles: ProfilesConfig = field(default_factory=ProfilesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    data_dir: str = "data"
    log_dir: str = "logs"


def _api_key_from_env(default: str = "") -> str:
    return (
        os.environ.get("GOOGLE_AI_API_KEY")
        or os.environ.get("NEXT_PUBLIC_GOOGLE_AI_API_KEY")
        or default
    )


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load and validate configuration from YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and fill in your settings."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    # AI
    ai_raw = raw.get("ai") or {}
    config.ai = AIConfig(
        enabled=ai_raw.get("enabled", True),
        model=ai_raw.get("model", "gemini-1.5-flash"),
        timeout_seconds=float(ai_raw.get("timeout_seconds", 30.0)),
        temperature=float(ai_raw.get("temperature", 0.4)),
    )

    # Matching
    matching_raw = raw.get("matching") or {}
    config.matching = MatchingConfig(
        match_threshold=int(matching_raw.get("match_threshold", 60)),
        normalization=str(matching_raw.get("normalization", "exact")).lower(),
        strict_complementary=matching_raw.get("strict_complementary", False),
        max_workers=int(matching_raw.get("max_workers", 4)),
    )

    # API keys (env vars take precedence)
    keys_raw = raw.get("api_keys") or {}
    config.api_keys = ApiKeys(
        google_ai_api_key=_api_key_from_env(keys_raw.get("google_ai_api_key", "")),
    )

    # Profile store
    profiles_raw = raw.get("profiles") or {}
    config.profiles = ProfilesConfig(path=profiles_raw.get("path", ""))

    # Logging
    logging_raw = raw.get("logging") or {}
    config.logging = LoggingConfig(
        level=str(logging_raw.get("level", "INFO")).upper(),
        loggers={
            str(name): str(level).upper()
            for name, level in (logging_raw.get("loggers") or {}).items()
        },
    )

    config.data_dir = raw.get("data_dir", "data")
    config.log_dir = raw.get("log_dir", "logs")

    return config


def is_ai_configured(config: AppConfig) -> bool:
    """True when the external AI capability should be attempted at all."""
    key = (config.api_keys.google_ai_api_key or "").strip()
    return bool(config.ai.enabled and key and key not in PLACEHOLDER_API_KEYS)


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if not config.profiles.path:
        warnings.append("No profile store configured (profiles.path required for matching)")

    if config.ai.enabled and not is_ai_configured(config):
        warnings.append(
            "AI enabled but no Google AI API key configured - will use fallback algorithms"
        )

    if config.matching.normalization not in NORMALIZATION_POLICIES:
        warnings.append(
            f"Unknown normalization policy '{config.matching.normalization}' - "
            f"expected one of: {', '.join(NORMALIZATION_POLICIES)}"
        )

    for name, level in [("logging.level", config.logging.level), *config.logging.loggers.items()]:
        if not isinstance(logging.getLevelName(level), int):
            warnings.append(f"Unknown log level '{level}' for {name} - falling back to INFO")

    if config.matching.max_workers < 1:
        warnings.append("matching.max_workers must be at least 1 - batches will run sequentially")

    return warnings
