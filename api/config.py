"""API server configuration with support for environment variables and YAML files.

Configuration priority (highest to lowest):
1. Explicit kwargs passed to load_config()
2. Environment variables (CLASSIFIER_*)
3. YAML config file (if provided; `api:` section or a flat file)
4. Default values
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from shared.config import load_section


@dataclass
class APIConfig:
    """API server configuration.

    Attributes:
        host: Server bind address (default: 0.0.0.0).
        port: Server port (default: 8000).
        debug: Enable debug mode (default: False).
        log_level: Root log level name (default: INFO).
        auto_approve_threshold: Overall confidence above which a
            categorization is flagged as auto-approved (default: 0.8).
    """

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    auto_approve_threshold: float = 0.8


# Names accepted by both logging.basicConfig and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}

ENV_MAPPING = {
    "host": "CLASSIFIER_HOST",
    "port": "CLASSIFIER_PORT",
    "debug": "CLASSIFIER_DEBUG",
    "log_level": "CLASSIFIER_LOG_LEVEL",
    "auto_approve_threshold": "CLASSIFIER_AUTO_APPROVE_THRESHOLD",
}


def load_config(
    config_file: str | Path | None = None,
    **overrides: Any,
) -> APIConfig:
    """Load API configuration with priority: overrides > env vars > yaml > defaults.

    Args:
        config_file: Optional path to YAML config file.
        **overrides: Direct config overrides (highest priority).

    Returns:
        APIConfig instance.

    Raises:
        ValueError: If log_level is not one of LOG_LEVELS (after mapping
            WARN and FATAL to their canonical names), or the
            auto-approve threshold is outside [0, 1].

    Example:
        # From environment variables
        config = load_config()

        # From YAML file
        config = load_config("classifier.config.yaml")

        # Stricter auto-approval
        config = load_config(auto_approve_threshold=0.9)
    """
    config: dict[str, Any] = {}

    if config_file:
        config.update(load_section("api", config_file))

    for key, env_var in ENV_MAPPING.items():
        if env_val := os.getenv(env_var):
            config[key] = env_val

    config.update({k: v for k, v in overrides.items() if v is not None})

    # Type conversions
    if "port" in config:
        config["port"] = int(config["port"])
    if "debug" in config:
        config["debug"] = (
            config["debug"]
            if isinstance(config["debug"], bool)
            else str(config["debug"]).lower() in ("true", "1", "yes")
        )
    if "log_level" in config:
        level = str(config["log_level"]).upper()
        config["log_level"] = LOG_LEVEL_ALIASES.get(level, level)
        if config["log_level"] not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {config['log_level']}")
    if "auto_approve_threshold" in config:
        config["auto_approve_threshold"] = float(config["auto_approve_threshold"])
        if not 0.0 <= config["auto_approve_threshold"] <= 1.0:
            raise ValueError("auto_approve_threshold must be between 0 and 1")

    return APIConfig(**config)
