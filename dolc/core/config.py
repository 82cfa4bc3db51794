"""Global configuration for the DOL compiler.

Manages default settings for logging, the CLI, and the serving layer.
Settings can be overridden via environment variables or explicit configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class DolConfig:
    """Top-level configuration for dolc."""

    # Logging
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Server
    server_host: str = "127.0.0.1"
    server_port: int = 8420

    # Compile endpoint limits
    rate_limit_requests: int = 10
    rate_limit_window: float = 60.0
    max_source_chars: int = 1_000_000
    client_ip_header: str = "CF-Connecting-IP"
    trust_client_ip_header: bool = False

    @classmethod
    def from_env(cls) -> DolConfig:
        """Build config from environment variables, falling back to defaults."""
        config = cls()

        if val := os.environ.get("DOLC_LOG_LEVEL"):
            config.log_level = val.upper()
        if val := os.environ.get("DOLC_SERVER_HOST"):
            config.server_host = val
        if val := os.environ.get("DOLC_SERVER_PORT"):
            config.server_port = int(val)
        if val := os.environ.get("DOLC_RATE_LIMIT_REQUESTS"):
            config.rate_limit_requests = int(val)
        if val := os.environ.get("DOLC_RATE_LIMIT_WINDOW"):
            config.rate_limit_window = float(val)
        if val := os.environ.get("DOLC_MAX_SOURCE_CHARS"):
            config.max_source_chars = int(val)
        if val := os.environ.get("DOLC_CLIENT_IP_HEADER"):
            config.client_ip_header = val
        if val := os.environ.get("DOLC_TRUST_CLIENT_IP_HEADER"):
            config.trust_client_ip_header = val.lower() in ("1", "true", "yes")

        return config


# Module-level singleton
_config: DolConfig | None = None


def get_config() -> DolConfig:
    """Return the global dolc config, lazily initialized from env."""
    global _config
    if _config is None:
        _config = DolConfig.from_env()
    return _config


def set_config(config: DolConfig | None) -> None:
    """Override the global config (useful in tests). ``None`` resets it."""
    global _config
    _config = config
