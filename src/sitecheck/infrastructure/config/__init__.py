"""Configuration loading from TOML profiles."""

from sitecheck.infrastructure.config.loader import (
    build,
    load_prober_config,
    load_validator_config,
    read_profile,
)

__all__ = [
    "build",
    "load_prober_config",
    "load_validator_config",
    "read_profile",
]
