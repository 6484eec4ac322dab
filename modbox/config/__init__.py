"""Configuration system for modbox."""

from .config import (
    FixtureConfig,
    load_config_file,
    load_fixture_config,
)

__all__ = [
    "FixtureConfig",
    "load_config_file",
    "load_fixture_config",
]
