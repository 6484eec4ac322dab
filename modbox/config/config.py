"""
Configuration file loading for modbox.

Version: 0.1.0

Fixture files describe the configuration an application exposes to its
modules:

    globals:
      locale: en-US
      apiRoot: /api/v2
    modules:
      search-box-1:
        pageSize: 20
      footer-1: null
    logging:
      level: debug

``globals`` is returned by ``get_global_config``; each ``modules`` entry is
the configuration attached to the element with that id. The optional
``logging`` section (``level``, ``file``) is applied by coordinators built
from the fixture.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from modbox.core.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)


def _mapping_section(data: Dict[str, Any], key: str, path: Optional[str]) -> Dict[str, Any]:
    """Return ``data[key]`` as a mapping; a missing or null section is empty."""
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigLoadError(f"'{key}' must be a mapping", path=path)
    return section


@dataclass
class FixtureConfig:
    """Global and per-module configuration read from a fixture file."""

    global_config: Dict[str, Any] = field(default_factory=dict)
    modules: Dict[str, Optional[Dict[str, Any]]] = field(default_factory=dict)
    log_level: Optional[str] = None
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], path: Optional[str] = None) -> "FixtureConfig":
        globals_section = _mapping_section(data, "globals", path)
        modules_section = _mapping_section(data, "modules", path)
        logging_section = _mapping_section(data, "logging", path)

        modules: Dict[str, Optional[Dict[str, Any]]] = {}
        for module_id, module_config in modules_section.items():
            if module_config is not None and not isinstance(module_config, dict):
                raise ConfigLoadError(
                    f"Config for module '{module_id}' must be a mapping",
                    path=path,
                    details={"module_id": str(module_id)},
                )
            modules[str(module_id)] = module_config

        log_file = logging_section.get("file")
        return cls(
            global_config=globals_section,
            modules=modules,
            log_level=logging_section.get("level"),
            log_file=str(log_file) if log_file is not None else None,
        )


def load_config_file(path: str | Path) -> Dict[str, Any]:
    """Load a YAML mapping from disk.

    Args:
        path: Path to the YAML file

    Returns:
        Parsed mapping; empty dict when the file is missing or empty

    Raises:
        ConfigLoadError: If the file is not valid YAML or not a mapping
    """
    config_path = Path(path)
    if not config_path.exists():
        logger.debug("Config file %s not found, using empty config", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML: {e}", path=str(config_path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError("Config root must be a mapping", path=str(config_path))

    logger.debug("Loaded config from %s", config_path)
    return data


def load_fixture_config(path: str | Path) -> FixtureConfig:
    """Load a fixture file into a FixtureConfig."""
    return FixtureConfig.from_dict(load_config_file(path), path=str(path))
