# recursion_schemes/core/config.py
"""
Configuration loading for recursion_schemes.

Configuration only influences adapter discovery and logging. It never
changes what cata/ana/hylo compute.

Usage:
    from recursion_schemes.core.config import load_config, load_yaml

    # Load raw YAML
    data = load_yaml("recursion_schemes.yaml")

    # Load and validate
    config = load_config("recursion_schemes.yaml")
    registry = build_registry(config)

Example file:
    registry:
      scan_packages:
        - my_project.structures
    logging:
      level: DEBUG
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from recursion_schemes.core.exceptions import RecursionSchemeError
from recursion_schemes.core.registry import ContractRegistry, build_registry
from recursion_schemes.logging import configure_logging, get_logger
from recursion_schemes.logging_tags import CONFIG

logger = get_logger(__name__)

CONFIG_ENV_VAR = "RECURSION_SCHEMES_CONFIG"


# =============================================================================
# Errors
# =============================================================================


class ConfigError(RecursionSchemeError):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match schema."""

    pass


# =============================================================================
# Schema
# =============================================================================


class RegistryConfig(BaseModel):
    """Adapter discovery settings."""

    scan_packages: List[str] = Field(
        default_factory=list,
        description="Extra packages scanned for contract adapters",
    )

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown logging level: {value!r}")
        return level


class RecursionSchemesConfig(BaseModel):
    """Top-level configuration."""

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    An empty file loads as an empty mapping.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root is not a mapping
        ConfigError: If the path is a directory
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e
    except OSError as e:
        raise ConfigParseError(f"Failed to read config: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def load_config(path: Optional[Union[str, Path]] = None) -> RecursionSchemesConfig:
    """
    Load and validate a configuration file.

    Args:
        path: Path to config file. If None, ``$RECURSION_SCHEMES_CONFIG`` is
              used when set; otherwise the defaults are returned.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid
        ConfigValidationError: If config doesn't match schema
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None

    if path is None:
        logger.debug(f"{CONFIG} No config file given, using defaults")
        return RecursionSchemesConfig()

    resolved = Path(path)
    data = load_yaml(resolved)

    try:
        return RecursionSchemesConfig.model_validate(data)
    except ValueError as e:
        raise ConfigValidationError(f"Config validation failed: {e}", path=resolved) from e


def bootstrap(
    path: Optional[Union[str, Path]] = None,
) -> Tuple[RecursionSchemesConfig, ContractRegistry]:
    """
    Load config, apply its logging level to the root logger, and build the
    contract registry it describes.

    Examples:
        >>> config, registry = bootstrap("recursion_schemes.yaml")
        >>> cata(my_structure, 0, combine, registry=registry)
    """
    config = load_config(path)
    configure_logging(config.logging.level)
    return config, build_registry(config)
