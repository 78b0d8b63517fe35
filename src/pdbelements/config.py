"""Configuration management for pdbelements.

This module defines the runtime options of the element lookup service:
logging destinations, the level at which unknown-element diagnostics are
reported, and the distance tolerances used by bond and clash detection.
Settings can be read from the environment (``PDBELEMENTS_*``) or a YAML file.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


def _validate_level(value: str) -> str:
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown logging level: {value!r}")
    return level


class Settings(BaseSettings):
    """Main configuration for pdbelements."""

    # Logging
    log_level: str = Field(default="INFO", description="Console logging level")
    log_file: Optional[Path] = Field(
        default=None, description="Optional log file for diagnostic output"
    )
    diagnostic_level: str = Field(
        default="WARNING",
        description="Level of unknown-element diagnostics"
    )

    # Contact detection (Å)
    bond_tolerance: float = Field(
        default=0.4, gt=0.0,
        description="Added to the sum of covalent radii for bond detection"
    )
    clash_overlap: float = Field(
        default=0.4, ge=0.0,
        description="Allowed van der Waals overlap before a pair clashes"
    )

    model_config = {"env_prefix": "PDBELEMENTS_"}

    @field_validator("log_level", "diagnostic_level")
    @classmethod
    def check_level(cls, v: str) -> str:
        return _validate_level(v)

    @property
    def diagnostic_levelno(self) -> int:
        """Numeric logging level for diagnostics."""
        return logging.getLevelName(self.diagnostic_level)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load configuration from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        with open(path, "w") as f:
            yaml.dump(self.model_dump(mode="json"), f, default_flow_style=False)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return self.model_dump()


_configured: Optional[Settings] = None


@functools.lru_cache(maxsize=1)
def _settings_from_env() -> Settings:
    return Settings()


def get_settings() -> Settings:
    """Process-wide settings.

    Returns the settings installed with ``configure_settings``, or settings
    read once from the environment.
    """
    if _configured is not None:
        return _configured
    return _settings_from_env()


def configure_settings(settings: Optional[Settings]) -> None:
    """Install ``settings`` as the process-wide settings (None to uninstall)."""
    global _configured
    _configured = settings


def reset_settings() -> None:
    """Uninstall configured settings and forget the environment snapshot."""
    configure_settings(None)
    _settings_from_env.cache_clear()
