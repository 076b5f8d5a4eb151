"""Configuration management for categorycore."""

import os
import json
from pathlib import Path
from typing import Optional, Dict, Any

from pydantic import BaseModel, Field, ValidationError, field_validator


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Error from configuration validation and setup issues."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"  # "json" or "text"
    file: Optional[str] = None

    @field_validator("level")
    def validate_level(cls, v):
        """Normalize and check the level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("format")
    def validate_format(cls, v):
        if v not in ("json", "text"):
            raise ValueError(f"Unknown log format: {v}")
        return v


class AuditConfig(BaseModel):
    """Audit trail configuration."""

    enabled: bool = True


class ErrorConfig(BaseModel):
    """Error handler configuration."""

    max_history_size: int = Field(default=1000, gt=0)


class Config(BaseModel):
    """Complete configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    audit: AuditConfig = Field(default_factory=AuditConfig)
    errors: ErrorConfig = Field(default_factory=ErrorConfig)


class ConfigManager:
    """Manages configuration loading and validation."""

    DEFAULT_CONFIG: Dict[str, Any] = {
        "logging": {"level": "INFO", "format": "json", "file": None},
        "audit": {"enabled": True},
        "errors": {"max_history_size": 1000},
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize config manager.

        Args:
            config_path: Path to a JSON config file. If None, uses defaults + env vars
        """
        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[Config] = None

    def load(self) -> Config:
        """Load configuration from file and environment.

        Raises:
            ConfigurationError: If the file cannot be parsed or a value is invalid
        """
        if self._config:
            return self._config

        config_dict = self._deep_merge({}, self.DEFAULT_CONFIG)

        if self.config_path and self.config_path.exists():
            try:
                with open(self.config_path, "r") as f:
                    file_config = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Invalid JSON in config file {self.config_path}: {e}"
                ) from e
            config_dict = self._deep_merge(config_dict, file_config)

        config_dict = self._apply_env_overrides(config_dict)

        try:
            self._config = Config(**config_dict)
        except ValidationError as e:
            first = e.errors()[0]
            key = ".".join(str(part) for part in first["loc"])
            raise ConfigurationError(f"Invalid configuration: {e}", config_key=key) from e
        return self._config

    def _deep_merge(self, base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in update.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            elif isinstance(value, dict):
                result[key] = self._deep_merge({}, value)
            else:
                result[key] = value

        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides."""
        log_level = os.getenv("CATEGORYCORE_LOG_LEVEL")
        if log_level:
            config.setdefault("logging", {})["level"] = log_level

        log_format = os.getenv("CATEGORYCORE_LOG_FORMAT")
        if log_format:
            config.setdefault("logging", {})["format"] = log_format.lower()

        log_file = os.getenv("CATEGORYCORE_LOG_FILE")
        if log_file:
            config.setdefault("logging", {})["file"] = log_file

        audit_enabled = os.getenv("CATEGORYCORE_AUDIT_ENABLED")
        if audit_enabled:
            config.setdefault("audit", {})["enabled"] = audit_enabled.lower() in (
                "true", "1", "yes"
            )

        history = os.getenv("CATEGORYCORE_ERROR_HISTORY")
        if history:
            try:
                config.setdefault("errors", {})["max_history_size"] = int(history)
            except ValueError as e:
                raise ConfigurationError(
                    f"CATEGORYCORE_ERROR_HISTORY must be an integer, got {history!r}",
                    config_key="errors.max_history_size",
                ) from e

        return config

    @property
    def config(self) -> Config:
        """Get the loaded configuration."""
        return self.load()
