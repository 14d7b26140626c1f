"""Configuration management for Adventure Tracker."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from adventure_tracker.data.models import TrackerConfig
from adventure_tracker.utils.logger import get_logger

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(Exception):
    """Configuration related error."""
    pass


class ConfigManager:
    """
    Manages tracker configuration from a YAML file.

    Settings not present in the file keep their defaults.
    """

    DEFAULT_CONFIG_DIR = "config"

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize config manager.

        Args:
            config_dir: Path to configuration directory
        """
        self.config_dir = Path(config_dir or self.DEFAULT_CONFIG_DIR)
        self.log = get_logger()
        self._config: Optional[TrackerConfig] = None

    @property
    def settings_path(self) -> Path:
        return self.config_dir / "settings.yaml"

    def load(self) -> TrackerConfig:
        """
        Load tracker configuration.

        Returns:
            TrackerConfig with all settings

        Raises:
            ConfigError: If the config file is invalid
        """
        settings_path = self.settings_path

        if not settings_path.exists():
            self.log.warning(f"No settings.yaml found at {settings_path}, using defaults")
            self._config = TrackerConfig()
            return self._config

        try:
            with open(settings_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in settings.yaml: {e}")

        if not isinstance(data, dict):
            raise ConfigError("settings.yaml must contain a mapping")

        self._config = self._parse_config(data)
        self._validate(self._config)
        self.log.info(f"Loaded config from {settings_path}")
        return self._config

    def _parse_config(self, data: Dict[str, Any]) -> TrackerConfig:
        """Parse raw YAML data into a TrackerConfig."""
        defaults = TrackerConfig()
        limits = self._section(data, "limits")
        report = self._section(data, "report")
        logging_cfg = self._section(data, "logging")

        try:
            return TrackerConfig(
                # Limits
                max_sessions=int(limits.get("max_sessions", defaults.max_sessions)),
                min_level=int(limits.get("min_level", defaults.min_level)),
                max_level=int(limits.get("max_level", defaults.max_level)),
                max_enemies=int(limits.get("max_enemies", defaults.max_enemies)),
                max_duration_minutes=int(
                    limits.get("max_duration_minutes", defaults.max_duration_minutes)
                ),
                max_areas=int(limits.get("max_areas", defaults.max_areas)),
                max_gold_earned=int(limits.get("max_gold_earned", defaults.max_gold_earned)),
                # Report
                report_path=str(report.get("path", defaults.report_path)),
                # Logging
                log_level=str(logging_cfg.get("level", defaults.log_level)).upper(),
                log_dir=str(logging_cfg.get("directory", defaults.log_dir)),
                log_retention_days=int(
                    logging_cfg.get("retention_days", defaults.log_retention_days)
                ),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid value in settings.yaml: {e}")

    def _section(self, data: Dict[str, Any], name: str) -> Dict[str, Any]:
        """Get a settings section, empty when absent."""
        section = data.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ConfigError(f"'{name}' section must be a mapping")
        return section

    def _validate(self, config: TrackerConfig) -> None:
        """Reject limits the tracker cannot work with."""
        if config.max_sessions < 1:
            raise ConfigError(f"max_sessions must be at least 1, got {config.max_sessions}")
        if config.min_level > config.max_level:
            raise ConfigError(
                f"min_level ({config.min_level}) is greater than "
                f"max_level ({config.max_level})"
            )
        if config.max_duration_minutes < 1:
            raise ConfigError("max_duration_minutes must be at least 1")
        for name in ("max_enemies", "max_areas", "max_gold_earned"):
            if getattr(config, name) < 0:
                raise ConfigError(f"{name} cannot be negative")
        if config.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level '{config.log_level}', expected one of {', '.join(LOG_LEVELS)}"
            )
        if config.log_retention_days < 1:
            raise ConfigError("retention_days must be at least 1")

    def get_config(self) -> TrackerConfig:
        """Get loaded config, loading if necessary."""
        if self._config is None:
            self.load()
        return self._config

    def save(self, config: TrackerConfig) -> None:
        """
        Save configuration to settings.yaml.

        Args:
            config: TrackerConfig to save
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        settings_path = self.settings_path

        data = {
            "limits": {
                "max_sessions": config.max_sessions,
                "min_level": config.min_level,
                "max_level": config.max_level,
                "max_enemies": config.max_enemies,
                "max_duration_minutes": config.max_duration_minutes,
                "max_areas": config.max_areas,
                "max_gold_earned": config.max_gold_earned,
            },
            "report": {
                "path": config.report_path,
            },
            "logging": {
                "level": config.log_level,
                "directory": config.log_dir,
                "retention_days": config.log_retention_days,
            },
        }

        with open(settings_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        self.log.info(f"Saved config to {settings_path}")
