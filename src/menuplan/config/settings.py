"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".menuplan"


def _default_db_path() -> Path:
    """Return the default database path."""
    return _default_config_dir() / "menuplan.db"


def default_config_path() -> Path:
    """Return the default config.yaml path."""
    return _default_config_dir() / "config.yaml"


@dataclass
class DatabaseConfig:
    """Database configuration."""

    path: Path = field(default_factory=_default_db_path)


@dataclass
class DefaultsConfig:
    """Default values for profile options and output."""

    activity_level: str = "moderate"
    goal: str = "maintain"
    output_format: str = "table"  # "table", "json", "markdown"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    """Main application settings."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.menuplan/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        if "database" in data:
            db_data = data["database"] or {}
            if "path" in db_data:
                settings.database.path = Path(db_data["path"]).expanduser()

        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "activity_level" in def_data:
                settings.defaults.activity_level = str(def_data["activity_level"])
            if "goal" in def_data:
                settings.defaults.goal = def_data["goal"]
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        if "logging" in data:
            log_data = data["logging"] or {}
            if "level" in log_data:
                settings.logging.level = str(log_data["level"]).upper()
            if "format" in log_data:
                settings.logging.format = log_data["format"]

        return settings

    def save(self, config_path: Optional[Path] = None) -> Path:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.menuplan/config.yaml

        Returns:
            Path written to
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

        return config_path

    def to_dict(self) -> dict:
        return {
            "database": {
                "path": str(self.database.path),
            },
            "defaults": {
                "activity_level": self.defaults.activity_level,
                "goal": self.defaults.goal,
                "output_format": self.defaults.output_format,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            },
        }


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
