"""Configuration loading."""

from menuplan.config.log_setup import configure_logging
from menuplan.config.settings import Settings, get_settings, reload_settings

__all__ = ["Settings", "configure_logging", "get_settings", "reload_settings"]
