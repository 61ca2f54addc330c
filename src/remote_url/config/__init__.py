"""Configuration for remote-url."""

from remote_url.config.logging import configure_logging
from remote_url.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
