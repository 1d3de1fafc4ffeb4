"""Configuration package: settings, their factory and logging setup."""

from .factory import ConfigFactory
from .log_setup import LOGGER_NAME, configure_logging
from .settings import DemoSettings

__all__ = [
    "ConfigFactory",
    "DemoSettings",
    "LOGGER_NAME",
    "configure_logging",
]
