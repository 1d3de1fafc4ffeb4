"""Lazily-built configuration.

The factory loads ``.env`` into the process environment and builds
:class:`DemoSettings` once. Subsequent calls return the cached instance.
"""

from __future__ import annotations

from threading import Lock
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .settings import DemoSettings

__all__ = ["ConfigFactory"]


class ConfigFactory:
    """Singleton-style configuration factory."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._settings: Optional[DemoSettings] = None

    def settings(self) -> DemoSettings:  # noqa: D401
        """Return lazily-created :class:`DemoSettings`."""
        if self._settings is None:
            with self._lock:
                if self._settings is None:  # double-checked
                    load_dotenv(override=False)
                    try:
                        self._settings = DemoSettings()
                    except ValidationError as exc:
                        raise ConfigurationError(f"Invalid settings: {exc}") from exc
        return self._settings
