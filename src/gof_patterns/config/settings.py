from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["DemoSettings", "DEFAULT_LOG_FORMAT"]

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class DemoSettings(BaseSettings):
    """Settings for the demonstration runner, read from ``GOF_*`` variables."""

    debug_mode: bool = False
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    # Comma-separated variant identifiers, e.g. "2,1". Unset means the classic
    # two-pass demonstration.
    demo_variants: Optional[str] = Field(None)

    @field_validator("log_level", mode="before")
    def _validate_log_level(cls, v: str) -> str:  # noqa: D401
        level = str(v).strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(_LEVEL_NAMES)}")
        return level

    @model_validator(mode="after")
    def _reject_blank_variants(self) -> "DemoSettings":
        # Set but blank would run nothing.
        if self.demo_variants is not None and not self.variant_list:
            raise ValueError("demo_variants is set but names no variants")
        return self

    @property
    def variant_list(self) -> list[str]:
        if self.demo_variants is None:
            return []
        return [part.strip() for part in self.demo_variants.split(",") if part.strip()]

    @property
    def effective_log_level(self) -> int:
        return logging.DEBUG if self.debug_mode else getattr(logging, self.log_level)

    model_config = SettingsConfigDict(env_prefix="GOF_", case_sensitive=False, extra="ignore")
