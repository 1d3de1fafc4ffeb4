"""Exception hierarchy for the pattern demonstrations.

Every error raised by this package derives from :class:`GofPatternsError`, so
callers such as the command-line entry point can report failures uniformly.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

__all__ = [
    "GofPatternsError",
    "ConfigurationError",
    "ServiceNotFoundError",
    "UnknownVariantError",
]


class GofPatternsError(Exception):
    """Base exception for all application-specific errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context: Dict[str, Any] = context or {}

    def __str__(self) -> str:  # pragma: no cover – thin wrapper
        return self.message


class ConfigurationError(GofPatternsError):
    """Raised when configuration is invalid or missing."""


class ServiceNotFoundError(GofPatternsError):
    """Raised when a requested service is not registered in the container."""


class UnknownVariantError(ServiceNotFoundError):
    """Raised when no factory is registered for the requested variant."""

    def __init__(self, variant: str, available: Iterable[str]) -> None:
        self.variant = variant
        self.available = sorted(available)
        super().__init__(
            f"Unknown factory variant '{variant}'. Available: {', '.join(self.available)}",
            error_code="unknown_variant",
            context={"variant": variant, "available": self.available},
        )
