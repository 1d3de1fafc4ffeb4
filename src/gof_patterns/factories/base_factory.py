from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T_co = TypeVar("T_co", covariant=True)

__all__ = ["IServiceFactory"]


class IServiceFactory(ABC, Generic[T_co]):
    """Generic interface for factories that pick an implementation by name."""

    @abstractmethod
    def create(self, provider_type: str, **kwargs: Any) -> T_co:  # noqa: D401
        """Return an instance for *provider_type*."""

    @abstractmethod
    def get_supported_providers(self) -> list[str]:  # noqa: D401
        """Return a list of supported provider identifiers."""
