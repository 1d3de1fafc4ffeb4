from __future__ import annotations

import logging
from typing import Any, Dict, Type

from ..exceptions import ConfigurationError, UnknownVariantError
from ..interfaces.factory import IAbstractFactory
from .base_factory import IServiceFactory
from .concrete import ConcreteFactory1, ConcreteFactory2

logger = logging.getLogger("gof_patterns")

__all__ = ["VariantFactoryRegistry"]


class VariantFactoryRegistry(IServiceFactory[IAbstractFactory]):
    """Selects a concrete :class:`IAbstractFactory` from a variant identifier.

    Identifiers are matched case-insensitively after stripping whitespace.
    New variants can be registered dynamically via :py:meth:`register_provider`.
    """

    def __init__(self) -> None:  # noqa: D401
        self._providers: Dict[str, Type[IAbstractFactory]] = {
            "1": ConcreteFactory1,
            "2": ConcreteFactory2,
        }

    # ------------------------------------------------------------------
    # IServiceFactory implementation
    # ------------------------------------------------------------------
    def create(self, provider_type: str, **kwargs: Any) -> IAbstractFactory:  # noqa: D401
        variant = _normalise(provider_type)
        if variant not in self._providers:
            logger.warning("Requested unknown factory variant %r", provider_type)
            raise UnknownVariantError(variant, self._providers)

        factory_cls = self._providers[variant]
        try:
            return factory_cls(**kwargs)
        except TypeError as exc:
            raise ConfigurationError(
                f"Invalid arguments for factory variant '{variant}': {exc}"
            ) from exc

    def get_supported_providers(self) -> list[str]:  # noqa: D401
        return sorted(self._providers.keys())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def register_provider(self, provider_type: str, cls: Type[IAbstractFactory]) -> None:
        """Register a new factory class at runtime."""
        variant = _normalise(provider_type)
        if not variant:
            raise ConfigurationError("Factory variant identifier must not be empty")
        if variant in self._providers:
            raise ConfigurationError(f"Factory variant '{variant}' is already registered")
        if not isinstance(cls, type) or not issubclass(cls, IAbstractFactory):
            raise ConfigurationError("Custom factory must implement IAbstractFactory")
        self._providers[variant] = cls
        logger.info("Registered factory variant '%s' -> %s", variant, cls.__name__)


def _normalise(provider_type: str) -> str:
    return provider_type.strip().lower()
