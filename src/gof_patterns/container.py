from __future__ import annotations

import inspect
from types import MappingProxyType
from typing import Any, Dict, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from .exceptions import ConfigurationError, ServiceNotFoundError

T = TypeVar("T")

__all__ = ["ServiceContainer", "global_container"]


class ServiceContainer:
    """Light-weight dependency-injection container.

    Dependencies are resolved from constructor type hints. Every binding has a
    singleton lifetime: the first :py:meth:`resolve` builds the instance and
    later calls return it unchanged.
    """

    def __init__(self) -> None:  # noqa: D401
        self._registrations: Dict[Type[Any], Type[Any]] = {}
        self._singletons: Dict[Type[Any], Any] = {}

    # ---------------------------------------------------------------------
    # Registration helpers
    # ---------------------------------------------------------------------
    def register_singleton(self, interface: Type[T], implementation: Type[T]) -> None:
        """Register *implementation* to be instantiated once per container."""
        if not issubclass(implementation, interface):
            raise ConfigurationError(
                f"{implementation.__name__} does not implement {interface.__name__}"
            )
        self._registrations[interface] = implementation
        self._singletons.pop(interface, None)

    def register_instance(self, interface: Type[T], instance: T) -> None:
        """Bind an already-created *instance* as singleton for *interface*."""
        if not isinstance(instance, interface):  # type: ignore[arg-type]
            raise ConfigurationError(
                f"Instance of {type(instance).__name__} does not implement {interface.__name__}"
            )
        self._singletons[interface] = instance

    def is_registered(self, interface: Type[Any]) -> bool:
        return interface in self._singletons or interface in self._registrations

    # ------------------------------------------------------------------
    # Resolution helpers
    # ------------------------------------------------------------------
    def resolve(self, interface: Type[T]) -> T:
        """Return a fully-constructed singleton for *interface*."""
        if interface in self._singletons:
            return self._singletons[interface]  # type: ignore[return-value]

        if interface not in self._registrations:
            raise ServiceNotFoundError(
                f"Service {getattr(interface, '__name__', interface)} not registered"
            )

        instance: T = self._create_instance(self._registrations[interface])
        self._singletons[interface] = instance
        return instance

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _create_instance(self, cls: Type[T]) -> T:
        """Recursively construct *cls* by resolving its annotated deps."""
        signature = inspect.signature(cls.__init__)
        # Modules use postponed annotations, so hints arrive as strings.
        hints = get_type_hints(cls.__init__) if cls.__init__ is not object.__init__ else {}
        kwargs: Dict[str, Any] = {}

        for name, param in signature.parameters.items():
            if name == "self":
                continue
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            dep_type = _unwrap_optional(hints.get(name))
            if dep_type is None:
                if param.default is inspect.Parameter.empty:
                    raise ConfigurationError(
                        f"Cannot resolve untyped parameter '{name}' for {cls.__name__}"
                    )
                continue
            try:
                kwargs[name] = self.resolve(dep_type)
            except ServiceNotFoundError as exc:
                if param.default is not inspect.Parameter.empty:
                    kwargs[name] = param.default
                else:
                    raise ConfigurationError(
                        f"Unsatisfied dependency '{name}: {getattr(dep_type, '__name__', dep_type)}' "
                        f"for {cls.__name__}"
                    ) from exc
        return cls(**kwargs)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Convenience API
    # ------------------------------------------------------------------
    @property
    def registrations(self) -> MappingProxyType:
        """Return a read-only view of current registrations."""
        return MappingProxyType(self._registrations)


# Process-wide container populated by :mod:`gof_patterns.bootstrap`.
global_container = ServiceContainer()


def _unwrap_optional(hint: Any) -> Any:
    """Return ``X`` for ``Optional[X]``; any other hint is returned unchanged."""
    if get_origin(hint) is Union:
        args = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint
