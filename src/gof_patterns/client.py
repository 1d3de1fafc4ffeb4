"""Client code for the Abstract Factory demonstration.

The client works with factories and products only through the abstract types
:class:`IAbstractFactory`, :class:`IAbstractProductA` and
:class:`IAbstractProductB`. Any factory or product subclass can therefore be
passed in without changing this module.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional, TextIO

from .factories.concrete import ConcreteFactory1, ConcreteFactory2
from .factories.registry import VariantFactoryRegistry
from .interfaces.factory import IAbstractFactory

logger = logging.getLogger("gof_patterns")

__all__ = ["Client"]


class Client:
    def __init__(
        self,
        registry: Optional[VariantFactoryRegistry] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._registry = registry if registry is not None else VariantFactoryRegistry()
        self._stream = stream

    @property
    def registry(self) -> VariantFactoryRegistry:
        return self._registry

    def main(self) -> None:
        """Run the fixed two-pass demonstration, one pass per built-in factory."""
        self._write("Client: testing client code with first factory type...")
        self.client_method(ConcreteFactory1())
        self._write()

        self._write("Client: testing the same client code with second factory type...")
        self.client_method(ConcreteFactory2())

    def run_variants(self, variants: Iterable[str]) -> None:
        """Run one pass per variant identifier, in the given order."""
        # Resolve everything first so an unknown id produces no partial output.
        factories = [(variant, self._registry.create(variant)) for variant in variants]
        for index, (variant, factory) in enumerate(factories):
            if index:
                self._write()
            self._write(f"Client: testing client code with factory type '{variant}'...")
            self.client_method(factory)

    def client_method(self, factory: IAbstractFactory) -> None:
        logger.debug("Running client code against %s", type(factory).__name__)
        product_a = factory.create_product_a()
        product_b = factory.create_product_b()

        self._write(product_b.useful_function_b())
        self._write(product_b.another_useful_function_b(product_a))

    # ------------------------------------------------------------------
    def _write(self, line: str = "") -> None:
        # Looked up per call so pytest's capsys sees the default stream.
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + "\n")
