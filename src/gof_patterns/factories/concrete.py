"""Concrete factories, one per product variant.

Each factory produces a family of products belonging to a single variant and
is the only thing guaranteeing that the products it returns are compatible.
The method signatures return the abstract product types while the bodies
instantiate concrete products.
"""

from __future__ import annotations

import logging

from ..interfaces.factory import IAbstractFactory
from ..interfaces.products import IAbstractProductA, IAbstractProductB
from ..products.variant1 import ConcreteProductA1, ConcreteProductB1
from ..products.variant2 import ConcreteProductA2, ConcreteProductB2

logger = logging.getLogger("gof_patterns")

__all__ = ["ConcreteFactory1", "ConcreteFactory2"]


class ConcreteFactory1(IAbstractFactory):
    variant = "1"

    def create_product_a(self) -> IAbstractProductA:
        logger.debug("ConcreteFactory1 creating ConcreteProductA1")
        return ConcreteProductA1()

    def create_product_b(self) -> IAbstractProductB:
        logger.debug("ConcreteFactory1 creating ConcreteProductB1")
        return ConcreteProductB1()


class ConcreteFactory2(IAbstractFactory):
    variant = "2"

    def create_product_a(self) -> IAbstractProductA:
        logger.debug("ConcreteFactory2 creating ConcreteProductA2")
        return ConcreteProductA2()

    def create_product_b(self) -> IAbstractProductB:
        logger.debug("ConcreteFactory2 creating ConcreteProductB2")
        return ConcreteProductB2()
