"""Concrete product variants, created by the matching concrete factories."""

from .variant1 import ConcreteProductA1, ConcreteProductB1
from .variant2 import ConcreteProductA2, ConcreteProductB2

__all__ = [
    "ConcreteProductA1",
    "ConcreteProductA2",
    "ConcreteProductB1",
    "ConcreteProductB2",
]
