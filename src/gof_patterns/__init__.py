"""Abstract Factory pattern demonstration.

Two product families (A and B), two variants of each, and one concrete factory
per variant. :class:`Client` is written only against the abstract interfaces.
"""

from .client import Client
from .exceptions import (
    ConfigurationError,
    GofPatternsError,
    ServiceNotFoundError,
    UnknownVariantError,
)
from .factories import ConcreteFactory1, ConcreteFactory2, VariantFactoryRegistry
from .interfaces import IAbstractFactory, IAbstractProductA, IAbstractProductB
from .products import (
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)

__version__ = "0.1.0"

__all__ = [
    "Client",
    "ConcreteFactory1",
    "ConcreteFactory2",
    "ConcreteProductA1",
    "ConcreteProductA2",
    "ConcreteProductB1",
    "ConcreteProductB2",
    "ConfigurationError",
    "GofPatternsError",
    "IAbstractFactory",
    "IAbstractProductA",
    "IAbstractProductB",
    "ServiceNotFoundError",
    "UnknownVariantError",
    "VariantFactoryRegistry",
]
