from .base_factory import IServiceFactory
from .concrete import ConcreteFactory1, ConcreteFactory2
from .registry import VariantFactoryRegistry

__all__ = [
    "IServiceFactory",
    "ConcreteFactory1",
    "ConcreteFactory2",
    "VariantFactoryRegistry",
]
