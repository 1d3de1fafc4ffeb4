from .factory import IAbstractFactory
from .products import IAbstractProductA, IAbstractProductB, StatelessProduct

__all__ = [
    "IAbstractFactory",
    "IAbstractProductA",
    "IAbstractProductB",
    "StatelessProduct",
]
