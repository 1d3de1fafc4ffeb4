from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from .products import IAbstractProductA, IAbstractProductB

__all__ = ["IAbstractFactory"]


class IAbstractFactory(ABC):
    """Declares a set of methods returning the products of one family.

    The products of a family are related by a common theme and can usually
    collaborate with each other. A family may come in several variants, but
    products of one variant are incompatible with products of another.
    """

    variant: ClassVar[str] = ""

    @abstractmethod
    def create_product_a(self) -> IAbstractProductA:  # noqa: D401
        """Return a new product A of this factory's variant."""

    @abstractmethod
    def create_product_b(self) -> IAbstractProductB:  # noqa: D401
        """Return a new product B of this factory's variant."""
