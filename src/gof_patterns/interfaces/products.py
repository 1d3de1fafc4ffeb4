from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

__all__ = ["StatelessProduct", "IAbstractProductA", "IAbstractProductB"]


class StatelessProduct:
    """Equality mixin for products that carry no state.

    Two products compare equal when they are instances of the same concrete
    class, which is all a stateless object can be distinguished by.
    """

    variant: ClassVar[str] = ""

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, StatelessProduct):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IAbstractProductA(StatelessProduct, ABC):
    """Base interface of the A product family.

    All variants of product A implement this interface.
    """

    @abstractmethod
    def useful_function_a(self) -> str:  # noqa: D401
        """Return the literal identifying this variant."""


class IAbstractProductB(StatelessProduct, ABC):
    """Base interface of the B product family.

    Products of any family can interact with each other, but the interaction
    is only meaningful between products of the same concrete variant.
    """

    @abstractmethod
    def useful_function_b(self) -> str:  # noqa: D401
        """Return the literal identifying this variant."""

    @abstractmethod
    def another_useful_function_b(self, collaborator: IAbstractProductA) -> str:  # noqa: D401
        """Return a result built from *collaborator*'s own result.

        Any product A is accepted. The factories are what keep a B product
        paired with the A product of its own variant.
        """
