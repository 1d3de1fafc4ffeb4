from __future__ import annotations

from ..interfaces.products import IAbstractProductA, IAbstractProductB

__all__ = ["ConcreteProductA2", "ConcreteProductB2"]


class ConcreteProductA2(IAbstractProductA):
    variant = "2"

    def useful_function_a(self) -> str:
        return "result of product A2."


class ConcreteProductB2(IAbstractProductB):
    variant = "2"

    def useful_function_b(self) -> str:
        return "result of product B2."

    # Only works as intended with ConcreteProductA2, yet any product A is accepted.
    # No space before the parenthesis: kept as the historical output format.
    def another_useful_function_b(self, collaborator: IAbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"result of B2 collaborating with({result})"
