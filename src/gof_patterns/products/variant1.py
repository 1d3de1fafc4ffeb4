from __future__ import annotations

from ..interfaces.products import IAbstractProductA, IAbstractProductB

__all__ = ["ConcreteProductA1", "ConcreteProductB1"]


class ConcreteProductA1(IAbstractProductA):
    variant = "1"

    def useful_function_a(self) -> str:
        return "result of product A1."


class ConcreteProductB1(IAbstractProductB):
    variant = "1"

    def useful_function_b(self) -> str:
        return "result of product B1."

    # Only works as intended with ConcreteProductA1, yet any product A is accepted.
    def another_useful_function_b(self, collaborator: IAbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"result of B1 collaborating with ({result})"
