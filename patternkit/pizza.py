"""Pizzas whose toppings are layered on as decorators."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = [
    "Pizza",
    "BaseMargherita",
    "BaseLeanCrust",
    "PizzaDecorator",
    "CheeseBlastDecorator",
    "ChickenDecorator",
    "TomatoDecorator",
]


class Pizza(ABC):
    """A pizza with a price and a list of ingredients."""

    @abstractmethod
    def cost(self) -> float:
        """Return the price of the pizza."""

    @abstractmethod
    def ingredients(self) -> list[str]:
        """Return the ingredients, base first unless a topping says otherwise."""


class BaseMargherita(Pizza):
    """A plain margherita base."""

    def cost(self) -> float:
        return 200.0

    def ingredients(self) -> list[str]:
        return ["Margherita"]


class BaseLeanCrust(Pizza):
    """A plain lean-crust base."""

    def cost(self) -> float:
        return 210.0

    def ingredients(self) -> list[str]:
        return ["Lean Crust"]


class PizzaDecorator(Pizza):
    """A pizza that wraps another and passes everything through to it."""

    def __init__(self, base_pizza: Pizza) -> None:
        self.base_pizza = base_pizza

    def cost(self) -> float:
        return self.base_pizza.cost()

    def ingredients(self) -> list[str]:
        return self.base_pizza.ingredients()


class CheeseBlastDecorator(PizzaDecorator):
    """Adds a cheese-blast layer underneath everything else."""

    def cost(self) -> float:
        return 100.0 + super().cost()

    def ingredients(self) -> list[str]:
        return ["Cheese Blast", *super().ingredients()]


class ChickenDecorator(PizzaDecorator):
    """Adds chicken on top."""

    def cost(self) -> float:
        return 15.0 + super().cost()

    def ingredients(self) -> list[str]:
        return [*super().ingredients(), "Chickens"]


class TomatoDecorator(PizzaDecorator):
    """Adds tomatoes on top."""

    def cost(self) -> float:
        return 15.0 + super().cost()

    def ingredients(self) -> list[str]:
        return [*super().ingredients(), "Tomatoes"]