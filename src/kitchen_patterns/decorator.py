"""Decorator pattern: layer extras onto a beverage without changing it.

Each decoration wraps the previous step and adds its surcharge on top of the
wrapped cost, so a chain is composed once at construction time and its total
is the base cost plus every applied surcharge.
"""

from functools import reduce
from typing import Callable, ClassVar, Protocol


class PricedItem(Protocol):
    def cost(self) -> int: ...

    def description(self) -> str: ...


class Coffee:
    BASE_COST: ClassVar[int] = 5

    def cost(self) -> int:
        return self.BASE_COST

    def description(self) -> str:
        return "Coffee"


class Decoration:
    """Wraps a priced item and adds a fixed surcharge to its cost."""

    surcharge: ClassVar[int] = 0
    label: ClassVar[str] = ""

    def __init__(self, wrapped: PricedItem) -> None:
        self.wrapped = wrapped

    def cost(self) -> int:
        return self.wrapped.cost() + self.surcharge

    def description(self) -> str:
        return f"{self.wrapped.description()}, {self.label}"


class WithMilk(Decoration):
    surcharge = 2
    label = "milk"


class WithSugar(Decoration):
    surcharge = 1
    label = "sugar"


class SizeXL(Decoration):
    surcharge = 3
    label = "XL"


def with_milk(item: PricedItem) -> PricedItem:
    return WithMilk(item)


def with_sugar(item: PricedItem) -> PricedItem:
    return WithSugar(item)


def size_xl(item: PricedItem) -> PricedItem:
    return SizeXL(item)


def decorate(
    item: PricedItem, *steps: Callable[[PricedItem], PricedItem]
) -> PricedItem:
    """Apply ``steps`` to ``item`` in order, each wrapping the previous result."""
    return reduce(lambda wrapped, step: step(wrapped), steps, item)
