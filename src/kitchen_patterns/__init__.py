"""Restaurant-themed demos of five object-composition patterns."""

from .builder import OrderBuilder, OrderSnapshot
from .composite import Menu, MenuItem
from .decorator import (
    Coffee,
    SizeXL,
    WithMilk,
    WithSugar,
    decorate,
    size_xl,
    with_milk,
    with_sugar,
)
from .enums import Course
from .facade import Chef, RestaurantFacade, Waiter
from .singleton import (
    Cheeseburger,
    SharedInstanceRegistry,
    acquire_cheeseburger,
    registry,
)

__all__ = [
    "Cheeseburger",
    "Chef",
    "Coffee",
    "Course",
    "Menu",
    "MenuItem",
    "OrderBuilder",
    "OrderSnapshot",
    "RestaurantFacade",
    "SharedInstanceRegistry",
    "SizeXL",
    "Waiter",
    "WithMilk",
    "WithSugar",
    "acquire_cheeseburger",
    "decorate",
    "registry",
    "size_xl",
    "with_milk",
    "with_sugar",
]
