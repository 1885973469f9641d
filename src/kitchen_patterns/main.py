"""CLI entry point that runs each pattern demo in order.

Usage:
    kitchen-patterns
    python -m kitchen_patterns.main
"""

from loguru import logger

from .builder import OrderBuilder
from .composite import Menu, MenuItem
from .config import get_settings
from .decorator import Coffee, size_xl, with_milk, with_sugar
from .facade import RestaurantFacade
from .logging import setup_logging
from .singleton import acquire_cheeseburger


def run_builder_demo() -> None:
    order1 = (
        OrderBuilder()
        .add_drink("Coke")
        .add_main_course("Burger")
        .add_dessert("Pie")
        .build()
    )
    order2 = OrderBuilder().add_drink("Sprite").add_main_course("Pizza").build()
    print(order1.as_dict())
    print(order2.as_dict())


def run_singleton_demo() -> None:
    burger1 = acquire_cheeseburger()
    burger2 = acquire_cheeseburger()

    # Changed through burger1, seen through burger2
    burger1.toppings[1] = "onions"
    print(burger1.describe())
    print(burger2.describe())
    print(burger1 is burger2)


def run_decorator_demo() -> None:
    coffee1 = size_xl(with_milk(Coffee()))
    coffee2 = with_sugar(Coffee())
    print(coffee1.cost(), coffee2.cost())


def run_facade_demo() -> None:
    restaurant = RestaurantFacade()
    restaurant.order_food("Pizza")


def run_composite_demo() -> None:
    main_menu = Menu()
    main_menu.add(MenuItem(name="Pizza"))
    main_menu.add(MenuItem(name="Coffee"))
    main_menu.add(MenuItem(name="Cheeseburger"))
    main_menu.display()


DEMOS = (
    ("builder", run_builder_demo),
    ("singleton", run_singleton_demo),
    ("decorator", run_decorator_demo),
    ("facade", run_facade_demo),
    ("composite", run_composite_demo),
)


def main() -> None:
    """Run every pattern demo, printing results to stdout."""
    settings = get_settings()

    # Initialize logging first (stderr, plus a rotating file when enabled)
    setup_logging(level=settings.log_level, log_to_file=settings.log_to_file)
    logger.info("Running {} pattern demos", len(DEMOS))

    for name, demo in DEMOS:
        logger.debug("Demo: {}", name)
        demo()

    logger.info("All demos finished")


if __name__ == "__main__":
    main()
