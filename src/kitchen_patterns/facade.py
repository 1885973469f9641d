"""Facade pattern: one call to order food instead of driving the kitchen."""

from loguru import logger


class Chef:
    def cook(self, item: str) -> None:
        print(f"Cooking {item}...")


class Waiter:
    def take_order(self, item: str) -> None:
        print(f"Order received for {item}")

    def serve(self, item: str) -> None:
        print(f"Serving {item}...")


class RestaurantFacade:
    """Hides the take-order / cook / serve sequence behind order_food()."""

    def __init__(self, chef: Chef | None = None, waiter: Waiter | None = None) -> None:
        self.chef = chef or Chef()
        self.waiter = waiter or Waiter()

    def order_food(self, item: str) -> None:
        logger.debug("Ordering {}", item)
        self.waiter.take_order(item)
        self.chef.cook(item)
        self.waiter.serve(item)
