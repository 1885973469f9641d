"""Tests for the restaurant facade."""

from kitchen_patterns.facade import Chef, RestaurantFacade, Waiter


class RecordingChef(Chef):
    def __init__(self, calls: list[str]) -> None:
        self.calls = calls

    def cook(self, item: str) -> None:
        self.calls.append(f"cook:{item}")


class RecordingWaiter(Waiter):
    def __init__(self, calls: list[str]) -> None:
        self.calls = calls

    def take_order(self, item: str) -> None:
        self.calls.append(f"take_order:{item}")

    def serve(self, item: str) -> None:
        self.calls.append(f"serve:{item}")


class TestOrderFood:
    """order_food() drives the collaborators in a fixed order."""

    def test_prints_three_lines_in_order(self, capsys):
        """Taking, cooking, and serving lines appear in sequence."""
        RestaurantFacade().order_food("Pizza")
        assert capsys.readouterr().out.splitlines() == [
            "Order received for Pizza",
            "Cooking Pizza...",
            "Serving Pizza...",
        ]

    def test_collaborator_call_order(self):
        """Injected collaborators are called take_order, cook, serve."""
        calls: list[str] = []
        facade = RestaurantFacade(chef=RecordingChef(calls), waiter=RecordingWaiter(calls))
        facade.order_food("Salad")
        assert calls == ["take_order:Salad", "cook:Salad", "serve:Salad"]

    def test_repeated_orders_are_independent(self, capsys):
        """Each call prints its own full sequence."""
        restaurant = RestaurantFacade()
        restaurant.order_food("Pizza")
        restaurant.order_food("Soup")
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 6
        assert lines[3] == "Order received for Soup"
