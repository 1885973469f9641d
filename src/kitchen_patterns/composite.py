"""Composite pattern: menus that hold items and other menus.

A Menu and a MenuItem share the same display() interface, so a whole tree is
printed by calling display() on its root. Traversal is pre-order depth-first
in insertion order.
"""

from collections.abc import Iterator
from typing import Self

from pydantic import BaseModel, Field

MENU_HEADER = "Menu:"


class MenuItem(BaseModel):
    """Leaf node. The label must be text."""

    name: str

    def lines(self) -> Iterator[str]:
        yield self.name

    def labels(self) -> Iterator[str]:
        yield self.name

    def display(self) -> None:
        print(self.name)


class Menu(BaseModel):
    """Composite node holding MenuItems and nested Menus in order."""

    items: list["MenuItem | Menu"] = Field(default_factory=list)

    def add(self, node: "MenuItem | Menu") -> Self:
        if not isinstance(node, (MenuItem, Menu)):
            raise TypeError(
                f"Menu children must be MenuItem or Menu, got {type(node).__name__}"
            )
        if isinstance(node, Menu) and any(menu is self for menu in node._menus()):
            raise ValueError("A menu cannot contain itself")
        self.items.append(node)
        return self

    def _menus(self) -> Iterator["Menu"]:
        yield self
        for node in self.items:
            if isinstance(node, Menu):
                yield from node._menus()

    def lines(self) -> Iterator[str]:
        """Yield the header, then each child's lines (pre-order)."""
        yield MENU_HEADER
        for node in self.items:
            yield from node.lines()

    def labels(self) -> Iterator[str]:
        """Yield leaf labels only, pre-order depth-first."""
        for node in self.items:
            yield from node.labels()

    def display(self) -> None:
        for line in self.lines():
            print(line)
