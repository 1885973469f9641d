"""Singleton pattern: one shared cheeseburger per process.

Instances live in an explicit process-wide registry rather than on a class
attribute. The first acquisition of a type constructs it; every later
acquisition returns that same object, so mutations through any reference are
visible through all of them.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Self, TypeVar

from loguru import logger
from pydantic import BaseModel, Field, model_validator

T = TypeVar("T")

DEFAULT_TOPPINGS = ("cheese", "lettuce", "tomato", "beef patty")


class SharedInstanceRegistry:
    """Holds at most one instance per registered type.

    Lifecycle: each instance is created lazily on first acquire() and kept
    until the process exits (or reset() is called).
    """

    def __init__(self) -> None:
        self._instances: dict[type, object] = {}
        self._constructing: set[tuple[type, int]] = set()
        self._lock = threading.RLock()

    @contextmanager
    def constructing(self, cls: type) -> Iterator[None]:
        """Mark ``cls`` as being built by this registry on the current thread."""
        with self._lock:
            key = (cls, threading.get_ident())
            self._constructing.add(key)
            try:
                yield
            finally:
                self._constructing.discard(key)

    def is_constructing(self, cls: type) -> bool:
        return (cls, threading.get_ident()) in self._constructing

    def acquire(self, cls: type[T]) -> T:
        """Return the shared instance of ``cls``, creating it on first use."""
        with self._lock:
            instance = self._instances.get(cls)
            if instance is None:
                with self.constructing(cls):
                    instance = cls()
                self._instances[cls] = instance
                logger.debug("Created shared {} instance", cls.__name__)
            else:
                logger.trace("Reusing shared {} instance", cls.__name__)
            return instance  # type: ignore[return-value]  # keyed by cls

    def reset(self) -> None:
        """Forget every shared instance. The next acquire() rebuilds it."""
        with self._lock:
            self._instances.clear()


registry = SharedInstanceRegistry()


class Cheeseburger(BaseModel):
    """The shared burger. Only the registry may build one; use acquire_cheeseburger()."""

    toppings: list[str] = Field(default_factory=lambda: list(DEFAULT_TOPPINGS))

    @model_validator(mode="before")
    @classmethod
    def built_by_registry(cls, data: Any) -> Any:
        if not registry.is_constructing(cls):
            raise TypeError(
                f"{cls.__name__} is shared; call acquire_cheeseburger() instead"
            )
        return data

    # Copies alias the shared instance
    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> Self:
        return self

    def add_topping(self, topping: str) -> None:
        self.toppings.append(topping)

    def describe(self) -> str:
        return f"A cheeseburger with toppings: {', '.join(self.toppings)}"


def acquire_cheeseburger() -> Cheeseburger:
    """Return the process-wide Cheeseburger (built with the default toppings once)."""
    return registry.acquire(Cheeseburger)
