"""Builder pattern: assemble an order step by step, then freeze it.

Separates the construction of an order from its representation, so the same
chained calls can produce orders with any subset of courses.
"""

from typing import Self

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .enums import Course


class OrderSnapshot(BaseModel):
    """Finalized order. Only the courses set on the builder are present."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    drink: str | None = Field(default=None, alias=Course.DRINK.value)
    main_course: str | None = Field(default=None, alias=Course.MAIN_COURSE.value)
    dessert: str | None = Field(default=None, alias=Course.DESSERT.value)

    def as_dict(self) -> dict[str, str | None]:
        """Return the set courses keyed by their wire names (e.g. ``mainCourse``)."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class OrderBuilder:
    """Accumulates courses through chained calls until build() is called."""

    def __init__(self) -> None:
        self._courses: dict[str, str] = {}

    def _set(self, course: Course, value: str) -> Self:
        self._courses[course.value] = value
        return self

    def add_drink(self, drink: str) -> Self:
        return self._set(Course.DRINK, drink)

    def add_main_course(self, main_course: str) -> Self:
        return self._set(Course.MAIN_COURSE, main_course)

    def add_dessert(self, dessert: str) -> Self:
        return self._set(Course.DESSERT, dessert)

    def build(self) -> OrderSnapshot:
        """Freeze the courses set so far into an OrderSnapshot.

        The snapshot copies the builder's state; later builder calls do not
        affect it.
        """
        snapshot = OrderSnapshot.model_validate(dict(self._courses))
        logger.debug("Built order snapshot: {}", snapshot.as_dict())
        return snapshot
