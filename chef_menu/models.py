"""Domain models for chef-menu."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from chef_menu.errors import UnknownCourseError


class Course(str, Enum):
    """Where a dish sits in the meal."""

    STARTER = "Starter"
    MAIN = "Main"
    DESSERT = "Dessert"
    SIDE = "Side"
    DRINK = "Drink"

    @classmethod
    def parse(cls, text: str) -> Course:
        """Resolve free text (case-insensitive) to a course."""
        wanted = text.strip().lower()
        for course in cls:
            if course.value.lower() == wanted:
                return course
        raise UnknownCourseError(text)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MenuEntry:
    """A committed menu item."""

    id: str
    name: str
    description: str
    course: Course
    price: float

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("MenuEntry.name must not be empty")
        if not isinstance(self.course, Course):
            raise TypeError(f"MenuEntry.course must be a Course, got {self.course!r}")
        if not math.isfinite(self.price) or self.price < 0:
            raise ValueError(f"MenuEntry.price must be a finite non-negative number, got {self.price!r}")
