import pytest

from chef_menu.errors import UnknownCourseError
from chef_menu.models import Course, MenuEntry


def test_courses_are_closed_set():
    assert [course.value for course in Course] == ["Starter", "Main", "Dessert", "Side", "Drink"]


@pytest.mark.parametrize("text, expected", [("Main", Course.MAIN), ("dessert", Course.DESSERT), (" DRINK ", Course.DRINK)])
def test_course_parse(text, expected):
    assert Course.parse(text) is expected


def test_course_parse_unknown():
    with pytest.raises(UnknownCourseError):
        Course.parse("Brunch")


def test_entry_is_immutable(make_entry):
    entry = make_entry("a")
    with pytest.raises(AttributeError):
        entry.price = 1.0


@pytest.mark.parametrize("price", [-1.0, float("nan"), float("inf")])
def test_entry_rejects_bad_price(price):
    with pytest.raises(ValueError):
        MenuEntry(id="a", name="Soup", description="", course=Course.STARTER, price=price)


def test_entry_rejects_blank_name():
    with pytest.raises(ValueError):
        MenuEntry(id="a", name="   ", description="", course=Course.STARTER, price=1.0)
