"""Draft form state and the commit step that turns a draft into a menu entry."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable
from uuid import uuid4

from chef_menu.errors import EmptyNameError
from chef_menu.models import Course, MenuEntry
from chef_menu.pricing import parse_price

DEFAULT_COURSE = Course.MAIN


class DraftField(str, Enum):
    NAME = "name"
    DESCRIPTION = "description"
    COURSE = "course"
    PRICE_TEXT = "price_text"


@dataclass(frozen=True)
class DraftForm:
    """Uncommitted form values, exactly as typed."""

    name: str = ""
    description: str = ""
    course: Course = DEFAULT_COURSE
    price_text: str = ""


def new_entry_id() -> str:
    """Return a fresh opaque entry id."""
    return uuid4().hex


def set_field(draft: DraftForm, field: DraftField | str, value: str | Course) -> DraftForm:
    """Return a copy of ``draft`` with one field replaced. Text is not validated here."""
    field = DraftField(field)
    if field is DraftField.COURSE:
        if not isinstance(value, Course):
            raise TypeError(f"course must be a Course, got {value!r}; use Course.parse for text")
    elif not isinstance(value, str):
        raise TypeError(f"{field.value} must be text, got {value!r}")
    return replace(draft, **{field.value: value})


def reset() -> DraftForm:
    """Return an empty draft with the default course."""
    return DraftForm()


def commit(draft: DraftForm, id_factory: Callable[[], str] = new_entry_id) -> MenuEntry:
    """
    Validate ``draft`` and build the menu entry it describes.

    The name is checked before the price and only the first failure is raised
    (EmptyNameError or InvalidPriceError). Neither the draft nor any store is
    modified.
    """
    name = draft.name.strip()
    if not name:
        raise EmptyNameError()

    price = parse_price(draft.price_text)
    description = draft.description.strip()

    return MenuEntry(
        id=id_factory(),
        name=name,
        description=description,
        course=draft.course,
        price=price,
    )
