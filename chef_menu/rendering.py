"""Rendering helpers for menu rows."""

from __future__ import annotations

from rich.text import Text

from chef_menu.constant import COURSE_BADGE_STYLES
from chef_menu.models import Course, MenuEntry
from chef_menu.pricing import format_price


def badge_style(course: Course) -> str:
    """Return a consistent badge style for a course tag."""
    return COURSE_BADGE_STYLES.get(course.value, "bold")


def format_entry_label(entry: MenuEntry) -> Text:
    """Render the dish name line."""
    return Text(entry.name, style="bold")


def format_entry_meta(entry: MenuEntry) -> Text:
    """Render ``<course badge> • R0.00`` for a menu row."""
    text = Text()
    text.append(f" {entry.course.value} ", style=badge_style(entry.course))
    text.append(f" • {format_price(entry.price)}")
    return text


def format_entry(entry: MenuEntry, indent: str = "") -> Text:
    """Render a full menu row: name, course and price, then the description if any."""
    text = Text()
    text.append_text(format_entry_label(entry))
    text.append(f"\n{indent}")
    text.append_text(format_entry_meta(entry))
    if entry.description:
        text.append(f"\n{indent}")
        text.append(entry.description.replace("\n", f"\n{indent}"), style="dim")
    return text
