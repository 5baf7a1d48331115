"""Editable static text and style configuration."""

from __future__ import annotations

APP_TITLE = "Kiss the Chef"
APP_SUB_TITLE = "Create and manage the menu"

FIELD_LABELS: dict[str, str] = {
    "name": "Dish name",
    "description": "Description",
    "course": "Course",
    "price_text": "Price (R)",
}

FIELD_PLACEHOLDERS: dict[str, str] = {
    "name": "e.g. Lemon Chicken",
    "price_text": "e.g. 49.99",
}

MESSAGE_EMPTY_NAME = "Please enter a dish name."
MESSAGE_INVALID_PRICE = "Please enter a valid non-negative price."
VALIDATION_TITLE = "Validation"

MENU_TITLE = "Current Menu"
EMPTY_MENU_TEXT = "No menu items yet. Add one above."

REMOVE_TITLE = "Remove item"
REMOVE_PROMPT = 'Remove "{name}"?'
REMOVE_CONFIRM_LABEL = "Remove"

CLEAR_TITLE = "Clear menu"
CLEAR_PROMPT = "Are you sure you want to remove all menu items?"
CLEAR_CONFIRM_LABEL = "Yes"

CANCEL_LABEL = "Cancel"

# Keyed by Course value.
COURSE_BADGE_STYLES: dict[str, str] = {
    "Starter": "bold #0b1f0f on #5fbf72",
    "Main": "bold #ffffff on #b23a48",
    "Dessert": "bold #ffffff on #8e4fb5",
    "Side": "bold #ffffff on #2f6db5",
    "Drink": "bold #1f1600 on #e0b341",
}
