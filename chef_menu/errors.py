"""Errors raised by the menu core."""

from __future__ import annotations

from chef_menu.constant import MESSAGE_EMPTY_NAME, MESSAGE_INVALID_PRICE


class ValidationError(ValueError):
    """A draft could not be committed. ``message`` is shown to the user."""

    message = "Invalid menu entry."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class EmptyNameError(ValidationError):
    """The dish name is blank once trimmed."""

    message = MESSAGE_EMPTY_NAME


class InvalidPriceError(ValidationError):
    """The price text is not a plain non-negative number."""

    message = MESSAGE_INVALID_PRICE


class UnknownCourseError(ValueError):
    """Text that names none of the menu courses."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unknown course: {text!r}")


class DuplicateEntryError(ValueError):
    """An entry id that the store already holds."""

    def __init__(self, entry_id: str) -> None:
        self.entry_id = entry_id
        super().__init__(f"Menu already holds an entry with id {entry_id!r}")
