"""Confirmation gate for destructive menu actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from chef_menu.constant import (
    CLEAR_CONFIRM_LABEL,
    CLEAR_PROMPT,
    CLEAR_TITLE,
    REMOVE_CONFIRM_LABEL,
    REMOVE_PROMPT,
    REMOVE_TITLE,
)
from chef_menu.models import MenuEntry


class Decision(Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class ConfirmAction(Enum):
    REMOVE = "remove"
    CLEAR = "clear"


@dataclass(frozen=True)
class ConfirmRequest:
    """What the user is asked before a destructive action runs."""

    action: ConfirmAction
    title: str
    prompt: str
    confirm_label: str
    entry_id: str | None = None


Decide = Callable[[ConfirmRequest], Decision]


def removal_request(entry: MenuEntry) -> ConfirmRequest:
    return ConfirmRequest(
        action=ConfirmAction.REMOVE,
        title=REMOVE_TITLE,
        prompt=REMOVE_PROMPT.format(name=entry.name),
        confirm_label=REMOVE_CONFIRM_LABEL,
        entry_id=entry.id,
    )


def clear_request() -> ConfirmRequest:
    return ConfirmRequest(
        action=ConfirmAction.CLEAR,
        title=CLEAR_TITLE,
        prompt=CLEAR_PROMPT,
        confirm_label=CLEAR_CONFIRM_LABEL,
    )
