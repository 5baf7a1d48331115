"""The menu session: one draft, one store, and the transitions between them."""

from __future__ import annotations

from chef_menu import form
from chef_menu.confirm import ConfirmAction, ConfirmRequest, Decide, Decision, clear_request, removal_request
from chef_menu.debug_log import get_logger
from chef_menu.errors import ValidationError
from chef_menu.form import DraftField, DraftForm
from chef_menu.models import Course, MenuEntry
from chef_menu.store import MenuStore

logger = get_logger(__name__)


def item_count_label(count: int) -> str:
    return f"{count} item{'' if count == 1 else 's'}"


class MenuSession:
    """
    Holds the current draft and menu store for one screen.

    This is the only writer of either value. Both are immutable and get
    replaced on every transition, so readers can hold on to a snapshot.
    """

    def __init__(self, store: MenuStore | None = None) -> None:
        self.draft: DraftForm = form.reset()
        self.store: MenuStore = store if store is not None else MenuStore()

    @property
    def entries(self) -> tuple[MenuEntry, ...]:
        return self.store.entries

    def count(self) -> int:
        return self.store.count()

    def item_count_label(self) -> str:
        return item_count_label(self.store.count())

    def set_field(self, field: DraftField | str, value: str | Course) -> None:
        self.draft = form.set_field(self.draft, field, value)

    def reset_draft(self) -> None:
        self.draft = form.reset()

    def submit(self) -> MenuEntry:
        """
        Commit the draft, add the entry, then reset the draft.

        On ValidationError nothing changes and the error propagates.
        """
        try:
            entry = form.commit(self.draft)
        except ValidationError as exc:
            logger.debug("submit_rejected reason=%s", type(exc).__name__)
            raise

        self.store = self.store.add(entry)
        self.reset_draft()
        logger.debug("submit_added id=%s course=%s rows=%d", entry.id, entry.course.value, self.store.count())
        return entry

    def removal_request(self, entry_id: str) -> ConfirmRequest | None:
        """Build the confirmation prompt for removing ``entry_id``, or None if it is gone."""
        entry = self.store.find(entry_id)
        if entry is None:
            return None
        return removal_request(entry)

    def clear_request(self) -> ConfirmRequest:
        return clear_request()

    def resolve(self, request: ConfirmRequest, decision: Decision) -> bool:
        """Apply ``request`` if the user confirmed it. Returns whether the store changed."""
        if decision is not Decision.CONFIRMED:
            logger.debug("confirm_cancelled action=%s", request.action.value)
            return False

        before = self.store
        if request.action is ConfirmAction.REMOVE:
            if request.entry_id is not None:
                self.store = self.store.remove_by_id(request.entry_id)
        elif request.action is ConfirmAction.CLEAR:
            self.store = self.store.clear()

        changed = self.store is not before
        logger.debug(
            "confirm_applied action=%s changed=%s rows=%d", request.action.value, changed, self.store.count()
        )
        return changed

    def confirm(self, request: ConfirmRequest, decide: Decide) -> bool:
        """Ask ``decide`` about ``request`` and apply it on confirmation."""
        return self.resolve(request, decide(request))
