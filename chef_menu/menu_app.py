"""Main Textual app class."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Button, Header, Input, Select, Static, TextArea

from chef_menu.confirm import ConfirmRequest, Decision
from chef_menu.confirm_modal import ConfirmModal
from chef_menu.constant import (
    APP_SUB_TITLE,
    APP_TITLE,
    EMPTY_MENU_TEXT,
    FIELD_LABELS,
    FIELD_PLACEHOLDERS,
    MENU_TITLE,
    VALIDATION_TITLE,
)
from chef_menu.debug_log import get_logger
from chef_menu.errors import ValidationError
from chef_menu.form import DraftField
from chef_menu.models import Course, MenuEntry
from chef_menu.rendering import format_entry
from chef_menu.session import MenuSession

logger = get_logger(__name__)

_INPUT_FIELDS: dict[str, DraftField] = {
    "name-input": DraftField.NAME,
    "price-input": DraftField.PRICE_TEXT,
}

# Each menu row takes up to three lines plus a spacer.
_ROW_HEIGHT = 4
# Top and bottom "⋮" overflow markers.
_MARKER_LINES = 2


def rows_that_fit(height: int) -> int:
    """How many menu rows fit in a pane `height` lines tall, keeping room for the markers."""
    if height <= 0:
        return 4
    return max(1, (height - _MARKER_LINES) // _ROW_HEIGHT)


class MenuList(Static, can_focus=True):
    """Focusable menu pane; keys act on the app's selected row."""

    BINDINGS = [
        ("j", "app.move_selection(1)", "Next"),
        ("down", "app.move_selection(1)", "Next"),
        ("k", "app.move_selection(-1)", "Previous"),
        ("up", "app.move_selection(-1)", "Previous"),
        ("d", "app.remove_selected", "Remove"),
        ("delete", "app.remove_selected", "Remove"),
    ]


class MenuApp(App):
    """A Textual app for composing a restaurant menu."""

    TITLE = APP_TITLE
    SUB_TITLE = APP_SUB_TITLE

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #form-pane {
        width: 2fr;
        border: round $primary;
        padding: 0 1;
    }

    #menu-pane {
        width: 3fr;
        border: round $secondary;
        padding: 0 1;
    }

    .field-label {
        margin-top: 1;
        color: $text-muted;
    }

    #buttons-row {
        height: auto;
        margin-top: 1;
    }

    #buttons-row Button {
        width: 1fr;
    }

    #menu-header {
        height: 1;
        margin-bottom: 1;
    }

    #menu-count {
        width: auto;
        color: $text-muted;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #menu-list:focus {
        border: tall $secondary;
    }

    #description-input {
        height: 5;
    }

    #menu-help {
        color: $text-muted;
    }

    .pane-title {
        width: 1fr;
        text-style: bold;
    }
    """

    selected_index = reactive(None)

    BINDINGS = [
        Binding("ctrl+s", "add_dish", "Add Dish", priority=True),
        Binding("ctrl+l", "clear_menu", "Clear Menu", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: MenuSession | None = None) -> None:
        super().__init__()
        self.session = session if session is not None else MenuSession()
        logger.debug("app_init")

    def compose(self) -> ComposeResult:
        draft = self.session.draft
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="form-pane"):
                yield Static(FIELD_LABELS["name"], classes="field-label")
                yield Input(draft.name, placeholder=FIELD_PLACEHOLDERS["name"], id="name-input")
                yield Static(FIELD_LABELS["description"], classes="field-label")
                yield TextArea(draft.description, id="description-input")
                yield Static(FIELD_LABELS["course"], classes="field-label")
                yield Select(
                    [(course.value, course.value) for course in Course],
                    value=draft.course.value,
                    allow_blank=False,
                    id="course-select",
                )
                yield Static(FIELD_LABELS["price_text"], classes="field-label")
                yield Input(draft.price_text, placeholder=FIELD_PLACEHOLDERS["price_text"], id="price-input")
                with Horizontal(id="buttons-row"):
                    yield Button("Add Dish", variant="success", id="add-button")
                    yield Button("Clear Menu", variant="error", id="clear-button")
            with Vertical(id="menu-pane"):
                with Horizontal(id="menu-header"):
                    yield Static(MENU_TITLE, classes="pane-title")
                    yield Static(id="menu-count")
                yield MenuList(EMPTY_MENU_TEXT, id="menu-list")
                yield Static("J/K move, D remove. Ctrl+S add, Ctrl+L clear, Ctrl+Q quit.", id="menu-help")

    def on_mount(self) -> None:
        self.query_one("#name-input", Input).focus()
        self._refresh_menu()
        logger.debug("on_mount")

    def on_input_changed(self, event: Input.Changed) -> None:
        field = _INPUT_FIELDS.get(event.input.id or "")
        if field is None:
            return
        self.session.set_field(field, event.value)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.id != "description-input":
            return
        self.session.set_field(DraftField.DESCRIPTION, event.text_area.text)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id not in _INPUT_FIELDS:
            return
        self.action_add_dish()
        event.stop()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != "course-select" or event.value is Select.BLANK:
            return
        self.session.set_field(DraftField.COURSE, Course.parse(str(event.value)))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-button":
            self.action_add_dish()
        elif event.button.id == "clear-button":
            self.action_clear_menu()
        event.stop()

    def action_add_dish(self) -> None:
        if isinstance(self.screen, ConfirmModal):
            return

        # The text area may hold edits whose Changed message is still queued.
        description = self.query_one("#description-input", TextArea).text
        self.session.set_field(DraftField.DESCRIPTION, description)

        try:
            entry = self.session.submit()
        except ValidationError as exc:
            self.notify(exc.message, title=VALIDATION_TITLE, severity="warning")
            return

        logger.debug("add_dish id=%s name=%r", entry.id, entry.name)
        self.selected_index = 0
        self._sync_form()
        self._refresh_menu()

    def action_clear_menu(self) -> None:
        self._ask(self.session.clear_request())

    def action_remove_selected(self) -> None:
        entry = self._selected_entry()
        if entry is None:
            return
        request = self.session.removal_request(entry.id)
        if request is None:
            return
        self._ask(request)

    def action_move_selection(self, delta: int) -> None:
        entries = self.session.entries
        if not entries:
            return

        if self.selected_index is None:
            self.selected_index = 0 if delta > 0 else len(entries) - 1
        else:
            self.selected_index = (self.selected_index + delta) % len(entries)
        self._refresh_menu()

    def _ask(self, request: ConfirmRequest) -> None:
        if isinstance(self.screen, ConfirmModal):
            return

        logger.debug("confirm_asked action=%s entry_id=%s", request.action.value, request.entry_id)

        def on_decision(decision: Decision | None) -> None:
            if self.session.resolve(request, decision or Decision.CANCELLED):
                self._refresh_menu()

        self.push_screen(ConfirmModal(request), on_decision)

    def _sync_form(self) -> None:
        """Push the session draft back into the form widgets."""
        draft = self.session.draft
        self.query_one("#name-input", Input).value = draft.name
        self.query_one("#description-input", TextArea).text = draft.description
        self.query_one("#price-input", Input).value = draft.price_text
        self.query_one("#course-select", Select).value = draft.course.value
        self.query_one("#name-input", Input).focus()

    def _selected_entry(self) -> MenuEntry | None:
        entries = self.session.entries
        if self.selected_index is None:
            return None
        if not (0 <= self.selected_index < len(entries)):
            return None
        return entries[self.selected_index]

    def _visible_rows(self, widget: Static) -> int:
        return rows_that_fit(widget.size.height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = selected - rows // 2
            start = max(0, start)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_menu(self) -> None:
        try:
            menu_widget = self.query_one("#menu-list", MenuList)
            count_widget = self.query_one("#menu-count", Static)
        except NoMatches:
            return

        entries = self.session.entries
        count_widget.update(self.session.item_count_label())
        if not entries:
            self.selected_index = None
            menu_widget.update(EMPTY_MENU_TEXT)
            return

        if self.selected_index is not None and self.selected_index >= len(entries):
            self.selected_index = len(entries) - 1

        start, end = self._window_bounds(len(entries), self._visible_rows(menu_widget), self.selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_entry(entries[idx], indent="  "))

        if end < len(entries):
            lines.append("\n⋮", style="dim")

        menu_widget.update(lines)
