"""Yes/no confirmation modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from chef_menu.confirm import ConfirmRequest, Decision
from chef_menu.constant import CANCEL_LABEL


class ConfirmModal(ModalScreen[Decision]):
    """Ask the user to confirm a destructive action."""

    CSS = """
    ConfirmModal {
        align: center middle;
        background: $background 60%;
    }

    #confirm-dialog {
        width: 56;
        height: auto;
        border: round $error;
        background: $panel;
        padding: 1 2;
    }

    #confirm-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #confirm-prompt {
        color: white;
        margin-bottom: 1;
    }

    #confirm-help {
        color: #dddddd;
    }
    """

    def __init__(self, request: ConfirmRequest) -> None:
        super().__init__()
        self.request = request

    def compose(self) -> ComposeResult:
        with Container(id="confirm-dialog"):
            yield Static(self.request.title, id="confirm-title")
            yield Static(self.request.prompt, id="confirm-prompt")
            yield Static(self._help_text(), id="confirm-help")

    def on_key(self, event: Key) -> None:
        if event.key in {"y", "enter"}:
            self.dismiss(Decision.CONFIRMED)
            event.stop()
            return

        if event.key in {"n", "escape", "q", "ctrl+c"}:
            self.dismiss(Decision.CANCELLED)
            event.stop()

    def _help_text(self) -> Text:
        text = Text()
        text.append("y/Enter", style="bold #ffb3b3")
        text.append(f" {self.request.confirm_label}   ")
        text.append("n/Esc", style="bold")
        text.append(f" {CANCEL_LABEL}")
        return text
