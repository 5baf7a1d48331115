"""Debug trace log written to a local file."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path

from chef_menu.config import DEBUG_LOG_ENV, DEBUG_LOG_PATH

_LOGGER_ROOT = "chef_menu"


class _UtcLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, timezone.utc).isoformat()
        return f"{ts} {record.name} {record.getMessage()}"


def resolve_debug_log_path() -> Path:
    """Return the debug log file, honouring CHEF_MENU_DEBUG_LOG when set."""
    env_override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    return Path(env_override or DEBUG_LOG_PATH)


def _install_handler(root: logging.Logger) -> None:
    log_path = resolve_debug_log_path()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
    except OSError:
        # An unwritable log location must not stop the app.
        handler = logging.NullHandler()
    handler.setFormatter(_UtcLineFormatter())
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the chef_menu tree, attaching the file handler once."""
    root = logging.getLogger(_LOGGER_ROOT)
    if not root.handlers:
        _install_handler(root)
    if name == _LOGGER_ROOT or name.startswith(f"{_LOGGER_ROOT}."):
        return logging.getLogger(name)
    return root.getChild(name)
