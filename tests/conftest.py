"""
Pytest fixtures: drafts, entries and a deterministic id factory.
The debug log is pointed at a temp file before any chef_menu module loads.
"""
import itertools
import os
import tempfile

os.environ.setdefault("CHEF_MENU_DEBUG_LOG", os.path.join(tempfile.gettempdir(), "chef-menu-test-debug.log"))

import pytest

from chef_menu.form import DraftForm
from chef_menu.models import Course, MenuEntry


@pytest.fixture
def id_factory():
    """Hands out entry-1, entry-2, ... in order."""
    counter = itertools.count(1)
    return lambda: f"entry-{next(counter)}"


@pytest.fixture
def make_entry():
    def _make(entry_id: str, name: str = "Dish", course: Course = Course.MAIN, price: float = 10.0):
        return MenuEntry(id=entry_id, name=name, description="", course=course, price=price)

    return _make


@pytest.fixture
def lemon_chicken_draft():
    return DraftForm(name="Lemon Chicken", description="Zesty", course=Course.MAIN, price_text="49.99")
