"""Price text parsing and display."""

from __future__ import annotations

import math
import re

from chef_menu.config import CURRENCY_PREFIX, PRICE_DECIMALS
from chef_menu.errors import InvalidPriceError

# ASCII decimal notation only: no currency symbols, no digit grouping.
_PRICE_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_price(text: str) -> float:
    """
    Parse price text typed by the user into a non-negative float.

    Surrounding whitespace is ignored. Raises InvalidPriceError for empty or
    malformed text, non-finite values and negative values.
    """
    raw = text.strip()
    if not _PRICE_PATTERN.fullmatch(raw):
        raise InvalidPriceError()

    value = float(raw)
    if not math.isfinite(value) or value < 0:
        raise InvalidPriceError()
    # Collapse -0.0.
    return value + 0.0


def format_price(value: float) -> str:
    """Render a price the way the menu list shows it, e.g. R49.99."""
    return f"{CURRENCY_PREFIX}{value:.{PRICE_DECIMALS}f}"
