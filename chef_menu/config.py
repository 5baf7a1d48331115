"""Runtime configuration defaults for logging and display."""

from __future__ import annotations

DEBUG_LOG_PATH = "/tmp/chef-menu-debug.log"
DEBUG_LOG_ENV = "CHEF_MENU_DEBUG_LOG"

# Prefix used when showing prices (South African rand).
CURRENCY_PREFIX = "R"
PRICE_DECIMALS = 2
