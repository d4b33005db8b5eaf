"""Fixed category table and device enumeration."""

from __future__ import annotations

import logging
import os

from kmon.core.errors import CategoryLookupError
from kmon.core.model import Category
from kmon.sources.base import AttributeSource
from kmon.sources.sysfs import SysfsSource

DEFAULT_SYSFS_ROOT = "/sys"
NOT_FOUND_SENTINEL = "(Category not found on this system)"
LOGGER = logging.getLogger(__name__)

_CATEGORY_TABLE: tuple[tuple[str, str, str], ...] = (
    ("thermal", "🔥 Thermals", "class/thermal"),
    ("network", "🌐 Network", "class/net"),
    ("power", "⚡ Power", "class/power_supply"),
    ("leds", "💡 LEDs", "class/leds"),
)


def build_categories(sysfs_root: str = DEFAULT_SYSFS_ROOT) -> tuple[Category, ...]:
    return tuple(
        Category(key=key, label=label, root_path=os.path.join(sysfs_root, subpath))
        for key, label, subpath in _CATEGORY_TABLE
    )


CATEGORIES = build_categories()


def find_category(name: str, categories: tuple[Category, ...] = CATEGORIES) -> Category:
    lowered = name.strip().lower()
    for category in categories:
        if lowered in (category.key, category.label.lower()):
            return category
    known = ", ".join(c.key for c in categories)
    raise CategoryLookupError(f"Unknown category '{name}'. Known categories: {known}")


def is_sentinel(device_name: str) -> bool:
    return device_name == NOT_FOUND_SENTINEL


def list_devices(root_path: str, *, source: AttributeSource | None = None) -> list[str]:
    source = source or SysfsSource()
    if not source.exists(root_path):
        LOGGER.debug("Category root %s does not exist", root_path)
        return [NOT_FOUND_SENTINEL]
    devices = sorted(source.list_children(root_path))
    LOGGER.debug("Found %d devices under %s", len(devices), root_path)
    return devices
