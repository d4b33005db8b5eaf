"""Service layer used by the CLI, the dashboard, and the public API."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from kmon.core.classify import classify, placeholder_summary, summarize
from kmon.core.config import Settings, load_settings
from kmon.core.drivers import DEFAULT_DRIVERS, Driver
from kmon.core.errors import DeviceLookupError
from kmon.core.model import Category, DashboardFrame, DeviceHandle, MetricSummary
from kmon.core.registry import build_categories, find_category, is_sentinel, list_devices
from kmon.sources.base import AttributeSource
from kmon.sources.sysfs import SysfsSource

LOGGER = logging.getLogger(__name__)


class MonitorService:
    def __init__(
        self,
        *,
        settings: Settings | None = None,
        source: AttributeSource | None = None,
        drivers: Sequence[Driver] = DEFAULT_DRIVERS,
    ) -> None:
        self.settings = settings or load_settings()
        self.source = source or SysfsSource()
        self.drivers = tuple(drivers)
        self.categories = build_categories(self.settings.sysfs_root)

    def list_categories(self) -> list[Category]:
        return list(self.categories)

    def category(self, name: str) -> Category:
        return find_category(name, self.categories)

    def list_devices(self, category: Category | str) -> list[str]:
        if isinstance(category, str):
            category = self.category(category)
        return list_devices(category.root_path, source=self.source)

    def classify(self, handle: DeviceHandle) -> Driver | None:
        if is_sentinel(handle.device_name):
            return None
        return classify(handle.path, source=self.source, drivers=self.drivers)

    def summarize(self, handle: DeviceHandle | None) -> MetricSummary:
        if handle is None or is_sentinel(handle.device_name):
            return placeholder_summary()
        driver = self.classify(handle)
        return summarize(driver, handle.path, source=self.source)

    def resolve_handle(self, category: str, device: str) -> DeviceHandle:
        resolved = self.category(category)
        devices = self.list_devices(resolved)
        if device not in devices or is_sentinel(device):
            raise DeviceLookupError(
                f"No device '{device}' under {resolved.root_path}. "
                f"Use 'kmon devices {resolved.key}' to list devices."
            )
        return DeviceHandle(category_root=resolved.root_path, device_name=device)

    def probe(self, category: str, device: str) -> tuple[DeviceHandle, MetricSummary]:
        handle = self.resolve_handle(category, device)
        return handle, self.summarize(handle)


class DashboardController:
    """Selection state for the dashboard.

    The device list is re-enumerated only when the selected category differs
    from the one seen on the previous `sync()`. Everything else, including the
    summary, is recomputed from the current indices on every `render()`.
    """

    def __init__(self, service: MonitorService) -> None:
        self.service = service
        self.category_index = 0
        self.device_index = 0
        self.devices: list[str] = []
        self.last_category_index: int | None = None

    @property
    def categories(self) -> tuple[Category, ...]:
        return self.service.categories

    @property
    def current_category(self) -> Category:
        return self.categories[self.category_index]

    def sync(self) -> bool:
        """Refresh the device list if the category changed. Returns whether it did."""
        if self.last_category_index == self.category_index:
            return False
        self.devices = self.service.list_devices(self.current_category)
        self.device_index = 0
        self.last_category_index = self.category_index
        LOGGER.debug(
            "Category changed to %s; %d devices", self.current_category.key, len(self.devices)
        )
        return True

    def select_category(self, index: int) -> None:
        self.category_index = _clamp(index, len(self.categories))

    def select_device(self, index: int) -> None:
        self.device_index = _clamp(index, len(self.devices))

    def move_category(self, delta: int) -> None:
        self.select_category(self.category_index + delta)

    def move_device(self, delta: int) -> None:
        self.select_device(self.device_index + delta)

    def current_device(self) -> str:
        if not self.devices:
            return ""
        return self.devices[self.device_index]

    def current_handle(self) -> DeviceHandle | None:
        device = self.current_device()
        if not device or is_sentinel(device):
            return None
        return DeviceHandle(category_root=self.current_category.root_path, device_name=device)

    def render(self) -> DashboardFrame:
        self.sync()
        root = self.current_category.root_path
        device = self.current_device()
        return DashboardFrame(
            categories=self.categories,
            devices=tuple(self.devices),
            category_index=self.category_index,
            device_index=self.device_index,
            summary=self.service.summarize(self.current_handle()),
            path_text=os.path.join(root, device) if device else root,
        )


def _clamp(index: int, size: int) -> int:
    if size <= 0:
        return 0
    return max(0, min(index, size - 1))
