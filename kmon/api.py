"""Public entry points for reading kernel device metrics from other programs.

Status bars and scripts should go through `Client` and the names re-exported
here. The layout of `kmon.core` and `kmon.sources` may change between
releases.
"""

from __future__ import annotations

from dataclasses import dataclass

from kmon.core.config import load_settings
from kmon.core.drivers import DEFAULT_DRIVERS, Driver, NetworkDriver, PowerDriver, ThermalDriver
from kmon.core.errors import CategoryLookupError, DeviceLookupError, KmonError
from kmon.core.model import (
    Category,
    DashboardFrame,
    DeviceHandle,
    MetricLine,
    MetricSummary,
    Severity,
)
from kmon.core.service import DashboardController, MonitorService
from kmon.sources.base import AttributeSource

__all__ = [
    "KmonError",
    "CategoryLookupError",
    "DeviceLookupError",
    "Category",
    "DashboardFrame",
    "DeviceHandle",
    "MetricLine",
    "MetricSummary",
    "Severity",
    "Driver",
    "ThermalDriver",
    "NetworkDriver",
    "PowerDriver",
    "DashboardController",
    "DeviceReport",
    "Client",
]


@dataclass(frozen=True)
class DeviceReport:
    """Summary of one device together with the handle it was read from."""

    category: Category
    handle: DeviceHandle
    summary: MetricSummary


class Client:
    """Public client for reading kernel device metrics.

    A `Client` wraps category lookup, device enumeration, and driver
    classification behind a stable API intended for third-party tools
    (status bars, scripts, other TUIs). Every call reads live values.
    """

    def __init__(
        self,
        *,
        sysfs_root: str | None = None,
        source: AttributeSource | None = None,
    ) -> None:
        self._service = MonitorService(
            settings=load_settings(sysfs_root=sysfs_root),
            source=source,
            drivers=DEFAULT_DRIVERS,
        )

    def list_categories(self) -> list[Category]:
        return self._service.list_categories()

    def list_devices(self, category: str) -> list[str]:
        return self._service.list_devices(category)

    def classify(self, category: str, device: str) -> str | None:
        handle = self._service.resolve_handle(category, device)
        driver = self._service.classify(handle)
        return driver.name if driver else None

    def probe(self, category: str, device: str) -> DeviceReport:
        handle, summary = self._service.probe(category, device)
        return DeviceReport(
            category=self._service.category(category),
            handle=handle,
            summary=summary,
        )

    def dashboard(self) -> DashboardController:
        return DashboardController(self._service)
