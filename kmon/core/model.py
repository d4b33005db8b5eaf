"""Core data models used across the engine, service, and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Severity(str, Enum):
    NORMAL = "normal"
    ALERT = "alert"
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    MUTED = "muted"


@dataclass(frozen=True)
class Category:
    key: str
    label: str
    root_path: str


@dataclass(frozen=True)
class DeviceHandle:
    category_root: str
    device_name: str

    @property
    def path(self) -> Path:
        return Path(self.category_root) / self.device_name


@dataclass(frozen=True)
class MetricLine:
    label: str
    value: str | None = None
    severity: Severity | None = None

    @property
    def text(self) -> str:
        if self.value is None:
            return self.label
        return f"{self.label}: {self.value}"


@dataclass(frozen=True)
class MetricSummary:
    lines: tuple[MetricLine, ...]
    driver: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.driver is None

    def texts(self) -> list[str]:
        return [line.text for line in self.lines]


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a raw attribute value."""

    value: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DashboardFrame:
    """Everything one dashboard redraw needs, computed from live state."""

    categories: tuple[Category, ...]
    devices: tuple[str, ...]
    category_index: int
    device_index: int
    summary: MetricSummary
    path_text: str
