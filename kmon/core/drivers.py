"""Per-kind device drivers.

A driver knows which marker attribute identifies its kind of device, which
attributes to read from the device directory, and how to turn them into a
`MetricSummary`. Drivers are stateless; every call reads live values.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from kmon.core.model import MetricLine, MetricSummary, ParseResult, Severity
from kmon.sources.base import AttributeSource

HOT_THRESHOLD_MILLI_C = 60000
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_int(raw: str) -> ParseResult:
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        return ParseResult(error=f"not an integer: {raw!r}")
    return ParseResult(value=int(text))


def format_millidegrees(value: int) -> str:
    celsius = (Decimal(value) / 1000).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{celsius} °C"


class Driver(ABC):
    name: str = ""
    marker: str = ""

    def detect(self, path: str | Path, source: AttributeSource) -> bool:
        return source.exists(Path(path) / self.marker)

    @abstractmethod
    def summarize(self, path: str | Path, source: AttributeSource) -> MetricSummary:
        """Read the device's attributes and build its summary."""

    def _summary(self, lines: list[MetricLine]) -> MetricSummary:
        return MetricSummary(lines=tuple(lines), driver=self.name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ThermalDriver(Driver):
    name = "thermal"
    marker = "temp"

    def summarize(self, path: str | Path, source: AttributeSource) -> MetricSummary:
        device = Path(path)
        parsed = parse_int(source.read_line(device / "temp"))
        if not parsed.ok:
            return self._summary([MetricLine("Parse Error", severity=Severity.ALERT)])

        severity = Severity.ALERT if parsed.value > HOT_THRESHOLD_MILLI_C else Severity.NORMAL
        lines = [MetricLine("Temperature", format_millidegrees(parsed.value), severity)]

        sensor_type = source.read_line(device / "type")
        if sensor_type:
            lines.append(MetricLine("Sensor Type", sensor_type))
        return self._summary(lines)


class NetworkDriver(Driver):
    name = "network"
    marker = "operstate"

    def summarize(self, path: str | Path, source: AttributeSource) -> MetricSummary:
        device = Path(path)
        state = source.read_line(device / "operstate") or "down"
        severity = Severity.HEALTHY if state == "up" else Severity.UNHEALTHY
        lines = [MetricLine("Link State", state, severity)]

        mac = source.read_line(device / "address")
        if mac:
            lines.append(MetricLine("MAC", mac))

        rx_bytes = source.read_line(device / "statistics" / "rx_bytes")
        if rx_bytes:
            lines.append(MetricLine("Data Rx", f"{rx_bytes} bytes"))
        return self._summary(lines)


class PowerDriver(Driver):
    name = "power"
    marker = "capacity"

    def summarize(self, path: str | Path, source: AttributeSource) -> MetricSummary:
        device = Path(path)
        capacity = source.read_line(device / "capacity")
        status = source.read_line(device / "status")
        return self._summary(
            [
                MetricLine("Battery Level", f"{capacity}%"),
                MetricLine("Status", status),
            ]
        )


# Checked top to bottom; the first driver whose marker exists claims the device.
DEFAULT_DRIVERS: tuple[Driver, ...] = (
    ThermalDriver(),
    NetworkDriver(),
    PowerDriver(),
)
