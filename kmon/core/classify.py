"""Device-to-driver classification and summary dispatch."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from kmon.core.drivers import DEFAULT_DRIVERS, Driver
from kmon.core.model import MetricLine, MetricSummary, Severity
from kmon.sources.base import AttributeSource
from kmon.sources.sysfs import SysfsSource

NO_METRICS_TEXT = "No standard metrics found."
LOGGER = logging.getLogger(__name__)


def placeholder_summary() -> MetricSummary:
    return MetricSummary(lines=(MetricLine(NO_METRICS_TEXT, severity=Severity.MUTED),))


def classify(
    path: str | Path,
    *,
    source: AttributeSource | None = None,
    drivers: Sequence[Driver] = DEFAULT_DRIVERS,
) -> Driver | None:
    source = source or SysfsSource()
    for driver in drivers:
        if driver.detect(path, source):
            LOGGER.debug("%s claimed by %s driver", path, driver.name)
            return driver
    LOGGER.debug("No driver claimed %s", path)
    return None


def summarize(
    driver: Driver | None,
    path: str | Path,
    *,
    source: AttributeSource | None = None,
) -> MetricSummary:
    if driver is None:
        return placeholder_summary()
    return driver.summarize(path, source or SysfsSource())
