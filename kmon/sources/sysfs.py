"""Attribute source backed by the local sysfs mount."""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOGGER = logging.getLogger(__name__)


class SysfsSource:
    def exists(self, path: str | Path) -> bool:
        return os.path.exists(path)

    def read_line(self, path: str | Path) -> str:
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                line = handle.readline()
        except OSError as exc:
            LOGGER.debug("Could not read attribute %s: %s", path, exc)
            return ""
        return line.rstrip("\r\n")

    def list_children(self, path: str | Path) -> list[str]:
        try:
            return os.listdir(path)
        except OSError as exc:
            LOGGER.debug("Could not list %s: %s", path, exc)
            return []
