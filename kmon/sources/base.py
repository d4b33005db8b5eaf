"""Attribute source interfaces."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class AttributeSource(Protocol):
    def exists(self, path: str | Path) -> bool:
        """Return whether an attribute or directory exists at path."""

    def read_line(self, path: str | Path) -> str:
        """Return the first line of an attribute, or an empty string if it cannot be read."""

    def list_children(self, path: str | Path) -> list[str]:
        """Return the names of the immediate children of a directory."""
