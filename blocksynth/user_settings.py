"""Persistent per-user settings kept in an XML properties file."""

from __future__ import annotations

import os
import re
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, ClassVar

APPLICATION_NAME = "blocks"
FILENAME_SUFFIX = ".settings"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def default_settings_path() -> Path:
    """Where the settings file lives on this platform."""
    filename = APPLICATION_NAME + FILENAME_SUFFIX
    if sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    elif sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", Path.home()))
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / APPLICATION_NAME / filename


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class UserSettings:
    """Key-value settings saved to disk after every change."""

    _shared: ClassVar[UserSettings | None] = None

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_settings_path()
        self._values = self._read()

    @classmethod
    def shared(cls) -> UserSettings:
        """Return the process-wide settings."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` as text under ``key`` and save the file."""
        self._values[key] = _to_text(value)
        self._save()

    def get_int(self, key: str, default: int) -> int:
        """The leading integer of the stored text, 0 if it has none, else ``default``."""
        text = self._values.get(key)
        if text is None:
            return default
        match = _LEADING_INT.match(text)
        return int(match.group(1)) if match else 0

    def get_string(self, key: str, default: str) -> str:
        return self._values.get(key, default)

    def _read(self) -> dict[str, str]:
        try:
            root = ET.parse(self.path).getroot()
        except (OSError, ET.ParseError):
            return {}
        return {
            element.get("name", ""): element.get("val", "")
            for element in root.iter("VALUE")
            if element.get("name")
        }

    def _save(self) -> None:
        root = ET.Element("PROPERTIES")
        for key, value in self._values.items():
            ET.SubElement(root, "VALUE", name=key, val=value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        ET.ElementTree(root).write(self.path, encoding="UTF-8", xml_declaration=True)