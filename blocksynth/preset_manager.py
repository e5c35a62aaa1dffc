"""Presets stored as files in a directory."""

from __future__ import annotations

import logging
from pathlib import Path

from blocksynth.preset_coder import decode, encode
from blocksynth.preset_info import PresetInfo

PRESET_EXTENSION = ".blocks"

_log = logging.getLogger(__name__)


def default_presets_directory() -> Path:
    """The directory presets live in unless another is given."""
    return Path.home() / "Music" / "blocks" / "Presets"


class PresetManager:
    """Loads, saves and removes presets kept as ``<name>.blocks`` files."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = Path(directory) if directory is not None else default_presets_directory()
        self.presets: list[PresetInfo] = []
        self.load_presets_directory()

    def _path_for(self, name: str) -> Path:
        return self.directory / f"{name}{PRESET_EXTENSION}"

    def load_presets_directory(self) -> None:
        """Add every readable preset file in the directory to ``presets``.

        Files with another extension, empty files and files that cannot be
        decoded are skipped.
        """
        if not self.directory.is_dir():
            return
        for path in sorted(self.directory.iterdir()):
            if not path.is_file() or path.suffix != PRESET_EXTENSION:
                continue
            try:
                text = path.read_text(encoding="utf-8")
                if not text:
                    continue
                preset = decode(text)
            except (OSError, ValueError) as error:
                _log.debug("error decoding %s: %s", path, error)
                continue
            if preset is not None:
                self.presets.append(preset)

    def save(self, preset: PresetInfo) -> PresetInfo | None:
        """Write ``preset`` to its file, replacing any preset of the same name.

        Returns the preset as read back from what was written.
        """
        self.remove_preset(preset.name)
        text = encode(preset)
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path_for(preset.name).write_text(text, encoding="utf-8")
        stored = decode(text)
        if stored is not None:
            self.presets.append(stored)
        return stored

    def remove_preset(self, name: str) -> bool:
        """Delete the preset called ``name`` and its file; False if there is none."""
        for position, preset in enumerate(self.presets):
            if preset.name == name:
                self._path_for(name).unlink(missing_ok=True)
                del self.presets[position]
                return True
        return False

    def preset_to_string(self, preset: PresetInfo) -> str:
        return encode(preset)

    def string_to_preset(self, text: str) -> PresetInfo | None:
        return decode(text)