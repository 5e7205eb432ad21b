"""Persisted audio settings and the manager that owns them."""

from __future__ import annotations

import json
import os
import threading
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

MAX_VOLUME = 128

_JSON_FIELDS = (
    ("bgm", "bgm"),
    ("sfx", "sfx"),
    ("ui", "ui"),
    ("muteBgm", "mute_bgm"),
    ("muteSfx", "mute_sfx"),
    ("muteUi", "mute_ui"),
)


@dataclass
class AudioSettings:
    """Per-bus volumes and mute flags."""

    bgm: int = MAX_VOLUME
    sfx: int = MAX_VOLUME
    ui: int = MAX_VOLUME
    mute_bgm: bool = False
    mute_sfx: bool = False
    mute_ui: bool = False

    def to_json(self) -> dict:
        return {key: getattr(self, attr) for key, attr in _JSON_FIELDS}

    def save(self, path: PathLike) -> None:
        """Write the settings to ``path`` as JSON."""
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(self.to_json(), fh, indent=4)

    @classmethod
    def load(cls, path: PathLike) -> "AudioSettings":
        """Read settings from ``path``; defaults if the file cannot be opened.

        A file missing any setting raises ValueError.
        """
        try:
            fh = open(path, encoding="utf-8")
        except OSError:
            return cls()
        with fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"{os.fspath(path)} does not hold an object")
        missing = [key for key, _ in _JSON_FIELDS if key not in data]
        if missing:
            raise ValueError(f"{os.fspath(path)} lacks {', '.join(missing)}")
        return cls(
            bgm=int(data["bgm"]),
            sfx=int(data["sfx"]),
            ui=int(data["ui"]),
            mute_bgm=bool(data["muteBgm"]),
            mute_sfx=bool(data["muteSfx"]),
            mute_ui=bool(data["muteUi"]),
        )


class SettingsManager:
    """Holds the user settings and the file they are stored in."""

    _instance: ClassVar[Optional["SettingsManager"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self.audio = AudioSettings()
        self._dirty = False
        self._path: Optional[str] = None

    @classmethod
    def instance(cls) -> "SettingsManager":
        """Return the shared manager, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @property
    def path(self) -> Optional[str]:
        return self._path

    def load(self, path: PathLike) -> bool:
        """Remember ``path`` and load it if it exists; return whether it did."""
        self._path = os.fspath(path)
        if os.path.exists(self._path):
            self.audio = AudioSettings.load(self._path)
            return True
        return False

    def save(self) -> None:
        """Write the settings to the remembered path."""
        if not self._path:
            raise RuntimeError("no settings path; call load() first")
        self.audio.save(self._path)

    def mark_dirty(self) -> None:
        self._dirty = True

    @property
    def dirty(self) -> bool:
        return self._dirty