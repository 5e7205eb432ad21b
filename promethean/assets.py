"""Asset loading with a shared least-recently-used cache."""

from __future__ import annotations

import itertools
import os
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Optional, TypeVar, Union

from promethean.log import LogSystem

PathLike = Union[str, "os.PathLike[str]"]
R = TypeVar("R")

_ids = itertools.count(1)


def _next_id() -> int:
    return next(_ids)


@dataclass(frozen=True, eq=False)
class Texture:
    """Image data read from disk, with an id usable by the renderer."""

    path: str
    data: bytes = b""
    id: int = field(default_factory=_next_id)


@dataclass(frozen=True, eq=False)
class Sound:
    """Sound-effect data read from disk."""

    path: str
    data: bytes = b""


@dataclass(frozen=True, eq=False)
class Font:
    """Font data read from disk, bound to a point size."""

    path: str
    size: int
    data: bytes = b""


def _read(path: str) -> Optional[bytes]:
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError:
        return None


class AssetManager:
    """Loads textures, sounds and fonts, caching them in one LRU cache.

    A failed load is cached too: asking again for the same asset returns None
    until the entry is evicted.
    """

    _missing: ClassVar[Optional[Texture]] = None
    _missing_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, cache_size: int) -> None:
        if cache_size < 1:
            raise ValueError("cache size must be at least 1")
        self._capacity = cache_size
        self._cache: OrderedDict[str, Any] = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._cache)

    def _load(self, key: str, label: str, loader: Callable[[], Optional[R]]) -> Optional[R]:
        log = LogSystem.instance()
        if key in self._cache:
            self._cache.move_to_end(key, last=False)
            log.debug("AssetManager hit {}", label)
            return self._cache[key]
        log.debug("AssetManager miss {}", label)
        resource = loader()
        if len(self._cache) >= self._capacity:
            self._cache.popitem(last=True)
        self._cache[key] = resource
        self._cache.move_to_end(key, last=False)
        return resource

    @staticmethod
    def _check_path(path: PathLike) -> str:
        path = os.fspath(path)
        if not path:
            raise ValueError("asset path must not be empty")
        return path

    def load_texture(self, path: PathLike) -> Optional[Texture]:
        """Load a texture from disk or the cache; None if it cannot be read."""
        path = self._check_path(path)

        def load() -> Optional[Texture]:
            data = _read(path)
            return None if data is None else Texture(path, data)

        return self._load("T:" + path, path, load)

    def load_sound(self, path: PathLike) -> Optional[Sound]:
        """Load a sound effect from disk or the cache; None if it cannot be read."""
        path = self._check_path(path)

        def load() -> Optional[Sound]:
            data = _read(path)
            return None if data is None else Sound(path, data)

        return self._load("S:" + path, path, load)

    def load_font(self, path: PathLike, size: int) -> Optional[Font]:
        """Load a font at ``size`` from disk or the cache; None if it cannot be read."""
        path = self._check_path(path)
        key = f"F:{path}#{size}"

        def load() -> Optional[Font]:
            data = _read(path)
            return None if data is None else Font(path, size, data)

        return self._load(key, key, load)

    @classmethod
    def missing_texture(cls) -> Texture:
        """The shared placeholder used when a texture is unavailable."""
        with cls._missing_lock:
            if cls._missing is None:
                cls._missing = Texture("")
            return cls._missing