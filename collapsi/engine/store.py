from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Iterator
from contextlib import contextmanager

from .. import config
from .core import CollapsiEngine


class MemoryGameStore:
    """In-process registry of games, least-recently-used evicted past the cap.

    Each game carries its own lock; hold it via ``locked`` for every read or
    mutation of that game's engine.
    """

    def __init__(self, max_games: int = config.MAX_GAMES) -> None:
        self.max_games = max_games
        self._data: OrderedDict[str, CollapsiEngine] = OrderedDict()
        self._locks: dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def _enforce_cap(self) -> None:
        while len(self._data) > self.max_games:
            gid, _ = self._data.popitem(last=False)
            self._locks.pop(gid, None)

    def save(self, eng: CollapsiEngine) -> None:
        with self._lock:
            self._data[eng.game_id] = eng
            self._data.move_to_end(eng.game_id)
            self._locks.setdefault(eng.game_id, threading.Lock())
            self._enforce_cap()

    def get(self, gid: str) -> CollapsiEngine | None:
        with self._lock:
            eng = self._data.get(gid)
            if eng is not None:
                self._data.move_to_end(gid)
            return eng

    @contextmanager
    def locked(self, gid: str) -> Iterator[CollapsiEngine | None]:
        eng = self.get(gid)
        if eng is None:
            yield None
            return
        with self._lock:
            lock = self._locks.setdefault(gid, threading.Lock())
        with lock:
            yield eng

    def delete(self, gid: str) -> bool:
        with self._lock:
            self._locks.pop(gid, None)
            return self._data.pop(gid, None) is not None

    def list_all(self) -> list[CollapsiEngine]:
        with self._lock:
            return list(reversed(self._data.values()))

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self._locks.clear()


store = MemoryGameStore()
