"""Key-value cache with per-entry time-to-live and periodic expiration."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Hashable

log = logging.getLogger(__name__)

Clock = Callable[[], int]


def _default_clock() -> int:
    return int(time.time())


@dataclass
class _Entry:
    created_time: int
    value: Any


class Cache:
    """A dictionary whose entries expire ``ttl`` seconds after creation.

    Expired entries are invisible to :meth:`lookup` immediately, but are only
    removed from memory by :meth:`expire`, which does work at most once per
    ``expiration_interval`` seconds.
    """

    def __init__(
        self,
        name: str = "__default__",
        ttl: int = 3600,
        expiration_interval: int = 300,
        clock: Clock | None = None,
    ) -> None:
        self.name = name
        self.ttl = ttl
        self.expiration_interval = expiration_interval
        self._clock = clock or _default_clock
        self._table: dict[Hashable, _Entry] = {}
        self.last_expiration_time = self._clock()

    def create(self, key: Hashable, value: Any, created_time: int | None = None) -> bool:
        """Store ``value`` under ``key``; return True if an entry was replaced."""
        if created_time is None:
            created_time = self._clock()
        replaced = key in self._table
        self._table[key] = _Entry(created_time, value)
        return replaced

    def delete(self, key: Hashable) -> bool:
        """Remove ``key``; return True if it was present."""
        return self._table.pop(key, None) is not None

    def lookup(self, key: Hashable) -> Any:
        """Return the value for ``key``, or None if absent or expired."""
        entry = self._table.get(key)
        if entry is None:
            return None
        if entry.created_time + self.ttl < self._clock():
            log.debug("%s: key %r: entry expired", self.name, key)
            return None
        return entry.value

    def expire(self, current_timestamp: int | None = None) -> int:
        """Purge stale entries if the expiration interval has elapsed.

        Returns the number of entries removed.
        """
        if current_timestamp is None:
            current_timestamp = self._clock()
        if self.last_expiration_time + self.expiration_interval > current_timestamp:
            return 0
        min_created_time = current_timestamp - self.ttl
        stale = [k for k, e in self._table.items() if e.created_time <= min_created_time]
        for key in stale:
            del self._table[key]
        log.debug(
            "%s: last_gc: %d, current_timestamp: %d, expired %d cache entries",
            self.name, self.last_expiration_time, current_timestamp, len(stale),
        )
        self.last_expiration_time = current_timestamp
        return len(stale)

    def __len__(self) -> int:
        return len(self._table)