"""Aircraft details looked up in a BaseStation SQLite database, with caching."""

from __future__ import annotations

import logging
import sqlite3
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .cache import Cache, Clock, _default_clock

log = logging.getLogger(__name__)

AC_DATA_TTL = 3600
AC_DATA_EXPIRATION_INTERVAL = 305
BS_DB_COLUMNS = (
    "Registration",
    "ICAOTypeCode",
    "OperatorFlagCode",
    "Manufacturer",
    "Type",
    "RegisteredOwners",
)
_QUERY = f"SELECT {','.join(BS_DB_COLUMNS)} FROM Aircraft WHERE ModeS = ?"


class AircraftDatabaseError(Exception):
    """The aircraft database could not be opened or is unusable."""


@dataclass
class AcDataEntry:
    """Aircraft details; ``exists`` is False when the database has no record."""

    registration: str | None = None
    icaotypecode: str | None = None
    operatorflagcode: str | None = None
    manufacturer: str | None = None
    type: str | None = None
    registeredowners: str | None = None
    exists: bool = False


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class AircraftDatabase:
    """Read-only view of the ``Aircraft`` table, keyed by ICAO address.

    Both positive and negative results are cached for an hour.
    """

    def __init__(self, path: str | Path, clock: Clock | None = None) -> None:
        self._clock = clock or _default_clock
        self.path = Path(path)
        self.stats: Counter[str] = Counter()
        uri = self.path.resolve().as_uri() + "?mode=ro"
        try:
            self._conn: sqlite3.Connection | None = sqlite3.connect(uri, uri=True)
        except sqlite3.Error as exc:
            raise AircraftDatabaseError(f"Can't open database {path}: {exc}") from exc
        self._cache = Cache("ac_data", AC_DATA_TTL, AC_DATA_EXPIRATION_INTERVAL, self._clock)
        if self.lookup(0) is None:
            self.close()
            raise AircraftDatabaseError(f"{path}: test query failed, database is unusable.")
        log.info("%s: database opened", path)

    def lookup(self, icao_address: int) -> AcDataEntry | None:
        """Return details of the aircraft, or None if the query failed."""
        self._cache.expire(self._clock())
        entry = self._cache.lookup(icao_address)
        if entry is not None:
            log.debug("%06X: %s cache hit", icao_address,
                      "positive" if entry.exists else "negative")
            return entry
        entry = self._fetch(icao_address)
        if entry is None:
            log.debug("%06X: BS DB query failure", icao_address)
            return None
        log.debug("%06X: %sfound in BS DB", icao_address, "" if entry.exists else "not ")
        self._cache.create(icao_address, entry, self._clock())
        return entry

    def _fetch(self, icao_address: int) -> AcDataEntry | None:
        hex_address = f"{icao_address:06X}"
        if icao_address < 0 or len(hex_address) != 6:
            log.debug("could not convert icao_address %d to ICAO hex string - too large?",
                      icao_address)
            return None
        if self._conn is None:
            self.stats["errors"] += 1
            return None
        try:
            row = self._conn.execute(_QUERY, (hex_address,)).fetchone()
        except sqlite3.Error as exc:
            log.debug("%s: query failed: %s", hex_address, exc)
            self.stats["errors"] += 1
            return None
        if row is None:
            self.stats["misses"] += 1
            return AcDataEntry(exists=False)
        if len(row) < len(BS_DB_COLUMNS):
            log.debug("%s: not enough columns in the query result", hex_address)
            return None
        self.stats["hits"] += 1
        return AcDataEntry(*(_as_text(v) for v in row[: len(BS_DB_COLUMNS)]), exists=True)

    def close(self) -> None:
        """Close the database connection."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> AircraftDatabase:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()