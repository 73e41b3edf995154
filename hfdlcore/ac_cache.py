"""Mapping between per-channel aircraft IDs and ICAO addresses."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .cache import Cache, Clock, _default_clock
from .config import AC_CACHE_EXPIRATION_INTERVAL, AC_CACHE_TTL_DEFAULT

log = logging.getLogger(__name__)


@dataclass
class AcCacheEntry:
    """Forward cache entry: the aircraft an ID stands for."""

    icao_address: int
    callsign: str | None = None


class AircraftCache:
    """Bidirectional cache of (frequency, aircraft ID) <-> ICAO address.

    The forward map resolves an aircraft ID on a channel to its ICAO address.
    The inverse map locates the forward entry from an ICAO address, which is
    needed when a logoff confirmation, always sent to the broadcast ID, names
    only the aircraft's address. An aircraft may be logged on to only one
    frequency at a time.
    """

    def __init__(self, ttl: int = AC_CACHE_TTL_DEFAULT, clock: Clock | None = None) -> None:
        self._clock = clock or _default_clock
        self._fwd = Cache("ac_fwd", ttl, AC_CACHE_EXPIRATION_INTERVAL, self._clock)
        self._inv = Cache("ac_inv", ttl, AC_CACHE_EXPIRATION_INTERVAL, self._clock)

    def add(self, freq: int, ac_id: int, icao_address: int) -> None:
        """Record that ``ac_id`` on ``freq`` belongs to ``icao_address``."""
        existing = self.lookup(freq, ac_id)
        if existing is not None:
            old_address = existing.icao_address
            if self._perform_delete(freq, old_address, check_frequency=False):
                log.debug("%d@%d: existing entry deleted (was for %06X)", ac_id, freq, old_address)
        if self._perform_delete(freq, icao_address, check_frequency=False):
            log.debug("existing entry for %06X deleted", icao_address)

        now = self._clock()
        if self._fwd.create((freq, ac_id), AcCacheEntry(icao_address), now):
            log.debug("%d@%d: warning: forward entry overwritten", ac_id, freq)
        if self._inv.create(icao_address, (freq, ac_id), now):
            log.debug("%06X: warning: inverse entry overwritten", icao_address)
        log.debug("new entry: %d@%d: %06X", ac_id, freq, icao_address)

    def delete(self, freq: int, icao_address: int) -> bool:
        """Remove the aircraft if it is logged on to ``freq``; return success."""
        return self._perform_delete(freq, icao_address, check_frequency=True)

    def lookup(self, freq: int, ac_id: int) -> AcCacheEntry | None:
        """Return the entry for ``ac_id`` on ``freq``, or None."""
        now = self._clock()
        self._fwd.expire(now)
        self._inv.expire(now)
        entry = self._fwd.lookup((freq, ac_id))
        if entry is not None:
            log.debug("%d@%d: %06X", ac_id, freq, entry.icao_address)
        else:
            log.debug("%d@%d: not found", ac_id, freq)
        return entry

    def _perform_delete(self, freq: int, icao_address: int, check_frequency: bool) -> bool:
        location = self._inv.lookup(icao_address)
        if location is None:
            log.debug("entry not deleted: %06X@%d: not found", icao_address, freq)
            return False
        cached_freq, cached_id = location
        if check_frequency and cached_freq != freq:
            log.debug(
                "%06X: entry is on a different frequency (requested: %d cached %d), delete skipped",
                icao_address, freq, cached_freq,
            )
            return False
        inv_deleted = self._inv.delete(icao_address)
        fwd_deleted = self._fwd.delete((cached_freq, cached_id))
        result = inv_deleted and fwd_deleted
        log.debug(
            "entry %s: %06X@%d: %d",
            "deleted" if result else "deletion failed", icao_address, cached_freq, cached_id,
        )
        return result