"""Runtime configuration shared by the decoder components."""

from __future__ import annotations

import enum
from dataclasses import dataclass

STATION_ID_LEN_MAX = 255
AC_CACHE_TTL_DEFAULT = 3600
AC_CACHE_EXPIRATION_INTERVAL = 309


class AcDataDetails(enum.IntEnum):
    """How much aircraft database detail to include in the output."""

    NORMAL = 0
    VERBOSE = 1


@dataclass
class DumphfdlConfig:
    """Program-wide settings."""

    debug_filter: int = 0
    station_id: str | None = None
    output_queue_hwm: int = 0
    nf_stats_interval: int = 0
    ac_cache_ttl: int = AC_CACHE_TTL_DEFAULT
    ac_data_details: AcDataDetails = AcDataDetails.NORMAL
    utc: bool = False
    milliseconds: bool = False
    output_raw_frames: bool = False
    output_mpdus: bool = False
    output_corrupted_pdus: bool = False
    freq_as_squawk: bool = False
    ac_data_available: bool = False
    datadumps: bool = False

    def __post_init__(self) -> None:
        self.ac_data_details = AcDataDetails(self.ac_data_details)
        if self.station_id is not None and len(self.station_id) > STATION_ID_LEN_MAX:
            raise ValueError(
                f"station_id is too long (max {STATION_ID_LEN_MAX} characters)"
            )