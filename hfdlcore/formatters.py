"""Text and JSON rendering of HFDL PDU reception metadata."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Any

APP_NAME = "dumphfdl"


@dataclass
class PduMetadata:
    """Reception details of a decoded HFDL PDU."""

    freq: int = 0
    bit_rate: int = 0
    rssi: float = 0.0
    noise_floor: float = 0.0
    freq_err_hz: float = 0.0
    slot: str = "S"
    tv_sec: int = 0
    tv_usec: int = 0
    version: int = 1

    def __post_init__(self) -> None:
        if len(self.slot) != 1:
            raise ValueError(f"slot must be a single character, got {self.slot!r}")
        if not 0 <= self.tv_usec < 1_000_000:
            raise ValueError(f"tv_usec out of range: {self.tv_usec}")


def format_timestamp(tv_sec: int, tv_usec: int = 0, utc: bool = False,
                     milliseconds: bool = False) -> str:
    """Render a timestamp as ``YYYY-MM-DD HH:MM:SS[.mmm] ZONE``."""
    millis = 0
    if milliseconds:
        millis = math.floor(tv_usec / 1000.0 + 0.5)
        if millis > 999:
            millis -= 1000
            tv_sec += 1
    tm = time.gmtime(tv_sec) if utc else time.localtime(tv_sec)
    text = time.strftime("%Y-%m-%d %H:%M:%S", tm)
    if milliseconds:
        text += f".{millis:03d}"
    return f"{text} {time.strftime('%Z', tm)}"


def format_text_header(metadata: PduMetadata, utc: bool = False,
                       milliseconds: bool = False) -> str:
    """Render the one-line, newline-terminated header preceding a decoded message."""
    timestamp = format_timestamp(metadata.tv_sec, metadata.tv_usec, utc, milliseconds)
    return (
        f"[{timestamp}] "
        f"[{metadata.freq / 1000.0:.1f} kHz] "
        f"[{metadata.freq_err_hz:.1f} Hz] "
        f"[{metadata.rssi:.1f}/{metadata.noise_floor:.1f} dBFS] "
        f"[{metadata.rssi - metadata.noise_floor:.1f} dB] "
        f"[{metadata.bit_rate} bps] "
        f"[{metadata.slot}]\n"
    )


def format_json_metadata(metadata: PduMetadata, station_id: str | None = None,
                         version: str = "") -> dict[str, Any]:
    """Return the object stored under the ``hfdl`` key of a JSON message."""
    result: dict[str, Any] = {"app": {"name": APP_NAME, "ver": version}}
    if station_id is not None:
        result["station"] = station_id
    result["t"] = {"sec": metadata.tv_sec, "usec": metadata.tv_usec}
    result["freq"] = metadata.freq
    result["bit_rate"] = metadata.bit_rate
    result["sig_level"] = metadata.rssi
    result["noise_level"] = metadata.noise_floor
    result["freq_skew"] = metadata.freq_err_hz
    result["slot"] = metadata.slot
    return result