"""Raw sample dump files (float32 and complex float32) with gap filling."""

from __future__ import annotations

import math
import struct
from pathlib import Path
from typing import Iterable


class DumpFile:
    """Writes time-stamped samples; gaps in the time axis are padded.

    ``time`` counts samples. When a write starts later than the end of the
    previous one, the hole is filled with ``fill_value`` first. The very first
    write never triggers filling.
    """

    def __init__(self, path: str | Path, fill_value: complex | float = math.nan,
                 complex_values: bool = False) -> None:
        self.complex_values = complex_values
        self._format = "=ff" if complex_values else "=f"
        self._fill = self._pack(fill_value)
        self.time = 0
        self._file = open(path, "wb")

    def _pack(self, value: complex | float) -> bytes:
        if self.complex_values:
            c = complex(value)
            return struct.pack(self._format, c.real, c.imag)
        return struct.pack(self._format, float(value))

    def write_value(self, time: int, value: complex | float) -> None:
        """Write a single sample taken at ``time``."""
        self.write_block(time, (value,))

    def write_block(self, time: int, values: Iterable[complex | float]) -> None:
        """Write consecutive samples, the first one taken at ``time``."""
        data = [self._pack(v) for v in values]
        if self.time != 0 and self.time < time:
            gap = time - self.time
            self._file.write(self._fill * gap)
            self.time += gap
        self._file.write(b"".join(data))
        self.time += len(data)

    def close(self) -> None:
        """Flush and close the file."""
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> DumpFile:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def open_rf32(path: str | Path, fill_value: float = math.nan) -> DumpFile:
    """Open a dump of real float32 samples."""
    return DumpFile(path, fill_value, complex_values=False)


def open_cf32(path: str | Path, fill_value: complex = complex(math.nan, 0.0)) -> DumpFile:
    """Open a dump of complex float32 samples."""
    return DumpFile(path, fill_value, complex_values=True)