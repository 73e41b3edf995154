# hfdlcore

Supporting pieces for decoding HFDL (HF Data Link) transmissions in Python.

## Modules

- `hfdlcore.config`: `DumphfdlConfig`, a dataclass of program-wide settings
  (station ID, aircraft cache TTL, UTC and millisecond timestamps, and so on),
  and the `AcDataDetails` enum. A station ID longer than 255 characters raises
  `ValueError`.
- `hfdlcore.crc`: `crc16_ccitt(data, crc_init)`, the reflected CRC-16-CCITT
  (polynomial 0x1021).
- `hfdlcore.cache`: `Cache`, a key/value store whose entries expire `ttl`
  seconds after creation. `lookup` hides expired entries at once; `expire`
  removes them, at most once per `expiration_interval`. A `clock` callable can
  be passed in to control time.
- `hfdlcore.ac_cache`: `AircraftCache`, which maps (frequency, aircraft ID) to
  an ICAO address and back. `add` drops any earlier entry for the same ID or
  the same aircraft; `delete(freq, icao_address)` only removes the aircraft if
  it is logged on to that frequency. `lookup` returns an `AcCacheEntry` or
  `None`.
- `hfdlcore.ac_data`: `AircraftDatabase`, a read-only lookup in the `Aircraft`
  table of a BaseStation SQLite database, keyed by ICAO address. Hits and
  misses are cached for an hour; `lookup` returns an `AcDataEntry` whose
  `exists` flag tells whether a record was found. Opening a file that cannot
  be queried raises `AircraftDatabaseError`. It is a context manager.
- `hfdlcore.dumpfile`: `DumpFile`, `open_rf32` and `open_cf32`, which write
  float32 or complex float32 samples and pad holes in the sample clock with a
  fill value.
- `hfdlcore.dsp`: `fft_swap_sides` and `multiply_and_shift`, frequency-domain
  helpers for an FFT channelizer (NumPy).
- `hfdlcore.formatters`: `PduMetadata`, `format_timestamp`,
  `format_text_header` and `format_json_metadata`, which render the reception
  details of a decoded PDU as a text header line or as a JSON-ready dict.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from hfdlcore.crc import crc16_ccitt
from hfdlcore.ac_cache import AircraftCache
from hfdlcore.formatters import PduMetadata, format_text_header

crc = crc16_ccitt(b"\x01\x02\x03", 0xFFFF)

cache = AircraftCache(ttl=3600)
cache.add(8977000, 12, 0xABCDEF)
entry = cache.lookup(8977000, 12)
print(f"{entry.icao_address:06X}")

meta = PduMetadata(freq=8977000, bit_rate=1200, rssi=-20.0, noise_floor=-40.0,
                   slot="S", tv_sec=0)
print(format_text_header(meta, utc=True), end="")
```

## What it does not do

This package is not a complete decoder. It has no demodulator, no preamble
search, descrambler, deinterleaver or Viterbi decoding, no threaded sample
pipeline, no radio or file input, and no command-line program. It provides the
caches, lookups, checksums, dump files, channelizer helpers and metadata
formatting that such a decoder would use.