"""Supporting pieces of an HFDL decoder: caches, aircraft lookup, CRC, dumps, DSP helpers and formatting."""

__version__ = "1.6.1"