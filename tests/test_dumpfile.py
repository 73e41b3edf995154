import math
import struct

import pytest

from hfdlcore.dumpfile import open_cf32, open_rf32


def read_floats(path):
    data = path.read_bytes()
    return list(struct.unpack(f"={len(data) // 4}f", data))


def test_rf32_consecutive_values(tmp_path):
    path = tmp_path / "out.rf32"
    with open_rf32(path, 0.0) as df:
        df.write_value(1, 1.5)
        df.write_value(2, 2.5)
    assert read_floats(path) == [1.5, 2.5]


def test_rf32_gap_is_filled(tmp_path):
    path = tmp_path / "out.rf32"
    with open_rf32(path, -1.0) as df:
        df.write_value(0, 1.0)
        df.write_value(3, 2.0)
        assert df.time == 4
    assert read_floats(path) == [1.0, -1.0, -1.0, 2.0]


def test_first_write_is_not_filled(tmp_path):
    path = tmp_path / "out.rf32"
    with open_rf32(path, -1.0) as df:
        df.write_value(10, 1.0)
    assert read_floats(path) == [1.0]


def test_earlier_time_is_not_filled(tmp_path):
    path = tmp_path / "out.rf32"
    with open_rf32(path, -1.0) as df:
        df.write_block(0, [1.0, 2.0, 3.0])
        df.write_value(1, 4.0)
    assert read_floats(path) == [1.0, 2.0, 3.0, 4.0]


def test_default_fill_is_nan(tmp_path):
    path = tmp_path / "out.rf32"
    with open_rf32(path) as df:
        df.write_value(0, 1.0)
        df.write_value(2, 2.0)
    values = read_floats(path)
    assert len(values) == 3
    assert math.isnan(values[1])


def test_cf32_block_and_fill(tmp_path):
    path = tmp_path / "out.cf32"
    with open_cf32(path, 0j) as df:
        df.write_block(0, [1 + 2j, 3 - 4j])
        df.write_value(3, 5 + 6j)
    assert read_floats(path) == [1.0, 2.0, 3.0, -4.0, 0.0, 0.0, 5.0, 6.0]


def test_open_failure_raises(tmp_path):
    with pytest.raises(OSError):
        open_rf32(tmp_path / "no" / "such" / "dir.rf32")