import sqlite3

import pytest

from hfdlcore.ac_data import AcDataEntry, AircraftDatabase, AircraftDatabaseError


class FakeClock:
    def __init__(self, now=1_000_000):
        self.now = now

    def __call__(self):
        return self.now


def make_db(path, rows=()):
    conn = sqlite3.connect(path)
    conn.execute(
        "CREATE TABLE Aircraft (ModeS TEXT, Registration TEXT, ICAOTypeCode TEXT, "
        "OperatorFlagCode TEXT, Manufacturer TEXT, Type TEXT, RegisteredOwners TEXT)"
    )
    conn.executemany("INSERT INTO Aircraft VALUES (?,?,?,?,?,?,?)", rows)
    conn.commit()
    conn.close()


ROW = ("ABCDEF", "N-TEST", "B738", "XYZ", "Acme", "Jet 800", "Example Air")


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "basestation.sqb"
    make_db(path, [ROW])
    return path


def test_lookup_found(db_path):
    with AircraftDatabase(db_path, clock=FakeClock()) as db:
        entry = db.lookup(0xABCDEF)
    assert entry == AcDataEntry("N-TEST", "B738", "XYZ", "Acme", "Jet 800", "Example Air", True)


def test_lookup_not_found_is_negative_entry(db_path):
    with AircraftDatabase(db_path, clock=FakeClock()) as db:
        entry = db.lookup(0x123456)
    assert entry.exists is False
    assert entry.registration is None


def test_stats_count_hits_and_misses(db_path):
    with AircraftDatabase(db_path, clock=FakeClock()) as db:
        db.lookup(0xABCDEF)
        db.lookup(0xABCDEF)
        db.lookup(0x111111)
        assert db.stats["hits"] == 1
        # one miss from the test query at open, one from 0x111111
        assert db.stats["misses"] == 2


def test_results_are_cached(db_path):
    with AircraftDatabase(db_path, clock=FakeClock()) as db:
        assert db.lookup(0xABCDEF).exists
        conn = sqlite3.connect(db_path)
        conn.execute("DELETE FROM Aircraft")
        conn.commit()
        conn.close()
        assert db.lookup(0xABCDEF).exists


def test_cache_expires_after_ttl(db_path):
    clock = FakeClock()
    with AircraftDatabase(db_path, clock=clock) as db:
        assert db.lookup(0xABCDEF).exists
        conn = sqlite3.connect(db_path)
        conn.execute("DELETE FROM Aircraft")
        conn.commit()
        conn.close()
        clock.now += 3601
        assert db.lookup(0xABCDEF).exists is False


def test_address_too_large_fails(db_path):
    with AircraftDatabase(db_path, clock=FakeClock()) as db:
        assert db.lookup(0x1000000) is None
        assert db.lookup(-1) is None


def test_integer_column_converted_to_text(tmp_path):
    path = tmp_path / "db.sqb"
    make_db(path, [("00ABCD", 42, None, None, None, None, None)])
    with AircraftDatabase(path, clock=FakeClock()) as db:
        entry = db.lookup(0x00ABCD)
    assert entry.registration == "42"
    assert entry.icaotypecode is None


def test_missing_file_raises(tmp_path):
    with pytest.raises(AircraftDatabaseError):
        AircraftDatabase(tmp_path / "absent.sqb")


def test_missing_table_raises(tmp_path):
    path = tmp_path / "empty.sqb"
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE Other (x INTEGER)")
    conn.commit()
    conn.close()
    with pytest.raises(AircraftDatabaseError):
        AircraftDatabase(path)


def test_lookup_after_close_fails_for_uncached(db_path):
    db = AircraftDatabase(db_path, clock=FakeClock())
    db.close()
    assert db.lookup(0xABCDEF) is None
    assert db.stats["errors"] == 1