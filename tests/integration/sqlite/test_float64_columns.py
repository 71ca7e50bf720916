"""
Tests for Float64 values stored in and read from SQLite through sqlite3.
"""
import sqlite3

import pytest
from nulls import Float64, get_adapter_registry


def _insert(conn, name, price):
    conn.execute('INSERT INTO test_prices (name, price) VALUES (?, ?)', (name, price))


def _select(conn, name):
    return conn.execute('SELECT price FROM test_prices WHERE name = ?', (name,)).fetchone()[0]


def test_bind_value(sqlite_conn):
    """Test that a present Float64 is stored as REAL"""
    _insert(sqlite_conn, 'apple', Float64.new(2.5))
    row = sqlite_conn.execute("SELECT typeof(price), price + 0 FROM test_prices WHERE name = 'apple'").fetchone()
    assert row == ('real', 2.5)


def test_bind_null(sqlite_conn):
    """Test that an absent Float64 is stored as NULL"""
    _insert(sqlite_conn, 'pear', Float64())
    row = sqlite_conn.execute("SELECT typeof(price) FROM test_prices WHERE name = 'pear'").fetchone()
    assert row == ('null',)


@pytest.mark.parametrize('value', [2.5, -0.125, 1.0, 1e21, 4096.0])
def test_read_value(sqlite_conn, value):
    """Test that declared FLOAT64 columns are read back as Float64"""
    _insert(sqlite_conn, 'item', Float64.new(value))
    assert _select(sqlite_conn, 'item') == Float64(value, True)


def test_read_null(sqlite_conn):
    """Test that sqlite3 converters are skipped for NULL"""
    _insert(sqlite_conn, 'item', Float64())
    assert _select(sqlite_conn, 'item') is None


def test_read_plain_number(sqlite_conn):
    """Test that values written without Float64 are converted on read"""
    _insert(sqlite_conn, 'item', 7)
    assert _select(sqlite_conn, 'item') == Float64(7.0, True)


def test_read_into_scan(sqlite_conn):
    """Test scanning raw rows, NULL included, into Float64"""
    _insert(sqlite_conn, 'a', Float64.new(1.5))
    _insert(sqlite_conn, 'b', Float64())
    rows = sqlite_conn.execute('SELECT name, price + 0 FROM test_prices ORDER BY name').fetchall()
    scanned = {}
    for name, raw in rows:
        value = Float64()
        value.scan(raw)
        scanned[name] = value
    assert scanned == {'a': Float64(1.5, True), 'b': Float64()}


def test_nan_as_null_registration():
    """Test registering the NaN to NULL adapter"""
    conn = sqlite3.connect(':memory:')
    get_adapter_registry(nan_as_null=True).sqlite(conn)
    conn.execute('CREATE TABLE t (v REAL)')
    conn.execute('INSERT INTO t VALUES (?)', (Float64.new(float('nan')),))
    conn.execute('INSERT INTO t VALUES (?)', (Float64.new(3.5),))
    assert conn.execute('SELECT v FROM t ORDER BY rowid').fetchall() == [(None,), (3.5,)]
    conn.close()


def test_custom_type_name():
    """Test registering the converter under another declared type"""
    conn = sqlite3.connect(':memory:', detect_types=sqlite3.PARSE_DECLTYPES)
    get_adapter_registry(sqlite_type_name='nullfloat').sqlite(conn)
    conn.execute('CREATE TABLE t (v NULLFLOAT)')
    conn.execute('INSERT INTO t VALUES (?)', (Float64.new(0.5),))
    assert conn.execute('SELECT v FROM t').fetchone() == (Float64(0.5, True),)
    conn.close()
    sqlite3.converters.pop('NULLFLOAT', None)


if __name__ == '__main__':
    __import__('pytest').main([__file__])
