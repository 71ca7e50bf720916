"""
Database driver bindings for Float64.

This module connects Float64 to the driver value protocol of each supported
database layer, in both directions:

1. psycopg (PostgreSQL): Float64Dumper binds Float64 parameters as float8,
   Float64Loader optionally reads float8 columns back as Float64
2. sqlite3: adapt_float64 binds Float64 parameters, convert_float64 reads
   columns declared with the configured type name
3. SQLAlchemy: Float64Type column type, the only binding that also returns
   Float64 for NULL rows (driver level loaders and converters never see NULL)

Usage:
    # Get adapter registry
    adapter_registry = get_adapter_registry(nan_as_null=True)

    # Apply PostgreSQL adapters to a connection
    conn = psycopg.connect(...)
    conn.adapters.update(adapter_registry.postgres())

    # Register SQLite adapters
    sqlite_conn = sqlite3.connect(..., detect_types=sqlite3.PARSE_DECLTYPES)
    adapter_registry.sqlite(sqlite_conn)

    # SQLAlchemy column
    sa.Column('price', Float64Type)
"""
import functools
import logging
import math
import sqlite3
from typing import Any, TypeVar

import psycopg
import sqlalchemy as sa
from nulls.float64 import Float64
from nulls.options import NullsOptions
from nulls.scan import scan_float
from psycopg.adapt import AdaptersMap, Dumper, Loader
from psycopg.pq import Format

logger = logging.getLogger(__name__)

SQLiteConnection = TypeVar('SQLiteConnection')

FLOAT8_OID = psycopg.postgres.types['float8'].oid


def _driver_value(value: Any, nan_as_null: bool = False) -> float | None:
    """Driver value for a Float64 or any scannable value."""
    if isinstance(value, Float64):
        result = value.value()
    else:
        result, valid = scan_float(value)
        result = result if valid else None
    if nan_as_null and result is not None and math.isnan(result):
        return None
    return result


# PostgreSQL adapter classes
class Float64Dumper(Dumper):
    """Dump Float64 as float8 text, NULL when absent"""

    oid = FLOAT8_OID
    nan_as_null = False

    _special = {
        b'nan': b'NaN',
        b'inf': b'Infinity',
        b'-inf': b'-Infinity',
    }

    def dump(self, obj):
        value = _driver_value(obj, self.nan_as_null)
        if value is None:
            return None
        text = repr(value).encode()
        return self._special.get(text, text)


class Float64NanAsNullDumper(Float64Dumper):
    """Float64 dumper that also converts NaN to NULL"""

    nan_as_null = True


class Float64Loader(Loader):
    """Load float8 text into Float64"""

    format = Format.TEXT

    def load(self, data) -> Float64:
        if isinstance(data, memoryview):
            data = bytes(data)
        result = Float64()
        result.scan(data)
        return result


# SQLite adapter functions
def adapt_float64(val: Float64, nan_as_null: bool = False) -> float | None:
    """Convert Float64 to a SQLite parameter.

    >>> adapt_float64(Float64.new(2.5))
    2.5
    >>> adapt_float64(Float64()) is None
    True
    >>> adapt_float64(Float64.new(float('nan')), nan_as_null=True) is None
    True
    """
    return _driver_value(val, nan_as_null)


def convert_float64(val: bytes) -> Float64:
    """Convert SQLite column text to Float64.

    >>> convert_float64(b'2.5')
    Float64(float64=2.5, valid=True)
    """
    result = Float64()
    result.scan(val)
    return result


# SQLAlchemy column type
class Float64Type(sa.types.TypeDecorator):
    """Float column that binds and returns Float64"""

    impl = sa.Float
    cache_ok = True

    @property
    def python_type(self):
        return Float64

    def process_bind_param(self, value, dialect):
        return _driver_value(value)

    def process_result_value(self, value, dialect):
        result = Float64()
        result.scan(value)
        return result


class AdapterRegistry:
    """Registry for database-specific Float64 adapters"""

    def __init__(self, options: NullsOptions | None = None):
        self.options = options or NullsOptions()

    @property
    def dumper(self) -> type[Float64Dumper]:
        if self.options.nan_as_null:
            return Float64NanAsNullDumper
        return Float64Dumper

    def postgres(self) -> AdaptersMap:
        """Create PostgreSQL adapter map

        Returns
            AdaptersMap with the Float64 dumper (and optionally loader) registered
        """
        postgres_adapters = AdaptersMap(psycopg.adapters)
        postgres_adapters.register_dumper(Float64, self.dumper)
        logger.debug(f'Registered {self.dumper.__name__} for PostgreSQL')

        if self.options.postgres_loader:
            postgres_adapters.register_loader(FLOAT8_OID, Float64Loader)
            logger.debug('Registered Float64Loader for PostgreSQL float8 columns')

        return postgres_adapters

    def sqlite(self, connection: SQLiteConnection) -> None:
        """Register SQLite adapters for a connection

        Args:
            connection: SQLite connection object

        Note:
            Due to SQLite's architecture, adapters are registered globally
            rather than per-connection. The converter only applies to
            connections opened with detect_types=sqlite3.PARSE_DECLTYPES.
        """
        connection.execute('SELECT 1')

        adapter = functools.partial(adapt_float64, nan_as_null=self.options.nan_as_null)
        sqlite3.register_adapter(Float64, adapter)
        sqlite3.register_converter(self.options.sqlite_type_name, convert_float64)
        logger.debug(f'Registered Float64 adapter and {self.options.sqlite_type_name!r} converter for SQLite')


def get_adapter_registry(**kwargs: Any) -> AdapterRegistry:
    """Get the adapter registry for database connections

    Returns
        AdapterRegistry instance configured from NullsOptions keyword arguments
    """
    return AdapterRegistry(NullsOptions(**kwargs))


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
