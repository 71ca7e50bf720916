import pathlib
import site
import sqlite3

import pytest
from nulls import Float64

HERE = pathlib.Path(pathlib.Path(__file__).resolve()).parent
site.addsitedir(HERE)


@pytest.fixture(autouse=True)
def clear_sqlite_registrations():
    """Remove global sqlite3 Float64 registrations to ensure test isolation."""
    yield
    sqlite3.adapters.pop((Float64, sqlite3.PrepareProtocol), None)
    for name in [name for name in sqlite3.converters if name.startswith('FLOAT64')]:
        sqlite3.converters.pop(name)


pytest_plugins = [
    'tests.fixtures.values',
    'tests.fixtures.sqlite',
    'tests.fixtures.sqlalchemy_fixtures',
]
