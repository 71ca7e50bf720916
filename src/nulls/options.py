from dataclasses import dataclass

from libb import ConfigOptions

__all__ = ['NullsOptions']


@dataclass
class NullsOptions(ConfigOptions):
    """Options

    Driver adapter options:
    - nan_as_null: Bind NaN values as NULL (default: False)
    - sqlite_type_name: Declared column type that sqlite3 converts to Float64 (default: 'float64')
    - postgres_loader: Load PostgreSQL float8 columns as Float64 (default: False)
    """
    nan_as_null: bool = False
    sqlite_type_name: str = 'float64'
    postgres_loader: bool = False

    def __post_init__(self):
        if not self.sqlite_type_name or not self.sqlite_type_name.isidentifier():
            raise ValueError(f'sqlite_type_name must be an identifier, got {self.sqlite_type_name!r}')
        # sqlite3 converter names are case-insensitive
        self.sqlite_type_name = self.sqlite_type_name.lower()
