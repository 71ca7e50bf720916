"""
Scan primitive for nullable float driver values.

Accepted driver values:
- NULL: None, pandas.NA
- numbers: float, int (not bool), decimal.Decimal, NumPy float and integer scalars
- text: str, bytes, bytearray, memoryview
- PyArrow scalars, unwrapped and scanned again
"""
import decimal
from typing import Any

import numpy as np
import pandas as pd
import pyarrow as pa
from nulls.exceptions import ConversionError, ParseError
from nulls.floats import parse_float

__all__ = ['scan_float']

TEXT_TYPES = (str, bytes, bytearray, memoryview)
NUMPY_NUMBER_TYPES = (np.floating, np.integer, np.unsignedinteger)


def scan_float(src: Any) -> tuple[float, bool]:
    """Convert a driver value into a ``(value, valid)`` pair.

    NULL yields ``(0.0, False)``. Raises ConversionError for values that
    cannot be read as a float.
    """
    if src is None or src is pd.NA:
        return 0.0, False

    if isinstance(src, pa.Scalar):
        return scan_float(src.as_py())

    if isinstance(src, bool | np.bool_):
        raise ConversionError(f'converting {type(src).__name__} to float64 is unsupported')

    if isinstance(src, float):
        return float(src), True

    if isinstance(src, NUMPY_NUMBER_TYPES):
        return _to_float(src), True

    if isinstance(src, int | decimal.Decimal):
        return _to_float(src), True

    if isinstance(src, TEXT_TYPES):
        try:
            return parse_float(src), True
        except ParseError as e:
            raise ConversionError(f'converting driver value {src!r} to float64: {e.reason}') from e

    raise ConversionError(f'unsupported driver value type {type(src).__name__} for float64')


def _to_float(src: Any) -> float:
    try:
        return float(src)
    except (OverflowError, ValueError) as e:
        raise ConversionError(f'converting driver value {src!r} to float64: {e}') from e
