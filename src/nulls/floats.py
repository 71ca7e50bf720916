"""
Text conversion primitives for 64-bit floats.

All formatters produce the shortest decimal text that parses back to the
exact same float. They differ only in when exponent notation is used:

- format_positional: never (XML attributes)
- format_general: decimal exponent < -4 or >= 6 (XML elements)
- format_json: magnitude < 1e-6 or >= 1e21, the ECMAScript number form (JSON)

parse_float is strict: no surrounding whitespace, no digit separators, and
finite-looking text that overflows is an error rather than infinity.
"""
import math
import re

import numpy as np
from nulls.exceptions import MarshalError, ParseError

__all__ = [
    'parse_float',
    'format_positional',
    'format_general',
    'format_json',
]

_DECIMAL = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)
_HEXADECIMAL = re.compile(
    r'[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+', re.ASCII)
_SPECIAL = {
    'inf': math.inf,
    '+inf': math.inf,
    '-inf': -math.inf,
    'infinity': math.inf,
    '+infinity': math.inf,
    '-infinity': -math.inf,
    'nan': math.nan,
}


def parse_float(text: str | bytes) -> float:
    """Parse text as a 64-bit float.

    >>> parse_float('2.5')
    2.5
    >>> parse_float(b'-1e3')
    -1000.0
    >>> parse_float('0x1p-2')
    0.25
    >>> parse_float('-Infinity')
    -inf
    >>> parse_float(' 1')
    Traceback (most recent call last):
    ...
    nulls.exceptions.ParseError: parsing ' 1' as float64: invalid syntax
    >>> parse_float('1e400')
    Traceback (most recent call last):
    ...
    nulls.exceptions.ParseError: parsing '1e400' as float64: value out of range
    """
    if isinstance(text, bytes | bytearray | memoryview):
        try:
            text = bytes(text).decode('ascii')
        except UnicodeDecodeError as e:
            raise ParseError(bytes(text).decode('ascii', 'replace')) from e

    special = _SPECIAL.get(text.lower())
    if special is not None:
        return special

    if _DECIMAL.fullmatch(text):
        value = float(text)
    elif _HEXADECIMAL.fullmatch(text):
        try:
            value = float.fromhex(text)
        except OverflowError as e:
            raise ParseError(text, 'value out of range') from e
    else:
        raise ParseError(text)

    if math.isinf(value):
        raise ParseError(text, 'value out of range')
    return value


def _format_non_finite(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    return '+Inf' if value > 0 else '-Inf'


def format_positional(value: float) -> str:
    """Shortest round-trip text without exponent notation.

    >>> format_positional(3.0)
    '3'
    >>> format_positional(0.1)
    '0.1'
    >>> format_positional(1e21)
    '1000000000000000000000'
    >>> format_positional(1e-7)
    '0.0000001'
    """
    if not math.isfinite(value):
        return _format_non_finite(value)
    return np.format_float_positional(value, unique=True, trim='-')


def format_general(value: float) -> str:
    """Shortest round-trip text, exponent form for large and small exponents.

    >>> format_general(2.5)
    '2.5'
    >>> format_general(123456.0)
    '123456'
    >>> format_general(1e6)
    '1e+06'
    >>> format_general(0.0000125)
    '1.25e-05'
    """
    if not math.isfinite(value):
        return _format_non_finite(value)
    if value == 0:
        return format_positional(value)
    scientific = np.format_float_scientific(value, unique=True, trim='-', exp_digits=2)
    exponent = int(scientific.rpartition('e')[2])
    if exponent < -4 or exponent >= 6:
        return scientific
    return format_positional(value)


def format_json(value: float) -> str:
    """Shortest round-trip text in the form JSON consumers expect.

    >>> format_json(2.5)
    '2.5'
    >>> format_json(1e20)
    '100000000000000000000'
    >>> format_json(1e21)
    '1e+21'
    >>> format_json(1e-7)
    '1e-7'
    >>> format_json(float('nan'))
    Traceback (most recent call last):
    ...
    nulls.exceptions.MarshalError: unsupported value: NaN
    """
    if not math.isfinite(value):
        raise MarshalError(f'unsupported value: {_format_non_finite(value)}')
    magnitude = abs(value)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        return np.format_float_scientific(value, unique=True, trim='-', exp_digits=1)
    return format_positional(value)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
