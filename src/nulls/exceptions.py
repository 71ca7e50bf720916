"""
Nullable value exception classes.
"""


class NullsError(Exception):
    """Base class for all nulls module errors.
    """


class ConversionError(NullsError, TypeError):
    """Error converting a driver value into a nullable value.
    """


class ParseError(NullsError, ValueError):
    """Error parsing text as a 64-bit float.

    :param text: The text that failed to parse.
    :param reason: Short description, ``invalid syntax`` or ``value out of range``.
    """

    def __init__(self, text, reason='invalid syntax'):
        self.text = text
        self.reason = reason
        super().__init__(f'parsing {text!r} as float64: {reason}')


class MarshalError(NullsError, ValueError):
    """Error encoding a value that has no representation in the target format.
    """
