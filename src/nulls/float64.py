"""
Nullable 64-bit float.

Float64 carries a float and a validity flag so that one optional numeric field
can cross three boundaries without losing the difference between NULL and a
value:

- database drivers: scan() reads driver values, value() produces them
- JSON and plain text: marshal_json(), unmarshal_json(), unmarshal_text()
- XML: marshal_xml()/unmarshal_xml() for elements and
  marshal_xml_attr()/unmarshal_xml_attr() for attributes

An absent value encodes as ``null`` in JSON but is omitted entirely from XML
element output. The XML decoders leave the receiver untouched for empty or
``null`` text, so a reused instance keeps whatever validity it had.

Usage:
    >>> price = Float64.new(9.5)
    >>> price.marshal_json()
    '9.5'
    >>> missing = Float64()
    >>> missing.marshal_json()
    'null'
    >>> missing.unmarshal_json('2.5')
    >>> missing
    Float64(float64=2.5, valid=True)
"""
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Self

from nulls.exceptions import ConversionError, ParseError
from nulls.floats import format_general, format_json, format_positional
from nulls.floats import parse_float
from nulls.scan import scan_float

__all__ = ['Attr', 'Float64', 'new_float64']

NULL_TEXT = 'null'


@dataclass(frozen=True)
class Attr:
    """XML attribute produced by Float64.marshal_xml_attr.

    The empty attribute (no name) stands for "write nothing" and is falsy.
    """
    name: str = ''
    value: str = ''

    def __bool__(self) -> bool:
        return bool(self.name)


def _as_text(text: str | bytes) -> str:
    if isinstance(text, str):
        return text
    return bytes(text).decode('utf-8', 'replace')


def _char_data(element: ET.Element) -> str:
    """Character data directly inside an element, nested elements skipped."""
    parts = [element.text or '']
    parts.extend(child.tail or '' for child in element)
    return ''.join(parts)


@dataclass
class Float64:
    """Nullable 64-bit float.

    ``float64`` is only meaningful when ``valid`` is true. The zero value
    ``Float64()`` is NULL.
    """
    float64: float = 0.0
    valid: bool = False

    @classmethod
    def new(cls, value: float) -> Self:
        """Return a valid Float64 holding ``value``."""
        return cls(float(value), True)

    def interface(self) -> float | None:
        """Return None when NULL, otherwise the float."""
        if not self.valid:
            return None
        return self.float64

    def scan(self, value: Any) -> None:
        """Read a driver value in place.

        NULL resets to ``Float64()``. Raises ConversionError when the value
        cannot be read as a float; the receiver is not modified in that case.
        """
        self.float64, self.valid = scan_float(value)

    def value(self) -> float | None:
        """Return the driver value: None when NULL, otherwise the float."""
        if not self.valid:
            return None
        return self.float64

    def marshal_json(self) -> str:
        """Return the JSON text, ``null`` when NULL.

        Raises MarshalError for NaN and infinities.
        """
        if self.valid:
            return format_json(self.float64)
        return NULL_TEXT

    def unmarshal_json(self, text: str | bytes) -> None:
        """Decode JSON text in place.

        ``null`` makes the value NULL. Anything else must parse as a float;
        on ParseError the value is left NULL.
        """
        text = _as_text(text)
        self.valid = True
        if text == NULL_TEXT:
            self.valid = False
            return
        try:
            self.float64 = parse_float(text)
        except ParseError:
            self.valid = False
            raise

    def unmarshal_text(self, text: str | bytes) -> None:
        """Decode plain text in place, same rules as unmarshal_json."""
        self.unmarshal_json(text)

    def marshal_xml(self, parent: ET.Element, tag: str) -> ET.Element | None:
        """Append a ``tag`` element holding the value to ``parent``.

        Nothing is written when NULL and None is returned.
        """
        if not self.valid:
            return None
        element = ET.SubElement(parent, tag)
        element.text = format_general(self.float64)
        return element

    def unmarshal_xml(self, element: ET.Element) -> None:
        """Decode an element's character data in place.

        Empty text and ``null`` leave the receiver unchanged.
        """
        data = _char_data(element)
        if data in {'', NULL_TEXT}:
            return
        self.float64 = parse_float(data)
        self.valid = True

    def marshal_xml_attr(self, name: str) -> Attr:
        """Return the attribute for ``name``, or the empty Attr when NULL."""
        if self.valid:
            return Attr(name, format_positional(self.float64))
        return Attr()

    def unmarshal_xml_attr(self, attr: Attr | str) -> None:
        """Decode an attribute (or bare attribute value) in place.

        Empty values and ``null`` leave the receiver unchanged.
        """
        data = (attr.value if isinstance(attr, Attr) else attr) or ''
        if data in {'', NULL_TEXT}:
            return
        self.float64 = parse_float(data)
        self.valid = True

    def __bool__(self) -> bool:
        return self.valid

    def __float__(self) -> float:
        if not self.valid:
            raise ConversionError('cannot convert NULL Float64 to float')
        return self.float64


def new_float64(value: float) -> Float64:
    """Return a valid Float64 holding ``value``.

    >>> new_float64(3.14).interface()
    3.14
    """
    return Float64.new(value)
