"""
Helpers for documents that embed Float64 fields.

Float64.marshal_json and Float64.marshal_xml_attr handle a single value;
these functions plug them into the standard ``json`` and ElementTree APIs.
"""
import json
import xml.etree.ElementTree as ET
from typing import Any

from nulls.float64 import Float64

__all__ = ['Float64JSONEncoder', 'json_default', 'set_xml_attr']


def json_default(obj: Any) -> Any:
    """``default`` hook for json.dumps.

    >>> json.dumps({'price': Float64.new(2.5), 'cost': Float64()}, default=json_default)
    '{"price": 2.5, "cost": null}'
    """
    if isinstance(obj, Float64):
        return obj.interface()
    raise TypeError(f'Object of type {type(obj).__name__} is not JSON serializable')


class Float64JSONEncoder(json.JSONEncoder):
    """JSON encoder that serializes Float64 as a number or null"""

    def default(self, obj):
        if isinstance(obj, Float64):
            return obj.interface()
        return super().default(obj)


def set_xml_attr(element: ET.Element, name: str, value: Float64) -> None:
    """Set attribute ``name`` on ``element``, omitted when ``value`` is NULL.

    >>> el = ET.Element('row')
    >>> set_xml_attr(el, 'x', Float64.new(1.5))
    >>> set_xml_attr(el, 'y', Float64())
    >>> ET.tostring(el)
    b'<row x="1.5" />'
    """
    attr = value.marshal_xml_attr(name)
    if attr:
        element.set(attr.name, attr.value)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
