"""
Nullable values that round-trip across database drivers, JSON, text and XML.

Float64 holds an optional 64-bit float:
- Float64.new(2.5) / new_float64(2.5) is a present value
- Float64() is NULL
"""
__version__ = '0.1.0'

from nulls.adapters import AdapterRegistry, Float64Dumper, Float64Loader
from nulls.adapters import Float64Type, adapt_float64, convert_float64
from nulls.adapters import get_adapter_registry
from nulls.encoding import Float64JSONEncoder, json_default, set_xml_attr
from nulls.exceptions import ConversionError, MarshalError, NullsError
from nulls.exceptions import ParseError
from nulls.float64 import Attr, Float64, new_float64
from nulls.options import NullsOptions

adapter_registry = get_adapter_registry()
