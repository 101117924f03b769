"""
Utility functions package.

Exposes helpers for time, money, sequence, markup and type-name formatting.
"""

from .formatters import (
    filter_digits,
    format_array,
    format_bytes,
    format_map_keys,
    format_money,
    format_ticks,
    format_time,
    format_timestamp,
    html_format,
)
from .reflection import (
    PythonTypeNameResolver,
    RegistryTypeNameResolver,
    TypeNameResolver,
    get_class_name,
    same_class_name,
)
from .text import (
    LabelValuePair,
    array_to_csv,
    get_debug_string,
    is_null_or_empty,
    to_float_list,
    to_int_list,
    to_title_case,
    to_underscore_case,
)

__all__ = [
    'filter_digits',
    'format_array',
    'format_bytes',
    'format_map_keys',
    'format_money',
    'format_ticks',
    'format_time',
    'format_timestamp',
    'html_format',
    'PythonTypeNameResolver',
    'RegistryTypeNameResolver',
    'TypeNameResolver',
    'get_class_name',
    'same_class_name',
    'LabelValuePair',
    'array_to_csv',
    'get_debug_string',
    'is_null_or_empty',
    'to_float_list',
    'to_int_list',
    'to_title_case',
    'to_underscore_case',
]
