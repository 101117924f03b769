"""
String formatting helpers for 2D game debugging and UI overlays.

Time, money, byte-size and timestamp display, sequence and key joins,
<font>-tag wrapping, digit filtering and class-name introspection.
"""

from .format_utils import FormatUtils
from .utils import (
    filter_digits,
    format_array,
    format_bytes,
    format_map_keys,
    format_money,
    format_ticks,
    format_time,
    format_timestamp,
    get_class_name,
    html_format,
    same_class_name,
)

__version__ = "0.1.0"

__all__ = [
    'FormatUtils',
    'filter_digits',
    'format_array',
    'format_bytes',
    'format_map_keys',
    'format_money',
    'format_ticks',
    'format_time',
    'format_timestamp',
    'get_class_name',
    'html_format',
    'same_class_name',
]
