"""
FormatUtils facade.

Collects the formatting helpers in one object so game code can pass a
single utility around. The formatters are static; the class-name helpers
use the resolver the instance was created with.
"""

from typing import Any, Optional
from gamefmt.utils import formatters, reflection, text
from gamefmt.utils.reflection import TypeNameResolver


class FormatUtils:
    """
    Formatting helpers for debug output and UI overlays.

    Attributes:
        resolver (TypeNameResolver): Name source for get_class_name / same_class_name

    Example:
        >>> utils = FormatUtils()
        >>> utils.format_money(1234.5)
        '1,234.50'
        >>> utils.get_class_name(utils, simple=True)
        'FormatUtils'
    """

    format_ticks = staticmethod(formatters.format_ticks)
    format_time = staticmethod(formatters.format_time)
    format_array = staticmethod(formatters.format_array)
    format_map_keys = staticmethod(formatters.format_map_keys)
    format_money = staticmethod(formatters.format_money)
    format_bytes = staticmethod(formatters.format_bytes)
    format_timestamp = staticmethod(formatters.format_timestamp)
    filter_digits = staticmethod(formatters.filter_digits)
    html_format = staticmethod(formatters.html_format)

    is_null_or_empty = staticmethod(text.is_null_or_empty)
    to_title_case = staticmethod(text.to_title_case)
    to_underscore_case = staticmethod(text.to_underscore_case)
    to_int_list = staticmethod(text.to_int_list)
    to_float_list = staticmethod(text.to_float_list)
    array_to_csv = staticmethod(text.array_to_csv)
    get_debug_string = staticmethod(text.get_debug_string)

    def __init__(self, resolver: Optional[TypeNameResolver] = None) -> None:
        """
        Initialize the facade with a type-name resolver.

        Args:
            resolver: Host name source (default: PythonTypeNameResolver)
        """
        self.resolver = resolver if resolver is not None else reflection.DEFAULT_RESOLVER

    def get_class_name(self, obj: Any, simple: bool = False) -> Optional[str]:
        return reflection.get_class_name(obj, simple, self.resolver)

    def same_class_name(self, obj1: Any, obj2: Any, simple: bool = True) -> bool:
        return reflection.same_class_name(obj1, obj2, simple, self.resolver)
