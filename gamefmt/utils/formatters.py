"""
Utility functions for time, money, sequence and markup formatting.

- format_ticks / format_time: elapsed-time display for debug overlays.
- format_money: thousands-grouped amounts with truncated (not rounded) cents.
- format_array / format_map_keys: comma-separated joins for watch windows.
- html_format: <font>-tag wrapping for HTML-capable text fields.
- format_bytes / format_timestamp: memory and wall-clock display.

Every function is pure and returns a new string. Output formats are fixed
and intentionally match the legacy conventions of the game framework,
including its quirks (see format_money).
"""

import logging
import math
from datetime import datetime
from typing import Any, Iterable, Mapping, Optional, Union
from gamefmt.config.settings import Settings

logger = logging.getLogger(__name__)

Number = Union[int, float]

BYTE_UNITS = ("Bytes", "kB", "MB", "GB", "TB", "PB")


def format_number(value: Number) -> str:
    """Render a number the way the framework does: integral floats lose their '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def round_decimal(value: Number, precision: int) -> float:
    """
    Round to `precision` decimal places, halves rounded up.

    Unlike the built-in round(), ties are not rounded to even:
    round_decimal(0.125, 2) -> 0.13.
    """
    mult = 10 ** precision
    return math.floor(value * mult + 0.5) / mult


def format_ticks(start: Number, end: Number) -> str:
    """
    Format the time between two tick values (milliseconds) as seconds.

    The order of the arguments does not matter.

    Example:
      format_ticks(0, 2500)    -> "2.5s"
      format_ticks(5000, 1000) -> "4s"
    """
    return format_number(abs(end - start) / 1000) + "s"


def format_time(seconds: Number, show_ms: bool = False) -> str:
    """
    Format a duration in seconds as "M:SS" or "M:SS.CC".

    Minutes are not padded and are not wrapped into hours. With show_ms,
    the fractional part is shown as centiseconds, truncated.

    Negative durations are not special-cased: they go through the same
    floor arithmetic, e.g. -1 -> "-1:59".

    Args:
        seconds: Duration in seconds (may be fractional)
        show_ms: Append ".CC" centiseconds when True

    Returns:
        Formatted duration string

    Raises:
        ValueError / OverflowError: For NaN or infinite input

    Example:
        >>> format_time(63.256, True)
        '1:03.25'
        >>> format_time(3661.5, True)
        '61:01.50'
    """
    whole = math.floor(seconds)
    result = f"{math.floor(seconds / 60)}:{whole % 60:02d}"
    if show_ms:
        centis = int((seconds - whole) * 100)
        result += f".{centis:02d}"
    return result


def format_array(values: Optional[Iterable[Any]]) -> str:
    """Join the string forms of `values` with ", "; empty or None gives ""."""
    if not values:
        return ""
    return ", ".join(str(value) for value in values)


def format_map_keys(mapping: Optional[Mapping[Any, Any]]) -> str:
    """
    Join the keys of a mapping with ", ", in the mapping's own order.

    Values are ignored. An empty or None mapping gives "".
    """
    if not mapping:
        return ""
    result = ""
    for key in mapping:
        result += f"{key}, "
    # Drop the trailing separator
    return result[:-2]


def format_money(amount: Number, show_decimal: bool = True, english_style: bool = True) -> str:
    """
    Format an amount with thousands groups and optional cents.

    English style uses "," between groups and "." before cents
    (1,234,567.89); the other style swaps them (1.234.567,89).

    Cents are truncated, not rounded: floor(amount*100) - floor(amount)*100.
    Binary float error therefore shows up as a lost cent for some inputs,
    e.g. format_money(1.005) -> "1.00".

    The integer part of an amount below 1 renders as an empty string,
    so format_money(0.5) -> ".50" and format_money(0.5, False) -> "".
    This matches the framework's long-standing output and is kept as is.

    Args:
        amount: Non-negative amount
        show_decimal: Append the 2-digit cents part
        english_style: Choose "," / "." separators (False swaps them)

    Returns:
        Formatted amount string

    Raises:
        ValueError / OverflowError: For NaN or infinite amounts
    """
    group_sep, decimal_sep = (",", ".") if english_style else (".", ",")

    remaining = math.floor(amount)
    groups = []
    while remaining > 0:
        remaining, group = divmod(remaining, 1000)
        # Inner groups are zero-padded, the leading one is not
        groups.insert(0, f"{group:03d}" if remaining > 0 else str(group))

    result = group_sep.join(groups)
    if show_decimal:
        cents = math.floor(amount * 100) - math.floor(amount) * 100
        result += f"{decimal_sep}{cents:02d}"
    return result


def format_bytes(num_bytes: Number, precision: int = 2) -> str:
    """
    Format a byte count with the largest fitting binary unit.

    Example:
      format_bytes(500)     -> "500 Bytes"
      format_bytes(1536)    -> "1.5 kB"
      format_bytes(1048576) -> "1 MB"
    """
    value = num_bytes
    unit = 0
    while value >= 1024 and unit < len(BYTE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{format_number(round_decimal(value, precision))} {BYTE_UNITS[unit]}"


def filter_digits(text: str) -> str:
    """Keep only the ASCII digits 0-9 of `text`, in order."""
    return "".join(ch for ch in text if "0" <= ch <= "9")


def html_format(
    text: str,
    size: int = 12,
    color: str = "FFFFFF",
    bold: bool = False,
    italic: bool = False,
    underlined: bool = False
) -> str:
    """
    Wrap text in a <font> tag, optionally inside <u>, <i> and <b> tags.

    Style tags nest with bold outermost and underline innermost:
    <b><i><u><font size='12' color='#FFFFFF'>text</font></u></i></b>

    Args:
        text: Text to wrap (not escaped)
        size: Font size attribute
        color: Hex color without the leading '#'
        bold: Add <b> tag
        italic: Add <i> tag
        underlined: Add <u> tag

    Returns:
        HTML fragment string
    """
    result = f"<font size='{size}' color='#{color}'>{text}</font>"
    if underlined:
        result = f"<u>{result}</u>"
    if italic:
        result = f"<i>{result}</i>"
    if bold:
        result = f"<b>{result}</b>"
    return result


def format_timestamp(
    ticks_ms: Optional[Number],
    fmt: Optional[str] = None,
    default: str = "unknown date"
) -> str:
    """
    Format milliseconds since the epoch in the configured display timezone.

    - The timezone comes from Settings.DISPLAY_TZ (pytz, UTC by default).
    - fmt defaults to Settings.TIMESTAMP_FORMAT.
    - Values that cannot be converted (None, out of range, wrong type)
      give `default` instead of raising.
    """
    if ticks_ms is None:
        return default
    try:
        dt = datetime.fromtimestamp(ticks_ms / 1000, tz=Settings.DISPLAY_TZ)
        return dt.strftime(fmt or Settings.TIMESTAMP_FORMAT)
    except (ValueError, TypeError, OSError, OverflowError) as e:
        logger.debug(f"Failed to format timestamp '{ticks_ms}': {e}")
        return default
