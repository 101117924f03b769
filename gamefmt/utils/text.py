"""
String helpers for debug overlays and level tooling.

Small conversions used around the formatters: case conversion,
comma-separated number parsing, tilemap CSV dumps and the
"(label: value | ...)" strings shown by the debugger watch panel.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union
from gamefmt.config.settings import Settings
from gamefmt.utils.formatters import format_number, round_decimal


@dataclass(frozen=True)
class LabelValuePair:
    """A labelled value shown in a debug string."""

    label: str
    value: Any


def is_null_or_empty(text: Optional[str]) -> bool:
    return text is None or len(text) == 0


def to_title_case(text: str) -> str:
    """
    Upper-case the first character of every space-separated word.

    The rest of each word is left unchanged: "hello mcFly" -> "Hello McFly".
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def to_underscore_case(text: str) -> str:
    """Lower-case `text` and replace spaces with underscores: "Hello World" -> "hello_world"."""
    return text.lower().replace(" ", "_")


def to_int_list(data: Optional[str]) -> Optional[List[int]]:
    """
    Split a comma-separated string into ints.

    Returns None for None or "". Entries may carry surrounding whitespace;
    anything else that is not an int raises ValueError.
    """
    if is_null_or_empty(data):
        return None
    return [int(item) for item in data.split(",")]


def to_float_list(data: Optional[str]) -> Optional[List[float]]:
    """Same as to_int_list, for floats."""
    if is_null_or_empty(data):
        return None
    return [float(item) for item in data.split(",")]


def array_to_csv(data: Sequence[int], width: int, invert: bool = False) -> str:
    """
    Dump a flat tile array as CSV rows.

    Values within a row are joined by ", " and rows by newlines. Only
    complete rows are written; trailing values that do not fill a row of
    `width` are ignored.

    Args:
        data: Flat row-major tile indices
        width: Number of tiles per row
        invert: Swap 0 and 1 values (other values are kept)

    Returns:
        CSV text without a trailing newline

    Raises:
        ValueError: If width is not positive

    Example:
        >>> array_to_csv([0, 1, 2, 1, 0, 3], 3)
        '0, 1, 2\\n1, 0, 3'
    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")

    rows = []
    for start in range(0, len(data) // width * width, width):
        row = data[start:start + width]
        if invert:
            row = [1 if value == 0 else 0 if value == 1 else value for value in row]
        rows.append(", ".join(str(value) for value in row))
    return "\n".join(rows)


PairLike = Union[LabelValuePair, Tuple[str, Any]]


def get_debug_string(pairs: Iterable[PairLike], precision: Optional[int] = None) -> str:
    """
    Build a "(label: value | label2: value2)" string for the watch panel.

    Float values are rounded to `precision` decimals
    (default: Settings.DEBUG_PRECISION); NaN, infinities and floats too
    large to round are shown as str() gives them. No pairs gives "()".
    """
    precision = Settings.DEBUG_PRECISION if precision is None else precision

    parts = []
    for pair in pairs:
        label, value = (pair.label, pair.value) if isinstance(pair, LabelValuePair) else pair
        # Values too large to scale by 10**precision are shown unrounded
        if isinstance(value, float) and math.isfinite(value * 10 ** precision):
            value = format_number(round_decimal(value, precision))
        parts.append(f"{label}: {value}")
    return "(" + " | ".join(parts) + ")"
