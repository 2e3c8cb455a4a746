"""
Leaf value formatters for XAML output.

Each formatter turns one token leaf value into its XAML text. Malformed
values never raise: the formatter records a warning on the diagnostics
collector and returns a fixed default, so a single bad token does not stop
the rest of the dictionary from being generated.
"""

from __future__ import annotations

import math
import re
from typing import Any

from ..core.diagnostics import Diagnostics

DEFAULT_DIMENSION = "16"
DEFAULT_FONT_SIZE_PX = 16.0
DEFAULT_FONT_WEIGHT = "Regular"

FONT_WEIGHTS: dict[int, str] = {
    100: "Thin",
    200: "ExtraLight",
    300: "Light",
    400: "Regular",
    500: "Medium",
    600: "SemiBold",
    700: "Bold",
    800: "ExtraBold",
    900: "Black",
}

# Lowercased, space-free weight name -> canonical XAML name
_FONT_WEIGHT_NAMES: dict[str, str] = {name.lower(): name for name in FONT_WEIGHTS.values()}

TEXT_CASES: dict[str, str] = {
    "UPPERCASE": "Upper",
    "LOWERCASE": "Lower",
    "CAPITALIZE": "Capitalize",
}

# Explicit "no transform" values from the export
_NO_TEXT_CASE = {"NONE", "ORIGINAL"}

TEXT_DECORATIONS: dict[str, str] = {
    "UNDERLINE": "Underline",
    "LINE-THROUGH": "Strikethrough",
    "OVERLINE": "Overline",
    "NONE": "None",
}

_HEX8 = re.compile(r"^#([0-9A-Fa-f]{6})([0-9A-Fa-f]{2})$")
_NUMBER = re.compile(r"^-?(\d+(\.\d*)?|\.\d+)$")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (-2.5 -> -2)."""
    return math.floor(value + 0.5)


def _parse_number(text: str) -> float | None:
    text = text.strip()
    if not _NUMBER.match(text):
        return None
    return float(text)


def format_dimension(value: Any, diagnostics: Diagnostics) -> str:
    """``"12px"`` -> ``"12"``. Anything else falls back to ``"16"``."""
    if isinstance(value, str) and value.strip().endswith("px"):
        number = value.strip()[:-2].strip()
        if _parse_number(number) is not None:
            return number
    diagnostics.warn(f"Invalid dimension value {value!r}, expected a number ending with 'px'")
    return DEFAULT_DIMENSION


def parse_font_size(dimension: str, diagnostics: Diagnostics) -> float:
    """Formatted font size (``"16"``) as a float, for unit conversions."""
    size = _parse_number(dimension)
    if size is None or size <= 0:
        diagnostics.warn(f"Font size {dimension!r} cannot be used for conversions, using 16")
        return DEFAULT_FONT_SIZE_PX
    return size


def format_letter_spacing(value: Any, font_size_px: float, diagnostics: Diagnostics) -> int:
    """Letter spacing in thousandths of the font size.

    ``"10%"`` -> 100 and, at a 16px font size, ``"1.6px"`` -> 100.
    """
    if font_size_px <= 0:
        diagnostics.warn(f"Font size {font_size_px!r} is not positive, using 16")
        font_size_px = DEFAULT_FONT_SIZE_PX

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("%"):
            percentage = _parse_number(text[:-1])
            if percentage is not None:
                return round_half_up(percentage / 100 * 1000)
        elif text.endswith("px"):
            pixels = _parse_number(text[:-2])
            if pixels is not None:
                return round_half_up(pixels / font_size_px * 1000)

    diagnostics.warn(f"Invalid letterSpacing value {value!r}, expected a value with 'px' or '%'")
    return 0


def format_font_weight(weight: Any, diagnostics: Diagnostics) -> str:
    """Numeric (100-900) or named weight -> XAML weight name."""
    if isinstance(weight, str) and _parse_number(weight) is not None:
        weight = float(weight)

    if isinstance(weight, int | float) and not isinstance(weight, bool):
        if float(weight).is_integer() and int(weight) in FONT_WEIGHTS:
            return FONT_WEIGHTS[int(weight)]
    elif isinstance(weight, str):
        name = _FONT_WEIGHT_NAMES.get("".join(weight.split()).lower())
        if name:
            return name

    diagnostics.warn(f"Unexpected fontWeight value {weight!r}, defaulting to '{DEFAULT_FONT_WEIGHT}'")
    return DEFAULT_FONT_WEIGHT


def format_text_case(value: Any, diagnostics: Diagnostics) -> str:
    """Export text case -> XAML ``TextTransform``."""
    if isinstance(value, str):
        key = value.strip().upper()
        if key in TEXT_CASES:
            return TEXT_CASES[key]
        if key in _NO_TEXT_CASE:
            return "None"
    diagnostics.warn(f"Unexpected text case value {value!r}, defaulting to 'None'")
    return "None"


def format_text_decoration(value: Any, diagnostics: Diagnostics) -> str:
    """Export text decoration -> XAML ``TextDecorations``."""
    if isinstance(value, str):
        key = value.strip().upper()
        if key in TEXT_DECORATIONS:
            return TEXT_DECORATIONS[key]
    diagnostics.warn(f"Unexpected text decoration value {value!r}, defaulting to 'None'")
    return "None"


def parse_inset(value: Any, diagnostics: Diagnostics) -> bool:
    """Shadow ``inset`` flag: a bool, or ``"true"``/``"false"`` in any case."""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    diagnostics.warn(f"Unexpected inset value {value!r}, treating as a drop shadow")
    return False


def format_color(value: Any) -> Any:
    """``#RRGGBBAA`` -> ``#AARRGGBB``; every other value is returned as is."""
    if isinstance(value, str):
        match = _HEX8.match(value.strip())
        if match:
            rgb, alpha = match.groups()
            return f"#{alpha}{rgb}"
    return value
