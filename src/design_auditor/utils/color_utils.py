# src/design_auditor/utils/color_utils.py
import math
import re
from typing import Tuple

from design_auditor.errors import InvalidColorError

# Exactly six hex digits; fixed length, no alternation.
_HEX_PATTERN = re.compile(r"[0-9A-Fa-f]{6}")


def round_half_up(value: float) -> int:
    """Rounds .5 away from zero for non-negative values, unlike round()."""
    return math.floor(value + 0.5)


def _channel_to_hex(value: float) -> str:
    return f"{round_half_up(value * 255):02X}"


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Converts 0-1 channel values into an upper-case '#RRGGBB' string.

    Args:
        r (float): Red channel in [0, 1].
        g (float): Green channel in [0, 1].
        b (float): Blue channel in [0, 1].

    Returns:
        str: The hex color code, e.g. '#F7F7F7'.
    """
    return f"#{_channel_to_hex(r)}{_channel_to_hex(g)}{_channel_to_hex(b)}"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Converts a '#RRGGBB' (or 'RRGGBB') string into 0-255 channel values.

    Raises:
        InvalidColorError: If the value is not exactly six hex digits.
    """
    if not isinstance(hex_color, str):
        raise InvalidColorError(f"Invalid hex color: {hex_color!r}")

    cleaned = hex_color[1:] if hex_color.startswith("#") else hex_color
    if not _HEX_PATTERN.fullmatch(cleaned):
        raise InvalidColorError(f"Invalid hex color: {hex_color}")

    return (
        int(cleaned[0:2], 16),
        int(cleaned[2:4], 16),
        int(cleaned[4:6], 16),
    )
