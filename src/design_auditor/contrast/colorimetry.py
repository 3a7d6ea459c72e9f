# src/design_auditor/contrast/colorimetry.py
"""
WCAG 2.x relative luminance and contrast ratio.

All functions are pure and operate on Color objects with 0-1 channels.
"""
from typing import Dict, Optional, Tuple

from design_auditor.tree.core import Color
from .models import ColorSample, ContrastResult, LevelCompliance, WcagCompliance

LINEAR_THRESHOLD = 0.03928
MIN_RATIO = 1.0
MAX_RATIO = 21.0

# (normal text, large text) minimum ratios; None = no requirement.
WCAG_THRESHOLDS: Dict[str, Tuple[Optional[float], Optional[float]]] = {
    "A": (None, None),
    "AA": (4.5, 3.0),
    "AAA": (7.0, 4.5),
}


def srgb_to_linear(value: float) -> float:
    """Linearizes one sRGB channel in [0, 1]."""
    if value <= LINEAR_THRESHOLD:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(color: Color) -> float:
    return (
        0.2126 * srgb_to_linear(color.r)
        + 0.7152 * srgb_to_linear(color.g)
        + 0.0722 * srgb_to_linear(color.b)
    )


def contrast_ratio(c1: Color, c2: Color) -> float:
    """
    Unrounded contrast ratio. Symmetric in its arguments and
    clamped to [1, 21] against floating point drift.
    """
    l1 = relative_luminance(c1)
    l2 = relative_luminance(c2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    ratio = (lighter + 0.05) / (darker + 0.05)
    return min(MAX_RATIO, max(MIN_RATIO, ratio))


def _meets(ratio: float, threshold: Optional[float]) -> Optional[bool]:
    if threshold is None:
        return None
    return ratio >= threshold


def classify(ratio: float) -> WcagCompliance:
    """Maps a contrast ratio onto the WCAG_THRESHOLDS table."""
    levels = {
        level: LevelCompliance(
            normal_text=_meets(ratio, normal),
            large_text=_meets(ratio, large)
        )
        for level, (normal, large) in WCAG_THRESHOLDS.items()
    }
    return WcagCompliance(**levels)


def contrast(c1: Color, c2: Color) -> ContrastResult:
    """
    Compares two colors.

    Args:
        c1 (Color): Typically the text color.
        c2 (Color): Typically the background color.

    Returns:
        ContrastResult: Ratio rounded to 2 decimals, luminances rounded to 3,
        and compliance evaluated on the unrounded ratio.
    """
    ratio = contrast_ratio(c1, c2)
    return ContrastResult(
        contrast_ratio=round(ratio, 2),
        color1=ColorSample(hex=c1.hex, luminance=round(relative_luminance(c1), 3)),
        color2=ColorSample(hex=c2.hex, luminance=round(relative_luminance(c2), 3)),
        wcag=classify(ratio),
    )


def contrast_hex(color1: str, color2: str) -> ContrastResult:
    """Same as contrast() for '#RRGGBB' literals. Raises InvalidColorError."""
    return contrast(Color.from_hex(color1), Color.from_hex(color2))
