from .background import BackgroundResolver, rects_intersect, resolve_background
from .colorimetry import (
    WCAG_THRESHOLDS,
    classify,
    contrast,
    contrast_hex,
    contrast_ratio,
    relative_luminance,
    srgb_to_linear,
)
from .models import (
    ColorSample,
    ContrastFinding,
    ContrastReport,
    ContrastResult,
    LevelCompliance,
    WcagCompliance,
)
from .report import ReportBuilder, build_contrast_report
