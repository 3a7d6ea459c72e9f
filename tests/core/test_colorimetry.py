# tests/core/test_colorimetry.py
import pytest

from design_auditor.contrast.colorimetry import (
    classify,
    contrast,
    contrast_hex,
    contrast_ratio,
    relative_luminance,
    srgb_to_linear,
)
from design_auditor.errors import InvalidColorError
from design_auditor.tree.core import Color

BLACK = Color.from_hex("#000000")
WHITE = Color.from_hex("#FFFFFF")

SAMPLE_COLORS = [
    "#000000", "#FFFFFF", "#767676", "#777777", "#F7F7F7",
    "#FF0000", "#00FF00", "#0000FF", "#1A73E8", "#333333",
]


def test_srgb_to_linear_piecewise():
    """The linear segment applies at and below 0.03928, the power law above."""
    assert srgb_to_linear(0.0) == 0.0
    assert srgb_to_linear(0.03928) == pytest.approx(0.03928 / 12.92)
    assert srgb_to_linear(1.0) == pytest.approx(1.0)


def test_relative_luminance_extremes():
    assert relative_luminance(BLACK) == 0.0
    assert relative_luminance(WHITE) == pytest.approx(1.0)


def test_black_on_white_is_maximum():
    result = contrast(BLACK, WHITE)
    assert result.contrast_ratio == 21.0
    assert result.wcag.AA.normal_text is True
    assert result.wcag.AAA.normal_text is True


@pytest.mark.parametrize("hex_color", SAMPLE_COLORS)
def test_identical_colors_have_ratio_one(hex_color):
    color = Color.from_hex(hex_color)
    assert contrast(color, color).contrast_ratio == 1.0


@pytest.mark.parametrize("first", SAMPLE_COLORS)
def test_ratio_is_symmetric_and_bounded(first):
    for second in SAMPLE_COLORS:
        a, b = Color.from_hex(first), Color.from_hex(second)
        forward = contrast(a, b).contrast_ratio
        assert forward == contrast(b, a).contrast_ratio
        assert 1.0 <= forward <= 21.0
        assert 1.0 <= contrast_ratio(a, b) <= 21.0


def test_aa_boundary_around_4_5():
    """#767676 is the lightest grey that passes AA on white; #777777 fails it."""
    passing = contrast_hex("#767676", "#FFFFFF")
    failing = contrast_hex("#777777", "#FFFFFF")

    assert passing.contrast_ratio == 4.54
    assert passing.wcag.AA.normal_text is True

    assert failing.contrast_ratio == 4.48
    assert failing.wcag.AA.normal_text is False
    assert failing.wcag.AA.large_text is True
    assert failing.wcag.AAA.large_text is False


@pytest.mark.parametrize("ratio", [1.0, 3.0, 4.5, 7.0, 21.0])
def test_level_a_is_always_null(ratio):
    wcag = classify(ratio)
    assert wcag.A.normal_text is None
    assert wcag.A.large_text is None


def test_classification_table_thresholds():
    wcag = classify(4.5)
    assert wcag.AA.normal_text is True
    assert wcag.AA.large_text is True
    assert wcag.AAA.normal_text is False
    assert wcag.AAA.large_text is True

    wcag = classify(2.99)
    assert wcag.AA.large_text is False


def test_contrast_reports_hex_and_luminance():
    result = contrast(Color.from_hex("#000000"), Color.from_hex("#F7F7F7"))
    assert result.color1.hex == "#000000"
    assert result.color1.luminance == 0.0
    assert result.color2.hex == "#F7F7F7"
    assert result.color2.luminance == 0.93


def test_contrast_hex_rejects_malformed_input():
    with pytest.raises(InvalidColorError):
        contrast_hex("#FFF", "#000000")
