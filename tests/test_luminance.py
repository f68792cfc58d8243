import pytest

from contrast.design.evaluator import ContrastError
from contrast.design.luminance import (
    ColorFormatError,
    contrast_ratio,
    parse_hex,
    relative_luminance,
)


def test_relative_luminance_monotonic():
    # White > Gray > Black
    assert relative_luminance("#ffffff") > relative_luminance("#777777") > relative_luminance("#000000")


def test_relative_luminance_endpoints():
    assert relative_luminance("#000000") == 0.0
    assert abs(relative_luminance("#FFFFFF") - 1.0) < 1e-12
    assert relative_luminance("#FFFFFF") <= 1.0


def test_parse_hex_shorthand_and_case():
    assert parse_hex("#fff") == (255, 255, 255)
    assert parse_hex("  #6750a4 ") == parse_hex("#6750A4") == (0x67, 0x50, 0xA4)


@pytest.mark.parametrize("bad", ["6750A4", "#12345", "#GGGGGG", "#1234567", "", None, "#+1+2+3"])
def test_parse_hex_rejects_malformed(bad):
    with pytest.raises(ColorFormatError):
        parse_hex(bad)  # type: ignore[arg-type]


def test_color_format_error_is_contrast_error():
    assert issubclass(ColorFormatError, ContrastError)
    assert issubclass(ColorFormatError, ValueError)


def test_contrast_ratio_black_white():
    assert abs(contrast_ratio("#ffffff", "#000000") - 21.0) < 1e-9
    assert contrast_ratio("#000", "#fff") == contrast_ratio("#fff", "#000")


def test_contrast_ratio_theme_primary():
    ratio = contrast_ratio("#FFFFFF", "#6750A4")
    assert 6.3 < ratio < 6.6


def test_mid_gray_on_white_is_just_below_normal_minimum():
    ratio = contrast_ratio("#777777", "#FFFFFF")
    assert 3.0 <= ratio < 4.5
