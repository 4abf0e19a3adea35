import pytest

import chromakit
from chromakit import engine
from chromakit import RGB, FloatRGB, HSV, HSL, CMYK, LAB, LCH, FormatType


def test_hex_functions():
    assert engine.hex_to_rgb("#4287f5") == RGB(66, 135, 245)
    assert engine.hex_to_rgb("#4287f") is None
    assert engine.rgb_to_hex(RGB(66, 135, 245)) == "#4287f5"

def test_pairs_return_records():
    blue = RGB(66, 135, 245)
    assert engine.rgb_to_hsv(blue) == HSV(217, 73, 96)
    assert engine.rgb_to_hsl(blue) == HSL(217, 90, 61)
    assert engine.rgb_to_cmyk(blue) == CMYK(73, 45, 0, 4)
    assert isinstance(engine.rgb_to_lab(blue), LAB)
    assert isinstance(engine.rgb_to_lch(blue), LCH)

def test_pairs_invert():
    blue = RGB(66, 135, 245)
    assert engine.lab_to_rgb(engine.rgb_to_lab(blue)) == blue
    assert engine.lch_to_rgb(engine.rgb_to_lch(blue)) == blue
    for color in [RGB(255, 0, 0), RGB(0, 255, 255), RGB(0, 0, 0)]:
        assert engine.hsv_to_rgb(engine.rgb_to_hsv(color)) == color
        assert engine.hsl_to_rgb(engine.rgb_to_hsl(color)) == color
        assert engine.cmyk_to_rgb(engine.rgb_to_cmyk(color)) == color

def test_contrast_reexports():
    assert engine.contrast_ratio(RGB(0, 0, 0), RGB(255, 255, 255)) == pytest.approx(21)
    assert engine.relative_luminance(RGB(255, 255, 255)) == pytest.approx(1)

def test_package_exports():
    for name in chromakit.__all__:
        assert hasattr(chromakit, name), name
    assert chromakit.__version__ == "1.0.0"

def test_float_inputs_give_integer_records():
    assert engine.hsv_to_rgb(RGB(66, 135, 245).convert("hsv", FormatType.FLOAT)) == RGB(66, 135, 245)
    assert isinstance(engine.rgb_to_hsl(FloatRGB(66.4, 135, 245)), HSL)
    assert isinstance(engine.lab_to_rgb(RGB(66, 135, 245).convert("lab")), RGB)

def test_integer_round_trip_can_drift():
    # whole-percent HSL cannot hold every RGB value
    back = engine.hsl_to_rgb(engine.rgb_to_hsl(RGB(0, 0, 125)))
    assert back != RGB(0, 0, 125)
    assert all(abs(a - b) <= 3 for a, b in zip(back, (0, 0, 125)))
