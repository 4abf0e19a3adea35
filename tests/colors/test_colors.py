import warnings

import pytest

from chromakit.colors import (
    RGB, FloatRGB, HSV, FloatHSV, HSL, CMYK, LAB, LCH,
    ColorRGBINT, ColorHSVINT, ColorLCH, get_color_class, convert_color,
)
from chromakit.errors import InvalidFormatError, OutOfDomainWarning
from chromakit.types.format_type import FormatType


def test_constructor_forms():
    assert RGB(66, 135, 245) == RGB((66, 135, 245)) == RGB([66, 135, 245])
    assert RGB(66, 135, 245).value == (66, 135, 245)
    assert RGB(HSV(217, 73, 96)) == HSV(217, 73, 96).convert("rgb")

def test_named_channels():
    blue = RGB(66, 135, 245)
    assert (blue.r, blue.g, blue.b) == (66, 135, 245)
    hsl = HSL(217, 90, 61)
    assert (hsl.h, hsl.s, hsl.l) == (217, 90, 61)
    cmyk = CMYK(73, 45, 0, 4)
    assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (73, 45, 0, 4)
    with pytest.raises(AttributeError):
        blue.h

def test_sequence_protocol():
    color = RGB(1, 2, 3)
    assert list(color) == [1, 2, 3]
    assert len(color) == 3
    assert color[1] == 2
    assert len(CMYK(0, 0, 0, 0)) == 4

def test_records_are_immutable():
    color = RGB(66, 135, 245)
    with pytest.raises(AttributeError):
        color.r = 0
    with pytest.raises(AttributeError):
        color._value = (0, 0, 0)
    with pytest.raises(AttributeError):
        color.extra = 1

def test_equality_and_hash():
    assert RGB(1, 2, 3) == RGB(1, 2, 3)
    assert RGB(1, 2, 3) != FloatRGB(1, 2, 3)
    assert RGB(1, 2, 3) != HSV(1, 2, 3)
    assert len({RGB(1, 2, 3), RGB(1, 2, 3), RGB(3, 2, 1)}) == 2

def test_integer_records_round_half_up():
    assert RGB(0.5, 1.5, 2.49).value == (1, 2, 2)
    assert HSV(359.6, 50, 50).h == 0

def test_float_records_keep_precision():
    assert FloatRGB(0.5, 1.25, 2).value == (0.5, 1.25, 2.0)

def test_hue_wraps_silently():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert HSV(450, 50, 50).h == 90
        assert HSL(-30, 50, 50).h == 330
        assert LCH(50, 20, 725).h == pytest.approx(5)

def test_out_of_range_channels_warn_and_clamp():
    with pytest.warns(OutOfDomainWarning):
        assert RGB(300, -4, 12).value == (255, 0, 12)
    with pytest.warns(OutOfDomainWarning):
        assert HSV(10, 120, 50).s == 100
    with pytest.warns(OutOfDomainWarning):
        assert LAB(120, 5, 5).l == 100
    with pytest.warns(OutOfDomainWarning):
        assert LCH(50, -1, 0).c == 0

def test_nan_becomes_zero_with_warning():
    with pytest.warns(OutOfDomainWarning):
        assert RGB(float("nan"), 1, 2).value == (0, 1, 2)

def test_lab_channels_are_unbounded():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert LAB(50, -150, 200).value == (50.0, -150.0, 200.0)

def test_bad_input_types():
    with pytest.raises(ValueError):
        RGB(1, 2)
    with pytest.raises(TypeError):
        RGB("abc")
    with pytest.raises(TypeError):
        RGB(1, "x", 3)

def test_from_hex():
    assert RGB.from_hex("#4287f5") == RGB(66, 135, 245)
    assert RGB.from_hex("4287F5") == RGB(66, 135, 245)
    assert RGB.from_hex("#fff") == RGB(255, 255, 255)
    with pytest.raises(InvalidFormatError):
        RGB.from_hex("#4287f")

def test_to_hex():
    assert RGB(66, 135, 245).to_hex() == "#4287f5"
    assert RGB(66, 135, 245).to_hex(uppercase=True) == "#4287F5"
    assert HSL(0, 100, 50).to_hex() == "#ff0000"

def test_repr():
    assert repr(RGB(66, 135, 245)) == "ColorRGBINT(r=66, g=135, b=245)"
    assert repr(RGB(66, 135, 245).convert("hsv")) == "ColorHSVINT(h=217, s=73, v=96)"

def test_convert_targets():
    blue = RGB(66, 135, 245)
    assert blue.convert("hsv") == HSV(217, 73, 96)
    assert blue.convert("hsl") == HSL(217, 90, 61)
    assert blue.convert("cmyk") == CMYK(73, 45, 0, 4)
    assert isinstance(blue.convert("hsv", FormatType.FLOAT), FloatHSV)
    assert blue.convert("rgb") is blue

def test_lab_lch_targets_are_float_records():
    blue = RGB(66, 135, 245)
    assert isinstance(blue.convert("lab"), LAB)
    assert isinstance(blue.convert("lch", FormatType.INT), ColorLCH)
    # leaving LAB/LCH lands on integer records by default
    assert isinstance(blue.convert("lch").convert("rgb"), ColorRGBINT)
    assert blue.convert("lch").convert("rgb") == blue

def test_has_hue():
    assert HSV(0, 0, 0).has_hue
    assert LCH(0, 0, 0).has_hue
    assert not RGB(0, 0, 0).has_hue
    assert not LAB(0, 0, 0).has_hue

def test_get_color_class():
    assert get_color_class("rgb", FormatType.INT) is ColorRGBINT
    assert get_color_class("HSV", "int") is ColorHSVINT
    assert get_color_class("lch", FormatType.FLOAT) is ColorLCH
    with pytest.raises(ValueError):
        get_color_class("lab", FormatType.INT)
    with pytest.raises(ValueError):
        get_color_class("xyz", FormatType.FLOAT)

def test_convert_color():
    assert convert_color((66, 135, 245), "rgb") == RGB(66, 135, 245)
    assert convert_color(RGB(66, 135, 245), "hsl") == HSL(217, 90, 61)
    assert isinstance(convert_color((50, 10, 10), "lab", FormatType.INT), LAB)
