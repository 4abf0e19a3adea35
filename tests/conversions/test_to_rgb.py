import numpy as np

from chromakit.conversions import (
    hsv_to_rgb, np_hsv_to_rgb, hsl_to_rgb, np_hsl_to_rgb, cmyk_to_rgb, np_cmyk_to_rgb,
    rgb_to_hsv, rgb_to_hsl, rgb_to_cmyk,
)
from tests.samples import samples_rgb_hsv, samples_rgb_hsl, samples_rgb_cmyk, pure_colors


def test_hsv_to_rgb_pure_colors():
    for rgb in pure_colors:
        r, g, b = hsv_to_rgb(*samples_rgb_hsv[rgb])
        assert np.allclose((r, g, b), rgb)

def test_hsl_to_rgb_pure_colors():
    for rgb in pure_colors:
        r, g, b = hsl_to_rgb(*samples_rgb_hsl[rgb])
        assert np.allclose((r, g, b), rgb)

def test_cmyk_to_rgb_pure_colors():
    for rgb in pure_colors:
        r, g, b = cmyk_to_rgb(*samples_rgb_cmyk[rgb])
        assert np.allclose((r, g, b), rgb)

def test_rounded_samples_land_close():
    # integer HSV/HSL/CMYK samples are quantized, so the way back is only approximate
    for rgb, hsv in samples_rgb_hsv.items():
        assert np.allclose(hsv_to_rgb(*hsv), rgb, atol=2.5)
    for rgb, hsl in samples_rgb_hsl.items():
        assert np.allclose(hsl_to_rgb(*hsl), rgb, atol=2.5)
    for rgb, cmyk in samples_rgb_cmyk.items():
        assert np.allclose(cmyk_to_rgb(*cmyk), rgb, atol=2.5)

def test_hue_wraps():
    assert np.allclose(hsv_to_rgb(480, 100, 100), hsv_to_rgb(120, 100, 100))
    assert np.allclose(hsv_to_rgb(-120, 100, 100), hsv_to_rgb(240, 100, 100))
    assert np.allclose(hsl_to_rgb(720, 100, 50), (255, 0, 0))
    assert np.allclose(hsl_to_rgb(-60, 100, 50), (255, 0, 255))

def test_out_of_range_channels_are_clamped():
    assert np.allclose(hsv_to_rgb(0, 150, 120), (255, 0, 0))
    assert np.allclose(hsl_to_rgb(0, -10, 50), hsl_to_rgb(0, 0, 50))
    assert np.allclose(cmyk_to_rgb(-5, 0, 0, 0), (255, 255, 255))
    assert np.allclose(cmyk_to_rgb(0, 0, 0, 200), (0, 0, 0))

def test_gray_from_zero_saturation():
    for level in (0, 25, 50, 75, 100):
        expected = level / 100 * 255
        assert np.allclose(hsv_to_rgb(123, 0, level), (expected,) * 3)
        assert np.allclose(hsl_to_rgb(321, 0, level), (expected,) * 3)

def test_numpy_matches_scalar(coarse_rgb):
    hsv = np.array([rgb_to_hsv(*c) for c in coarse_rgb])
    hsl = np.array([rgb_to_hsl(*c) for c in coarse_rgb])
    cmyk = np.array([rgb_to_cmyk(*c) for c in coarse_rgb])

    assert np.allclose(
        np_hsv_to_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2]),
        [hsv_to_rgb(*c) for c in hsv],
    )
    assert np.allclose(
        np_hsl_to_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2]),
        [hsl_to_rgb(*c) for c in hsl],
    )
    assert np.allclose(
        np_cmyk_to_rgb(cmyk[..., 0], cmyk[..., 1], cmyk[..., 2], cmyk[..., 3]),
        [cmyk_to_rgb(*c) for c in cmyk],
    )
