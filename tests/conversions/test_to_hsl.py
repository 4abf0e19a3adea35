import numpy as np

from chromakit.conversions import rgb_to_hsl, np_rgb_to_hsl, hsv_to_hsl, np_hsv_to_hsl
from tests.samples import samples_rgb_hsl


def test_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h, s, l = rgb_to_hsl(r, g, b)

        assert abs(h - h_exp) < 0.5
        assert abs(s - s_exp) < 0.5
        assert abs(l - l_exp) < 0.5

def test_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    hsl = np_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert np.allclose(hsl, expected, atol=0.5)

def test_numpy_matches_scalar(rgb_grid):
    hsl = np_rgb_to_hsl(rgb_grid[..., 0], rgb_grid[..., 1], rgb_grid[..., 2])
    scalar = np.array([rgb_to_hsl(*c) for c in rgb_grid])
    assert np.allclose(hsl, scalar, atol=1e-9)

def test_gray_is_achromatic():
    for level in range(0, 256, 15):
        h, s, l = rgb_to_hsl(level, level, level)
        assert (h, s) == (0, 0)
        assert abs(l - level / 255 * 100) < 1e-9

def test_hsv_to_hsl_numpy_matches_scalar():
    hsv = np.array([(0, 100, 100), (217, 73, 96), (60, 0, 100), (0, 0, 0), (300, 100, 50)], dtype=float)
    result = np_hsv_to_hsl(hsv[..., 0], hsv[..., 1], hsv[..., 2])
    expected = np.array([hsv_to_hsl(*c) for c in hsv])
    assert np.allclose(result, expected)
