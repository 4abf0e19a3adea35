import math

import numpy as np

from chromakit.conversions import (
    rgb_to_lab, np_rgb_to_lab, lab_to_rgb, np_lab_to_rgb,
    lab_to_lch, lch_to_lab, rgb_to_lch, lch_to_rgb, np_rgb_to_lch,
    rgb_to_xyz, xyz_to_rgb,
)
from chromakit.conversions.constants import XYZ_REF_WHITE
from tests.samples import samples_rgb_lab


def test_rgb_to_lab():
    for rgb, expected in samples_rgb_lab.items():
        assert np.allclose(rgb_to_lab(*rgb), expected, atol=0.5), rgb

def test_white_maps_to_reference_white():
    x, y, z = rgb_to_xyz(255, 255, 255)
    assert np.allclose((x, y, z), XYZ_REF_WHITE, atol=0.05)

def test_xyz_round_trip():
    for rgb in [(0, 0, 0), (255, 255, 255), (66, 135, 245), (12, 200, 90), (3, 3, 3)]:
        assert np.allclose(xyz_to_rgb(*rgb_to_xyz(*rgb)), rgb, atol=0.05)

def test_grays_are_neutral():
    for level in range(0, 256, 17):
        l, a, b = rgb_to_lab(level, level, level)
        assert abs(a) < 0.5
        assert abs(b) < 0.5
        assert rgb_to_lch(level, level, level)[1] < 0.5

def test_lightness_is_monotonic_on_grays():
    lightness = [rgb_to_lab(v, v, v)[0] for v in range(0, 256, 5)]
    assert lightness == sorted(lightness)

def test_lab_round_trip(coarse_rgb):
    for rgb in coarse_rgb:
        assert np.allclose(lab_to_rgb(*rgb_to_lab(*rgb)), rgb, atol=0.5), rgb

def test_lab_to_rgb_clamps_out_of_gamut():
    r, g, b = lab_to_rgb(50, 200, -200)
    assert all(0 <= v <= 255 for v in (r, g, b))

def test_lch_is_polar_lab():
    l, c, h = lab_to_lch(50, 30, 40)
    assert l == 50
    assert math.isclose(c, 50)
    assert math.isclose(h, math.degrees(math.atan2(40, 30)))

    assert np.allclose(lch_to_lab(50, 50, 90), (50, 0, 50), atol=1e-9)

def test_lch_hue_is_normalized():
    # negative b puts atan2 below zero
    l, c, h = lab_to_lch(40, 10, -10)
    assert math.isclose(h, 315)
    assert np.allclose(lch_to_lab(40, 20, -45), lch_to_lab(40, 20, 315))

def test_lch_round_trip(coarse_rgb):
    for rgb in coarse_rgb:
        assert np.allclose(lch_to_rgb(*rgb_to_lch(*rgb)), rgb, atol=0.5), rgb

def test_numpy_matches_scalar(rgb_grid):
    lab = np_rgb_to_lab(rgb_grid[..., 0], rgb_grid[..., 1], rgb_grid[..., 2])
    assert np.allclose(lab, [rgb_to_lab(*c) for c in rgb_grid], atol=1e-9)

    back = np_lab_to_rgb(lab[..., 0], lab[..., 1], lab[..., 2])
    assert np.allclose(back, rgb_grid, atol=0.5)

    lch = np_rgb_to_lch(rgb_grid[..., 0], rgb_grid[..., 1], rgb_grid[..., 2])
    scalar = np.array([rgb_to_lch(*c) for c in rgb_grid])
    assert np.allclose(lch[..., :2], scalar[..., :2], atol=1e-9)
    # hue is arbitrary for neutral colors
    chromatic = scalar[..., 1] > 1
    assert np.allclose(lch[chromatic, 2], scalar[chromatic, 2], atol=1e-6)
