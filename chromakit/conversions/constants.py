"""Colorimetric constants for sRGB / D65 and WCAG 2.x."""
import numpy as np

# sRGB transfer function
SRGB_TO_LINEAR_TH = 0.04045
LINEAR_TO_SRGB_TH = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_OFFSET = 0.055
SRGB_SCALE = 1.055
SRGB_GAMMA = 2.4

# Linear sRGB (0..100) -> CIE XYZ, D65
M_RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
])

# CIE XYZ -> linear sRGB (0..100), D65
M_XYZ_TO_RGB = np.array([
    [3.2406, -1.5372, -0.4986],
    [-0.9689, 1.8758, 0.0415],
    [0.0557, -0.2040, 1.0570],
])

# D65 reference white
XYZ_REF_WHITE = np.array([95.047, 100.000, 108.883])

# CIE standard
LAB_EPSILON = 0.008856
LAB_KAPPA = 903.3

# WCAG 2.x relative luminance
WCAG_LINEAR_TH = 0.03928
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])
WCAG_LUMINANCE_OFFSET = 0.05

WCAG_AAA = 7.0
WCAG_AA = 4.5
WCAG_AA_LARGE = 3.0
