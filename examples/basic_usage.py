"""Basic chromakit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import random

import numpy as np

from chromakit import (
    RGB,
    FormatType,
    contrast_report,
    format_color,
    generate_harmonies,
    np_convert,
    parse_color,
)


def demonstrate_colors() -> None:
    # Construct typed colors and convert between spaces.
    accent = RGB.from_hex("#4287f5")
    print("HEX -> RGB:", accent)
    print("RGB -> HSV (int):", accent.convert("hsv"))
    print("RGB -> HSL (float):", accent.convert("hsl", FormatType.FLOAT))
    print("RGB -> LCH:", accent.convert("lch"))

    # Every record formats into its own notation, and parses back.
    for space in ("rgb", "hsv", "hsl", "cmyk", "lab", "lch"):
        text = format_color(accent.convert(space))
        print(f"{space:>4}: {text:<28} -> {parse_color(text)}")


def demonstrate_contrast() -> None:
    for background, result in contrast_report(RGB(66, 135, 245)).items():
        print(f"on {background}: {result.ratio:.2f}:1 ({result.grade.value})")


def demonstrate_harmonies() -> None:
    # Seeded so the jitter is reproducible between runs.
    palettes = generate_harmonies(
        RGB(66, 135, 245),
        enforce_contrast=True,
        is_dark_theme=True,
        rng=random.Random(42),
    )
    for name, colors in palettes.items():
        print(f"{name.value:>18}:", " ".join(c.to_hex() for c in colors))


def demonstrate_arrays() -> None:
    # Vectorized conversion over an image-like array.
    image = np.random.default_rng(0).integers(0, 256, size=(2, 3, 3))
    lab = np_convert(image, "rgb", "lab")
    back = np_convert(lab, "lab", "rgb", output_type=FormatType.INT)
    print("LAB image shape:", lab.shape)
    print("Round trip exact:", bool(np.all(back == image)))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_contrast()
    demonstrate_harmonies()
    demonstrate_arrays()
