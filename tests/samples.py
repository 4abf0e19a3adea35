# Reference values, integer outputs (round half up)

samples_rgb_hex = {
    (0, 0, 0): "#000000",
    (255, 255, 255): "#ffffff",
    (255, 0, 0): "#ff0000",
    (66, 135, 245): "#4287f5",
    (1, 2, 3): "#010203",
    (255, 128, 0): "#ff8000",
}

samples_rgb_hsv = {
    (255, 0, 0): (0, 100, 100),
    (0, 255, 0): (120, 100, 100),
    (0, 0, 255): (240, 100, 100),
    (255, 255, 0): (60, 100, 100),
    (0, 255, 255): (180, 100, 100),
    (255, 0, 255): (300, 100, 100),
    (255, 255, 255): (0, 0, 100),
    (0, 0, 0): (0, 0, 0),
    (128, 128, 128): (0, 0, 50),
    (66, 135, 245): (217, 73, 96),
    (255, 128, 0): (30, 100, 100),
    (128, 0, 128): (300, 100, 50),
}

samples_rgb_hsl = {
    (255, 0, 0): (0, 100, 50),
    (0, 255, 0): (120, 100, 50),
    (0, 0, 255): (240, 100, 50),
    (255, 255, 0): (60, 100, 50),
    (0, 255, 255): (180, 100, 50),
    (255, 0, 255): (300, 100, 50),
    (255, 255, 255): (0, 0, 100),
    (0, 0, 0): (0, 0, 0),
    (128, 128, 128): (0, 0, 50),
    (66, 135, 245): (217, 90, 61),
    (255, 128, 0): (30, 100, 50),
    (128, 0, 128): (300, 100, 25),
}

samples_rgb_cmyk = {
    (255, 0, 0): (0, 100, 100, 0),
    (0, 255, 0): (100, 0, 100, 0),
    (0, 0, 255): (100, 100, 0, 0),
    (0, 255, 255): (100, 0, 0, 0),
    (255, 0, 255): (0, 100, 0, 0),
    (255, 255, 255): (0, 0, 0, 0),
    (0, 0, 0): (0, 0, 0, 100),
    (128, 128, 128): (0, 0, 0, 50),
    (255, 255, 0): (0, 0, 100, 0),
    (66, 135, 245): (73, 45, 0, 4),
    (255, 128, 0): (0, 50, 100, 0),
    (128, 0, 128): (0, 100, 0, 50),
}

# (L, a, b), checked to within 0.5
samples_rgb_lab = {
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 255, 255): (100.0, 0.0, 0.0),
    (255, 0, 0): (53.24, 80.09, 67.20),
}

# Pure primaries and secondaries survive every integer round trip exactly
pure_colors = [
    (255, 0, 0), (0, 255, 0), (0, 0, 255),
    (255, 255, 0), (0, 255, 255), (255, 0, 255),
    (0, 0, 0), (255, 255, 255),
]
