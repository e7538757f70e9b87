# (r, g, b) -> (h, s, l)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (120.0, 1.0, 0.5),
    (0, 0, 255): (240.0, 1.0, 0.5),
    (51, 102, 255): (225.0, 1.0, 0.6),
    (255, 255, 0): (60.0, 1.0, 0.5),
    (128, 0, 128): (300.0, 1.0, 128 / 255 / 2),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

# (r, g, b) -> (h, s, v)
samples_rgb_hsv = {
    (255, 0, 0): (0.0, 1.0, 1.0),
    (0, 255, 0): (120.0, 1.0, 1.0),
    (51, 102, 255): (225.0, 0.8, 1.0),
    (0, 128, 128): (180.0, 1.0, 128 / 255),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

# (h, s, l) -> (h, s, v)
samples_hsl_hsv = {
    (0.0, 1.0, 0.5): (0.0, 1.0, 1.0),
    (225.0, 1.0, 0.6): (225.0, 0.8, 1.0),
    (120.0, 0.5, 0.25): (120.0, 2 / 3, 0.375),
    (300.0, 0.0, 0.4): (300.0, 0.0, 0.4),
    (10.0, 0.3, 0.0): (10.0, 0.0, 0.0),
}

# (h, s, v) cases that survive a trip through HSL unchanged
samples_hsv_round_trip = [
    (0.0, 1.0, 1.0),
    (225.0, 0.8, 1.0),
    (33.3, 0.42, 0.77),
    (180.0, 0.999, 0.001),
    (359.9, 0.1, 0.9),
    (90.0, 0.0, 0.5),
]

# (h, s, l) cases that survive a trip through HSV unchanged
samples_hsl_round_trip = [
    (0.0, 1.0, 0.5),
    (225.0, 1.0, 0.6),
    (33.3, 0.42, 0.77),
    (270.0, 0.05, 0.95),
    (359.9, 0.6, 0.2),
    (90.0, 0.0, 0.5),
]
