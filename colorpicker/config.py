"""
Constants and defaults shared by the color picker core.
"""

# Channel ranges
RGB_MAX = 255                      # 8-bit channel maximum
HUE_MAX = 360.0                    # Full circle degrees, exclusive upper bound
HUE_SECTOR = 60.0                  # Degrees per HSL/HSV sector
PERCENT = 100.0                    # Divisor for percent strings

# Alpha handling
ALPHA_DECIMALS = 2                 # Stored alpha is rounded to hundredths
OPAQUE = 1.0                       # Alpha of a fully opaque color

# Keyboard stepping for text fields
DEFAULT_ARROW_OFFSET = 1           # Arrow-key step for numeric fields

# Slider limits
HUE_SLIDER_MAX = 359               # Hue emitted past the end of the hue track

# Picker defaults
DEFAULT_COLOR = {"h": 250, "s": 0.5, "l": 0.2, "a": 1}
DEFAULT_MODE = "hex"
