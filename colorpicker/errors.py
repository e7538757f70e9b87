"""
Exceptions raised by the color picker core.
"""

from typing import Any


class ColorPickerError(Exception):
    """Base class for color picker errors."""


class InvalidColorError(ColorPickerError, ValueError):
    """Input could not be decomposed into color channels."""

    def __init__(self, value: Any, reason: str = "Invalid color"):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")
