"""
Picker session: the state one color picker keeps between edits.

A session owns the hue memory, the current ``Color`` and the listeners that
want to hear about accepted edits. Nothing here is shared between sessions.
"""

import logging
from enum import Enum
from typing import Any, Callable, List, Mapping, NamedTuple, Optional, Union

from . import config as c
from .canonical import to_canonical_color
from .fields import field_edit_to_patch
from .schemas.responses import HSLA, HSVA, RGBA, Color
from .validator import simple_check_for_valid_color

logger = logging.getLogger(__name__)


class ColorMode(str, Enum):
    HEX = "hex"
    HSL = "hsl"
    HSV = "hsv"
    RGB = "rgb"


class ColorEvent(NamedTuple):
    color: Color
    event: Any = None


Listener = Callable[[ColorEvent], None]
ColorValue = Union[str, RGBA, HSLA, HSVA]


class PickerSession:
    """
    Stateful front for the pure color core.

    Example:
        >>> session = PickerSession("#3366ff")
        >>> session.handle_change({"s": 0, "source": "hsl"}).hsl.h
        225.0
    """

    def __init__(
        self,
        color: Any = None,
        mode: Union[ColorMode, str] = c.DEFAULT_MODE,
        disable_alpha: bool = False,
    ):
        self.mode = ColorMode(mode)
        self.disable_alpha = disable_alpha
        self.old_hue: Optional[float] = None
        self._change_listeners: List[Listener] = []
        self._hover_listeners: List[Listener] = []
        initial = c.DEFAULT_COLOR if color is None else color
        self.color = to_canonical_color(initial, None, disable_alpha)
        self.old_hue = self.color.old_hue

    # State -------------------------------------------------------

    def set_color(self, value: Any) -> Color:
        """Load a value from outside the picker without notifying listeners."""
        self._set_state(to_canonical_color(value, self.old_hue, self.disable_alpha, fallback=self.color))
        return self.color

    def _set_state(self, color: Color) -> None:
        self.color = color
        self.old_hue = color.old_hue

    @property
    def value(self) -> ColorValue:
        """The current color in the session's output mode."""
        if self.mode is ColorMode.HEX:
            return self.color.hex
        if self.mode is ColorMode.HSL:
            return self.color.hsl
        if self.mode is ColorMode.HSV:
            return self.color.hsv
        return self.color.rgb

    @property
    def active_background(self) -> str:
        rgb = self.color.rgb
        alpha = c.OPAQUE if self.disable_alpha else rgb.a
        return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {alpha:g})"

    # Edits -------------------------------------------------------

    def _apply(self, patch: Mapping[str, Any]) -> Optional[Color]:
        if not simple_check_for_valid_color(patch):
            logger.debug(f"Dropping implausible patch {dict(patch)!r}")
            return None
        color = to_canonical_color(patch, self.old_hue, self.disable_alpha, fallback=self.color)
        if color is self.color:
            return None
        self._set_state(color)
        return color

    def handle_change(self, patch: Mapping[str, Any], event: Any = None) -> Optional[Color]:
        """
        Apply one partial update from a slider or field.

        Returns the new Color, or None when the patch was dropped.
        """
        color = self._apply(patch)
        if color is not None:
            self._notify(self._change_listeners, ColorEvent(color, event))
        return color

    def hover_swatch(self, patch: Mapping[str, Any], event: Any = None) -> Optional[Color]:
        color = self._apply(patch)
        if color is not None:
            self._notify(self._hover_listeners, ColorEvent(color, event))
        return color

    def edit_field(self, data: Mapping[str, Any], event: Any = None) -> Optional[Color]:
        """Apply a text-field edit such as ``{"s": "42%"}`` or ``{"hex": "#fff"}``."""
        patch = field_edit_to_patch(data, self.color, self.disable_alpha)
        if patch is None:
            return None
        return self.handle_change(patch, event)

    # Listeners ---------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every accepted change; returns an unsubscribe function."""
        return self._add(self._change_listeners, listener)

    def subscribe_hover(self, listener: Listener) -> Callable[[], None]:
        return self._add(self._hover_listeners, listener)

    @staticmethod
    def _add(listeners: List[Listener], listener: Listener) -> Callable[[], None]:
        listeners.append(listener)

        def unsubscribe() -> None:
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    @staticmethod
    def _notify(listeners: List[Listener], event: ColorEvent) -> None:
        for listener in list(listeners):
            listener(event)
