"""Luminance computation and light/dark classification for hexrgb.

Two luminance measures are available:

    - ``"approximate"`` (default): the BT.709-weighted sum of the raw 8-bit
      channels, ``(0.2126 R + 0.7152 G + 0.0722 B) / 255``. No gamma
      correction is applied; it is a perceptual approximation.
    - ``"relative"``: WCAG 2.0 relative luminance, where each channel is
      linearized from sRGB before weighting.

A color is "light" when its luminance is strictly greater than 0.5 and
"dark" otherwise, so a luminance of exactly 0.5 is dark.

Example:
    >>> from hexrgb.colors import is_light_or_dark_color
    >>> is_light_or_dark_color("#ffffff")
    'light'
    >>> is_light_or_dark_color("rgb(0, 0, 0)")
    'dark'
"""

from typing import Literal

import numpy as np

from .color_utils import Color, parse_color
from .errors import InvalidInput

__all__ = [
    "LuminanceMethod",
    "Tone",
    "LUMINANCE_THRESHOLD",
    "get_luminance",
    "classify",
    "is_light_or_dark_color",
    "is_light_color",
    "is_dark_color",
]

LuminanceMethod = Literal["approximate", "relative"]
Tone = Literal["light", "dark"]

LUMINANCE_THRESHOLD = 0.5

_BT709_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def _linearize(rgb: np.ndarray) -> np.ndarray:
    """Undo the sRGB transfer curve on channels in [0, 1]."""
    return np.where(rgb <= 0.03928, rgb / 12.92, ((rgb + 0.055) / 1.055) ** 2.4)


def get_luminance(r: float, g: float, b: float, method: LuminanceMethod = "approximate") -> float:
    """Compute the luminance of 8-bit RGB channels.

    Args:
        r: Red channel in [0, 255].
        g: Green channel in [0, 255].
        b: Blue channel in [0, 255].
        method: ``"approximate"`` for the weighted channel sum or
            ``"relative"`` for gamma-corrected WCAG relative luminance.

    Returns:
        float: Luminance in [0.0, 1.0]; 0.0 for black, 1.0 for white.

    Raises:
        InvalidInput: If ``method`` is not a known luminance method.

    Examples:
        >>> get_luminance(0, 0, 0)
        0.0
        >>> round(get_luminance(255, 0, 0), 4)
        0.2126
    """
    if method == "approximate":
        return (0.2126 * r + 0.7152 * g + 0.0722 * b) / 255
    if method == "relative":
        rgb = np.clip(np.array([r, g, b], dtype=float) / 255.0, 0.0, 1.0)
        return float(np.dot(_BT709_WEIGHTS, _linearize(rgb)))
    raise InvalidInput(f"Unknown luminance method: '{method}'")


def classify(color: Color, method: LuminanceMethod = "approximate") -> Tone:
    """Return ``"light"`` or ``"dark"`` for an already parsed color. Alpha is ignored."""
    luminance = get_luminance(*color.rgb, method=method)
    return "light" if luminance > LUMINANCE_THRESHOLD else "dark"


def is_light_or_dark_color(color: str, method: LuminanceMethod = "approximate") -> Tone:
    """Check if a HEX or RGB(A) color string is 'light' or 'dark'.

    Raises:
        InvalidInput: If the string is neither HEX nor RGB(A).
        InvalidFormat: If the string cannot be parsed.
    """
    return classify(parse_color(color), method=method)


def is_light_color(color: str, method: LuminanceMethod = "approximate") -> bool:
    """Check if the color is 'light'."""
    return is_light_or_dark_color(color, method=method) == "light"


def is_dark_color(color: str, method: LuminanceMethod = "approximate") -> bool:
    """Check if the color is 'dark'."""
    return is_light_or_dark_color(color, method=method) == "dark"
