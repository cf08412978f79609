"""Color parsing, conversion and formatting utilities for hexrgb.

HEX colors are ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA`` (the ``#`` is optional).
RGB(A) colors are any string carrying three or four numeric tokens, usually
``rgb(R, G, B)`` or ``rgba(R, G, B, A)``.

Alpha travels as a real in [0, 1] on the RGB side and as a two-digit hex
group on the HEX side. Encoding uses ``round(alpha * 255)`` with Python's
round-half-to-even; decoding rounds back to two decimals, so the round trip
is lossy (0.995 -> ``fe`` -> 1.0).
"""

import re
import warnings
from collections.abc import Iterable
from typing import NamedTuple

from .errors import InvalidFormat, InvalidInput

__all__ = [
    "Color",
    "alpha_to_hex",
    "hex_to_rgb",
    "hex_to_rgb_str",
    "rgb_to_hex",
    "rgb_to_str",
    "rgb_from_str",
    "rgb_str_to_hex",
    "parse_color",
    "format_color_output",
]

ChannelTuple = tuple[int, int, int] | tuple[int, int, int, float]

_TWO_DIGIT_HEX_RE = re.compile(r"[0-9a-fA-F]{2}")
_NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


class Color(NamedTuple):
    """Canonical parsed color: 8-bit channels plus an optional alpha in [0, 1]."""

    r: int
    g: int
    b: int
    a: float | None = None

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def channels(self) -> ChannelTuple:
        """The 3-tuple, or the 4-tuple when an alpha channel is present."""
        if self.a is None:
            return self.rgb
        return (self.r, self.g, self.b, self.a)

    @property
    def normalized(self) -> tuple[float, ...]:
        """Channels scaled to [0, 1], alpha kept as is (matplotlib color form)."""
        rgb = tuple(c / 255.0 for c in self.rgb)
        if self.a is None:
            return rgb
        return rgb + (float(self.a),)


def alpha_to_hex(alpha: float) -> str:
    """Encode an alpha value in [0, 1] as a two-digit lowercase hex group.

    Ties round half to even (Python's ``round``), unlike JavaScript's
    ``Math.round`` which rounds halves up: ``0.5 / 255`` encodes as ``00``,
    not ``01``.

    Raises:
        InvalidInput: If alpha lies outside [0, 1].

    Example:
        >>> alpha_to_hex(0.5)
        '80'
    """
    if not 0 <= alpha <= 1:
        raise InvalidInput(f"Alpha value must be between 0 and 1, got {alpha}")
    return format(round(alpha * 255), "02x")


def _decode_alpha(value: int) -> float:
    # Scale to [0, 1] and keep two decimals
    return round(value / 255 * 100) / 100


def _format_alpha(alpha: float) -> str:
    # 0.5 -> "0.5", 1.0 -> "1", 0.0 -> "0"
    return f"{alpha:g}"


def hex_to_rgb(hex_str: str) -> ChannelTuple:
    """Extract RGB(A) channels from a HEX color.

    A leading ``#`` is removed and 3-digit shorthand is expanded (``#0f0`` is
    ``#00ff00``). A trailing valid two-digit group is decoded as alpha and a
    4-tuple is returned; otherwise the result is ``(r, g, b)``.

    Args:
        hex_str: HEX color with 3, 6 or 8 digits, ``#`` optional.

    Returns:
        ``(r, g, b)`` with ints in [0, 255], or ``(r, g, b, a)`` with alpha
        rounded to two decimals.

    Raises:
        InvalidFormat: If any of the R, G, B groups is not two hex digits.

    Example:
        >>> hex_to_rgb("#ff000080")
        (255, 0, 0, 0.5)
    """
    if not isinstance(hex_str, str):
        raise InvalidFormat(f"HEX color must be a string, got {type(hex_str).__name__}")

    digits = hex_str[1:] if hex_str.startswith("#") else hex_str

    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)

    groups = (digits[0:2], digits[2:4], digits[4:6])
    if not all(_TWO_DIGIT_HEX_RE.fullmatch(group) for group in groups):
        raise InvalidFormat(f"Incorrect HEX color format: '{hex_str}'")

    r, g, b = (int(group, 16) for group in groups)

    alpha_group = digits[6:8]
    if _TWO_DIGIT_HEX_RE.fullmatch(alpha_group):
        consumed = 8
        channels: ChannelTuple = (r, g, b, _decode_alpha(int(alpha_group, 16)))
    else:
        consumed = 6
        channels = (r, g, b)

    if len(digits) > consumed:
        warnings.warn(
            f"Ignoring trailing characters '{digits[consumed:]}' in HEX color '{hex_str}'",
            stacklevel=2,
        )

    return channels


def rgb_to_str(r: int, g: int, b: int, alpha: float | None = None) -> str:
    """Format channels as ``rgb(r, g, b)``, or ``rgba(r, g, b, a)`` when alpha is given."""
    rgb = f"{r}, {g}, {b}"
    if alpha is None:
        return f"rgb({rgb})"
    return f"rgba({rgb}, {_format_alpha(alpha)})"


def hex_to_rgb_str(hex_str: str) -> str:
    """Convert a HEX color into an ``rgb(...)`` or ``rgba(...)`` string.

    An explicit zero alpha (``#rrggbb00``) is kept: it yields ``rgba(..., 0)``.
    """
    return rgb_to_str(*hex_to_rgb(hex_str))


def rgb_to_hex(r: int, g: int, b: int, alpha: float | None = None) -> str:
    """Build a lowercase HEX color from channel values.

    Channels are cast with ``int()`` and zero-padded; they are neither rounded,
    clamped nor validated, so out-of-range input gives malformed output. The
    alpha group is appended whenever alpha is given, including 0.

    Raises:
        InvalidInput: If alpha lies outside [0, 1].
    """
    hex_str = "#" + "".join(format(int(value), "02x") for value in (r, g, b))
    if alpha is not None:
        hex_str += alpha_to_hex(alpha)
    return hex_str


def _to_number(token: str) -> int | float:
    return float(token) if "." in token else int(token)


def rgb_from_str(rgb_str: str) -> ChannelTuple:
    """Extract the numeric channels from an RGB(A) color string.

    The parser is permissive: it collects every integer or decimal token
    regardless of the surrounding text, so ``rgb(1, 2, 3)``, ``rgba(1,2,3,0.5)``
    and ``1 2 3`` are all accepted. Only ASCII digits count, and a leading
    ``-`` belongs to its token.

    Raises:
        InvalidFormat: If there are not exactly 3 or 4 numeric tokens, a
            channel is not an integer in [0, 255] or alpha is outside [0, 1].
    """
    if not isinstance(rgb_str, str):
        raise InvalidFormat(f"RGB(A) color must be a string, got {type(rgb_str).__name__}")

    values = [_to_number(token) for token in _NUMBER_RE.findall(rgb_str)]

    if len(values) not in (3, 4):
        raise InvalidFormat(f"Invalid RGB(A) color string: '{rgb_str}'")

    if not all(isinstance(value, int) for value in values[:3]):
        raise InvalidFormat(f"RGB channels must be integers in '{rgb_str}'")

    if any(value < 0 or value > 255 for value in values[:3]):
        raise InvalidFormat(f"RGB channel out of range [0, 255] in '{rgb_str}'")

    if len(values) == 4 and not 0 <= values[3] <= 1:
        raise InvalidFormat(f"Alpha channel out of range [0, 1] in '{rgb_str}'")

    return tuple(values)  # type: ignore[return-value]


def rgb_str_to_hex(rgb_str: str) -> str:
    """Convert an RGB(A) color string into a HEX color."""
    return rgb_to_hex(*rgb_from_str(rgb_str))


def parse_color(color_str: str) -> Color:
    """Parse a HEX or RGB(A) color string into a :class:`Color`.

    The prefix picks the parser: ``#`` for HEX, ``rgb``/``rgba`` (any case)
    for RGB(A) strings.

    Raises:
        InvalidInput: If the string is neither a HEX nor an RGB(A) color.
        InvalidFormat: If the chosen parser rejects the string.
    """
    if not isinstance(color_str, str):
        raise InvalidInput(f"Color must be a string, got {type(color_str).__name__}")

    text = color_str.strip()

    if text.startswith("#"):
        channels = hex_to_rgb(text)
    elif text[:3].lower() == "rgb":
        channels = rgb_from_str(text)
    else:
        raise InvalidInput(
            f"Unable to parse color: '{color_str}'. "
            "Supported formats: #RGB, #RRGGBB, #RRGGBBAA, rgb(R, G, B), rgba(R, G, B, A)"
        )

    return Color(*channels)


def format_color_output(colors: Iterable[Color], format_type: str = "hex") -> list[str]:
    """Format colors for output as ``hex``, ``rgb`` or ``raw`` normalized floats."""
    formatted: list[str] = []

    for color in colors:
        if format_type == "hex":
            formatted.append(rgb_to_hex(*color))
        elif format_type == "rgb":
            formatted.append(rgb_to_str(*color))
        elif format_type == "raw":
            formatted.append("(" + ", ".join(f"{c:.4f}" for c in color.normalized) + ")")
        else:
            raise InvalidInput(f"Unknown output format: '{format_type}'")

    return formatted
