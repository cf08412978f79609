"""hexrgb - Convert between HEX and RGB(A) colors and classify them as light or dark"""

__version__ = "0.1.0"

from .color_utils import (
    Color,
    alpha_to_hex,
    format_color_output,
    hex_to_rgb,
    hex_to_rgb_str,
    parse_color,
    rgb_from_str,
    rgb_str_to_hex,
    rgb_to_hex,
)
from .colors import (
    classify,
    get_luminance,
    is_dark_color,
    is_light_color,
    is_light_or_dark_color,
)
from .errors import ColorError, InvalidFormat, InvalidInput

__all__ = [
    "Color",
    "ColorError",
    "InvalidFormat",
    "InvalidInput",
    "alpha_to_hex",
    "classify",
    "format_color_output",
    "get_luminance",
    "hex_to_rgb",
    "hex_to_rgb_str",
    "is_dark_color",
    "is_light_color",
    "is_light_or_dark_color",
    "parse_color",
    "rgb_from_str",
    "rgb_str_to_hex",
    "rgb_to_hex",
]
