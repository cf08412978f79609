"""Test configuration and fixtures for hexrgb tests."""

from typing import List, Tuple

import pytest

from hexrgb.color_utils import Color


@pytest.fixture
def hex_rgb_pairs() -> List[Tuple[str, Tuple[int, ...]]]:
    """Provide HEX colors with their expected channel tuples."""
    return [
        ("#000000", (0, 0, 0)),           # Black
        ("#ffffff", (255, 255, 255)),     # White
        ("#FF0000", (255, 0, 0)),         # Red, uppercase
        ("#00ff00", (0, 255, 0)),         # Green
        ("0000ff", (0, 0, 255)),          # Blue, no hash
        ("#0f0", (0, 255, 0)),            # Shorthand green
        ("#ABC", (170, 187, 204)),        # Shorthand, uppercase
        ("#ff000080", (255, 0, 0, 0.5)),  # Red, half alpha
        ("#000000ff", (0, 0, 0, 1.0)),    # Black, opaque alpha
        ("#12345600", (18, 52, 86, 0.0)), # Explicit zero alpha
    ]


@pytest.fixture
def invalid_hex_colors() -> List[str]:
    """Provide HEX strings whose RGB groups cannot be decoded."""
    return [
        "#ggg",        # Non-hex shorthand
        "#12",         # Too short
        "#abcd",       # Four digits are not expanded
        "#GG0000",     # Invalid hex characters
        "#ff00",       # Missing blue group
        "",            # Empty string
        "#",           # Hash only
        "# ff0000",    # Embedded space
    ]


@pytest.fixture
def invalid_rgb_strings() -> List[str]:
    """Provide RGB(A) strings the parser rejects."""
    return [
        "rgb(255, 0)",             # Missing component
        "rgba(1, 2, 3, 0.5, 6)",   # Too many components
        "rgb()",                   # No components
        "rgb(256, 0, 0)",          # Channel out of range
        "rgb(-1, 0, 0)",           # Negative channel
        "rgb(-255, 0, 0)",         # Negative channel, in range once unsigned
        "rgb(12.5, 0, 0)",         # Fractional channel
        "rgba(0, 0, 0, 2)",        # Alpha out of range
        "rgba(0, 0, 0, -0.5)",     # Negative alpha
        "rgb(١, ٢, ٣)",  # Non-ASCII digits
    ]


@pytest.fixture
def sample_colors() -> List[Color]:
    """Provide parsed colors for formatting and rendering tests."""
    return [
        Color(255, 255, 255),       # White
        Color(0, 0, 0),             # Black
        Color(255, 0, 0, 0.5),      # Half transparent red
    ]


@pytest.fixture
def known_luminance_values() -> List[Tuple[Tuple[int, int, int], float]]:
    """Provide channels with known approximate luminance values."""
    return [
        ((0, 0, 0), 0.0),             # Black
        ((255, 255, 255), 1.0),       # White
        ((255, 0, 0), 0.2126),        # Red
        ((0, 255, 0), 0.7152),        # Green
        ((0, 0, 255), 0.0722),        # Blue
    ]
