"""Exception types raised by hexrgb."""

__all__ = ["ColorError", "InvalidInput", "InvalidFormat"]


class ColorError(ValueError):
    """Base class for every error raised while converting or classifying colors."""


class InvalidInput(ColorError):
    """A value is outside its domain, e.g. alpha above 1 or an unknown color prefix."""


class InvalidFormat(ColorError):
    """A color string is structurally malformed (bad hex digits, wrong token count)."""
