#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/core/color.py

from dataclasses import dataclass
from typing import Sequence, Tuple

from . import config as c
from . import conversions as conv
from .errors import InvalidLength, ParseError


def _check_range(name: str, value: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"{name} value {value!r} is not an integer")
    if not 0 <= value <= upper:
        raise ParseError(f"{name} value {value} out of range 0-{upper}")


@dataclass(frozen=True)
class ColorValue:
    """
    An 8-bit-per-channel RGB color.

    RGB is the only stored form. Hex, HSL, HSV and CMYK are computed
    from it on every call.
    """
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name, value in zip("rgb", (self.r, self.g, self.b)):
            _check_range(name, value, c.RGB_MAX)

    # Construction

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "ColorValue":
        return cls(r, g, b)

    @classmethod
    def from_hex(cls, hex_code: str) -> "ColorValue":
        """Decode a 6-digit hex string. Raises DecodeError or InvalidLength."""
        return cls(*conv.hex_to_rgb(hex_code))

    @classmethod
    def from_cmyk(cls, cy: int, m: int, y: int, k: int) -> "ColorValue":
        """Build from integer CMYK percentages (0-100 each)."""
        for name, value in zip("cmyk", (cy, m, y, k)):
            _check_range(name, value, c.PERCENT_MAX)
        return cls(*conv.cmyk_to_rgb(cy, m, y, k))

    @classmethod
    def from_channel_list(cls, values: Sequence[int]) -> "ColorValue":
        """
        Three values are read as RGB, four as CMYK percentages.
        Any other length raises InvalidLength.
        """
        values = tuple(values)
        if len(values) == c.RGB_CHANNELS:
            return cls.from_rgb(*values)
        if len(values) == c.CMYK_CHANNELS:
            return cls.from_cmyk(*values)
        raise InvalidLength(
            f"expected {c.RGB_CHANNELS} (rgb) or {c.CMYK_CHANNELS} (cmyk) values, got {len(values)}"
        )

    # Projections

    def to_hex(self) -> str:
        return conv.rgb_to_hex(self.r, self.g, self.b)

    def to_rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    def to_hsl(self) -> Tuple[int, float, float]:
        return conv.rgb_to_hsl(self.r, self.g, self.b)

    def to_hsv(self) -> Tuple[int, float, float]:
        return conv.rgb_to_hsv(self.r, self.g, self.b)

    def to_cmyk(self) -> Tuple[int, int, int, int]:
        return conv.rgb_to_cmyk(self.r, self.g, self.b)

    def complement(self) -> "ColorValue":
        """Return the color with every channel inverted."""
        return ColorValue(*conv.invert_rgb(self.r, self.g, self.b))
