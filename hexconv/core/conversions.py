#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/core/conversions.py

import binascii
import math
from typing import Tuple

from . import config as c
from .errors import DecodeError, InvalidLength


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def round1(value: float) -> float:
    """Round to one decimal place."""
    scale = 10 ** c.DECIMAL_PLACES
    return round_half_up(value * scale) / scale


def hex_to_rgb(hex_code: str) -> Tuple[int, int, int]:
    """Decode a hex string into exactly three channel bytes."""
    if len(hex_code) % 2:
        raise DecodeError(f"invalid hex value '{hex_code}': odd number of digits")
    try:
        raw = binascii.unhexlify(hex_code)
    except ValueError:
        raise DecodeError(f"invalid hex value '{hex_code}': non-hex characters") from None
    if len(raw) != c.RGB_CHANNELS:
        raise InvalidLength(
            f"invalid hex value '{hex_code}': decodes to {len(raw)} bytes, expected {c.RGB_CHANNELS}"
        )
    return raw[0], raw[1], raw[2]


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB components to an uppercase hex string."""
    return f"{r:02X}{g:02X}{b:02X}"


def _hue(r: int, g: int, b: int) -> int:
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    if cmax == cmin:
        return 0
    r_f, g_f, b_f = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    delta = (cmax - cmin) / c.RGB_MAX
    if cmax == r:
        h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HUE_SECTOR_COUNT)
    elif cmax == g:
        h = c.HUE_SECTOR * ((b_f - r_f) / delta + c.HUE_OFFSET_GREEN)
    else:
        h = c.HUE_SECTOR * ((r_f - g_f) / delta + c.HUE_OFFSET_BLUE)
    return round_half_up(h) % c.HUE_MAX


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, float, float]:
    """Convert RGB to HSL as (degrees, saturation %, lightness %)."""
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    L = (cmax + cmin) / c.DIV_2 / c.RGB_MAX
    if cmax == cmin:
        s = 0.0
    else:
        delta = (cmax - cmin) / c.RGB_MAX
        s = delta / (c.UNIT - abs(c.DIV_2 * L - c.UNIT))
    return _hue(r, g, b), round1(s * c.PERCENT_MAX), round1(L * c.PERCENT_MAX)


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[int, float, float]:
    """Convert RGB to HSV as (degrees, saturation %, value %)."""
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    v = cmax / c.RGB_MAX
    s = 0.0 if cmax == cmin else (cmax - cmin) / cmax
    return _hue(r, g, b), round1(s * c.PERCENT_MAX), round1(v * c.PERCENT_MAX)


def rgb_to_cmyk(r: int, g: int, b: int) -> Tuple[int, int, int, int]:
    """Convert RGB to CMYK integer percentages."""
    if r == 0 and g == 0 and b == 0:
        return 0, 0, 0, c.PERCENT_MAX
    r_norm, g_norm, b_norm = r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX
    k = c.UNIT - max(r_norm, g_norm, b_norm)
    denom = c.UNIT - k
    cy = (c.UNIT - r_norm - k) / denom
    m = (c.UNIT - g_norm - k) / denom
    y = (c.UNIT - b_norm - k) / denom
    return tuple(round_half_up(v * c.PERCENT_MAX) for v in (cy, m, y, k))


def cmyk_to_rgb(cy: int, m: int, y: int, k: int) -> Tuple[int, int, int]:
    """Convert CMYK percentages to RGB channels."""
    k1 = c.UNIT - k / c.PERCENT_MAX
    r = c.RGB_MAX * (c.UNIT - cy / c.PERCENT_MAX) * k1
    g = c.RGB_MAX * (c.UNIT - m / c.PERCENT_MAX) * k1
    b = c.RGB_MAX * (c.UNIT - y / c.PERCENT_MAX) * k1
    return round_half_up(r), round_half_up(g), round_half_up(b)


def invert_rgb(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """Invert every channel."""
    return c.RGB_MAX - r, c.RGB_MAX - g, c.RGB_MAX - b
