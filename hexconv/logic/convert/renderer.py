#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/logic/convert/renderer.py

from typing import List

from hexconv.core import config as c
from hexconv.core.color import ColorValue
from hexconv.shared.formatting import format_colorspace
from hexconv.shared.truecolor import colorize


def render_convert_info(color: ColorValue, fmt: str) -> str:
    """Composes one labeled representation of the color."""
    maps = {
        "hex": lambda: (color.to_hex(),),
        "rgb": color.to_rgb,
        "hsl": color.to_hsl,
        "hsv": color.to_hsv,
        "cmyk": color.to_cmyk,
    }
    return format_colorspace(fmt, *maps[fmt]()) if fmt in maps else ""


def render_all(color: ColorValue, preview: bool = False) -> List[str]:
    lines = [render_convert_info(color, fmt) for fmt in c.OUTPUT_FORMATS]
    if preview:
        lines = [colorize(line, *color.to_rgb()) for line in lines]
    return lines
