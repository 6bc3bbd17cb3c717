#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/shared/truecolor.py

from hexconv.core import config as c


def colorize(text: str, r: int, g: int, b: int) -> str:
    """Wrap text in a 24-bit foreground color escape, then reset."""
    return f"{c.TRUECOLOR_FG.format(r=r, g=g, b=b)}{text}{c.RESET}"
