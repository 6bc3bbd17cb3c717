#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/shared/formatting.py


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'hex':
        return f"Hex: 0x{args[0]}"
    elif fmt == 'rgb':
        return f"RGB: ({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"HSL: ({h}, {s:.1f}, {l:.1f})"
    elif fmt == 'hsv':
        h, s, v = args
        return f"HSV: ({h}, {s:.1f}, {v:.1f})"
    elif fmt == 'cmyk':
        c, m, y, k = args
        return f"CMYK: ({c}, {m}, {y}, {k})"

    return ""
