#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/logic/convert/engine.py

import argparse

from .resolver import resolve_color_input
from .renderer import render_all


def run(args: argparse.Namespace) -> None:
    """Main execution engine for color conversion"""
    color = resolve_color_input(args)

    if args.complement:
        color = color.complement()

    for line in render_all(color, preview=args.color):
        print(line)
