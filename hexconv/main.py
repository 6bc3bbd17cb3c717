#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/main.py

import argparse
import sys
from typing import List, Optional

from hexconv import __version__
from hexconv.core import config as c
from hexconv.core.errors import HexconvError, UsageError
from hexconv.logic.convert import engine
from hexconv.shared.logger import log, HexconvArgumentParser


def get_parser() -> argparse.ArgumentParser:
    """Create argument parser for the hexconv command."""
    parser = HexconvArgumentParser(
        prog="hexconv",
        description="hexconv: convert a color between hex, rgb, hsl, hsv and cmyk",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"hexconv {__version__}",
        help="show program version and exit",
    )

    # Color Input Group
    input_group = parser.add_argument_group(
        "color input",
        "exactly one is expected; if several are given the first of hex, rgb, cmyk wins",
    )
    input_group.add_argument(
        "-H",
        "--hex",
        dest="hex",
        help="6-digit hex color code, '#' or '0x' prefix optional",
    )
    input_group.add_argument(
        "-r",
        "--rgb",
        dest="rgb",
        help="comma-separated red,green,blue values (0 to 255)\n"
             "example: --rgb 34,139,34",
    )
    input_group.add_argument(
        "-c",
        "--cmyk",
        dest="cmyk",
        help="comma-separated cyan,magenta,yellow,key percentages (0 to 100)\n"
             "example: --cmyk 76,0,76,45",
    )

    # Output Options
    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "-C",
        "--complement",
        action="store_true",
        help="show the complement (inverse) of the color",
    )
    output_group.add_argument(
        "--color",
        action="store_true",
        help="print every line in the color itself (truecolor terminal)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for hexconv CLI"""
    parser = get_parser()
    args = parser.parse_args(argv)

    try:
        engine.run(args)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        log("error", str(e))
        sys.exit(c.EXIT_USAGE)
    except HexconvError as e:
        log("error", str(e))
        sys.exit(c.EXIT_USAGE)


if __name__ == "__main__":
    main()
