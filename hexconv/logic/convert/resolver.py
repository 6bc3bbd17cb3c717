#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/logic/convert/resolver.py

import argparse

from hexconv.core import config as c
from hexconv.core.color import ColorValue
from hexconv.core.errors import UsageError
from hexconv.shared.logger import log
from hexconv.shared.sanitizer import clean_hex, parse_channel_list


def _from_hex(val: str) -> ColorValue:
    return ColorValue.from_hex(clean_hex(val))


def _from_rgb(val: str) -> ColorValue:
    return ColorValue.from_channel_list(
        parse_channel_list(val, c.RGB_CHANNELS, c.RGB_MAX, "rgb")
    )


def _from_cmyk(val: str) -> ColorValue:
    return ColorValue.from_channel_list(
        parse_channel_list(val, c.CMYK_CHANNELS, c.PERCENT_MAX, "cmyk")
    )


SOURCE_RESOLVERS = {
    "hex": _from_hex,
    "rgb": _from_rgb,
    "cmyk": _from_cmyk,
}


def resolve_color_input(args: argparse.Namespace) -> ColorValue:
    """Builds a ColorValue from the first source flag present, in hex > rgb > cmyk order."""
    given = [name for name in c.SOURCE_PRECEDENCE if getattr(args, name, None) is not None]
    if not given:
        raise UsageError("one of --hex, --rgb or --cmyk is required")

    source, ignored = given[0], given[1:]
    if ignored:
        flags = ", ".join(f"--{name}" for name in ignored)
        log("warning", f"using --{source}, ignoring {flags}")

    return SOURCE_RESOLVERS[source](getattr(args, source))
