#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/shared/sanitizer.py

import re
from typing import Tuple

from hexconv.core import config as c
from hexconv.core.errors import InvalidLength, ParseError

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def _strip_and_unquote(value: str) -> str:
    s = str(value).strip()
    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()
    return s


def clean_hex(value: str) -> str:
    """
    Strips quotes, whitespace and a leading '#' or '0x' from a hex value.
    Anything else is left for the decoder to reject.
    """
    s = _strip_and_unquote(value)
    for prefix in c.HEX_PREFIXES:
        if s.startswith(prefix):
            s = s[len(prefix):]
            break
    return s


def parse_channel_list(value: str, count: int, upper: int, label: str) -> Tuple[int, ...]:
    """
    Parses 'a,b,c' into integers, each within [0, upper].
    Raises InvalidLength on a wrong token count and ParseError on a bad token.
    """
    tokens = [t.strip() for t in _strip_and_unquote(value).split(c.CHANNEL_SEPARATOR)]
    if len(tokens) != count:
        raise InvalidLength(
            f"invalid {label} value '{_sanitize_for_log(value)}': "
            f"expected {count} comma-separated values, got {len(tokens)}"
        )

    channels = []
    for token in tokens:
        if not _INT_TOKEN.fullmatch(token):
            raise ParseError(f"invalid {label} value '{_sanitize_for_log(value)}': '{token}' is not an integer")
        val = int(token)
        if not 0 <= val <= upper:
            raise ParseError(f"invalid {label} value '{_sanitize_for_log(value)}': {val} out of range 0-{upper}")
        channels.append(val)
    return tuple(channels)
