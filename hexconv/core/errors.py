#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/core/errors.py


class HexconvError(ValueError):
    """Base class for every input error hexconv reports."""


class UsageError(HexconvError):
    """No color source flag was given."""


class ParseError(HexconvError):
    """A channel token is not an integer, or is outside its range."""


class DecodeError(HexconvError):
    """A hex string is malformed (odd length or non-hex characters)."""


class InvalidLength(HexconvError):
    """Wrong number of channel values, or wrong decoded hex byte count."""
