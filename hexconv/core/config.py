#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/core/config.py

# ==========================================
# Color Model Constants
# ==========================================

UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255                      # 8-bit color depth limit
PERCENT_MAX = 100                  # Upper bound for CMYK / HSL / HSV percentages
HUE_MAX = 360                      # Full circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL/HSV sector
HUE_SECTOR_COUNT = 6.0             # Number of hue sectors on the wheel
HUE_OFFSET_GREEN = 2.0             # Sector offset when green is the dominant channel
HUE_OFFSET_BLUE = 4.0              # Sector offset when blue is the dominant channel
DECIMAL_PLACES = 1                 # Precision of HSL/HSV percentages

# ==========================================
# Input Shape
# ==========================================

HEX_LEN = 6                        # Hex digits in a full color code
RGB_CHANNELS = 3                   # Channel count for RGB input
CMYK_CHANNELS = 4                  # Channel count for CMYK input
CHANNEL_SEPARATOR = ","            # Separator for --rgb / --cmyk values
HEX_PREFIXES = ("0x", "0X", "#")   # Prefixes stripped from --hex values

# Source flags in precedence order, first one present wins
SOURCE_PRECEDENCE = ("hex", "rgb", "cmyk")

# Output order of the rendered representations
OUTPUT_FORMATS = ("hex", "rgb", "hsl", "hsv", "cmyk")

# Exit status for any usage or input error
EXIT_USAGE = 2

# ==========================================
# ANSI Terminal Styling
# ==========================================

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
TRUECOLOR_FG = "\033[38;2;{r};{g};{b}m"
