"""ANSI color helpers and banner for the isohotel console."""

import re
from typing import Final

# ANSI color codes
ANSI_COLORS: Final[dict[str, str]] = {
    "RED": "\x1b[31m",
    "GREEN": "\x1b[32m",
    "YELLOW": "\x1b[33m",
    "BLUE": "\x1b[34m",
    "MAGENTA": "\x1b[35m",
    "CYAN": "\x1b[36m",
    "WHITE": "\x1b[37m",
    "RESET": "\x1b[0m",
    "BOLD": "\x1b[1m",
    "DIM": "\x1b[2m",
}

# ANSI regex pattern for stripping
ANSI_ESCAPE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")

WELCOME_BANNER: Final[str] = (
    f"{ANSI_COLORS['CYAN']}{ANSI_COLORS['BOLD']}isohotel{ANSI_COLORS['RESET']}\n"
    f"{ANSI_COLORS['DIM']}Walk the rooms, talk, and find the doors.{ANSI_COLORS['RESET']}\n"
)


def colorize(text: str, color: str) -> str:
    """
    Apply ANSI color to text.

    Args:
        text: The text to colorize
        color: Color name from ANSI_COLORS dict (e.g., 'RED', 'GREEN')

    Returns:
        Text wrapped with ANSI color codes
    """
    color_code = ANSI_COLORS.get(color.upper(), "")
    if not color_code:
        return text
    return f"{color_code}{text}{ANSI_COLORS['RESET']}"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_ESCAPE_PATTERN.sub("", text)
