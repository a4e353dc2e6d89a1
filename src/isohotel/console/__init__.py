"""Console layer for isohotel - terminal input and text rendering."""

from isohotel.console.protocol import ANSI_COLORS, WELCOME_BANNER, colorize, strip_ansi
from isohotel.console.connection import ConsoleConnection
from isohotel.console.render import render_map, render_room
from isohotel.console.shell import ConsoleShell

__all__ = [
    "ANSI_COLORS",
    "WELCOME_BANNER",
    "ConsoleConnection",
    "ConsoleShell",
    "colorize",
    "render_map",
    "render_room",
    "strip_ansi",
]
