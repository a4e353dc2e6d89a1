"""
Isometric projection for isohotel.

Converts between grid cells and screen pixels for 2:1 diamond tiles. The
functions are total: they accept any real input and never raise.
"""

import math
from typing import NamedTuple

from isohotel.game.models import Position
from isohotel.game.world.room import Room

TILE_WIDTH = 64
TILE_HEIGHT = 32


class ScreenPoint(NamedTuple):
    """A pixel position relative to the projection origin."""

    iso_x: float
    iso_y: float


class CameraOffset(NamedTuple):
    """Pixel translation applied when drawing a room onto the viewport."""

    x: float
    y: float


def to_screen(
    cart_x: float,
    cart_y: float,
    tile_width: int = TILE_WIDTH,
    tile_height: int = TILE_HEIGHT,
) -> ScreenPoint:
    """
    Project a grid coordinate onto the screen.

    Args:
        cart_x: Grid column
        cart_y: Grid row
        tile_width: Diamond width in pixels
        tile_height: Diamond height in pixels

    Returns:
        The screen point of the tile's top vertex
    """
    iso_x = (cart_x - cart_y) * (tile_width / 2)
    iso_y = (cart_x + cart_y) * (tile_height / 2)
    return ScreenPoint(iso_x, iso_y)


def to_grid(
    iso_x: float,
    iso_y: float,
    tile_width: int = TILE_WIDTH,
    tile_height: int = TILE_HEIGHT,
) -> Position:
    """
    Inverse of :func:`to_screen`, rounded to the nearest cell.

    Args:
        iso_x: Screen x relative to the projection origin
        iso_y: Screen y relative to the projection origin
        tile_width: Diamond width in pixels
        tile_height: Diamond height in pixels

    Returns:
        The nearest grid cell (may lie outside any room)
    """
    half_w = tile_width / 2
    half_h = tile_height / 2
    cart_x = (iso_x / half_w + iso_y / half_h) / 2
    cart_y = (iso_y / half_h - iso_x / half_w) / 2
    return Position(x=_round_half_up(cart_x), y=_round_half_up(cart_y))


def _round_half_up(value: float) -> int:
    # builtin round() is banker's rounding; halves go up here
    return math.floor(value + 0.5)


def camera_offset(
    room: Room,
    viewport_width: float,
    viewport_height: float,
    tile_width: int = TILE_WIDTH,
) -> CameraOffset:
    """Offset that roughly centres ``room`` horizontally in the viewport."""
    room_pixel_width = room.width * tile_width / 2
    return CameraOffset(viewport_width / 2 - room_pixel_width / 2, viewport_height / 4)


def screen_to_grid(
    screen_x: float,
    screen_y: float,
    offset: CameraOffset,
    tile_width: int = TILE_WIDTH,
    tile_height: int = TILE_HEIGHT,
) -> Position:
    """Convert a viewport pixel to a grid cell, undoing the camera offset."""
    return to_grid(screen_x - offset.x, screen_y - offset.y, tile_width, tile_height)


def clamp_to_room(position: Position, room: Room) -> Position:
    """
    Clamp a cell into the room's grid extent.

    Args:
        position: Any cell, possibly outside the room
        room: The room to clamp into

    Returns:
        The nearest cell inside ``[0, width) x [0, height)``
    """
    return Position(
        x=max(0, min(room.width - 1, position.x)),
        y=max(0, min(room.height - 1, position.y)),
    )


def click_to_target(
    screen_x: float,
    screen_y: float,
    room: Room,
    viewport_width: float,
    viewport_height: float,
    tile_width: int = TILE_WIDTH,
    tile_height: int = TILE_HEIGHT,
) -> Position:
    """
    Resolve a click on the viewport to a movement target inside ``room``.

    Args:
        screen_x: Click x in viewport pixels
        screen_y: Click y in viewport pixels
        room: The room currently drawn
        viewport_width: Viewport width in pixels
        viewport_height: Viewport height in pixels
        tile_width: Diamond width in pixels
        tile_height: Diamond height in pixels

    Returns:
        A cell inside the room
    """
    offset = camera_offset(room, viewport_width, viewport_height, tile_width)
    cell = screen_to_grid(screen_x, screen_y, offset, tile_width, tile_height)
    return clamp_to_room(cell, room)
