"""Text rendering of a GameState snapshot for the console."""

from isohotel.console.protocol import colorize
from isohotel.game.isometric import to_screen
from isohotel.game.models import Direction, Position
from isohotel.game.state import GameState
from isohotel.game.world.room import GameObject, ObjectKind

# Map glyph per object kind
OBJECT_GLYPHS: dict[ObjectKind, str] = {
    ObjectKind.FURNITURE: "#",
    ObjectKind.DECORATION: "*",
    ObjectKind.INTERACTIVE: "?",
    ObjectKind.DOOR: "D",
}

# Avatar glyph per facing direction
PLAYER_GLYPHS: dict[Direction, str] = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}


def object_glyph(obj: GameObject) -> str:
    """Get the map glyph for an object."""
    return OBJECT_GLYPHS[obj.kind]


def render_map(state: GameState) -> list[str]:
    """
    Draw the current room as a top-down character grid.

    Args:
        state: Snapshot to draw

    Returns:
        One string per grid row
    """
    room = state.current_room
    player = state.player
    rows: list[str] = []

    for y in range(room.height):
        cells: list[str] = []
        for x in range(room.width):
            if player.position.x == x and player.position.y == y:
                cells.append(colorize(PLAYER_GLYPHS[player.direction], "GREEN"))
                continue

            obj = room.object_at(Position(x=x, y=y))
            if obj is None:
                cells.append(colorize(".", "DIM"))
            elif obj.kind is ObjectKind.DOOR:
                cells.append(colorize(object_glyph(obj), "YELLOW"))
            else:
                cells.append(object_glyph(obj))
        rows.append(" ".join(cells))

    return rows


def render_room(state: GameState, tile_width: int, tile_height: int) -> list[str]:
    """
    Describe the current room: name, map, objects and the avatar.

    Args:
        state: Snapshot to describe
        tile_width: Tile width used for the avatar's screen coordinates
        tile_height: Tile height used for the avatar's screen coordinates

    Returns:
        Lines of text ready to send to a connection
    """
    room = state.current_room
    player = state.player

    lines = [
        colorize(room.name, "CYAN"),
        colorize("-" * len(room.name), "CYAN"),
        *render_map(state),
        "",
    ]

    for obj in room.objects:
        detail = f"  {object_glyph(obj)} {obj.name or obj.id} at {obj.position}"
        if obj.target_room_id:
            target = state.rooms.get(obj.target_room_id)
            detail += f" -> {target.name if target else obj.target_room_id}"
        lines.append(detail)

    screen = to_screen(player.position.x, player.position.y, tile_width, tile_height)
    status = "walking" if player.is_moving else "standing"
    lines.append(
        f"{player.name} is {status} at {player.position} facing {player.direction.value} "
        f"(screen {screen.iso_x:g}, {screen.iso_y:g})"
    )

    if player.current_message is not None:
        lines.append(colorize(f'{player.name} says, "{player.current_message}"', "YELLOW"))

    return lines
