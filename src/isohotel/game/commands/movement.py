"""Movement commands for the isohotel console."""

import math

import structlog

from isohotel.console.protocol import colorize
from isohotel.game.isometric import clamp_to_room
from isohotel.game.models import Direction, Position

from .base import Command, CommandContext

logger = structlog.get_logger(__name__)


def _parse_pair(args: list[str]) -> tuple[float, float] | None:
    try:
        pair = float(args[0]), float(args[1])
    except (IndexError, ValueError):
        return None
    if not all(math.isfinite(value) for value in pair):
        return None
    return pair


class WalkCommand(Command):
    """Walk toward a grid cell, one tile per tick."""

    name = "walk"
    aliases = ["go", "goto"]
    help_text = "walk <x> <y> - Walk toward a cell of the current room"
    min_args = 2

    async def execute(self, ctx: CommandContext) -> None:
        """Execute the walk command."""
        pair = _parse_pair(ctx.args)
        if pair is None or not all(value.is_integer() for value in pair):
            await ctx.connection.send_line(
                colorize("Cell coordinates must be whole numbers.", "RED")
            )
            return

        room = ctx.engine.current_room()
        target = clamp_to_room(Position(x=int(pair[0]), y=int(pair[1])), room)
        ctx.engine.request_move(target)

        await ctx.connection.send_line(colorize(f"You start walking toward {target}.", "CYAN"))


class ClickCommand(Command):
    """Click a pixel of the viewport, like the mouse on the canvas."""

    name = "click"
    aliases = []
    help_text = "click <screen_x> <screen_y> - Walk toward the tile under a viewport pixel"
    min_args = 2

    async def execute(self, ctx: CommandContext) -> None:
        """Execute the click command."""
        pair = _parse_pair(ctx.args)
        if pair is None:
            await ctx.connection.send_line(colorize("Screen coordinates must be numbers.", "RED"))
            return

        target = ctx.engine.click(*pair)
        await ctx.connection.send_line(colorize(f"You start walking toward {target}.", "CYAN"))


class StepCommand(Command):
    """Base class for single-tile directional steps."""

    direction: Direction = Direction.DOWN

    async def execute(self, ctx: CommandContext) -> None:
        """Execute the step command."""
        if ctx.engine.step(self.direction):
            position = ctx.engine.get_snapshot().player.position
            await ctx.connection.send_line(f"You step {self.direction.value} to {position}.")
        else:
            await ctx.connection.send_line(
                colorize(f"Something blocks your way {self.direction.value}.", "YELLOW")
            )


class UpCommand(StepCommand):
    """Step up (toward row 0)."""

    name = "up"
    aliases = ["w"]
    help_text = "up (or w) - Step one tile up"
    direction = Direction.UP


class DownCommand(StepCommand):
    """Step down."""

    name = "down"
    aliases = ["s"]
    help_text = "down (or s) - Step one tile down"
    direction = Direction.DOWN


class LeftCommand(StepCommand):
    """Step left (toward column 0)."""

    name = "left"
    aliases = ["a"]
    help_text = "left (or a) - Step one tile left"
    direction = Direction.LEFT


class RightCommand(StepCommand):
    """Step right."""

    name = "right"
    aliases = ["d"]
    help_text = "right (or d) - Step one tile right"
    direction = Direction.RIGHT


class RoomCommand(Command):
    """Teleport to a room's spawn point."""

    name = "room"
    aliases = ["teleport"]
    help_text = "room [room_id] - List rooms, or jump to one"
    min_args = 0

    async def execute(self, ctx: CommandContext) -> None:
        """Execute the room command."""
        engine = ctx.engine
        current_id = engine.get_snapshot().current_room_id

        if not ctx.args:
            for room_id, room in engine.rooms.items():
                marker = colorize("*", "GREEN") if room_id == current_id else " "
                await ctx.connection.send_line(f" {marker} {room_id:<12} {room.name}")
            return

        room_id = ctx.args[0]
        if not engine.rooms.can_enter(room_id):
            await ctx.connection.send_line(colorize(f"You can't get to '{room_id}'.", "YELLOW"))
            return

        engine.change_room(room_id)
        await ctx.connection.send_line(
            colorize(f"You arrive in {engine.current_room().name}.", "CYAN")
        )


class EnterCommand(Command):
    """Go through a door next to the player."""

    name = "enter"
    aliases = ["door", "use"]
    help_text = "enter - Go through a door next to you"
    min_args = 0

    async def execute(self, ctx: CommandContext) -> None:
        """Execute the enter command."""
        engine = ctx.engine
        snapshot = engine.get_snapshot()
        door = engine.rooms.door_adjacent_to(snapshot.current_room_id, snapshot.player.position)

        if door is None or door.target_room_id is None:
            await ctx.connection.send_line(colorize("There is no door within reach.", "YELLOW"))
            return

        engine.change_room(door.target_room_id)
        logger.debug(
            "door_used",
            door_id=door.id,
            from_room=snapshot.current_room_id,
            to_room=door.target_room_id,
        )
        await ctx.connection.send_line(
            colorize(
                f"You go through {door.name or door.id} into {engine.current_room().name}.",
                "CYAN",
            )
        )
