"""Information commands for the isohotel console."""

import structlog

from isohotel.console.protocol import colorize
from isohotel.console.render import render_room

from .base import Command, CommandContext, get_registry

logger = structlog.get_logger(__name__)


class LookCommand(Command):
    """Draw the current room."""

    name = "look"
    aliases = ["l", "map"]
    help_text = "look - Show the room, its objects and where you stand"
    min_args = 0

    async def execute(self, ctx: CommandContext) -> None:
        """Execute the look command."""
        settings = ctx.engine.settings
        snapshot = ctx.engine.get_snapshot()
        for line in render_room(snapshot, settings.tile_width, settings.tile_height):
            await ctx.connection.send_line(line)


class TimeCommand(Command):
    """Show how long the session has been online."""

    name = "time"
    aliases = ["online"]
    help_text = "time - Show time online"
    min_args = 0

    async def execute(self, ctx: CommandContext) -> None:
        """Execute the time command."""
        minutes, seconds = divmod(ctx.engine.online_seconds, 60)
        hours, minutes = divmod(minutes, 60)
        await ctx.connection.send_line(f"Online for {hours:02d}:{minutes:02d}:{seconds:02d}.")


class HelpCommand(Command):
    """Display help information for commands."""

    name = "help"
    aliases = ["?"]
    help_text = "help [command] - Show help for a command or list all commands"
    min_args = 0

    async def execute(self, ctx: CommandContext) -> None:
        """Execute the help command."""
        registry = get_registry()

        if ctx.args:
            command_name = ctx.args[0].lower()
            command = registry.get(command_name)

            if not command:
                await ctx.connection.send_line(colorize(f"Unknown command: {command_name}", "RED"))
                return

            await ctx.connection.send_line(colorize(command.name.upper(), "CYAN"))
            await ctx.connection.send_line(f"  {command.help_text}")
            if command.aliases:
                aliases_str = ", ".join(command.aliases)
                await ctx.connection.send_line(f"  Aliases: {colorize(aliases_str, 'YELLOW')}")
            return

        await ctx.connection.send_line(colorize("Available commands:", "CYAN"))
        for command in registry.get_all_commands():
            await ctx.connection.send_line(f"  {command.help_text}")


class QuitCommand(Command):
    """Leave the hotel."""

    name = "quit"
    aliases = ["exit"]
    help_text = "quit - End the session"
    min_args = 0

    async def execute(self, ctx: CommandContext) -> None:
        """Execute the quit command."""
        logger.info("player_quit", online_seconds=ctx.engine.online_seconds)
        await ctx.connection.send_line(colorize("Goodbye!", "GREEN"))
        ctx.connection.close()
