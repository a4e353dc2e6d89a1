"""Communication commands for the isohotel console."""

from datetime import datetime

import structlog

from isohotel.console.protocol import colorize
from isohotel.game.systems.chat import recent_messages

from .base import Command, CommandContext

logger = structlog.get_logger(__name__)


class SayCommand(Command):
    """Speak: show a speech bubble on the avatar and log the message."""

    name = "say"
    aliases = []
    help_text = "say <message> or '<message> - Say something"
    min_args = 1

    async def execute(self, ctx: CommandContext) -> None:
        """Execute the say command."""
        text = " ".join(ctx.args)
        limit = ctx.engine.settings.max_chat_length
        if len(text) > limit:
            logger.debug("say_truncated", length=len(text), limit=limit)
        message = text[:limit]

        sent = ctx.engine.send_chat(message)
        if sent is None:
            await ctx.connection.send_line(colorize("Say what?", "YELLOW"))
            return

        await ctx.connection.send_line(colorize(f'You say, "{sent.message}"', "YELLOW"))


class ChatLogCommand(Command):
    """Show the most recent chat log entries."""

    name = "chatlog"
    aliases = ["log", "history"]
    help_text = "chatlog [count] - Show recent chat messages"
    min_args = 0

    async def execute(self, ctx: CommandContext) -> None:
        """Execute the chatlog command."""
        limit = 10
        if ctx.args:
            try:
                limit = int(ctx.args[0])
            except ValueError:
                await ctx.connection.send_line(colorize("Count must be a whole number.", "RED"))
                return

        messages = recent_messages(ctx.engine.get_snapshot(), limit)
        if not messages:
            await ctx.connection.send_line(colorize("Nobody has said anything yet.", "DIM"))
            return

        for message in messages:
            sent_at = datetime.fromtimestamp(message.timestamp / 1000).strftime("%H:%M:%S")
            stamp = colorize(sent_at, "DIM")
            author = colorize(message.player_name, "CYAN")
            await ctx.connection.send_line(f"{stamp} {author}: {message.message}")
