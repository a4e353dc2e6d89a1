"""Interactive command loop driving a GameEngine from a console."""

import structlog

from isohotel.console.connection import ConsoleConnection
from isohotel.console.protocol import WELCOME_BANNER, colorize
from isohotel.game.commands.base import CommandContext, CommandRegistry, get_registry
from isohotel.game.engine import GameEngine

logger = structlog.get_logger(__name__)


class ConsoleShell:
    """
    Reads commands from a connection and executes them against the engine.

    The shell is the input layer and renderer for a terminal: it owns every
    policy the core leaves to its collaborators, such as truncating chat
    text, clamping typed targets, and deciding when a door is used.
    """

    def __init__(
        self,
        engine: GameEngine,
        connection: ConsoleConnection,
        registry: CommandRegistry | None = None,
    ) -> None:
        """
        Initialize the shell.

        Args:
            engine: Engine to drive
            connection: Where commands come from and replies go
            registry: Commands to dispatch to; defaults to the global registry
        """
        self.engine = engine
        self.connection = connection
        self.registry = registry or get_registry()

    async def run(self) -> None:
        """Main loop: prompt, read, execute, until quit or end of input."""
        connection = self.connection

        await connection.send_line(WELCOME_BANNER)
        await connection.send_line(colorize("Type 'help' for a list of commands.", "DIM"))
        await self.process_command("look")

        while not connection.is_closed:
            try:
                await connection.send(colorize("> ", "GREEN"))
                raw_input = await connection.readline()

                if not raw_input:
                    continue

                await self.process_command(raw_input)

            except ConnectionError:
                logger.info("console_input_closed")
                break
            except Exception as e:
                logger.error("command_loop_error", error=str(e), exc_info=True)
                await connection.send_line(colorize("An error occurred. Please try again.", "RED"))

        connection.close()

    async def process_command(self, raw_input: str) -> None:
        """
        Parse and execute a command.

        Args:
            raw_input: Raw input string from the user
        """
        raw_input = raw_input.strip()

        if not raw_input:
            return

        # Parse command and arguments
        parts = raw_input.split()
        command_name = parts[0].lower()
        args = parts[1:]

        # Say shortcut
        if raw_input.startswith("'"):
            command_name = "say"
            args = raw_input[1:].split()

        command = self.registry.get(command_name)

        if not command:
            await self.connection.send_line(colorize(f"Unknown command: {command_name}", "RED"))
            await self.connection.send_line(
                "Type " + colorize("help", "YELLOW") + " for a list of commands."
            )
            return

        is_valid, error_msg = command.validate_args(args)
        if not is_valid:
            await self.connection.send_line(colorize(error_msg or "Invalid arguments.", "YELLOW"))
            return

        ctx = CommandContext(
            connection=self.connection,
            engine=self.engine,
            args=args,
            raw_input=raw_input,
        )

        try:
            await command.execute(ctx)
            logger.debug("command_executed", command=command.name)
        except Exception as e:
            logger.error(
                "command_execution_error",
                command=command.name,
                error=str(e),
                exc_info=True,
            )
            await self.connection.send_line(
                colorize("An error occurred while executing the command.", "RED")
            )
