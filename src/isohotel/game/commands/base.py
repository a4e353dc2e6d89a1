"""Console command plumbing: the command interface and its name lookup."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from isohotel.console.connection import ConsoleConnection
    from isohotel.game.engine import GameEngine

logger = structlog.get_logger(__name__)


@dataclass
class CommandContext:
    """One parsed console line, with the engine it acts on and where replies go."""

    connection: "ConsoleConnection"
    engine: "GameEngine"
    args: list[str]
    raw_input: str


class Command(ABC):
    """
    A verb the player can type at the console.

    Subclasses set ``name``, optional ``aliases``, a one-line ``help_text``
    shown by ``help`` and in usage errors, and the fewest words they accept.
    """

    name: str = ""
    aliases: list[str] = []
    help_text: str = ""
    min_args: int = 0

    @abstractmethod
    async def execute(self, ctx: CommandContext) -> None:
        """
        Act on the engine and reply on the connection.

        Args:
            ctx: The parsed line and its engine
        """
        raise NotImplementedError

    def validate_args(self, args: list[str]) -> tuple[bool, str | None]:
        """
        Check the word count before ``execute`` runs.

        Args:
            args: Words after the command name

        Returns:
            (True, None), or (False, a usage line to show the player)
        """
        if len(args) < self.min_args:
            return False, f"Usage: {self.help_text}"
        return True, None


class CommandRegistry:
    """Maps command names and aliases to their single Command instance."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._aliases: dict[str, str] = {}  # alias -> name

    def register(self, command: Command) -> None:
        """
        Add a command under its name and every alias.

        Names and aliases share one namespace; nothing may shadow an
        earlier registration.

        Args:
            command: Command to add

        Raises:
            ValueError: If the command is unnamed or a word is already taken
        """
        if not command.name:
            raise ValueError("Command must have a name")

        words = [command.name, *command.aliases]
        for word in words:
            if word in self._commands or word in self._aliases:
                owner = self._aliases.get(word, word)
                raise ValueError(f"'{word}' is already taken by command '{owner}'")

        self._commands[command.name] = command
        for alias in command.aliases:
            self._aliases[alias] = command.name

        logger.debug("command_registered", name=command.name, aliases=command.aliases)

    def get(self, name: str) -> Command | None:
        """Resolve a typed word to its command, or None if nothing answers to it."""
        name = self._aliases.get(name, name)
        return self._commands.get(name)

    def get_all_commands(self) -> list[Command]:
        """Commands in the order they were registered."""
        return list(self._commands.values())


_registry: CommandRegistry | None = None


def get_registry() -> CommandRegistry:
    """Shared registry, filled with the built-in commands on first call."""
    global _registry
    if _registry is None:
        _registry = CommandRegistry()
        register_default_commands(_registry)
    return _registry


def register_default_commands(registry: CommandRegistry) -> None:
    """
    Fill ``registry`` with every built-in console command.

    Args:
        registry: Registry to fill
    """
    from isohotel.game.commands.communication import ChatLogCommand, SayCommand
    from isohotel.game.commands.info import HelpCommand, LookCommand, QuitCommand, TimeCommand
    from isohotel.game.commands.movement import (
        ClickCommand,
        DownCommand,
        EnterCommand,
        LeftCommand,
        RightCommand,
        RoomCommand,
        UpCommand,
        WalkCommand,
    )

    for command in (
        LookCommand(),
        WalkCommand(),
        ClickCommand(),
        UpCommand(),
        DownCommand(),
        LeftCommand(),
        RightCommand(),
        RoomCommand(),
        EnterCommand(),
        SayCommand(),
        ChatLogCommand(),
        TimeCommand(),
        HelpCommand(),
        QuitCommand(),
    ):
        registry.register(command)

    logger.debug("commands_registered", total_commands=len(registry.get_all_commands()))
