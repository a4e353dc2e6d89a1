"""Command system for the isohotel console."""

from isohotel.game.commands.base import (
    Command,
    CommandContext,
    CommandRegistry,
    get_registry,
    register_default_commands,
)
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

__all__ = [
    # Base classes
    "Command",
    "CommandContext",
    "CommandRegistry",
    "get_registry",
    "register_default_commands",
    # Movement commands
    "WalkCommand",
    "ClickCommand",
    "UpCommand",
    "DownCommand",
    "LeftCommand",
    "RightCommand",
    "RoomCommand",
    "EnterCommand",
    # Communication commands
    "SayCommand",
    "ChatLogCommand",
    # Info commands
    "LookCommand",
    "TimeCommand",
    "HelpCommand",
    "QuitCommand",
]
