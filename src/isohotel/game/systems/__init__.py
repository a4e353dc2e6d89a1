"""Game systems - movement and chat rules applied to GameState snapshots."""

from .chat import MESSAGE_TTL_MS, ChatLog, recent_messages
from .movement import (
    MovementController,
    can_move_to,
    direction_from_key,
    next_step,
    step_position,
)

__all__ = [
    "MESSAGE_TTL_MS",
    "ChatLog",
    "recent_messages",
    "MovementController",
    "can_move_to",
    "direction_from_key",
    "next_step",
    "step_position",
]
