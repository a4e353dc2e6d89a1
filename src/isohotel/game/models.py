"""
Core records for isohotel.

Every record is a frozen Pydantic model. State changes are expressed by
building a new record with ``model_copy(update=...)`` so readers holding an
older snapshot never observe a half-applied update.
"""

from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Direction(str, Enum):
    """Facing direction of the avatar."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Position(BaseModel):
    """
    A grid cell address.

    Attributes:
        x: Column; grows to the right
        y: Row; grows downward
    """

    model_config = ConfigDict(frozen=True)

    x: int = Field(..., description="Grid column")
    y: int = Field(..., description="Grid row")

    def offset(self, dx: int, dy: int) -> "Position":
        """Return the cell ``dx`` columns and ``dy`` rows away."""
        return Position(x=self.x + dx, y=self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Avatar(BaseModel):
    """Appearance of the player sprite."""

    model_config = ConfigDict(frozen=True)

    color: str = Field(default="#3B82F6", description="Body color")
    outfit: str = Field(default="casual", description="Outfit tag used by the renderer")


class Player(BaseModel):
    """
    The avatar controlled by the session.

    Attributes:
        id: Unique player identifier
        name: Display name shown above the sprite and in the chat log
        position: Current grid cell in the active room
        direction: Facing direction
        is_moving: True while the movement controller is stepping
        avatar: Sprite appearance
        current_message: Utterance currently shown in the speech bubble
        message_timestamp: Millisecond timestamp the utterance was set at
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique player identifier")
    name: str = Field(..., description="Display name")
    position: Position = Field(..., description="Current grid cell")
    direction: Direction = Field(default=Direction.DOWN, description="Facing direction")
    is_moving: bool = Field(default=False, description="Whether a step animation is running")
    avatar: Avatar = Field(default_factory=Avatar, description="Sprite appearance")
    current_message: str | None = Field(default=None, description="Speech bubble text")
    message_timestamp: int | None = Field(
        default=None, description="When the speech bubble text was set (ms)"
    )

    @model_validator(mode="after")
    def _check_message_pair(self) -> Self:
        if (self.current_message is None) != (self.message_timestamp is None):
            raise ValueError("current_message and message_timestamp must be set together")
        return self

    def with_message(self, text: str, timestamp: int) -> "Player":
        """Return a copy showing ``text`` in the speech bubble."""
        return self.model_copy(update={"current_message": text, "message_timestamp": timestamp})

    def without_message(self) -> "Player":
        """Return a copy with the speech bubble cleared."""
        return self.model_copy(update={"current_message": None, "message_timestamp": None})


class ChatMessage(BaseModel):
    """A single entry in the chat log."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique message identifier")
    player_id: str = Field(..., description="Author id")
    player_name: str = Field(..., description="Author display name at send time")
    message: str = Field(..., description="Trimmed message text")
    timestamp: int = Field(..., description="Creation time in milliseconds")
