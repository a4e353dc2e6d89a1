"""GameState snapshot for isohotel."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from isohotel.game.models import ChatMessage, Player
from isohotel.game.world.room import Room


class GameState(BaseModel):
    """
    The single source of truth handed to renderers.

    A snapshot is never mutated. The engine replaces it with a new snapshot on
    every change, so a reader always sees a consistent player and room.

    Attributes:
        player: The active player
        rooms: All rooms keyed by id
        current_room_id: Id of the room the player is in
        chat_messages: Chat log, oldest first
        is_running: Whether the session is live
    """

    model_config = ConfigDict(frozen=True)

    player: Player
    rooms: dict[str, Room] = Field(..., min_length=1)
    current_room_id: str
    chat_messages: tuple[ChatMessage, ...] = Field(default=())
    is_running: bool = Field(default=True)

    @model_validator(mode="after")
    def _check_references(self) -> Self:
        room = self.rooms.get(self.current_room_id)
        if room is None:
            raise ValueError(f"Active room '{self.current_room_id}' is not a known room")
        if not room.contains(self.player.position):
            raise ValueError(
                f"Player position {self.player.position} is outside room '{room.id}' "
                f"({room.width}x{room.height})"
            )
        return self

    @property
    def current_room(self) -> Room:
        """Get the room the player is in."""
        return self.rooms[self.current_room_id]
