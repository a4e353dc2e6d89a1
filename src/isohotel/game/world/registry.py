"""Room registry for isohotel."""

from collections.abc import Iterator, Mapping

from isohotel.game.models import Position
from isohotel.game.world.room import GameObject, Room


class RoomRegistry(Mapping[str, Room]):
    """
    Read-only collection of the rooms of one session.

    Rooms are static configuration: the registry never gains or loses rooms
    after construction. A single-room world is simply a registry of size one.
    """

    def __init__(self, rooms: Mapping[str, Room]) -> None:
        """
        Initialize the registry.

        Args:
            rooms: Rooms keyed by id; keys must match each room's id
        """
        for room_id, room in rooms.items():
            if room_id != room.id:
                raise ValueError(f"Room registered as '{room_id}' has id '{room.id}'")
        self._rooms: dict[str, Room] = dict(rooms)

    def __getitem__(self, room_id: str) -> Room:
        return self._rooms[room_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rooms)

    def __len__(self) -> int:
        return len(self._rooms)

    def as_dict(self) -> dict[str, Room]:
        """Get a plain dict copy of the rooms."""
        return dict(self._rooms)

    def can_enter(self, room_id: str) -> bool:
        """Check if ``room_id`` exists and defines a spawn position."""
        room = self._rooms.get(room_id)
        return room is not None and room.spawn_position is not None

    def door_adjacent_to(self, room_id: str, position: Position) -> GameObject | None:
        """
        Find a door next to a cell.

        Doors block their own cell, so a player "uses" a door by standing on
        one of the four neighbouring cells.

        Args:
            room_id: Room to search
            position: Cell the player stands on

        Returns:
            The first door whose footprint touches ``position`` orthogonally
        """
        room = self._rooms.get(room_id)
        if room is None:
            return None

        neighbours = [
            position.offset(0, -1),
            position.offset(0, 1),
            position.offset(-1, 0),
            position.offset(1, 0),
        ]
        for door in room.doors():
            if any(door.occupies(cell) for cell in neighbours):
                return door
        return None
