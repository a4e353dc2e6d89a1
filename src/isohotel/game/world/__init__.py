"""World management - rooms, objects, loading and lookup."""

from .loader import (
    RoomValidationError,
    WorldLoadError,
    load_all_rooms,
    load_rooms_from_directory,
    validate_world,
)
from .registry import RoomRegistry
from .room import GameObject, ObjectKind, Room

__all__ = [
    "Room",
    "GameObject",
    "ObjectKind",
    "RoomRegistry",
    "load_all_rooms",
    "load_rooms_from_directory",
    "validate_world",
    "WorldLoadError",
    "RoomValidationError",
]
