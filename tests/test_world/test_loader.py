"""Tests for room loading and the room registry."""

from pathlib import Path

import pytest

from isohotel.game.models import Position
from isohotel.game.world import (
    ObjectKind,
    Room,
    RoomRegistry,
    RoomValidationError,
    WorldLoadError,
    load_all_rooms,
    load_rooms_from_directory,
)
from isohotel.game.world.loader import validate_doors

TWO_ROOMS = """
rooms:
  - id: hall
    name: Hall
    width: 6
    height: 4
    spawn_position: {x: 1, y: 1}
    objects:
      - id: hall-door
        kind: door
        name: Door
        position: {x: 5, y: 1}
        target_room_id: yard
      - id: table
        kind: furniture
        position: {x: 2, y: 2}
        width: 2
        height: 1
  - id: yard
    name: Yard
    width: 8
    height: 8
    spawn_position: {x: 1, y: 4}
    objects:
      - id: yard-door
        kind: door
        position: {x: 0, y: 4}
        target_room_id: hall
"""


def write_rooms(directory: Path, text: str, name: str = "rooms.yaml") -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


class TestPackagedWorld:
    """Test the rooms shipped with the package."""

    def test_load_default_rooms(self):
        """The packaged hotel has two rooms joined by doors."""
        rooms = load_all_rooms()

        assert set(rooms) == {"room-1", "room-2"}
        assert rooms["room-1"].spawn_position == Position(x=4, y=4)
        assert rooms["room-2"].spawn_position == Position(x=1, y=5)

        door = rooms["room-1"].doors()[0]
        assert door.kind is ObjectKind.DOOR
        assert door.position == Position(x=9, y=3)
        assert door.target_room_id == "room-2"


class TestLoadRooms:
    """Test loading room YAML from a directory."""

    def test_load_valid_rooms(self, tmp_path: Path):
        """Rooms and their objects are parsed into models."""
        write_rooms(tmp_path, TWO_ROOMS)

        rooms = load_all_rooms(tmp_path)

        assert set(rooms) == {"hall", "yard"}
        hall = rooms["hall"]
        assert hall.width == 6 and hall.height == 4
        table = hall.object_at(Position(x=3, y=2))
        assert table is not None and table.id == "table"
        assert table.kind is ObjectKind.FURNITURE

    def test_missing_directory(self, tmp_path: Path):
        """A missing directory is a load error."""
        with pytest.raises(WorldLoadError):
            load_rooms_from_directory(tmp_path / "missing")

    def test_empty_directory(self, tmp_path: Path):
        """A directory without YAML files is a load error."""
        with pytest.raises(WorldLoadError):
            load_rooms_from_directory(tmp_path)

    def test_empty_file(self, tmp_path: Path):
        """An empty YAML file is a load error."""
        write_rooms(tmp_path, "")
        with pytest.raises(WorldLoadError):
            load_rooms_from_directory(tmp_path)

    def test_missing_rooms_key(self, tmp_path: Path):
        """The top-level 'rooms' key is required."""
        write_rooms(tmp_path, "places: []\n")
        with pytest.raises(WorldLoadError):
            load_rooms_from_directory(tmp_path)

    def test_invalid_yaml(self, tmp_path: Path):
        """Malformed YAML is a load error."""
        write_rooms(tmp_path, "rooms: [unclosed\n")
        with pytest.raises(WorldLoadError):
            load_rooms_from_directory(tmp_path)

    def test_missing_required_field(self, tmp_path: Path):
        """Rooms need an id, name, width and height."""
        write_rooms(tmp_path, "rooms:\n  - id: hall\n    name: Hall\n    width: 3\n")
        with pytest.raises(RoomValidationError, match="height"):
            load_rooms_from_directory(tmp_path)

    def test_invalid_dimensions(self, tmp_path: Path):
        """A room must be at least one cell wide."""
        write_rooms(tmp_path, "rooms:\n  - {id: hall, name: Hall, width: 0, height: 3}\n")
        with pytest.raises(RoomValidationError):
            load_rooms_from_directory(tmp_path)

    def test_unknown_object_kind(self, tmp_path: Path):
        """Object kinds are a closed set."""
        write_rooms(
            tmp_path,
            "rooms:\n"
            "  - id: hall\n    name: Hall\n    width: 3\n    height: 3\n"
            "    objects:\n      - {id: x, kind: spaceship, position: {x: 1, y: 1}}\n",
        )
        with pytest.raises(RoomValidationError):
            load_rooms_from_directory(tmp_path)

    def test_duplicate_room_ids(self, tmp_path: Path):
        """Room ids are unique across files."""
        write_rooms(tmp_path, "rooms:\n  - {id: hall, name: A, width: 3, height: 3}\n", "a.yaml")
        write_rooms(tmp_path, "rooms:\n  - {id: hall, name: B, width: 3, height: 3}\n", "b.yaml")
        with pytest.raises(RoomValidationError, match="Duplicate"):
            load_rooms_from_directory(tmp_path)


class TestWorldValidation:
    """Test cross-room validation done by load_all_rooms."""

    def test_door_to_unknown_room(self, tmp_path: Path):
        """Doors must lead to a known room."""
        write_rooms(tmp_path, TWO_ROOMS.replace("target_room_id: yard", "target_room_id: moon"))
        with pytest.raises(RoomValidationError, match="moon"):
            load_all_rooms(tmp_path)

    def test_door_to_room_without_spawn(self, tmp_path: Path):
        """A door target needs a spawn position."""
        write_rooms(tmp_path, TWO_ROOMS.replace("    spawn_position: {x: 1, y: 4}\n", ""))
        with pytest.raises(RoomValidationError, match="spawn"):
            load_all_rooms(tmp_path)

    def test_spawn_out_of_bounds(self, tmp_path: Path):
        """A spawn position must lie on the floor."""
        write_rooms(tmp_path, TWO_ROOMS.replace("{x: 1, y: 1}", "{x: 9, y: 1}"))
        with pytest.raises(RoomValidationError, match="hall"):
            load_all_rooms(tmp_path)

    def test_spawn_under_object(self, tmp_path: Path):
        """A spawn position must not be covered by an object."""
        write_rooms(tmp_path, TWO_ROOMS.replace("{x: 1, y: 1}", "{x: 3, y: 2}"))
        with pytest.raises(RoomValidationError, match="blocked"):
            load_all_rooms(tmp_path)

    def test_one_way_door_is_a_warning(self, tmp_path: Path):
        """A door without a door back loads, with a warning."""
        write_rooms(tmp_path, TWO_ROOMS.replace("target_room_id: hall", "target_room_id: yard"))
        rooms = load_rooms_from_directory(tmp_path)

        warnings = validate_doors(rooms)

        assert len(warnings) == 1
        assert "hall" in warnings[0] and "yard" in warnings[0]
        assert set(load_all_rooms(tmp_path)) == {"hall", "yard"}


class TestRoomRegistry:
    """Test the room registry."""

    def test_mapping_interface(self, test_rooms: dict[str, Room]):
        """The registry behaves like a read-only mapping."""
        registry = RoomRegistry(test_rooms)

        assert len(registry) == 3
        assert registry["lobby"].name == "Lobby"
        assert "garden" in registry
        assert registry.get("nowhere") is None

    def test_mismatched_key_rejected(self, test_rooms: dict[str, Room]):
        """Keys must match room ids."""
        with pytest.raises(ValueError):
            RoomRegistry({"elsewhere": test_rooms["lobby"]})

    def test_can_enter(self, test_rooms: dict[str, Room]):
        """Only known rooms with a spawn can be entered."""
        registry = RoomRegistry(test_rooms)

        assert registry.can_enter("garden") is True
        assert registry.can_enter("attic") is False
        assert registry.can_enter("nowhere") is False

    def test_door_adjacent_to(self, test_rooms: dict[str, Room]):
        """Doors are reached from orthogonally neighbouring cells."""
        registry = RoomRegistry(test_rooms)

        door = registry.door_adjacent_to("lobby", Position(x=8, y=3))
        assert door is not None and door.target_room_id == "garden"

        assert registry.door_adjacent_to("lobby", Position(x=9, y=4)) is not None
        assert registry.door_adjacent_to("lobby", Position(x=8, y=4)) is None
        assert registry.door_adjacent_to("lobby", Position(x=4, y=4)) is None
        assert registry.door_adjacent_to("nowhere", Position(x=0, y=0)) is None

    def test_furniture_is_not_a_door(self, test_rooms: dict[str, Room]):
        """Standing next to the sofa finds no door."""
        registry = RoomRegistry(test_rooms)
        assert registry.door_adjacent_to("lobby", Position(x=2, y=2)) is None
