"""
World loader module for isohotel.

Handles loading and validating room data from YAML files.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml

from .room import Room

logger = structlog.get_logger(__name__)


class WorldLoadError(Exception):
    """Raised when there's an error loading world data."""

    pass


class RoomValidationError(Exception):
    """Raised when room validation fails."""

    pass


def load_yaml_file(file_path: Path) -> list[dict[str, Any]]:
    """
    Load a YAML file containing room definitions.

    Args:
        file_path: Path to the YAML file

    Returns:
        List of room dictionaries

    Raises:
        WorldLoadError: If the file cannot be loaded or parsed
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise WorldLoadError(f"YAML parsing error in {file_path}: {e}") from e
    except FileNotFoundError as e:
        raise WorldLoadError(f"File not found: {file_path}") from e
    except OSError as e:
        raise WorldLoadError(f"Error loading {file_path}: {e}") from e

    if not data:
        raise WorldLoadError(f"Empty YAML file: {file_path}")

    if not isinstance(data, dict) or "rooms" not in data:
        raise WorldLoadError(f"Missing 'rooms' key in {file_path}")

    rooms = data["rooms"]
    if not isinstance(rooms, list):
        raise WorldLoadError(f"'rooms' must be a list in {file_path}")

    return rooms


def validate_room_data(room_data: dict[str, Any], file_path: Path) -> None:
    """
    Validate that a room dictionary has all required fields.

    Args:
        room_data: Dictionary containing room data
        file_path: Path to the source file (for error messages)

    Raises:
        RoomValidationError: If required fields are missing
    """
    if not isinstance(room_data, dict):
        raise RoomValidationError(f"Room entry in {file_path} must be a mapping")

    required_fields = ["id", "name", "width", "height"]

    for field in required_fields:
        if field not in room_data:
            room_id = room_data.get("id", "unknown")
            raise RoomValidationError(
                f"Room '{room_id}' in {file_path} missing required field: {field}"
            )

    # Validate objects is a list if present
    if "objects" in room_data and not isinstance(room_data["objects"], list):
        raise RoomValidationError(
            f"Room '{room_data['id']}' in {file_path} has invalid objects (must be a list)"
        )


def create_room_from_data(room_data: dict[str, Any]) -> Room:
    """
    Create a Room instance from dictionary data.

    Args:
        room_data: Dictionary containing room data

    Returns:
        Room instance

    Raises:
        RoomValidationError: If Pydantic validation fails
    """
    try:
        return Room.model_validate(room_data)
    except ValueError as e:
        raise RoomValidationError(
            f"Failed to create room '{room_data.get('id', 'unknown')}': {e}"
        ) from e


def load_rooms_from_directory(directory: Path) -> dict[str, Room]:
    """
    Load all room YAML files from a directory.

    Args:
        directory: Path to the directory containing YAML files

    Returns:
        Dictionary mapping room_id to Room instances

    Raises:
        WorldLoadError: If directory doesn't exist or files can't be loaded
        RoomValidationError: If room validation fails
    """
    if not directory.exists():
        raise WorldLoadError(f"Directory does not exist: {directory}")

    if not directory.is_dir():
        raise WorldLoadError(f"Not a directory: {directory}")

    rooms: dict[str, Room] = {}
    yaml_files = sorted(directory.glob("*.yaml")) + sorted(directory.glob("*.yml"))

    if not yaml_files:
        raise WorldLoadError(f"No YAML files found in {directory}")

    for yaml_file in yaml_files:
        room_list = load_yaml_file(yaml_file)

        for room_data in room_list:
            validate_room_data(room_data, yaml_file)
            room = create_room_from_data(room_data)

            # Check for duplicate room IDs
            if room.id in rooms:
                raise RoomValidationError(f"Duplicate room ID '{room.id}' found in {yaml_file}")

            rooms[room.id] = room

    return rooms


def validate_spawns(rooms: Mapping[str, Room]) -> None:
    """
    Validate that every spawn position is a cell the player may stand on.

    Args:
        rooms: Dictionary of room_id to Room instances

    Raises:
        RoomValidationError: If a spawn lies outside its room or under an object
    """
    for room_id, room in rooms.items():
        spawn = room.spawn_position
        if spawn is None:
            continue

        if not room.contains(spawn) or room.object_at(spawn) is not None:
            raise RoomValidationError(
                f"Room '{room_id}' spawn position {spawn} is out of bounds or blocked"
            )


def validate_doors(rooms: Mapping[str, Room]) -> list[str]:
    """
    Validate that all doors lead to existing rooms the player can enter.

    Args:
        rooms: Dictionary of room_id to Room instances

    Returns:
        List of warning messages (non-critical issues)

    Raises:
        RoomValidationError: If a door leads to an unknown room or one without a spawn
    """
    warnings: list[str] = []

    for room_id, room in rooms.items():
        for door in room.doors():
            target_room_id = door.target_room_id
            target_room = rooms.get(target_room_id) if target_room_id else None

            # Check if target room exists
            if target_room is None:
                raise RoomValidationError(
                    f"Door '{door.id}' in room '{room_id}' leads to non-existent room "
                    f"'{target_room_id}'"
                )

            if target_room.spawn_position is None:
                raise RoomValidationError(
                    f"Door '{door.id}' in room '{room_id}' leads to room '{target_room.id}' "
                    "which has no spawn position"
                )

            # Check for a way back
            if not any(back.target_room_id == room_id for back in target_room.doors()):
                warnings.append(
                    f"One-way door: '{room_id}' -> '{door.id}' -> '{target_room.id}', "
                    f"but '{target_room.id}' has no door back"
                )

    return warnings


def validate_world(rooms: Mapping[str, Room]) -> None:
    """
    Run every cross-room check and report the non-fatal ones.

    Args:
        rooms: Dictionary of room_id to Room instances

    Raises:
        RoomValidationError: If a spawn or door is unusable
    """
    validate_spawns(rooms)

    for warning in validate_doors(rooms):
        logger.warning("door_validation_warning", detail=warning)


def load_all_rooms(data_dir: Path | None = None) -> dict[str, Room]:
    """
    Load all rooms from the data directory and validate them.

    This is the main entry point for loading the game world.

    Args:
        data_dir: Path to the rooms directory. If None, uses the packaged rooms.

    Returns:
        Dictionary mapping room_id to Room instances

    Raises:
        WorldLoadError: If loading fails
        RoomValidationError: If validation fails
    """
    if data_dir is None:
        data_dir = Path(__file__).parent.parent.parent / "data" / "world" / "rooms"

    rooms = load_rooms_from_directory(data_dir)

    validate_world(rooms)

    logger.info("rooms_loaded", total_rooms=len(rooms), directory=str(data_dir))

    return rooms
