#!/usr/bin/env python3
"""
Print every configured room with its map, doors and spawn point.

Handy for checking hand-edited room YAML before starting a session.
"""

import sys
from pathlib import Path

from isohotel.config import get_settings
from isohotel.console.render import render_room
from isohotel.game.engine import build_initial_state
from isohotel.game.world import RoomRegistry, load_all_rooms


def main() -> None:
    """Load the world and describe each room as the player would see it."""
    settings = get_settings()
    world_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.world_dir

    rooms = RoomRegistry(load_all_rooms(world_dir))
    print(f"Loaded {len(rooms)} rooms from {world_dir}")

    state = build_initial_state(rooms, settings)
    for room_id, room in rooms.items():
        print("\n" + "=" * 40)
        if room.spawn_position is None:
            print(f"{room.name} ({room_id}): no spawn position, not enterable")
            continue

        player = state.player.model_copy(update={"position": room.spawn_position})
        view = state.model_copy(update={"current_room_id": room_id, "player": player})
        for line in render_room(view, settings.tile_width, settings.tile_height):
            print(line)


if __name__ == "__main__":
    main()
