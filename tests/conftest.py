"""Shared fixtures for all tests."""

import asyncio
from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest

from isohotel.config import Settings
from isohotel.game.engine import GameEngine
from isohotel.game.models import Direction, Player, Position
from isohotel.game.state import GameState
from isohotel.game.world import GameObject, ObjectKind, Room


@pytest.fixture
def test_settings() -> Settings:
    """Settings with short timers and the test world's starting room."""
    return Settings(
        _env_file=None,
        starting_room_id="lobby",
        move_tick_ms=10,
        message_ttl_ms=300,
        max_chat_length=20,
    )


@pytest.fixture
def test_rooms() -> dict[str, Room]:
    """A lobby and a garden joined by doors, plus an attic nobody can enter."""
    lobby = Room(
        id="lobby",
        name="Lobby",
        width=10,
        height=8,
        spawn_position=Position(x=4, y=4),
        objects=(
            GameObject(
                id="door-1",
                kind=ObjectKind.DOOR,
                name="Front Door",
                position=Position(x=9, y=3),
                interactive=True,
                target_room_id="garden",
            ),
            GameObject(
                id="sofa",
                kind=ObjectKind.FURNITURE,
                name="Sofa",
                position=Position(x=2, y=1),
                width=2,
                height=1,
            ),
        ),
    )
    garden = Room(
        id="garden",
        name="Garden",
        width=12,
        height=10,
        spawn_position=Position(x=1, y=5),
        objects=(
            GameObject(
                id="door-2",
                kind=ObjectKind.DOOR,
                name="Back Door",
                position=Position(x=0, y=5),
                interactive=True,
                target_room_id="lobby",
            ),
        ),
    )
    attic = Room(id="attic", name="Attic", width=4, height=4)
    return {room.id: room for room in (lobby, garden, attic)}


@pytest.fixture
def empty_room() -> Room:
    """A 10x10 room with nothing in it."""
    return Room(id="empty", name="Empty", width=10, height=10, spawn_position=Position(x=0, y=0))


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Factory building a one-room GameState with the player at a given cell."""

    def _make(room: Room, x: int = 0, y: int = 0, direction: Direction = Direction.DOWN) -> GameState:
        player = Player(
            id="player-1",
            name="Tester",
            position=Position(x=x, y=y),
            direction=direction,
        )
        return GameState(player=player, rooms={room.id: room}, current_room_id=room.id)

    return _make


@pytest.fixture
async def engine(
    test_settings: Settings, test_rooms: dict[str, Room]
) -> AsyncGenerator[GameEngine, None]:
    """A started engine over the test world."""
    engine = GameEngine(rooms=test_rooms, settings=test_settings)
    await engine.start()

    yield engine

    await engine.stop()


@pytest.fixture
def wait_until() -> Callable[..., Awaitable[None]]:
    """Poll a predicate on the event loop until it holds (2s timeout)."""

    async def _wait(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
        async def _poll() -> None:
            while not predicate():
                await asyncio.sleep(0.005)

        await asyncio.wait_for(_poll(), timeout)

    return _wait
