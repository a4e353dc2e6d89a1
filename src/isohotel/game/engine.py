"""Main game engine for isohotel."""

import asyncio
from collections.abc import Callable, Mapping

import structlog

from isohotel.config import Settings, get_settings
from isohotel.game.isometric import click_to_target
from isohotel.game.models import Avatar, ChatMessage, Direction, Player, Position
from isohotel.game.state import GameState
from isohotel.game.systems.chat import ChatLog, wall_clock_ms
from isohotel.game.systems.movement import MovementController, can_move_to, step_position
from isohotel.game.world import (
    Room,
    RoomRegistry,
    RoomValidationError,
    load_all_rooms,
    validate_world,
)

logger = structlog.get_logger(__name__)

StateListener = Callable[[GameState], None]


def build_initial_state(rooms: RoomRegistry, settings: Settings) -> GameState:
    """
    Create the session's first snapshot.

    Args:
        rooms: The static room configuration
        settings: Settings naming the starting room and seeding the player

    Returns:
        A snapshot with the player on the starting room's spawn cell

    Raises:
        RoomValidationError: If the starting room is unknown or has no spawn
    """
    start_room = rooms.get(settings.starting_room_id)
    if start_room is None:
        raise RoomValidationError(f"Starting room '{settings.starting_room_id}' does not exist")
    if start_room.spawn_position is None:
        raise RoomValidationError(f"Starting room '{start_room.id}' has no spawn position")

    player = Player(
        id=settings.player_id,
        name=settings.player_name,
        position=start_room.spawn_position,
        direction=Direction.DOWN,
        avatar=Avatar(color=settings.avatar_color, outfit=settings.avatar_outfit),
    )

    return GameState(
        player=player,
        rooms=rooms.as_dict(),
        current_room_id=start_room.id,
        is_running=False,
    )


class GameEngine:
    """
    Owns the session's GameState and every timer that changes it.

    All mutations run synchronously on the event loop and replace the
    snapshot wholesale, so a reader never sees a partial update. Movement
    ticks run in one task that is cancelled whenever the target changes or
    the room changes; each chat bubble gets its own one-shot expiry.
    """

    def __init__(
        self,
        rooms: Mapping[str, Room] | None = None,
        settings: Settings | None = None,
        clock: Callable[[], int] = wall_clock_ms,
    ) -> None:
        """
        Initialize the game engine and build the first snapshot.

        Args:
            rooms: Room configuration; loaded from ``settings.world_dir`` if omitted
            settings: Settings to use instead of the cached global ones
            clock: Millisecond clock used to stamp chat messages

        Raises:
            RoomValidationError: If a spawn or door in ``rooms`` is unusable
        """
        self._settings = settings or get_settings()

        if rooms is None:
            rooms = load_all_rooms(self._settings.world_dir)
        else:
            validate_world(rooms)

        self.rooms = RoomRegistry(rooms)
        self._state = build_initial_state(self.rooms, self._settings)
        self._movement = MovementController()
        self._chat = ChatLog(clock)
        self._listeners: list[StateListener] = []
        self._move_task: asyncio.Task[None] | None = None
        self._clock_task: asyncio.Task[None] | None = None
        self._expiry_handles: dict[int, asyncio.TimerHandle] = {}
        self._running = False
        self.online_seconds = 0

        logger.info(
            "game_engine_initialized",
            total_rooms=len(self.rooms),
            starting_room_id=self._state.current_room_id,
        )

    @property
    def settings(self) -> Settings:
        """Settings in effect for this engine."""
        return self._settings

    @property
    def is_running(self) -> bool:
        """Whether :meth:`start` has been called and :meth:`stop` has not."""
        return self._running

    async def start(self) -> None:
        """Start the session clock. Call once at session start."""
        if self._running:
            return

        self._running = True
        self._apply(self._state.model_copy(update={"is_running": True}))
        self._clock_task = asyncio.create_task(self._session_clock())
        logger.info("game_engine_started", room_id=self._state.current_room_id)

    async def stop(self) -> None:
        """Cancel every timer and mark the session as ended."""
        logger.info("game_engine_stopping")
        self._running = False
        self._movement.cancel()

        for handle in self._expiry_handles.values():
            handle.cancel()
        self._expiry_handles.clear()

        tasks = [task for task in (self._move_task, self._clock_task) if task is not None]
        for task in tasks:
            task.cancel()
        for task in tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._move_task = None
        self._clock_task = None

        self._apply(self._halted_state().model_copy(update={"is_running": False}))
        logger.info("game_engine_stopped", online_seconds=self.online_seconds)

    def add_listener(self, listener: StateListener) -> None:
        """
        Register a callback invoked with every new snapshot.

        Args:
            listener: Callable receiving the new GameState
        """
        self._listeners.append(listener)

    def get_snapshot(self) -> GameState:
        """Get the current read-only snapshot."""
        return self._state

    def current_room(self) -> Room:
        """Get the room the player is in."""
        return self._state.current_room

    def request_move(self, target: Position) -> None:
        """
        Walk the player toward ``target`` one tile per tick.

        Re-requesting the target already being walked to does nothing; a new
        target replaces the old one and restarts the tick timer.

        Args:
            target: Destination cell in the current room
        """
        if not self._movement.request(target):
            return

        self._restart_movement_task()
        logger.debug(
            "move_requested",
            room_id=self._state.current_room_id,
            target_x=target.x,
            target_y=target.y,
        )

    def click(self, screen_x: float, screen_y: float) -> Position:
        """
        Turn a click on the viewport into a movement request.

        Args:
            screen_x: Click x in viewport pixels
            screen_y: Click y in viewport pixels

        Returns:
            The clamped target cell that was requested
        """
        target = click_to_target(
            screen_x,
            screen_y,
            self.current_room(),
            self._settings.viewport_width,
            self._settings.viewport_height,
            self._settings.tile_width,
            self._settings.tile_height,
        )
        self.request_move(target)
        return target

    def step(self, direction: Direction) -> bool:
        """
        Move one cell in ``direction`` right away, dropping any walk in progress.

        The player turns to face ``direction`` even when the cell is blocked.

        Args:
            direction: Direction to step in

        Returns:
            True if the player moved
        """
        self._cancel_movement()

        player = self._state.player
        room = self._state.current_room
        candidate = step_position(player.position, direction)
        moved = can_move_to(candidate, room, room.objects)

        update: dict[str, object] = {"direction": direction, "is_moving": False}
        if moved:
            update["position"] = candidate
        self._apply(self._state.model_copy(update={"player": player.model_copy(update=update)}))

        logger.debug("player_stepped", direction=direction.value, moved=moved)
        return moved

    def change_room(self, room_id: str) -> None:
        """
        Teleport the player to the spawn cell of another room.

        Unknown rooms and rooms without a spawn position are ignored.

        Args:
            room_id: Id of the destination room
        """
        if not self.rooms.can_enter(room_id):
            logger.debug("change_room_ignored", room_id=room_id)
            return

        self._cancel_movement()

        room = self.rooms[room_id]
        player = self._state.player.model_copy(
            update={"position": room.spawn_position, "is_moving": False}
        )
        previous_room_id = self._state.current_room_id
        self._apply(self._state.model_copy(update={"current_room_id": room_id, "player": player}))

        logger.info("room_changed", from_room=previous_room_id, to_room=room_id)

    def send_chat(self, text: str) -> ChatMessage | None:
        """
        Post an utterance: show it on the avatar and append it to the log.

        Blank text is ignored. The bubble is cleared after the configured
        lifetime unless a newer message has replaced it.

        Args:
            text: Message text; length limits are the caller's concern

        Returns:
            The logged message, or None if the text was blank
        """
        result = self._chat.post(self._state, text)
        if result is None:
            return None

        new_state, message = result
        self._apply(new_state)

        loop = asyncio.get_running_loop()
        self._expiry_handles[message.timestamp] = loop.call_later(
            self._settings.message_ttl_seconds,
            self._expire_message,
            message.timestamp,
        )
        return message

    def _expire_message(self, timestamp: int) -> None:
        self._expiry_handles.pop(timestamp, None)
        new_state = self._chat.expire(self._state, timestamp)
        if new_state is not self._state:
            self._apply(new_state)

    def _apply(self, new_state: GameState) -> None:
        self._state = new_state

        for listener in self._listeners:
            try:
                listener(new_state)
            except Exception as e:
                logger.error("state_listener_failed", error=str(e), exc_info=True)

    def _halted_state(self) -> GameState:
        player = self._state.player.model_copy(update={"is_moving": False})
        return self._state.model_copy(update={"player": player})

    def _cancel_movement(self) -> None:
        self._movement.cancel()
        if self._move_task is not None:
            self._move_task.cancel()
            self._move_task = None

    def _restart_movement_task(self) -> None:
        if self._move_task is not None:
            self._move_task.cancel()
        self._move_task = asyncio.create_task(self._movement_loop())

    async def _movement_loop(self) -> None:
        """Tick the movement controller until it goes idle."""
        while self._movement.is_active:
            try:
                await asyncio.sleep(self._settings.move_tick_seconds)
                self._apply(self._movement.tick(self._state))
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error("movement_tick_error", error=str(e), exc_info=True)
                self._movement.cancel()
                self._apply(self._halted_state())

    async def _session_clock(self) -> None:
        """Count whole seconds of session time."""
        while self._running:
            try:
                await asyncio.sleep(1)
                self.online_seconds += 1
            except asyncio.CancelledError:
                break
