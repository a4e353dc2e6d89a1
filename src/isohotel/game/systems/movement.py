"""Tile movement system for isohotel.

Movement is one cell per tick, resolving the horizontal axis before the
vertical one. There is no pathfinding: if the next cell on that fixed route
is blocked or out of bounds, the walk stops where it is.
"""

from collections.abc import Iterable

import structlog

from isohotel.game.models import Direction, Position
from isohotel.game.state import GameState
from isohotel.game.world.room import GameObject, Room

logger = structlog.get_logger(__name__)

# Grid delta for one step in each direction (down grows y, right grows x)
DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Keyboard codes and shortcuts accepted for single steps
KEY_DIRECTIONS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "KeyW": Direction.UP,
    "w": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "KeyS": Direction.DOWN,
    "s": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "KeyA": Direction.LEFT,
    "a": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "KeyD": Direction.RIGHT,
    "d": Direction.RIGHT,
}


def can_move_to(position: Position, room: Room, objects: Iterable[GameObject]) -> bool:
    """
    Check whether the player may stand on a cell.

    Doors and interactive objects block like any other object.

    Args:
        position: The candidate cell
        room: Room providing the grid bounds
        objects: Objects whose footprints block movement

    Returns:
        True if the cell is inside the room and not covered by any object
    """
    if not room.contains(position):
        return False

    for obj in objects:
        if obj.occupies(position):
            return False

    return True


def next_step(current: Position, target: Position) -> tuple[Position, Direction] | None:
    """
    Compute the single step from ``current`` toward ``target``.

    Args:
        current: Where the player stands
        target: Where the player is heading

    Returns:
        The next cell and the direction faced, or None if already there
    """
    if current.x < target.x:
        direction = Direction.RIGHT
    elif current.x > target.x:
        direction = Direction.LEFT
    elif current.y < target.y:
        direction = Direction.DOWN
    elif current.y > target.y:
        direction = Direction.UP
    else:
        return None

    return step_position(current, direction), direction


def step_position(position: Position, direction: Direction) -> Position:
    """Get the neighbouring cell in ``direction``."""
    dx, dy = DIRECTION_DELTAS[direction]
    return position.offset(dx, dy)


def direction_from_key(key: str) -> Direction | None:
    """
    Map a keyboard code to a direction.

    Args:
        key: A key code such as "ArrowUp" or "KeyW", or a lowercase shortcut

    Returns:
        The matching direction, or None for unrelated keys
    """
    return KEY_DIRECTIONS.get(key)


class MovementController:
    """
    Step-wise movement state machine.

    The controller is Idle when ``target`` is None and Moving otherwise.
    It never schedules anything itself: the owner calls :meth:`tick` once
    per period while :attr:`is_active` is True.
    """

    def __init__(self) -> None:
        """Initialize an idle controller."""
        self.target: Position | None = None

    @property
    def is_active(self) -> bool:
        """True while a target is pending."""
        return self.target is not None

    def request(self, target: Position) -> bool:
        """
        Set a new movement target.

        Args:
            target: The cell to walk toward

        Returns:
            False if the controller was already heading to ``target``
            (the request is ignored), True if the target was replaced
        """
        if self.target == target:
            return False

        self.target = target
        logger.debug("movement_target_set", target_x=target.x, target_y=target.y)
        return True

    def cancel(self) -> None:
        """Drop any pending target."""
        if self.target is not None:
            logger.debug("movement_cancelled", target_x=self.target.x, target_y=self.target.y)
        self.target = None

    def tick(self, state: GameState) -> GameState:
        """
        Advance the player one step toward the target.

        Args:
            state: The current snapshot

        Returns:
            The next snapshot (``state`` itself when idle)
        """
        if self.target is None:
            return state

        player = state.player
        step = next_step(player.position, self.target)

        if step is None:
            self.target = None
            logger.debug("movement_arrived", x=player.position.x, y=player.position.y)
            return _halted(state)

        candidate, direction = step
        room = state.current_room

        if not can_move_to(candidate, room, room.objects):
            logger.debug(
                "movement_blocked",
                room_id=room.id,
                x=candidate.x,
                y=candidate.y,
            )
            self.target = None
            return _halted(state)

        moved = player.model_copy(
            update={"position": candidate, "direction": direction, "is_moving": True}
        )
        return state.model_copy(update={"player": moved})


def _halted(state: GameState) -> GameState:
    player = state.player.model_copy(update={"is_moving": False})
    return state.model_copy(update={"player": player})
