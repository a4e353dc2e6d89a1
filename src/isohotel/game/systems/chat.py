"""Chat system for isohotel.

Handles the speech bubble on the avatar and the append-only chat log.
"""

import time
from collections.abc import Callable
from uuid import uuid4

import structlog

from isohotel.game.models import ChatMessage
from isohotel.game.state import GameState

logger = structlog.get_logger(__name__)

# How long a speech bubble stays on the avatar
MESSAGE_TTL_MS = 5000


def wall_clock_ms() -> int:
    """Current wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


class ChatLog:
    """
    Issues chat messages and expires speech bubbles.

    Timestamps handed out by one ChatLog strictly increase, so every
    bubble has a unique timestamp and an expiry can tell whether the bubble
    it was scheduled for is still showing.
    """

    def __init__(self, clock: Callable[[], int] = wall_clock_ms) -> None:
        """
        Initialize the chat log.

        Args:
            clock: Millisecond clock used to stamp messages
        """
        self._clock = clock
        self._last_timestamp = 0

    def next_timestamp(self) -> int:
        """Get a timestamp later than every one issued before."""
        self._last_timestamp = max(self._clock(), self._last_timestamp + 1)
        return self._last_timestamp

    def post(self, state: GameState, text: str) -> tuple[GameState, ChatMessage] | None:
        """
        Show ``text`` on the avatar and append it to the log.

        Args:
            state: The current snapshot
            text: Raw text from the input form

        Returns:
            The new snapshot and the logged message, or None if the text is blank
        """
        message_text = text.strip()
        if not message_text:
            logger.debug("chat_message_ignored", reason="blank")
            return None

        timestamp = self.next_timestamp()
        player = state.player

        message = ChatMessage(
            id=f"msg-{uuid4().hex}",
            player_id=player.id,
            player_name=player.name,
            message=message_text,
            timestamp=timestamp,
        )

        new_state = state.model_copy(
            update={
                "player": player.with_message(message_text, timestamp),
                "chat_messages": (*state.chat_messages, message),
            }
        )

        logger.info(
            "chat_message_sent",
            message_id=message.id,
            player_id=player.id,
            length=len(message_text),
        )
        return new_state, message

    @staticmethod
    def expire(state: GameState, timestamp: int) -> GameState:
        """
        Clear the speech bubble set at ``timestamp``.

        A later message has a different timestamp and is left alone.

        Args:
            state: The current snapshot
            timestamp: Timestamp the expiry was scheduled for

        Returns:
            The new snapshot, or ``state`` unchanged if the bubble was replaced
        """
        player = state.player
        if player.message_timestamp != timestamp:
            return state

        logger.debug("chat_bubble_expired", player_id=player.id, timestamp=timestamp)
        return state.model_copy(update={"player": player.without_message()})


def recent_messages(state: GameState, limit: int = 10) -> list[ChatMessage]:
    """
    Get the newest chat log entries, oldest first.

    Args:
        state: The snapshot to read
        limit: Maximum number of entries

    Returns:
        Up to ``limit`` messages
    """
    if limit <= 0:
        return []
    return list(state.chat_messages[-limit:])
