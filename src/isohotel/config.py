"""Configuration management for isohotel using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WORLD_DIR = Path(__file__).parent / "data" / "world" / "rooms"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="ISOHOTEL_",
        extra="ignore",
    )

    # Projection
    tile_width: int = Field(default=64, gt=0, description="Screen width of one diamond tile")
    tile_height: int = Field(default=32, gt=0, description="Screen height of one diamond tile")
    viewport_width: int = Field(default=900, gt=0, description="Drawing surface width in pixels")
    viewport_height: int = Field(default=600, gt=0, description="Drawing surface height in pixels")

    # Timing
    move_tick_ms: int = Field(default=300, gt=0, description="Milliseconds between movement steps")
    message_ttl_ms: int = Field(
        default=5000, gt=0, description="Milliseconds a chat bubble stays on the avatar"
    )

    # Chat input
    max_chat_length: int = Field(
        default=100, gt=0, description="Input form truncates chat text to this length"
    )

    # World
    world_dir: Path = Field(default=DEFAULT_WORLD_DIR, description="Directory of room YAML files")
    starting_room_id: str = Field(default="room-1", description="Room the session starts in")

    # Player seed
    player_id: str = Field(default="player-1", description="Id of the seeded player")
    player_name: str = Field(default="Player", description="Display name of the seeded player")
    avatar_color: str = Field(default="#3B82F6", description="Avatar body color")
    avatar_outfit: str = Field(default="casual", description="Avatar outfit tag")

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Log format (console or json)")

    @property
    def move_tick_seconds(self) -> float:
        """Movement tick period in seconds."""
        return self.move_tick_ms / 1000

    @property
    def message_ttl_seconds(self) -> float:
        """Chat bubble lifetime in seconds."""
        return self.message_ttl_ms / 1000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
