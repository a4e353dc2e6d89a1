"""Tests for settings and logging setup."""

import pytest
import structlog

from isohotel.config import DEFAULT_WORLD_DIR, Settings, get_settings
from isohotel.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        """Defaults give a 300ms step and a five second bubble."""
        for name in ["ISOHOTEL_MOVE_TICK_MS", "ISOHOTEL_MESSAGE_TTL_MS", "ISOHOTEL_TILE_WIDTH"]:
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.tile_width == 64
        assert settings.tile_height == 32
        assert settings.move_tick_ms == 300
        assert settings.move_tick_seconds == 0.3
        assert settings.message_ttl_ms == 5000
        assert settings.message_ttl_seconds == 5.0
        assert settings.max_chat_length == 100
        assert settings.world_dir == DEFAULT_WORLD_DIR

    def test_environment_override(self, monkeypatch):
        """ISOHOTEL_* variables override defaults."""
        monkeypatch.setenv("ISOHOTEL_MOVE_TICK_MS", "50")
        monkeypatch.setenv("ISOHOTEL_STARTING_ROOM_ID", "room-2")

        settings = Settings(_env_file=None)

        assert settings.move_tick_ms == 50
        assert settings.starting_room_id == "room-2"

    def test_rejects_non_positive_tick(self):
        """Timer periods must be positive."""
        with pytest.raises(ValueError):
            Settings(_env_file=None, move_tick_ms=0)

    def test_get_settings_is_cached(self):
        """get_settings returns one shared instance."""
        get_settings.cache_clear()
        assert get_settings() is get_settings()
        get_settings.cache_clear()


class TestLogging:
    """Test structlog configuration."""

    @pytest.mark.parametrize("log_format", ["console", "json"])
    def test_configure_logging(self, log_format: str, capsys):
        """Both formats configure structlog and filter by level."""
        configure_logging(Settings(_env_file=None, log_level="INFO", log_format=log_format))

        logger = structlog.get_logger("test")
        logger.debug("hidden_event")
        logger.info("visible_event", room_id="room-1")

        err = capsys.readouterr().err
        assert "visible_event" in err
        assert "hidden_event" not in err
