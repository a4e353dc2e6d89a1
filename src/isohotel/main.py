"""Main entry point for the isohotel console."""

import asyncio
import sys

import structlog

from isohotel.config import get_settings
from isohotel.console import ConsoleConnection, ConsoleShell
from isohotel.game.engine import GameEngine
from isohotel.game.world import RoomValidationError, WorldLoadError
from isohotel.logging_config import configure_logging

logger = structlog.get_logger(__name__)


async def main() -> None:
    """
    Main async entry point.

    Builds the engine from settings, runs the console shell until the user
    quits, then stops the engine.
    """
    settings = get_settings()
    configure_logging(settings)

    engine = GameEngine(settings=settings)
    await engine.start()

    try:
        await ConsoleShell(engine, ConsoleConnection()).run()
    finally:
        await engine.stop()


def run() -> None:
    """
    Synchronous entry point that runs the async main function.

    This is the function that should be called from the command line.
    """
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("stopped_by_user")
    except (WorldLoadError, RoomValidationError) as e:
        logger.error("world_configuration_error", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    run()
