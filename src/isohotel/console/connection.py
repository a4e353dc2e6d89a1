"""Line-oriented console connection for isohotel."""

import asyncio
import sys
from typing import TextIO

import structlog

from isohotel.console.protocol import strip_ansi

logger = structlog.get_logger(__name__)


class ConsoleConnection:
    """
    Wraps a pair of text streams for the console shell.

    Reading happens in a worker thread so the event loop keeps running
    movement ticks and chat expiries while the user is typing.
    """

    def __init__(
        self,
        reader: TextIO | None = None,
        writer: TextIO | None = None,
        use_color: bool | None = None,
    ) -> None:
        """
        Initialize a console connection.

        Args:
            reader: Input stream (defaults to stdin)
            writer: Output stream (defaults to stdout)
            use_color: Emit ANSI colors; defaults to whether ``writer`` is a TTY
        """
        self.reader = reader or sys.stdin
        self.writer = writer or sys.stdout
        self.use_color = self.writer.isatty() if use_color is None else use_color
        self._closed = False

    @property
    def is_closed(self) -> bool:
        """Whether the connection has been closed or reached end of input."""
        return self._closed

    async def send(self, text: str) -> None:
        """Write text without a trailing newline."""
        if self._closed:
            return
        if not self.use_color:
            text = strip_ansi(text)
        self.writer.write(text)
        self.writer.flush()

    async def send_line(self, text: str = "") -> None:
        """Write a line of text."""
        await self.send(f"{text}\n")

    async def readline(self) -> str:
        """
        Read one line of input.

        Returns:
            The line without its trailing newline

        Raises:
            ConnectionError: If the input stream is exhausted
        """
        line = await asyncio.to_thread(self.reader.readline)
        if line == "":
            self._closed = True
            raise ConnectionError("end of input")
        return line.rstrip("\r\n")

    def close(self) -> None:
        """Mark the connection closed."""
        if not self._closed:
            logger.debug("console_connection_closed")
        self._closed = True
