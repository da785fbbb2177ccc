"""Terminal I/O for the select prompt.

``Terminal`` is the whole surface a prompt session needs: deliver key events
to a callback, accept text (escape sequences included), report the width, and
stop. ``ProcessTerminal`` implements it on the process's own tty in raw mode
with bracketed paste enabled.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
import termios
import tty
from typing import Callable, Protocol, TextIO

from fuzzyselect.keys import split_input

logger = logging.getLogger(__name__)

InputHandler = Callable[[str], None]

DEFAULT_COLUMNS = 80
READ_SIZE = 4096

PASTE_MODE_ON = "\x1b[?2004h"
PASTE_MODE_OFF = "\x1b[?2004l"

# Delivered as Ctrl+C when stdin reaches end of file
_EOF_KEY = "\x03"


class Terminal(Protocol):
    @property
    def columns(self) -> int: ...

    def start(self, on_input: InputHandler) -> None: ...

    def write(self, data: str) -> None: ...

    def stop(self) -> None: ...


class ProcessTerminal:
    """The controlling terminal of this process.

    ``start`` has to be called from inside a running event loop: stdin is
    watched with ``loop.add_reader`` and each read is split into key events
    before it reaches the handler.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._on_input: InputHandler | None = None
        self._saved_mode: list | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).columns
        except (OSError, ValueError):
            return DEFAULT_COLUMNS

    def start(self, on_input: InputHandler) -> None:
        fd = self._stdin.fileno()
        self._saved_mode = termios.tcgetattr(fd)
        tty.setraw(fd)
        self.write(PASTE_MODE_ON)

        self._on_input = on_input
        self._loop = asyncio.get_running_loop()
        self._loop.add_reader(fd, self._read)
        logger.debug("terminal in raw mode, %d columns", self.columns)

    def write(self, data: str) -> None:
        try:
            self._stdout.write(data)
            self._stdout.flush()
        except OSError:
            logger.debug("terminal write failed", exc_info=True)

    def stop(self) -> None:
        fd = self._stdin.fileno()
        self._on_input = None
        if self._loop is not None:
            self._loop.remove_reader(fd)
            self._loop = None

        self.write(PASTE_MODE_OFF)
        if self._saved_mode is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, self._saved_mode)
            self._saved_mode = None
        logger.debug("terminal restored")

    def _read(self) -> None:
        try:
            raw = os.read(self._stdin.fileno(), READ_SIZE)
        except OSError:
            logger.debug("stdin read failed", exc_info=True)
            return

        if raw:
            chunks = split_input(raw.decode("utf-8", errors="replace"))
        else:
            logger.debug("stdin closed")
            if self._loop is not None:
                self._loop.remove_reader(self._stdin.fileno())
            chunks = [_EOF_KEY]

        for chunk in chunks:
            # An earlier chunk may have finished the prompt
            if self._on_input is None:
                break
            self._on_input(chunk)
