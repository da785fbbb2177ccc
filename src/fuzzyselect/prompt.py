"""Interactive prompt: wires a controller to a terminal until a value is chosen."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from fuzzyselect.config import SelectConfig
from fuzzyselect.controller import SelectionController
from fuzzyselect.errors import PromptCancelledError
from fuzzyselect.keys import parse_key
from fuzzyselect.line_buffer import LineBuffer
from fuzzyselect.terminal import ProcessTerminal, Terminal

logger = logging.getLogger(__name__)

V = TypeVar("V")

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
ERASE_DOWN = "\x1b[J"


def erase_frame(height: int) -> str:
    """Escape codes that return to the top of a *height*-line frame and erase it.

    The cursor is expected on the frame's last line.
    """
    up = f"\x1b[{height - 1}A" if height > 1 else ""
    return f"{up}\r{ERASE_DOWN}"


class PromptSession(Generic[V]):
    """One run of the select prompt on one terminal.

    The session owns the filter line and decides which key events reach the
    line buffer. It repaints after every key by erasing the previous frame,
    and resolves ``future`` with the chosen value, or fails it with
    :class:`PromptCancelledError`.
    """

    def __init__(
        self,
        controller: SelectionController[V],
        terminal: Terminal,
        line_buffer: LineBuffer | None = None,
    ) -> None:
        self.controller = controller
        self.terminal = terminal
        self.line = line_buffer or LineBuffer(controller.config.keybindings)
        self.future: asyncio.Future[V] | None = None
        self._height = 0
        self._closed = False

    def start(self) -> asyncio.Future[V]:
        self.future = asyncio.get_running_loop().create_future()
        logger.debug(
            "prompt %r started with %d choices",
            self.controller.message,
            len(self.controller.choices),
        )
        self.terminal.start(self.feed)
        self.terminal.write(HIDE_CURSOR)
        self._paint()
        return self.future

    def feed(self, data: str) -> None:
        """Handle one chunk of terminal input."""
        if self.future is None or self._closed:
            return

        # Only a single decoded key can trigger an action; typed text never does
        key = parse_key(data) or ""
        action = self.controller.config.keybindings.action_for(key)

        if action == "selectCancel":
            self.cancel()
            return
        if action == "selectConfirm":
            self.line.clear()
        elif action not in ("selectUp", "selectDown"):
            self.line.handle_input(data)

        result = self.controller.handle(key, self.line)
        if result.restore_line is not None:
            self.line.write(result.restore_line)

        self._paint()
        if result.done:
            self._close()
            logger.debug("prompt %r answered", self.controller.message)
            self.future.set_result(result.value)

    def cancel(self) -> None:
        """Tear the session down without a value."""
        if self._closed:
            return
        logger.debug("prompt %r cancelled", self.controller.message)
        self._close()
        if self.future is not None and not self.future.done():
            self.future.set_exception(PromptCancelledError())

    def _paint(self) -> None:
        text = self.controller.render(self.terminal.columns)
        frame = erase_frame(self._height) if self._height else ""
        # Raw mode does not translate LF into CRLF
        self.terminal.write(frame + text.replace("\n", "\r\n"))
        self._height = text.count("\n") + 1

    def _close(self) -> None:
        self._closed = True
        self.terminal.write("\r\n" + SHOW_CURSOR)
        self.terminal.stop()


async def fuzzy_select(
    message: str,
    choices: Iterable[Any],
    *,
    terminal: Terminal | None = None,
    config: SelectConfig | None = None,
    **options: Any,
) -> Any:
    """Ask the user to pick one of *choices* and return its value.

    Keyword options are the fields of :class:`SelectConfig` (``page_size``,
    ``loop``, ``default``, ``empty_message``, ``comparer``, ``theme``,
    ``keybindings``); pass either those or a ready ``config``.

    Raises:
        ConfigurationError: No choice is selectable.
        PromptCancelledError: The user pressed Ctrl+C or Escape.
    """
    if config is None:
        config = SelectConfig(**options)
    elif options:
        raise TypeError("pass either config or keyword options, not both")

    controller: SelectionController[Any] = SelectionController(message, choices, config)
    session = PromptSession(controller, terminal or ProcessTerminal())
    future = session.start()
    try:
        return await future
    except asyncio.CancelledError:
        session.cancel()
        raise


def select(message: str, choices: Iterable[Any], **options: Any) -> Any:
    """Blocking wrapper around :func:`fuzzy_select`."""
    return asyncio.run(fuzzy_select(message, choices, **options))
