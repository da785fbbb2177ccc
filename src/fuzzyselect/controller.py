"""Selection controller: the state machine behind the select prompt.

The controller owns the master list and reduces each decoded key event to a
new state. It never writes to the terminal; callers ask for ``render()``
whenever they want to repaint.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Protocol, TypeVar, Union

from fuzzyselect.config import SelectConfig
from fuzzyselect.errors import ConfigurationError, SelectionPendingError
from fuzzyselect.items import (
    Choice,
    ListItem,
    coerce_choice,
    first_selectable_index,
    is_selectable,
    is_separator,
    last_selectable_index,
)
from fuzzyselect.pager import Pager
from fuzzyselect.utils import truncate_to_width

logger = logging.getLogger(__name__)

V = TypeVar("V")

NO_SELECTABLE_CHOICES = "[select prompt] No selectable choices. All choices are disabled."
ARROW_KEYS_HINT = " (Use arrow keys)"


class Status(str, enum.Enum):
    PENDING = "pending"
    DONE = "done"


class LineSource(Protocol):
    def get_value(self) -> str: ...


LineAccessor = Union[LineSource, Callable[[], str], None]


@dataclass(frozen=True)
class SelectState:
    """Everything that changes while the prompt is open.

    ``active_index`` is ``-1`` when the visible list has no selectable item.
    ``pristine`` stays ``True`` until a key event changes the state.
    """

    status: Status
    filter_text: str
    visible_items: tuple[ListItem, ...]
    active_index: int
    pristine: bool = True


@dataclass(frozen=True)
class HandleResult:
    """Outcome of one key event.

    ``restore_line`` asks the caller to put the filter query back into its
    line buffer; it is set when Enter was pressed with nothing to select.
    """

    done: bool = False
    value: Any = None
    restore_line: str | None = None


def _read_line(line: LineAccessor, fallback: str) -> str:
    if line is None:
        return fallback
    if callable(line):
        return line()
    return line.get_value()


class SelectionController(Generic[V]):
    """Filterable single-selection list.

    Args:
        message: Question shown in the header line.
        choices: Ordered choices and separators. Plain values and mappings
            are converted with :func:`~fuzzyselect.items.coerce_choice`.
        config: Prompt options; defaults to :class:`SelectConfig()`.
        pager: Windowing collaborator; one is built from ``config`` when
            omitted.

    Raises:
        ConfigurationError: ``choices`` contains no selectable item.
    """

    def __init__(
        self,
        message: str,
        choices: Iterable[Any],
        config: SelectConfig | None = None,
        pager: Pager | None = None,
    ) -> None:
        self.message = message
        self.config = config or SelectConfig()
        self.choices: tuple[ListItem, ...] = tuple(coerce_choice(c) for c in choices)
        self._pager = pager or Pager(
            page_size=self.config.page_size,
            loop=self.config.loop,
            theme=self.config.theme,
        )

        if first_selectable_index(self.choices) < 0:
            raise ConfigurationError(NO_SELECTABLE_CHOICES)

        self._state = SelectState(
            status=Status.PENDING,
            filter_text="",
            visible_items=self.choices,
            active_index=self._initial_index(),
        )
        self._result: V | None = None

    def _initial_index(self) -> int:
        if self.config.has_default:
            for index, item in enumerate(self.choices):
                if is_selectable(item) and item.value == self.config.default:
                    return index
        return first_selectable_index(self.choices)

    # -- state accessors ----------------------------------------------------

    @property
    def state(self) -> SelectState:
        return self._state

    @property
    def status(self) -> Status:
        return self._state.status

    @property
    def filter_text(self) -> str:
        return self._state.filter_text

    @property
    def visible_items(self) -> tuple[ListItem, ...]:
        return self._state.visible_items

    @property
    def active_index(self) -> int:
        return self._state.active_index

    @property
    def active_item(self) -> Choice[V, Any] | None:
        """The choice under the cursor, if any."""
        state = self._state
        if state.active_index < 0:
            return None
        item = state.visible_items[state.active_index]
        return item if is_selectable(item) else None

    @property
    def result(self) -> V:
        if self._state.status is not Status.DONE:
            raise SelectionPendingError("no choice has been confirmed yet")
        return self._result  # type: ignore[return-value]

    # -- key handling -------------------------------------------------------

    def handle(self, key: str, line: LineAccessor = None) -> HandleResult:
        """Apply one key event.

        ``key`` is a key id (``"enter"``, ``"up"``, ``"a"``...) or raw terminal
        input. ``line`` gives access to the current text of the filter line;
        it is only read for filter edits.
        """
        state = self._state
        if state.status is Status.DONE:
            return HandleResult(done=True, value=self._result)

        action = self.config.keybindings.action_for(key)
        if action == "selectConfirm":
            return self._confirm(state)
        if action == "selectUp":
            self._move(state, -1)
        elif action == "selectDown":
            self._move(state, 1)
        else:
            self._refilter(state, _read_line(line, state.filter_text))
        return HandleResult()

    def _confirm(self, state: SelectState) -> HandleResult:
        choice = self.active_item
        if choice is None:
            logger.debug("confirm ignored: no selectable item for %r", state.filter_text)
            return HandleResult(restore_line=state.filter_text)

        self._result = choice.value
        self._state = replace(state, status=Status.DONE, pristine=False)
        logger.debug("selected %r", choice.value)
        return HandleResult(done=True, value=choice.value)

    def _move(self, state: SelectState, offset: int) -> None:
        items = state.visible_items
        if not items or state.active_index < 0:
            return
        if not self.config.loop:
            if offset < 0 and state.active_index == first_selectable_index(items):
                return
            if offset > 0 and state.active_index == last_selectable_index(items):
                return

        total = len(items)
        index = state.active_index
        while True:
            index = (index + offset) % total
            if is_selectable(items[index]):
                break

        self._state = replace(state, active_index=index, pristine=False)

    def _refilter(self, state: SelectState, text: str) -> None:
        predicate = self.config.comparer(text.lower())
        visible = tuple(item for item in self.choices if predicate(item))
        self._state = SelectState(
            status=state.status,
            filter_text=text,
            visible_items=visible,
            active_index=first_selectable_index(visible),
            pristine=False,
        )
        logger.debug(
            "filter %r matched %d of %d items", text, len(visible), len(self.choices)
        )

    # -- rendering ----------------------------------------------------------

    def render(self, width: int = 80) -> str:
        """Screen text for the current state."""
        theme = self.config.theme
        state = self._state
        message = theme.bold(self.message)

        if state.status is Status.DONE:
            choice = state.visible_items[state.active_index]
            return f"{theme.prefix} {message} {theme.highlight(choice.label)}"

        header = f"{theme.prefix} {message}"
        if state.pristine:
            header += theme.dim(ARROW_KEYS_HINT)
        if state.filter_text:
            header += " " + theme.highlight(state.filter_text)

        # Each row must fit on one terminal line
        header = truncate_to_width(header, width)
        active = self.active_item
        if active is None:
            empty = truncate_to_width(self.config.empty_message, width)
            return f"{header}\n{theme.dim(empty)}"

        page = self._pager.paginate(
            state.visible_items, state.active_index, self._render_item, width
        )
        lines = [header, *page]
        if active.description:
            lines.append(truncate_to_width(active.description, width))
        return "\n".join(lines)

    def _render_item(self, item: ListItem, is_active: bool) -> str:
        theme = self.config.theme
        if is_separator(item):
            return f" {theme.dim(item.separator)}"
        if item.disabled:
            return theme.dim(f"- {item.label} {item.disabled_label}")
        if is_active:
            return theme.highlight(f"{theme.pointer} {item.label}")
        return f"  {item.label}"
