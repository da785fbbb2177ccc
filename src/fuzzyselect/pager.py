"""Windowing of the visible list into a fixed-height page."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable

from fuzzyselect.items import ListItem
from fuzzyselect.theme import DEFAULT_THEME, SelectTheme
from fuzzyselect.utils import truncate_to_width

MORE_CHOICES_HINT = "(Use arrow keys to reveal more choices)"

RenderItem = Callable[[ListItem, bool], str]


class Pager:
    """Computes which rows of the visible list are on screen.

    With ``loop=True`` the list scrolls like a ring: the active row moves
    down with the cursor until it reaches the middle of the page and stays
    there; moving up keeps the row where it is. With ``loop=False`` the page
    is clamped to the ends of the list and the active row sits in the middle
    while it can.

    The pager remembers the previous active row and its screen position, so
    one instance belongs to exactly one prompt session.
    """

    def __init__(
        self,
        page_size: int = 7,
        loop: bool = True,
        theme: SelectTheme = DEFAULT_THEME,
    ) -> None:
        self.page_size = page_size
        self.loop = loop
        self._theme = theme
        self._position = 0
        self._last_active = 0

    def paginate(
        self,
        items: Sequence[ListItem],
        active: int,
        render_item: RenderItem,
        width: int = 80,
    ) -> list[str]:
        total = len(items)
        if total == 0:
            return []
        active = max(active, 0)

        if self.loop:
            position = self._infinite(active, total)
        else:
            position = self._finite(active, total)
        self._position = position
        self._last_active = active

        offset = active - position
        rows = min(self.page_size, total)
        lines = []
        for k in range(rows):
            index = (offset + k) % total
            line = render_item(items[index], index == active)
            lines.append(truncate_to_width(line, width))

        if total > self.page_size:
            lines.append(self._theme.dim(MORE_CHOICES_HINT))
        return lines

    def _infinite(self, active: int, total: int) -> int:
        if total <= self.page_size:
            return active
        # The pointer only follows the cursor downwards, up to the middle row
        if self._last_active < active and active - self._last_active < self.page_size:
            return min(self.page_size // 2, self._position + active - self._last_active)
        return self._position

    def _finite(self, active: int, total: int) -> int:
        middle = self.page_size // 2
        if total <= self.page_size or active < middle:
            return active
        if active >= total - middle:
            return active + self.page_size - total
        return middle
