"""Tests for fuzzyselect.pager -- the scrolling window over the visible list."""

from __future__ import annotations

from fuzzyselect.items import Choice, ListItem, Separator
from fuzzyselect.pager import MORE_CHOICES_HINT, Pager
from fuzzyselect.theme import PLAIN_THEME


def _items(count: int) -> list[ListItem]:
    return [Choice(value=i) for i in range(count)]


def _render(item: ListItem, active: bool) -> str:
    if item.kind == "separator":
        return "--"
    return f"{'>' if active else ' '}{item.value}"


def _page(pager: Pager, items: list[ListItem], active: int) -> list[str]:
    return pager.paginate(items, active, _render)


class TestShortLists:
    """Lists that fit on one page are shown whole."""

    def test_all_rows_without_hint(self) -> None:
        pager = Pager(page_size=5, theme=PLAIN_THEME)
        assert _page(pager, _items(3), 1) == [" 0", ">1", " 2"]

    def test_exactly_one_page(self) -> None:
        pager = Pager(page_size=3, theme=PLAIN_THEME)
        lines = _page(pager, _items(3), 2)
        assert lines == [" 0", " 1", ">2"]
        assert MORE_CHOICES_HINT not in lines

    def test_empty_list(self) -> None:
        pager = Pager(page_size=3, theme=PLAIN_THEME)
        assert _page(pager, [], 0) == []

    def test_separators_are_rendered(self) -> None:
        pager = Pager(page_size=3, theme=PLAIN_THEME)
        items: list[ListItem] = [Choice(value=0), Separator(), Choice(value=1)]
        assert _page(pager, items, 0) == [">0", "--", " 1"]


class TestLoopingPager:
    """With loop=True the window rotates around the list."""

    def test_hint_when_list_is_longer_than_page(self) -> None:
        pager = Pager(page_size=3, theme=PLAIN_THEME)
        lines = _page(pager, _items(5), 0)
        assert lines == [">0", " 1", " 2", MORE_CHOICES_HINT]

    def test_pointer_follows_down_to_the_middle(self) -> None:
        pager = Pager(page_size=5, theme=PLAIN_THEME)
        items = _items(10)
        _page(pager, items, 0)
        assert _page(pager, items, 1)[:5] == [" 0", ">1", " 2", " 3", " 4"]
        assert _page(pager, items, 2)[:5] == [" 0", " 1", ">2", " 3", " 4"]
        # From here the list scrolls under a fixed pointer
        assert _page(pager, items, 3)[:5] == [" 1", " 2", ">3", " 4", " 5"]
        assert _page(pager, items, 4)[:5] == [" 2", " 3", ">4", " 5", " 6"]

    def test_moving_up_keeps_the_pointer_row(self) -> None:
        pager = Pager(page_size=5, theme=PLAIN_THEME)
        items = _items(10)
        for active in range(5):
            _page(pager, items, active)
        assert _page(pager, items, 3)[:5] == [" 1", " 2", ">3", " 4", " 5"]

    def test_wrap_to_last_shows_rows_from_the_start(self) -> None:
        pager = Pager(page_size=3, theme=PLAIN_THEME)
        items = _items(5)
        _page(pager, items, 0)
        assert _page(pager, items, 4)[:3] == [">4", " 0", " 1"]

    def test_big_jump_keeps_the_pointer_row(self) -> None:
        pager = Pager(page_size=3, theme=PLAIN_THEME)
        items = _items(10)
        _page(pager, items, 0)
        assert _page(pager, items, 7)[:3] == [">7", " 8", " 9"]

    def test_active_row_is_always_on_page(self) -> None:
        pager = Pager(page_size=4, theme=PLAIN_THEME)
        items = _items(9)
        for active in [0, 1, 2, 3, 8, 0, 5, 4, 6, 7, 8]:
            lines = _page(pager, items, active)
            assert f">{active}" in lines
            assert len(lines) == 5


class TestFinitePager:
    """With loop=False the window is clamped to the ends of the list."""

    def test_top_of_list(self) -> None:
        pager = Pager(page_size=5, loop=False, theme=PLAIN_THEME)
        assert _page(pager, _items(10), 1)[:5] == [" 0", ">1", " 2", " 3", " 4"]

    def test_middle_of_list(self) -> None:
        pager = Pager(page_size=5, loop=False, theme=PLAIN_THEME)
        assert _page(pager, _items(10), 5)[:5] == [" 3", " 4", ">5", " 6", " 7"]

    def test_bottom_of_list(self) -> None:
        pager = Pager(page_size=5, loop=False, theme=PLAIN_THEME)
        assert _page(pager, _items(10), 9)[:5] == [" 5", " 6", " 7", " 8", ">9"]
        assert _page(pager, _items(10), 8)[:5] == [" 5", " 6", " 7", ">8", " 9"]

    def test_never_wraps(self) -> None:
        pager = Pager(page_size=3, loop=False, theme=PLAIN_THEME)
        items = _items(6)
        for active in range(6):
            lines = _page(pager, items, active)[:3]
            values = [int(line[1:]) for line in lines]
            assert values == sorted(values)


class TestWidth:
    def test_rows_are_truncated(self) -> None:
        pager = Pager(page_size=3, theme=PLAIN_THEME)
        lines = pager.paginate([Choice(value="x" * 30)], 0, _render, width=10)
        assert lines == [">xxxxxx..."]
