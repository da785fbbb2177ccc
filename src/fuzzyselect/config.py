"""Prompt configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fuzzyselect.comparers import Comparer, default_comparer
from fuzzyselect.errors import ConfigurationError
from fuzzyselect.keybindings import SelectKeybindings
from fuzzyselect.theme import DEFAULT_THEME, SelectTheme

DEFAULT_PAGE_SIZE = 7
DEFAULT_EMPTY_MESSAGE = "No matches for your query"


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class SelectConfig:
    """Options recognised by the select prompt.

    ``default`` is ``UNSET`` when no default was given, so that ``None`` can
    still be a legitimate default value.
    """

    page_size: int = DEFAULT_PAGE_SIZE
    loop: bool = True
    default: Any = UNSET
    empty_message: str = DEFAULT_EMPTY_MESSAGE
    comparer: Comparer = default_comparer
    theme: SelectTheme = DEFAULT_THEME
    keybindings: SelectKeybindings = field(default_factory=SelectKeybindings)

    def __post_init__(self) -> None:
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int):
            raise ConfigurationError(
                f"page_size must be an integer, got {self.page_size!r}"
            )
        if self.page_size < 1:
            raise ConfigurationError(f"page_size must be at least 1, got {self.page_size}")

    @property
    def has_default(self) -> bool:
        return self.default is not UNSET
