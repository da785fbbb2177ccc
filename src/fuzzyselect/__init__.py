"""fuzzy-select: filterable single-selection prompt for text terminals."""

from fuzzyselect.comparers import (
    Comparer,
    FuzzyMatch,
    default_comparer,
    fuzzy_comparer,
    fuzzy_match,
)
from fuzzyselect.config import DEFAULT_EMPTY_MESSAGE, DEFAULT_PAGE_SIZE, SelectConfig
from fuzzyselect.controller import (
    HandleResult,
    SelectionController,
    SelectState,
    Status,
)
from fuzzyselect.errors import (
    ConfigurationError,
    FuzzySelectError,
    PromptCancelledError,
    SelectionPendingError,
)
from fuzzyselect.items import Choice, ListItem, Separator, is_selectable, is_separator
from fuzzyselect.keybindings import (
    DEFAULT_SELECT_KEYBINDINGS,
    SelectAction,
    SelectKeybindings,
)
from fuzzyselect.keys import Key, matches_key, parse_key
from fuzzyselect.line_buffer import LineBuffer
from fuzzyselect.pager import Pager
from fuzzyselect.prompt import PromptSession, fuzzy_select, select
from fuzzyselect.terminal import ProcessTerminal, Terminal
from fuzzyselect.theme import DEFAULT_THEME, PLAIN_THEME, SelectTheme

__all__ = [
    # Items
    "Choice",
    "ListItem",
    "Separator",
    "is_selectable",
    "is_separator",
    # Comparers
    "Comparer",
    "FuzzyMatch",
    "default_comparer",
    "fuzzy_comparer",
    "fuzzy_match",
    # Configuration
    "DEFAULT_EMPTY_MESSAGE",
    "DEFAULT_PAGE_SIZE",
    "SelectConfig",
    # Controller
    "HandleResult",
    "SelectionController",
    "SelectState",
    "Status",
    # Errors
    "ConfigurationError",
    "FuzzySelectError",
    "PromptCancelledError",
    "SelectionPendingError",
    # Keys
    "DEFAULT_SELECT_KEYBINDINGS",
    "Key",
    "SelectAction",
    "SelectKeybindings",
    "matches_key",
    "parse_key",
    # Rendering collaborators
    "LineBuffer",
    "Pager",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "SelectTheme",
    # Prompt
    "ProcessTerminal",
    "PromptSession",
    "Terminal",
    "fuzzy_select",
    "select",
]
