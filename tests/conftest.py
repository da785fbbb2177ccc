import pytest

from fuzzyselect.config import SelectConfig
from fuzzyselect.items import Choice
from fuzzyselect.theme import PLAIN_THEME
from virtual_terminal import VirtualTerminal

NUMBER_NAMES = ["one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]


@pytest.fixture
def numbered_choices() -> list[Choice]:
    """Choices 1..9 labelled one..nine."""
    return [Choice(value=i, name=name) for i, name in enumerate(NUMBER_NAMES, start=1)]


@pytest.fixture
def plain_config():
    """Build a SelectConfig with identity styling."""

    def make(**options) -> SelectConfig:
        return SelectConfig(theme=PLAIN_THEME, **options)

    return make


@pytest.fixture
def terminal() -> VirtualTerminal:
    return VirtualTerminal(columns=80)
