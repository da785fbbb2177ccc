"""Which keys trigger which prompt actions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal, Union

from fuzzyselect.keys import KeyId, matches_key

SelectAction = Literal[
    "selectUp",
    "selectDown",
    "selectConfirm",
    "selectCancel",
    # editing the filter line
    "cursorLeft",
    "cursorRight",
    "cursorWordLeft",
    "cursorWordRight",
    "cursorLineStart",
    "cursorLineEnd",
    "deleteCharBackward",
    "deleteCharForward",
    "deleteWordBackward",
    "deleteToLineStart",
    "deleteToLineEnd",
]

KeySpec = Union[KeyId, list[KeyId]]
SelectKeybindingsConfig = Mapping[SelectAction, KeySpec]

DEFAULT_SELECT_KEYBINDINGS: dict[SelectAction, KeySpec] = {
    "selectUp": ["up", "ctrl+p"],
    "selectDown": ["down", "ctrl+n"],
    "selectConfirm": "enter",
    "selectCancel": ["escape", "ctrl+c"],
    "cursorLeft": ["left", "ctrl+b"],
    "cursorRight": ["right", "ctrl+f"],
    "cursorWordLeft": ["alt+left", "ctrl+left", "alt+b"],
    "cursorWordRight": ["alt+right", "ctrl+right", "alt+f"],
    "cursorLineStart": ["home", "ctrl+a"],
    "cursorLineEnd": ["end", "ctrl+e"],
    "deleteCharBackward": "backspace",
    "deleteCharForward": ["delete", "ctrl+d"],
    "deleteWordBackward": ["ctrl+w", "alt+backspace"],
    "deleteToLineStart": "ctrl+u",
    "deleteToLineEnd": "ctrl+k",
}


def _key_tuple(spec: KeySpec) -> tuple[KeyId, ...]:
    return (spec,) if isinstance(spec, str) else tuple(spec)


class SelectKeybindings:
    """Key map owned by one prompt session.

    ``config`` names the actions whose keys should change; every other action
    keeps its default keys. Lookups go through :func:`matches_key`, so raw
    terminal input and decoded key ids both work.
    """

    def __init__(self, config: SelectKeybindingsConfig | None = None) -> None:
        self._keys: dict[SelectAction, tuple[KeyId, ...]] = {}
        self.set_config(config or {})

    def set_config(self, config: SelectKeybindingsConfig) -> None:
        """Replace the overrides. Actions not named revert to their defaults."""
        merged = {**DEFAULT_SELECT_KEYBINDINGS, **config}
        self._keys = {action: _key_tuple(spec) for action, spec in merged.items()}

    def get_keys(self, action: SelectAction) -> list[KeyId]:
        return list(self._keys.get(action, ()))

    def matches(self, data: str, action: SelectAction) -> bool:
        return any(matches_key(data, key) for key in self._keys.get(action, ()))

    def action_for(self, data: str) -> SelectAction | None:
        """First action bound to *data*, in declaration order, or ``None``."""
        for action, keys in self._keys.items():
            if any(matches_key(data, key) for key in keys):
                return action
        return None
