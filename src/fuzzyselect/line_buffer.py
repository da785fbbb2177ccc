"""Single-line edit buffer holding the filter query."""

from __future__ import annotations

import unicodedata

from fuzzyselect.keybindings import SelectKeybindings
from fuzzyselect.keys import PASTE_END, PASTE_START, is_printable_input, parse_key
from fuzzyselect.utils import graphemes

_SPACE, _PUNCT, _WORD = range(3)


def _char_class(cluster: str) -> int:
    if cluster.isspace():
        return _SPACE
    if unicodedata.category(cluster[0])[0] in "PS":
        return _PUNCT
    return _WORD


def _single_line(text: str) -> str:
    return text.replace("\r", "").replace("\n", "")


class LineBuffer:
    """Editable line with a cursor, in the manner of readline.

    Pressing Enter clears the line. When the Enter did not select anything,
    the select prompt writes the query back.

    Cursor movement and deletion work on grapheme clusters, so an accented
    letter typed as two code points is removed by a single backspace. Word
    motions skip whitespace, then one run of either punctuation or word
    characters.
    """

    def __init__(self, keybindings: SelectKeybindings | None = None) -> None:
        self._text = ""
        self._cursor = 0
        self._keybindings = keybindings or SelectKeybindings()
        # Text received since a paste-start marker, or None outside a paste
        self._paste: str | None = None

    @property
    def cursor(self) -> int:
        return self._cursor

    def get_value(self) -> str:
        return self._text

    def set_value(self, value: str) -> None:
        self._text = value
        self._cursor = len(value)

    def clear(self) -> None:
        self.set_value("")

    def write(self, text: str) -> None:
        """Insert *text* at the cursor."""
        self._text = self._text[: self._cursor] + text + self._text[self._cursor :]
        self._cursor += len(text)

    def handle_input(self, data: str) -> None:
        """Apply one key event or chunk of typed text."""
        if PASTE_START in data:
            self._paste = ""
            data = data.replace(PASTE_START, "")
        if self._paste is not None:
            self._collect_paste(data)
            return

        # Typed text that spells a key name, like "end", is still text
        key = parse_key(data)
        action = self._keybindings.action_for(key) if key else None
        edit = self._EDITS.get(action) if action else None
        if edit is not None:
            edit(self)
        elif action is None and is_printable_input(data):
            self.write(data)

    def _collect_paste(self, data: str) -> None:
        self._paste = (self._paste or "") + data
        pasted, marker, rest = self._paste.partition(PASTE_END)
        if not marker:
            return
        self._paste = None
        self.write(_single_line(pasted))
        if rest:
            self.handle_input(rest)

    # -- primitives ---------------------------------------------------------

    def _before(self) -> list[str]:
        return graphemes(self._text[: self._cursor])

    def _after(self) -> list[str]:
        return graphemes(self._text[self._cursor :])

    def _delete(self, start: int, end: int) -> None:
        self._text = self._text[:start] + self._text[end:]
        self._cursor = start

    def _word_start(self) -> int:
        clusters = self._before()
        pos = self._cursor
        while clusters and _char_class(clusters[-1]) == _SPACE:
            pos -= len(clusters.pop())
        if clusters:
            run = _char_class(clusters[-1])
            while clusters and _char_class(clusters[-1]) == run:
                pos -= len(clusters.pop())
        return pos

    def _word_end(self) -> int:
        clusters = self._after()
        pos = self._cursor
        i = 0
        while i < len(clusters) and _char_class(clusters[i]) == _SPACE:
            pos += len(clusters[i])
            i += 1
        if i < len(clusters):
            run = _char_class(clusters[i])
            while i < len(clusters) and _char_class(clusters[i]) == run:
                pos += len(clusters[i])
                i += 1
        return pos

    # -- edits --------------------------------------------------------------

    def _left(self) -> None:
        before = self._before()
        if before:
            self._cursor -= len(before[-1])

    def _right(self) -> None:
        after = self._after()
        if after:
            self._cursor += len(after[0])

    def _home(self) -> None:
        self._cursor = 0

    def _end(self) -> None:
        self._cursor = len(self._text)

    def _word_left(self) -> None:
        self._cursor = self._word_start()

    def _word_right(self) -> None:
        self._cursor = self._word_end()

    def _backspace(self) -> None:
        before = self._before()
        if before:
            self._delete(self._cursor - len(before[-1]), self._cursor)

    def _delete_forward(self) -> None:
        after = self._after()
        if after:
            self._delete(self._cursor, self._cursor + len(after[0]))

    def _delete_word_backward(self) -> None:
        self._delete(self._word_start(), self._cursor)

    def _delete_to_start(self) -> None:
        self._delete(0, self._cursor)

    def _delete_to_end(self) -> None:
        self._delete(self._cursor, len(self._text))

    _EDITS = {
        "cursorLeft": _left,
        "cursorRight": _right,
        "cursorLineStart": _home,
        "cursorLineEnd": _end,
        "cursorWordLeft": _word_left,
        "cursorWordRight": _word_right,
        "deleteCharBackward": _backspace,
        "deleteCharForward": _delete_forward,
        "deleteWordBackward": _delete_word_backward,
        "deleteToLineStart": _delete_to_start,
        "deleteToLineEnd": _delete_to_end,
    }
