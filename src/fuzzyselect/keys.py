"""Keyboard input decoding for the select prompt.

Turns raw terminal input (legacy VT/xterm escape sequences, control bytes and
printable text) into key identifiers such as ``"up"``, ``"ctrl+c"`` or
``"shift+tab"``. ``matches_key`` accepts either raw input or an
already-decoded identifier, so the controller can be driven by tests and by
alternative front-ends without going through escape sequences.
"""

from __future__ import annotations

KeyId = str


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# xterm modifier parameter is 1 + bitmask
MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

_MODIFIER_ORDER = ("ctrl", "shift", "alt")

# Legacy escape sequences -> key names (unmodified)
LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[7~": "home",
    "\x1b[8~": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1b[Z": "shift+tab",
}

# CSI 1;<mod><letter> and CSI <n>;<mod>~ forms for modified keys
_LETTER_FINALS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

_TILDE_CODES: dict[str, str] = {
    "2": "insert",
    "3": "delete",
    "5": "pageUp",
    "6": "pageDown",
}


def _modifier_prefix(bits: int) -> str:
    return "".join(f"{name}+" for name in _MODIFIER_ORDER if bits & MODIFIERS[name])


def _build_modified_sequences() -> dict[str, str]:
    sequences: dict[str, str] = {}
    for bits in range(1, 8):
        param = bits + 1
        prefix = _modifier_prefix(bits)
        for final, name in _LETTER_FINALS.items():
            sequences[f"\x1b[1;{param}{final}"] = prefix + name
        for code, name in _TILDE_CODES.items():
            sequences[f"\x1b[{code};{param}~"] = prefix + name
    return sequences


MODIFIED_KEY_SEQUENCES: dict[str, str] = _build_modified_sequences()


def normalize_key_id(key_id: KeyId) -> KeyId:
    """Return *key_id* with its modifiers in canonical ``ctrl+shift+alt`` order.

    ``"shift+ctrl+up"`` -> ``"ctrl+shift+up"``. Modifier names are
    case-insensitive; the base key keeps its case so that ``"A"`` and ``"a"``
    stay distinct.
    """
    if len(key_id) <= 1:
        return key_id
    parts = key_id.split("+")
    # "ctrl++" style ids name the plus key itself
    if key_id.endswith("++"):
        parts = parts[:-2] + ["+"]
    base = parts[-1]
    modifiers = {p.lower() for p in parts[:-1]}
    unknown = modifiers - set(MODIFIERS)
    if unknown:
        return key_id
    bits = sum(MODIFIERS[m] for m in modifiers)
    return _modifier_prefix(bits) + base


def parse_key(data: str) -> KeyId | None:
    """Parse raw terminal input and return the key identifier, or ``None``.

    Multi-character printable input (a paste, or fast typing delivered in one
    read) is not a single key and yields ``None``.
    """
    if not data:
        return None

    if data in LEGACY_KEY_SEQUENCES:
        return LEGACY_KEY_SEQUENCES[data]
    if data in MODIFIED_KEY_SEQUENCES:
        return MODIFIED_KEY_SEQUENCES[data]

    if data == "\x1b":
        return "escape"
    if data in ("\r", "\n"):
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data in ("\x7f", "\x08"):
        return "backspace"
    if data == "\x00":
        return "ctrl+space"

    # Ctrl + letter (0x01 - 0x1a)
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # Alt + key arrives ESC-prefixed
    if len(data) == 2 and data[0] == "\x1b":
        ch = data[1]
        if ch in ("\r", "\n"):
            return "alt+enter"
        if ch in ("\x7f", "\x08"):
            return "alt+backspace"
        if 1 <= ord(ch) <= 26:
            return "ctrl+alt+" + chr(ord(ch) + ord("a") - 1)
        if ch.isprintable():
            return "alt+" + ch

    if len(data) == 1 and data.isprintable():
        return data

    return None


def matches_key(data: str, key_id: KeyId) -> bool:
    """Return ``True`` if *data* corresponds to the named *key_id*.

    *data* may be raw terminal input or a key identifier that was already
    decoded upstream.
    """
    expected = normalize_key_id(key_id)
    decoded = parse_key(data)
    if decoded is not None and decoded == expected:
        return True
    return len(data) > 1 and normalize_key_id(data) == expected


PASTE_START = "\x1b[200~"
PASTE_END = "\x1b[201~"


def _escape_length(data: str, start: int) -> int:
    """Length of the escape sequence beginning at ``data[start]``."""
    if start + 1 >= len(data):
        return 1
    introducer = data[start + 1]
    if introducer == "[":
        end = start + 2
        # CSI parameters run until a final byte in 0x40..0x7E
        while end < len(data) and not 0x40 <= ord(data[end]) <= 0x7E:
            end += 1
        return min(end + 1, len(data)) - start
    if introducer == "O":
        return min(3, len(data) - start)
    return 2


def split_input(data: str) -> list[str]:
    """Split one read from the terminal into individual key events.

    Escape sequences and control bytes become separate chunks, runs of
    printable text stay together and a bracketed paste is kept whole.
    """
    chunks: list[str] = []
    text: list[str] = []

    def flush_text() -> None:
        if text:
            chunks.append("".join(text))
            text.clear()

    i = 0
    while i < len(data):
        if data.startswith(PASTE_START, i):
            flush_text()
            end = data.find(PASTE_END, i)
            if end == -1:
                chunks.append(data[i:])
                break
            end += len(PASTE_END)
            chunks.append(data[i:end])
            i = end
            continue

        ch = data[i]
        if ch == "\x1b":
            flush_text()
            length = _escape_length(data, i)
            chunks.append(data[i : i + length])
            i += length
        elif ord(ch) < 32 or ord(ch) == 0x7F:
            flush_text()
            chunks.append(ch)
            i += 1
        else:
            text.append(ch)
            i += 1

    flush_text()
    return chunks


def is_printable_input(data: str) -> bool:
    """``True`` when *data* contains no control characters."""
    return bool(data) and not any(
        ord(ch) < 32 or ord(ch) == 0x7F or (0x80 <= ord(ch) <= 0x9F) for ch in data
    )
