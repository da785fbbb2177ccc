"""Measuring and clipping terminal text.

Widths are counted per grapheme cluster, so a wide CJK character or an emoji
sequence takes two columns and a combining accent takes none. ANSI escape
sequences take no columns at all.
"""

from __future__ import annotations

import functools
import re

import grapheme
import wcwidth

# CSI sequences (SGR, cursor movement, erase) and OSC 8 hyperlinks
_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]|\x1b\]8;;[^\x07]*\x07")

TAB_WIDTH = 3

_ZWJ = 0x200D
_VS16 = 0xFE0F


def graphemes(text: str) -> list[str]:
    """Split *text* into user-perceived characters."""
    return list(grapheme.graphemes(text))


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from *text*."""
    return _ANSI_RE.sub("", text)


def _is_emoji_sequence(cluster: str) -> bool:
    for ch in cluster:
        cp = ord(ch)
        # joiner, emoji presentation selector, skin tones, regional indicators
        if cp in (_ZWJ, _VS16) or 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return True
    return False


def cluster_width(cluster: str) -> int:
    """Columns taken by one grapheme cluster; control characters take none."""
    if not cluster:
        return 0
    if len(cluster) > 1 and _is_emoji_sequence(cluster):
        return 2
    return max(wcwidth.wcwidth(cluster[0]), 0)


@functools.lru_cache(maxsize=512)
def _plain_width(text: str) -> int:
    return sum(cluster_width(g) for g in grapheme.graphemes(text))


def visible_width(text: str) -> int:
    """Columns *text* occupies on screen. Tabs count as three columns."""
    plain = strip_ansi(text).replace("\t", " " * TAB_WIDTH)
    if plain.isascii() and plain.isprintable():
        return len(plain)
    return _plain_width(plain)


def truncate_to_width(text: str, max_width: int, ellipsis: str = "...") -> str:
    """Clip *text* to *max_width* columns, ending it with *ellipsis*.

    The ellipsis counts towards the width. Escape sequences are copied
    through whole and never cut in half.
    """
    if max_width <= 0:
        return ""
    if visible_width(text) <= max_width:
        return text

    room = max_width - visible_width(ellipsis)
    if room <= 0:
        return _take_columns(ellipsis, max_width)
    return _take_columns(text, room) + ellipsis


def _take_columns(text: str, max_cols: int) -> str:
    out: list[str] = []
    cols = 0
    pos = 0
    for match in _ANSI_RE.finditer(text):
        chunk, cols, full = _take_plain(text[pos : match.start()], max_cols, cols)
        out.append(chunk)
        if not full:
            return "".join(out)
        out.append(match.group(0))
        pos = match.end()
    chunk, _cols, _full = _take_plain(text[pos:], max_cols, cols)
    out.append(chunk)
    return "".join(out)


def _take_plain(text: str, max_cols: int, cols: int) -> tuple[str, int, bool]:
    taken: list[str] = []
    for g in grapheme.graphemes(text):
        w = cluster_width(g)
        if cols + w > max_cols:
            return "".join(taken), cols, False
        taken.append(g)
        cols += w
    return "".join(taken), cols, True
