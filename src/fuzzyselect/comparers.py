"""Comparers: filter text in, per-item inclusion test out.

A comparer receives the current (already lower-cased) filter text and returns
a predicate over list items. Separators pass every comparer so they stay in
place as section markers; the controller never lets them take the cursor.

Fuzzy matching: all query characters must appear in order (not necessarily
consecutive). Lower score = better match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from fuzzyselect.items import ListItem, is_separator

Comparer = Callable[[str], Callable[[ListItem], bool]]

_WORD_BOUNDARY_RE = re.compile(r"[\s\-_./:]")
_LETTERS_DIGITS_RE = re.compile(
    r"^(?:(?P<letters>[a-z]+)(?P<digits>[0-9]+)|(?P<digits2>[0-9]+)(?P<letters2>[a-z]+))$"
)

CONSECUTIVE_BONUS = 5
WORD_START_BONUS = 10
GAP_PENALTY = 2
POSITION_PENALTY = 0.1
SWAP_PENALTY = 5


def _searchable_text(item: ListItem) -> str | None:
    """Text a choice is matched against, or ``None`` if it cannot be matched.

    The label wins over the value; only strings, numbers and booleans are
    searchable.
    """
    target = item.name if item.name is not None else item.value
    if isinstance(target, bool):
        return str(target).lower()
    if isinstance(target, (str, int, float)):
        return str(target)
    return None


def default_comparer(text: str) -> Callable[[ListItem], bool]:
    """Case-insensitive substring match on the label (or value)."""
    needle = text.lower()

    def matches(item: ListItem) -> bool:
        if is_separator(item):
            return True
        haystack = _searchable_text(item)
        if haystack is None:
            return False
        return needle in haystack.lower()

    return matches


def fuzzy_comparer(text: str) -> Callable[[ListItem], bool]:
    """Subsequence match; every whitespace-separated token must match."""
    tokens = text.split()

    def matches(item: ListItem) -> bool:
        if is_separator(item):
            return True
        haystack = _searchable_text(item)
        if haystack is None:
            return False
        return all(fuzzy_match(token, haystack).matches for token in tokens)

    return matches


@dataclass
class FuzzyMatch:
    matches: bool
    score: float


def _subsequence_score(query: str, text: str) -> float | None:
    """Score *query* as an in-order subsequence of *text*; ``None`` if it is not.

    Consecutive runs and matches at the start of a word lower the score; gaps
    between matches and matches far into the text raise it.
    """
    if not query:
        return 0
    if len(query) > len(text):
        return None

    score: float = 0
    run = 0
    prev = -1
    positions = enumerate(text)
    for wanted in query:
        for i, ch in positions:
            if ch == wanted:
                break
        else:
            return None

        if i == prev + 1:
            run += 1
            score -= run * CONSECUTIVE_BONUS
        else:
            run = 0
            if prev >= 0:
                score += (i - prev - 1) * GAP_PENALTY
        if i == 0 or _WORD_BOUNDARY_RE.match(text[i - 1]):
            score -= WORD_START_BONUS
        score += i * POSITION_PENALTY
        prev = i
    return score


def _swap_letters_digits(query: str) -> str | None:
    """``"abc123"`` -> ``"123abc"`` and back; ``None`` for any other shape."""
    m = _LETTERS_DIGITS_RE.match(query)
    if m is None:
        return None
    if m.group("letters"):
        return m.group("digits") + m.group("letters")
    return m.group("letters2") + m.group("digits2")


def fuzzy_match(query: str, text: str) -> FuzzyMatch:
    """Case-insensitive subsequence match of *query* in *text*. Lower score is better."""
    query = query.lower()
    text = text.lower()

    score = _subsequence_score(query, text)
    if score is None:
        swapped = _swap_letters_digits(query)
        if swapped is not None:
            score = _subsequence_score(swapped, text)
            if score is not None:
                score += SWAP_PENALTY

    if score is None:
        return FuzzyMatch(matches=False, score=0)
    return FuzzyMatch(matches=True, score=score)
