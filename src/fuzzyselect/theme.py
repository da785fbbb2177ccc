"""Styling hooks for the select prompt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


def _sgr(on: str, off: str) -> Callable[[str], str]:
    def style(text: str) -> str:
        return f"\x1b[{on}m{text}\x1b[{off}m" if text else text

    return style


def _identity(text: str) -> str:
    return text


@dataclass(frozen=True)
class SelectTheme:
    bold: Callable[[str], str]
    dim: Callable[[str], str]
    highlight: Callable[[str], str]
    prefix: str = "?"
    pointer: str = "❯"


DEFAULT_THEME = SelectTheme(
    bold=_sgr("1", "22"),
    dim=_sgr("2", "22"),
    highlight=_sgr("36", "39"),
    prefix=_sgr("32", "39")("?"),
)

PLAIN_THEME = SelectTheme(
    bold=_identity,
    dim=_identity,
    highlight=_identity,
)
