"""List items: selectable choices and non-selectable separators.

A list item is a closed tagged variant. Every item carries a ``kind``
attribute (``"choice"`` or ``"separator"``) and code that needs to tell them
apart switches on that tag.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar, Union

V = TypeVar("V")
M = TypeVar("M")

DEFAULT_SEPARATOR = "─" * 14
DEFAULT_DISABLED_LABEL = "(disabled)"

ItemKind = Literal["choice", "separator"]


@dataclass(frozen=True)
class Choice(Generic[V, M]):
    """A selectable entry.

    ``name`` is the display label and defaults to ``str(value)``. ``disabled``
    may be a string, in which case it replaces the generic ``(disabled)``
    annotation.
    """

    value: V
    name: str | None = None
    description: str | None = None
    disabled: bool | str = False
    meta: M | None = None
    kind: ItemKind = field(default="choice", init=False, repr=False)

    @property
    def label(self) -> str:
        return self.name if self.name else str(self.value)

    @property
    def disabled_label(self) -> str:
        if isinstance(self.disabled, str) and self.disabled:
            return self.disabled
        return DEFAULT_DISABLED_LABEL


@dataclass(frozen=True)
class Separator:
    """A section marker. Never matches a filter and never holds the cursor."""

    separator: str = DEFAULT_SEPARATOR
    kind: ItemKind = field(default="separator", init=False, repr=False)


ListItem = Union[Choice[Any, Any], Separator]


def is_separator(item: ListItem) -> bool:
    return item.kind == "separator"


def is_selectable(item: ListItem) -> bool:
    """A choice that is not disabled."""
    if is_separator(item):
        return False
    return not item.disabled


def first_selectable_index(items: Sequence[ListItem]) -> int:
    for index, item in enumerate(items):
        if is_selectable(item):
            return index
    return -1


def last_selectable_index(items: Sequence[ListItem]) -> int:
    for index in range(len(items) - 1, -1, -1):
        if is_selectable(items[index]):
            return index
    return -1


def coerce_choice(obj: Any) -> ListItem:
    """Turn plain data into a list item.

    Accepts an existing ``Choice`` or ``Separator``, a mapping with
    ``value``/``name``/``description``/``disabled``/``meta`` keys, or a bare
    value which becomes a choice labelled ``str(value)``.
    """
    if isinstance(obj, (Choice, Separator)):
        return obj
    if isinstance(obj, Mapping):
        if "value" not in obj:
            raise TypeError(f"choice mapping has no 'value' key: {obj!r}")
        return Choice(
            value=obj["value"],
            name=obj.get("name"),
            description=obj.get("description"),
            disabled=obj.get("disabled", False),
            meta=obj.get("meta"),
        )
    return Choice(value=obj)
