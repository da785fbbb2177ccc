"""Tests for list items and their helpers."""

from __future__ import annotations

import dataclasses

import pytest

from fuzzyselect.items import (
    DEFAULT_SEPARATOR,
    Choice,
    Separator,
    coerce_choice,
    first_selectable_index,
    is_selectable,
    is_separator,
    last_selectable_index,
)


class TestChoice:
    def test_label_defaults_to_value(self) -> None:
        assert Choice(value=3).label == "3"
        assert Choice(value="ham").label == "ham"

    def test_name_is_the_label(self) -> None:
        assert Choice(value="ham", name="Ham").label == "Ham"

    def test_kind_tag(self) -> None:
        assert Choice(value=1).kind == "choice"
        assert Separator().kind == "separator"

    def test_kind_cannot_be_passed(self) -> None:
        with pytest.raises(TypeError):
            Choice(value=1, kind="separator")  # type: ignore[call-arg]

    def test_is_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Choice(value=1).name = "one"  # type: ignore[misc]

    def test_disabled_label(self) -> None:
        assert Choice(value=1, disabled=True).disabled_label == "(disabled)"
        assert Choice(value=1, disabled="*premium*").disabled_label == "*premium*"

    def test_meta_is_carried(self) -> None:
        assert Choice(value=1, meta={"price": 2}).meta == {"price": 2}


class TestSeparator:
    def test_default_line(self) -> None:
        assert Separator().separator == DEFAULT_SEPARATOR
        assert DEFAULT_SEPARATOR == "─" * 14

    def test_custom_line(self) -> None:
        assert Separator("== meats ==").separator == "== meats =="


class TestSelectability:
    def test_enabled_choice(self) -> None:
        assert is_selectable(Choice(value=1))

    def test_disabled_choice(self) -> None:
        assert not is_selectable(Choice(value=1, disabled=True))
        assert not is_selectable(Choice(value=1, disabled="sold out"))

    def test_empty_disabled_string_is_enabled(self) -> None:
        assert is_selectable(Choice(value=1, disabled=""))

    def test_separator(self) -> None:
        assert not is_selectable(Separator())
        assert is_separator(Separator())
        assert not is_separator(Choice(value=1))

    def test_first_and_last_selectable(self) -> None:
        items = [Separator(), Choice(value=1), Choice(value=2, disabled=True), Separator()]
        assert first_selectable_index(items) == 1
        assert last_selectable_index(items) == 1

    def test_none_selectable(self) -> None:
        items = [Separator(), Choice(value=1, disabled=True)]
        assert first_selectable_index(items) == -1
        assert last_selectable_index(items) == -1
        assert first_selectable_index([]) == -1


class TestCoerceChoice:
    def test_items_pass_through(self) -> None:
        choice = Choice(value=1)
        separator = Separator()
        assert coerce_choice(choice) is choice
        assert coerce_choice(separator) is separator

    def test_bare_value(self) -> None:
        assert coerce_choice("red") == Choice(value="red")

    def test_mapping(self) -> None:
        item = coerce_choice(
            {"value": 2, "name": "two", "description": "even", "disabled": "no"}
        )
        assert item == Choice(value=2, name="two", description="even", disabled="no")

    def test_mapping_without_value(self) -> None:
        with pytest.raises(TypeError, match="no 'value' key"):
            coerce_choice({"name": "two"})
