"""CLI behavior tests using Click's CliRunner."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

import fuzzyselect.cli as cli
from fuzzyselect.comparers import default_comparer, fuzzy_comparer
from fuzzyselect.config import UNSET
from fuzzyselect.errors import ConfigurationError, PromptCancelledError
from fuzzyselect.items import Choice, Separator
from fuzzyselect.theme import DEFAULT_THEME, PLAIN_THEME

runner = CliRunner()


class FakeSelect:
    """Stands in for the interactive prompt and records how it was called."""

    def __init__(self, result="picked", error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple] = []

    def __call__(self, message, items, config=None):
        self.calls.append((message, items, config))
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def config(self):
        return self.calls[-1][2]

    @property
    def items(self):
        return self.calls[-1][1]


@pytest.fixture
def fake_select(monkeypatch) -> FakeSelect:
    fake = FakeSelect()
    monkeypatch.setattr(cli, "select", fake)
    return fake


class TestParseChoiceLines:
    def test_one_choice_per_line(self) -> None:
        assert cli.parse_choice_lines(["red\n", "green\n"]) == [
            Choice(value="red"),
            Choice(value="green"),
        ]

    def test_separator_and_blank_lines(self) -> None:
        items = cli.parse_choice_lines(["ham\n", "\n", "---\n", "pepperoni\r\n"])
        assert items == [Choice(value="ham"), Separator(), Choice(value="pepperoni")]

    def test_inner_whitespace_is_kept(self) -> None:
        assert cli.parse_choice_lines(["  extra cheese \n"]) == [Choice(value="  extra cheese ")]


class TestMainCommand:
    def test_prints_selected_value(self, fake_select) -> None:
        fake_select.result = "green"
        result = runner.invoke(cli.main, ["Pick a color", "red", "green"], env={"NO_COLOR": None})
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "green"
        message, items, _config = fake_select.calls[0]
        assert message == "Pick a color"
        assert items == [Choice(value="red"), Choice(value="green")]

    def test_default_config(self, fake_select) -> None:
        runner.invoke(
            cli.main,
            ["Pick", "a", "b"],
            env={"NO_COLOR": None, "FUZZY_SELECT_PAGE_SIZE": None, "FUZZY_SELECT_EMPTY_MESSAGE": None},
        )
        config = fake_select.config
        assert config.page_size == 7
        assert config.loop is True
        assert config.default is UNSET
        assert config.empty_message == "No matches for your query"
        assert config.comparer is default_comparer
        assert config.theme is DEFAULT_THEME

    def test_options(self, fake_select) -> None:
        result = runner.invoke(
            cli.main,
            [
                "Pick", "a", "b",
                "--page-size", "3",
                "--no-loop",
                "--default", "b",
                "--empty-message", "Nothing here",
                "--fuzzy",
            ],
        )
        assert result.exit_code == 0, result.output
        config = fake_select.config
        assert config.page_size == 3
        assert config.loop is False
        assert config.default == "b"
        assert config.empty_message == "Nothing here"
        assert config.comparer is fuzzy_comparer

    def test_environment_variables(self, fake_select) -> None:
        runner.invoke(
            cli.main,
            ["Pick", "a"],
            env={"FUZZY_SELECT_PAGE_SIZE": "4", "FUZZY_SELECT_EMPTY_MESSAGE": "Nope"},
        )
        assert fake_select.config.page_size == 4
        assert fake_select.config.empty_message == "Nope"

    def test_no_color(self, fake_select) -> None:
        runner.invoke(cli.main, ["Pick", "a"], env={"NO_COLOR": "1"})
        assert fake_select.config.theme is PLAIN_THEME

    def test_choices_from_file(self, fake_select, tmp_path) -> None:
        path = tmp_path / "toppings.txt"
        path.write_text("Ham\n---\n\nPepperoni\n")
        result = runner.invoke(cli.main, ["Select a topping", "Cheese", "--file", str(path)])
        assert result.exit_code == 0, result.output
        assert fake_select.items == [
            Choice(value="Cheese"),
            Choice(value="Ham"),
            Separator(),
            Choice(value="Pepperoni"),
        ]

    def test_no_choices_is_a_usage_error(self, fake_select) -> None:
        result = runner.invoke(cli.main, ["Pick"])
        assert result.exit_code == 2
        assert "no choices given" in result.output
        assert fake_select.calls == []

    def test_page_size_must_be_positive(self, fake_select) -> None:
        result = runner.invoke(cli.main, ["Pick", "a", "--page-size", "0"])
        assert result.exit_code == 2
        assert fake_select.calls == []

    def test_configuration_error_exit_code(self, fake_select) -> None:
        fake_select.error = ConfigurationError("No selectable choices.")
        result = runner.invoke(cli.main, ["Pick", "a"])
        assert result.exit_code == 2
        assert "Error: No selectable choices." in result.output

    def test_cancel_exit_code(self, fake_select) -> None:
        fake_select.error = PromptCancelledError()
        result = runner.invoke(cli.main, ["Pick", "a"])
        assert result.exit_code == cli.EXIT_CANCELLED
        assert result.output == ""
