"""CLI entry point for fuzzy-select. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import os
import sys

import click

from fuzzyselect.comparers import default_comparer, fuzzy_comparer
from fuzzyselect.config import UNSET, SelectConfig
from fuzzyselect.errors import ConfigurationError, PromptCancelledError
from fuzzyselect.items import Choice, ListItem, Separator
from fuzzyselect.prompt import select
from fuzzyselect.theme import DEFAULT_THEME, PLAIN_THEME

logger = logging.getLogger(__name__)

SEPARATOR_LINE = "---"

# Conventional exit status for a prompt interrupted with Ctrl+C
EXIT_CANCELLED = 130


def parse_choice_lines(lines: list[str]) -> list[ListItem]:
    """One choice per non-blank line; ``---`` becomes a separator."""
    items: list[ListItem] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        if line.strip() == SEPARATOR_LINE:
            items.append(Separator())
        else:
            items.append(Choice(value=line))
    return items


@click.command()
@click.argument("message")
@click.argument("choices", nargs=-1)
@click.option(
    "--file",
    "-f",
    "choices_file",
    type=click.File("r"),
    default=None,
    help="Read choices from a file, one per line ('---' for a separator)",
)
@click.option(
    "--page-size",
    type=click.IntRange(min=1),
    default=7,
    show_default=True,
    envvar="FUZZY_SELECT_PAGE_SIZE",
    help="Number of rows shown at once",
)
@click.option("--loop/--no-loop", default=True, help="Wrap around at the ends of the list")
@click.option("--default", "default", default=None, help="Choice to highlight initially")
@click.option(
    "--empty-message",
    default="No matches for your query",
    envvar="FUZZY_SELECT_EMPTY_MESSAGE",
    help="Shown when the filter matches nothing",
)
@click.option("--fuzzy", is_flag=True, help="Match query characters in order instead of as a substring")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Log level (logs go to stderr)",
)
def main(message, choices, choices_file, page_size, loop, default, empty_message, fuzzy, log_level):
    """Ask MESSAGE and print the chosen one of CHOICES."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    items: list[ListItem] = [Choice(value=c) for c in choices]
    if choices_file is not None:
        items.extend(parse_choice_lines(choices_file.readlines()))
    if not items:
        raise click.UsageError("no choices given")

    config = SelectConfig(
        page_size=page_size,
        loop=loop,
        default=UNSET if default is None else default,
        empty_message=empty_message,
        comparer=fuzzy_comparer if fuzzy else default_comparer,
        theme=PLAIN_THEME if os.environ.get("NO_COLOR") else DEFAULT_THEME,
    )
    logger.debug("prompting with %d items", len(items))

    try:
        value = select(message, items, config=config)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)
    except PromptCancelledError:
        sys.exit(EXIT_CANCELLED)

    click.echo(value)


if __name__ == "__main__":
    main()
