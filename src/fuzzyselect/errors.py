"""Exceptions raised by fuzzy-select."""

from __future__ import annotations


class FuzzySelectError(Exception):
    """Base class for all fuzzy-select errors."""


class ConfigurationError(FuzzySelectError, ValueError):
    """The prompt was configured in a way that can never produce a value."""


class SelectionPendingError(FuzzySelectError):
    """The result was requested before a choice was confirmed."""


class PromptCancelledError(FuzzySelectError):
    """The prompt session was torn down before a choice was confirmed."""

    def __init__(self, message: str = "User force closed the prompt") -> None:
        super().__init__(message)
