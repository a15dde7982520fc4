"""Exceptions raised by showdown.

Everything derives from ``ValueError`` as well, so callers that only
care about bad input can keep catching that.
"""


class ShowdownError(Exception):
    """Base class for all showdown errors."""


class InvalidRank(ShowdownError, ValueError):
    """A rank value or rank code is not a known card rank."""


class InvalidSuit(ShowdownError, ValueError):
    """A suit letter is not one of C, D, H, S."""


class ValidationError(ShowdownError, ValueError):
    """A hand is malformed, usually because it is not exactly five cards."""

    def __init__(self, message: str, count: int | None = None) -> None:
        super().__init__(message)
        self.count = count


class EmptyInputError(ShowdownError, ValueError):
    """Winner selection was asked to pick from zero hands."""
