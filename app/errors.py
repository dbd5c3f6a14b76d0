"""Errors raised by the rewards core.

The HTTP layer maps these to status codes; nothing in the core knows
about transport.
"""


class RewardsError(Exception):
    """Base class for reward computation failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(RewardsError):
    """Client-supplied data is malformed or breaks a business rule."""


class NotFoundError(RewardsError):
    """The referenced customer does not exist."""
