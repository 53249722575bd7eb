"""Shared exception classes for rand-str-gen."""

from __future__ import annotations

USE_HELP_MSG = "use `--help` for valid args"


class RandStrError(Exception):
    """Base exception for all rand-str-gen errors.

    Every error carries a ``hint`` that is shown to the user on the
    ``HELP:`` line after the error description.
    """

    exit_code = 1

    def __init__(self, message: str, hint: str = USE_HELP_MSG) -> None:
        super().__init__(message)
        self.hint = hint


class UsageError(RandStrError):
    """Malformed command line or pool entries."""

    exit_code = 2


class MissingArgumentError(UsageError):
    """A required argument or flag value is absent."""

    pass


class InvalidIntegerError(UsageError):
    """A length or repeat count is not a valid integer."""

    pass


class UnknownFlagError(UsageError):
    """A flag that the parser does not know."""

    pass


class InvalidPrefixError(UsageError):
    """A pool entry does not start with ``+`` or ``-``."""

    def __init__(self, message: str, hint: str = "expected + or -") -> None:
        super().__init__(message, hint)


class InvalidPoolEntryError(UsageError):
    """A pool entry contains an unknown set letter."""

    pass


class DuplicateCharacterError(UsageError):
    """A custom character is already present in the pool."""

    pass


class CharacterNotFoundError(UsageError):
    """A character to remove is not present in the pool."""

    pass


class EnvironmentFault(RandStrError):
    """The OS failed underneath us; not the user's fault."""

    pass


class RandomSourceError(EnvironmentFault):
    """The OS random byte source failed."""

    pass


class ClipboardError(EnvironmentFault):
    """Clipboard backend unavailable or write failed."""

    pass
