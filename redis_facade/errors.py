"""Error kinds raised by facade operations."""

from __future__ import annotations


class FacadeError(Exception):
    """Base class for all facade errors."""


class CommandError(FacadeError):
    """Redis rejected a command (syntax, arity, unknown command)."""


class WrongTypeError(CommandError, TypeError):
    """A command was issued against a key holding an incompatible type."""


class NotANumberError(CommandError, ValueError):
    """A numeric operation was applied to a non-numeric value."""


class TransactionError(CommandError):
    """A MULTI/EXEC block was rejected or could not be committed.

    Batches guarantee that no other client's command interleaves with the
    queued commands. They do not guarantee rollback: commands that succeeded
    before a failing one inside the same EXEC keep their effect.
    """


class IndexOutOfRangeError(FacadeError, IndexError):
    """Positional access beyond the current bounds of a list."""
