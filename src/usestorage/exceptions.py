"""Custom exception hierarchy for usestorage."""

from __future__ import annotations

import enum
from typing import ClassVar


class ErrorKind(enum.StrEnum):
    """Fixed error enumeration surfaced to the host.

    Values are the names the host reports in its dispatch results.
    """

    UNAUTHORIZED = "BadOrigin"
    DUPLICATE_KEY = "NoneValue"
    STORAGE_OVERFLOW = "StorageOverflow"


class UseStorageError(Exception):
    """Base exception for all usestorage errors."""


class UseStorageConfigError(UseStorageError):
    """Invalid or missing configuration."""


class UnknownCallError(UseStorageError):
    """Call index does not name any dispatchable operation."""

    def __init__(self, message: str, *, call_index: int) -> None:
        self.call_index = call_index
        super().__init__(message)


class DispatchError(UseStorageError):
    """An operation was rejected; storage was left untouched.

    Only the subclasses are raised; each one fixes its :class:`ErrorKind`.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str = "", *, operation: str = "") -> None:
        if type(self) is DispatchError:
            raise TypeError("DispatchError is abstract; raise one of its subclasses")
        self.operation = operation
        super().__init__(message or self.kind.value)


class UnauthorizedError(DispatchError):
    """Caller is not a signed principal."""

    kind = ErrorKind.UNAUTHORIZED


class DuplicateKeyError(DispatchError):
    """Student number is already registered (reference name ``NoneValue``).

    Student entries are write-once, so a second registration for the same
    number is rejected and the stored name is kept.
    """

    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, message: str = "", *, operation: str = "", key: int | None = None) -> None:
        self.key = key
        super().__init__(message, operation=operation)


class StorageOverflowError(DispatchError):
    """A stored counter would exceed its width.

    Reserved for counter-style operations. None of the current operations
    raise it.
    """

    kind = ErrorKind.STORAGE_OVERFLOW
