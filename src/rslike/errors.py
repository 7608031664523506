"""Error types: dual struct+exception for Result payloads and raise-based code."""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    'AsyncNotAllowed',
    'AsyncNotAllowedError',
    'EmptyOptional',
    'EmptyOptionalError',
    'UndefinedBehavior',
    'UndefinedBehaviorError',
    'UnwrapError',
]


# --- Contract violations ---


class UndefinedBehavior(msgspec.Struct, frozen=True, gc=False):
    """Contract violation - struct variant for Result[T, UndefinedBehavior]."""

    message: str

    def to_exception(self) -> UndefinedBehaviorError:
        """Convert to exception for raise-based code."""
        return UndefinedBehaviorError(self.message)


class UndefinedBehaviorError(Exception):
    """A container API was used outside of its contract.

    Raised for wrong argument types, callbacks returning something other than
    the container they must return, predicates returning non-bool values and
    similar misuse. Never caught by the containers themselves.

    Attributes:
        context: Details about the offending value (value, type, status...).
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_struct(self) -> UndefinedBehavior:
        """Convert to struct for Result-based code."""
        return UndefinedBehavior(self.message)


class AsyncNotAllowed(msgspec.Struct, frozen=True, gc=False):
    """Async executor rejected - struct variant."""

    message: str = 'Only synchronous executors are allowed'

    def to_exception(self) -> AsyncNotAllowedError:
        """Convert to exception for raise-based code."""
        return AsyncNotAllowedError(self.message)


class AsyncNotAllowedError(UndefinedBehaviorError):
    """An executor was asynchronous or returned an awaitable.

    Container executors must settle synchronously. Use ``Async`` or the
    ``from_awaitable`` constructors to wrap awaitables instead.
    """

    def __init__(self, message: str = 'Only synchronous executors are allowed', **context: Any) -> None:
        super().__init__(message, **context)

    def to_struct(self) -> AsyncNotAllowed:
        """Convert to struct for Result-based code."""
        return AsyncNotAllowed(self.message)


# --- Unwrap failures ---


class UnwrapError(Exception):
    """An accessor was called on the wrong arm of a container.

    Raised by ``Result.unwrap`` when the held error is not an exception
    instance, by ``expect``/``expect_err`` with the caller's reason, and by
    ``unwrap_err`` on Ok.

    Attributes:
        value: The payload of the arm that was actually present.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(message)


class EmptyOptional(msgspec.Struct, frozen=True, gc=False):
    """Unwrap on an empty Option - struct variant."""

    reason: str | None = None

    def to_exception(self) -> EmptyOptionalError:
        """Convert to exception for raise-based code."""
        return EmptyOptionalError(self.reason)


class EmptyOptionalError(UnwrapError):
    """``unwrap``/``expect`` was called on an Option with None status."""

    def __init__(self, reason: str | None = None) -> None:
        self.reason = reason
        super().__init__(reason if reason is not None else "Unwrap error. Option have 'None' status")

    def to_struct(self) -> EmptyOptional:
        """Convert to struct for Result-based code."""
        return EmptyOptional(self.reason)
