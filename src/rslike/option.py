"""Option type: Some(value) | None() for optional values.

An Option holds zero or one value. Python's ``None`` is the only empty
sentinel: wrapping, mapping to, or inserting ``None`` always produces an
Option with None status, so ``Some(None)`` is the same as ``Nothing()``.
Every other value, falsy ones included, is a valid Some payload.

Example:
    ```python
    from rslike import Nothing, Some

    port = Some('8080').map(int).filter(lambda p: p > 1024)
    print(port)  # Some(8080)

    missing = Nothing().map(int)
    print(missing)  # None()
    print(missing.unwrap_or(80))  # 80
    ```

Unlike Result, Option has four in-place mutators (``insert``, ``replace``,
``get_or_insert`` and ``get_or_insert_with``). An Option shared between
several owners is observably changed by any of them, so Option is not
hashable.
"""

from __future__ import annotations

import inspect
import operator
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from typing import TYPE_CHECKING, Any, Final

from rslike import codec
from rslike._internal.once import OnceCell
from rslike._logging import get_logger
from rslike.assertions import assert_argument, assert_instance
from rslike.errors import AsyncNotAllowedError, EmptyOptionalError, UndefinedBehaviorError
from rslike.types import Comparator, OptionStatus

if TYPE_CHECKING:
    from rslike.result import Result

__all__ = ['Nothing', 'Option', 'Some']

logger = get_logger(__name__)

type Resolver = Callable[..., None]
type Executor = Callable[[Resolver, Resolver], Any]

_EMPTY: Final = (OptionStatus.NONE, None)


def _state_of(value: Any) -> tuple[OptionStatus, Any]:
    """Apply the empty-collapsing rule to a would-be Some payload."""
    if value is None:
        return _EMPTY
    return (OptionStatus.SOME, value)


class Option[T]:
    """A container holding at most one value.

    Options are normally built with the ``Some`` and ``Nothing`` factories.
    The constructor takes a synchronous executor that receives two resolver
    callbacks, ``some(value)`` and ``none()``; the first resolver called
    decides the state and later calls are ignored.

    If the executor returns instead of (or after) resolving, the return value
    is adopted when nothing was resolved yet: an Option is copied, a Result
    maps Ok(v) to some(v) and Err to none(), and any other non-None value is
    treated as some(value). An executor that raises settles the Option as
    None, except for UndefinedBehaviorError, which propagates.

    Attributes:
        status: OptionStatus.SOME or OptionStatus.NONE.
        value: The held value, or None when status is None.

    Examples:
        >>> Option(lambda some, none: some(42))
        Some(42)
        >>> Option(lambda some, none: none())
        None()
        >>> Option(lambda some, none: 'returned')
        Some('returned')
    """

    __slots__ = ('_status', '_value')
    __match_args__ = ('status', 'value')

    Status = OptionStatus

    def __init__(self, executor: Executor) -> None:
        assert_argument('constructor', executor, 'callable')
        if inspect.iscoroutinefunction(executor) or inspect.isasyncgenfunction(executor):
            msg = (
                'You passed an async function in constructor. Only synchronous functions are allowed. '
                'Use "Option.from_awaitable" or "Async" instead.'
            )
            raise AsyncNotAllowedError(msg, value=executor)

        cell: OnceCell[tuple[OptionStatus, Any]] = OnceCell()

        def some(value: Any = None) -> None:
            if not cell.set(_state_of(value)):
                logger.debug('option_resolver_ignored', resolver='some')

        def none(_reason: Any = None) -> None:
            if not cell.set(_EMPTY):
                logger.debug('option_resolver_ignored', resolver='none')

        try:
            returned = executor(some, none)
        except UndefinedBehaviorError:
            raise
        except Exception as e:
            logger.debug('option_executor_raised', error=repr(e))
            cell.set(_EMPTY)
        else:
            self._adopt(cell, returned)

        self._status, self._value = cell.get_or_init(lambda: _EMPTY)

    @staticmethod
    def _adopt(cell: OnceCell[tuple[OptionStatus, Any]], returned: Any) -> None:
        from rslike.result import Result

        if inspect.isawaitable(returned) or inspect.isasyncgen(returned):
            if inspect.iscoroutine(returned):
                returned.close()
            msg = 'Option executor returned an awaitable or async generator. Only synchronous executors are allowed.'
            raise AsyncNotAllowedError(msg, value=returned)
        if isinstance(returned, Option):
            cell.set((returned._status, returned._value))
        elif isinstance(returned, Result):
            cell.set(_state_of(returned.value) if returned.is_ok() else _EMPTY)
        elif returned is not None:
            cell.set(_state_of(returned))

    @classmethod
    def _of(cls, status: OptionStatus, value: Any = None) -> Option[Any]:
        option = cls.__new__(cls)
        option._status = status
        option._value = value if status is OptionStatus.SOME else None
        return option

    # --- Constructors ---

    @classmethod
    def some(cls, value: T | None = None) -> Option[T]:
        """Create an Option holding value, or None status if value is None."""
        return cls._of(*_state_of(value))

    @classmethod
    def none(cls) -> Option[Any]:
        """Create an Option with None status."""
        return cls._of(*_EMPTY)

    @classmethod
    async def from_awaitable(cls, awaitable: Awaitable[T] | T) -> Option[T]:
        """Await a value and wrap it; a raised exception yields None.

        Args:
            awaitable: An awaitable, or a plain value which is wrapped as-is.

        Returns:
            Some(result) on success, None() if awaiting raised or produced None.
        """
        try:
            value = await awaitable if inspect.isawaitable(awaitable) else awaitable
        except Exception as e:
            logger.debug('option_from_awaitable_failed', error=repr(e))
            return cls.none()
        return cls.some(value)

    # --- Fields ---

    @property
    def status(self) -> OptionStatus:
        """Current status of the Option."""
        return self._status

    @property
    def value(self) -> T | None:
        """The held value, or None when the Option is empty."""
        return self._value

    # --- Querying ---

    def is_some(self) -> bool:
        """Return True if the Option holds a value."""
        return self._status is OptionStatus.SOME

    def is_none(self) -> bool:
        """Return True if the Option is empty."""
        return self._status is OptionStatus.NONE

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if the Option is Some and the value satisfies predicate.

        Raises:
            UndefinedBehaviorError: If predicate is not callable or returns a non-bool.
        """
        assert_argument('is_some_and', predicate, 'callable')
        if self._status is OptionStatus.NONE:
            return False
        res = predicate(self._value)  # type: ignore[arg-type]
        assert_argument('is_some_and', res, 'bool')
        return res

    # --- Extracting ---

    def expect(self, reason: str) -> T:
        """Return the held value, or raise EmptyOptionalError with reason.

        Args:
            reason: Message for the error raised on None.

        Raises:
            EmptyOptionalError: If the Option is None.
            UndefinedBehaviorError: If reason is not a str.
        """
        assert_argument('expect', reason, 'str')
        if self._status is OptionStatus.NONE:
            raise EmptyOptionalError(reason)
        return self._value  # type: ignore[return-value]

    def unwrap(self) -> T:
        """Return the held value.

        Raises:
            EmptyOptionalError: If the Option is None.
        """
        if self._status is OptionStatus.NONE:
            raise EmptyOptionalError
        return self._value  # type: ignore[return-value]

    def unwrap_or[U](self, fallback: U) -> T | U:
        """Return the held value, or fallback if None."""
        if self._status is OptionStatus.NONE:
            return fallback
        return self._value  # type: ignore[return-value]

    def unwrap_or_else[U](self, fn: Callable[[], U]) -> T | U:
        """Return the held value, or compute one with fn if None."""
        if self._status is OptionStatus.NONE:
            assert_argument('unwrap_or_else', fn, 'callable')
            return fn()
        return self._value  # type: ignore[return-value]

    # --- Transforming ---

    def map[U](self, fn: Callable[[T], U | None]) -> Option[U]:
        """Apply fn to the held value.

        A result of None collapses to None(); None() maps to None() without
        calling fn.

        Examples:
            >>> Some('Hello world!').map(len)
            Some(12)
            >>> Some({'a': 1}).map(lambda d: d.get('b'))
            None()
        """
        if self._status is OptionStatus.SOME:
            assert_argument('map', fn, 'callable')
            return Option.some(fn(self._value))  # type: ignore[arg-type]
        return Option.none()

    def map_or[U](self, fallback: U, fn: Callable[[T], U]) -> U:
        """Apply fn to the held value, or return fallback if None."""
        if self._status is OptionStatus.NONE:
            return fallback
        assert_argument('map_or', fn, 'callable')
        return fn(self._value)  # type: ignore[arg-type]

    def map_or_else[U](self, none_fn: Callable[[], U], some_fn: Callable[[T], U]) -> U:
        """Apply some_fn to the held value, or call none_fn if None."""
        assert_argument('map_or_else', none_fn, 'callable')
        assert_argument('map_or_else', some_fn, 'callable')
        if self._status is OptionStatus.NONE:
            return none_fn()
        return some_fn(self._value)  # type: ignore[arg-type]

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if predicate returns True.

        Raises:
            UndefinedBehaviorError: If predicate returns a non-bool.
        """
        if self._status is OptionStatus.NONE:
            return Option.none()
        assert_argument('filter', predicate, 'callable')
        keep = predicate(self._value)  # type: ignore[arg-type]
        assert_argument('filter', keep, 'bool')
        if keep:
            return Option.some(self._value)
        return Option.none()

    def flatten(self) -> Option[Any]:
        """Remove one level of nesting: Some(Some(x)) -> Some(x).

        A non-nested Option is returned as a fresh copy.
        """
        if isinstance(self._value, Option):
            return Option._of(self._value._status, self._value._value)
        return Option._of(self._status, self._value)

    # --- Converting to Result ---

    def ok_or[E](self, err: E) -> Result[T, E]:
        """Convert to Result: Some(x) -> Ok(x), None -> Err(err)."""
        from rslike.result import Result

        if self._status is OptionStatus.NONE:
            return Result.err_(err)
        return Result.ok_(self._value)

    def ok_or_else[E](self, err_fn: Callable[[], E]) -> Result[T, E]:
        """Convert to Result: Some(x) -> Ok(x), None -> Err(err_fn())."""
        from rslike.result import Result

        if self._status is OptionStatus.NONE:
            assert_argument('ok_or_else', err_fn, 'callable')
            return Result.err_(err_fn())
        return Result.ok_(self._value)

    def transpose(self) -> Result[Option[Any], Any]:
        """Swap an Option of a Result into a Result of an Option.

        None() -> Ok(None()), Some(Ok(v)) -> Ok(Some(v)), Some(Err(e)) -> Err(e).

        Raises:
            UndefinedBehaviorError: If the Option is Some but holds no Result.
        """
        from rslike.result import Result

        if self._status is OptionStatus.NONE:
            return Result.ok_(Option.none())
        inner = self._value
        if isinstance(inner, Result):
            if inner.is_ok():
                return Result.ok_(Option.some(inner.value))
            return inner
        msg = f'no method named "transpose" found for Option[{type(inner).__name__}]'
        raise UndefinedBehaviorError(msg, value=inner, type=type(inner).__name__)

    # --- Boolean combinators ---

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other if Some, else None() without looking at other.

        Raises:
            UndefinedBehaviorError: If self is Some and other is not an Option.
        """
        if self._status is OptionStatus.NONE:
            return Option.none()
        assert_instance('and_', other, Option)
        return other

    def and_then[U](self, fn: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an Option-returning function (flatmap).

        Raises:
            UndefinedBehaviorError: If fn does not return an Option.
        """
        if self._status is OptionStatus.NONE:
            return Option.none()
        assert_argument('and_then', fn, 'callable')
        res = fn(self._value)  # type: ignore[arg-type]
        if not isinstance(res, Option):
            msg = 'callback for Method "and_then" expects to returns instance of Option. Use "Nothing" or "Some"'
            raise UndefinedBehaviorError(msg, value=res, type=type(res).__name__)
        return res

    def or_(self, other: Option[T]) -> Option[T]:
        """Return self if Some (the same object, not a copy), else other.

        Raises:
            UndefinedBehaviorError: If self is None and other is not an Option.
        """
        if self._status is OptionStatus.SOME:
            return self
        assert_instance('or_', other, Option)
        return other

    def or_else(self, fn: Callable[[], Option[T]]) -> Option[T]:
        """Return self if Some (the same object), else the Option fn returns.

        Raises:
            UndefinedBehaviorError: If fn does not return an Option.
        """
        if self._status is OptionStatus.SOME:
            return self
        assert_argument('or_else', fn, 'callable')
        res = fn()
        if not isinstance(res, Option):
            msg = 'Callback result for method "or_else" should returns instance of Option. Use "Some" or "Nothing".'
            raise UndefinedBehaviorError(msg, value=res, type=type(res).__name__)
        return res

    def xor(self, other: Option[T]) -> Option[T]:
        """Return whichever side is Some if exactly one is, else None().

        The Some side is returned as the same object.

        Raises:
            UndefinedBehaviorError: If other is not an Option.
        """
        assert_instance('xor', other, Option)
        if self.is_some() and other.is_none():
            return self
        if self.is_none() and other.is_some():
            return other
        return Option.none()

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair two values: Some((a, b)) if both are Some, else None().

        Raises:
            UndefinedBehaviorError: If other is not an Option.
        """
        assert_instance('zip', other, Option)
        if self.is_some() and other.is_some():
            return Option.some((self._value, other._value))  # type: ignore[arg-type]
        return Option.none()

    def zip_with[U, R](self, other: Option[U], fn: Callable[[T, U], R]) -> Option[R]:
        """Combine two values with fn if both are Some, else None().

        Raises:
            UndefinedBehaviorError: If other is not an Option or fn is not callable.
        """
        assert_instance('zip_with', other, Option)
        assert_argument('zip_with', fn, 'callable')
        if self.is_some() and other.is_some():
            return Option.some(fn(self._value, other._value))  # type: ignore[arg-type]
        return Option.none()

    def unzip(self) -> tuple[Option[Any], Option[Any]]:
        """Split Some((a, b)) into (Some(a), Some(b)).

        Anything but a Some holding a two-element list or tuple gives
        (None(), None()).
        """
        if self.is_some() and isinstance(self._value, list | tuple) and len(self._value) == 2:
            first, second = self._value
            return Option.some(first), Option.some(second)
        return Option.none(), Option.none()

    # --- In-place mutation ---

    def insert(self, value: T | None) -> Option[T]:
        """Overwrite the held value in place and return self.

        Inserting None empties the Option.
        """
        self._status, self._value = _state_of(value)
        return self

    def replace(self, value: T | None) -> Option[T]:
        """Overwrite the held value in place and return the previous one.

        Returns:
            A new Option holding the value this Option held before the call.
        """
        previous = Option._of(self._status, self._value)
        self._status, self._value = _state_of(value)
        return previous

    def get_or_insert(self, value: T) -> T:
        """Insert value if None, then return the held value.

        Raises:
            UndefinedBehaviorError: If the Option is None and value is None.
        """
        if self._status is OptionStatus.NONE:
            if value is None:
                msg = 'Method "get_or_insert" should provide non "None" value.'
                raise UndefinedBehaviorError(msg, value=value)
            return self.insert(value).unwrap()
        return self._value  # type: ignore[return-value]

    def get_or_insert_with(self, fn: Callable[[], T]) -> T:
        """Insert fn() if None, then return the held value.

        Raises:
            UndefinedBehaviorError: If fn is needed and returns None.
        """
        if self._status is OptionStatus.NONE:
            assert_argument('get_or_insert_with', fn, 'callable')
            res = fn()
            if res is None:
                msg = "Callback for method 'get_or_insert_with' should returns non 'None' value."
                raise UndefinedBehaviorError(msg, value=res)
            return self.insert(res).unwrap()
        return self._value  # type: ignore[return-value]

    # --- Comparison ---

    def equal(self, other: Any, cmp: Comparator = operator.is_) -> bool:
        """Compare with cmp (identity by default).

        Against another Option the held values are compared, otherwise self
        is compared to other directly.

        Examples:
            >>> Some(1).equal(Some(1))
            True
            >>> Some([1]).equal(Some([1]))
            False
            >>> Some([1]).equal(Some([1]), operator.eq)
            True
        """
        if isinstance(other, Option):
            return cmp(self._value, other._value)
        return cmp(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._status is other._status and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        """Return {"status": "Some" | "None", "value": ...}."""
        return {'status': str(self._status), 'value': self._value}

    def to_json(self) -> bytes:
        """Encode to JSON bytes, see rslike.codec for the layout."""
        return codec.encode(self)

    @classmethod
    def from_json(cls, data: bytes | str) -> Option[Any]:
        """Rebuild an Option from ``to_json`` output."""
        state = codec.decode_option(data)
        if state.status is OptionStatus.SOME:
            return cls.some(state.value)
        return cls.none()

    def __str__(self) -> str:
        if self._status is OptionStatus.NONE:
            return 'None()'
        return f'Some({self._value})'

    def __repr__(self) -> str:
        if self._status is OptionStatus.NONE:
            return 'None()'
        return f'Some({self._value!r})'

    # --- Iteration ---

    def __iter__(self) -> Iterator[Any]:
        """Iterate the held value when it is an iterable Some.

        Raises:
            UndefinedBehaviorError: For None or a non-iterable value.
        """
        if self.is_some() and hasattr(self._value, '__iter__'):
            return iter(self._value)  # type: ignore[call-overload]
        msg = 'Iteration can applies only for Some(<Iterable>) value'
        raise UndefinedBehaviorError(msg, value=self._value, type=type(self._value).__name__, status=str(self._status))

    def __aiter__(self) -> AsyncIterator[Any]:
        """Async-iterate the held value when it is an async-iterable Some.

        For anything else the first ``__anext__`` raises UndefinedBehaviorError.
        """
        if self.is_some() and hasattr(self._value, '__aiter__'):
            return self._value.__aiter__()  # type: ignore[union-attr]
        return self._reject_aiter()

    async def _reject_aiter(self) -> AsyncIterator[Any]:
        msg = 'Async iteration can applies only for Some(<AsyncIterable>) value'
        raise UndefinedBehaviorError(msg, value=self._value, type=type(self._value).__name__, status=str(self._status))
        yield  # pragma: no cover


def Some[T](value: T | None = None) -> Option[T]:  # noqa: N802
    """Create an Option holding value.

    ``Some()`` and ``Some(None)`` produce None().

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(0).is_some()
        True
        >>> Some(None).is_none()
        True
    """
    return Option.some(value)


def Nothing() -> Option[Any]:  # noqa: N802
    """Create an empty Option (the None variant).

    Named Nothing because None is a Python keyword; it prints as None().

    Examples:
        >>> Nothing().is_none()
        True
        >>> Nothing().unwrap_or(0)
        0
    """
    return Option.none()
