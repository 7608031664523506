"""Result type: Ok(value) | Err(error) for explicit error handling.

A Result holds exactly one of a success value or an error value. Its status
is decided once, at construction, and never changes.

Example:
    ```python
    from rslike import Err, Ok, Result

    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Err(f'not a number: {raw!r}')
        return Ok(int(raw))

    parse_port('8080').map(lambda p: p + 1)  # Ok(8081)
    parse_port('http').unwrap_or(80)  # 80
    ```

Errors do not have to be exceptions. When an accessor has to raise and the
held error is not an exception instance, UnwrapError carries it instead.
"""

from __future__ import annotations

import inspect
import operator
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from typing import Any, NoReturn

from rslike import codec
from rslike._internal.once import OnceCell
from rslike._logging import get_logger
from rslike.assertions import assert_argument, assert_instance
from rslike.errors import AsyncNotAllowedError, UndefinedBehaviorError, UnwrapError
from rslike.option import Option
from rslike.types import Comparator, ResultStatus

__all__ = ['Err', 'Ok', 'Result']

logger = get_logger(__name__)

type Resolver = Callable[..., None]
type Executor = Callable[[Resolver, Resolver], Any]


def _raise_payload(payload: Any, message: str) -> NoReturn:
    """Raise payload itself if it is an exception, else wrap it in UnwrapError."""
    if isinstance(payload, BaseException):
        raise payload
    raise UnwrapError(message, value=payload)


class Result[T, E]:
    """A container holding either a success value (Ok) or an error (Err).

    Results are normally built with the ``Ok`` and ``Err`` factories. The
    constructor takes a synchronous executor that receives ``resolve(value)``
    and ``reject(error)``; the first call decides the outcome and later
    calls are ignored.

    Any exception the executor raises becomes the Err payload, except
    AsyncNotAllowedError. A returned Result is adopted, a returned Option
    maps Some(v) to resolve(v) and None to reject(None). An executor that
    settles nothing produces Err(None).

    Attributes:
        status: ResultStatus.OK or ResultStatus.ERR.
        value: The success value (None for Err).
        error: The error value (None for Ok).

    Examples:
        >>> Result(lambda resolve, reject: resolve(42))
        Ok(42)
        >>> Result(lambda resolve, reject: reject('boom'))
        Err('boom')
        >>> Result(lambda resolve, reject: 1 / 0)
        Err(ZeroDivisionError('division by zero'))
    """

    __slots__ = ('_error', '_status', '_value')
    __match_args__ = ('status', 'value', 'error')

    Status = ResultStatus

    def __init__(self, executor: Executor) -> None:
        assert_argument('constructor', executor, 'callable')
        if inspect.iscoroutinefunction(executor) or inspect.isasyncgenfunction(executor):
            msg = (
                'You passed an async function in constructor. Only synchronous functions are allowed. '
                'Use "Result.from_awaitable" or "Async" instead.'
            )
            raise AsyncNotAllowedError(msg, value=executor)

        cell: OnceCell[tuple[ResultStatus, Any, Any]] = OnceCell()

        def resolve(value: Any = None) -> None:
            if not cell.set((ResultStatus.OK, value, None)):
                logger.debug('result_resolver_ignored', resolver='resolve')

        def reject(error: Any = None) -> None:
            if not cell.set((ResultStatus.ERR, None, error)):
                logger.debug('result_resolver_ignored', resolver='reject')

        try:
            returned = executor(resolve, reject)
            self._adopt(returned, resolve, reject)
        except AsyncNotAllowedError:
            raise
        except Exception as e:
            logger.debug('result_executor_raised', error=repr(e))
            reject(e)

        self._status, self._value, self._error = cell.get_or_init(lambda: (ResultStatus.ERR, None, None))

    @staticmethod
    def _adopt(returned: Any, resolve: Resolver, reject: Resolver) -> None:
        if inspect.isawaitable(returned) or inspect.isasyncgen(returned):
            if inspect.iscoroutine(returned):
                returned.close()
            msg = 'Result executor returned an awaitable or async generator. Only synchronous executors are allowed.'
            raise AsyncNotAllowedError(msg, value=returned)
        if isinstance(returned, Result):
            if returned.is_ok():
                resolve(returned._value)
            else:
                reject(returned._error)
        elif isinstance(returned, Option):
            if returned.is_some():
                resolve(returned.value)
            else:
                reject(None)

    @classmethod
    def _of(cls, status: ResultStatus, value: Any = None, error: Any = None) -> Result[Any, Any]:
        result = cls.__new__(cls)
        result._status = status
        result._value = value
        result._error = error
        return result

    # --- Constructors ---

    @classmethod
    def ok_(cls, value: T) -> Result[T, Any]:
        """Create an Ok result. Trailing underscore avoids clashing with ``ok()``."""
        return cls._of(ResultStatus.OK, value, None)

    @classmethod
    def err_(cls, error: E) -> Result[Any, E]:
        """Create an Err result. Trailing underscore avoids clashing with ``err()``."""
        return cls._of(ResultStatus.ERR, None, error)

    @classmethod
    async def from_awaitable(cls, awaitable: Awaitable[T] | T) -> Result[T, Exception]:
        """Await a value: Ok(result) on success, Err(exception) if awaiting raised.

        Args:
            awaitable: An awaitable, or a plain value which becomes Ok as-is.
        """
        try:
            value = await awaitable if inspect.isawaitable(awaitable) else awaitable
        except Exception as e:
            logger.debug('result_from_awaitable_failed', error=repr(e))
            return cls.err_(e)
        return cls.ok_(value)

    # --- Fields ---

    @property
    def status(self) -> ResultStatus:
        """Status of the Result."""
        return self._status

    @property
    def value(self) -> T | None:
        """The success value, or None for Err."""
        return self._value

    @property
    def error(self) -> E | None:
        """The error value, or None for Ok."""
        return self._error

    # --- Querying ---

    def is_ok(self) -> bool:
        """Return True if the result is Ok."""
        return self._status is ResultStatus.OK

    def is_err(self) -> bool:
        """Return True if the result is Err."""
        return self._status is ResultStatus.ERR

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if Ok and the value satisfies predicate.

        Raises:
            UndefinedBehaviorError: If predicate is needed and returns a non-bool.
        """
        if self._status is ResultStatus.ERR:
            return False
        assert_argument('is_ok_and', predicate, 'callable')
        res = predicate(self._value)  # type: ignore[arg-type]
        assert_argument('is_ok_and', res, 'bool')
        return res

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """Return True if Err and the error satisfies predicate.

        Raises:
            UndefinedBehaviorError: If predicate is needed and returns a non-bool.
        """
        if self._status is ResultStatus.OK:
            return False
        assert_argument('is_err_and', predicate, 'callable')
        res = predicate(self._error)  # type: ignore[arg-type]
        assert_argument('is_err_and', res, 'bool')
        return res

    # --- Extracting ---

    def unwrap(self) -> T:
        """Return the Ok value.

        Raises:
            The held error, if it is an exception instance.
            UnwrapError: If Err holds any other value.
        """
        if self._status is ResultStatus.OK:
            return self._value  # type: ignore[return-value]
        _raise_payload(self._error, f'called unwrap() on Err({self._error!r})')

    def expect(self, reason: str) -> T:
        """Return the Ok value, or raise UnwrapError(reason) chained from the error.

        Raises:
            UnwrapError: If the result is Err.
            UndefinedBehaviorError: If reason is not a str.
        """
        assert_argument('expect', reason, 'str')
        if self._status is ResultStatus.OK:
            return self._value  # type: ignore[return-value]
        cause = self._error if isinstance(self._error, BaseException) else None
        raise UnwrapError(reason, value=self._error) from cause

    def unwrap_err(self) -> E:
        """Return the Err value.

        Raises:
            UnwrapError: If the result is Ok; carries the Ok value.
        """
        if self._status is ResultStatus.ERR:
            return self._error  # type: ignore[return-value]
        raise UnwrapError(f'called unwrap_err() on Ok({self._value!r})', value=self._value)

    def expect_err(self, reason: str) -> E:
        """Return the Err value, or raise UnwrapError(reason) on Ok.

        Raises:
            UnwrapError: If the result is Ok.
            UndefinedBehaviorError: If reason is not a str.
        """
        assert_argument('expect_err', reason, 'str')
        if self._status is ResultStatus.OK:
            raise UnwrapError(reason, value=self._value)
        return self._error  # type: ignore[return-value]

    def unwrap_or[U](self, fallback: U) -> T | U:
        """Return the Ok value, or fallback."""
        if self._status is ResultStatus.OK:
            return self._value  # type: ignore[return-value]
        return fallback

    def unwrap_or_else[U](self, fn: Callable[[E], U]) -> T | U:
        """Return the Ok value, or compute one from the error."""
        if self._status is ResultStatus.OK:
            return self._value  # type: ignore[return-value]
        assert_argument('unwrap_or_else', fn, 'callable')
        return fn(self._error)  # type: ignore[arg-type]

    # --- Converting to Option ---

    def ok(self) -> Option[T]:
        """Convert to Option, discarding the error: Ok(x) -> Some(x)."""
        if self._status is ResultStatus.OK:
            return Option.some(self._value)
        return Option.none()

    def err(self) -> Option[E]:
        """Convert to Option, discarding the value: Err(e) -> Some(e)."""
        if self._status is ResultStatus.ERR:
            return Option.some(self._error)
        return Option.none()

    def transpose(self) -> Option[Result[Any, E]]:
        """Swap a Result of an Option into an Option of a Result.

        Ok(None()) -> None(), Ok(Some(v)) -> Some(Ok(v)), Err(e) -> Some(Err(e)).

        Raises:
            UndefinedBehaviorError: If the result is Ok but holds no Option.
        """
        if self._status is ResultStatus.ERR:
            return Option.some(self)
        inner = self._value
        if isinstance(inner, Option):
            if inner.is_some():
                return Option.some(Result.ok_(inner.value))
            return Option.none()
        msg = f'no method named "transpose" found for Result[{type(inner).__name__}, _]'
        raise UndefinedBehaviorError(msg, value=inner, type=type(inner).__name__)

    # --- Transforming ---

    def map[U](self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply fn to the Ok value; Err is returned unchanged without calling fn.

        Examples:
            >>> Ok(2).map(lambda x: x * 10)
            Ok(20)
            >>> Err('boom').map(lambda x: x * 10)
            Err('boom')
        """
        assert_argument('map', fn, 'callable')
        if self._status is ResultStatus.OK:
            return Result.ok_(fn(self._value))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def map_err[F](self, fn: Callable[[E], F]) -> Result[T, F]:
        """Apply fn to the Err value; Ok is returned unchanged."""
        assert_argument('map_err', fn, 'callable')
        if self._status is ResultStatus.ERR:
            return Result.err_(fn(self._error))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def map_or[U](self, fallback: U, fn: Callable[[T], U]) -> U:
        """Apply fn to the Ok value, or return fallback."""
        assert_argument('map_or', fn, 'callable')
        if self._status is ResultStatus.OK:
            return fn(self._value)  # type: ignore[arg-type]
        return fallback

    def map_or_else[U](self, err_fn: Callable[[E], U], ok_fn: Callable[[T], U]) -> U:
        """Apply ok_fn to the Ok value, or err_fn to the error."""
        assert_argument('map_or_else', err_fn, 'callable')
        if self._status is ResultStatus.ERR:
            return err_fn(self._error)  # type: ignore[arg-type]
        assert_argument('map_or_else', ok_fn, 'callable')
        return ok_fn(self._value)  # type: ignore[arg-type]

    def flatten(self) -> Result[Any, E]:
        """Remove one level of nesting: Ok(Ok(x)) -> Ok(x), Ok(Err(e)) -> Err(e)."""
        if isinstance(self._value, Result):
            return self._value
        return self

    # --- Boolean combinators ---

    def and_[U](self, other: Result[U, E]) -> Result[U, E]:
        """Return other if Ok, else this Err.

        Raises:
            UndefinedBehaviorError: If other is not a Result.
        """
        assert_instance('and_', other, Result)
        if self._status is ResultStatus.ERR:
            return self  # type: ignore[return-value]
        return other

    def and_then[U](self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a Result-returning function (flatmap).

        Raises:
            UndefinedBehaviorError: If fn does not return a Result.
        """
        assert_argument('and_then', fn, 'callable')
        if self._status is ResultStatus.ERR:
            return self  # type: ignore[return-value]
        res = fn(self._value)  # type: ignore[arg-type]
        if not isinstance(res, Result):
            msg = 'Function result expected to be instance of Result.'
            raise UndefinedBehaviorError(msg, value=res, type=type(res).__name__)
        return res

    def or_[F](self, other: Result[T, F]) -> Result[T, F]:
        """Return self if Ok, else other.

        Raises:
            UndefinedBehaviorError: If other is not a Result.
        """
        assert_instance('or_', other, Result)
        if self._status is ResultStatus.ERR:
            return other
        return self  # type: ignore[return-value]

    def or_else[F](self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from Err with a Result-returning function.

        Raises:
            UndefinedBehaviorError: If fn does not return a Result.
        """
        if self._status is ResultStatus.OK:
            return self  # type: ignore[return-value]
        assert_argument('or_else', fn, 'callable')
        res = fn(self._error)  # type: ignore[arg-type]
        if not isinstance(res, Result):
            msg = 'Operator "or_else" expected to return instance of Result. Use "Ok" or "Err" function to define them.'
            raise UndefinedBehaviorError(msg, value=res, type=type(res).__name__)
        return res

    # --- Comparison ---

    def equal(self, other: Any, cmp: Comparator = operator.is_) -> bool:
        """Compare with cmp (identity by default).

        Ok/Ok compares the values and Err/Err the errors; mixed statuses are
        never equal. A non-Result other is compared to self directly.
        """
        if isinstance(other, Result):
            if self._status is not other._status:
                return False
            if self._status is ResultStatus.OK:
                return cmp(self._value, other._value)
            return cmp(self._error, other._error)
        return cmp(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._status is other._status and self._value == other._value and self._error == other._error

    def __hash__(self) -> int:
        return hash((self._status, self._value, self._error))

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        """Return {"status": "Ok" | "Err", "value": ..., "error": ...}."""
        return {'status': str(self._status), 'value': self._value, 'error': self._error}

    def to_json(self) -> bytes:
        """Encode to JSON bytes, see rslike.codec for the layout."""
        return codec.encode(self)

    @classmethod
    def from_json(cls, data: bytes | str) -> Result[Any, Any]:
        """Rebuild a Result from ``to_json`` output."""
        state = codec.decode_result(data)
        if state.status is ResultStatus.OK:
            return cls.ok_(state.value)
        return cls.err_(state.error)

    def __str__(self) -> str:
        if self._status is ResultStatus.ERR:
            return f'Err({self._error})'
        return f'Ok({self._value})'

    def __repr__(self) -> str:
        if self._status is ResultStatus.ERR:
            return f'Err({self._error!r})'
        return f'Ok({self._value!r})'

    # --- Iteration ---

    def __iter__(self) -> Iterator[Any]:
        """Iterate the Ok value when it is iterable.

        Iterating an Err raises the held error (see ``unwrap``).

        Raises:
            UndefinedBehaviorError: If the Ok value is not iterable.
        """
        if self._status is ResultStatus.ERR:
            _raise_payload(self._error, f'iterated over Err({self._error!r})')
        if hasattr(self._value, '__iter__'):
            return iter(self._value)  # type: ignore[call-overload]
        msg = 'Iteration can applies only for Ok(<Iterable>) value'
        raise UndefinedBehaviorError(msg, value=self._value, type=type(self._value).__name__, status=str(self._status))

    def __aiter__(self) -> AsyncIterator[Any]:
        """Async-iterate the Ok value when it is async-iterable.

        Otherwise the first ``__anext__`` raises what ``__iter__`` would.
        """
        if self._status is ResultStatus.OK and hasattr(self._value, '__aiter__'):
            return self._value.__aiter__()  # type: ignore[union-attr]
        return self._reject_aiter()

    async def _reject_aiter(self) -> AsyncIterator[Any]:
        if self._status is ResultStatus.ERR:
            _raise_payload(self._error, f'iterated over Err({self._error!r})')
        msg = 'Async iteration can applies only for Ok(<AsyncIterable>) value'
        raise UndefinedBehaviorError(msg, value=self._value, type=type(self._value).__name__, status=str(self._status))
        yield  # pragma: no cover


def Ok[T](value: T = None) -> Result[T, Any]:  # noqa: N802
    """Create a successful Result.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> Ok(42).is_err()
        False
    """
    return Result.ok_(value)


def Err[E](error: E) -> Result[Any, E]:  # noqa: N802
    """Create a failed Result.

    Examples:
        >>> Err('boom').unwrap_err()
        'boom'
        >>> Err('boom').unwrap_or(0)
        0
    """
    return Result.err_(error)
