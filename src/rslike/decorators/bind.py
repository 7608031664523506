"""Bind: make any function return Result[Option[T], E] instead of raising."""

from __future__ import annotations

import inspect
import types
from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from rslike._logging import get_logger
from rslike.async_ import Async
from rslike.errors import UndefinedBehaviorError
from rslike.option import Option, Some
from rslike.result import Err, Ok, Result

__all__ = ['Bind']

logger = get_logger(__name__)


@wrapt.decorator
def _bound(
    wrapped: Callable[..., Any],
    instance: Any,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Result[Option[Any], Any] | Awaitable[Result[Option[Any], Any]]:
    try:
        outcome = wrapped(*args, **kwargs)
    except Exception as e:
        logger.debug('bind_captured_exception', function=getattr(wrapped, '__qualname__', repr(wrapped)), error=repr(e))
        return Err(e)
    if inspect.isawaitable(outcome):
        return Async(outcome)
    return Ok(Some(outcome))


@overload
def Bind[**P, T](fn: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[Result[Option[T], Exception]]]: ...


@overload
def Bind[**P, T](fn: Callable[P, T]) -> Callable[P, Result[Option[T], Exception]]: ...


@overload
def Bind(fn: Callable[..., Any], this_arg: Any) -> Callable[..., Any]: ...


def Bind(fn: Callable[..., Any], this_arg: Any = None) -> Any:  # noqa: N802
    """Wrap fn so that calling it never raises an Exception.

    The wrapper keeps fn's name, docstring and signature, and can be used as
    a decorator, including on methods.

    - A returned value ``v`` becomes ``Ok(Some(v))``; ``None`` becomes
      ``Ok(None())``.
    - A raised Exception ``e`` becomes ``Err(e)``, whatever its type.
    - A returned awaitable becomes an awaitable resolving to ``Ok(Some(v))``
      or ``Err(e)``; it never raises an Exception itself.

    Exceptions that are not ``Exception`` subclasses (KeyboardInterrupt,
    SystemExit, asyncio.CancelledError) propagate.

    Args:
        fn: The callable to wrap.
        this_arg: Optional object bound as fn's first positional argument,
            the way a method is bound to its instance. None means no receiver.

    Returns:
        The wrapped callable.

    Raises:
        UndefinedBehaviorError: If fn is not callable.

    Example:
        ```python
        @Bind
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)  # Ok(Some(5.0))
        divide(10, 0)  # Err(ZeroDivisionError('division by zero'))

        @Bind
        async def square(x: int) -> int:
            return x * x

        await square(3)  # Ok(Some(9))
        ```
    """
    if not callable(fn):
        msg = '"Bind" function expect to pass function as 1 argument'
        raise UndefinedBehaviorError(msg, value=fn, type=type(fn).__name__)
    if this_arg is not None:
        fn = types.MethodType(fn, this_arg)
    return _bound(fn)
