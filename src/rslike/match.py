"""match: invoke one of two callbacks based on a bool, Option or Result.

Example:
    ```python
    from rslike import Bind, match

    @Bind
    def parse(raw: str) -> int:
        return int(raw)

    message = match(
        parse('42'),
        lambda n: f'parsed {n}',
        lambda *err: 'nothing to parse' if not err else f'failed: {err[0]}',
    )
    print(message)  # parsed 42
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from rslike.assertions import assert_argument
from rslike.errors import UndefinedBehaviorError
from rslike.option import Option
from rslike.result import Result

__all__ = ['match']


def match[R](
    value: bool | Option[Any] | Result[Any, Any],
    on_success: Callable[..., R],
    on_failure: Callable[..., R],
) -> R:
    """Dispatch to exactly one of two callbacks and return its result.

    - ``True`` calls ``on_success(True)``; ``False`` calls ``on_failure(False)``.
    - ``Some(x)`` calls ``on_success(x)``; ``None()`` calls ``on_failure()``.
    - ``Ok(x)`` calls ``on_success(x)``; ``Err(e)`` calls ``on_failure(e)``.
    - ``Ok(Some(x))`` collapses one level and calls ``on_success(x)``;
      ``Ok(None())`` calls ``on_failure()``, an absent value counting as
      a failure.

    Args:
        value: The bool or container to inspect.
        on_success: Callback for True, Some and Ok.
        on_failure: Callback for False, None and Err.

    Returns:
        Whatever the invoked callback returns.

    Raises:
        UndefinedBehaviorError: If a callback is not callable or value is of
            any other type.
    """
    assert_argument('match', on_success, 'callable')
    assert_argument('match', on_failure, 'callable')

    if isinstance(value, bool):
        if value:
            return on_success(True)
        return on_failure(False)
    if isinstance(value, Option):
        if value.is_some():
            return on_success(value.unwrap())
        return on_failure()
    if isinstance(value, Result):
        if value.is_err():
            return on_failure(value.unwrap_err())
        inner = value.unwrap()
        if isinstance(inner, Option):
            return match(inner, on_success, on_failure)
        return on_success(inner)

    msg = 'only bool, Option or Result instance are allowed'
    raise UndefinedBehaviorError(msg, value=value, type=type(value).__name__)
