"""Async: wrap one already-produced value or awaitable.

``Async`` is the value-level twin of ``Bind``. Where Bind wraps a function
so every call returns ``Result[Option[T], E]``, Async wraps a single value
that is already in flight.

Example:
    ```python
    async def fetch_user(user_id: int) -> dict | None: ...

    result = await Async(fetch_user(1))
    # Ok(Some({...})), Ok(None()) when nothing was found, Err(exc) on failure
    ```

There is no timeout or cancellation support. To bound the wait, race the
awaitable yourself (``asyncio.timeout``, ``anyio.fail_after``...) before
handing it over; a cancellation is not an Exception and is never turned into
an Err.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable
from typing import Any

from rslike._logging import get_logger
from rslike.option import Option, Some
from rslike.result import Err, Ok, Result

__all__ = ['Async']

logger = get_logger(__name__)


async def Async[T](value: Awaitable[T] | T | None = None) -> Result[Option[T], Any]:  # noqa: N802
    """Await value (if awaitable) and wrap the outcome.

    Args:
        value: An awaitable, or a plain value which is wrapped directly.

    Returns:
        Ok(Some(v)) on success, Ok(None()) when the outcome is None, and
        Err(exc) when awaiting raised. Never raises an Exception itself.

    Example:
        ```python
        async def square(x: int) -> int:
            return x * x

        await Async(square(3))  # Ok(Some(9))
        await Async(None)  # Ok(None())
        ```
    """
    try:
        resolved = await value if inspect.isawaitable(value) else value
    except Exception as e:
        logger.debug('async_captured_exception', error=repr(e))
        return Err(e)
    return Ok(Some(resolved))
