"""assert_argument and assert_instance contract checks.

Both raise UndefinedBehaviorError instead of AssertionError, so they keep
working under ``python -O`` and callers can tell a contract violation apart
from a failing computation.
"""

from __future__ import annotations

from typing import Any, Literal

from rslike.errors import UndefinedBehaviorError

__all__ = ['assert_argument', 'assert_instance']

type Expected = Literal['callable', 'bool', 'str']

_CHECKS = {
    'callable': callable,
    'bool': lambda value: isinstance(value, bool),
    'str': lambda value: isinstance(value, str),
}


def assert_argument(method: str, value: Any, expected: Expected) -> None:
    """Raise UndefinedBehaviorError unless value has the expected kind.

    Args:
        method: Name of the calling method, used in the error message.
        value: The argument (or callback result) to check.
        expected: One of "callable", "bool" or "str".

    Raises:
        UndefinedBehaviorError: If the check fails.

    Example:
        ```python
        assert_argument('map', len, 'callable')  # passes
        assert_argument('filter', 1, 'bool')  # raises UndefinedBehaviorError
        ```
    """
    if not _CHECKS[expected](value):
        msg = f'Method "{method}" should accepts {expected}'
        raise UndefinedBehaviorError(msg, value=value, type=type(value).__name__)


def assert_instance(method: str, value: Any, cls: type, hint: str = '') -> None:
    """Raise UndefinedBehaviorError unless value is an instance of cls."""
    if not isinstance(value, cls):
        msg = f'Method "{method}" should accepts instance of {cls.__name__}'
        if hint:
            msg = f'{msg}. {hint}'
        raise UndefinedBehaviorError(msg, value=value, type=type(value).__name__)
