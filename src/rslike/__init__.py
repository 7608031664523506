"""rslike: Rust-style Option and Result containers for Python.

Example:
    ```python
    from rslike import Bind, Err, Nothing, Ok, Some, match

    Some(2).map(lambda x: x * 10)  # Some(20)
    Nothing().unwrap_or(0)  # 0
    Ok(1).and_then(lambda x: Err('too small') if x < 5 else Ok(x))  # Err('too small')

    @Bind
    def parse(raw: str) -> int:
        return int(raw)

    match(parse('42'), lambda n: n, lambda *_: -1)  # 42
    ```
"""

from rslike._config import Config, get_config, init
from rslike._logging import configure_logging
from rslike.async_ import Async
from rslike.decorators import Bind
from rslike.errors import (
    AsyncNotAllowed,
    AsyncNotAllowedError,
    EmptyOptional,
    EmptyOptionalError,
    UndefinedBehavior,
    UndefinedBehaviorError,
    UnwrapError,
)
from rslike.match import match
from rslike.option import Nothing, Option, Some
from rslike.result import Err, Ok, Result
from rslike.types import OptionStatus, ResultStatus

__all__ = [
    'Async',
    'AsyncNotAllowed',
    'AsyncNotAllowedError',
    'Bind',
    'Config',
    'EmptyOptional',
    'EmptyOptionalError',
    'Err',
    'Nothing',
    'Ok',
    'Option',
    'OptionStatus',
    'Result',
    'ResultStatus',
    'Some',
    'UndefinedBehavior',
    'UndefinedBehaviorError',
    'UnwrapError',
    'configure_logging',
    'get_config',
    'init',
    'match',
]

__version__ = '0.1.0'
