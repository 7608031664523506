"""JSON codec for Option and Result.

Layout (fixed):
    Option -> {"status": "Some" | "None", "value": ...}
    Result -> {"status": "Ok" | "Err", "value": ..., "error": ...}

The inactive Result field is always null. Nested containers are encoded
recursively through the encoder's enc_hook; exception payloads are encoded
as {"type": <class name>, "message": str(exc)} since exceptions have no
portable JSON form. Decoding yields plain JSON values for payloads.

Thread Safety:
    - Encoders are NOT thread-safe -> use thread-local instances
    - Decoders ARE thread-safe (reentrant) -> can share
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

import msgspec

from rslike.errors import UndefinedBehaviorError
from rslike.types import OptionStatus, ResultStatus

if TYPE_CHECKING:
    from rslike.option import Option
    from rslike.result import Result

__all__ = [
    'OptionState',
    'ResultState',
    'decode_option',
    'decode_result',
    'encode',
]


class OptionState(msgspec.Struct, frozen=True, gc=False):
    """Wire form of an Option."""

    status: OptionStatus
    value: Any = None


class ResultState(msgspec.Struct, frozen=True, gc=False):
    """Wire form of a Result (tri-field layout)."""

    status: ResultStatus
    value: Any = None
    error: Any = None


def _enc_hook(obj: Any) -> Any:
    """Encode containers and exceptions nested anywhere in a payload."""
    from rslike.option import Option
    from rslike.result import Result

    if isinstance(obj, Option):
        return OptionState(obj.status, obj.value)
    if isinstance(obj, Result):
        return ResultState(obj.status, obj.value, obj.error)
    if isinstance(obj, BaseException):
        return {'type': type(obj).__name__, 'message': str(obj)}
    msg = f'Objects of type {type(obj).__name__} are not supported'
    raise NotImplementedError(msg)


_local = threading.local()
_option_decoder = msgspec.json.Decoder(OptionState)
_result_decoder = msgspec.json.Decoder(ResultState)


def _get_encoder() -> msgspec.json.Encoder:
    encoder = getattr(_local, 'encoder', None)
    if encoder is None:
        encoder = msgspec.json.Encoder(enc_hook=_enc_hook)
        _local.encoder = encoder
    return encoder


def encode(container: Option[Any] | Result[Any, Any]) -> bytes:
    """Encode a container to JSON bytes.

    Raises:
        UndefinedBehaviorError: If a payload cannot be represented as JSON.
    """
    try:
        return _get_encoder().encode(container)
    except (NotImplementedError, TypeError) as e:
        msg = f'Cannot serialize {container!s}: {e}'
        raise UndefinedBehaviorError(msg, value=container) from e


def decode_option(data: bytes | str) -> OptionState:
    """Decode JSON produced by ``Option.to_json``.

    Raises:
        UndefinedBehaviorError: If data is not a valid Option document.
    """
    try:
        return _option_decoder.decode(data)
    except msgspec.DecodeError as e:
        msg = f'Invalid Option JSON: {e}'
        raise UndefinedBehaviorError(msg, value=data) from e


def decode_result(data: bytes | str) -> ResultState:
    """Decode JSON produced by ``Result.to_json``.

    Raises:
        UndefinedBehaviorError: If data is not a valid Result document.
    """
    try:
        return _result_decoder.decode(data)
    except msgspec.DecodeError as e:
        msg = f'Invalid Result JSON: {e}'
        raise UndefinedBehaviorError(msg, value=data) from e
