"""Shared types: container statuses and the comparator signature."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any

__all__ = ['Comparator', 'OptionStatus', 'ResultStatus']


class OptionStatus(StrEnum):
    """Status of an Option."""

    SOME = 'Some'
    NONE = 'None'


class ResultStatus(StrEnum):
    """Status of a Result."""

    OK = 'Ok'
    ERR = 'Err'


type Comparator = Callable[[Any, Any], bool]
"""Two-argument comparison callable accepted by ``equal``."""
