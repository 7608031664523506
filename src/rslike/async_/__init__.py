"""Async helpers: wrap awaitables into Result[Option[T], E]."""

from rslike.async_.wrap import Async

__all__ = ['Async']
