"""Decorators: Bind."""

from rslike.decorators.bind import Bind

__all__ = ['Bind']
