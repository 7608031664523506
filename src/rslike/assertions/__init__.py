"""Assertions: contract checks shared by the containers and helpers."""

from rslike.assertions.contract import assert_argument, assert_instance

__all__ = ['assert_argument', 'assert_instance']
