"""Write-once slot shared by an executor's two resolvers.

``Option`` and ``Result`` hand their executor a pair of resolver callbacks
that both write into one OnceCell. The first write settles the container
and every later write reports False, which the containers log and ignore.
Once the executor returns, ``get_or_init`` reads the settled state or
fills in the default for an executor that resolved nothing.

The aiologic lock keeps a single winner even when a resolver escapes to
another thread, or another event loop, while the executor is still running.
"""

from __future__ import annotations

from collections.abc import Callable

import aiologic

__all__ = ['OnceCell']


class OnceCell[T]:
    """Slot that accepts exactly one value.

    Examples:
        >>> cell: OnceCell[str] = OnceCell()
        >>> cell.set('Some')
        True
        >>> cell.set('None')
        False
        >>> cell.get_or_init(lambda: 'default')
        'Some'
    """

    __slots__ = ('_filled', '_lock', '_value')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._value: T | None = None
        self._filled = False

    def set(self, value: T) -> bool:
        """Store value unless the slot is already filled.

        Returns:
            True for the winning write, False for every later one.
        """
        if self._filled:
            return False
        with self._lock:
            if self._filled:
                return False
            self._value = value
            self._filled = True
            return True

    def get_or_init(self, default: Callable[[], T]) -> T:
        """Return the stored value, filling the slot with default() if empty."""
        if not self._filled:
            with self._lock:
                if not self._filled:
                    self._value = default()
                    self._filled = True
        return self._value  # type: ignore[return-value]
