"""Tests for OnceCell."""

import threading

from rslike._internal.once import OnceCell


class TestOnceCell:
    """Tests for the write-once slot."""

    def test_first_write_wins(self):
        """Only the first set succeeds."""
        cell: OnceCell[int] = OnceCell()
        assert cell.set(1) is True
        assert cell.set(2) is False
        assert cell.get_or_init(lambda: 3) == 1

    def test_default_fills_empty_slot(self):
        """get_or_init stores the default when nothing was written."""
        calls = []
        cell: OnceCell[str] = OnceCell()

        def default() -> str:
            calls.append(1)
            return 'value'

        assert cell.get_or_init(default) == 'value'
        assert cell.get_or_init(default) == 'value'
        assert calls == [1]

    def test_default_blocks_later_writes(self):
        """After get_or_init the slot counts as filled."""
        cell: OnceCell[str] = OnceCell()
        cell.get_or_init(lambda: 'default')
        assert cell.set('late') is False

    def test_none_is_a_value(self):
        """Writing None fills the slot."""
        cell: OnceCell[None] = OnceCell()
        assert cell.set(None) is True
        assert cell.get_or_init(lambda: 'default') is None

    def test_concurrent_set(self):
        """Exactly one of many concurrent writers wins."""
        cell: OnceCell[int] = OnceCell()
        wins: list[tuple[int, bool]] = []
        barrier = threading.Barrier(8)

        def writer(n: int) -> None:
            barrier.wait()
            wins.append((n, cell.set(n)))

        threads = [threading.Thread(target=writer, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        winners = [n for n, won in wins if won]
        assert len(winners) == 1
        assert cell.get_or_init(lambda: -1) == winners[0]
