"""Tests for match dispatch over bool, Option and Result."""

import pytest

from rslike import Bind, Err, Nothing, Ok, Some, UndefinedBehaviorError, match


def on_success(*args):
    return ('success', args)


def on_failure(*args):
    return ('failure', args)


class TestMatchBool:
    """Tests for bool dispatch."""

    def test_true(self):
        """True calls on_success(True)."""
        assert match(True, on_success, on_failure) == ('success', (True,))

    def test_false(self):
        """False calls on_failure(False)."""
        assert match(False, on_success, on_failure) == ('failure', (False,))

    def test_truthy_non_bool_rejected(self):
        """Truthy values that are not bool are not accepted."""
        with pytest.raises(UndefinedBehaviorError):
            match(1, on_success, on_failure)


class TestMatchOption:
    """Tests for Option dispatch."""

    def test_some(self):
        """Some(x) calls on_success(x)."""
        assert match(Some(5), on_success, on_failure) == ('success', (5,))

    def test_none(self):
        """None calls on_failure() without arguments."""
        assert match(Nothing(), on_success, on_failure) == ('failure', ())


class TestMatchResult:
    """Tests for Result dispatch."""

    def test_ok(self):
        """Ok(x) calls on_success(x)."""
        assert match(Ok('v'), on_success, on_failure) == ('success', ('v',))

    def test_err(self):
        """Err(e) calls on_failure(e)."""
        assert match(Err('e'), on_success, on_failure) == ('failure', ('e',))

    def test_ok_some_collapses(self):
        """Ok(Some(x)) calls on_success(x)."""
        assert match(Ok(Some(3)), on_success, on_failure) == ('success', (3,))

    def test_ok_none_is_failure(self):
        """Ok(None()) calls on_failure() without arguments."""
        assert match(Ok(Nothing()), on_success, on_failure) == ('failure', ())

    def test_bind_output(self):
        """Bind outputs dispatch to the unwrapped value or the exception."""

        @Bind
        def parse(raw: str) -> int:
            return int(raw)

        assert match(parse('42'), lambda n: n, lambda *_: -1) == 42
        kind, args = match(parse('x'), on_success, on_failure)
        assert kind == 'failure'
        assert isinstance(args[0], ValueError)


class TestMatchContract:
    """Tests for argument validation."""

    def test_unsupported_value(self):
        """Values other than bool, Option or Result are rejected."""
        with pytest.raises(UndefinedBehaviorError, match='only bool, Option or Result'):
            match('yes', on_success, on_failure)

    def test_callbacks_must_be_callable(self):
        """Both callbacks must be callable."""
        with pytest.raises(UndefinedBehaviorError):
            match(True, on_success, None)
        with pytest.raises(UndefinedBehaviorError):
            match(True, 'x', on_failure)

    def test_exactly_one_callback_called(self):
        """Only the selected callback runs."""
        calls = []
        match(Some(1), lambda x: calls.append('ok'), lambda: calls.append('fail'))
        assert calls == ['ok']
