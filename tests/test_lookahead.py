import operator as op
import typing as ty

import pytest
from hypothesis import given, settings, strategies as st

from zipclone import Lookahead


class Recorder:
    """Iterator over ``items`` which counts how often it is asked for
    another item. Unlike a well behaved iterator, it starts again from
    the beginning after signalling the end.
    """

    def __init__(self, items: ty.Sequence[ty.Any]) -> None:
        self.items = items
        self.calls = 0
        self._pos = 0

    def __iter__(self) -> "Recorder":
        return self

    def __next__(self) -> ty.Any:
        self.calls += 1
        if self._pos >= len(self.items):
            self._pos = 0
            raise StopIteration
        item = self.items[self._pos]
        self._pos += 1
        return item


@given(st.lists(st.integers(), max_size=30))
@settings(max_examples=50, deadline=None)
def test_order(items: ty.List[int]) -> None:
    """Tests that interleaving lookahead with advancing returns every
    item in order.
    """
    ahead = Lookahead(items)
    out = []
    while ahead.has_more():
        assert ahead.has_more()
        out.append(ahead.advance())
    assert out == items


def test_has_more_idempotent() -> None:
    """Tests that repeated lookahead fetches only a single item."""
    source = Recorder([1, 2])
    ahead = Lookahead(source)
    for _ in range(5):
        assert ahead.has_more()
    assert source.calls == 1
    assert ahead.peek() == 1
    assert next(ahead) == 1
    assert source.calls == 1


def test_no_resurrection() -> None:
    """Tests that items are not fetched after the end has been seen,
    even if the source would provide them.
    """
    source = Recorder([1])
    ahead = Lookahead(source)
    assert list(ahead) == [1]
    calls = source.calls
    assert not ahead.has_more()
    assert ahead.advance(None) is None
    with pytest.raises(StopIteration):
        ahead.advance()
    assert source.calls == calls
    assert ahead.exhausted


def test_peek_default() -> None:
    """Tests peeking at an exhausted source."""
    ahead = Lookahead([])
    assert ahead.peek("empty") == "empty"
    with pytest.raises(StopIteration):
        ahead.peek()


def test_exhausted_after_drain() -> None:
    """Tests that exhaustion is only reported once the buffer is
    drained.
    """
    ahead = Lookahead("a")
    assert ahead.advance() == "a"
    assert not ahead.exhausted
    assert not ahead.has_more()
    assert ahead.exhausted


def test_short_circuit_defaults() -> None:
    """Tests the skip, nth, last and count operations inherited by the
    lookahead.
    """
    assert Lookahead(range(10)).nth(3) == 3
    assert Lookahead(range(10)).last() == 9
    assert Lookahead(range(10)).skip(4).count() == 6
    assert Lookahead(range(3)).nth(8, "gone") == "gone"
    assert Lookahead([]).last("none") == "none"


def test_length_hint() -> None:
    """Tests the length hint counts a buffered item."""
    ahead = Lookahead(range(4))
    assert op.length_hint(ahead) == 4
    ahead.has_more()
    assert op.length_hint(ahead) == 4
    ahead.advance()
    assert op.length_hint(ahead) == 3
    ahead.count()
    assert op.length_hint(ahead) == 0
