"""
``zipclone.lookahead``
======================

Single-slot lookahead over an arbitrary iterable, able to report whether
another item exists without losing it.
"""
import operator as op
import typing as ty

from zipclone import base

__all__ = ["Lookahead"]


T = ty.TypeVar("T")
D = ty.TypeVar("D")

_EMPTY: ty.Any = object()


class Lookahead(base.ShortCircuitIterator[T]):
    """Wraps an iterable, buffering at most one item so that
    ``has_more()`` may be asked without consuming anything.

    Once the underlying iterator has been found exhausted, it is never
    called again.

    Parameters
    ----------
    iterable : iterable
        Source of the items. ``iter()`` is called on it exactly once.
    """

    def __init__(self, iterable: ty.Iterable[T]) -> None:
        self._iterator: ty.Iterator[T] = iter(iterable)
        self._buffer: T = _EMPTY
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        """Whether the end of the underlying iterator has been seen,
        with nothing left in the buffer.
        """
        return self._exhausted and self._buffer is _EMPTY

    def _fill(self) -> bool:
        if self._buffer is not _EMPTY:
            return True
        if self._exhausted:
            return False
        try:
            self._buffer = next(self._iterator)
        except StopIteration:
            self._exhausted = True
            return False
        return True

    def has_more(self) -> bool:
        """Returns whether at least one more item is available. Repeat
        calls fetch nothing further until the item is advanced past.
        """
        return self._fill()

    def peek(self, default: D = _EMPTY) -> ty.Union[T, D]:
        """Returns the next item without consuming it.

        Raises
        ------
        StopIteration
            If there are no more items and ``default`` is not given.
        """
        if not self._fill():
            if default is _EMPTY:
                raise StopIteration
            return default
        return self._buffer

    def advance(self, default: D = _EMPTY) -> ty.Union[T, D]:
        """Consumes and returns the next item, draining the buffer
        first.

        Raises
        ------
        StopIteration
            If there are no more items and ``default`` is not given.
        """
        if self._buffer is not _EMPTY:
            item, self._buffer = self._buffer, _EMPTY
            return item
        if not self._exhausted:
            try:
                return next(self._iterator)
            except StopIteration:
                self._exhausted = True
        if default is _EMPTY:
            raise StopIteration
        return default

    def __next__(self) -> T:
        return self.advance()

    def __length_hint__(self) -> int:
        if self._exhausted:
            return int(self._buffer is not _EMPTY)
        buffered = int(self._buffer is not _EMPTY)
        return buffered + op.length_hint(self._iterator)
