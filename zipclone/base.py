from abc import ABC, abstractmethod
from typing import TypeVar, Tuple, Any, Optional, Union, Iterator


__all__ = [
    "Pair",
    "Duplicable",
    "ShortCircuitIterator",
]


T = TypeVar("T")
S = TypeVar("S")
D = TypeVar("D")
Self = TypeVar("Self", bound="ShortCircuitIterator[Any]")
Pair = Tuple[T, S]


class Duplicable(ABC):
    """Interface for seed values which know how to duplicate
    themselves.
    """

    @abstractmethod
    def copy(self: D) -> D:
        """Returns an independent copy of the value."""


class ShortCircuitIterator(Iterator[T]):
    """Iterator interface extended with operations which may pass over
    items without materialising them.

    The defaults here are composed from ``__next__``, so every item
    passed over is still produced and thrown away. Subclasses whose
    ``__next__`` does real work for each item should override them.
    """

    def __iter__(self: Self) -> Self:
        return self

    @abstractmethod
    def __next__(self) -> T:
        pass

    def skip(self: Self, n: int) -> Self:
        """Discards up to ``n`` items, and returns the iterator."""
        if n < 0:
            raise ValueError("Number of items to skip must not be negative.")
        for _ in range(n):
            try:
                next(self)
            except StopIteration:
                break
        return self

    def nth(self, n: int, default: Optional[D] = None) -> Union[T, D, None]:
        """Returns the item ``n`` places ahead, discarding those before
        it, or ``default`` if the iterator runs out first.
        """
        return next(self.skip(n), default)

    def last(self, default: Optional[D] = None) -> Union[T, D, None]:
        """Consumes the iterator, returning the final item, or
        ``default`` if it was already empty.
        """
        item: Union[T, D, None] = default
        for item in self:
            pass
        return item

    def count(self) -> int:
        """Consumes the iterator, returning the number of remaining
        items.
        """
        return sum(1 for _ in self)
