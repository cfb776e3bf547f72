"""
``zipclone.adapter``
====================

Pairs every item of an iterable with a copy of a single seed value,
handing over the original seed itself with the last item, so that one
fewer copy is made than with ``zip(iterable, repeat_with(copy))``.

Copies are only made for pairs which are actually produced. Skipping
ahead with ``skip()`` or ``nth()``, jumping to the end with ``last()``,
or counting with ``count()`` passes over items without copying the seed
for them.
"""
import operator as op
import typing as ty
from copy import deepcopy

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from zipclone import base
from zipclone.lookahead import Lookahead

__all__ = ["ZipCloneIterator", "zip_clone", "default_duplicate"]


T = ty.TypeVar("T")
S = ty.TypeVar("S")
D = ty.TypeVar("D")
Duplicator = ty.Callable[[S], S]

_EMPTY: ty.Any = object()


def default_duplicate(seed: S) -> S:
    """Copies ``seed`` using its own ``copy()`` method if it is a
    ``Duplicable``, falling back on ``copy.deepcopy()``.

    :group: ZipClone
    """
    if isinstance(seed, base.Duplicable):
        return seed.copy()
    return deepcopy(seed)


class ZipCloneIterator(base.ShortCircuitIterator[base.Pair[T, S]]):
    """Iterator over ``(item, value)`` pairs, where ``value`` is a copy
    of the seed for every item except the last, which receives the seed
    itself.

    :group: ZipClone

    Parameters
    ----------
    iterable : iterable
        The items to pair up with the seed.
    seed : Any
        The value to pair with every item. Ownership passes to the
        iterator, which hands it back with the final pair.
    duplicate : callable, optional
        Function taking the seed and returning an independent copy. If
        ``None``, ``default_duplicate()`` is used.

    Attributes
    ----------
    duplications : int
        Number of copies of the seed made so far.

    Raises
    ------
    TypeError
        If ``duplicate`` is not callable.

    Notes
    -----
    Once the final pair has been produced, or the iterable is found to
    be empty, the seed is released and the iterator stays exhausted.
    If ``duplicate`` raises, the exception propagates out of the call
    which requested the pair, and the iterator should not be used
    further.
    """

    def __init__(
        self,
        iterable: ty.Iterable[T],
        seed: S,
        duplicate: ty.Optional[Duplicator[S]] = None,
    ) -> None:
        if duplicate is None:
            duplicate = default_duplicate
        elif not callable(duplicate):
            raise TypeError("duplicate must be a callable taking the seed.")
        self._items: Lookahead[T] = Lookahead(iterable)
        self._seed: S = seed
        self._duplicate = duplicate
        self.duplications = 0

    @property
    def exhausted(self) -> bool:
        """Whether the iterator can produce no more pairs."""
        return self._seed is _EMPTY

    def __rich__(self) -> Tree:
        name = self.__class__.__name__
        dup_name = getattr(
            self._duplicate, "__qualname__", repr(self._duplicate)
        )
        tree = Tree(f"{name}(duplicate=[yellow]{escape(dup_name)}[default])")
        if self.exhausted:
            seed_str = "[red]<released>"
        else:
            seed_str = f"[green]{escape(repr(self._seed))}"
        tree.add(f"[blue]seed [default]= {seed_str}")
        tree.add(f"[blue]duplications [default]= [green]{self.duplications}")
        tree.add(f"[blue]remaining [default]~ [green]{op.length_hint(self)}")
        return tree

    def __repr__(self) -> str:
        console = Console(color_system=None)
        with console.capture() as capture:
            console.print(self)
        return capture.get()

    def _release(self) -> S:
        seed, self._seed = self._seed, _EMPTY
        return seed

    def __next__(self) -> base.Pair[T, S]:
        if self._seed is _EMPTY:
            raise StopIteration
        try:
            item = self._items.advance()
        except StopIteration:
            self._release()
            raise
        if not self._items.has_more():
            return item, self._release()
        value = self._duplicate(self._seed)
        self.duplications += 1
        return item, value

    def __length_hint__(self) -> int:
        if self._seed is _EMPTY:
            return 0
        return op.length_hint(self._items)

    def skip(self, n: int) -> "ZipCloneIterator[T, S]":
        """Discards up to ``n`` items without pairing them, and returns
        the iterator so that consumption may continue from there.

        Parameters
        ----------
        n : int
            Number of items to pass over.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError("Number of items to skip must not be negative.")
        if self._seed is _EMPTY:
            return self
        self._items.skip(n)
        if self._items.exhausted:
            self._release()
        return self

    def last(
        self, default: ty.Optional[D] = None
    ) -> ty.Union[base.Pair[T, S], D, None]:
        """Consumes the iterator, returning only the final pair, which
        holds the original seed. No copies are made.

        Parameters
        ----------
        default : Any, optional
            Returned if there are no items left to pair.
        """
        if self._seed is _EMPTY:
            return default
        item = self._items.last(_EMPTY)
        seed = self._release()
        if item is _EMPTY:
            return default
        return item, seed

    def count(self) -> int:
        """Consumes the iterator, returning the number of pairs it would
        have produced. No copies are made.
        """
        if self._seed is _EMPTY:
            return 0
        num_items = self._items.count()
        self._release()
        return num_items


def zip_clone(
    iterable: ty.Iterable[T],
    seed: S,
    duplicate: ty.Optional[Duplicator[S]] = None,
) -> ZipCloneIterator[T, S]:
    """Zips ``iterable`` with copies of ``seed``, giving the original
    ``seed`` to the final item.

    :group: ZipClone

    Parameters
    ----------
    iterable : iterable
        The items to pair up with the seed.
    seed : Any
        The value to pair with every item.
    duplicate : callable, optional
        Function returning an independent copy of the seed. Defaults to
        ``default_duplicate()``.

    Returns
    -------
    pairs : ZipCloneIterator
        Iterator over ``(item, value)`` tuples.

    Examples
    --------
    >>> greeting = ["Hello"]
    >>> pairs = list(zip_clone(range(3), greeting))
    >>> [value == greeting for _, value in pairs]
    [True, True, True]
    >>> pairs[-1][1] is greeting
    True
    >>> zip_clone(range(10), greeting).last()
    (9, ['Hello'])
    """
    return ZipCloneIterator(iterable, seed, duplicate)
