"""Item sources for a confirmation run.

A source is either a finite iterable of items, consumed front to back, or a
zero-argument pull function that returns the next item or :data:`EXHAUSTED`.
"""

from collections.abc import Iterable, Iterator
from typing import Any, Callable, Union

from .errors import ItemSourceError


class _Exhausted:
    """Sentinel type returned by pull functions once they run dry."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EXHAUSTED"

    def __bool__(self) -> bool:
        return False


EXHAUSTED = _Exhausted()

SourceLike = Union[Iterable[Any], Callable[[], Any]]


class ItemSource:
    """Pull-based view over a caller-supplied source.

    Each item is produced at most once, in source order. Once the underlying
    source is exhausted every later :meth:`pull` returns :data:`EXHAUSTED`
    without touching it again.
    """

    def __init__(self, source: SourceLike):
        self._iterator = _to_iterator(source)
        self._exhausted = False
        self.pulled = 0

    def pull(self) -> Any:
        """Return the next item, or ``EXHAUSTED``."""
        if self._exhausted:
            return EXHAUSTED
        item = next(self._iterator, EXHAUSTED)
        if item is EXHAUSTED:
            self._exhausted = True
            return EXHAUSTED
        self.pulled += 1
        return item

    @property
    def exhausted(self) -> bool:
        return self._exhausted


def _pull_until_exhausted(pull: Callable[[], Any]) -> Iterator[Any]:
    # Identity check only: items may define any __eq__
    while True:
        item = pull()
        if item is EXHAUSTED:
            return
        yield item


def _to_iterator(source: SourceLike) -> Iterator[Any]:
    if isinstance(source, (str, bytes)):
        raise ItemSourceError(
            f"Item source must be a sequence of items or a pull function, "
            f"not {type(source).__name__}"
        )
    if isinstance(source, Iterable):
        return iter(source)
    if callable(source):
        return _pull_until_exhausted(source)
    raise ItemSourceError(
        f"Item source must be a sequence of items or a pull function, "
        f"not {type(source).__name__}"
    )
