from typing import TypeVar, Generic, Callable, Any

T = TypeVar('T')


class Ordering(Generic[T]):
    """A strict total order over elements of type T.

    Both heaps only ever ask "does a come strictly before b?", so an
    ordering is just a wrapped ``less`` predicate. Equal elements are the
    ones for which neither ``less(a, b)`` nor ``less(b, a)`` holds.
    """

    def __init__(self, less: Callable[[T, T], bool]) -> None:
        self._less = less

    @staticmethod
    def natural() -> 'Ordering[Any]':
        return Ordering(lambda a, b: a < b)

    @staticmethod
    def by_key(key: Callable[[T], Any]) -> 'Ordering[T]':
        return Ordering(lambda a, b: key(a) < key(b))

    def reversed(self) -> 'Ordering[T]':
        less = self._less
        return Ordering(lambda a, b: less(b, a))

    def less(self, a: T, b: T) -> bool:
        return self._less(a, b)

    def less_equal(self, a: T, b: T) -> bool:
        return not self._less(b, a)


NATURAL: Ordering[Any] = Ordering.natural()
REVERSED: Ordering[Any] = NATURAL.reversed()
