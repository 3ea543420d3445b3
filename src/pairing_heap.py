"""
Persistent pairing heap.

A pairing heap is either ``EMPTY`` or a ``Node`` holding a value and a
forest of child heaps, where the value is no greater than anything in the
forest. Merge is the fundamental operation: the root that is not greater
wins and the losing heap is prepended, whole, to the winner's forest.
Removing the root consolidates the forest by two-pass pairing.

Nothing here mutates a heap. Every operation returns a new heap value that
may share unmodified subtrees with its inputs, so older heaps stay valid
snapshots. Forests are persistent cons lists, which keeps prepending O(1).

All functions take an optional ``ordering``; a heap must always be used
with the ordering it was built with. The default is a min-heap over ``<``.
"""

import logging
from dataclasses import dataclass
from typing import TypeVar, Generic, Iterable, Iterator, List, Optional, Union

from ordering import Ordering, NATURAL

T = TypeVar('T')

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Empty:
    """The heap with no elements."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


def _same_structure(left: List['Node[T]'], right: List['Node[T]']) -> bool:
    # Walks both trees together with an explicit stack; heaps built from
    # descending input are chains as deep as they are long.
    if len(left) != len(right):
        return False
    stack = list(zip(left, right))
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if a.value != b.value:
            return False
        a_children = list(children(a))
        b_children = list(children(b))
        if len(a_children) != len(b_children):
            return False
        stack.extend(zip(a_children, b_children))
    return True


def _structure_hash(roots: List['Node[T]']) -> int:
    shape = []
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        kids = list(children(node))
        shape.append((node.value, len(kids)))
        stack.extend(reversed(kids))
    return hash((len(roots), tuple(shape)))


@dataclass(frozen=True, eq=False, repr=False)
class Forest(Generic[T]):
    """One cell of an immutable list of child heaps."""

    head: 'Node[T]'
    tail: Optional['Forest[T]'] = None

    def __iter__(self) -> Iterator['Node[T]']:
        cell: Optional[Forest[T]] = self
        while cell is not None:
            yield cell.head
            cell = cell.tail

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Forest):
            return NotImplemented
        return _same_structure(list(self), list(other))

    def __hash__(self) -> int:
        return _structure_hash(list(self))

    def __repr__(self) -> str:
        return f"Forest({list(self)!r})"


@dataclass(frozen=True, eq=False, repr=False)
class Node(Generic[T]):
    value: T
    forest: Optional[Forest[T]] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return _same_structure([self], [other])

    def __hash__(self) -> int:
        return _structure_hash([self])

    def __repr__(self) -> str:
        count = 0 if self.forest is None else len(self.forest)
        return f"Node({self.value!r}, children={count})"


PairingHeap = Union[Empty, Node[T]]


def empty() -> Empty:
    return EMPTY


def singleton(value: T) -> Node[T]:
    return Node(value)


def is_empty(h: PairingHeap) -> bool:
    return isinstance(h, Empty)


def merge(a: PairingHeap, b: PairingHeap, ordering: Ordering[T] = NATURAL) -> PairingHeap:
    """Merge two heaps in O(1).

    If either heap is empty the other is returned as is. When the roots
    are equal ``a`` wins, so results are deterministic.
    """
    if isinstance(a, Empty):
        return b
    if isinstance(b, Empty):
        return a
    if ordering.less(b.value, a.value):
        return Node(b.value, Forest(a, b.forest))
    return Node(a.value, Forest(b, a.forest))


def insert(h: PairingHeap, value: T, ordering: Ordering[T] = NATURAL) -> PairingHeap:
    return merge(h, Node(value), ordering)


def peek(h: PairingHeap) -> Optional[T]:
    if isinstance(h, Empty):
        return None
    return h.value


def pop(h: PairingHeap, ordering: Ordering[T] = NATURAL) -> Optional[PairingHeap]:
    """Return the heap without its root, or None if ``h`` is empty."""
    if isinstance(h, Empty):
        return None
    return consolidate(children(h), ordering)


def consolidate(forest: Iterable[PairingHeap], ordering: Ordering[T] = NATURAL) -> PairingHeap:
    """Merge a forest into a single heap by two-pass pairing.

    Equivalent to ``merge(merge(f[0], f[1]), consolidate(f[2:]))``: adjacent
    pairs are merged left to right, then the pairs are folded together
    from the right. Done with loops so long forests don't recurse.
    """
    heaps: List[PairingHeap] = list(forest)
    if not heaps:
        return EMPTY

    pairs: List[PairingHeap] = []
    for i in range(0, len(heaps) - 1, 2):
        pairs.append(merge(heaps[i], heaps[i + 1], ordering))
    if len(heaps) % 2 == 1:
        pairs.append(heaps[-1])

    result = pairs[-1]
    for paired in reversed(pairs[:-1]):
        result = merge(paired, result, ordering)
    return result


def from_iterable(values: Iterable[T], ordering: Ordering[T] = NATURAL) -> PairingHeap:
    h: PairingHeap = EMPTY
    count = 0
    for value in values:
        h = insert(h, value, ordering)
        count += 1
    logger.debug("built pairing heap from %d values", count)
    return h


def children(h: PairingHeap) -> Iterator[Node[T]]:
    if isinstance(h, Empty) or h.forest is None:
        return iter(())
    return iter(h.forest)


def size(h: PairingHeap) -> int:
    """Count the elements of ``h``. O(n); no size is stored on nodes."""
    count = 0
    stack: List[PairingHeap] = [h]
    while stack:
        node = stack.pop()
        if isinstance(node, Empty):
            continue
        count += 1
        stack.extend(children(node))
    return count


def iter_sorted(h: PairingHeap, ordering: Ordering[T] = NATURAL) -> Iterator[T]:
    """Yield the elements of ``h`` in pop order. ``h`` itself is unchanged."""
    while isinstance(h, Node):
        yield h.value
        h = consolidate(children(h), ordering)


def to_sorted_list(h: PairingHeap, ordering: Ordering[T] = NATURAL) -> List[T]:
    return list(iter_sorted(h, ordering))


def validate(h: PairingHeap, ordering: Ordering[T] = NATURAL) -> bool:
    """Check that every node's value is no greater than its children's."""
    stack: List[PairingHeap] = [h]
    while stack:
        node = stack.pop()
        if isinstance(node, Empty):
            continue
        for child in children(node):
            if not ordering.less_equal(node.value, child.value):
                return False
            stack.append(child)
    return True
