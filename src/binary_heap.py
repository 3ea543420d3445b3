import logging
from typing import TypeVar, Generic, List, Iterator, Iterable, Optional

from ordering import Ordering, NATURAL, REVERSED

T = TypeVar('T')

logger = logging.getLogger(__name__)


class CapacityExceeded(Exception):
    """Raised when inserting into a heap that is already full."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"heap is at capacity ({capacity})")
        self.capacity = capacity


class BinaryHeap(Generic[T]):
    """Fixed-capacity, array-backed binary heap.

    Max-ordered under ``ordering``: the root is the element no other
    element is greater than. Pass a reversed ordering (or use
    ``min_heap``) for a min-heap.

    Storage is 1-based. Slot 0 holds the sentinel and is never treated
    as an element, so ``parent(i) = i // 2``, ``left(i) = 2 * i`` and
    ``right(i) = 2 * i + 1`` hold for every logical position. Slots past
    ``size`` also hold the sentinel.
    """

    def __init__(self, capacity: int, sentinel: Optional[T] = None,
                 ordering: Ordering[T] = NATURAL) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError("capacity must be a non-negative integer")
        self._capacity: int = capacity
        self._sentinel: Optional[T] = sentinel
        self._ordering: Ordering[T] = ordering
        self._size: int = 0
        self._data: List[Optional[T]] = [sentinel] * (capacity + 1)

    @classmethod
    def max_heap(cls, capacity: int, sentinel: Optional[T] = None) -> 'BinaryHeap[T]':
        return cls(capacity, sentinel, NATURAL)

    @classmethod
    def min_heap(cls, capacity: int, sentinel: Optional[T] = None) -> 'BinaryHeap[T]':
        return cls(capacity, sentinel, REVERSED)

    def capacity(self) -> int:
        return self._capacity

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def peek(self) -> Optional[T]:
        if self._size == 0:
            return None
        return self._data[1]

    def insert(self, value: T) -> None:
        """Insert ``value``, raising CapacityExceeded if the heap is full.

        The heap is left untouched when the insert fails.
        """
        if self._size == self._capacity:
            logger.debug("insert rejected, heap full at capacity %d", self._capacity)
            raise CapacityExceeded(self._capacity)
        self._size += 1
        self._data[self._size] = value
        self._sift_up(self._size)

    def pop(self) -> Optional[T]:
        if self._size == 0:
            return None
        result = self._data[1]
        self._swap(1, self._size)
        self._data[self._size] = self._sentinel
        self._size -= 1
        if self._size > 0:
            self._sift_down(1)
        return result

    def clear(self) -> None:
        for i in range(1, self._size + 1):
            self._data[i] = self._sentinel
        self._size = 0

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap(self._capacity, self._sentinel, self._ordering)
        clone._data = self._data.copy()
        clone._size = self._size
        return clone

    @staticmethod
    def from_array(arr: Iterable[T], capacity: Optional[int] = None,
                   sentinel: Optional[T] = None,
                   ordering: Ordering[T] = NATURAL) -> 'BinaryHeap[T]':
        """Build a heap from an array in O(n).

        Capacity defaults to the number of values. Raises CapacityExceeded
        if the values do not fit in the given capacity.
        """
        values = list(arr)
        if capacity is None:
            capacity = len(values)
        heap: BinaryHeap[T] = BinaryHeap(capacity, sentinel, ordering)
        if len(values) > capacity:
            raise CapacityExceeded(capacity)
        heap._data[1:len(values) + 1] = values
        heap._size = len(values)
        for i in range(heap._size // 2, 0, -1):
            heap._sift_down(i)
        logger.debug("heapified %d values into capacity %d", heap._size, capacity)
        return heap

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _sift_up(self, index: int) -> None:
        less = self._ordering.less
        while index > 1:
            parent = index // 2
            if less(self._data[parent], self._data[index]):
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        less = self._ordering.less
        size = self._size
        while True:
            largest = index
            left = 2 * index
            right = 2 * index + 1
            if left <= size and less(self._data[largest], self._data[left]):
                largest = left
            if right <= size and less(self._data[largest], self._data[right]):
                largest = right
            if largest == index:
                break
            self._swap(index, largest)
            index = largest

    def _validate(self) -> bool:
        less_equal = self._ordering.less_equal
        for i in range(2, self._size + 1):
            if not less_equal(self._data[i], self._data[i // 2]):
                return False
        return True

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data[1:self._size + 1]}, capacity={self._capacity})"

    def __str__(self) -> str:
        return f"BinaryHeap(size={self._size}, capacity={self._capacity})"

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.pop()
