"""Generic binary heap ordered by a caller-supplied comparator.

The comparator answers "does a outrank b?" and must be a strict weak
ordering. `a < b` gives a min-heap, `a > b` a max-heap.
"""

from typing import TypeVar, Generic, List, Iterator, Optional, Callable

T = TypeVar('T')

Comparator = Callable[[T, T], bool]


class BinaryHeap(Generic[T]):
    def __init__(self, comparator: Comparator) -> None:
        if not callable(comparator):
            raise TypeError("comparator must be callable")
        self._data: List[T] = []
        self._comparator = comparator

    @staticmethod
    def new_min() -> 'BinaryHeap[T]':
        return BinaryHeap(lambda a, b: a < b)

    @staticmethod
    def new_max() -> 'BinaryHeap[T]':
        return BinaryHeap(lambda a, b: a > b)

    def len(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def add(self, value: T) -> None:
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def extract_top(self) -> Optional[T]:
        """Remove and return the highest-priority element.

        Returns None when the heap is empty and leaves it untouched.
        """
        if not self._data:
            return None
        last = len(self._data) - 1
        self._data[0], self._data[last] = self._data[last], self._data[0]
        result = self._data.pop()
        self._sift_down(0)
        return result

    def peek(self) -> T:
        if not self._data:
            raise IndexError("peek from empty heap")
        return self._data[0]

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    @staticmethod
    def _left(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right(index: int) -> int:
        return 2 * index + 2

    def _has_children(self, index: int) -> bool:
        return self._left(index) < len(self._data)

    def _top_child(self, index: int) -> int:
        # Left wins unless the right child strictly outranks it.
        left = self._left(index)
        right = self._right(index)
        if right < len(self._data) and self._comparator(self._data[right], self._data[left]):
            return right
        return left

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = self._parent(index)
            if self._comparator(self._data[index], self._data[parent]):
                self._data[index], self._data[parent] = self._data[parent], self._data[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        while self._has_children(index):
            child = self._top_child(index)
            if not self._comparator(self._data[child], self._data[index]):
                break
            self._data[index], self._data[child] = self._data[child], self._data[index]
            index = child

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data})"

    def __str__(self) -> str:
        return f"BinaryHeap(size={len(self._data)})"

    def __iter__(self) -> Iterator[T]:
        # Draining: every consumer shares this heap's remaining contents.
        return self

    def __next__(self) -> T:
        if not self._data:
            raise StopIteration
        return self.extract_top()


class MinHeap:
    """Factory for heaps that yield the smallest element first."""

    @staticmethod
    def new() -> BinaryHeap:
        return BinaryHeap.new_min()


class MaxHeap:
    """Factory for heaps that yield the largest element first."""

    @staticmethod
    def new() -> BinaryHeap:
        return BinaryHeap.new_max()
