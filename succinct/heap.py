import heapq
from functools import cmp_to_key


def natural_order(lhs, rhs):
    return (lhs > rhs) - (lhs < rhs)


class Heap:
    """
    Binary heap (priority queue) ordered by a two-argument comparator.

    `compare(lhs, rhs)` returns a negative number when lhs should come out
    first, zero when they tie and a positive number otherwise. pop() always
    returns the smallest element under that rule.
    """

    def __init__(self, compare=natural_order):
        self._key = cmp_to_key(compare)
        self._heap = []

    @classmethod
    def with_compare(cls, compare):
        return cls(compare)

    def push(self, value):
        heapq.heappush(self._heap, self._key(value))

    def pop(self):
        if not self._heap:
            raise IndexError("pop from empty heap")
        return heapq.heappop(self._heap).obj

    def peek(self):
        if not self._heap:
            return None
        return self._heap[0].obj

    def is_empty(self):
        return not self._heap

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)

    def drain(self, num):
        """Pop up to `num` elements in increasing order."""
        result = []
        while self._heap and len(result) < num:
            result.append(self.pop())
        return result
