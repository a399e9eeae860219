from __future__ import annotations

from typing import List, Tuple

from errors import (
    CapacityExceededError,
    EmptyError,
    check_index,
    check_positive,
)


class Queue:
    """Fixed-capacity FIFO of integers backed by a circular buffer."""

    def __init__(self, capacity: int) -> None:
        check_positive("Queue capacity", capacity)
        self.capacity = capacity
        self._data: List[int] = [0] * capacity
        self._front = 0
        self._count = 0

    def enqueue(self, value: int) -> None:
        if self._count == self.capacity:
            raise CapacityExceededError("Queue is full.")
        rear = (self._front + self._count) % self.capacity
        self._data[rear] = value
        self._count += 1

    def dequeue(self) -> int:
        if self._count == 0:
            raise EmptyError("Queue is empty.")
        value = self._data[self._front]
        self._front = (self._front + 1) % self.capacity
        self._count -= 1
        return value

    def is_empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count


class PriorityQueue:
    """Fixed-capacity binary min-heap of (value, priority) pairs.

    There is no decrease-key: callers that need a better priority for a value
    insert it again and tolerate the stale entry left behind.
    """

    def __init__(self, capacity: int) -> None:
        check_positive("Priority queue capacity", capacity)
        self.capacity = capacity
        self._heap: List[Tuple[int, float]] = []

    def insert(self, value: int, priority: float) -> None:
        if len(self._heap) == self.capacity:
            raise CapacityExceededError("Priority queue is full.")
        self._heap.append((value, priority))
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> int:
        if not self._heap:
            raise EmptyError("Priority queue is empty.")
        min_value = self._heap[0][0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return min_value

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index][1] >= heap[parent][1]:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index
            if left < size and heap[left][1] < heap[smallest][1]:
                smallest = left
            if right < size and heap[right][1] < heap[smallest][1]:
                smallest = right
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest


class UnionFind:
    """Disjoint sets over 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        check_positive("Union-find size", size)
        self.size = size
        self._parent: List[int] = list(range(size))
        self._rank: List[int] = [0] * size

    def find(self, a: int) -> int:
        check_index("Element", a, self.size)
        root = a
        while self._parent[root] != root:
            root = self._parent[root]

        # Re-point every node on the walked path straight at the root.
        while self._parent[a] != root:
            next_node = self._parent[a]
            self._parent[a] = root
            a = next_node
        return root

    def unite(self, a: int, b: int) -> None:
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return

        if self._rank[root_a] < self._rank[root_b]:
            self._parent[root_a] = root_b
        elif self._rank[root_a] > self._rank[root_b]:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] += 1

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def rank(self, a: int) -> int:
        check_index("Element", a, self.size)
        return self._rank[a]
