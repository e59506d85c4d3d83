import heapq
import itertools

from byte_freq import ALPHABET_SIZE

class HeapUnderflowError(IndexError):
    """extract_min() on an empty queue. Never raised by a correct tree build."""

class MinHeap:
    """
    Min-priority queue of tree nodes keyed by node.freq.

    Entries are (freq, seq, node): seq is a monotone insertion counter, so
    equal frequencies come out in insertion order (earlier-inserted is smaller).
    Capacity is bounded by the alphabet size; the list grows as needed.
    """

    def __init__(self, capacity: int = ALPHABET_SIZE):
        self.capacity = capacity
        self._heap = []
        self._seq = itertools.count()

    def __len__(self):
        return len(self._heap)

    def insert(self, node):
        if len(self._heap) >= self.capacity:
            raise ValueError(f"priority queue full (capacity {self.capacity})")
        heapq.heappush(self._heap, (node.freq, next(self._seq), node))

    def extract_min(self):
        if not self._heap:
            raise HeapUnderflowError("extract_min from empty priority queue")
        return heapq.heappop(self._heap)[2]

    def peek(self):
        if not self._heap:
            raise HeapUnderflowError("peek into empty priority queue")
        return self._heap[0][2]
