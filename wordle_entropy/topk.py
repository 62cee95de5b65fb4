"""Bounded selector for the highest-scoring guesses."""

import heapq
import itertools
from typing import List, Tuple

from .candidates import Candidate


class TopK:
    """
    Keep the `capacity` best candidates offered so far.

    Backed by a min-heap keyed on (score, -arrival), so the root is always
    the next candidate to evict: the lowest score, and among equal scores
    the one offered last.
    """

    def __init__(self, capacity: int = 5):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._heap: List[Tuple[float, int, Candidate]] = []
        self._arrival = itertools.count()

    def offer(self, candidate: Candidate) -> None:
        heapq.heappush(self._heap, (candidate.score, -next(self._arrival), candidate))
        if len(self._heap) > self.capacity:
            heapq.heappop(self._heap)

    def drain_descending(self) -> List[str]:
        """Remove and return the held words, highest score first."""
        ranked = [entry[2].word for entry in sorted(self._heap, key=lambda e: e[:2], reverse=True)]
        self._heap.clear()
        return ranked

    def __len__(self) -> int:
        return len(self._heap)
