"""Newest-first trail of recent readings with a fixed capacity."""
from __future__ import annotations

import collections
from typing import Iterator, Tuple

from sweepradar.protocol import Reading


class HistoryBuffer:
    CAPACITY = 40

    def __init__(self, capacity: int = CAPACITY) -> None:
        self.capacity = capacity
        # appendleft on a bounded deque evicts from the right (oldest) end
        self._items: collections.deque[Reading] = collections.deque(maxlen=capacity)

    def push(self, reading: Reading) -> None:
        self._items.appendleft(reading)

    def entries(self) -> Iterator[Tuple[int, Reading]]:
        """Yield `(age, reading)` from newest (age 0) to oldest."""
        return enumerate(self._items)

    def size(self) -> int:
        return len(self._items)

    __len__ = size
