from __future__ import annotations

from collections import deque
from typing import NamedTuple

import numpy as np

from .config import clamp_buffer_size


class RawSample(NamedTuple):
    x: float
    y: float
    radius: float


class InputSmoother:
    """Running average over the last ``capacity`` raw samples."""

    def __init__(self, capacity: int = 3) -> None:
        self._capacity = clamp_buffer_size(capacity)
        self._buffer: deque[RawSample] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        self._capacity = clamp_buffer_size(value)
        self._evict()

    def __len__(self) -> int:
        return len(self._buffer)

    def _evict(self) -> None:
        while len(self._buffer) > self._capacity:
            self._buffer.popleft()

    def mean(self) -> RawSample:
        if not self._buffer:
            return RawSample(0.0, 0.0, 0.0)
        x, y, r = np.asarray(self._buffer, dtype=np.float64).mean(axis=0)
        return RawSample(float(x), float(y), float(r))

    def push(self, sample: RawSample) -> RawSample:
        self._buffer.append(sample)
        self._evict()
        return self.mean()

    def drain(self) -> list[RawSample]:
        """Empty the buffer, oldest first.

        Returns the mean of what remains after each removal, ending with the
        newest sample on its own. The buffer is empty afterwards.
        """
        means: list[RawSample] = []
        while len(self._buffer) > 1:
            self._buffer.popleft()
            means.append(self.mean())
        self._buffer.clear()
        return means

    def reset(self) -> None:
        self._buffer.clear()
