"""Simple moving average filter used to smooth logged values."""

from __future__ import annotations

from collections import deque


class SimpleMovingAverage:
    """Average of the last ``order`` values passed to the filter."""

    def __init__(self, order: int):
        if order <= 0:
            raise ValueError("filter order must be positive")
        self._order = order
        self._values: deque[float] = deque(maxlen=order)

    def __call__(self, value: float) -> float:
        """Store ``value`` and return the mean of the values currently held."""
        self._values.append(value)
        return sum(self._values) / len(self._values)

    def order(self) -> int:
        """The number of samples the average is taken over."""
        return self._order