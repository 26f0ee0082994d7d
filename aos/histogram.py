"""
A probability-mass function over non-negative integer damage values.

The attack sequence builds its damage distribution one branch at a time:
every combination of hits, wounds and failed saves contributes its
probability to one damage value. Independent weapon groups are then
combined by convolution. Histogram serves both jobs.
"""

from __future__ import annotations


class Histogram:
    """A dense, growable table mapping damage values to probabilities.

    Index i holds the probability of exactly i damage. Storage starts at
    INITIAL_LENGTH zero-filled slots and doubles whenever ``add`` reaches
    past the end, so the table may carry trailing zeros until ``trim`` is
    called.
    """

    INITIAL_LENGTH = 20

    def __init__(self) -> None:
        self._histogram: list[float] = [0.0] * self.INITIAL_LENGTH

    @classmethod
    def point_mass(cls, value: int, p: float = 1.0) -> Histogram:
        """A distribution with all of its mass at ``value``."""
        h = cls()
        h.add(value, p)
        return h

    def __len__(self) -> int:
        return len(self._histogram)

    def _extend(self, value: int) -> None:
        """Make sure there is a slot for ``value``."""
        if value >= len(self._histogram):
            new_length = max(len(self._histogram) * 2, value + 1)
            self._histogram.extend([0.0] * (new_length - len(self._histogram)))

    def add(self, value: int, p: float) -> None:
        """Accumulate probability ``p`` onto ``value``."""
        if value < 0:
            raise ValueError(f"damage value must be non-negative, got {value}")
        self._extend(value)
        self._histogram[value] += p

    def get(self, value: int) -> float:
        """Return the mass at ``value``; 0 for anything past the end."""
        if 0 <= value < len(self._histogram):
            return self._histogram[value]
        return 0.0

    def trim(self) -> None:
        """Drop trailing zero slots.

        An all-zero histogram is left as it is, so trimming doesn't always
        shrink the table.
        """
        for i in range(len(self._histogram) - 1, -1, -1):
            if self._histogram[i] != 0:
                del self._histogram[i + 1:]
                break

    def merge(self, other: Histogram) -> Histogram:
        """Return the distribution of the sum of two independent values.

        Mass at k is the sum of self[i] * other[j] over every i + j = k.
        Both operands are trimmed first.
        """
        self.trim()
        other.trim()

        merged = Histogram()
        merged._histogram = [0.0] * (len(self._histogram) + len(other._histogram) - 1)
        for i, p in enumerate(self._histogram):
            if p == 0:
                continue
            for j, q in enumerate(other._histogram):
                merged._histogram[i + j] += p * q

        return merged

    def histogram(self) -> tuple[float, ...]:
        """Return the trimmed distribution as a read-only dense sequence."""
        self.trim()
        return tuple(self._histogram)

    def total(self) -> float:
        """Total probability mass; 1.0 for a complete distribution."""
        return sum(self._histogram)

    def expected_value(self) -> float:
        return sum(i * p for i, p in enumerate(self._histogram))
