"""Closed and right-open real intervals."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from planisphere.errors import InvariantViolation


@dataclass(frozen=True, eq=False)
class Interval(ABC):
    """Bounded interval of real numbers with low < high."""

    low: float
    high: float

    def __post_init__(self) -> None:
        if not self.low < self.high:
            raise InvariantViolation(
                f"interval bounds must satisfy low < high, got {self.low}, {self.high}"
            )

    @property
    def size(self) -> float:
        return self.high - self.low

    @abstractmethod
    def contains(self, value: float) -> bool:
        """Whether value belongs to the interval."""

    def __eq__(self, other: object) -> bool:
        raise TypeError(f"{type(self).__name__} does not support equality")

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, eq=False)
class ClosedInterval(Interval):
    """Interval [low, high]."""

    @classmethod
    def symmetric(cls, size: float) -> "ClosedInterval":
        """Interval [-size/2, size/2]."""
        return cls(-size / 2, size / 2)

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high

    def clip(self, value: float) -> float:
        """Nearest point of the interval to value."""
        if value < self.low:
            return self.low
        return min(value, self.high)

    def __str__(self) -> str:
        return f"[{self.low:.2f},{self.high:.2f}]"


@dataclass(frozen=True, eq=False)
class RightOpenInterval(Interval):
    """Interval [low, high[."""

    @classmethod
    def symmetric(cls, size: float) -> "RightOpenInterval":
        """Interval [-size/2, size/2[."""
        return cls(-size / 2, size / 2)

    def contains(self, value: float) -> bool:
        return self.low <= value < self.high

    def reduce(self, value: float) -> float:
        """Wrap value into the interval with a floored modulo.

        Args:
            value: Any finite real number.

        Returns:
            low + ((value - low) mod size), always strictly below high.
        """
        size = self.size
        shifted = value - self.low
        reduced = self.low + (shifted - size * math.floor(shifted / size))
        # rounding can land a hair outside the interval, next to a bound equivalent to low
        if not self.low <= reduced < self.high:
            return self.low
        return reduced

    def __str__(self) -> str:
        return f"[{self.low:.2f},{self.high:.2f}["
