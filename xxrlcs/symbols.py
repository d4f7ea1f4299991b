"""Condition symbols: ternary symbols for XCS and interval symbols for XCSR."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

DONT_CARE_CHAR = "#"


def _format_bound(value: float) -> str:
    """Format a number with three significant digits, as in the population dumps."""
    return format(value, ".3g")


class TernarySymbol:
    """A symbol that either holds a concrete value or is a don't-care ('#')."""

    __slots__ = ("value", "dont_care")

    def __init__(self, value=0, dont_care=False):
        self.value = value
        self.dont_care = dont_care

    @classmethod
    def from_char(cls, char: str) -> "TernarySymbol":
        """Build a symbol from one character of a condition string."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return cls(ord(char) - ord("0"), char == DONT_CARE_CHAR)

    def matches(self, value) -> bool:
        return self.dont_care or self.value == value

    def set_dont_care(self) -> None:
        self.dont_care = True

    def __str__(self) -> str:
        if self.dont_care:
            return DONT_CARE_CHAR
        return str(int(self.value))

    def __repr__(self) -> str:
        return f"TernarySymbol({self.value!r}, dont_care={self.dont_care!r})"

    def __eq__(self, other):
        if not isinstance(other, TernarySymbol):
            return NotImplemented
        return self.dont_care == other.dont_care and (
            self.dont_care or self.value == other.value
        )

    __hash__ = None


class IntervalSymbol(ABC):
    """A real-valued interval [lower, upper) used by XCSR conditions."""

    @abstractmethod
    def lower(self) -> float:
        """Lower bound of the interval (inclusive)."""

    @abstractmethod
    def upper(self) -> float:
        """Upper bound of the interval (exclusive)."""

    def matches(self, value) -> bool:
        return self.lower() <= value < self.upper()


@dataclass
class CenterSpreadSymbol(IntervalSymbol):
    """An interval described by its center and spread."""

    center: float
    spread: float = 0.0

    def lower(self) -> float:
        return self.center - self.spread

    def upper(self) -> float:
        return self.center + self.spread

    def __str__(self) -> str:
        return f"{_format_bound(self.center)};{_format_bound(self.spread)} "


@dataclass
class UnorderedBoundSymbol(IntervalSymbol):
    """An interval given by two bounds in either order."""

    p: float
    q: float | None = None

    def __post_init__(self) -> None:
        if self.q is None:
            self.q = self.p

    def lower(self) -> float:
        return min(self.p, self.q)

    def upper(self) -> float:
        return max(self.p, self.q)

    def __str__(self) -> str:
        return f"{_format_bound(self.p)};{_format_bound(self.q)} "