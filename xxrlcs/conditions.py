"""Classifier conditions built from a sequence of symbols."""

from __future__ import annotations

import random
from typing import Iterable, Iterator, Sequence

from .symbols import CenterSpreadSymbol, TernarySymbol


class Condition:
    """An ordered sequence of symbols matched against a situation."""

    def __init__(self, symbols: Iterable = ()):
        self._symbols = list(symbols)

    @classmethod
    def from_string(cls, text: str) -> "Condition":
        """Parse a ternary condition such as ``"01#1"``."""
        return cls(TernarySymbol.from_char(char) for char in text)

    def matches(self, situation: Sequence) -> bool:
        if len(situation) != len(self._symbols):
            raise ValueError(
                f"situation has {len(situation)} values, "
                f"condition has {len(self._symbols)} symbols"
            )
        return all(symbol.matches(value) for symbol, value in zip(self._symbols, situation))

    def set_dont_care_at_random(self, probability: float, rng: random.Random | None = None) -> None:
        """Turn each symbol into a don't-care with the given probability."""
        rng = rng or random.Random()
        for symbol in self._symbols:
            if rng.random() < probability:
                symbol.set_dont_care()

    def dont_care_count(self) -> int:
        return sum(1 for symbol in self._symbols if symbol.dont_care)

    def __str__(self) -> str:
        text = "".join(str(symbol) for symbol in self._symbols)
        if text.endswith(" "):
            text = text[:-1]
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._symbols!r})"

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator:
        return iter(self._symbols)

    def __getitem__(self, index):
        return self._symbols[index]

    def __eq__(self, other):
        if not isinstance(other, Condition):
            return NotImplemented
        return self._symbols == other._symbols

    __hash__ = None


class IntervalCondition(Condition):
    """A condition of real-valued interval symbols (no don't-care)."""

    @classmethod
    def from_string(cls, text: str, symbol_type=CenterSpreadSymbol) -> "IntervalCondition":
        """Parse space-separated ``a;b`` pairs into interval symbols."""
        tokens = text.split(" ")
        if tokens and tokens[-1] == "":
            tokens.pop()
        symbols = []
        for token in tokens:
            first, separator, second = token.partition(";")
            if not separator:
                raise ValueError(f"interval symbol {token!r} has no ';'")
            symbols.append(symbol_type(float(first), float(second)))
        return cls(symbols)

    def set_dont_care_at_random(self, probability: float, rng: random.Random | None = None) -> None:
        raise TypeError("interval conditions have no don't-care symbols")

    def dont_care_count(self) -> int:
        raise TypeError("interval conditions have no don't-care symbols")