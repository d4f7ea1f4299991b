"""Labelled datasets: CSV reading and min/max normalisation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable


@dataclass
class Dataset:
    """Situations together with the correct action for each of them."""

    situations: list = field(default_factory=list)
    actions: list = field(default_factory=list)


def _round_half_away(value: float) -> float:
    if value >= 0:
        return float(math.floor(value + 0.5))
    return -float(math.floor(-value + 0.5))


def read_dataset(lines: Iterable[str], value_type=int, action_type=int, rounds=False) -> Dataset:
    """Read comma-separated rows whose last field is the action.

    Reading stops at the first empty line.
    """
    dataset = Dataset()
    for line in lines:
        line = line.rstrip("\r\n")
        if not line:
            break
        fields = line.split(",")
        if len(fields) > 1 and fields[-1] == "":
            fields.pop()
        numbers = [float(item) for item in fields]
        dataset.situations.append(
            [value_type(_round_half_away(number) if rounds else number) for number in numbers[:-1]]
        )
        dataset.actions.append(action_type(numbers[-1]))
    return dataset


def load_dataset(path, value_type=int, action_type=int, rounds=False) -> Dataset:
    """Read a dataset from a CSV file."""
    with Path(path).open(encoding="utf-8") as stream:
        return read_dataset(stream, value_type, action_type, rounds)


def normalize(situations, minimum, maximum) -> list:
    """Scale every value so that ``minimum`` maps to 0 and ``maximum`` to 1."""
    if minimum == maximum:
        raise ValueError("minimum and maximum must differ")
    span = maximum - minimum
    return [[(value - minimum) / span for value in situation] for situation in situations]


def normalize_auto(situations):
    """Normalise to [0, 1] using the data's own range.

    Returns the normalised situations and the ``(minimum, maximum)`` used.
    """
    values = [value for situation in situations for value in situation]
    if not values:
        return [list(situation) for situation in situations], (0.0, 1.0)
    minimum, maximum = min(values), max(values)
    return normalize(situations, minimum, maximum), (minimum, maximum)


def denormalize(situations, minimum, maximum) -> list:
    """Undo :func:`normalize` for the given range."""
    if minimum == 0.0 and maximum == 1.0:
        return [list(situation) for situation in situations]
    span = maximum - minimum
    return [[value * span + minimum for value in situation] for situation in situations]