"""Text output of classifier populations and related system-wide switches."""

from __future__ import annotations

import enum
import math
from typing import Any, Iterable, TextIO

POPULATION_HEADER = "Condition,Action,prediction,epsilon,F,exp,ts,as,n,acc"


class Representation(enum.Enum):
    """Encodings of real-valued conditions in interval classifier systems."""

    CSR = "csr"  # center and spread
    OBR = "obr"  # ordered lower and upper bound
    UBR = "ubr"  # unordered bounds


def format_number(value: Any) -> str:
    """Format a value the way numbers appear in population dumps.

    Integers and booleans are written as integers; floating-point numbers use
    six significant digits with trailing zeros removed.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "-nan" if math.copysign(1.0, value) < 0 else "nan"
        return format(value, "g")
    return str(value)


def _row(classifier) -> str:
    fields = (
        str(classifier.condition),
        format_number(classifier.action),
        format_number(classifier.prediction),
        format_number(classifier.epsilon),
        format_number(classifier.fitness),
        format_number(classifier.experience),
        format_number(classifier.time_stamp),
        format_number(classifier.action_set_size),
        format_number(classifier.numerosity),
        format_number(classifier.accuracy()),
    )
    return ",".join(fields)


def dump_population(classifiers: Iterable[Any], stream: TextIO) -> None:
    """Write a header and one CSV row per classifier to ``stream``."""
    stream.write(POPULATION_HEADER + "\n")
    for classifier in classifiers:
        stream.write(_row(classifier) + "\n")


def switch_to_condensation_mode(constants) -> None:
    """Turn off crossover and mutation for rule condensation."""
    constants.chi = 0.0
    constants.mu = 0.0