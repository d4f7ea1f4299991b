"""Text output of interval (real-valued) classifier populations."""

from __future__ import annotations

from typing import Any, Iterable, TextIO

from .rendering import Representation, format_number

_BAR_CELLS = 10

_CONDITION_COLUMNS = {
    Representation.CSR: "Condition[c;s]",
    Representation.UBR: "Condition[p;q]",
}

_TRAILING_COLUMNS = "Action,prediction,epsilon,F,exp,ts,as,n,acc"


def _cell(lower: float, upper: float, index: int) -> str:
    start = index / 10.0
    end = (index + 1) / 10.0
    if lower < start and end < upper:
        return "O"
    if start <= lower <= end or start <= upper <= end:
        return "o"
    return "."


def interval_bar(condition: Iterable[Any], min_value: float, max_value: float) -> str:
    """Draw each interval of ``condition`` as a ten-cell bar over [min_value, max_value].

    A fully covered cell is ``O``, a cell holding a bound is ``o`` and any
    other cell is ``.``; bars are separated and closed by ``|``.
    """
    if min_value == max_value:
        raise ValueError("min_value and max_value must differ")
    span = max_value - min_value
    parts = []
    for symbol in condition:
        lower = (symbol.lower() - min_value) / span
        upper = (symbol.upper() - min_value) / span
        parts.append("|" + "".join(_cell(lower, upper, index) for index in range(_BAR_CELLS)))
    return "".join(parts) + "|"


def _row(classifier, min_value: float, max_value: float) -> str:
    fields = (
        interval_bar(classifier.condition, min_value, max_value),
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


def dump_interval_population(
    classifiers: Iterable[Any],
    constants,
    stream: TextIO,
    representation=Representation.CSR,
) -> None:
    """Write a header and one CSV row per interval classifier, led by its bar graphic."""
    representation = Representation(representation)
    try:
        condition_column = _CONDITION_COLUMNS[representation]
    except KeyError:
        raise ValueError(f"no population dump for representation {representation.name}") from None

    min_value = constants.min_value
    max_value = constants.max_value
    stream.write(
        f"Condition[{format_number(min_value)}-{format_number(max_value)}],"
        f"{condition_column},{_TRAILING_COLUMNS}\n"
    )
    for classifier in classifiers:
        stream.write(_row(classifier, min_value, max_value) + "\n")


def switch_interval_to_condensation_mode(constants) -> None:
    """Turn off crossover, mutation and subsumption tolerance for rule condensation."""
    constants.chi = 0.0
    constants.mu = 0.0
    constants.subsumption_tolerance = 0.0