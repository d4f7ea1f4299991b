"""Genetic operators and covering for real-valued interval classifiers.

Two interval encodings are supported: center/spread symbols
(:class:`~xxrlcs.symbols.CenterSpreadSymbol`) and unordered-bound symbols
(:class:`~xxrlcs.symbols.UnorderedBoundSymbol`). Crossover works on the
symbol attributes named in ``fields`` (``("center", "spread")`` or
``("p", "q")``), so one implementation serves both encodings.

Mutation reads ``mu`` and ``do_action_mutation`` from the constants in
addition to the interval settings of :class:`IntervalConstants`.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from .conditions import IntervalCondition
from .symbols import CenterSpreadSymbol, UnorderedBoundSymbol

CENTER_SPREAD_FIELDS = ("center", "spread")
BOUND_FIELDS = ("p", "q")


@dataclass
class IntervalConstants:
    """Settings specific to interval (real-valued) classifier systems."""

    min_value: float = 0.0
    max_value: float = 1.0
    # s_0: the largest spread the covering operator creates
    covering_max_spread: float = 1.0
    # m: the largest change of a center, spread or bound in mutation
    mutation_max_change: float = 0.1
    # Tol_sub: tolerance on the bounds in subsumption
    subsumption_tolerance: float = 0.0
    # Keep conditions within [min_value, max_value]
    do_range_restriction: bool = True
    # Clip the covering range to [min_value, max_value] before drawing bounds
    do_covering_random_range_truncation: bool = False


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def _choose(actions: Iterable[Any], rng: random.Random):
    pool = list(actions)
    if not pool:
        raise ValueError("no actions to choose from")
    try:
        pool.sort()
    except TypeError:
        pass
    return rng.choice(pool)


def _check_lengths(condition1, condition2) -> None:
    if len(condition1) != len(condition2):
        raise ValueError(
            f"conditions differ in length ({len(condition1)} and {len(condition2)})"
        )


def _swap(symbol1, symbol2, field: str) -> None:
    value1 = getattr(symbol1, field)
    setattr(symbol1, field, getattr(symbol2, field))
    setattr(symbol2, field, value1)


def _swap_gene(condition1, condition2, fields: Sequence[str], position: int) -> None:
    width = len(fields)
    _swap(condition1[position // width], condition2[position // width], fields[position % width])


def uniform_crossover(condition1, condition2, fields: Sequence[str], rng: random.Random | None = None) -> bool:
    """Swap each field of each symbol with probability 0.5; return whether anything was swapped."""
    _check_lengths(condition1, condition2)
    rng = _rng(rng)
    changed = False
    for symbol1, symbol2 in zip(condition1, condition2):
        for field in fields:
            if rng.random() < 0.5:
                _swap(symbol1, symbol2, field)
                changed = True
    return changed


def one_point_crossover(condition1, condition2, fields: Sequence[str], rng: random.Random | None = None) -> bool:
    """Swap every gene after a random cut point; return whether anything was swapped."""
    _check_lengths(condition1, condition2)
    rng = _rng(rng)
    gene_count = len(condition1) * len(fields)
    cut = rng.randint(0, gene_count)
    changed = False
    for position in range(cut + 1, gene_count):
        _swap_gene(condition1, condition2, fields, position)
        changed = True
    return changed


def two_point_crossover(condition1, condition2, fields: Sequence[str], rng: random.Random | None = None) -> bool:
    """Swap the genes strictly between two random cut points; return whether anything was swapped."""
    _check_lengths(condition1, condition2)
    rng = _rng(rng)
    gene_count = len(condition1) * len(fields)
    first = rng.randint(0, gene_count)
    second = rng.randint(0, gene_count)
    if first > second:
        first, second = second, first
    changed = False
    for position in range(first + 1, second):
        _swap_gene(condition1, condition2, fields, position)
        changed = True
    return changed


def _check_situation(classifier, situation: Sequence) -> None:
    if len(classifier.condition) != len(situation):
        raise ValueError(
            f"situation has {len(situation)} values, "
            f"condition has {len(classifier.condition)} symbols"
        )


def _mutate_action(classifier, constants, available_actions, rng: random.Random) -> None:
    actions = set(available_actions)
    if constants.do_action_mutation and rng.random() < constants.mu and len(actions) >= 2:
        actions.discard(classifier.action)
        classifier.action = _choose(actions, rng)


def _clamp(value: float, constants) -> float:
    return min(max(constants.min_value, value), constants.max_value)


def mutate_center_spread(classifier, situation: Sequence, constants, available_actions, rng: random.Random | None = None) -> None:
    """Mutate the centers and spreads of ``classifier`` and possibly its action."""
    _check_situation(classifier, situation)
    rng = _rng(rng)
    change = constants.mutation_max_change
    for symbol in classifier.condition:
        if rng.random() < constants.mu:
            if rng.random() < 0.5:
                symbol.center += rng.uniform(-change, change)
                symbol.center = _clamp(symbol.center, constants)
            else:
                symbol.spread += rng.uniform(-change, change)
                symbol.spread = max(0.0, symbol.spread)
    _mutate_action(classifier, constants, available_actions, rng)


def mutate_bounds(classifier, situation: Sequence, constants, available_actions, rng: random.Random | None = None) -> None:
    """Mutate the two bounds of each symbol of ``classifier`` and possibly its action."""
    _check_situation(classifier, situation)
    rng = _rng(rng)
    change = constants.mutation_max_change
    for symbol in classifier.condition:
        if rng.random() < constants.mu:
            if rng.random() < 0.5:
                symbol.p += rng.uniform(-change, change)
                if constants.do_range_restriction:
                    symbol.p = _clamp(symbol.p, constants)
            else:
                symbol.q += rng.uniform(-change, change)
                if constants.do_range_restriction:
                    symbol.q = _clamp(symbol.q, constants)
    _mutate_action(classifier, constants, available_actions, rng)


def cover_center_spread(situation: Sequence, unselected_actions, constants, rng: random.Random | None = None):
    """Return the condition and action of a center/spread classifier covering ``situation``."""
    rng = _rng(rng)
    symbols = [
        CenterSpreadSymbol(value, rng.uniform(0.0, constants.covering_max_spread))
        for value in situation
    ]
    return IntervalCondition(symbols), _choose(unselected_actions, rng)


def cover_bounds(situation: Sequence, unselected_actions, constants, rng: random.Random | None = None):
    """Return the condition and action of an unordered-bound classifier covering ``situation``."""
    rng = _rng(rng)
    symbols = []
    for value in situation:
        lower_min = value - constants.covering_max_spread
        upper_max = value + constants.covering_max_spread
        if constants.do_covering_random_range_truncation:
            lower_min = max(lower_min, constants.min_value)
            upper_max = min(upper_max, constants.max_value)

        lower = rng.uniform(lower_min, value)
        upper = rng.uniform(value, upper_max)
        if constants.do_range_restriction:
            lower = max(lower, constants.min_value)
            upper = min(upper, constants.max_value)

        if rng.random() < 0.5:
            symbols.append(UnorderedBoundSymbol(lower, upper))
        else:
            symbols.append(UnorderedBoundSymbol(upper, lower))
    return IntervalCondition(symbols), _choose(unselected_actions, rng)