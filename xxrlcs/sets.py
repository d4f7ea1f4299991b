"""Classifier sets: the population [P] and action sets [A].

Classifiers are held by identity, so two classifiers with equal fields are
still distinct members. A classifier is expected to expose ``condition``,
``action``, ``prediction``, ``epsilon``, ``fitness``, ``experience``,
``time_stamp``, ``action_set_size`` and ``numerosity`` attributes together
with ``accuracy()``, ``is_subsumer()`` and ``is_more_general(other)``
methods. Constants are read by attribute: ``n``, ``beta``, ``theta_del``,
``delta``, ``theta_ga``, ``use_mam``, ``do_action_set_subsumption`` and,
for interval classifiers, ``subsumption_tolerance``.
"""

from __future__ import annotations

import random
from typing import Any, Iterable, Iterator, Sequence


def _roulette_wheel_selection(weights: Sequence[float], rng: random.Random) -> int:
    """Pick an index with probability proportional to its weight."""
    if not weights:
        raise ValueError("cannot select from no weights")
    total = sum(weights)
    if total <= 0:
        return rng.randrange(len(weights))
    point = rng.random() * total
    cumulative = 0.0
    for index, weight in enumerate(weights):
        cumulative += weight
        if point < cumulative:
            return index
    return len(weights) - 1


class ClassifierSet:
    """A set of classifiers compared by identity, kept in insertion order."""

    def __init__(self, classifiers: Iterable[Any] = ()):
        self._members: dict[int, Any] = {}
        for classifier in classifiers:
            self.add(classifier)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._members.values()))

    def __contains__(self, classifier) -> bool:
        return id(classifier) in self._members

    def __bool__(self) -> bool:
        return bool(self._members)

    def add(self, classifier) -> None:
        self._members.setdefault(id(classifier), classifier)

    def discard(self, classifier) -> None:
        self._members.pop(id(classifier), None)

    def clear(self) -> None:
        self._members.clear()

    def numerosity_sum(self) -> int:
        return sum(classifier.numerosity for classifier in self._members.values())


class Population(ClassifierSet):
    """The population [P] of all classifiers in the system."""

    def __init__(self, constants, classifiers: Iterable[Any] = ()):
        super().__init__(classifiers)
        self.constants = constants

    def deletion_vote(self, classifier, average_fitness: float) -> float:
        """The weight with which ``classifier`` is chosen for deletion."""
        vote = classifier.action_set_size * classifier.numerosity
        micro_fitness = classifier.fitness / classifier.numerosity
        if (
            classifier.experience >= self.constants.theta_del
            and micro_fitness < self.constants.delta * average_fitness
        ):
            vote *= average_fitness / micro_fitness
        return vote

    def insert_or_increment_numerosity(self, classifier) -> None:
        """Add ``classifier`` or, if an identical rule exists, raise its numerosity."""
        for member in self._members.values():
            if member.condition == classifier.condition and member.action == classifier.action:
                member.numerosity += 1
                return
        self.add(classifier)

    def delete_extra_classifiers(self, rng: random.Random | None = None) -> bool:
        """Delete one micro-classifier if the population is over its limit.

        Returns whether the population is still over the limit afterwards.
        """
        rng = rng or random.Random()
        members = list(self._members.values())
        numerosity_sum = sum(member.numerosity for member in members)
        if numerosity_sum <= self.constants.n:
            return False

        fitness_sum = sum(member.fitness for member in members)
        average_fitness = fitness_sum / numerosity_sum
        votes = [self.deletion_vote(member, average_fitness) for member in members]
        selected = members[_roulette_wheel_selection(votes, rng)]

        if selected.numerosity > 1:
            selected.numerosity -= 1
        else:
            self.discard(selected)

        return numerosity_sum - 1 > self.constants.n


class ActionSet(ClassifierSet):
    """An action set [A]: the classifiers of a match set advocating one action."""

    def __init__(self, constants, ga=None, classifiers: Iterable[Any] = ()):
        super().__init__(classifiers)
        self.constants = constants
        self.ga = ga

    def regenerate(self, match_set: Iterable[Any], action) -> None:
        """Refill the set with the members of ``match_set`` that propose ``action``."""
        self.clear()
        for classifier in match_set:
            if classifier.action == action:
                self.add(classifier)

    def copy_to(self, dest: "ActionSet") -> None:
        """Make ``dest`` hold the same classifiers; its GA and constants are kept."""
        dest._members = dict(self._members)

    def run_ga(self, situation: Sequence, population: Population, time_stamp: int) -> None:
        """Run the GA on this set if enough time has passed since the last run."""
        numerosity_sum = float(self.numerosity_sum())
        if numerosity_sum <= 0:
            raise ValueError("cannot run the GA on an empty action set")

        average_time_stamp = sum(
            classifier.time_stamp / numerosity_sum * classifier.numerosity
            for classifier in self._members.values()
        )

        if time_stamp - average_time_stamp >= self.constants.theta_ga:
            for classifier in self._members.values():
                classifier.time_stamp = time_stamp
            if self.ga is None:
                raise RuntimeError("action set has no genetic algorithm")
            self.ga.run(self, situation, population)

    def update(self, payoff: float, population: Population) -> None:
        """Update predictions, errors, set-size estimates and fitness towards ``payoff``."""
        constants = self.constants
        beta = constants.beta
        numerosity_sum = self.numerosity_sum()

        for classifier in self._members.values():
            classifier.experience += 1
            experience = classifier.experience

            if constants.use_mam and experience < 1.0 / beta:
                classifier.epsilon += (abs(payoff - classifier.prediction) - classifier.epsilon) / experience
                classifier.prediction += (payoff - classifier.prediction) / experience
            else:
                classifier.epsilon += beta * (abs(payoff - classifier.prediction) - classifier.epsilon)
                classifier.prediction += beta * (payoff - classifier.prediction)

            if experience < 1.0 / beta:
                classifier.action_set_size += (numerosity_sum - classifier.action_set_size) / experience
            else:
                classifier.action_set_size += beta * (numerosity_sum - classifier.action_set_size)

        self.update_fitness()

        if constants.do_action_set_subsumption:
            self.do_subsumption(population)

    def update_fitness(self) -> None:
        """Move each fitness towards the classifier's relative accuracy."""
        members = list(self._members.values())
        accuracies = [classifier.accuracy() for classifier in members]
        accuracy_sum = sum(
            accuracy * classifier.numerosity for accuracy, classifier in zip(accuracies, members)
        )
        for accuracy, classifier in zip(accuracies, members):
            relative = accuracy * classifier.numerosity / accuracy_sum
            classifier.fitness += self.constants.beta * (relative - classifier.fitness)

    def _is_more_general(self, general, specific) -> bool:
        return general.is_more_general(specific)

    def do_subsumption(self, population: Population) -> None:
        """Let the most general subsumer absorb the classifiers it covers."""
        subsumer = None
        for classifier in self._members.values():
            if classifier.is_subsumer() and (
                subsumer is None or self._is_more_general(classifier, subsumer)
            ):
                subsumer = classifier

        if subsumer is None:
            return

        removed = [
            classifier
            for classifier in self._members.values()
            if self._is_more_general(subsumer, classifier)
        ]
        for classifier in removed:
            subsumer.numerosity += classifier.numerosity
        for classifier in removed:
            population.discard(classifier)
            self.discard(classifier)


class IntervalActionSet(ActionSet):
    """An action set whose generality test allows a subsumption tolerance."""

    def _is_more_general(self, general, specific) -> bool:
        return general.is_more_general(specific, self.constants.subsumption_tolerance)

    def do_subsumption(self, population: Population) -> None:
        """Subsume as :class:`ActionSet` does, within ``subsumption_tolerance``."""
        super().do_subsumption(population)