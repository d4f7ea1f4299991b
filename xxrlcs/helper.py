"""Running experiments against environments and logging the results."""

from __future__ import annotations

import sys
from typing import Any, Callable, Hashable, Iterable, Protocol, Sequence, TextIO

from .logstream import LogStream, SmaLogStream
from .settings import ExperimentSettings


class ExperimentProtocol(Protocol):
    """What a learning classifier system offers to the helper."""

    def explore(self, situation: Sequence) -> Hashable: ...

    def reward(self, value: float, is_end_of_problem: bool = True) -> None: ...

    def exploit(self, situation: Sequence, update: bool = False) -> Hashable: ...

    def load_population_csv(self, filename: str, use_as_initial_population: bool = True) -> None: ...

    def dump_population(self, stream: TextIO) -> None: ...

    def population_size(self) -> int: ...

    def numerosity_sum(self) -> int: ...

    def switch_to_condensation_mode(self) -> None: ...


class EnvironmentProtocol(Protocol):
    """A problem that presents situations and rewards actions."""

    available_actions: Any

    def situation(self) -> Sequence: ...

    def execute_action(self, action: Hashable) -> float: ...

    def is_end_of_problem(self) -> bool: ...


def _ignore(environment: Any) -> None:
    return None


class ExperimentHelper:
    """Runs one experiment per seed and writes averaged reward, size and step logs."""

    def __init__(
        self,
        settings: ExperimentSettings,
        experiment_factory: Callable[[Any], ExperimentProtocol],
        exploration_environments: Iterable[EnvironmentProtocol],
        exploitation_environments: Iterable[EnvironmentProtocol],
        exploration_callback: Callable[[Any], None] | None = None,
        exploitation_callback: Callable[[Any], None] | None = None,
    ):
        self._settings = settings
        self._exploration_environments = list(exploration_environments)
        self._exploitation_environments = list(exploitation_environments)
        seeds = settings.seed_count
        if len(self._exploration_environments) < seeds:
            raise ValueError("fewer exploration environments than seeds")
        if len(self._exploitation_environments) < seeds:
            raise ValueError("fewer exploitation environments than seeds")

        available_actions = self._exploration_environments[0].available_actions
        self._experiments = [experiment_factory(available_actions) for _ in range(seeds)]
        self._exploration_callback = exploration_callback or _ignore
        self._exploitation_callback = exploitation_callback or _ignore

        if settings.input_classifier_filename:
            for experiment in self._experiments:
                experiment.load_population_csv(
                    settings.input_classifier_filename,
                    not settings.use_input_classifier_to_resume,
                )

        self._reward_log = SmaLogStream(settings.reward_log_path, settings.sma_width)
        self._step_count_log = SmaLogStream(settings.step_count_log_path, settings.sma_width, False)
        self._population_size_log = LogStream(settings.population_size_log_path, False)

        self._summary_reward_sum = 0.0
        self._summary_population_size_sum = 0.0
        self._summary_step_count_sum = 0.0
        self._iteration_count = 0

    def _pairs(self, environments):
        return zip(self._experiments, environments)

    def _run_exploitation(self) -> None:
        settings = self._settings
        per_run = settings.exploitation_count * settings.seed_count
        total_step_count = 0
        reward_sum = 0.0
        population_size_sum = 0.0

        for experiment, environment in self._pairs(self._exploitation_environments):
            for _ in range(settings.exploitation_count):
                while True:
                    action = experiment.exploit(environment.situation(), settings.update_in_exploitation)
                    reward = environment.execute_action(action)
                    self._summary_reward_sum += reward / per_run
                    if settings.update_in_exploitation:
                        experiment.reward(reward, environment.is_end_of_problem())
                    reward_sum += reward
                    total_step_count += 1
                    self._exploitation_callback(environment)
                    if environment.is_end_of_problem():
                        break
                population_size_sum += experiment.population_size()
            self._summary_population_size_sum += experiment.population_size() / settings.seed_count

        self._summary_step_count_sum += total_step_count / per_run

        interval = settings.summary_interval
        if interval > 0 and (self._iteration_count + 1) % interval == 0:
            sys.stdout.write(
                f"{self._iteration_count + 1:9d} "
                f"{self._summary_reward_sum / interval:11.3f} "
                f"{self._summary_population_size_sum / interval:10.3f} "
                f"{self._summary_step_count_sum / interval:8.3f}\n"
            )
            sys.stdout.flush()
            self._summary_reward_sum = 0.0
            self._summary_population_size_sum = 0.0
            self._summary_step_count_sum = 0.0

        self._reward_log.write_line(reward_sum / per_run)
        self._population_size_log.write_line(population_size_sum / per_run)
        self._step_count_log.write_line(total_step_count / per_run)

    def _run_exploration(self) -> None:
        for experiment, environment in self._pairs(self._exploration_environments):
            for _ in range(self._settings.exploration_count):
                while True:
                    action = experiment.explore(environment.situation())
                    reward = environment.execute_action(action)
                    experiment.reward(reward, environment.is_end_of_problem())
                    self._exploration_callback(environment)
                    if environment.is_end_of_problem():
                        break

    def run_iteration(self, repeat: int = 1) -> None:
        """Run ``repeat`` iterations of exploitation followed by exploration."""
        for _ in range(repeat):
            if self._settings.exploitation_count > 0:
                self._run_exploitation()
            self._run_exploration()
            self._iteration_count += 1

    def switch_to_condensation_mode(self) -> None:
        for experiment in self._experiments:
            experiment.switch_to_condensation_mode()

    def dump_population(self, seed_index: int, stream: TextIO) -> None:
        self._experiments[seed_index].dump_population(stream)

    def seed_count(self) -> int:
        return self._settings.seed_count

    def experiment_at(self, seed_index: int) -> ExperimentProtocol:
        return self._experiments[seed_index]

    def exploration_environment_at(self, seed_index: int) -> EnvironmentProtocol:
        return self._exploration_environments[seed_index]

    def exploitation_environment_at(self, seed_index: int) -> EnvironmentProtocol:
        return self._exploitation_environments[seed_index]

    def close(self) -> None:
        """Close the log files."""
        self._reward_log.close()
        self._step_count_log.close()
        self._population_size_log.close()

    def __enter__(self) -> "ExperimentHelper":
        return self

    def __exit__(self, *args) -> None:
        self.close()