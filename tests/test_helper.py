import io

import pytest

from xxrlcs.helper import ExperimentHelper
from xxrlcs.settings import ExperimentSettings


class FakeEnvironment:
    def __init__(self, steps_per_problem=1, good_action=1, reward_value=1000.0):
        self.available_actions = {0, 1}
        self.steps_per_problem = steps_per_problem
        self.good_action = good_action
        self.reward_value = reward_value
        self.step = 0
        self.executed = []

    def situation(self):
        return [self.step % 2]

    def execute_action(self, action):
        self.executed.append(action)
        self.step += 1
        return self.reward_value if action == self.good_action else 0.0

    def is_end_of_problem(self):
        return self.step % self.steps_per_problem == 0


class FakeExperiment:
    def __init__(self, available_actions, action=1, size=3):
        self.available_actions = available_actions
        self.action = action
        self.size = size
        self.explored = 0
        self.exploited = []
        self.rewards = []
        self.loaded = []
        self.condensed = False

    def explore(self, situation):
        self.explored += 1
        return self.action

    def reward(self, value, is_end_of_problem=True):
        self.rewards.append((value, is_end_of_problem))

    def exploit(self, situation, update=False):
        self.exploited.append(update)
        return self.action

    def load_population_csv(self, filename, use_as_initial_population=True):
        self.loaded.append((filename, use_as_initial_population))

    def dump_population(self, stream):
        stream.write(f"population of {self.size}\n")

    def population_size(self):
        return self.size

    def numerosity_sum(self):
        return self.size

    def switch_to_condensation_mode(self):
        self.condensed = True


def make_settings(tmp_path, **overrides):
    values = dict(
        output_filename_prefix=str(tmp_path) + "/",
        output_step_count_filename="steps.csv",
        summary_interval=0,
    )
    values.update(overrides)
    return ExperimentSettings(**values)


def make_helper(tmp_path, steps=1, seeds=1, **overrides):
    settings = make_settings(tmp_path, seed_count=seeds, **overrides)
    return ExperimentHelper(
        settings,
        FakeExperiment,
        [FakeEnvironment(steps) for _ in range(seeds)],
        [FakeEnvironment(steps) for _ in range(seeds)],
    )


def read_lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def test_logs_are_written_each_iteration(tmp_path):
    with make_helper(tmp_path) as helper:
        helper.run_iteration(2)
    assert read_lines(tmp_path / "reward.csv") == ["1000", "1000"]
    assert read_lines(tmp_path / "num.csv") == ["3", "3"]
    assert read_lines(tmp_path / "steps.csv") == ["1", "1"]


def test_multi_step_problem_counts_steps(tmp_path):
    with make_helper(tmp_path, steps=3) as helper:
        helper.run_iteration(1)
        environment = helper.exploitation_environment_at(0)
        assert len(environment.executed) == 3
    assert read_lines(tmp_path / "steps.csv") == ["3"]


def test_exploration_rewards_experiment(tmp_path):
    with make_helper(tmp_path, steps=2, exploration_count=2) as helper:
        helper.run_iteration(3)
        experiment = helper.experiment_at(0)
    assert experiment.explored == 3 * 2 * 2
    assert [end for _, end in experiment.rewards] == [False, True] * 6


def test_exploitation_without_update_does_not_reward(tmp_path):
    with make_helper(tmp_path, exploration_count=0) as helper:
        helper.run_iteration(4)
        experiment = helper.experiment_at(0)
    assert experiment.rewards == []
    assert experiment.exploited == [False] * 4


def test_exploitation_with_update_rewards(tmp_path):
    with make_helper(tmp_path, exploration_count=0, update_in_exploitation=True) as helper:
        helper.run_iteration(2)
        experiment = helper.experiment_at(0)
    assert experiment.exploited == [True, True]
    assert len(experiment.rewards) == 2


def test_zero_exploitation_writes_no_log(tmp_path):
    with make_helper(tmp_path, exploitation_count=0) as helper:
        helper.run_iteration(3)
        assert helper.experiment_at(0).exploited == []
    assert read_lines(tmp_path / "reward.csv") == []


def test_summary_line_is_printed(tmp_path, capsys):
    with make_helper(tmp_path, summary_interval=2) as helper:
        helper.run_iteration(4)
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == ["2", "4"]
    assert lines[0].split()[1:] == ["1000.000", "3.000", "1.000"]


def test_every_seed_gets_an_experiment(tmp_path):
    with make_helper(tmp_path, seeds=3) as helper:
        helper.run_iteration(1)
        assert helper.seed_count() == 3
        experiments = [helper.experiment_at(index) for index in range(3)]
        assert len({id(experiment) for experiment in experiments}) == 3
        assert all(experiment.explored == 1 for experiment in experiments)
        assert all(experiment.available_actions == {0, 1} for experiment in experiments)


def test_too_few_environments_is_an_error(tmp_path):
    settings = make_settings(tmp_path, seed_count=2)
    with pytest.raises(ValueError):
        ExperimentHelper(settings, FakeExperiment, [FakeEnvironment()], [FakeEnvironment()] * 2)


def test_input_classifiers_are_loaded(tmp_path):
    with make_helper(tmp_path, seeds=2, input_classifier_filename="pop.csv",
                     use_input_classifier_to_resume=False) as helper:
        loads = [helper.experiment_at(index).loaded for index in range(2)]
    assert loads == [[("pop.csv", True)], [("pop.csv", True)]]


def test_resume_keeps_classifier_parameters(tmp_path):
    with make_helper(tmp_path, input_classifier_filename="pop.csv") as helper:
        assert helper.experiment_at(0).loaded == [("pop.csv", False)]


def test_callbacks_receive_environments(tmp_path):
    explored, exploited = [], []
    settings = make_settings(tmp_path)
    exploration_environment = FakeEnvironment(2)
    exploitation_environment = FakeEnvironment(2)
    with ExperimentHelper(
        settings,
        FakeExperiment,
        [exploration_environment],
        [exploitation_environment],
        explored.append,
        exploited.append,
    ) as helper:
        helper.run_iteration(1)
    assert explored == [exploration_environment] * 2
    assert exploited == [exploitation_environment] * 2


def test_condensation_mode_reaches_every_experiment(tmp_path):
    with make_helper(tmp_path, seeds=2) as helper:
        helper.switch_to_condensation_mode()
        assert all(helper.experiment_at(index).condensed for index in range(2))


def test_dump_population_writes_to_stream(tmp_path):
    stream = io.StringIO()
    with make_helper(tmp_path) as helper:
        helper.dump_population(0, stream)
    assert stream.getvalue() == "population of 3\n"


def test_bad_seed_index_raises(tmp_path):
    with make_helper(tmp_path) as helper:
        with pytest.raises(IndexError):
            helper.experiment_at(5)
        with pytest.raises(IndexError):
            helper.exploration_environment_at(1)