"""Settings for running repeated experiments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExperimentSettings:
    """How an experiment is run and where its logs are written."""

    # Number of independent runs (seeds) averaged in the logs
    seed_count: int = 1
    # Explorations performed in each iteration
    exploration_count: int = 1
    # Exploitations (test mode) performed in each iteration; 0 disables evaluation
    exploitation_count: int = 1
    # Whether classifier parameters are updated in test mode
    update_in_exploitation: bool = False
    # Iteration interval of the summary line on stdout; 0 disables it
    summary_interval: int = 5000
    output_filename_prefix: str = ""
    output_reward_filename: str = "reward.csv"
    output_population_size_filename: str = "num.csv"
    output_step_count_filename: str = ""
    # Classifier CSV to start from
    input_classifier_filename: str = ""
    # Keep the loaded classifiers' parameters instead of resetting them
    use_input_classifier_to_resume: bool = True
    # Width of the moving average applied to the reward log
    sma_width: int = 1

    def __post_init__(self) -> None:
        if self.seed_count < 1:
            raise ValueError("seed_count must be at least 1")
        if self.sma_width < 1:
            raise ValueError("sma_width must be at least 1")
        for name in ("exploration_count", "exploitation_count", "summary_interval"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    @property
    def reward_log_path(self) -> str:
        return self.output_filename_prefix + self.output_reward_filename

    @property
    def population_size_log_path(self) -> str:
        return self.output_filename_prefix + self.output_population_size_filename

    @property
    def step_count_log_path(self) -> str:
        return self.output_filename_prefix + self.output_step_count_filename