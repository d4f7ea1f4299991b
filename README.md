# xxrlcs

Building blocks for learning classifier systems. It covers the ternary-condition
XCS and the real-valued XCSR with center/spread and unordered-bound interval
conditions. It also has a runner that drives experiments against environments
and writes averaged logs.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `xxrlcs.symbols`
  - `TernarySymbol` holds a value or the don't-care `#`. Build one with
    `TernarySymbol.from_char`.
  - `CenterSpreadSymbol` and `UnorderedBoundSymbol` are intervals. Each has
    `lower()` and `upper()` and matches values in `[lower, upper)`.
- `xxrlcs.conditions`
  - `Condition` is a sequence of symbols. `Condition.from_string("01#")` parses
    a ternary string. The class has `matches`, `set_dont_care_at_random` and
    `dont_care_count`.
  - `IntervalCondition.from_string` parses space-separated `a;b` pairs into
    interval symbols. Its don't-care methods raise `TypeError`.
- `xxrlcs.dataset`
  - `read_dataset` and `load_dataset` read CSV rows into a `Dataset`. The last
    column of each row is the action. Reading stops at the first empty line.
  - `normalize`, `normalize_auto` and `denormalize` return rescaled copies of
    situations.
- `xxrlcs.sets`
  - `ClassifierSet` is an insertion-ordered set that compares classifiers by
    identity.
  - `Population` adds deletion voting, `insert_or_increment_numerosity` and
    roulette-wheel `delete_extra_classifiers`.
  - `ActionSet` provides `regenerate`, `update` (with optional MAM), fitness
    update, action-set subsumption, and the time-stamp test that decides
    whether to call `ga.run(action_set, situation, population)`.
  - `IntervalActionSet` does subsumption within `subsumption_tolerance`.
- `xxrlcs.operators`
  - `IntervalConstants` holds the XCSR settings.
  - Crossover: `uniform_crossover`, `one_point_crossover` and
    `two_point_crossover`. They work on the symbol fields you name, for
    example `("center", "spread")` or `("p", "q")`.
  - Mutation: `mutate_center_spread` and `mutate_bounds`.
  - Covering: `cover_center_spread` and `cover_bounds`. Each returns a
    condition and an action.
- `xxrlcs.rendering`
  - `dump_population` writes a population as CSV. `format_number` formats the
    numeric fields.
  - `switch_to_condensation_mode` sets `chi` and `mu` to zero.
  - `Representation` lists the interval encodings: CSR, OBR and UBR.
- `xxrlcs.interval_rendering`
  - `interval_bar` draws each interval as a ten-cell bar.
  - `dump_interval_population` writes CSR or UBR populations with that bar
    first. For OBR it raises `ValueError`.
  - `switch_interval_to_condensation_mode` also zeroes
    `subsumption_tolerance`.
- `xxrlcs.smoothing`: `SimpleMovingAverage`.
- `xxrlcs.logstream`
  - `LogStream` writes to a file. With no filename it writes to stdout or
    nowhere.
  - `SmaLogStream` writes moving averages. It writes nothing until the window
    has filled.
- `xxrlcs.settings`: `ExperimentSettings`.
- `xxrlcs.helper`
  - `ExperimentHelper` runs one experiment per seed.
  - Each iteration does the exploitation episodes first, then the exploration
    episodes.
  - It writes reward, population-size and step-count logs.
  - Every `summary_interval` iterations it prints a summary line.
  - Experiments and environments follow `ExperimentProtocol` and
    `EnvironmentProtocol`. You pass a factory that builds an experiment from
    the environment's `available_actions`.

## Examples

```python
from xxrlcs.conditions import Condition

condition = Condition.from_string("1#0")
print(condition.matches([1, 0, 0]))  # True
print(condition.dont_care_count())   # 1
```

```python
from xxrlcs.smoothing import SimpleMovingAverage

sma = SimpleMovingAverage(3)
print([sma(v) for v in (1.0, 2.0, 3.0, 4.0)])  # [1.0, 1.5, 2.0, 3.0]
```

## What this package does not do

These are components, not a finished learning system. The package does not
include:

- a classifier class (with `accuracy`, `is_subsumer`, `is_more_general`);
- a match set or prediction array;
- a genetic-algorithm driver that selects parents and applies the operators;
- an experiment class tying these together;
- any problem environments, such as multiplexer or maze problems;
- a command-line program.

To run `ExperimentHelper`, you supply the experiments (through the factory) and
the environments yourself.