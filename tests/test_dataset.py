import pytest

from xxrlcs.dataset import (
    Dataset,
    denormalize,
    load_dataset,
    normalize,
    normalize_auto,
    read_dataset,
)


def test_read_dataset_splits_action_from_situation():
    dataset = read_dataset(["1,0,1\n", "0,1,0\n"])
    assert dataset == Dataset([[1, 0], [0, 1]], [1, 0])


def test_read_dataset_stops_at_empty_line():
    dataset = read_dataset(["1,1,0", "", "0,0,1"])
    assert dataset.situations == [[1, 1]]
    assert dataset.actions == [0]


def test_read_dataset_trailing_comma_is_ignored():
    dataset = read_dataset(["1,0,1,"])
    assert dataset.situations == [[1, 0]]
    assert dataset.actions == [1]


def test_read_dataset_float_values():
    dataset = read_dataset(["0.25,0.75,1"], value_type=float)
    assert dataset.situations == [[0.25, 0.75]]
    assert dataset.actions == [1]


def test_read_dataset_truncates_without_rounding():
    dataset = read_dataset(["2.7,1"])
    assert dataset.situations == [[2]]


def test_read_dataset_rounds_half_away_from_zero():
    dataset = read_dataset(["2.5,1"], rounds=True)
    assert dataset.situations == [[3]]


def test_read_dataset_boolean_values():
    dataset = read_dataset(["1,0,1"], value_type=bool)
    assert dataset.situations == [[True, False]]


def test_read_dataset_invalid_field_raises():
    with pytest.raises(ValueError):
        read_dataset(["1,x,0"])


def test_load_dataset_from_file(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("0,1,1\n1,1,0\n", encoding="utf-8")
    dataset = load_dataset(path)
    assert dataset.situations == [[0, 1], [1, 1]]
    assert dataset.actions == [1, 0]


def test_normalize_auto_spans_unit_interval():
    situations = [[2.0, 4.0], [6.0, 10.0]]
    normalized, (minimum, maximum) = normalize_auto(situations)
    assert (minimum, maximum) == (2.0, 10.0)
    flat = [value for row in normalized for value in row]
    assert min(flat) == 0.0
    assert max(flat) == 1.0
    assert situations == [[2.0, 4.0], [6.0, 10.0]]


def test_normalize_denormalize_round_trip():
    situations = [[2.0, 4.0], [6.0, 10.0]]
    normalized = normalize(situations, 2.0, 10.0)
    restored = denormalize(normalized, 2.0, 10.0)
    for row, original in zip(restored, situations):
        assert row == pytest.approx(original)


def test_normalize_equal_bounds_raises():
    with pytest.raises(ValueError):
        normalize([[1.0]], 1.0, 1.0)


def test_normalize_auto_constant_data_raises():
    with pytest.raises(ValueError):
        normalize_auto([[3.0, 3.0]])


def test_normalize_auto_empty():
    assert normalize_auto([]) == ([], (0.0, 1.0))


def test_denormalize_unit_range_is_identity():
    situations = [[0.1, 0.9]]
    assert denormalize(situations, 0.0, 1.0) == situations