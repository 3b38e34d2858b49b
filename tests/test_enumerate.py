import pytest

from fitpartition.enumerate import EnumeratePartitioner
from fitpartition.fitness import segment_cost, unit_reward


def test_get_partitions():
    assert EnumeratePartitioner.get_partitions(0) == []
    assert EnumeratePartitioner.get_partitions(1) == [[0]]
    assert EnumeratePartitioner.get_partitions(3) == [[0], [0, 1], [0, 2], [0, 1, 2]]
    assert len(EnumeratePartitioner.get_partitions(7)) == 2 ** 6


def test_empty_items():
    assert list(EnumeratePartitioner.partition([], unit_reward)) == []


def test_partition():
    debug_info = {}
    boundaries = EnumeratePartitioner.partition([1, 1, 1, 9, 9, 9], segment_cost, minimize=True, context=1.0,
                                                debug_info=debug_info)
    assert list(boundaries) == [0, 3]
    assert len(debug_info['df']) == 2 ** 5
    assert debug_info['df'].score.min() == 2.0


def test_ties_prefer_fewest_partitions():
    boundaries = EnumeratePartitioner.partition([1, 2, 3, 4], lambda items, start, end, context: 0.0)
    assert list(boundaries) == [0]


def test_too_many_items():
    with pytest.raises(ValueError):
        EnumeratePartitioner.partition(list(range(EnumeratePartitioner.max_items + 1)), unit_reward)


def test_nan_fitness():
    with pytest.raises(ValueError):
        EnumeratePartitioner.partition([1, 2], lambda items, start, end, context: float('nan'))


def test_invalid_fitness_fn():
    with pytest.raises(ValueError):
        EnumeratePartitioner.partition([1, 2], None)
