from math import isclose

import pytest

from fitpartition import Partitioner
from fitpartition import fitness


def test_unit_reward():
    assert fitness.unit_reward(None, 2, 3) == 0
    assert fitness.unit_reward(None, 0, 3) == -4


def test_squared_length():
    assert fitness.squared_length(None, 1, 4) == 9


def test_constant():
    assert fitness.constant(None, 0, 5) == -1.0
    assert fitness.constant(None, 0, 5, 2.5) == 2.5


def test_segment_cost():
    assert isclose(fitness.segment_cost([1, 1, 4, 4], 0, 4), 9.0)
    assert isclose(fitness.segment_cost([1, 1, 4, 4], 0, 4, 0.5), 9.5)
    assert fitness.segment_cost([1, 1, 4, 4], 1, 2) == 0.0
    assert fitness.segment_cost([1, 1, 4, 4], 2, 2, 3.0) == 3.0


def test_segment_cost_finds_change_points():
    items = [1, 1, 1, 9, 9, 9, 4, 4]
    assert list(Partitioner.partition(items, fitness.segment_cost, minimize=True, context=1.0)) == [0, 3, 6]
    # Without a penalty only runs of equal items share a partition.
    assert list(Partitioner.partition(items, fitness.segment_cost, minimize=True)) == [0, 3, 6]
    assert list(Partitioner.partition([1, 2, 4], fitness.segment_cost, minimize=True)) == [0, 1, 2]


def test_make_sum_deviation():
    sum_deviation = fitness.make_sum_deviation([1, 2, 3, 4], 5)
    assert sum_deviation(None, 1, 3) == 0
    assert sum_deviation(None, 0, 4) == 25


def test_make_sum_deviation_default_target():
    sum_deviation = fitness.make_sum_deviation([1, 2, 3, 6])
    assert sum_deviation(None, 3, 4) == 9.0
    assert sum_deviation(None, 0, 2) == 0.0
    assert list(Partitioner.partition([1, 2, 3, 6], sum_deviation, minimize=True)) == [0, 2, 3]

    empty = fitness.make_sum_deviation([])
    assert list(Partitioner.partition([], empty, minimize=True)) == []


def test_sum_deviation_balances_sums():
    items = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    sum_deviation = fitness.make_sum_deviation(items, 15)
    assert list(Partitioner.partition(items, sum_deviation, minimize=True)) == [0, 5, 7]


@pytest.mark.parametrize("name", list(fitness.fitness_functions))
def test_fitness_functions(name):
    fitness_fn, minimize = fitness.fitness_functions[name]
    boundaries = Partitioner.partition([3, 1, 4, 1, 5], fitness_fn, minimize)
    assert boundaries[0] == 0
