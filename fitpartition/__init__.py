"""Optimal partitioning of ordered sequences under an additive fitness score.

The fitpartition package implements the dynamic programming solution to the
optimal partition of a line: given an ordered sequence of N items and a fitness
function scoring any contiguous range `[start, end)`, find the split of the
sequence into contiguous partitions whose summed fitness is maximal (or
minimal). The search is exact and runs in O(N^2) fitness evaluations.
"""
import functools
import logging
import math
import operator

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def partitioner(partition_func):
    """
    Decorates partition methods and ensures that parameters are valid.

    Args:
        partition_func (function): classmethod body to decorate.

    Returns:
        A wrapped version of partition_func that validates input.
    """
    @functools.wraps(partition_func)
    def checked_partitioner(cls, items, fitness_fn, minimize=False,
                            context=None, debug_info=None):
        try:
            len(items)
        except TypeError:
            raise ValueError("items must be a container")
        if fitness_fn is None or not callable(fitness_fn):
            raise ValueError("fitness_fn must be a callable")
        return partition_func(cls, items, fitness_fn, minimize, context,
                              debug_info)

    return checked_partitioner


class Partitioner(object):
    """Dynamic programming partitioner.

    Holds no state; every table is allocated per call, so a single class may
    be used from several threads at once as long as the items and the fitness
    function tolerate concurrent reads.
    """
    name = 'dynamic'

    @classmethod
    def _reconstruct_partition(cls, divider_location, num_items):
        if num_items == 0:
            return np.zeros((0,), dtype=np.int64)
        boundary = divider_location[num_items]
        boundaries = [boundary]
        while boundary > 0:
            boundary = divider_location[boundary]
            boundaries.append(boundary)
        boundaries.reverse()
        return np.array(boundaries, dtype=np.int64)

    @classmethod
    def _build_matrices(cls, items, fitness_fn, minimize, context):
        num_items = len(items)
        best_score = np.zeros((num_items + 1), dtype=np.float64)
        divider_location = np.zeros((num_items + 1), dtype=np.int64)
        if minimize:
            better, worst = operator.lt, np.inf
        else:
            better, worst = operator.gt, -np.inf
        for end in range(1, num_items + 1):
            best_score_temp = worst
            divider_location_temp = 0
            for start in range(0, end):
                score = fitness_fn(items, start, end, context)
                if math.isnan(score):
                    raise ValueError(
                        f"fitness_fn returned NaN for range [{start}, {end})")
                total = best_score[start] + score
                # Strict comparison keeps the earliest start on ties.
                if better(total, best_score_temp):
                    best_score_temp = total
                    divider_location_temp = start
            best_score[end] = best_score_temp
            divider_location[end] = divider_location_temp

        return best_score, divider_location

    @classmethod
    @partitioner
    def partition(cls, items, fitness_fn, minimize=False, context=None,
                  debug_info=None):
        """
        Find the partition start indices that optimize the summed fitness.

        Args:
            items (sequence): Ordered, finite, indexable items. Passed to
                fitness_fn unchanged; never copied.
            fitness_fn (callable): `fitness_fn(items, start, end, context)`
                returning the score of the half-open range `[start, end)`.
                It is called exactly N(N+1)/2 times, by increasing `end` and
                then increasing `start`. Returning NaN raises ValueError.
            minimize (bool): Minimize the total rather than maximize it.
            context: Opaque value forwarded to every fitness_fn call.
            debug_info (dict): If given, receives the items and the
                `best_score` and `divider_location` tables.

        Returns:
            NumPy int64 array of ascending partition start indices, starting
            with 0. The last partition ends at N. Empty when items is empty.
        """
        num_items = len(items)
        best_score, divider_location = cls._build_matrices(
            items, fitness_fn, minimize, context)

        if debug_info is not None:
            debug_info['items'] = items
            debug_info['best_score'] = best_score
            debug_info['divider_location'] = divider_location

        boundaries = cls._reconstruct_partition(divider_location, num_items)
        logger.debug("%s: %d items into %d partitions (%s), total %s",
                     cls.name, num_items, len(boundaries),
                     'minimize' if minimize else 'maximize',
                     best_score[num_items])
        return boundaries


partition = Partitioner.partition


def get_partitioner_dict(*partitioners):
    """
    Given a list of partitioner classes which have a `name` attribute,
    return a dictionary that maps `name` -> class.
    """
    partitioner_dict = {}
    for p in partitioners:
        if name := getattr(p, 'name', None):
            partitioner_dict[name] = p
    return partitioner_dict


def get_prefix_sums(items):
    """
    Given a list of item sizes, return a NumPy float64 array where the first item is 0.0 and subsequent items are the
    cumulative sum of the elements of the list.

    Args:
        items (iterable): A list of item sizes, integer or float.

    Returns:
        NumPy float64 array containing a [0]-prefixed cumulative sum.
    """
    prefix_sum = np.zeros((len(items) + 1), dtype=np.float64)
    prefix_sum[1:] = np.cumsum(items)
    return prefix_sum


def get_partition_ranges(boundaries, num_items):
    """
    Given partition start indices and the number of items, return the
    half-open `(start, end)` range of each partition.
    """
    ends = list(boundaries[1:]) + [num_items]
    return [(int(start), int(end)) for start, end in zip(boundaries, ends)]


def get_partition_scores(boundaries, items, fitness_fn, context=None):
    """
    Given partition start indices, return the fitness of each partition.
    """
    return [fitness_fn(items, start, end, context)
            for start, end in get_partition_ranges(boundaries, len(items))]


def bucket_generator(boundaries, num_items: int):
    """
    Iterate over a list of partition start indices to create a series of
    partition numbers for each item in the partitioned series.

    Args:
        boundaries (NumPy array): Ascending partition start indices, starting
            with 0.
        num_items (int): The number of items in the partitioned list.

    Returns:
        A generator yielding, for each item, the number of the partition it
        belongs to, starting with partition 1.

    Example:
        boundaries = [0, 12, 13, 18]  # Four partitions
        num_items = 20

        Yields [1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 3, 3, 3, 3, 3, 4, 4]
    """
    for bucket in range(1, len(boundaries) + 1):
        low_item = boundaries[bucket - 1]
        if bucket == len(boundaries):
            high_item = num_items
        else:
            high_item = boundaries[bucket]
        for item in range(low_item, high_item):
            yield bucket


def get_partition_series(sizes: pd.Series, fitness_fn, minimize=False,
                         context=None, partitioner_class=Partitioner):
    """
    Takes a Pandas Series and returns a Series assigning each row the number
    of the optimal partition it falls into.

    Args:
        sizes (Series): Ordered values to partition.
        fitness_fn (function): Fitness function over `[start, end)` ranges.
        minimize (bool): Minimize total fitness instead of maximizing it.
        context: Passed through to fitness_fn.
        partitioner_class: Class providing a `partition` classmethod.

    Returns:
        pandas.Series: Partition numbers starting at 1, indexed like sizes.
    """
    items = sizes.to_numpy()
    boundaries = partitioner_class.partition(items, fitness_fn, minimize,
                                             context)
    return pd.Series(list(bucket_generator(boundaries, len(items))),
                     index=sizes.index, dtype='int64')
