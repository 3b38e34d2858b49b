"""Timing comparisons between partitioners.

Runs each registered partitioner over generated (or caller-supplied) items
with the stock fitness functions and collects the results in a DataFrame.
"""
import itertools
import logging
import time

import numpy as np
import pandas as pd

from fitpartition import Partitioner, get_partition_scores, get_partitioner_dict
from fitpartition.enumerate import EnumeratePartitioner
from fitpartition.fitness import fitness_functions

logger = logging.getLogger(__name__)

partitioners = get_partitioner_dict(
    Partitioner,
    EnumeratePartitioner,
)

report_columns = ('partitioner', 'num_items', 'fitness', 'iteration', 'score',
                  'elapsed_seconds', 'boundaries', 'items')


def _check_names(names, registry, kind):
    unknown = [name for name in names if name not in registry]
    if unknown:
        raise ValueError(f'Unknown {kind} {", ".join(unknown)}. '
                         f'Choose from {", ".join(registry)}')


def timed_partition(partitioner_class, items, fitness_fn, minimize=False):
    """
    Returns:
        The boundaries found by partitioner_class and the seconds it took.
    """
    started = time.perf_counter()
    boundaries = partitioner_class.partition(items, fitness_fn, minimize)
    return boundaries, time.perf_counter() - started


def benchmark(partitioner_list, item_list, fitness_list, iterations: int = 1,
              size_range=(1, 10), item_sizes=None, rng=None) -> pd.DataFrame:
    """
    Time partitioners on every combination of item count and fitness function.

    Args:
        partitioner_list (list): Names from `partitioners`.
        item_list (list): Numbers of items to partition.
        fitness_list (list): Names from `fitness.fitness_functions`.
        iterations (int): Repeats of each combination. Every partitioner sees
            the same items within an iteration.
        size_range (tuple): Inclusive bounds of random integer item sizes.
        item_sizes (sequence): Use the first `num_items` of these instead of
            random sizes.
        rng (numpy.random.Generator): Source of random sizes.

    Returns:
        DataFrame with one row per partitioner run and `report_columns`.
    """
    _check_names(partitioner_list, partitioners, 'partitioner')
    _check_names(fitness_list, fitness_functions, 'fitness function')
    if rng is None:
        rng = np.random.default_rng()
    low, high = size_range

    rows = []
    for num_items, fitness_name, iteration in itertools.product(
            item_list, fitness_list, range(1, iterations + 1)):
        fitness_fn, minimize = fitness_functions[fitness_name]
        if item_sizes is None:
            items = rng.integers(low, high + 1, size=num_items)
        else:
            items = np.asarray(item_sizes[:num_items])
        for name in partitioner_list:
            boundaries, elapsed = timed_partition(partitioners[name], items, fitness_fn, minimize)
            rows.append({
                'partitioner': name,
                'num_items': num_items,
                'fitness': fitness_name,
                'iteration': iteration,
                'score': sum(get_partition_scores(boundaries, items, fitness_fn)),
                'elapsed_seconds': elapsed,
                'boundaries': boundaries.tolist(),
                'items': items.tolist(),
            })
            logger.debug('%s: %d items, %s, iteration %d: %.6fs',
                         name, num_items, fitness_name, iteration, elapsed)
    return pd.DataFrame(rows, columns=report_columns)


def partitioner_pivot(df: pd.DataFrame, partitioner: str) -> pd.DataFrame:
    """
    Mean elapsed seconds for one partitioner, by number of items (rows) and
    fitness function (columns).
    """
    return pd.pivot_table(df[df.partitioner == partitioner], index='num_items',
                          columns='fitness', values='elapsed_seconds', aggfunc='mean')
