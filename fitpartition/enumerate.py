import itertools

import numpy as np
import pandas as pd

from fitpartition import Partitioner, get_partition_scores, partitioner


class EnumeratePartitioner(Partitioner):
    """Brute-force partitioner.

    Scores every possible partitioning and keeps the best one. It will not
    complete in a reasonable amount of time for more than a dozen or so items,
    and is intended to test the correctness of other partitioners.
    It is written for clarity rather than performance.
    """
    name = 'enumerate'
    max_items = 16

    @classmethod
    def get_partitions(cls, num_items):
        """
        Given a number of items, return all possible lists of partition start
        indices, ordered by number of partitions and then lexicographically.
        """
        partitions = []
        if num_items == 0:
            return partitions
        for num_dividers in range(0, num_items):
            for dividers in itertools.combinations(range(1, num_items),
                                                   num_dividers):
                partitions.append([0] + list(dividers))
        return partitions

    @classmethod
    @partitioner
    def partition(cls, items, fitness_fn, minimize=False, context=None,
                  debug_info=None):
        num_items = len(items)
        if num_items > cls.max_items:
            raise ValueError(f"Refusing to enumerate {2 ** (num_items - 1)} "
                             f"partitionings of {num_items} items")
        if num_items == 0:
            return np.zeros((0,), dtype=np.int64)

        df = pd.DataFrame(pd.Series(cls.get_partitions(num_items),
                                    name='boundaries'))
        df['score'] = df['boundaries'].apply(
            lambda b: sum(get_partition_scores(b, items, fitness_fn, context)))
        if df.score.isna().any():
            raise ValueError("fitness_fn returned NaN")
        best = df.score.min() if minimize else df.score.max()
        boundaries = df[df.score == best].iloc[0]['boundaries']
        if debug_info is not None:
            debug_info['df'] = df
        return np.array(boundaries, dtype=np.int64)
