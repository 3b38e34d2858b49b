"""Stock fitness functions.

Every function here has the `(items, start, end, context)` signature expected
by the partitioners and scores the half-open range `[start, end)`.
"""
import numpy as np

from fitpartition import get_prefix_sums


def unit_reward(items, start, end, context=None):
    """Zero for single-item partitions, increasingly negative for longer ones. Maximize."""
    return -(end - start - 1) ** 2


def squared_length(items, start, end, context=None):
    """Square of the partition length. Minimize."""
    return (end - start) ** 2


def constant(items, start, end, context=None):
    """The same score for every partition: `context`, or -1.0 if not given."""
    if context is None:
        return -1.0
    return context


def segment_cost(items, start, end, context=None):
    """
    Sum of squared deviations of the partition's items from their mean, plus a
    per-partition penalty taken from `context`. Minimize.

    With no penalty only runs of equal items share a partition; a positive
    penalty trades fit against the number of change points.
    """
    penalty = 0.0 if context is None else context
    if end <= start:
        return penalty
    segment = np.asarray(items[start:end], dtype=np.float64)
    return float(np.sum((segment - segment.mean()) ** 2)) + penalty


def make_sum_deviation(items, target=None):
    """
    Return a fitness function scoring `(sum(items[start:end]) - target) ** 2`.

    `target` defaults to the mean item, `sum(items) / len(items)`, or 0.0 for
    no items. The sums come from prefix sums computed once here, so each call
    is O(1) instead of O(end - start). The returned function ignores the items
    and context it is called with. Minimize.
    """
    prefix_sum = get_prefix_sums(items)
    if target is None:
        target = prefix_sum[-1] / len(items) if len(items) else 0.0

    def sum_deviation(items, start, end, context=None):
        return (prefix_sum[end] - prefix_sum[start] - target) ** 2

    return sum_deviation


# name -> (fitness function, minimize)
fitness_functions = {
    'unit_reward': (unit_reward, False),
    'squared_length': (squared_length, True),
    'constant': (constant, False),
    'segment_cost': (segment_cost, True),
}
