"""
Growth analysis -- measuring the doubling policy of GrowableSequence.

Every number here comes from driving a real GrowableSequence, not from a
closed-form model. Pushing n elements onto an empty sequence reallocates
ceil(log2(n)) + 1 times; each reallocation copies every live element, yet the
total copy count stays below 2n, which is what makes push_back amortized O(1).
"""

from typing import Dict, List

import numpy as np

from growable_sequence import GrowableSequence, GROWTH_FACTOR, MIN_NON_ZERO_CAPACITY


def capacity_trace(n_pushes: int) -> np.ndarray:
    """
    Capacity after each of `n_pushes` push_back calls on an empty sequence.

    Returns:
        Integer array of shape (n_pushes,).
    """
    if n_pushes < 0:
        raise ValueError(f"n_pushes must be non-negative, got {n_pushes}")
    seq = GrowableSequence()
    trace = np.zeros(n_pushes, dtype=np.int64)
    for i in range(n_pushes):
        seq.push_back(i)
        trace[i] = seq.capacity()
    return trace


def copy_trace(n_pushes: int) -> np.ndarray:
    """
    Elements copied by each push_back.

    A push that reallocates copies all live elements into the new buffer;
    any other push copies nothing.
    """
    if n_pushes < 0:
        raise ValueError(f"n_pushes must be non-negative, got {n_pushes}")
    seq = GrowableSequence()
    copies = np.zeros(n_pushes, dtype=np.int64)
    for i in range(n_pushes):
        before = seq.capacity()
        live = len(seq)
        seq.push_back(i)
        if seq.capacity() != before:
            copies[i] = live
    return copies


def amortized_copy_cost(n_pushes: int) -> np.ndarray:
    """Running mean of copies per push; bounded by GROWTH_FACTOR."""
    copies = copy_trace(n_pushes)
    if n_pushes == 0:
        return np.zeros(0, dtype=np.float64)
    return np.cumsum(copies) / np.arange(1, n_pushes + 1)


def growth_events(trace: np.ndarray) -> np.ndarray:
    """Indices at which the capacity in `trace` changed (index 0 counts if non-zero)."""
    trace = np.asarray(trace)
    if trace.size == 0:
        return np.zeros(0, dtype=np.int64)
    previous = np.concatenate(([0], trace[:-1]))
    return np.flatnonzero(trace != previous)


def reserve_schedule(length: int, additional: int) -> List[int]:
    """
    Capacities visited while reserving `additional` slots on a sequence of
    `length` elements built from a literal (capacity == length).

    Example:
        reserve_schedule(1, 7) -> [1, 2, 4, 8]
    """
    capacity = length
    required = length + additional
    schedule = [capacity]
    while capacity < required:
        capacity = max(MIN_NON_ZERO_CAPACITY, capacity * GROWTH_FACTOR)
        schedule.append(capacity)

    seq = GrowableSequence.from_literal(range(length))
    seq.reserve(additional)
    assert seq.capacity() == schedule[-1], "reserve disagrees with the doubling schedule"
    return schedule


def slack_ratio(trace: np.ndarray) -> np.ndarray:
    """Fraction of allocated slots left unused after each push."""
    trace = np.asarray(trace, dtype=np.float64)
    lengths = np.arange(1, trace.size + 1, dtype=np.float64)
    return (trace - lengths) / trace


def summarize(n_pushes: int) -> Dict[str, object]:
    """
    One-line numbers for a run of `n_pushes` pushes.

    Returns:
        Dict with final_capacity, reallocations, total_copies, amortized_cost,
        and max_slack.
    """
    caps = capacity_trace(n_pushes)
    copies = copy_trace(n_pushes)
    return {
        "n_pushes": n_pushes,
        "final_capacity": int(caps[-1]) if n_pushes else 0,
        "reallocations": int(growth_events(caps).size),
        "total_copies": int(copies.sum()),
        "amortized_cost": float(copies.sum() / n_pushes) if n_pushes else 0.0,
        "max_slack": float(slack_ratio(caps).max()) if n_pushes else 0.0,
    }
