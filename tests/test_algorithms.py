import math
from collections import Counter

import numpy as np
import pytest

from sortvis import algorithms
from sortvis.catalog import CATALOG, lookup
from sortvis.errors import NegativeValueError
from sortvis.runner import run_algorithm
from sortvis.steps import Step, StepKind, apply_step, is_sorted

DETERMINISTIC = [algorithm_id for algorithm_id, d in CATALOG.items() if not d.randomized]


def collect(algorithm_id, values):
    return list(lookup(algorithm_id).create_producer(values))


def replay(values, steps):
    array = tuple(values)
    for step in steps:
        array = apply_step(array, step)
    return array


def sample_inputs():
    rng = np.random.default_rng(7)
    inputs = [[], [1], [2, 1], [5, 3, 8, 1], [2, 2, 2], list(range(10, 0, -1)), list(range(12))]
    for size in (5, 17, 40, 64):
        inputs.append([int(v) for v in rng.integers(0, 81, size=size)])
    return inputs


@pytest.mark.parametrize("algorithm_id", DETERMINISTIC)
@pytest.mark.parametrize("values", sample_inputs(), ids=lambda v: f"n{len(v)}")
def test_replay_sorts_and_permutes(algorithm_id, values):
    original = list(values)
    steps = collect(algorithm_id, values)

    final = replay(values, steps)

    assert is_sorted(final)
    assert Counter(final) == Counter(original)
    # Input left untouched
    assert values == original


@pytest.mark.parametrize("algorithm_id", list(CATALOG))
def test_compare_steps_carry_no_array(algorithm_id):
    values = [int(v) for v in np.random.default_rng(3).integers(0, 81, size=6)]
    producer = lookup(algorithm_id).create_producer(values, rng=np.random.default_rng(3))
    for step, _ in zip(producer, range(5000)):
        if step.kind is StepKind.COMPARE:
            assert step.array is None
        else:
            assert len(step.array) == len(values)


def test_bubble_concrete_sequence():
    steps = collect("bubble", [5, 3, 8, 1])

    assert steps[:5] == [
        Step.compare(0, 1),
        Step.swap(0, 1, [3, 5, 8, 1]),
        Step.compare(1, 2),
        Step.compare(2, 3),
        Step.swap(2, 3, [3, 5, 1, 8]),
    ]
    assert steps[5:] == [
        Step.compare(0, 1),
        Step.compare(1, 2),
        Step.swap(1, 2, [3, 1, 5, 8]),
        Step.compare(0, 1),
        Step.swap(0, 1, [1, 3, 5, 8]),
    ]
    assert replay([5, 3, 8, 1], steps) == (1, 3, 5, 8)


@pytest.mark.parametrize("algorithm_id", DETERMINISTIC)
def test_equal_values_stay_put(algorithm_id):
    steps = collect(algorithm_id, [2, 2, 2])
    for step in steps:
        if step.array is not None:
            assert step.array == (2, 2, 2)
    assert replay([2, 2, 2], steps) == (2, 2, 2)


def test_bubble_compares_equal_values():
    steps = collect("bubble", [2, 2, 2])
    assert steps == [Step.compare(0, 1), Step.compare(1, 2)]


def test_counting_sort_concrete():
    steps = collect("counting", [4, 0, 0, 3])

    assert [s.kind for s in steps] == [StepKind.SET] * 4
    assert [s.indices for s in steps] == [(0,), (1,), (2,), (3,)]
    assert [s.array for s in steps] == [
        (0, 0, 0, 3),
        (0, 0, 0, 3),
        (0, 0, 3, 3),
        (0, 0, 3, 4),
    ]


@pytest.mark.parametrize("algorithm_id", ["counting", "radix"])
def test_negative_values_rejected_before_first_pull(algorithm_id):
    with pytest.raises(NegativeValueError) as excinfo:
        lookup(algorithm_id).create_producer([3, -1, 2])
    assert excinfo.value.value == -1


@pytest.mark.parametrize("algorithm_id", ["bubble", "insertion", "selection"])
@pytest.mark.parametrize("values", [list(range(20, 0, -1)), list(range(20)), [7] * 20])
def test_quadratic_compare_bound(algorithm_id, values):
    n = len(values)
    compares = sum(1 for s in collect(algorithm_id, values) if s.kind is StepKind.COMPARE)
    assert compares <= n * (n - 1) // 2


def test_insertion_reversed_hits_bound():
    steps = collect("insertion", [4, 3, 2, 1])
    assert sum(1 for s in steps if s.kind is StepKind.COMPARE) == 6
    assert steps[0] == Step.compare(0, 1)
    assert steps[1] == Step.set((0, 1), [4, 4, 2, 1])
    assert steps[2] == Step.set((0, 1), [3, 4, 2, 1])


def test_selection_sequence():
    steps = collect("selection", [3, 2, 1])

    assert steps == [
        Step.compare(0, 1),
        Step.compare(1, 2),
        Step.swap(0, 2, [1, 2, 3]),
        Step.compare(1, 2),
    ]


def test_selection_skips_swap_when_minimum_in_place():
    steps = collect("selection", [1, 3, 2])
    assert [s.kind for s in steps] == [StepKind.COMPARE, StepKind.COMPARE, StepKind.COMPARE, StepKind.SWAP]
    assert steps[-1] == Step.swap(1, 2, [1, 2, 3])


def test_merge_is_n_log_n():
    n = 64
    values = [int(v) for v in np.random.default_rng(11).integers(0, 81, size=n)]
    steps = collect("merge", values)
    sets = sum(1 for s in steps if s.kind is StepKind.SET)
    compares = len(steps) - sets
    log_n = int(math.log2(n))

    assert sets == n * log_n
    assert compares <= sets
    assert n * log_n <= len(steps) <= 2 * n * log_n


def test_merge_interleaves_across_sub_ranges():
    steps = collect("merge", [5, 3, 8, 1])

    assert steps[:5] == [
        Step.compare(0, 1),
        Step.set((0,), [3, 3, 8, 1]),
        Step.set((1,), [3, 5, 8, 1]),
        Step.compare(2, 3),
        Step.set((2,), [3, 5, 1, 1]),
    ]
    assert steps[-2:] == [
        Step.set((2,), [1, 3, 5, 8]),
        Step.set((3,), [1, 3, 5, 8]),
    ]


def test_merge_producer_suspends_after_first_step():
    producer = lookup("merge").create_producer(list(range(64, 0, -1)))
    assert producer.next() == Step.compare(0, 1)
    assert producer.pulled == 1


def test_quick_lomuto_sequence():
    steps = collect("quick", [5, 3, 8, 1])

    assert steps == [
        Step.compare(0, 3),
        Step.compare(1, 3),
        Step.compare(2, 3),
        Step.swap(0, 3, [1, 3, 8, 5]),
        Step.compare(1, 3),
        Step.swap(1, 1, [1, 3, 8, 5]),
        Step.compare(2, 3),
        Step.swap(2, 3, [1, 3, 5, 8]),
    ]


def test_heap_sequence():
    steps = collect("heap", [5, 3, 8, 1])

    assert steps[:4] == [
        Step.compare(3, 1),
        Step.compare(1, 0),
        Step.compare(2, 0),
        Step.swap(0, 2, [8, 3, 5, 1]),
    ]
    assert steps[4] == Step.swap(0, 3, [1, 3, 5, 8])
    assert replay([5, 3, 8, 1], steps) == (1, 3, 5, 8)


def test_radix_emits_one_pass_per_digit():
    values = [170, 45, 75, 90, 802, 24, 2, 66]
    steps = collect("radix", values)

    assert len(steps) == 3 * len(values)
    assert all(s.kind is StepKind.SET for s in steps)
    assert steps[len(values) - 1].array == (170, 90, 802, 2, 24, 45, 75, 66)
    assert steps[-1].array == tuple(sorted(values))


def test_radix_all_zero_has_no_passes():
    assert collect("radix", [0, 0, 0]) == []


def test_bucket_sort_concatenates_buckets():
    steps = collect("bucket", [4, 0, 0, 3])
    assert [s.indices for s in steps] == [(0,), (1,), (2,), (3,)]
    assert steps[-1].array == (0, 0, 3, 4)


def test_bogo_sort_eventually_sorts():
    result = run_algorithm("bogo", [3, 1, 2, 0], max_steps=100_000, rng=np.random.default_rng(5))

    assert result.completed
    assert result.final == (0, 1, 2, 3)
    assert result.metrics.steps % 3 == 0
    assert result.metrics.comparisons == 0


def test_bogo_sort_on_sorted_input_emits_nothing():
    assert list(algorithms.bogo_sort_steps([1, 2, 3])) == []


def test_bogo_swaps_follow_fisher_yates_order():
    producer = lookup("bogo").create_producer([4, 3, 2, 1, 0], rng=np.random.default_rng(0))
    first_pass = [producer.next() for _ in range(4)]
    assert [s.indices[0] for s in first_pass] == [4, 3, 2, 1]
    assert all(0 <= s.indices[1] <= s.indices[0] for s in first_pass)
