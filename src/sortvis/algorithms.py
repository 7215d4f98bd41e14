"""
Step-emitting sorting routines.

Every routine copies its input and lazily yields Step records describing
each comparison, write and swap it performs. The caller's sequence is
never touched. Divide and conquer routines keep their pending sub-ranges
on an explicit stack so a single generator can suspend anywhere inside the
recursion.
"""

import math

import numpy as np

from .errors import NegativeValueError
from .steps import Step, is_sorted


def bubble_sort_steps(values):
    a = list(values)
    n = len(a)
    swapped = True
    while swapped:
        swapped = False
        for i in range(1, n):
            yield Step.compare(i - 1, i)
            if a[i - 1] > a[i]:
                a[i - 1], a[i] = a[i], a[i - 1]
                swapped = True
                yield Step.swap(i - 1, i, a)
        n -= 1


def insertion_sort_steps(values):
    a = list(values)
    for i in range(1, len(a)):
        key = a[i]
        j = i - 1
        yield Step.compare(j, i)
        while j >= 0 and a[j] > key:
            a[j + 1] = a[j]
            yield Step.set((j, j + 1), a)
            j -= 1
            if j >= 0:
                yield Step.compare(j, i)
        a[j + 1] = key
        yield Step.set((j + 1, i), a)


def selection_sort_steps(values):
    a = list(values)
    n = len(a)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            yield Step.compare(min_idx, j)
            if a[j] < a[min_idx]:
                min_idx = j
        if min_idx != i:
            a[i], a[min_idx] = a[min_idx], a[i]
            yield Step.swap(i, min_idx, a)


def _merge(a, start, mid, end):
    left = a[start:mid]
    right = a[mid:end]
    i = j = 0
    k = start

    while i < len(left) and j < len(right):
        yield Step.compare(start + i, mid + j)
        if left[i] <= right[j]:
            a[k] = left[i]
            i += 1
        else:
            a[k] = right[j]
            j += 1
        yield Step.set((k,), a)
        k += 1

    # Drain whichever half still has elements
    for value in left[i:] + right[j:]:
        a[k] = value
        yield Step.set((k,), a)
        k += 1


def merge_sort_steps(values):
    a = list(values)
    # (start, end, halves_sorted)
    stack = [(0, len(a), False)]
    while stack:
        start, end, halves_sorted = stack.pop()
        if end - start <= 1:
            continue
        mid = (start + end) // 2
        if halves_sorted:
            yield from _merge(a, start, mid, end)
            continue
        stack.append((start, end, True))
        stack.append((mid, end, False))
        stack.append((start, mid, False))


def quick_sort_steps(values):
    a = list(values)
    stack = [(0, len(a) - 1)]
    while stack:
        low, high = stack.pop()
        if low >= high:
            continue

        # Lomuto partition around the last element
        pivot = a[high]
        store = low
        for i in range(low, high):
            yield Step.compare(i, high)
            if a[i] < pivot:
                a[i], a[store] = a[store], a[i]
                yield Step.swap(i, store, a)
                store += 1
        a[store], a[high] = a[high], a[store]
        yield Step.swap(store, high, a)

        # Left range is popped first
        stack.append((store + 1, high))
        stack.append((low, store - 1))


def _sift_down(a, size, root):
    while True:
        largest = root
        left = 2 * root + 1
        right = 2 * root + 2

        if left < size:
            yield Step.compare(left, largest)
            if a[left] > a[largest]:
                largest = left
        if right < size:
            yield Step.compare(right, largest)
            if a[right] > a[largest]:
                largest = right

        if largest == root:
            return
        a[root], a[largest] = a[largest], a[root]
        yield Step.swap(root, largest, a)
        root = largest


def heap_sort_steps(values):
    a = list(values)
    n = len(a)
    for root in range(n // 2 - 1, -1, -1):
        yield from _sift_down(a, n, root)
    for end in range(n - 1, 0, -1):
        a[0], a[end] = a[end], a[0]
        yield Step.swap(0, end, a)
        yield from _sift_down(a, end, 0)


def _require_non_negative(values, algorithm):
    for value in values:
        if value < 0:
            raise NegativeValueError(value, algorithm)


def counting_sort_steps(values):
    """Validate eagerly, then return the lazy step sequence."""
    a = list(values)
    _require_non_negative(a, "counting")
    return _counting_sort(a)


def _counting_sort(a):
    if not a:
        return
    counts = [0] * (max(a) + 1)
    for value in a:
        counts[value] += 1

    k = 0
    for value, count in enumerate(counts):
        for _ in range(count):
            a[k] = value
            yield Step.set((k,), a)
            k += 1


def radix_sort_steps(values):
    """Validate eagerly, then return the lazy step sequence."""
    a = list(values)
    _require_non_negative(a, "radix")
    return _radix_sort(a)


def _radix_sort(a):
    if not a:
        return
    max_value = max(a)
    exp = 1
    while max_value // exp > 0:
        # Stable counting pass on the current base-10 digit
        counts = [0] * 10
        for value in a:
            counts[(value // exp) % 10] += 1
        for digit in range(1, 10):
            counts[digit] += counts[digit - 1]
        output = [0] * len(a)
        for value in reversed(a):
            digit = (value // exp) % 10
            counts[digit] -= 1
            output[counts[digit]] = value

        for i, value in enumerate(output):
            a[i] = value
            yield Step.set((i,), a)
        exp *= 10


def bucket_sort_steps(values):
    a = list(values)
    n = len(a)
    if n == 0:
        return
    lo, hi = min(a), max(a)
    bucket_count = math.isqrt(n)
    buckets = [[] for _ in range(bucket_count)]
    for value in a:
        buckets[(value - lo) * bucket_count // (hi - lo + 1)].append(value)

    k = 0
    for bucket in buckets:
        for value in sorted(bucket):
            a[k] = value
            yield Step.set((k,), a)
            k += 1


def bogo_sort_steps(values, rng=None):
    """Fisher-Yates shuffle the whole array until it happens to be sorted.

    Unbounded: callers that need an upper bound must cap the number of pulls.
    """
    rng = np.random.default_rng() if rng is None else rng
    a = list(values)
    while not is_sorted(a):
        for i in range(len(a) - 1, 0, -1):
            j = int(rng.integers(0, i + 1))
            a[i], a[j] = a[j], a[i]
            yield Step.swap(i, j, a)
