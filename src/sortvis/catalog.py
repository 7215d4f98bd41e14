"""
Fixed registry of the available sorting algorithms.
"""

from dataclasses import dataclass
from types import MappingProxyType

from . import algorithms
from .errors import UnknownAlgorithm
from .steps import StepProducer


@dataclass(frozen=True)
class AlgorithmDescriptor:
    id: str
    display_name: str
    step_factory: object
    complexity: str
    description: str
    randomized: bool = False

    def create_producer(self, values, rng=None):
        """Bind the routine to a copy of ``values``.

        Precondition errors (e.g. negative input to counting sort) are raised
        here, before any step is pulled.
        """
        if self.randomized:
            steps = self.step_factory(tuple(values), rng=rng)
        else:
            steps = self.step_factory(tuple(values))
        return StepProducer(self.id, iter(steps))


_DESCRIPTORS = (
    AlgorithmDescriptor(
        "bubble",
        "Bubble Sort",
        algorithms.bubble_sort_steps,
        "O(n²)",
        "Compares adjacent pairs and swaps them until the entire array is sorted.",
    ),
    AlgorithmDescriptor(
        "insertion",
        "Insertion Sort",
        algorithms.insertion_sort_steps,
        "O(n²)",
        "Inserts each element into the correct position in the already sorted part.",
    ),
    AlgorithmDescriptor(
        "selection",
        "Selection Sort",
        algorithms.selection_sort_steps,
        "O(n²)",
        "Finds the minimum element and repeatedly places it at the beginning.",
    ),
    AlgorithmDescriptor(
        "merge",
        "Merge Sort",
        algorithms.merge_sort_steps,
        "O(n log n)",
        "Divides the array into halves and then merges them in sorted order.",
    ),
    AlgorithmDescriptor(
        "quick",
        "Quick Sort",
        algorithms.quick_sort_steps,
        "O(n log n) average, O(n²) worst case",
        "Selects a pivot and recursively sorts the other elements around it.",
    ),
    AlgorithmDescriptor(
        "heap",
        "Heap Sort",
        algorithms.heap_sort_steps,
        "O(n log n)",
        "Builds a heap and repeatedly extracts the maximum element.",
    ),
    AlgorithmDescriptor(
        "counting",
        "Counting Sort",
        algorithms.counting_sort_steps,
        "O(n + k)",
        "Counts occurrences of each value and reconstructs the array.",
    ),
    AlgorithmDescriptor(
        "radix",
        "Radix Sort",
        algorithms.radix_sort_steps,
        "O(n·k)",
        "Sorts by digits, from the least significant to the most significant.",
    ),
    AlgorithmDescriptor(
        "bucket",
        "Bucket Sort",
        algorithms.bucket_sort_steps,
        "O(n + k)",
        "Distributes elements into buckets, sorts each bucket, and then combines them.",
    ),
    AlgorithmDescriptor(
        "bogo",
        "Bogo Sort [BAD]",
        algorithms.bogo_sort_steps,
        "O((n+1)!)",
        "Randomly shuffles the array until, by chance, it is sorted.",
        randomized=True,
    ),
)

CATALOG = MappingProxyType({descriptor.id: descriptor for descriptor in _DESCRIPTORS})


def lookup(algorithm_id, catalog=CATALOG):
    try:
        return catalog[algorithm_id]
    except (KeyError, TypeError):
        raise UnknownAlgorithm(algorithm_id) from None


def list_algorithms(catalog=CATALOG):
    """Return ``(id, display_name)`` pairs in selector order."""
    return [(descriptor.id, descriptor.display_name) for descriptor in catalog.values()]


def describe(algorithm_id, catalog=CATALOG):
    descriptor = lookup(algorithm_id, catalog)
    return {"complexity": descriptor.complexity, "description": descriptor.description}
