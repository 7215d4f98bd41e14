"""
Atomic steps emitted by the sorting routines and the pull-based producer
that hands them out one at a time.
"""

from dataclasses import dataclass
from enum import Enum


class StepKind(str, Enum):
    COMPARE = "compare"
    SET = "set"
    SWAP = "swap"


@dataclass(frozen=True)
class Step:
    """One unit of algorithmic work.

    ``indices`` are the positions to highlight. ``array`` is the full snapshot
    after the mutation and is only present for ``set`` and ``swap`` steps.
    """

    kind: StepKind
    indices: tuple
    array: tuple = None

    def __post_init__(self):
        object.__setattr__(self, "kind", StepKind(self.kind))
        object.__setattr__(self, "indices", tuple(self.indices))
        if not 1 <= len(self.indices) <= 2:
            raise ValueError(f"A step involves one or two positions, got {self.indices!r}")
        if self.kind is StepKind.COMPARE:
            if self.array is not None:
                raise ValueError("compare steps never carry an array")
        else:
            if self.array is None:
                raise ValueError(f"{self.kind.value} steps must carry the resulting array")
            object.__setattr__(self, "array", tuple(self.array))

    @classmethod
    def compare(cls, i, j):
        return cls(StepKind.COMPARE, (i, j))

    @classmethod
    def set(cls, indices, array):
        return cls(StepKind.SET, indices, array)

    @classmethod
    def swap(cls, i, j, array):
        return cls(StepKind.SWAP, (i, j), array)

    @property
    def mutates(self):
        return self.kind is not StepKind.COMPARE


def apply_step(array, step):
    """Return the array as it is after ``step`` has been applied."""
    if step.array is not None:
        return step.array
    return tuple(array)


def is_sorted(values):
    return all(values[i - 1] <= values[i] for i in range(1, len(values)))


class StepProducer:
    """Hands out the steps of one algorithm run, one pull at a time.

    Nothing runs between two calls to :meth:`next`; the routine stays
    suspended wherever it yielded, including inside nested sub-ranges.
    """

    def __init__(self, algorithm_id, steps):
        self.algorithm_id = algorithm_id
        self._steps = steps
        self.pulled = 0
        self.exhausted = False

    def next(self):
        """Return the next Step, or None once the run is done."""
        if self.exhausted:
            return None
        try:
            step = next(self._steps)
        except StopIteration:
            self.exhausted = True
            self._steps = None
            return None
        self.pulled += 1
        return step

    def __iter__(self):
        return self

    def __next__(self):
        step = self.next()
        if step is None:
            raise StopIteration
        return step

    def __repr__(self):
        state = "exhausted" if self.exhausted else "active"
        return f"StepProducer({self.algorithm_id!r}, pulled={self.pulled}, {state})"
