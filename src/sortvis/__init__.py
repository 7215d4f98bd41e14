"""Animated step-by-step visualization of classic sorting algorithms."""

from .arrays import generate_array, reshuffle
from .catalog import CATALOG, AlgorithmDescriptor, describe, list_algorithms, lookup
from .errors import InvalidArraySize, InvalidInterval, NegativeValueError, SortVisError, UnknownAlgorithm
from .metrics import Metrics
from .runner import RunResult, run_algorithm
from .scheduler import PlaybackScheduler, PlaybackSnapshot, PlaybackState
from .steps import Step, StepKind, StepProducer, apply_step, is_sorted

__version__ = "0.1.0"

__all__ = [
    "CATALOG",
    "AlgorithmDescriptor",
    "InvalidArraySize",
    "InvalidInterval",
    "Metrics",
    "NegativeValueError",
    "PlaybackScheduler",
    "PlaybackSnapshot",
    "PlaybackState",
    "RunResult",
    "SortVisError",
    "Step",
    "StepKind",
    "StepProducer",
    "UnknownAlgorithm",
    "__version__",
    "apply_step",
    "describe",
    "generate_array",
    "is_sorted",
    "list_algorithms",
    "lookup",
    "reshuffle",
    "run_algorithm",
]
