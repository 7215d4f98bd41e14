"""Run an algorithm to completion without a timer."""

from dataclasses import dataclass

from .catalog import CATALOG, lookup
from .metrics import Metrics
from .steps import apply_step, is_sorted


@dataclass
class RunResult:
    algorithm_id: str
    initial: tuple
    final: tuple
    metrics: Metrics
    completed: bool

    @property
    def sorted(self):
        return is_sorted(self.final)


def run_algorithm(algorithm_id, values, max_steps=None, catalog=CATALOG, rng=None, on_step=None):
    """Drain one producer, applying each step to a working copy.

    ``max_steps`` caps the number of pulls; it is the only way to bound the
    shuffle-until-sorted routine. ``completed`` is False when steps remained
    after the cap.
    """
    initial = tuple(values)
    producer = lookup(algorithm_id, catalog).create_producer(initial, rng=rng)
    metrics = Metrics()
    array = initial
    while max_steps is None or producer.pulled < max_steps:
        step = producer.next()
        if step is None:
            break
        array = apply_step(array, step)
        metrics.record(step)
        if on_step is not None:
            on_step(step, array)

    # At the cap, one more pull tells whether anything was left; it is not applied
    completed = producer.exhausted or producer.next() is None
    return RunResult(algorithm_id, initial, array, metrics, completed)
