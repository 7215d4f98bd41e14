"""Random input arrays for the visualizer."""

import numpy as np

from .config import MAX_VAL, MIN_VAL, validate_array_size


def _rng(rng):
    return np.random.default_rng() if rng is None else rng


def generate_array(length, rng=None):
    """Return a fresh tuple of ``length`` random ints in [MIN_VAL, MAX_VAL]."""
    validate_array_size(length)
    values = _rng(rng).integers(MIN_VAL, MAX_VAL + 1, size=length)
    return tuple(int(v) for v in values)


def reshuffle(values, rng=None):
    """Return a random permutation of ``values``; the input is left untouched."""
    order = _rng(rng).permutation(len(values))
    return tuple(values[i] for i in order)
