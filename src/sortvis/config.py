"""
Playback defaults and supported ranges.
Values can be overridden through SORTVIS_* environment variables.
"""

import os
from dataclasses import dataclass

from .catalog import lookup
from .errors import InvalidArraySize, InvalidInterval

MIN_VAL = 0
MAX_VAL = 80

MIN_ARRAY_SIZE = 2
MAX_ARRAY_SIZE = 100
DEFAULT_ARRAY_SIZE = 55

# Milliseconds between two scheduled steps
MIN_INTERVAL_MS = 1
MAX_INTERVAL_MS = 999
DEFAULT_INTERVAL_MS = 100

DEFAULT_ALGORITHM = "bubble"


def validate_array_size(size):
    """Raise InvalidArraySize unless size is an int in the supported range."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidArraySize(size, MIN_ARRAY_SIZE, MAX_ARRAY_SIZE)
    if not MIN_ARRAY_SIZE <= size <= MAX_ARRAY_SIZE:
        raise InvalidArraySize(size, MIN_ARRAY_SIZE, MAX_ARRAY_SIZE)
    return size


def clamp_interval(interval_ms):
    return max(MIN_INTERVAL_MS, min(MAX_INTERVAL_MS, int(interval_ms)))


@dataclass(frozen=True)
class PlaybackConfig:
    algorithm_id: str = DEFAULT_ALGORITHM
    array_size: int = DEFAULT_ARRAY_SIZE
    interval_ms: int = DEFAULT_INTERVAL_MS

    def validate(self):
        lookup(self.algorithm_id)
        validate_array_size(self.array_size)
        return self

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        defaults = cls()
        size = environ.get("SORTVIS_ARRAY_SIZE")
        interval = environ.get("SORTVIS_INTERVAL_MS")
        try:
            array_size = int(size) if size else defaults.array_size
        except ValueError:
            raise InvalidArraySize(size, MIN_ARRAY_SIZE, MAX_ARRAY_SIZE) from None
        try:
            interval_ms = clamp_interval(interval) if interval else defaults.interval_ms
        except ValueError:
            raise InvalidInterval(interval) from None
        config = cls(
            algorithm_id=environ.get("SORTVIS_ALGORITHM") or defaults.algorithm_id,
            array_size=array_size,
            interval_ms=interval_ms,
        )
        return config.validate()
