"""Exceptions raised by the sorting engine."""


class SortVisError(Exception):
    """Base class for every error raised by sortvis."""


class UnknownAlgorithm(SortVisError, KeyError):
    def __init__(self, algorithm_id):
        self.algorithm_id = algorithm_id
        super().__init__(algorithm_id)

    def __str__(self):
        return f"Unknown algorithm: {self.algorithm_id!r}"


class InvalidArraySize(SortVisError, ValueError):
    def __init__(self, size, minimum, maximum):
        self.size = size
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"Array size {size!r} outside supported range [{minimum}, {maximum}]")


class InvalidInterval(SortVisError, ValueError):
    def __init__(self, interval_ms):
        self.interval_ms = interval_ms
        super().__init__(f"Playback interval must be a number of milliseconds, got {interval_ms!r}")


class NegativeValueError(SortVisError, ValueError):
    def __init__(self, value, algorithm="counting"):
        self.value = value
        self.algorithm = algorithm
        super().__init__(f"{algorithm} sort requires non-negative integers, got {value!r}")
