import numpy as np
import pytest


class ManualTimer:
    """Deterministic stand-in for the Qt timer backend."""

    def __init__(self):
        self.now = 0
        self._pending = {}
        self._next_handle = 0
        self.scheduled = []

    def schedule(self, interval_ms, callback):
        self._next_handle += 1
        handle = self._next_handle
        self._pending[handle] = (self.now + interval_ms, handle, callback)
        self.scheduled.append((handle, self.now + interval_ms, callback))
        return handle

    def cancel(self, handle):
        self._pending.pop(handle, None)

    @property
    def pending(self):
        return len(self._pending)

    def next_due(self):
        if not self._pending:
            return None
        return min(self._pending.values())[0]

    def advance(self, ms):
        target = self.now + ms
        while self._pending:
            due, handle, callback = min(self._pending.values())
            if due > target:
                break
            del self._pending[handle]
            self.now = due
            callback()
        self.now = target

    def run_until_idle(self, limit=100_000):
        fired = 0
        while self._pending and fired < limit:
            due, handle, callback = min(self._pending.values())
            del self._pending[handle]
            self.now = due
            callback()
            fired += 1
        return fired


@pytest.fixture
def timer():
    return ManualTimer()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
