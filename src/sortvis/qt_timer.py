"""PySide6 timer backend for the playback scheduler."""

from PySide6 import QtCore


class QtTimerBackend:
    """Single-shot QTimer per scheduled pull.

    Must be used from the thread that runs the Qt event loop.
    """

    def __init__(self, parent=None):
        self.parent = parent
        self._active = set()

    def schedule(self, interval_ms, callback):
        timer = QtCore.QTimer(self.parent)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(timer, callback))
        self._active.add(timer)
        timer.start(max(0, int(interval_ms)))
        return timer

    def cancel(self, handle):
        if handle in self._active:
            handle.stop()
            self._release(handle)

    def _fire(self, timer, callback):
        if timer not in self._active:
            return
        self._release(timer)
        callback()

    def _release(self, timer):
        self._active.discard(timer)
        timer.deleteLater()
