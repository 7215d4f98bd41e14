"""
Sorting algorithm visualization with interactive controls.
Renders the scheduler's array as a bar chart and drives playback from a dock panel.
"""

import logging
import sys

import numpy as np
import pyvista as pv
from PySide6 import QtCore, QtWidgets
from pyvistaqt import BackgroundPlotter

from .catalog import describe, list_algorithms
from .config import MAX_ARRAY_SIZE, MAX_INTERVAL_MS, MAX_VAL, MIN_ARRAY_SIZE, MIN_INTERVAL_MS, PlaybackConfig
from .qt_timer import QtTimerBackend
from .scheduler import PlaybackScheduler, PlaybackState

logger = logging.getLogger(__name__)


def bar_heights(array, highlighted):
    """Return (x, all bars, highlighted bars only) as float arrays."""
    values = np.asarray(array, dtype=float)
    x = np.arange(len(values), dtype=float)
    highlight = np.zeros_like(values)
    if len(highlighted):
        idx = np.asarray(highlighted, dtype=int)
        highlight[idx] = values[idx]
    return x, values, highlight


class SortingVisualizer:
    def __init__(self, config=None):
        config = config or PlaybackConfig()
        self.plotter = BackgroundPlotter(
            window_size=(1200, 800),
            title="Sorting Algorithm Visualizer",
        )

        self.scheduler = PlaybackScheduler(
            QtTimerBackend(self.plotter.app_window),
            algorithm_id=config.algorithm_id,
            array_size=config.array_size,
            interval_ms=config.interval_ms,
        )
        self.algorithms = list_algorithms()

        self.chart = None
        self.bars_plot = None
        self.highlight_bars = None
        self._bar_count = None

        self._setup_controls()
        self._build_chart()
        self.scheduler.add_change_listener(lambda _: self.refresh())
        self.refresh()

    def _build_chart(self):
        """Create the 2D chart for bar visualization."""
        self.chart = pv.Chart2D()
        self.chart.x_label = "Index"
        self.chart.y_label = "Value"
        self.chart.grid = False
        self.plotter.add_chart(self.chart)

    def _setup_controls(self):
        dock = QtWidgets.QDockWidget("Controls", self.plotter)
        dock.setAllowedAreas(QtCore.Qt.LeftDockWidgetArea | QtCore.Qt.RightDockWidgetArea)
        panel = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(panel)

        layout.addWidget(QtWidgets.QLabel("Algorithm"))
        self.algorithm_combo = QtWidgets.QComboBox()
        for algorithm_id, name in self.algorithms:
            self.algorithm_combo.addItem(name, algorithm_id)
        self.algorithm_combo.setCurrentIndex(
            [algorithm_id for algorithm_id, _ in self.algorithms].index(self.scheduler.algorithm_id)
        )
        self.algorithm_combo.currentIndexChanged.connect(self._on_algorithm_change)
        layout.addWidget(self.algorithm_combo)

        self.complexity_label = QtWidgets.QLabel()
        layout.addWidget(self.complexity_label)
        self.description_label = QtWidgets.QLabel()
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        layout.addWidget(QtWidgets.QLabel("Array Size"))
        self.size_slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self.size_slider.setMinimum(MIN_ARRAY_SIZE)
        self.size_slider.setMaximum(MAX_ARRAY_SIZE)
        self.size_slider.setValue(self.scheduler.array_size)
        self.size_slider.setTickPosition(QtWidgets.QSlider.TicksBelow)
        self.size_slider.setTickInterval(10)
        self.size_slider.valueChanged.connect(self._on_size_change)
        layout.addWidget(self.size_slider)

        layout.addWidget(QtWidgets.QLabel("Speed (ms per step)"))
        self.speed_slider = QtWidgets.QSlider(QtCore.Qt.Horizontal)
        self.speed_slider.setMinimum(MIN_INTERVAL_MS)
        self.speed_slider.setMaximum(MAX_INTERVAL_MS)
        self.speed_slider.setSingleStep(5)
        self.speed_slider.setValue(self.scheduler.interval_ms)
        self.speed_slider.setTickPosition(QtWidgets.QSlider.TicksBelow)
        self.speed_slider.setTickInterval(100)
        self.speed_slider.valueChanged.connect(self.scheduler.set_speed)
        layout.addWidget(self.speed_slider)

        self.start_button = QtWidgets.QPushButton("Start")
        self.start_button.clicked.connect(self._toggle_run)
        layout.addWidget(self.start_button)

        step_button = QtWidgets.QPushButton("Step")
        step_button.clicked.connect(self._guarded(self.scheduler.step))
        layout.addWidget(step_button)

        stop_button = QtWidgets.QPushButton("Stop")
        stop_button.clicked.connect(self.scheduler.stop)
        layout.addWidget(stop_button)

        reset_button = QtWidgets.QPushButton("Reset Array")
        reset_button.clicked.connect(self.scheduler.regenerate)
        layout.addWidget(reset_button)

        unorder_button = QtWidgets.QPushButton("Unorder")
        unorder_button.clicked.connect(self.scheduler.reshuffle)
        layout.addWidget(unorder_button)

        self.metrics_label = QtWidgets.QLabel()
        layout.addWidget(self.metrics_label)
        self.state_label = QtWidgets.QLabel()
        layout.addWidget(self.state_label)

        # Stretch to push controls to top
        layout.addStretch(1)

        dock.setWidget(panel)
        self.plotter.app_window.addDockWidget(QtCore.Qt.RightDockWidgetArea, dock)

    def _guarded(self, operation):
        def run():
            try:
                operation()
            except Exception as exc:
                logger.exception("Playback operation failed")
                self.state_label.setText(f"Error: {exc}")

        return run

    def _toggle_run(self):
        if self.scheduler.state is PlaybackState.RUNNING:
            self.scheduler.pause()
        else:
            self._guarded(self.scheduler.start)()

    def _on_algorithm_change(self, index):
        self.scheduler.set_algorithm(self.algorithm_combo.itemData(index))

    def _on_size_change(self, value):
        self.scheduler.set_array_size(int(value))

    def refresh(self):
        snap = self.scheduler.snapshot()
        self._update_bars(snap.array, snap.highlighted)

        info = describe(snap.algorithm_id)
        self.complexity_label.setText(f"Complexity: {info['complexity']}")
        self.description_label.setText(info["description"])
        self.metrics_label.setText(
            f"Steps: {snap.steps}\nComparisons: {snap.comparisons}\nAccesses: {snap.accesses}"
        )
        self.state_label.setText(f"State: {snap.state.value}")
        self.start_button.setText("Pause" if snap.state is PlaybackState.RUNNING else "Start")

    def _update_bars(self, array, highlighted):
        """Update the bar chart visualization."""
        x, values, highlight = bar_heights(array, highlighted)

        # Bars are rebuilt when the array length changes
        if self._bar_count != len(values):
            for plot in (self.bars_plot, self.highlight_bars):
                if plot is not None:
                    self.chart.remove_plot(plot)
            self.bars_plot = self.chart.bar(x, values, color="skyblue")
            self.highlight_bars = self.chart.bar(x, highlight, color="red")
            self.chart.x_axis.range = [-1, len(values)]
            self.chart.y_axis.range = [0, MAX_VAL * 1.1]
            self._bar_count = len(values)
        else:
            self.bars_plot.update(x, values)
            self.highlight_bars.update(x, highlight)

    def show(self):
        self.plotter.show()
        self.plotter.app.exec()


def main(config=None):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    visualizer = SortingVisualizer(config or PlaybackConfig.from_env())
    visualizer.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
