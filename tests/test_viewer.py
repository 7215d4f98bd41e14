import numpy as np
import pytest

pytest.importorskip("pyvistaqt")

from sortvis.viewer import bar_heights  # noqa: E402


def test_bar_heights_highlight():
    x, values, highlight = bar_heights((4, 0, 7), (0, 2))
    np.testing.assert_array_equal(x, [0, 1, 2])
    np.testing.assert_array_equal(values, [4, 0, 7])
    np.testing.assert_array_equal(highlight, [4, 0, 7])


def test_bar_heights_without_highlight():
    _, _, highlight = bar_heights((4, 0, 7), ())
    np.testing.assert_array_equal(highlight, [0, 0, 0])
