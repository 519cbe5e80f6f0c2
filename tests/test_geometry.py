import numpy as np
import pytest

from pizzadough.config import CM_PER_INCH
from pizzadough.model.geometry import circle_to_polyline, disk_outline, inch_ticks, polygon_area


def test_circle_is_closed():
    ring = circle_to_polyline((1.0, -2.0), 3.0, 36)

    assert ring.shape == (37, 2)
    np.testing.assert_allclose(ring[0], ring[-1])
    np.testing.assert_allclose(np.hypot(ring[:, 0] - 1.0, ring[:, 1] + 2.0), 3.0)


def test_circle_needs_three_segments():
    with pytest.raises(ValueError):
        circle_to_polyline((0.0, 0.0), 1.0, 2)


def test_disk_outline_area_approaches_circle():
    ring = disk_outline(30.0, n_segments=720)

    assert polygon_area(ring) == pytest.approx(np.pi * 15.0 ** 2, rel=1e-4)


def test_inch_ticks_are_symmetric():
    ticks = inch_ticks(30.0)
    positions = [x for x, _ in ticks]

    assert len(ticks) == 11
    assert ticks[5] == (0.0, '0"')
    assert ticks[0] == (-5 * CM_PER_INCH, '5"')
    np.testing.assert_allclose(positions, -np.array(positions[::-1]))
