from __future__ import annotations

import numpy as np
from numpy import typing as npt

from pizzadough.config import CM_PER_INCH


def circle_to_polyline(
    center: tuple[float, float],
    radius: float,
    n_segments: int
) -> npt.NDArray[np.float64]:
    """
    Discretize a circle in XY into an (N,2) polyline (closed).

    Args:
        center: (x, y) coordinates of the circle center.
        radius: Radius of the circle.
        n_segments: Number of segments to use for discretization.

    Returns:
        An array of shape (n_segments + 1, 2); the last point repeats the first.
    """
    if n_segments < 3:
        raise ValueError(f"A circle needs at least 3 segments, got {n_segments}.")

    cx, cy = center
    theta = np.linspace(0.0, 2.0 * np.pi, n_segments, endpoint=False)
    pts = np.c_[cx + radius * np.cos(theta), cy + radius * np.sin(theta)]

    # close the ring
    return np.vstack((pts, pts[0]))


def disk_outline(diameter_cm: float, n_segments: int = 120) -> npt.NDArray[np.float64]:
    """Outline of a pizza of the given diameter centered at the origin, in cm."""
    return circle_to_polyline((0.0, 0.0), diameter_cm / 2, n_segments)


def polygon_area(ring: npt.NDArray[np.float64]) -> float:
    """Shoelace area of a closed (N,2) ring."""
    x, y = ring[:, 0], ring[:, 1]
    return float(0.5 * abs(np.dot(x[:-1], y[1:]) - np.dot(x[1:], y[:-1])))


def inch_ticks(diameter_cm: float) -> list[tuple[float, str]]:
    """
    Whole-inch tick positions across the disk, measured from its center.

    Returns:
        A list of (position in cm, label) pairs, e.g. (2.54, '1"').
    """
    half_in = int(np.floor(diameter_cm / CM_PER_INCH / 2))
    return [(i * CM_PER_INCH, f'{abs(i)}"') for i in range(-half_in, half_in + 1)]
