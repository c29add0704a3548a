import numpy as np
from pygfx import Geometry

from .utils import strip_to_segments


def circle_positions(radius=1.0, segments=64):
    """Sample a circle in the xy-plane, centered at the origin.

    Returns a ``(segments + 1, 3)`` array. The last point repeats the first,
    so drawing the points as a strip closes the circle.
    """
    if segments < 1:
        raise ValueError(f"A circle needs at least one segment, not {segments}.")
    theta = np.arange(segments + 1, dtype=np.float64) / segments * np.pi * 2
    positions = np.zeros((segments + 1, 3), dtype=np.float64)
    positions[:, 0] = radius * np.cos(theta)
    positions[:, 1] = radius * np.sin(theta)
    return positions


def circle_geometry(radius=1.0, segments=64):
    """Generate a circle outline as line segments.

    Parameters
    ----------
    radius : float
        The radius of the circle.
    segments : int
        The number of straight pieces used to approximate the circle.

    Returns
    -------
    circle : Geometry
        A geometry for a ``gfx.Line`` with a ``gfx.LineSegmentMaterial``.

    """
    positions = strip_to_segments(circle_positions(radius, segments))
    return Geometry(positions=positions.astype(np.float32))
