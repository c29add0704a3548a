import numpy as np


def strip_to_segments(points):
    """Convert a line strip of N points to 2(N-1) segment end points.

    Each point except the first and last is repeated, so that every pair of
    rows in the result is one segment, as ``gfx.LineSegmentMaterial`` expects.
    """
    points = np.asarray(points)
    if len(points) < 2:
        return points[:0].reshape(0, 3)
    return np.repeat(points, 2, axis=0)[1:-1]
