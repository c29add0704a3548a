import numpy as np
import pytest

from righthand.geometries import circle_positions, circle_geometry, strip_to_segments


def test_circle_positions():
    positions = circle_positions(3, 64)
    assert positions.shape == (65, 3)
    assert np.allclose(np.linalg.norm(positions, axis=1), 3)
    assert np.all(positions[:, 2] == 0)
    # closed
    assert np.allclose(positions[0], positions[-1])
    assert np.allclose(positions[0], (3, 0, 0))
    assert np.allclose(positions[16], (0, 3, 0))

    with pytest.raises(ValueError):
        circle_positions(1, 0)


def test_strip_to_segments():
    points = np.array([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)], float)
    segments = strip_to_segments(points)
    assert segments.shape == (6, 3)
    assert np.all(segments[0::2] == points[:-1])
    assert np.all(segments[1::2] == points[1:])

    assert strip_to_segments(points[:1]).shape == (0, 3)


def test_circle_geometry():
    geometry = circle_geometry(2, 8)
    positions = geometry.positions.data
    assert positions.shape == (16, 3)
    assert np.allclose(np.linalg.norm(positions, axis=1), 2, atol=1e-6)
    # segment pairs connect consecutive samples
    assert np.allclose(positions[1], positions[2])
