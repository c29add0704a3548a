import math

import numpy as np
import pylinalg as la
import pytest

from righthand import SceneConfig, MeshItem
from righthand.scene import (
    build_dynamic,
    marker_position,
    tangential_direction,
    orbiting_marker,
    right_hand,
    angular_vector,
    HAND_PARTS,
)


ANGLES = [0, 0.3, math.pi / 2, 2, math.pi, 4.5, 2 * math.pi - 1e-6]


def test_marker_on_circle():
    for angle in ANGLES:
        x, y, z = marker_position(angle, 3)
        assert x * x + y * y == pytest.approx(9)
        assert z == 0


def test_marker_positions():
    assert np.allclose(marker_position(0, 3), (3, 0, 0))
    assert np.allclose(tangential_direction(0), (0, 1, 0))
    assert np.allclose(marker_position(math.pi / 2, 3), (0, 3, 0))
    assert np.allclose(tangential_direction(math.pi / 2), (-1, 0, 0))


def test_tangent_is_perpendicular_to_radius():
    for angle in ANGLES:
        p = np.array(marker_position(angle, 2))
        t = np.array(tangential_direction(angle))
        assert np.dot(p, t) == pytest.approx(0, abs=1e-12)
        assert np.linalg.norm(t) == pytest.approx(1)
        # counter-clockwise motion: p x t points along +z
        assert np.cross(p, t)[2] > 0


def test_orbiting_marker():
    angle = math.pi / 2
    items = orbiting_marker(angle, 3, "#ff9900", 1)
    (sphere,) = items.meshes
    radial, arrow = items.lines

    assert sphere.shape == "sphere"
    assert sphere.params == (0.2, 16, 16)
    assert np.allclose(sphere.position, (0, 3, 0))

    assert np.allclose(radial.segments[0], [(0, 0, 0), (0, 3, 0)])

    # the arrow starts at the marker and points along the tangent
    assert np.allclose(arrow.segments[0], [(0, 3, 0), (-1, 3, 0)])


def test_right_hand_at_zero():
    hand = right_hand(0)
    assert len(hand.meshes) == len(HAND_PARTS) == 6
    assert [m.shape for m in hand.meshes] == ["box", "capsule"] + ["capsule"] * 4

    palm, thumb, *fingers = hand.meshes
    assert np.allclose(palm.position, (0, 0, 0.5))
    assert np.allclose(thumb.position, (-0.6, 0, 0.5))
    assert np.allclose(thumb.rotation, la.quat_from_axis_angle((0, 0, 1), math.pi / 4))
    for i, finger in enumerate(fingers):
        assert finger.params == (0.1, 0.8, 4, 8)
        assert np.allclose(finger.position, (-0.3 + i * 0.2, 0.8, 0.5))
        assert np.allclose(finger.rotation, (0, 0, 0, 1))


def test_right_hand_rotates_about_z():
    angle = 0.7
    rotated = right_hand(angle)
    reference = right_hand(0)
    c, s = math.cos(angle), math.sin(angle)
    for mesh, ref in zip(rotated.meshes, reference.meshes):
        x, y, z = ref.position
        assert np.allclose(mesh.position, (c * x - s * y, s * x + c * y, z))
        # the world rotation adds the hand angle to the part angle
        expected = la.quat_mul(la.quat_from_axis_angle((0, 0, 1), angle), ref.rotation)
        assert np.allclose(mesh.rotation, expected)


def test_angular_vector_is_constant():
    arrow = angular_vector(2)
    assert np.allclose(arrow.segments[0], [(0, 0, 0), (0, 0, 2)])
    # nearly parallel to z, so the head spreads along x
    assert np.allclose(arrow.segments[3], [(0.2, 0, 1.6), (-0.2, 0, 1.6)])

    a = build_dynamic(0).lines[-1]
    b = build_dynamic(2.5).lines[-1]
    assert np.allclose(a.positions, b.positions)


def test_build_dynamic():
    dynamic = build_dynamic(1.0)
    # radial line, velocity arrow, angular arrow
    assert len(dynamic.lines) == 3
    # marker and six hand parts
    assert len(dynamic.meshes) == 7
    assert all(isinstance(m, MeshItem) for m in dynamic.meshes)
    assert len(dynamic.texts) == 0

    config = SceneConfig(radius=2, arrow_length=0.5, hand_color="#123456")
    dynamic = build_dynamic(0, config)
    assert np.allclose(dynamic.meshes[0].position, (2, 0, 0))
    assert np.allclose(dynamic.lines[1].segments[0][1], (2, 0.5, 0))
    assert dynamic.meshes[1].color.hex == "#123456"
