import math

import pylinalg as la

from ..drawlist import DrawList, LineItem, MeshItem
from ..geometries import arrow_glyph
from ..utils.config import DEFAULT_CONFIG


Z_AXIS = (0.0, 0.0, 1.0)

MARKER_RADIUS = 0.2

# The parts of the hand as (shape, params, position, angle about z),
# in the frame of the hand before it is rotated.
HAND_PARTS = (
    ("box", (1.0, 1.2, 0.3), (0.0, 0.0, 0.5), 0.0),  # palm
    ("capsule", (0.15, 0.6, 4, 8), (-0.6, 0.0, 0.5), math.pi / 4),  # thumb
) + tuple(
    ("capsule", (0.1, 0.8, 4, 8), (-0.3 + i * 0.2, 0.8, 0.5), 0.0)  # fingers
    for i in range(4)
)


def marker_position(angle, radius):
    """The position of the marker on the circle at the given angle."""
    return (radius * math.cos(angle), radius * math.sin(angle), 0.0)


def tangential_direction(angle):
    """The direction of motion of the marker, i.e. d(position)/d(angle)."""
    return (-math.sin(angle), math.cos(angle), 0.0)


def orbiting_marker(angle, radius=3.0, color="#ff9900", arrow_length=1.0):
    """The marker on the circle, its radius line and its velocity arrow."""
    position = marker_position(angle, radius)
    return DrawList().add(
        MeshItem("sphere", (MARKER_RADIUS, 16, 16), position, color=color),
        LineItem([(0, 0, 0), position], color, thickness=2),
        arrow_glyph(position, tangential_direction(angle), arrow_length, color),
    )


def right_hand(angle, color="#ffccaa"):
    """The hand, rotated by ``angle`` about the z-axis.

    The rotation is illustrative only; it follows the marker but is not
    derived from the velocity vector.
    """
    rotation = la.quat_from_axis_angle(Z_AXIS, angle)
    hand = DrawList()
    for shape, params, position, part_angle in HAND_PARTS:
        part_rotation = la.quat_from_axis_angle(Z_AXIS, part_angle)
        hand.add(
            MeshItem(
                shape,
                params,
                la.vec_transform_quat(position, rotation),
                la.quat_mul(rotation, part_rotation),
                color=color,
            )
        )
    return hand


def angular_vector(length=2.0, color="#00ffff"):
    """The angular displacement vector, along the rotation axis."""
    return arrow_glyph((0, 0, 0), Z_AXIS, length, color)


def build_dynamic(angle, config=None):
    """Build the elements that depend on the angle.

    Parameters
    ----------
    angle : float
        The current rotation angle, in radians.
    config : SceneConfig
        The scene constants. Defaults to ``DEFAULT_CONFIG``.

    Returns
    -------
    dynamic : DrawList
        The orbiting marker with its radius line and velocity arrow, the hand,
        and the angular displacement vector.

    """
    config = config or DEFAULT_CONFIG
    dynamic = orbiting_marker(
        angle, config.radius, config.orbit_color, config.arrow_length
    )
    dynamic.extend(right_hand(angle, config.hand_color))
    dynamic.add(angular_vector(config.angular_arrow_length, config.angular_color))
    return dynamic
