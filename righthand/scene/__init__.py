"""
The right-hand rule scene, as draw lists.

.. currentmodule:: righthand.scene

Static elements (axes, circle, labels) are built once. Dynamic elements
(marker, radius line, velocity arrow, hand, angular vector) are built for a
given angle. ``compose_frame`` combines both into the draw list of a frame.

.. autosummary::
    :toctree: scene/

    build_static
    build_dynamic
    compose_frame
    marker_position
    tangential_direction

"""

# ruff: noqa: F401

from ._static import build_static, coordinate_axes, circular_path, labels
from ._dynamic import (
    build_dynamic,
    marker_position,
    tangential_direction,
    orbiting_marker,
    right_hand,
    angular_vector,
    HAND_PARTS,
)
from ._frame import compose_frame
