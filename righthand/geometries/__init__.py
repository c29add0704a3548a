"""
Geometry for the scene primitives.

.. currentmodule:: righthand.geometries

The ``*_positions`` and ``arrow_segments`` functions compute plain numpy
arrays of points. The ``*_geometry`` functions wrap such data in a pygfx
``Geometry``, in the same way as ``pygfx.sphere_geometry`` and friends.

.. autosummary::
    :toctree: geometry/

    arrow_segments
    arrow_side_direction
    arrow_glyph
    arrow_geometry
    circle_positions
    circle_geometry
    capsule_geometry

"""

# ruff: noqa: F401

from ._arrow import (
    arrow_segments,
    arrow_side_direction,
    arrow_glyph,
    arrow_geometry,
    HEAD_LENGTH_RATIO,
    HEAD_WIDTH_RATIO,
)
from ._circle import circle_positions, circle_geometry
from ._capsule import capsule_geometry
from .utils import strip_to_segments

__all__ = [
    "arrow_segments",
    "arrow_side_direction",
    "arrow_glyph",
    "arrow_geometry",
    "circle_positions",
    "circle_geometry",
    "capsule_geometry",
]
