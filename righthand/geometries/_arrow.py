import numpy as np
from pygfx import Geometry

from ..drawlist import LineItem
from ..utils import logger
from ..utils.vec import vec3, is_zero, normalize, scale, add, sub


HEAD_LENGTH_RATIO = 0.2
HEAD_WIDTH_RATIO = 0.5

# Above this |d.z| the in-plane perpendicular becomes too short to use.
SIDE_FALLBACK_Z = 0.9


def arrow_side_direction(direction):
    """Get the direction in which the arrow head spreads.

    Parameters
    ----------
    direction : ndarray
        The normalized direction of the arrow.

    Returns
    -------
    side : ndarray
        ``(1, 0, 0)`` if the direction is nearly parallel to the z-axis,
        otherwise the normalized perpendicular ``(d.y, -d.x, 0)``.

    """
    d = vec3(direction)
    if abs(d[2]) > SIDE_FALLBACK_Z:
        return np.array([1.0, 0.0, 0.0])
    return normalize((d[1], -d[0], 0.0))


def arrow_segments(origin, direction, length):
    """Compute the line segments of an arrow glyph.

    The arrow is a shaft from ``origin`` to the tip at
    ``origin + normalize(direction) * length``, and a flat triangular head
    made of two strokes from the tip to the side points and a base stroke
    between the side points. The head is ``0.2 * length`` long and half as
    wide on each side.

    Parameters
    ----------
    origin : tuple
        The start of the arrow.
    direction : tuple
        The direction of the arrow. Need not be normalized.
    length : float
        The length of the arrow, must be positive.

    Returns
    -------
    positions : ndarray
        An ``(8, 3)`` array with the segments shaft, tip-side1, tip-side2 and
        side1-side2. If ``direction`` is the zero vector a warning is logged
        and an empty ``(0, 3)`` array is returned.

    """

    length = float(length)
    if not (np.isfinite(length) and length > 0):
        raise ValueError(f"Arrow length must be a positive number, not {length}.")

    origin = vec3(origin)
    d = None if is_zero(direction) else normalize(direction)
    if d is None or not np.isfinite(d).all():
        logger.warning(f"Skipping arrow at {tuple(origin)}: zero direction.")
        return np.zeros((0, 3), dtype=np.float64)

    tip = add(origin, scale(d, length))

    head_length = length * HEAD_LENGTH_RATIO
    head_width = head_length * HEAD_WIDTH_RATIO

    side = arrow_side_direction(d)
    head_base = sub(tip, scale(d, head_length))
    side1 = add(head_base, scale(side, head_width))
    side2 = sub(head_base, scale(side, head_width))

    return np.array(
        [origin, tip, tip, side1, tip, side2, side1, side2], dtype=np.float64
    )


def arrow_glyph(origin, direction, length, color, thickness=2.0):
    """Get an arrow as a ``LineItem`` for the draw list."""
    return LineItem(arrow_segments(origin, direction, length), color, thickness)


def arrow_geometry(origin=(0, 0, 0), direction=(0, 0, 1), length=1.0):
    """Generate the geometry of an arrow glyph.

    The geometry is meant for a ``gfx.Line`` with a ``gfx.LineSegmentMaterial``.
    A zero direction gives a geometry of NaN points, which draws nothing.

    Parameters
    ----------
    origin : tuple
        The start of the arrow.
    direction : tuple
        The direction of the arrow.
    length : float
        The length of the arrow.

    Returns
    -------
    arrow : Geometry
        A geometry object with 8 positions (4 segments).

    """
    positions = arrow_segments(origin, direction, length)
    if not len(positions):
        positions = np.full((8, 3), np.nan)
    return Geometry(positions=positions.astype(np.float32))
