"""The per-frame draw list.

A frame of the visualization is described by a ``DrawList``: colored line
segments, simple colored meshes and positioned text strings, all in world
coordinates. The draw list knows nothing about the render engine; the
``righthand.renderers`` module turns it into pygfx world objects.
"""

import numpy as np
from pygfx import Color

from .utils.vec import vec3


MESH_SHAPES = ("sphere", "box", "capsule")

# Quaternion (x, y, z, w) for no rotation.
IDENTITY_ROTATION = (0.0, 0.0, 0.0, 1.0)


class LineItem:
    """Colored line segments.

    Parameters
    ----------
    positions : ndarray
        A ``(2N, 3)`` array; each consecutive pair of rows is one segment.
    color : Color
        The color of the lines.
    thickness : float
        The line thickness in screen pixels.
    opacity : float
        The opacity of the lines.

    """

    kind = "line"

    def __init__(self, positions, color, thickness=2.0, opacity=1.0):
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        if len(positions) % 2:
            raise ValueError("LineItem positions must come in pairs (segments).")
        self.positions = positions
        self.color = Color(color)
        self.thickness = float(thickness)
        self.opacity = float(opacity)

    @property
    def segments(self):
        """The segments as a ``(N, 2, 3)`` array."""
        return self.positions.reshape(-1, 2, 3)

    def __len__(self):
        return len(self.positions) // 2

    def __repr__(self):
        return f"<LineItem {len(self)} segments {self.color.hex}>"


class MeshItem:
    """A simple colored mesh.

    Parameters
    ----------
    shape : str
        One of "sphere", "box" or "capsule".
    params : tuple
        The arguments for the geometry function of the shape, e.g.
        ``(radius, width_segments, height_segments)`` for a sphere.
    position : tuple
        The world position of the mesh center.
    rotation : tuple
        The world orientation as a quaternion (x, y, z, w).
    color : Color
        The mesh color.

    """

    kind = "mesh"

    def __init__(self, shape, params, position, rotation=IDENTITY_ROTATION, *, color):
        if shape not in MESH_SHAPES:
            raise ValueError(
                f"Invalid mesh shape {shape!r}, expected one of {MESH_SHAPES}."
            )
        self.shape = shape
        self.params = tuple(params)
        self.position = vec3(position)
        self.rotation = np.asarray(rotation, dtype=np.float64)
        self.color = Color(color)

    def __repr__(self):
        return f"<MeshItem {self.shape}{self.params} at {tuple(self.position)}>"


class TextItem:
    """A text string at a position in the world.

    The ``font_size`` is in world units.
    """

    kind = "text"

    def __init__(self, text, position, font_size, color):
        self.text = str(text)
        self.position = vec3(position)
        self.font_size = float(font_size)
        self.color = Color(color)

    def __repr__(self):
        return f"<TextItem {self.text!r}>"


class DrawList:
    """An ordered collection of line, mesh and text items."""

    def __init__(self, lines=(), meshes=(), texts=()):
        self.lines = list(lines)
        self.meshes = list(meshes)
        self.texts = list(texts)

    def add(self, *items):
        """Add items, sorting them by kind. Returns self."""
        for item in items:
            if isinstance(item, LineItem):
                self.lines.append(item)
            elif isinstance(item, MeshItem):
                self.meshes.append(item)
            elif isinstance(item, TextItem):
                self.texts.append(item)
            else:
                raise TypeError(f"Cannot add {item.__class__.__name__} to a DrawList.")
        return self

    def extend(self, other):
        """Append the items of another draw list. Returns self."""
        self.lines.extend(other.lines)
        self.meshes.extend(other.meshes)
        self.texts.extend(other.texts)
        return self

    def __add__(self, other):
        if not isinstance(other, DrawList):
            return NotImplemented
        return DrawList(
            self.lines + other.lines,
            self.meshes + other.meshes,
            self.texts + other.texts,
        )

    def __iter__(self):
        yield from self.lines
        yield from self.meshes
        yield from self.texts

    def __len__(self):
        return len(self.lines) + len(self.meshes) + len(self.texts)

    def layout(self):
        """A tuple that identifies the structure (not the values) of this list."""
        return (
            len(self.lines),
            tuple((m.shape, m.params) for m in self.meshes),
            tuple(t.text for t in self.texts),
        )
