import numpy as np
import pygfx as gfx

from ..geometries import capsule_geometry


GEOMETRY_FUNCTIONS = {
    "sphere": gfx.sphere_geometry,
    "box": gfx.box_geometry,
    "capsule": capsule_geometry,
}

# A line that draws nothing, for glyphs that were skipped.
_NAN_SEGMENT = np.full((2, 3), np.nan, dtype=np.float32)


def make_line(item):
    positions = item.positions.astype(np.float32)
    line = gfx.Line(
        gfx.Geometry(positions=positions if len(positions) else _NAN_SEGMENT.copy()),
        gfx.LineSegmentMaterial(
            thickness=item.thickness, color=item.color, opacity=item.opacity
        ),
    )
    line.visible = bool(len(positions))
    return line


def make_mesh(item, geometry=None):
    if geometry is None:
        geometry = GEOMETRY_FUNCTIONS[item.shape](*item.params)
    mesh = gfx.Mesh(geometry, gfx.MeshStandardMaterial(color=item.color))
    update_mesh(mesh, item)
    return mesh


def make_text(item):
    text = gfx.Text(
        text=item.text,
        font_size=item.font_size,
        screen_space=False,
        anchor="middle-center",
        material=gfx.TextMaterial(color=item.color),
    )
    update_text(text, item)
    return text


def update_line(line, item):
    positions = item.positions.astype(np.float32)
    buffer = line.geometry.positions
    if not len(positions):
        line.visible = False
        return
    line.visible = True
    if buffer.nitems == len(positions):
        buffer.data[:] = positions
        buffer.update_full()
    else:
        line.geometry = gfx.Geometry(positions=positions)
    line.material.color = item.color
    line.material.thickness = item.thickness
    line.material.opacity = item.opacity


def update_mesh(mesh, item):
    mesh.local.position = item.position
    mesh.local.rotation = item.rotation
    mesh.material.color = item.color


def update_text(text, item):
    text.local.position = item.position
    text.font_size = item.font_size
    text.material.color = item.color


class SceneSync:
    """Show draw lists with pygfx world objects.

    Every call to ``sync()`` writes a complete draw list into the world
    objects under ``group``. As long as the draw lists have the same layout
    (the same number of lines, the same meshes and texts), the world objects
    are reused and only their data is updated. When the layout changes, the
    objects are recreated.

    Parameters
    ----------
    group : gfx.Group
        The group to put the world objects in. A new group is created if not
        given.

    """

    def __init__(self, group=None):
        self.group = group if group is not None else gfx.Group()
        self._layout = None
        self._lines = []
        self._meshes = []
        self._texts = []
        self._geometries = {}

    @property
    def lines(self):
        """The ``gfx.Line`` objects, in draw list order."""
        return tuple(self._lines)

    @property
    def meshes(self):
        """The ``gfx.Mesh`` objects, in draw list order."""
        return tuple(self._meshes)

    @property
    def texts(self):
        """The ``gfx.Text`` objects, in draw list order."""
        return tuple(self._texts)

    def get_geometry(self, shape, params):
        """Get the (shared) geometry for a mesh shape."""
        key = shape, tuple(params)
        try:
            return self._geometries[key]
        except KeyError:
            pass
        try:
            func = GEOMETRY_FUNCTIONS[shape]
        except KeyError:
            raise ValueError(f"No geometry for mesh shape {shape!r}.") from None
        geometry = self._geometries[key] = func(*params)
        return geometry

    def sync(self, draw_list):
        """Make the world objects show the given draw list."""
        layout = draw_list.layout()
        if layout != self._layout:
            self._rebuild(draw_list)
            self._layout = layout
            return
        for line, item in zip(self._lines, draw_list.lines):
            update_line(line, item)
        for mesh, item in zip(self._meshes, draw_list.meshes):
            update_mesh(mesh, item)
        for text, item in zip(self._texts, draw_list.texts):
            update_text(text, item)

    def _rebuild(self, draw_list):
        self.group.clear()
        self._lines = [make_line(item) for item in draw_list.lines]
        self._meshes = [
            make_mesh(item, self.get_geometry(item.shape, item.params))
            for item in draw_list.meshes
        ]
        self._texts = [make_text(item) for item in draw_list.texts]
        self.group.add(*self._lines, *self._meshes, *self._texts)
