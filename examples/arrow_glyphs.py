"""
Arrow glyphs
============

A ring of arrows in different directions, drawn with the same glyph that
the right hand rule scene uses for its vectors. The arrows nearly parallel
to the z-axis spread their head along x.
"""

import numpy as np
from rendercanvas.auto import RenderCanvas, loop
import pygfx as gfx

from righthand.geometries import arrow_geometry


canvas = RenderCanvas(size=(800, 600))
renderer = gfx.WgpuRenderer(canvas)
scene = gfx.Scene()
scene.add(gfx.Background.from_color("#111827"))

for i, theta in enumerate(np.linspace(0, 2 * np.pi, 12, endpoint=False)):
    origin = (3 * np.cos(theta), 3 * np.sin(theta), 0)
    direction = (np.cos(theta), np.sin(theta), np.sin(i))
    color = gfx.Color.from_hsv(i / 12, 0.8, 1)
    arrow = gfx.Line(
        arrow_geometry(origin, direction, 1.5),
        gfx.LineSegmentMaterial(thickness=2, color=color),
    )
    scene.add(arrow)

camera = gfx.PerspectiveCamera(50, 4 / 3)
camera.show_object(scene, view_dir=(-1, -1, -2), up=(0, 0, 1))
controller = gfx.OrbitController(camera, register_events=renderer)

canvas.request_draw(lambda: renderer.render(scene, camera))

if __name__ == "__main__":
    print(__doc__)
    loop.run()
