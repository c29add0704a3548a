"""
Show the right-hand rule visualization in a window, with as little
boilerplate as possible.
"""

import sys

import pygfx as gfx

from . import logger
from .config import DEFAULT_CONFIG
from ..animation import AngleDriver
from ..renderers import SceneSync
from ..scene import build_static, compose_frame


class Display:
    """The host of the visualization.

    The display owns the canvas, renderer, camera, lights and the orbit
    controller. On every draw it advances the angle driver from wall time,
    composes the draw list of the frame and syncs it to the scene.

    Parameters
    ----------
    config : SceneConfig
        The scene constants. Defaults to ``DEFAULT_CONFIG``.
    canvas : RenderCanvas
        The canvas to draw to. If both ``renderer`` and ``canvas`` are set,
        the renderer must target the canvas.
    renderer : gfx.WgpuRenderer
        The renderer to use.
    camera : gfx.PerspectiveCamera
        The camera. By default a perspective camera is placed at
        ``config.camera_position``, looking at the origin.
    controller : gfx.Controller
        The camera controller. Defaults to a ``gfx.OrbitController``, so the
        view can be rotated (left drag), panned (right drag) and zoomed
        (wheel).
    driver : AngleDriver
        The animation driver. By default one is made from ``config.step``
        and ``config.interval``.
    before_render : Callable
        A callback that is called with the current angle before each render.
    after_render : Callable
        A callback that is called after each render.

    """

    def __init__(
        self,
        config=None,
        *,
        canvas=None,
        renderer=None,
        camera=None,
        controller=None,
        driver=None,
        before_render=None,
        after_render=None,
    ):
        self.config = config or DEFAULT_CONFIG
        self.canvas = canvas
        self.renderer = renderer
        self.camera = camera
        self.controller = controller
        self.driver = driver or AngleDriver(self.config.step, self.config.interval)
        self.before_render = before_render
        self.after_render = after_render

        self.scene = None
        self.sync = SceneSync()
        self.static = build_static(self.config)

    def build_scene(self):
        """Create the scene with background, lights and the scene group."""
        config = self.config
        scene = gfx.Scene()
        scene.add(gfx.Background.from_color(config.background_color))
        scene.add(gfx.AmbientLight("#ffffff", 0.5))

        spot = gfx.SpotLight(
            "#ffffff", 1, angle=0.15, penumbra=1, cast_shadow=True
        )
        spot.local.position = (10, 10, 10)
        scene.add(spot)

        scene.add(self.sync.group)
        return scene

    def draw_frame(self):
        """Compose the current frame into the scene. Returns the angle.

        Once the canvas is closed the driver is stopped, also when the close
        event has not been processed yet.
        """
        if self.canvas is not None and self.canvas.get_closed():
            self._on_close(None)
        angle = self.driver.update()
        self.sync.sync(compose_frame(angle, self.static, self.config))
        return angle

    def default_draw(self):
        angle = self.draw_frame()
        if self.before_render is not None:
            self.before_render(angle)

        self.renderer.render(self.scene, self.camera)

        if self.after_render is not None:
            self.after_render()

        self.renderer.request_draw()

    def _on_close(self, event):
        if self.driver.running:
            self.driver.stop()
            logger.info("Display closed.")

    def show(self, run=True):
        """Set up the display and start the animation.

        Parameters
        ----------
        run : bool
            Whether to enter the event loop of the canvas. If False, the
            caller is responsible for running the loop.

        """

        if self.canvas is not None and self.canvas.get_closed():
            raise RuntimeError(
                "Can not show a closed canvas. Did you repeatedly call `show`?"
            )

        self.scene = self.build_scene()

        # Process renderer

        if self.renderer is None and self.canvas is None:
            from rendercanvas.auto import RenderCanvas

            self.canvas = RenderCanvas(title="Right hand rule", max_fps=60)
            self.renderer = gfx.WgpuRenderer(self.canvas)
        elif self.renderer is not None and self.canvas is None:
            self.canvas = self.renderer.target
        elif self.renderer is None:
            self.renderer = gfx.WgpuRenderer(self.canvas)
        elif self.canvas is not self.renderer.target:
            raise ValueError("Display's render target differs from its canvas.")

        # Process camera

        if self.camera is None:
            self.camera = gfx.PerspectiveCamera(75, 16 / 9)
            self.camera.local.position = self.config.camera_position
            self.camera.show_pos((0, 0, 0), up=(0, 1, 0))
        self.scene.add(self.camera)

        # Process controller

        if self.controller is None:
            self.controller = gfx.OrbitController(register_events=self.renderer)
        if not self.controller.cameras:
            self.controller.add_camera(self.camera)

        # The driver runs as long as the canvas is open
        self.canvas.add_event_handler(self._on_close, "close")
        self.driver.start()
        self.draw_frame()
        logger.info("Showing the right hand rule scene.")

        self.canvas.request_draw(self.default_draw)
        if run:
            try:
                sys.modules[self.canvas.__module__].loop.run()
            finally:
                self.driver.stop()


def show(config=None, *, run=True, **kwargs):
    """Show the right-hand rule visualization in a new window.

    Parameters
    ----------
    config : SceneConfig
        The scene constants. Defaults to ``DEFAULT_CONFIG``.
    run : bool
        Whether to enter the event loop.
    kwargs : dict
        Passed on to ``Display``, e.g. ``canvas`` or ``driver``.

    Returns
    -------
    display : Display
        The display, mostly useful when ``run`` is False.

    """
    display = Display(config, **kwargs)
    display.show(run=run)
    return display
