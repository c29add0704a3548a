"""Scene constants.

All the tunable numbers and colors of the visualization live in a
``SceneConfig``. There is no config file; a config is made in code or from
the command line, and ``DEFAULT_CONFIG`` holds the values of the standard
right-hand rule scene.
"""

import numbers

from . import assert_type


_POSITIVE_FLOATS = (
    "step",
    "interval",
    "radius",
    "axis_length",
    "arrow_length",
    "angular_arrow_length",
)

_COLORS = (
    "background_color",
    "circle_color",
    "orbit_color",
    "hand_color",
    "angular_color",
    "label_color",
)


class SceneConfig:
    """The constants that define the right-hand rule scene.

    Parameters
    ----------
    step : float
        The angular increment per tick, in radians.
    interval : float
        The time between two ticks, in seconds.
    radius : float
        The radius of the circle the marker moves along.
    segments : int
        The number of segments used to draw the circle.
    axis_length : float
        The half-length of the coordinate axes.
    arrow_length : float
        The length of the tangential velocity arrow.
    angular_arrow_length : float
        The length of the angular displacement arrow.
    camera_position : tuple
        The initial position of the camera. The camera looks at the origin.
    background_color, circle_color, orbit_color, hand_color, angular_color, label_color : str
        The colors of the scene elements. The coordinate axes are always
        red, green and blue.

    """

    def __init__(
        self,
        *,
        step=0.01,
        interval=0.016,
        radius=3.0,
        segments=64,
        axis_length=5.0,
        arrow_length=1.0,
        angular_arrow_length=2.0,
        camera_position=(0.0, 0.0, 10.0),
        background_color="#111827",
        circle_color="#ffffff",
        orbit_color="#ff9900",
        hand_color="#ffccaa",
        angular_color="#00ffff",
        label_color="#ffffff",
    ):
        self.step = step
        self.interval = interval
        self.radius = radius
        self.segments = segments
        self.axis_length = axis_length
        self.arrow_length = arrow_length
        self.angular_arrow_length = angular_arrow_length
        self.camera_position = camera_position
        self.background_color = background_color
        self.circle_color = circle_color
        self.orbit_color = orbit_color
        self.hand_color = hand_color
        self.angular_color = angular_color
        self.label_color = label_color
        self._validate()

    def _validate(self):
        for name in _POSITIVE_FLOATS:
            value = getattr(self, name)
            assert_type(name, value, numbers.Real)
            if not value > 0:
                raise ValueError(f"SceneConfig.{name} must be positive, not {value}.")
            setattr(self, name, float(value))

        assert_type("segments", self.segments, numbers.Integral)
        if self.segments < 3:
            raise ValueError(
                f"SceneConfig.segments must be at least 3, not {self.segments}."
            )

        position = tuple(float(v) for v in self.camera_position)
        if len(position) != 3:
            raise ValueError("SceneConfig.camera_position must have three values.")
        self.camera_position = position

        for name in _COLORS:
            assert_type(name, getattr(self, name), str)

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())
        return f"SceneConfig({fields})"

    def __eq__(self, other):
        if not isinstance(other, SceneConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def as_dict(self):
        """Get the config values as a dict."""
        names = _POSITIVE_FLOATS + ("segments", "camera_position") + _COLORS
        return {name: getattr(self, name) for name in names}

    def replace(self, **kwargs):
        """Get a copy of this config with the given values replaced."""
        values = self.as_dict()
        for key in kwargs:
            if key not in values:
                raise TypeError(f"SceneConfig has no field {key!r}.")
        values.update(kwargs)
        return SceneConfig(**values)


DEFAULT_CONFIG = SceneConfig()
