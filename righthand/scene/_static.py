import numpy as np

from ..drawlist import DrawList, LineItem, TextItem
from ..geometries import circle_positions, strip_to_segments
from ..utils.config import DEFAULT_CONFIG


AXIS_COLORS = ("red", "green", "blue")
AXIS_NAMES = ("X", "Y", "Z")
AXIS_LABEL_OFFSET = 0.3
AXIS_LABEL_SIZE = 0.5


def coordinate_axes(axis_length=5.0):
    """The x, y and z axes as red, green and blue lines, with labels."""
    items = DrawList()
    for i, (name, color) in enumerate(zip(AXIS_NAMES, AXIS_COLORS)):
        end = np.zeros(3)
        end[i] = axis_length
        items.add(LineItem([-end, end], color, thickness=2))

        label_position = np.zeros(3)
        label_position[i] = axis_length + AXIS_LABEL_OFFSET
        items.add(TextItem(name, label_position, AXIS_LABEL_SIZE, color))
    return items


def circular_path(radius=3.0, segments=64, color="#ffffff"):
    """The circle that the marker moves along, half transparent."""
    positions = strip_to_segments(circle_positions(radius, segments))
    return LineItem(positions, color, thickness=1, opacity=0.5)


def labels(angular_color="#00ffff", label_color="#ffffff"):
    """The explanatory texts."""
    return [
        TextItem("Angular Displacement Vector (ω)", (0, 0, 2.5), 0.5, angular_color),
        TextItem(
            "Right Hand Rule: Curl fingers in direction of rotation,",
            (0, -4, 0),
            0.4,
            label_color,
        ),
        TextItem(
            "thumb points in direction of angular displacement vector",
            (0, -4.5, 0),
            0.4,
            label_color,
        ),
    ]


def build_static(config=None):
    """Build the elements that do not change during the animation.

    Parameters
    ----------
    config : SceneConfig
        The scene constants. Defaults to ``DEFAULT_CONFIG``.

    Returns
    -------
    static : DrawList
        The coordinate axes, the circular path and the text labels.

    """
    config = config or DEFAULT_CONFIG
    static = DrawList()
    static.extend(coordinate_axes(config.axis_length))
    static.add(circular_path(config.radius, config.segments, config.circle_color))
    static.add(*labels(config.angular_color, config.label_color))
    return static
