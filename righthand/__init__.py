"""An animated 3D visualization of the right-hand rule, rendered with pygfx."""

# ruff: noqa: F401, F403

from ._version import __version__, version_info
from . import utils

from .drawlist import DrawList, LineItem, MeshItem, TextItem
from .geometries import *
from .animation import *
from .scene import build_static, build_dynamic, compose_frame
from .renderers import SceneSync

from .utils import logger, set_log_level
from .utils.config import SceneConfig, DEFAULT_CONFIG
from .utils.show import show, Display
