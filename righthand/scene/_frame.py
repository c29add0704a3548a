from ._dynamic import build_dynamic
from ._static import build_static


def compose_frame(angle, static=None, config=None):
    """Compose the draw list of one frame.

    The dynamic elements are rebuilt from ``angle`` on every call. The static
    elements can be passed in, so they are only built once.
    """
    if static is None:
        static = build_static(config)
    return static + build_dynamic(angle, config)
