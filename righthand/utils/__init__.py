"""
Utility functions for righthand.

.. currentmodule:: righthand.utils

.. autosummary::
    :toctree: utils/

    vec
    config.SceneConfig
    show.show
    show.Display

"""

import os
import types
import logging
import inspect


logger = logging.getLogger("righthand")


def set_log_level(level=None):
    """Set the level of the righthand logger.

    The level can be a name (e.g. "debug") or a number. If not given, it is
    taken from the ``RIGHTHAND_LOG_LEVEL`` environment variable, falling back
    to WARNING.
    """
    if level is None:
        logger.setLevel(logging.WARN)
        level = os.getenv("RIGHTHAND_LOG_LEVEL", "")
    if not level:
        return
    try:
        if isinstance(level, int) or level.isnumeric():
            logger.setLevel(int(level))
        else:
            logger.setLevel(level.upper())
    except (TypeError, ValueError):
        logger.warning(f"Invalid righthand log level: {level}")


set_log_level()


def assert_type(name, value, *classes):
    """Raise a TypeError when ``value`` is not an instance of ``classes``.

    The traceback points at the calling code rather than at this function.
    """
    if not isinstance(value, classes):
        f = inspect.currentframe().f_back
        if name:
            f = f.f_back or f
        tb = types.TracebackType(None, f, f.f_lasti, f.f_lineno)

        msg = "Expected"
        if name:
            msg += f" '{name}' to be"
        class_strings = [cls.__name__ for cls in classes]
        msg += f" an instance of {' | '.join(class_strings)}"
        msg += f", but got {value.__class__.__name__} object."

        raise TypeError(msg).with_traceback(tb) from None
