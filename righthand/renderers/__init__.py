"""
Turning draw lists into pygfx world objects.

.. currentmodule:: righthand.renderers

.. autosummary::
    :toctree: renderers/

    SceneSync

"""

# ruff: noqa: F401

from ._sync import (
    SceneSync,
    GEOMETRY_FUNCTIONS,
    make_line,
    make_mesh,
    make_text,
    update_line,
    update_mesh,
    update_text,
)
