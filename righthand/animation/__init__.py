"""
Driving the animation.

.. currentmodule:: righthand.animation

.. autosummary::
    :toctree: animation/

    AngleDriver
    Clock

"""

# ruff: noqa: F401

from .clock import Clock
from .driver import AngleDriver, TAU

__all__ = ["AngleDriver", "Clock", "TAU"]
