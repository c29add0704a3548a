"""Small 3D vector helpers.

Points and directions are ``(3,)`` float64 numpy arrays. All functions accept
any 3-sequence, return new arrays and never modify their input.
"""

import numpy as np
import pylinalg as la


def vec3(v):
    """Convert a 3-sequence to a ``(3,)`` float64 array."""
    a = np.array(v, dtype=np.float64)
    if a.shape != (3,):
        raise ValueError(f"Expected a 3D vector, got an array of shape {a.shape}.")
    return a


def is_zero(v, eps=0.0):
    """Whether the length of the vector is at most ``eps``.

    With the default ``eps`` only vectors whose length is zero (or underflows
    to zero) count as zero; any other vector has a direction.
    """
    return bool(np.linalg.norm(vec3(v)) <= eps)


def normalize(v):
    """Return the unit vector pointing in the direction of ``v``.

    The zero vector has no direction; the result is then NaN. Callers that can
    receive a zero vector should check with ``is_zero()`` first.
    """
    with np.errstate(invalid="ignore", divide="ignore", under="ignore"):
        return la.vec_normalize(vec3(v))


def scale(v, s):
    return vec3(v) * float(s)


def add(v, w):
    return vec3(v) + vec3(w)


def sub(v, w):
    return vec3(v) - vec3(w)
