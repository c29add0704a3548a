import numpy as np
import pytest

from righthand.utils.vec import vec3, is_zero, normalize, scale, add, sub


def test_vec3():
    v = vec3([1, 2, 3])
    assert v.dtype == np.float64
    assert v.shape == (3,)

    with pytest.raises(ValueError):
        vec3([1, 2])
    with pytest.raises(ValueError):
        vec3([[1, 2, 3]])


def test_normalize():
    for v in [(3, 0, 0), (0, -2, 0), (1, 1, 1), (0.001, 0.002, -0.003)]:
        n = normalize(v)
        assert np.isclose(np.linalg.norm(n), 1)
        # same direction
        assert np.allclose(n * np.linalg.norm(v), v)

    assert np.allclose(normalize((0, 0, 5)), (0, 0, 1))


def test_normalize_zero_is_not_unit():
    n = normalize((0, 0, 0))
    if np.all(np.isfinite(n)):
        assert not np.isclose(np.dot(n, n), 1)


def test_is_zero():
    assert is_zero((0, 0, 0))
    assert not is_zero((1e-15, 0, 0))
    assert is_zero((1e-15, 0, 0), eps=1e-12)
    assert not is_zero((0, 0, 1e-3))


def test_arithmetic():
    v = np.array([1.0, 2.0, 3.0])
    w = np.array([0.5, -1.0, 2.0])

    assert np.allclose(scale(v, 2), (2, 4, 6))
    assert np.allclose(add(v, w), (1.5, 1, 5))
    assert np.allclose(sub(v, w), (0.5, 3, 1))

    # inputs are never modified
    assert np.all(v == (1, 2, 3))
    assert np.all(w == (0.5, -1, 2))
    assert scale(v, 1) is not v
