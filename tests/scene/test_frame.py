import numpy as np

from righthand.scene import build_static, build_dynamic, compose_frame


def test_compose_frame():
    static = build_static()
    frame = compose_frame(0.5, static)

    assert len(frame.lines) == len(static.lines) + 3
    assert len(frame.meshes) == 7
    assert len(frame.texts) == 6

    # static elements come first and are not modified
    assert frame.lines[: len(static.lines)] == static.lines
    assert len(static.lines) == 4

    dynamic = build_dynamic(0.5)
    assert np.allclose(frame.meshes[0].position, dynamic.meshes[0].position)


def test_frame_without_static():
    frame = compose_frame(0)
    assert len(frame) == len(build_static()) + len(build_dynamic(0))


def test_frames_are_rebuilt():
    static = build_static()
    a = compose_frame(0.0, static)
    b = compose_frame(1.0, static)

    assert a.layout() == b.layout()
    assert not np.allclose(a.meshes[0].position, b.meshes[0].position)
    # the hand follows the angle
    assert not np.allclose(a.meshes[1].rotation, b.meshes[1].rotation)
