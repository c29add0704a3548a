import pytest

from righthand import SceneConfig, DEFAULT_CONFIG


def test_defaults():
    config = SceneConfig()
    assert config == DEFAULT_CONFIG
    assert config.step == 0.01
    assert config.interval == 0.016
    assert config.radius == 3.0
    assert config.segments == 64
    assert config.axis_length == 5.0
    assert config.arrow_length == 1.0
    assert config.angular_arrow_length == 2.0
    assert config.camera_position == (0.0, 0.0, 10.0)
    assert config.orbit_color == "#ff9900"


def test_values_are_normalized():
    config = SceneConfig(radius=2, camera_position=[1, 2, 3])
    assert isinstance(config.radius, float)
    assert config.camera_position == (1.0, 2.0, 3.0)


def test_invalid_values():
    with pytest.raises(ValueError):
        SceneConfig(step=0)
    with pytest.raises(ValueError):
        SceneConfig(radius=-1)
    with pytest.raises(ValueError):
        SceneConfig(segments=2)
    with pytest.raises(ValueError):
        SceneConfig(camera_position=(0, 10))
    with pytest.raises(TypeError):
        SceneConfig(interval="fast")
    with pytest.raises(TypeError):
        SceneConfig(segments=6.5)
    with pytest.raises(TypeError):
        SceneConfig(hand_color=(1, 0, 0))


def test_replace():
    config = DEFAULT_CONFIG.replace(radius=4, step=0.02)
    assert config.radius == 4.0
    assert config.step == 0.02
    assert config.segments == DEFAULT_CONFIG.segments
    # the original is untouched
    assert DEFAULT_CONFIG.radius == 3.0

    with pytest.raises(TypeError):
        DEFAULT_CONFIG.replace(colour="red")
    with pytest.raises(ValueError):
        DEFAULT_CONFIG.replace(radius=0)


def test_as_dict_and_repr():
    d = DEFAULT_CONFIG.as_dict()
    assert d["radius"] == 3.0
    assert SceneConfig(**d) == DEFAULT_CONFIG
    assert repr(DEFAULT_CONFIG).startswith("SceneConfig(step=0.01")
