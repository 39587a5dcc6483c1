import pytest

pytest.importorskip("python_qt_binding")

from polar_joystick.config_manager import (  # noqa: E402
    DEFAULT_SIZE,
    ConfigurationManager,
    JoystickConfig,
)


def test_defaults(qapp):
    cfg = JoystickConfig()
    assert cfg.loop_interval_ms == 50
    assert cfg.default_size == DEFAULT_SIZE == 200
    assert cfg.border_width == 3
    assert cfg.background_color == "transparent"


@pytest.mark.parametrize("kwargs", [
    {"loop_interval_ms": 0},
    {"loop_interval_ms": 5000},
    {"default_size": 0},
    {"border_width": -1},
    {"button_color": "not-a-color"},
    {"background_color": ""},
])
def test_invalid_config_rejected(qapp, kwargs):
    with pytest.raises(ValueError):
        JoystickConfig(**kwargs)


def test_interval_change_emits_once(qapp):
    manager = ConfigurationManager()
    seen = []
    manager.interval_changed.connect(seen.append)

    manager.set_loop_interval(120)
    manager.set_loop_interval(120)

    assert seen == [120]
    assert manager.get_loop_interval() == 120


def test_style_changes_emit(qapp):
    manager = ConfigurationManager()
    seen = []
    manager.style_changed.connect(lambda: seen.append("style"))
    manager.config_changed.connect(lambda: seen.append("config"))

    manager.set_border_color("#ff0000")
    manager.set_border_width(3)  # unchanged

    assert seen == ["style", "config"]
    assert manager.get_border_color() == "#ff0000"


def test_invalid_setters_keep_previous_value(qapp):
    manager = ConfigurationManager()
    with pytest.raises(ValueError):
        manager.set_loop_interval(0)
    with pytest.raises(ValueError):
        manager.set_button_color("nope")
    with pytest.raises(ValueError):
        manager.set_border_width(99)

    assert manager.get_loop_interval() == 50
    assert manager.get_button_color() == "#000000"
    assert manager.get_border_width() == 3
